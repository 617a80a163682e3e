from django import template

from pathway_connect.core.schema import registry

register = template.Library()


@register.simple_tag
def portal_collections():
    return list(registry.values())


@register.filter
def field_value(record, name):
    """Attribute lookup by name for list tables; list values are joined for display."""
    value = getattr(record, name, "")
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return value
