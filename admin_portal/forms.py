from django import forms
from django.core.exceptions import FieldDoesNotExist
from django.db import models

from pathway_connect.core import codec
from pathway_connect.core.exceptions import ValidationFailure
from pathway_connect.core.schema import FieldKind, get_schema

TEXTAREA_FIELDS = {"content", "description", "summary"}


def _model_field(schema, name):
    try:
        return schema.model._meta.get_field(name)
    except FieldDoesNotExist:
        return None


def _form_field(schema, spec):
    model_field = _model_field(schema, spec.name)
    common = {"label": spec.display_label, "required": spec.required}

    if spec.kind == FieldKind.CHECKBOX:
        return forms.BooleanField(label=spec.display_label, required=False)
    if spec.kind == FieldKind.INTEGER:
        return forms.IntegerField(min_value=0, **common)
    if spec.kind == FieldKind.DATETIME:
        return forms.CharField(widget=forms.DateTimeInput(attrs={"type": "datetime-local"}), **common)
    if spec.kind == FieldKind.DATE:
        return forms.CharField(widget=forms.DateInput(attrs={"type": "date"}), **common)
    if spec.kind == FieldKind.LINE_LIST:
        return forms.CharField(widget=forms.Textarea(attrs={"rows": 4, "class": "admin-textarea"}), **common)
    if model_field is not None and model_field.choices:
        choices = [("", "Select...")] + list(model_field.choices)
        return forms.ChoiceField(choices=choices, **common)
    if spec.name in TEXTAREA_FIELDS or isinstance(model_field, models.TextField):
        return forms.CharField(widget=forms.Textarea(attrs={"rows": 4, "class": "admin-textarea"}), **common)
    return forms.CharField(**common)


class RecordForm(forms.Form):
    """
    Admin form for any collection, built from its schema.

    Django form fields only drive rendering and first-pass checks. The record
    itself comes from ``codec.decode`` over the raw POST data, so the portal
    and any other client submit the same flat shape.
    """

    def __init__(self, collection, *args, **kwargs):
        self.schema = get_schema(collection)
        self.record = None
        super().__init__(*args, **kwargs)
        for spec in self.schema.fields:
            if spec.kind == FieldKind.INDEXED_LIST:
                for index, slot in enumerate(spec.slot_names(), start=1):
                    self.fields[slot] = forms.CharField(label=f"{spec.display_label} {index}", required=False)
            else:
                self.fields[spec.name] = _form_field(self.schema, spec)

    def field_name_for(self, name):
        """Form field that should carry an error reported against record field ``name``."""
        if name in self.fields:
            return name
        if self.schema.has_field(name):
            spec = self.schema.field(name)
            if spec.kind == FieldKind.INDEXED_LIST:
                return spec.slot_names()[0]
        return None

    def add_failure(self, failure: ValidationFailure):
        for name, messages in failure.errors.items():
            target = self.field_name_for(name)
            if target in self.errors:
                continue
            for message in messages:
                self.add_error(target, message)

    def clean(self):
        cleaned_data = super().clean()
        try:
            self.record = codec.decode(self.schema, self.data)
        except ValidationFailure as failure:
            self.add_failure(failure)
        return cleaned_data
