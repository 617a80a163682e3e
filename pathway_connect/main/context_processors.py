# main/context_processors.py
from django.conf import settings


def site_flags(request):
    """Organization name and the staff flag the navbar uses to show the portal link."""
    user = getattr(request, "user", None)
    return {
        "ORGANIZATION_NAME": getattr(settings, "ORGANIZATION_NAME", ""),
        "is_staff_user": bool(user and user.is_authenticated and user.is_staff),
    }
