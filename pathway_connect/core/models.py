import uuid

from django.db import models


class ContentRecord(models.Model):
    """Fields every content collection shares: a generated id, timestamps and the publication flag."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    is_published = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ("-created_at",)
