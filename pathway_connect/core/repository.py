from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, transaction
from django.utils import timezone

from . import filters
from .exceptions import ContentError, NotFound, StorageError, ValidationFailure
from .schema import CollectionSchema, get_schema

logger = logging.getLogger(__name__)


class ContentRepository:
    """
    Generic create/read/update/delete over the content collections, addressed
    by collection name. Each call is one round trip to the database; callers
    re-query after a mutation instead of patching what they already hold.
    """

    def __init__(self, using: Optional[str] = None):
        self.using = using

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def _manager(self, schema: CollectionSchema):
        manager = schema.model._default_manager
        return manager.db_manager(self.using) if self.using else manager

    def _writable(self, schema: CollectionSchema, record: Mapping) -> Dict[str, Any]:
        allowed = set(schema.field_names)
        ignored = sorted(set(record) - allowed)
        if ignored:
            logger.debug("Ignoring unknown %s fields: %s", schema.name, ", ".join(ignored))
        return {name: value for name, value in record.items() if name in allowed}

    def _save(self, schema: CollectionSchema, instance):
        try:
            # full_clean hits the database for unique checks
            instance.full_clean()
            with transaction.atomic(using=self.using):
                instance.save(using=self.using)
        except DjangoValidationError as exc:
            raise ValidationFailure(exc.message_dict) from exc
        except DatabaseError as exc:
            logger.exception("Saving %s record failed", schema.name)
            raise StorageError(f"Could not save {schema.name} record") from exc
        return instance

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    def get(self, collection, pk):
        schema = get_schema(collection)
        try:
            return self._manager(schema).get(pk=pk)
        except (schema.model.DoesNotExist, DjangoValidationError, ValueError):
            raise NotFound(schema.name, pk) from None
        except DatabaseError as exc:
            raise StorageError(f"Could not load {schema.name} record") from exc

    def create(self, collection, record: Mapping):
        schema = get_schema(collection)
        values = self._writable(schema, record)
        values.setdefault("is_published", True)
        instance = self._save(schema, schema.model(**values))
        logger.info("Created %s record %s", schema.name, instance.pk)
        return instance

    def update(self, collection, pk, record: Mapping):
        schema = get_schema(collection)
        instance = self.get(schema, pk)
        for name, value in self._writable(schema, record).items():
            setattr(instance, name, value)
        self._save(schema, instance)
        logger.info("Updated %s record %s", schema.name, instance.pk)
        return instance

    def delete(self, collection, pk) -> None:
        schema = get_schema(collection)
        try:
            deleted, _ = self._manager(schema).filter(pk=pk).delete()
        except (DjangoValidationError, ValueError):
            raise NotFound(schema.name, pk) from None
        except DatabaseError as exc:
            logger.exception("Deleting %s record %s failed", schema.name, pk)
            raise StorageError(f"Could not delete {schema.name} record") from exc
        if not deleted:
            raise NotFound(schema.name, pk)
        logger.info("Deleted %s record %s", schema.name, pk)

    # ------------------------------------------------------------------
    # reads
    # ------------------------------------------------------------------
    def list(self, collection, criteria: Optional[filters.Criteria] = None, now=None) -> List:
        schema = get_schema(collection)
        criteria = criteria or filters.Criteria()
        qs = self._manager(schema).all().order_by(*schema.ordering)
        if criteria.published_only:
            qs = qs.filter(is_published=True)
        if criteria.featured_only and schema.feature_field:
            qs = qs.filter(**{schema.feature_field: True})
        try:
            records = list(qs)
        except DatabaseError as exc:
            raise StorageError(f"Could not list {schema.name}") from exc
        return filters.apply(records, schema, criteria, now=now)

    def upcoming(self, collection, limit: Optional[int] = None, now=None) -> List:
        """Published records dated after ``now``, soonest first."""
        schema = get_schema(collection)
        now = now or timezone.now()
        qs = (
            self._manager(schema)
            .filter(is_published=True, **{f"{schema.date_field}__gt": now})
            .order_by(schema.date_field)
        )
        if limit:
            qs = qs[:limit]
        try:
            return list(qs)
        except DatabaseError as exc:
            raise StorageError(f"Could not list upcoming {schema.name}") from exc

    def related(self, collection, instance, limit: int = 3) -> List:
        """Published records sharing the instance's category, newest first."""
        schema = get_schema(collection)
        qs = (
            self._manager(schema)
            .filter(is_published=True, **{schema.category_field: getattr(instance, schema.category_field)})
            .exclude(pk=instance.pk)
            .order_by("-created_at")[:limit]
        )
        try:
            return list(qs)
        except DatabaseError as exc:
            raise StorageError(f"Could not list related {schema.name}") from exc

    def set_feature(self, collection, pk, value: bool) -> None:
        schema = get_schema(collection)
        if not schema.feature_field:
            raise ContentError(f"{schema.label} cannot be featured")
        try:
            updated = self._manager(schema).filter(pk=pk).update(
                **{schema.feature_field: bool(value), "updated_at": timezone.now()}
            )
        except (DjangoValidationError, ValueError):
            raise NotFound(schema.name, pk) from None
        except DatabaseError as exc:
            raise StorageError(f"Could not update {schema.name} record") from exc
        if not updated:
            raise NotFound(schema.name, pk)
        logger.info("Set %s=%s on %s record %s", schema.feature_field, bool(value), schema.name, pk)


default_repository = ContentRepository()


class RepositoryMixin:
    """Views read and write content through ``self.repository``; pass one to ``as_view()`` to swap it."""

    repository: Optional[ContentRepository] = None

    def get_repository(self) -> ContentRepository:
        return self.repository or default_repository
