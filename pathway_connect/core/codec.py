"""
Field codec: flat form submissions <-> structured records.

HTML forms submit every value as a string and simply omit unchecked
checkboxes, so each collection's schema decides how a key is read back:

    decode("news", request.POST)
    -> {"title": "...", "tags": ["a", "b"], "is_hot": False, "image_urls": [...], ...}

``encode`` goes the other way to pre-fill an edit form.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Dict, Iterable, List, Mapping

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from .exceptions import ValidationFailure
from .schema import FieldKind, FieldSpec, get_schema

logger = logging.getLogger(__name__)

CHECKBOX_ON = "on"
LIST_SEPARATOR = ", "


def split_comma_list(value) -> List[str]:
    return [item.strip() for item in str(value or "").split(",") if item.strip()]


def split_line_list(value) -> List[str]:
    return [line.strip() for line in str(value or "").split("\n") if line.strip()]


def join_list(items: Iterable[str], separator: str = LIST_SEPARATOR) -> str:
    return separator.join(str(item) for item in (items or []))


def _raw(data: Mapping, name: str):
    value = data.get(name)
    if isinstance(value, (list, tuple)):
        # plain dicts built from getlist(); the last submitted value wins like QueryDict.get
        value = value[-1] if value else None
    return value


def _parse_integer(spec: FieldSpec, raw) -> int:
    text = str(raw).strip()
    if not text:
        return spec.empty_value()
    try:
        return int(text)
    except ValueError:
        raise ValueError("Enter a whole number.") from None


def _parse_datetime(raw):
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = parse_datetime(text)
        if value is None:
            day = parse_date(text)
            if day is not None:
                value = datetime.datetime.combine(day, datetime.time.min)
    except ValueError:
        value = None
    if value is None:
        raise ValueError("Enter a valid date and time.")
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value


def _parse_date(raw):
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = parse_date(text)
    except ValueError:
        value = None
    if value is None:
        raise ValueError("Enter a valid date.")
    return value


def decode_field(spec: FieldSpec, data: Mapping) -> Any:
    """Read one field out of a flat submission. Raises ValueError on malformed input."""
    if spec.kind == FieldKind.CHECKBOX:
        return _raw(data, spec.name) == CHECKBOX_ON

    if spec.kind == FieldKind.INDEXED_LIST:
        collected = []
        for slot in spec.slot_names():
            value = str(_raw(data, slot) or "").strip()
            if value:
                collected.append(value)
        return collected

    raw = _raw(data, spec.name)
    if raw is None:
        return spec.empty_value()

    if spec.kind == FieldKind.COMMA_LIST:
        return split_comma_list(raw)
    if spec.kind == FieldKind.LINE_LIST:
        return split_line_list(raw)
    if spec.kind == FieldKind.INTEGER:
        return _parse_integer(spec, raw)
    if spec.kind == FieldKind.DATETIME:
        return _parse_datetime(raw)
    if spec.kind == FieldKind.DATE:
        return _parse_date(raw)

    text = str(raw).strip()
    if not text and spec.default is not None:
        return spec.default
    return text


def missing_required(collection, record: Mapping) -> Dict[str, List[str]]:
    schema = get_schema(collection)
    errors = {}
    for spec in schema.fields:
        if not spec.required:
            continue
        value = record.get(spec.name)
        if value is None or (isinstance(value, str) and not value.strip()) or (spec.is_list and not value):
            errors[spec.name] = ["This field is required."]
    return errors


def validate(collection, record: Mapping) -> Mapping:
    """Raise ValidationFailure when a required field is missing or blank."""
    errors = missing_required(collection, record)
    if errors:
        raise ValidationFailure(errors)
    return record


def decode(collection, data: Mapping) -> Dict[str, Any]:
    """
    Convert a flat submission into a record for ``collection``.
    All coercion problems and missing required fields are reported together.
    """
    schema = get_schema(collection)
    record: Dict[str, Any] = {}
    errors: Dict[str, List[str]] = {}

    for spec in schema.fields:
        try:
            record[spec.name] = decode_field(spec, data)
        except ValueError as exc:
            errors[spec.name] = [str(exc)]

    for name, messages in missing_required(schema, record).items():
        errors.setdefault(name, messages)

    if errors:
        logger.info("Rejected %s submission; invalid fields: %s", schema.name, ", ".join(sorted(errors)))
        raise ValidationFailure(errors)
    return record


def _read(record, name):
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def encode(collection, record) -> Dict[str, Any]:
    """Flatten a stored record (model instance or dict) back into form initial values."""
    schema = get_schema(collection)
    initial: Dict[str, Any] = {}
    for spec in schema.fields:
        value = _read(record, spec.name)
        if spec.kind == FieldKind.INDEXED_LIST:
            items = list(value or [])
            for index, slot in enumerate(spec.slot_names()):
                initial[slot] = items[index] if index < len(items) else ""
        elif spec.kind == FieldKind.COMMA_LIST:
            initial[spec.name] = join_list(value)
        elif spec.kind == FieldKind.LINE_LIST:
            initial[spec.name] = join_list(value, "\n")
        elif spec.kind == FieldKind.CHECKBOX:
            initial[spec.name] = bool(value) if value is not None else bool(spec.empty_value())
        elif spec.kind == FieldKind.INTEGER:
            initial[spec.name] = value if value is not None else spec.empty_value()
        elif spec.kind == FieldKind.DATETIME:
            initial[spec.name] = timezone.localtime(value).strftime("%Y-%m-%dT%H:%M") if value else ""
        elif spec.kind == FieldKind.DATE:
            initial[spec.name] = value.isoformat() if value else ""
        else:
            initial[spec.name] = value if value is not None else ""
    return initial
