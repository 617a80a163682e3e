"""
In-memory query/filter layer shared by the public list pages.

Collections are small enough to load whole, so each page fetches one ordered
list and narrows it here. The upcoming/past split depends on wall-clock time
and is recomputed on every call.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .schema import get_schema

ANY_VALUES = {"", "all"}

BUCKET_UPCOMING = "upcoming"
BUCKET_PAST = "past"


def _read(record, name):
    if not name:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _clean(value) -> str:
    value = (value or "").strip()
    return "" if value.lower() in ANY_VALUES else value


@dataclass
class Criteria:
    search: str = ""
    category: str = ""
    tag: str = ""
    bucket: str = ""
    published_only: bool = False
    featured_only: bool = False
    exact: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_query(cls, params: Mapping, collection=None, **overrides) -> "Criteria":
        """
        Build criteria from GET parameters: ``q``, ``category``, ``tag``,
        ``when`` and any exact-match filters the collection declares.
        """
        exact = {}
        if collection is not None:
            for name in get_schema(collection).exact_filters:
                value = _clean(params.get(name))
                if value:
                    exact[name] = value

        bucket = _clean(params.get("when")).lower()
        if bucket not in (BUCKET_UPCOMING, BUCKET_PAST):
            bucket = ""

        criteria = cls(
            search=(params.get("q") or "").strip(),
            category=_clean(params.get("category")),
            tag=_clean(params.get("tag")),
            bucket=bucket,
            exact=exact,
        )
        for name, value in overrides.items():
            setattr(criteria, name, value)
        return criteria


def _as_datetime(value) -> Optional[datetime.datetime]:
    if isinstance(value, str):
        try:
            value = parse_datetime(value.strip())
        except ValueError:
            return None
        if value is None:
            return None
    if isinstance(value, datetime.datetime):
        return value if timezone.is_aware(value) else timezone.make_aware(value)
    return None


def is_upcoming(value, now=None) -> bool:
    """Event time strictly after ``now``. An event at exactly ``now`` is already past."""
    if value is None or value == "":
        return False
    now = now or timezone.now()
    if isinstance(value, datetime.date) and not isinstance(value, datetime.datetime):
        today = timezone.localtime(now).date() if timezone.is_aware(now) else now.date()
        return value > today
    moment = _as_datetime(value)
    if moment is None:
        return False
    return moment > now


def matches_search(record, fields: Iterable[str], term: str) -> bool:
    term = (term or "").strip().lower()
    if not term:
        return True
    for name in fields:
        value = _read(record, name)
        if isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value)
        if value and term in str(value).lower():
            return True
    return False


def apply(records: Iterable, collection, criteria: Optional[Criteria] = None, now=None) -> List:
    """Return the records that satisfy every criterion, in their original order."""
    schema = get_schema(collection)
    criteria = criteria or Criteria()
    now = now or timezone.now()
    tag_field = schema.tag_field or "tags"

    result = []
    for record in records:
        if criteria.published_only and not _read(record, "is_published"):
            continue
        if criteria.featured_only and not (schema.feature_field and _read(record, schema.feature_field)):
            continue
        if criteria.search and not matches_search(record, schema.search_fields, criteria.search):
            continue
        if criteria.category and schema.category_field and _read(record, schema.category_field) != criteria.category:
            continue
        if criteria.tag and criteria.tag not in (_read(record, tag_field) or []):
            continue
        if any(_read(record, name) != value for name, value in criteria.exact.items()):
            continue
        if criteria.bucket:
            upcoming = is_upcoming(_read(record, schema.date_field), now)
            if (criteria.bucket == BUCKET_UPCOMING) != upcoming:
                continue
        result.append(record)
    return result


def split_by_time(records: Iterable, collection, now=None):
    """(upcoming, past) halves of ``records`` using the collection's date field."""
    schema = get_schema(collection)
    now = now or timezone.now()
    upcoming, past = [], []
    for record in records:
        (upcoming if is_upcoming(_read(record, schema.date_field), now) else past).append(record)
    return upcoming, past


def collect_tags(records: Iterable, field_name: str = "tags") -> List[str]:
    """Unique tags across records, first-seen order."""
    seen = []
    for record in records:
        for tag in _read(record, field_name) or []:
            if tag not in seen:
                seen.append(tag)
    return seen


def distinct_values(records: Iterable, field_name: str) -> List[str]:
    seen = []
    for record in records:
        value = _read(record, field_name)
        if value and value not in seen:
            seen.append(value)
    return seen
