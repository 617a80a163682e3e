"""
Record schema registry.

Each content collection is described once here: which fields an admin form
submits, how each one is coerced (see ``core.codec``), which are required,
and which fields the public list pages search, bucket and feature on.
Views and the admin portal look collections up by name instead of carrying
their own field-name checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from django.apps import apps

from .exceptions import UnknownCollection


class FieldKind:
    TEXT = "text"
    COMMA_LIST = "comma_list"
    LINE_LIST = "line_list"
    CHECKBOX = "checkbox"
    INTEGER = "integer"
    DATETIME = "datetime"
    DATE = "date"
    INDEXED_LIST = "indexed_list"

    LIST_KINDS = (COMMA_LIST, LINE_LIST, INDEXED_LIST)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: str = FieldKind.TEXT
    required: bool = False
    default: Any = None
    label: str = ""
    # indexed lists are submitted as <prefix>1 .. <prefix><slots>
    prefix: str = ""
    slots: int = 3

    @property
    def is_list(self) -> bool:
        return self.kind in FieldKind.LIST_KINDS

    @property
    def display_label(self) -> str:
        return self.label or self.name.replace("_", " ").capitalize()

    def empty_value(self):
        if self.default is not None:
            return self.default
        if self.is_list:
            return []
        if self.kind == FieldKind.CHECKBOX:
            return False
        if self.kind == FieldKind.INTEGER:
            return 0
        if self.kind in (FieldKind.DATETIME, FieldKind.DATE):
            return None
        return ""

    def slot_names(self):
        return [f"{self.prefix}{index}" for index in range(1, self.slots + 1)]


@dataclass(frozen=True)
class CollectionSchema:
    name: str
    label: str
    model_label: str
    fields: Tuple[FieldSpec, ...]
    title_field: str = "title"
    summary_field: str = "description"
    search_fields: Tuple[str, ...] = ("title", "description")
    category_field: str = "category"
    tag_field: str = ""
    date_field: str = ""
    feature_field: str = ""
    exact_filters: Tuple[str, ...] = ()
    ordering: Tuple[str, ...] = ("-created_at",)

    @property
    def model(self):
        return apps.get_model(self.model_label)

    @property
    def field_names(self):
        return [spec.name for spec in self.fields]

    @property
    def required_fields(self):
        return [spec.name for spec in self.fields if spec.required]

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.name} has no field '{name}'")

    def has_field(self, name: str) -> bool:
        return any(spec.name == name for spec in self.fields)

    def defaults(self) -> Dict[str, Any]:
        """Initial values for a blank create form."""
        return {spec.name: spec.empty_value() for spec in self.fields}


def _published():
    return FieldSpec("is_published", FieldKind.CHECKBOX, default=True, label="Publish")


def _homepage():
    return FieldSpec("featured_on_homepage", FieldKind.CHECKBOX, label="Feature on homepage")


NEWS = CollectionSchema(
    name="news",
    label="News",
    model_label="news.NewsArticle",
    fields=(
        FieldSpec("title", required=True),
        FieldSpec("category", required=True),
        FieldSpec("summary", required=True),
        FieldSpec("content", required=True),
        FieldSpec("video_url", label="Video URL (YouTube, etc.)"),
        FieldSpec("image_urls", FieldKind.INDEXED_LIST, prefix="image_url_", slots=3, label="Image URL"),
        FieldSpec("tags", FieldKind.COMMA_LIST, label="Tags (comma separated)"),
        FieldSpec("is_hot", FieldKind.CHECKBOX, label="Mark as hot news"),
        _published(),
        _homepage(),
    ),
    summary_field="summary",
    search_fields=("title", "summary"),
    tag_field="tags",
    feature_field="featured_on_homepage",
)

BOOKS = CollectionSchema(
    name="books",
    label="Books",
    model_label="resources.Book",
    fields=(
        FieldSpec("title", required=True),
        FieldSpec("author", required=True),
        FieldSpec("description", required=True),
        FieldSpec("file_url", required=True, label="File URL (PDF)"),
        FieldSpec("cover_image_url", label="Cover image URL"),
        FieldSpec("category", required=True),
        _published(),
    ),
    search_fields=("title", "author", "description"),
)

DEVOTIONALS = CollectionSchema(
    name="devotionals",
    label="Devotionals",
    model_label="events.Devotional",
    fields=(
        FieldSpec("title", required=True),
        FieldSpec("author", required=True),
        FieldSpec("speaker", required=True),
        FieldSpec("event_time", label="Event time (e.g. 7:00 PM MT)"),
        FieldSpec("cover_image_url", label="Cover image URL"),
        FieldSpec("content", required=True),
        FieldSpec("scripture_reference"),
        FieldSpec("event_date", FieldKind.DATETIME, label="Event date & time"),
        FieldSpec("topics", FieldKind.COMMA_LIST, label="Topics (comma separated)"),
        FieldSpec("live_link"),
        FieldSpec("recording_link"),
        FieldSpec("download_link"),
        FieldSpec("status", default="upcoming"),
        _published(),
        _homepage(),
    ),
    summary_field="content",
    search_fields=("title", "speaker", "content"),
    category_field="",
    tag_field="topics",
    date_field="event_date",
    feature_field="featured_on_homepage",
    ordering=("-event_date", "-created_at"),
)

CAREER_EVENTS = CollectionSchema(
    name="career_events",
    label="Career Events",
    model_label="events.CareerEvent",
    fields=(
        FieldSpec("title", required=True),
        FieldSpec("description", required=True),
        FieldSpec("speaker", required=True),
        FieldSpec("position", label="Position / title"),
        FieldSpec("industry", required=True),
        FieldSpec("event_date", FieldKind.DATETIME, required=True, label="Event date & time"),
        FieldSpec("location", required=True),
        FieldSpec("attendees", FieldKind.INTEGER, label="Expected attendees"),
        FieldSpec("topics", FieldKind.COMMA_LIST, label="Topics (comma separated)"),
        FieldSpec("registration_url"),
        FieldSpec("live_link"),
        FieldSpec("recording_link"),
        FieldSpec("download_link"),
        FieldSpec("cover_image_url", label="Cover image URL"),
        FieldSpec("status", default="upcoming"),
        FieldSpec("registration_required", FieldKind.CHECKBOX),
        _published(),
        _homepage(),
    ),
    search_fields=("title", "speaker", "description"),
    category_field="industry",
    tag_field="topics",
    date_field="event_date",
    feature_field="featured_on_homepage",
    ordering=("-event_date", "-created_at"),
)

WHATSAPP_GROUPS = CollectionSchema(
    name="whatsapp_groups",
    label="WhatsApp Groups",
    model_label="community.WhatsAppGroup",
    fields=(
        FieldSpec("name", required=True, label="Group name"),
        FieldSpec("category", required=True),
        FieldSpec("description", required=True),
        FieldSpec("link", required=True, label="WhatsApp link"),
        FieldSpec("members", FieldKind.INTEGER, label="Members count"),
        FieldSpec("icon", default="MessageCircle"),
        FieldSpec("color", default="bg-gray-100 text-gray-800", label="Color class"),
        FieldSpec("is_active", FieldKind.CHECKBOX, default=True, label="Active group"),
        _published(),
    ),
    title_field="name",
    search_fields=("name", "description"),
    ordering=("category", "name"),
)

JOBS = CollectionSchema(
    name="jobs",
    label="Jobs",
    model_label="resources.Job",
    fields=(
        FieldSpec("title", required=True, label="Job title"),
        FieldSpec("company", required=True),
        FieldSpec("location", required=True),
        FieldSpec("salary_range"),
        FieldSpec("job_type", default="full-time"),
        FieldSpec("experience_level", default="entry-level"),
        FieldSpec("category", required=True),
        FieldSpec("description", required=True),
        FieldSpec("requirements", FieldKind.COMMA_LIST, label="Requirements (comma separated)"),
        FieldSpec("benefits", FieldKind.COMMA_LIST, label="Benefits (comma separated)"),
        FieldSpec("tags", FieldKind.COMMA_LIST, label="Tags (comma separated)"),
        FieldSpec("application_url", required=True, label="Application URL"),
        FieldSpec("contact_email"),
        FieldSpec("deadline", FieldKind.DATE, label="Application deadline"),
        FieldSpec("is_featured", FieldKind.CHECKBOX, label="Featured job"),
        _published(),
    ),
    search_fields=("title", "company", "description", "location"),
    tag_field="tags",
    date_field="deadline",
    feature_field="is_featured",
    exact_filters=("job_type", "experience_level"),
    ordering=("-is_featured", "-created_at"),
)


registry: Dict[str, CollectionSchema] = {
    schema.name: schema
    for schema in (NEWS, BOOKS, DEVOTIONALS, CAREER_EVENTS, WHATSAPP_GROUPS, JOBS)
}


def get_schema(collection) -> CollectionSchema:
    if isinstance(collection, CollectionSchema):
        return collection
    try:
        return registry[collection]
    except KeyError:
        raise UnknownCollection(str(collection)) from None
