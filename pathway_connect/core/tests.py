import datetime
import uuid
from unittest import mock

from django.db import OperationalError
from django.db.models.query import QuerySet
from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from pathway_connect.core import codec, filters
from pathway_connect.core.exceptions import (
    ContentError,
    NotFound,
    StorageError,
    UnknownCollection,
    ValidationFailure,
)
from pathway_connect.core.filters import Criteria
from pathway_connect.core.repository import ContentRepository
from pathway_connect.core.schema import CollectionSchema, FieldKind, FieldSpec, get_schema
from pathway_connect.news.models import NewsArticle


def news_submission(**overrides):
    data = {
        "title": "Semester kickoff",
        "category": "academic",
        "summary": "What to expect this term",
        "content": "<p>Welcome back.</p>",
    }
    data.update(overrides)
    return data


def news_record(**overrides):
    record = {
        "title": "Semester kickoff",
        "category": "academic",
        "summary": "What to expect this term",
        "content": "<p>Welcome back.</p>",
        "tags": [],
    }
    record.update(overrides)
    return record


class SchemaRegistryTests(SimpleTestCase):
    def test_every_collection_is_registered(self):
        for name in ("news", "books", "devotionals", "career_events", "whatsapp_groups", "jobs"):
            self.assertEqual(get_schema(name).name, name)

    def test_unknown_collection_raises(self):
        with self.assertRaises(UnknownCollection):
            get_schema("recordings")

    def test_required_fields(self):
        self.assertEqual(get_schema("books").required_fields, ["title", "author", "description", "file_url", "category"])


class CodecDecodeTests(SimpleTestCase):
    def test_comma_list_trims_and_drops_blanks_but_keeps_duplicates(self):
        record = codec.decode("news", news_submission(tags="a, b ,b,"))
        self.assertEqual(record["tags"], ["a", "b", "b"])

    def test_missing_list_key_is_empty_list(self):
        record = codec.decode("news", news_submission())
        self.assertEqual(record["tags"], [])
        self.assertEqual(record["image_urls"], [])

    def test_checkbox_absent_is_false_and_on_is_true(self):
        record = codec.decode("news", news_submission(is_hot="on"))
        self.assertTrue(record["is_hot"])
        self.assertFalse(record["featured_on_homepage"])
        self.assertFalse(record["is_published"])

    def test_checkbox_other_values_are_false(self):
        record = codec.decode("news", news_submission(is_hot="true"))
        self.assertFalse(record["is_hot"])

    def test_indexed_slots_collect_non_blank_values(self):
        record = codec.decode("news", news_submission(
            image_url_1="", image_url_2="https://img.example.com/2.png", image_url_3="  https://img.example.com/3.png ",
        ))
        self.assertEqual(record["image_urls"], ["https://img.example.com/2.png", "https://img.example.com/3.png"])

    def test_missing_required_fields_are_reported_together(self):
        with self.assertRaises(ValidationFailure) as ctx:
            codec.decode("news", {"title": "  ", "category": "academic"})
        self.assertEqual(set(ctx.exception.errors), {"title", "summary", "content"})

    def test_integer_parsing(self):
        base = {
            "title": "Meet a recruiter", "description": "Q&A", "speaker": "Dana",
            "industry": "Technology", "event_date": "2030-03-01T18:00", "location": "Zoom",
        }
        self.assertEqual(codec.decode("career_events", dict(base, attendees=" 12 "))["attendees"], 12)
        self.assertEqual(codec.decode("career_events", dict(base, attendees=""))["attendees"], 0)
        with self.assertRaises(ValidationFailure) as ctx:
            codec.decode("career_events", dict(base, attendees="a dozen"))
        self.assertEqual(ctx.exception.errors["attendees"], ["Enter a whole number."])

    def test_datetime_is_parsed_as_aware(self):
        record = codec.decode("devotionals", {
            "title": "Faith", "author": "A", "speaker": "B", "content": "C", "event_date": "2030-03-01T18:00",
        })
        self.assertTrue(timezone.is_aware(record["event_date"]))
        self.assertEqual(timezone.localtime(record["event_date"]).hour, 18)

    def test_invalid_date_is_rejected(self):
        with self.assertRaises(ValidationFailure) as ctx:
            codec.decode("devotionals", {
                "title": "Faith", "author": "A", "speaker": "B", "content": "C", "event_date": "next tuesday",
            })
        self.assertIn("event_date", ctx.exception.errors)

    def test_blank_optional_date_is_none(self):
        record = codec.decode("devotionals", {
            "title": "Faith", "author": "A", "speaker": "B", "content": "C", "event_date": "",
        })
        self.assertIsNone(record["event_date"])

    def test_blank_text_with_default_uses_default(self):
        record = codec.decode("whatsapp_groups", {
            "name": "Accounting 101", "category": "Course", "description": "Study group",
            "link": "https://chat.whatsapp.com/abc", "icon": "",
        })
        self.assertEqual(record["icon"], "MessageCircle")
        self.assertEqual(record["color"], "bg-gray-100 text-gray-800")

    def test_line_list(self):
        schema = CollectionSchema(
            name="checklist",
            label="Checklist",
            model_label="news.NewsArticle",
            fields=(FieldSpec("steps", FieldKind.LINE_LIST, required=True),),
        )
        record = codec.decode(schema, {"steps": "Apply\n\n  Interview \nStart"})
        self.assertEqual(record["steps"], ["Apply", "Interview", "Start"])
        with self.assertRaises(ValidationFailure):
            codec.decode(schema, {"steps": "\n \n"})

    def test_last_value_wins_for_repeated_keys(self):
        record = codec.decode("news", news_submission(title=["First", "Second"]))
        self.assertEqual(record["title"], "Second")


class CodecEncodeTests(SimpleTestCase):
    def test_encode_joins_lists_and_spreads_slots(self):
        initial = codec.encode("news", news_record(tags=["a", "b"], image_urls=["https://img.example.com/1.png"]))
        self.assertEqual(initial["tags"], "a, b")
        self.assertEqual(initial["image_url_1"], "https://img.example.com/1.png")
        self.assertEqual(initial["image_url_2"], "")
        self.assertNotIn("image_urls", initial)

    def test_comma_list_survives_encode_then_decode(self):
        tags = ["Study Tips", "Finals", "Finals"]
        initial = codec.encode("news", news_record(tags=tags))
        self.assertEqual(codec.decode("news", news_submission(tags=initial["tags"]))["tags"], tags)

    def test_join_list(self):
        self.assertEqual(codec.join_list(["x", "y"]), "x, y")
        self.assertEqual(codec.join_list([]), "")


class FilterTests(SimpleTestCase):
    def setUp(self):
        self.now = timezone.now()
        self.articles = [
            {"title": "Exam Week", "summary": "Tips", "category": "academic", "tags": ["exams"], "is_published": True},
            {"title": "Service project", "summary": "Join us for EXAM prep", "category": "student-life",
             "tags": ["service"], "is_published": True},
            {"title": "Draft", "summary": "", "category": "academic", "tags": [], "is_published": False},
        ]

    def test_event_at_exactly_now_is_past(self):
        self.assertFalse(filters.is_upcoming(self.now, self.now))
        self.assertTrue(filters.is_upcoming(self.now + datetime.timedelta(seconds=1), self.now))
        self.assertFalse(filters.is_upcoming(None, self.now))

    def test_date_only_values_compare_against_today(self):
        today = timezone.localtime(self.now).date()
        self.assertTrue(filters.is_upcoming(today + datetime.timedelta(days=1), self.now))
        self.assertFalse(filters.is_upcoming(today, self.now))

    def test_search_is_case_insensitive_across_search_fields(self):
        result = filters.apply(self.articles, "news", Criteria(search="exam"))
        self.assertEqual([a["title"] for a in result], ["Exam Week", "Service project"])

    def test_all_category_means_no_filter(self):
        criteria = Criteria.from_query({"category": "all", "tag": ""}, "news")
        self.assertEqual(len(filters.apply(self.articles, "news", criteria)), 3)

    def test_category_tag_and_published_filters_combine(self):
        criteria = Criteria(category="academic", tag="exams", published_only=True)
        self.assertEqual([a["title"] for a in filters.apply(self.articles, "news", criteria)], ["Exam Week"])

    def test_exact_filters_come_from_schema(self):
        criteria = Criteria.from_query({"job_type": "internship", "experience_level": "all", "color": "x"}, "jobs")
        self.assertEqual(criteria.exact, {"job_type": "internship"})

    def test_split_by_time(self):
        events = [
            {"title": "soon", "event_date": self.now + datetime.timedelta(hours=1)},
            {"title": "now", "event_date": self.now},
            {"title": "undated", "event_date": None},
        ]
        upcoming, past = filters.split_by_time(events, "devotionals", now=self.now)
        self.assertEqual([e["title"] for e in upcoming], ["soon"])
        self.assertEqual([e["title"] for e in past], ["now", "undated"])

    def test_collect_tags_keeps_first_seen_order(self):
        self.assertEqual(filters.collect_tags(self.articles), ["exams", "service"])


class ContentRepositoryTests(TestCase):
    def setUp(self):
        self.repository = ContentRepository()

    def test_create_defaults_to_published(self):
        article = self.repository.create("news", news_record())
        self.assertTrue(article.is_published)
        self.assertIsInstance(article.pk, uuid.UUID)

    def test_create_rejects_blank_required_field(self):
        with self.assertRaises(ValidationFailure) as ctx:
            self.repository.create("news", news_record(title=""))
        self.assertIn("title", ctx.exception.errors)

    def test_create_ignores_unknown_fields(self):
        article = self.repository.create("news", news_record(views=10))
        self.assertFalse(hasattr(article, "views"))

    def test_get_unknown_id_raises_not_found(self):
        with self.assertRaises(NotFound):
            self.repository.get("news", uuid.uuid4())
        with self.assertRaises(NotFound):
            self.repository.get("news", "not-a-uuid")

    def test_delete_unknown_id_raises_not_found(self):
        with self.assertRaises(NotFound):
            self.repository.delete("books", uuid.uuid4())

    def test_delete_removes_record(self):
        article = self.repository.create("news", news_record())
        self.repository.delete("news", article.pk)
        with self.assertRaises(NotFound):
            self.repository.get("news", article.pk)

    def test_update_is_idempotent(self):
        article = self.repository.create("news", news_record())
        changes = news_record(title="Updated", tags=["x", "y"])
        first = self.repository.update("news", article.pk, changes)
        second = self.repository.update("news", article.pk, changes)
        self.assertEqual((first.title, first.tags), (second.title, second.tags))
        self.assertEqual(self.repository.get("news", article.pk).tags, ["x", "y"])

    def test_list_published_only(self):
        self.repository.create("news", news_record(title="Live"))
        self.repository.create("news", news_record(title="Hidden", is_published=False))
        titles = [a.title for a in self.repository.list("news", Criteria(published_only=True))]
        self.assertEqual(titles, ["Live"])
        self.assertEqual(len(self.repository.list("news")), 2)

    def test_upcoming_is_strictly_after_now_and_soonest_first(self):
        now = timezone.now()
        base = {"author": "A", "speaker": "B", "content": "C"}
        self.repository.create("devotionals", dict(base, title="Later", event_date=now + datetime.timedelta(days=3)))
        self.repository.create("devotionals", dict(base, title="Sooner", event_date=now + datetime.timedelta(days=1)))
        self.repository.create("devotionals", dict(base, title="Right now", event_date=now))
        self.repository.create("devotionals", dict(base, title="Hidden", is_published=False,
                                                   event_date=now + datetime.timedelta(days=2)))
        upcoming = self.repository.upcoming("devotionals", limit=2, now=now)
        self.assertEqual([d.title for d in upcoming], ["Sooner", "Later"])

    def test_related_shares_category_and_excludes_self(self):
        article = self.repository.create("news", news_record(title="Main"))
        self.repository.create("news", news_record(title="Same category"))
        self.repository.create("news", news_record(title="Other", category="spiritual"))
        related = self.repository.related("news", article)
        self.assertEqual([a.title for a in related], ["Same category"])

    def test_set_feature(self):
        article = self.repository.create("news", news_record())
        self.repository.set_feature("news", article.pk, True)
        self.assertTrue(self.repository.get("news", article.pk).featured_on_homepage)
        with self.assertRaises(NotFound):
            self.repository.set_feature("news", uuid.uuid4(), True)

    def test_set_feature_on_collection_without_flag(self):
        with self.assertRaises(ContentError):
            self.repository.set_feature("books", uuid.uuid4(), True)

    def test_unknown_collection(self):
        with self.assertRaises(UnknownCollection):
            self.repository.list("recordings")


class StorageFailureTests(TestCase):
    """Database errors raised by the ORM come out of the repository as StorageError."""

    def setUp(self):
        self.repository = ContentRepository()
        self.outage = OperationalError("server closed the connection unexpectedly")

    def test_create_when_unique_check_query_fails(self):
        with mock.patch.object(QuerySet, "exists", side_effect=self.outage):
            with self.assertRaises(StorageError):
                self.repository.create("news", news_record())
        self.assertFalse(NewsArticle.objects.exists())

    def test_create_when_insert_fails(self):
        with mock.patch.object(NewsArticle, "save", side_effect=self.outage):
            with self.assertRaises(StorageError):
                self.repository.create("news", news_record())

    def test_update_when_save_fails(self):
        article = self.repository.create("news", news_record())
        with mock.patch.object(NewsArticle, "save", side_effect=self.outage):
            with self.assertRaises(StorageError):
                self.repository.update("news", article.pk, news_record(title="Changed"))
        self.assertEqual(self.repository.get("news", article.pk).title, "Semester kickoff")

    def test_get_when_query_fails(self):
        article = self.repository.create("news", news_record())
        with mock.patch.object(QuerySet, "get", side_effect=self.outage):
            with self.assertRaises(StorageError):
                self.repository.get("news", article.pk)

    def test_delete_when_query_fails(self):
        article = self.repository.create("news", news_record())
        with mock.patch.object(QuerySet, "delete", side_effect=self.outage):
            with self.assertRaises(StorageError):
                self.repository.delete("news", article.pk)

    def test_reads_when_query_fails(self):
        article = self.repository.create("news", news_record())
        with mock.patch.object(QuerySet, "_fetch_all", side_effect=self.outage):
            with self.assertRaises(StorageError):
                self.repository.list("news")
            with self.assertRaises(StorageError):
                self.repository.upcoming("devotionals", limit=2)
            with self.assertRaises(StorageError):
                self.repository.related("news", article)

    def test_set_feature_when_update_fails(self):
        article = self.repository.create("news", news_record())
        with mock.patch.object(QuerySet, "update", side_effect=self.outage):
            with self.assertRaises(StorageError):
                self.repository.set_feature("news", article.pk, True)
