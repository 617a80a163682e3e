import uuid
from unittest import mock

from django.contrib.auth import get_user_model
from django.db import OperationalError
from django.db.models.query import QuerySet
from django.test import TestCase
from django.urls import reverse

from pathway_connect.core.exceptions import StorageError
from pathway_connect.core.repository import ContentRepository
from pathway_connect.events.models import Devotional
from pathway_connect.news.models import NewsArticle
from pathway_connect.resources.models import Job


class PortalTestCase(TestCase):
    def setUp(self):
        user_model = get_user_model()
        self.staff = user_model.objects.create_user(
            username="editor", email="editor@example.com", password="pass1234", is_staff=True,
        )
        self.student = user_model.objects.create_user(
            username="student", email="student@example.com", password="pass1234",
        )
        self.client.force_login(self.staff)

    def news_form(self, **overrides):
        data = {
            "title": "Registration opens",
            "category": "academic",
            "summary": "Dates and deadlines",
            "content": "<p>Register early.</p>",
            "tags": "registration, deadlines",
            "image_url_1": "https://img.example.com/a.png",
            "is_published": "on",
        }
        data.update(overrides)
        return data


class PortalAccessTests(PortalTestCase):
    def test_non_staff_are_redirected_to_login(self):
        self.client.force_login(self.student)
        response = self.client.get(reverse("admin_portal:record_list", args=["news"]))
        self.assertEqual(response.status_code, 302)

    def test_anonymous_users_are_redirected(self):
        self.client.logout()
        response = self.client.get(reverse("admin_portal:dashboard"))
        self.assertEqual(response.status_code, 302)

    def test_unknown_collection_is_404(self):
        response = self.client.get(reverse("admin_portal:record_list", args=["recordings"]))
        self.assertEqual(response.status_code, 404)

    def test_dashboard_counts(self):
        NewsArticle.objects.create(title="a", category="academic", summary="s", content="c")
        NewsArticle.objects.create(title="b", category="academic", summary="s", content="c", is_published=False)
        response = self.client.get(reverse("admin_portal:dashboard"))
        self.assertEqual(response.status_code, 200)
        news_card = next(card for card in response.context["cards"] if card["schema"].name == "news")
        self.assertEqual((news_card["total"], news_card["published"]), (2, 1))


class RecordCrudTests(PortalTestCase):
    def test_create_news_decodes_submission(self):
        response = self.client.post(reverse("admin_portal:record_create", args=["news"]), self.news_form())
        self.assertRedirects(response, reverse("admin_portal:record_list", args=["news"]))
        article = NewsArticle.objects.get()
        self.assertEqual(article.tags, ["registration", "deadlines"])
        self.assertEqual(article.image_urls, ["https://img.example.com/a.png"])
        self.assertTrue(article.is_published)
        self.assertFalse(article.is_hot)

    def test_create_with_missing_required_field_rerenders(self):
        response = self.client.post(reverse("admin_portal:record_create", args=["news"]), self.news_form(title=""))
        self.assertEqual(response.status_code, 200)
        self.assertIn("title", response.context["form"].errors)
        self.assertFalse(NewsArticle.objects.exists())

    def test_model_validation_errors_land_on_the_form(self):
        response = self.client.post(
            reverse("admin_portal:record_create", args=["news"]),
            self.news_form(video_url="not a url"),
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("video_url", response.context["form"].errors)

    def test_storage_failure_is_flashed_not_raised(self):
        with mock.patch.object(ContentRepository, "create", side_effect=StorageError("db down")):
            response = self.client.post(reverse("admin_portal:record_create", args=["news"]), self.news_form())
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Failed to create news entry")

    def test_database_outage_on_create_is_flashed_not_raised(self):
        real_exists = QuerySet.exists

        def exists(queryset):
            if queryset.model is NewsArticle:
                raise OperationalError("server closed the connection unexpectedly")
            return real_exists(queryset)

        with mock.patch.object(QuerySet, "exists", exists):
            response = self.client.post(reverse("admin_portal:record_create", args=["news"]), self.news_form())
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Failed to create news entry")
        self.assertFalse(NewsArticle.objects.exists())

    def test_edit_form_is_prefilled_with_encoded_values(self):
        article = NewsArticle.objects.create(
            title="Old", category="academic", summary="s", content="c", tags=["a", "b"],
        )
        response = self.client.get(reverse("admin_portal:record_edit", args=["news", article.pk]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["form"].initial["tags"], "a, b")

    def test_update_replaces_fields(self):
        article = NewsArticle.objects.create(title="Old", category="academic", summary="s", content="c", is_hot=True)
        response = self.client.post(
            reverse("admin_portal:record_edit", args=["news", article.pk]),
            self.news_form(title="New title"),
        )
        self.assertRedirects(response, reverse("admin_portal:record_list", args=["news"]))
        article.refresh_from_db()
        self.assertEqual(article.title, "New title")
        self.assertFalse(article.is_hot)

    def test_edit_missing_record_redirects_with_message(self):
        response = self.client.get(
            reverse("admin_portal:record_edit", args=["news", uuid.uuid4()]), follow=True,
        )
        self.assertContains(response, "no longer exists")

    def test_delete_confirm_and_post(self):
        article = NewsArticle.objects.create(title="Bye", category="academic", summary="s", content="c")
        url = reverse("admin_portal:record_delete", args=["news", article.pk])
        self.assertContains(self.client.get(url), "Bye")
        response = self.client.post(url)
        self.assertRedirects(response, reverse("admin_portal:record_list", args=["news"]))
        self.assertFalse(NewsArticle.objects.exists())

    def test_delete_missing_record_flashes(self):
        url = reverse("admin_portal:record_delete", args=["books", uuid.uuid4()])
        response = self.client.post(url, follow=True)
        self.assertContains(response, "no longer exists")

    def test_create_job_with_lists_and_deadline(self):
        response = self.client.post(reverse("admin_portal:record_create", args=["jobs"]), {
            "title": "Data Intern",
            "company": "Acme",
            "location": "Remote",
            "job_type": "internship",
            "experience_level": "entry-level",
            "category": "Technology",
            "description": "Learn SQL",
            "requirements": "SQL, Excel",
            "application_url": "https://jobs.example.com/1",
            "deadline": "2030-05-01",
            "is_featured": "on",
            "is_published": "on",
        })
        self.assertEqual(response.status_code, 302)
        job = Job.objects.get()
        self.assertEqual(job.requirements, ["SQL", "Excel"])
        self.assertEqual(job.deadline.isoformat(), "2030-05-01")
        self.assertTrue(job.is_featured)

    def test_list_search(self):
        NewsArticle.objects.create(title="Tuition update", category="academic", summary="s", content="c")
        NewsArticle.objects.create(title="Campus news", category="academic", summary="s", content="c")
        response = self.client.get(reverse("admin_portal:record_list", args=["news"]), {"q": "tuition"})
        self.assertEqual([row["title"] for row in response.context["rows"]], ["Tuition update"])


class FeaturedManagerTests(PortalTestCase):
    def test_toggle_feature_flag(self):
        devotional = Devotional.objects.create(title="Hope", author="a", speaker="b", content="c")
        url = reverse("admin_portal:featured")

        response = self.client.post(url, {
            "collection": "devotionals", "pk": str(devotional.pk), "featured_on_homepage": "on",
        })
        self.assertRedirects(response, url)
        devotional.refresh_from_db()
        self.assertTrue(devotional.featured_on_homepage)

        self.client.post(url, {"collection": "devotionals", "pk": str(devotional.pk)})
        devotional.refresh_from_db()
        self.assertFalse(devotional.featured_on_homepage)

    def test_lists_published_featurable_collections(self):
        NewsArticle.objects.create(title="Pick me", category="academic", summary="s", content="c")
        response = self.client.get(reverse("admin_portal:featured"))
        self.assertEqual([s["schema"].name for s in response.context["sections"]],
                         ["news", "devotionals", "career_events"])
        self.assertContains(response, "Pick me")

    def test_rejects_collections_without_homepage_flag(self):
        response = self.client.post(reverse("admin_portal:featured"), {"collection": "books", "pk": "x"}, follow=True)
        self.assertContains(response, "cannot be featured")

    def test_unknown_record(self):
        response = self.client.post(
            reverse("admin_portal:featured"), {"collection": "news", "pk": str(uuid.uuid4())}, follow=True,
        )
        self.assertContains(response, "no longer exists")
