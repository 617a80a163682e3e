from unittest import mock

from django.test import SimpleTestCase, TestCase
from django.urls import reverse

from pathway_connect.core.exceptions import StorageError
from pathway_connect.core.repository import ContentRepository

from .models import NewsArticle
from .templatetags.news_extras import youtube_embed_url, youtube_video_id


def make_article(**overrides):
    fields = {
        "title": "Finals survival guide",
        "category": NewsArticle.CATEGORY_ACADEMIC,
        "summary": "How to prepare for finals week",
        "content": "<p>Start early.</p>",
        "tags": ["exams"],
    }
    fields.update(overrides)
    return NewsArticle.objects.create(**fields)


class NewsListViewTests(TestCase):
    def setUp(self):
        self.url = reverse("news_list")
        self.exam = make_article()
        self.service = make_article(
            title="Service day", category=NewsArticle.CATEGORY_STUDENT_LIFE,
            summary="Volunteer with classmates", tags=["service"],
        )
        self.draft = make_article(title="Unpublished draft", is_published=False)

    def test_lists_only_published_articles(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(set(response.context["articles"]), {self.exam, self.service})
        self.assertNotContains(response, "Unpublished draft")

    def test_search_matches_title_or_summary(self):
        response = self.client.get(self.url, {"q": "VOLUNTEER"})
        self.assertEqual(response.context["articles"], [self.service])

    def test_category_and_tag_filters(self):
        response = self.client.get(self.url, {"category": "academic", "tag": "exams"})
        self.assertEqual(response.context["articles"], [self.exam])
        response = self.client.get(self.url, {"category": "all"})
        self.assertEqual(len(response.context["articles"]), 2)

    def test_tag_cloud_comes_from_published_articles(self):
        response = self.client.get(self.url)
        self.assertEqual(sorted(response.context["available_tags"]), ["exams", "service"])

    def test_storage_failure_shows_message(self):
        with mock.patch.object(ContentRepository, "list", side_effect=StorageError("down")):
            response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["articles"], [])
        self.assertContains(response, "Failed to fetch news articles")


class NewsDetailViewTests(TestCase):
    def test_published_article_renders_with_related(self):
        article = make_article(video_url="https://youtu.be/abc123")
        related = make_article(title="Study groups")
        make_article(title="Campus devotional", category=NewsArticle.CATEGORY_SPIRITUAL)

        response = self.client.get(reverse("news_detail", args=[article.pk]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["related_articles"], [related])
        self.assertContains(response, "https://www.youtube-nocookie.com/embed/abc123")

    def test_unpublished_article_is_404(self):
        article = make_article(is_published=False)
        response = self.client.get(reverse("news_detail", args=[article.pk]))
        self.assertEqual(response.status_code, 404)

    def test_unknown_article_is_404(self):
        response = self.client.get(reverse("news_detail", args=["00000000-0000-0000-0000-000000000000"]))
        self.assertEqual(response.status_code, 404)


class NewsArticleModelTests(TestCase):
    def test_read_minutes_has_a_floor_of_one(self):
        self.assertEqual(make_article(content="<p>short</p>").read_minutes, 1)
        self.assertEqual(make_article(content="word " * 441).read_minutes, 3)


class YoutubeFilterTests(SimpleTestCase):
    def test_video_id_shapes(self):
        self.assertEqual(youtube_video_id("https://www.youtube.com/watch?v=XYZ&t=10"), "XYZ")
        self.assertEqual(youtube_video_id("https://youtu.be/XYZ"), "XYZ")
        self.assertEqual(youtube_video_id("https://www.youtube.com/shorts/XYZ"), "XYZ")
        self.assertEqual(youtube_video_id("https://vimeo.com/123"), "")

    def test_non_youtube_urls_pass_through(self):
        self.assertEqual(youtube_embed_url("https://vimeo.com/123"), "https://vimeo.com/123")
