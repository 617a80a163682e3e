import datetime

from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils import timezone

from pathway_connect.events.models import CareerEvent, Devotional
from pathway_connect.news.models import NewsArticle


class HomeViewTests(TestCase):
    def setUp(self):
        self.url = reverse("home")
        now = timezone.now()
        self.featured = NewsArticle.objects.create(
            title="Featured story", category="academic", summary="s", content="c", featured_on_homepage=True,
        )
        NewsArticle.objects.create(title="Regular story", category="academic", summary="s", content="c")
        NewsArticle.objects.create(
            title="Featured draft", category="academic", summary="s", content="c",
            featured_on_homepage=True, is_published=False,
        )
        for days in (1, 2, 3):
            Devotional.objects.create(
                title=f"Devotional {days}", author="a", speaker="b", content="c",
                event_date=now + datetime.timedelta(days=days),
            )
        Devotional.objects.create(
            title="Past devotional", author="a", speaker="b", content="c", event_date=now - datetime.timedelta(days=1),
        )
        CareerEvent.objects.create(
            title="Career night", description="d", speaker="s", industry="Finance", location="Zoom",
            event_date=now + datetime.timedelta(days=4),
        )

    def test_home_sections(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(list(response.context["featured_news"]), [self.featured])
        self.assertEqual(
            [d.title for d in response.context["upcoming_devotionals"]], ["Devotional 1", "Devotional 2"],
        )
        self.assertEqual([e.title for e in response.context["upcoming_career_events"]], ["Career night"])

    @override_settings(ORGANIZATION_NAME="Test Pathway Org")
    def test_organization_name_is_in_layout(self):
        response = self.client.get(self.url)
        self.assertContains(response, "Test Pathway Org")

    def test_about_page(self):
        self.assertEqual(self.client.get(reverse("about")).status_code, 200)
