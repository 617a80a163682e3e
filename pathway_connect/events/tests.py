import datetime

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from .models import CareerEvent, Devotional


def make_devotional(offset, **overrides):
    fields = {
        "title": "Devotional",
        "author": "Pathway Chaplaincy",
        "speaker": "Sister Ames",
        "content": "<p>Faith and learning.</p>",
        "event_date": timezone.now() + offset if offset is not None else None,
    }
    fields.update(overrides)
    return Devotional.objects.create(**fields)


def make_career_event(offset, **overrides):
    fields = {
        "title": "Careers in tech",
        "description": "Panel",
        "speaker": "J. Ortiz",
        "industry": "Technology",
        "location": "Zoom",
        "event_date": timezone.now() + offset,
    }
    fields.update(overrides)
    return CareerEvent.objects.create(**fields)


class DevotionalListViewTests(TestCase):
    def test_splits_upcoming_and_past(self):
        later = make_devotional(datetime.timedelta(days=5), title="Later")
        sooner = make_devotional(datetime.timedelta(days=1), title="Sooner")
        past = make_devotional(-datetime.timedelta(days=2), title="Last week")
        undated = make_devotional(None, title="Undated")
        make_devotional(datetime.timedelta(days=2), title="Draft", is_published=False)

        response = self.client.get(reverse("devotional_list"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["upcoming"], [sooner, later])
        self.assertEqual(set(response.context["past"]), {past, undated})
        self.assertNotContains(response, "Draft")

    def test_topic_filter(self):
        faith = make_devotional(datetime.timedelta(days=1), title="Faith", topics=["faith"])
        make_devotional(datetime.timedelta(days=1), title="Work", topics=["work"])
        response = self.client.get(reverse("devotional_list"), {"tag": "faith"})
        self.assertEqual(response.context["upcoming"], [faith])
        self.assertEqual(sorted(response.context["available_topics"]), ["faith", "work"])

    def test_is_upcoming_property(self):
        self.assertTrue(make_devotional(datetime.timedelta(hours=1)).is_upcoming)
        self.assertFalse(make_devotional(-datetime.timedelta(hours=1)).is_upcoming)


class CareerEventListViewTests(TestCase):
    def test_industry_filter_and_buckets(self):
        tech = make_career_event(datetime.timedelta(days=3))
        make_career_event(datetime.timedelta(days=3), title="Nursing", industry="Healthcare")
        old = make_career_event(-datetime.timedelta(days=3), title="Old tech")

        response = self.client.get(reverse("career_event_list"), {"category": "Technology"})
        self.assertEqual(response.context["upcoming"], [tech])
        self.assertEqual(response.context["past"], [old])
