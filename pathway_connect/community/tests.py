from django.test import TestCase
from django.urls import reverse

from .models import WhatsAppGroup


def make_group(**overrides):
    fields = {
        "name": "Business Majors",
        "category": WhatsAppGroup.CATEGORY_MAJOR,
        "description": "For business students",
        "link": "https://chat.whatsapp.com/abc",
        "members": 120,
    }
    fields.update(overrides)
    return WhatsAppGroup.objects.create(**fields)


class GroupDirectoryViewTests(TestCase):
    def setUp(self):
        self.url = reverse("group_list")

    def test_groups_are_sectioned_in_category_order(self):
        general = make_group(name="All students", category=WhatsAppGroup.CATEGORY_GENERAL)
        course = make_group(name="ACCTG 201", category=WhatsAppGroup.CATEGORY_COURSE)
        major = make_group()

        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        sections = response.context["sections"]
        self.assertEqual([s["category"] for s in sections], ["Major", "Course", "General"])
        self.assertEqual([s["groups"] for s in sections], [[major], [course], [general]])

    def test_hides_unpublished_and_inactive_groups(self):
        make_group(name="Hidden", is_published=False)
        make_group(name="Archived", is_active=False)
        response = self.client.get(self.url)
        self.assertEqual(response.context["group_count"], 0)
        self.assertContains(response, "No groups found.")

    def test_search_and_category_filter(self):
        make_group()
        course = make_group(name="Statistics help", category=WhatsAppGroup.CATEGORY_COURSE,
                            description="STAT 121 study")
        response = self.client.get(self.url, {"q": "stat", "category": "Course"})
        self.assertEqual(response.context["sections"][0]["groups"], [course])
