import datetime

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from .models import Book, Job


def make_job(**overrides):
    fields = {
        "title": "Junior Analyst",
        "company": "Acme",
        "location": "Remote",
        "category": "Finance",
        "description": "Analyze things",
        "application_url": "https://jobs.example.com/1",
    }
    fields.update(overrides)
    return Job.objects.create(**fields)


class BookListViewTests(TestCase):
    def setUp(self):
        self.url = reverse("book_list")
        self.book = Book.objects.create(
            title="Study Smarter", author="R. Lee", description="Learning habits",
            file_url="https://books.example.com/study.pdf", category="academic",
        )
        Book.objects.create(
            title="Hidden", author="X", description="draft", file_url="https://books.example.com/x.pdf",
            category="academic", is_published=False,
        )

    def test_lists_published_books(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["books"], [self.book])

    def test_search_matches_author(self):
        response = self.client.get(self.url, {"q": "lee"})
        self.assertEqual(response.context["books"], [self.book])
        response = self.client.get(self.url, {"q": "nothing like this"})
        self.assertEqual(response.context["books"], [])

    def test_category_filter(self):
        response = self.client.get(self.url, {"category": "spiritual"})
        self.assertEqual(response.context["books"], [])


class JobListViewTests(TestCase):
    def setUp(self):
        self.url = reverse("job_list")

    def test_featured_jobs_come_first(self):
        regular = make_job(title="Regular")
        featured = make_job(title="Featured", is_featured=True)
        response = self.client.get(self.url)
        self.assertEqual(response.context["jobs"], [featured, regular])
        self.assertEqual(response.context["featured_count"], 1)

    def test_job_type_and_experience_filters(self):
        intern = make_job(title="Intern", job_type="internship")
        make_job(title="Senior", experience_level="senior-level")
        response = self.client.get(self.url, {"job_type": "internship", "experience_level": "all"})
        self.assertEqual(response.context["jobs"], [intern])

    def test_search_covers_company_and_location(self):
        job = make_job(company="Globex", location="Provo, UT")
        make_job(title="Other")
        self.assertEqual(self.client.get(self.url, {"q": "globex"}).context["jobs"], [job])
        self.assertEqual(self.client.get(self.url, {"q": "provo"}).context["jobs"], [job])

    def test_closing_soon_flag(self):
        today = timezone.localdate()
        soon = make_job(title="Soon", deadline=today + datetime.timedelta(days=3))
        make_job(title="Later", deadline=today + datetime.timedelta(days=30))
        response = self.client.get(self.url)
        flags = {job.title: job.closing_soon for job in response.context["jobs"]}
        self.assertEqual(flags, {"Soon": True, "Later": False})
        self.assertTrue(soon.deadline_near())


class JobModelTests(TestCase):
    def test_deadline_near_window(self):
        now = timezone.now()
        today = timezone.localtime(now).date()
        self.assertFalse(make_job(deadline=None).deadline_near(now))
        self.assertTrue(make_job(deadline=today).deadline_near(now))
        self.assertTrue(make_job(deadline=today + datetime.timedelta(days=7)).deadline_near(now))
        self.assertFalse(make_job(deadline=today + datetime.timedelta(days=8)).deadline_near(now))
        self.assertFalse(make_job(deadline=today - datetime.timedelta(days=1)).deadline_near(now))
