# resources/models.py
from django.db import models
from django.utils import timezone

from pathway_connect.core.models import ContentRecord


class Book(ContentRecord):
    CATEGORY_CHOICES = [
        ('academic', 'Academic'),
        ('spiritual', 'Spiritual'),
        ('career', 'Career Development'),
        ('personal', 'Personal Development'),
    ]

    title = models.CharField(max_length=200)
    author = models.CharField(max_length=200)
    description = models.TextField()
    file_url = models.URLField(max_length=500)
    cover_image_url = models.URLField(max_length=500, blank=True)
    category = models.CharField(max_length=50, choices=CATEGORY_CHOICES)

    class Meta(ContentRecord.Meta):
        verbose_name = "Digital book"
        verbose_name_plural = "Digital books"

    def __str__(self):
        return f"{self.title} by {self.author}"


class Job(ContentRecord):
    JOB_TYPE_CHOICES = [
        ('full-time', 'Full-time'),
        ('part-time', 'Part-time'),
        ('contract', 'Contract'),
        ('internship', 'Internship'),
    ]

    EXPERIENCE_LEVEL_CHOICES = [
        ('entry-level', 'Entry Level'),
        ('mid-level', 'Mid Level'),
        ('senior-level', 'Senior Level'),
        ('executive', 'Executive'),
    ]

    CATEGORY_CHOICES = [
        ('Technology', 'Technology'),
        ('Business', 'Business'),
        ('Healthcare', 'Healthcare'),
        ('Education', 'Education'),
        ('Engineering', 'Engineering'),
        ('Marketing', 'Marketing'),
        ('Finance', 'Finance'),
        ('Other', 'Other'),
    ]

    # Days before the deadline when a listing is flagged as closing soon
    DEADLINE_NEAR_DAYS = 7

    title = models.CharField(max_length=200)
    company = models.CharField(max_length=200)
    location = models.CharField(max_length=200, help_text="Remote, New York, etc.")
    salary_range = models.CharField(max_length=100, blank=True, help_text="e.g. $50,000 - $70,000")
    job_type = models.CharField(max_length=20, choices=JOB_TYPE_CHOICES, default='full-time')
    experience_level = models.CharField(max_length=20, choices=EXPERIENCE_LEVEL_CHOICES, default='entry-level')
    category = models.CharField(max_length=50, choices=CATEGORY_CHOICES)
    description = models.TextField()
    requirements = models.JSONField(default=list, blank=True)
    benefits = models.JSONField(default=list, blank=True)
    tags = models.JSONField(default=list, blank=True)
    application_url = models.URLField(max_length=500)
    contact_email = models.EmailField(blank=True)
    deadline = models.DateField(blank=True, null=True)
    is_featured = models.BooleanField(default=False)

    class Meta(ContentRecord.Meta):
        ordering = ("-is_featured", "-created_at")

    def deadline_near(self, now=None):
        if not self.deadline:
            return False
        today = timezone.localtime(now or timezone.now()).date()
        days_left = (self.deadline - today).days
        return 0 <= days_left <= self.DEADLINE_NEAR_DAYS

    def __str__(self):
        return f"{self.title} at {self.company}"
