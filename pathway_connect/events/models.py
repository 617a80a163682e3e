from django.db import models
from django.utils import timezone

from pathway_connect.core import filters
from pathway_connect.core.models import ContentRecord

STATUS_UPCOMING = "upcoming"
STATUS_COMPLETED = "completed"

STATUS_CHOICES = [
    (STATUS_UPCOMING, "Upcoming"),
    (STATUS_COMPLETED, "Completed"),
]


class ScheduledContent(ContentRecord):
    """Shared shape of dated sessions (devotionals and career chats)."""

    title = models.CharField(max_length=200)
    speaker = models.CharField(max_length=200)
    cover_image_url = models.URLField(max_length=500, blank=True)
    topics = models.JSONField(default=list, blank=True)
    live_link = models.URLField(max_length=500, blank=True)
    recording_link = models.URLField(max_length=500, blank=True)
    download_link = models.URLField(max_length=500, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_UPCOMING)
    featured_on_homepage = models.BooleanField(default=False)

    class Meta(ContentRecord.Meta):
        abstract = True
        ordering = ("-event_date", "-created_at")

    @property
    def is_upcoming(self):
        # Recomputed on every access; a stored status can go stale.
        return filters.is_upcoming(self.event_date, timezone.now())

    def __str__(self):
        return self.title


class Devotional(ScheduledContent):
    author = models.CharField(max_length=200)
    content = models.TextField()
    scripture_reference = models.CharField(max_length=200, blank=True, help_text="e.g. John 3:16")
    event_date = models.DateTimeField(blank=True, null=True)
    event_time = models.CharField(max_length=50, blank=True, help_text="e.g. 7:00 PM MT")


class CareerEvent(ScheduledContent):
    INDUSTRY_CHOICES = [
        ("Business", "Business"),
        ("Technology", "Technology"),
        ("Healthcare", "Healthcare"),
        ("Finance", "Finance"),
        ("Education", "Education"),
        ("Engineering", "Engineering"),
        ("Legal", "Legal"),
        ("Marketing", "Marketing"),
    ]

    description = models.TextField()
    position = models.CharField(max_length=200, blank=True, help_text="e.g. CEO, TechCorp Solutions")
    industry = models.CharField(max_length=50, choices=INDUSTRY_CHOICES)
    event_date = models.DateTimeField()
    location = models.CharField(max_length=200)
    attendees = models.PositiveIntegerField(default=0)
    registration_url = models.URLField(max_length=500, blank=True)
    registration_required = models.BooleanField(default=False)
