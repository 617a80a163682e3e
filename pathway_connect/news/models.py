from django.db import models
from django.utils.html import strip_tags

from pathway_connect.core.models import ContentRecord


class NewsArticle(ContentRecord):
    CATEGORY_ACADEMIC = "academic"
    CATEGORY_STUDENT_LIFE = "student-life"
    CATEGORY_CAREER = "career"
    CATEGORY_SPIRITUAL = "spiritual"

    CATEGORY_CHOICES = [
        (CATEGORY_ACADEMIC, "Academic"),
        (CATEGORY_STUDENT_LIFE, "Student Life"),
        (CATEGORY_CAREER, "Career"),
        (CATEGORY_SPIRITUAL, "Spiritual"),
    ]

    title = models.CharField(max_length=200)
    category = models.CharField(max_length=50, choices=CATEGORY_CHOICES)
    summary = models.TextField()
    # Rich text (HTML) from the admin editor
    content = models.TextField()
    video_url = models.URLField(max_length=500, blank=True)
    image_urls = models.JSONField(default=list, blank=True)
    tags = models.JSONField(default=list, blank=True)
    is_hot = models.BooleanField(default=False)
    featured_on_homepage = models.BooleanField(default=False)

    class Meta(ContentRecord.Meta):
        verbose_name = "News article"
        verbose_name_plural = "News articles"

    @property
    def read_minutes(self):
        # Rough read-time estimate at 220 wpm
        word_count = len(strip_tags(self.content or "").split())
        return max(1, (word_count + 219) // 220)

    def __str__(self):
        return self.title
