from django.db import models

from pathway_connect.core.models import ContentRecord


class WhatsAppGroup(ContentRecord):
    CATEGORY_MAJOR = "Major"
    CATEGORY_COURSE = "Course"
    CATEGORY_GENERAL = "General"

    CATEGORY_CHOICES = [
        (CATEGORY_MAJOR, "Major"),
        (CATEGORY_COURSE, "Course"),
        (CATEGORY_GENERAL, "General"),
    ]

    name = models.CharField(max_length=200)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    description = models.TextField()
    link = models.URLField(max_length=500, help_text="Invite link, e.g. https://chat.whatsapp.com/...")
    members = models.PositiveIntegerField(default=0)
    icon = models.CharField(max_length=50, default="MessageCircle")
    color = models.CharField(max_length=100, default="bg-gray-100 text-gray-800")
    is_active = models.BooleanField(default=True)

    class Meta(ContentRecord.Meta):
        ordering = ("category", "name")
        verbose_name = "WhatsApp group"
        verbose_name_plural = "WhatsApp groups"

    def __str__(self):
        return self.name
