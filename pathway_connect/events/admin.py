from django.contrib import admin
from .models import CareerEvent, Devotional


@admin.register(Devotional)
class DevotionalAdmin(admin.ModelAdmin):
    list_display = ("title", "speaker", "event_date", "status", "is_published", "featured_on_homepage")
    list_filter = ("status", "is_published", "featured_on_homepage")
    search_fields = ("title", "speaker", "author", "content")
    ordering = ("-event_date",)


@admin.register(CareerEvent)
class CareerEventAdmin(admin.ModelAdmin):
    list_display = ("title", "speaker", "industry", "event_date", "is_published", "featured_on_homepage")
    list_filter = ("industry", "status", "is_published", "featured_on_homepage")
    search_fields = ("title", "speaker", "description", "location")
    ordering = ("-event_date",)
