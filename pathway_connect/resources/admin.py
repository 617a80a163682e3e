from django.contrib import admin
from .models import Book, Job


@admin.register(Book)
class BookAdmin(admin.ModelAdmin):
    list_display = ("title", "author", "category", "is_published", "created_at")
    list_filter = ("category", "is_published")
    search_fields = ("title", "author", "description")
    ordering = ("-created_at",)


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ("title", "company", "location", "job_type", "is_featured", "is_published", "deadline")
    list_filter = ("job_type", "experience_level", "category", "is_featured", "is_published")
    search_fields = ("title", "company", "description", "location")
