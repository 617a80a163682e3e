from django.contrib import admin
from .models import NewsArticle


@admin.register(NewsArticle)
class NewsArticleAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "is_published", "is_hot", "featured_on_homepage", "created_at")
    search_fields = ("title", "summary", "content")
    list_filter = ("category", "is_published", "is_hot", "featured_on_homepage", "created_at")
