from django.contrib import admin
from .models import WhatsAppGroup


@admin.register(WhatsAppGroup)
class WhatsAppGroupAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "members", "is_active", "is_published")
    list_filter = ("category", "is_active", "is_published")
    search_fields = ("name", "description")
