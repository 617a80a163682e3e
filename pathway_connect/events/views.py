# events/views.py
import logging

from django.contrib import messages
from django.utils import timezone
from django.views.generic import TemplateView

from pathway_connect.core import filters
from pathway_connect.core.exceptions import StorageError
from pathway_connect.core.filters import Criteria
from pathway_connect.core.repository import RepositoryMixin

from .models import CareerEvent

logger = logging.getLogger(__name__)


class _ScheduleView(RepositoryMixin, TemplateView):
    """
    Published sessions split into upcoming and past around the current time.
    Upcoming runs soonest first, past runs most recent first.
    """

    collection = None
    error_message = "Failed to load events"

    def get_schedule(self, criteria):
        now = timezone.now()
        try:
            records = self.get_repository().list(self.collection, Criteria(published_only=True), now=now)
        except StorageError:
            logger.exception("Listing %s failed", self.collection)
            messages.error(self.request, self.error_message)
            records = []

        available_topics = filters.collect_tags(records, "topics")
        matching = filters.apply(records, self.collection, criteria, now=now)
        upcoming, past = filters.split_by_time(matching, self.collection, now=now)
        upcoming.sort(key=lambda record: record.event_date)
        return upcoming, past, available_topics

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        criteria = Criteria.from_query(self.request.GET, self.collection)
        upcoming, past, topics = self.get_schedule(criteria)
        context.update({
            "upcoming": upcoming,
            "past": past,
            "available_topics": topics,
            "query": criteria.search,
            "selected_category": criteria.category,
            "selected_tag": criteria.tag,
            "selected_when": criteria.bucket,
        })
        return context


class DevotionalListView(_ScheduleView):
    template_name = "events/devotional_list.html"
    collection = "devotionals"
    error_message = "Failed to fetch devotionals"


class CareerEventListView(_ScheduleView):
    template_name = "events/career_event_list.html"
    collection = "career_events"
    error_message = "Failed to fetch career events"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["industries"] = CareerEvent.INDUSTRY_CHOICES
        return context
