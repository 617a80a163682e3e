# main/views.py
import logging

from django.contrib import messages
from django.utils import timezone
from django.views.generic import TemplateView

from pathway_connect.core.exceptions import StorageError
from pathway_connect.core.filters import Criteria
from pathway_connect.core.repository import RepositoryMixin

logger = logging.getLogger(__name__)

FEATURED_NEWS_LIMIT = 3
UPCOMING_LIMIT = 2


class HomeView(RepositoryMixin, TemplateView):
    """
    Homepage:
    - Featured news picked in the portal's homepage manager.
    - The next two published devotionals and career chats.
    A failing section is logged and left empty so the rest of the page renders.
    """

    template_name = "main/home.html"

    def _section(self, label, fetch):
        try:
            return fetch()
        except StorageError:
            logger.exception("Homepage section %s failed to load", label)
            messages.error(self.request, f"Failed to load {label}")
            return []

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        repository = self.get_repository()
        now = timezone.now()

        featured = self._section(
            "featured news",
            lambda: repository.list("news", Criteria(published_only=True, featured_only=True)),
        )
        context.update({
            "featured_news": featured[:FEATURED_NEWS_LIMIT],
            "upcoming_devotionals": self._section(
                "devotionals", lambda: repository.upcoming("devotionals", limit=UPCOMING_LIMIT, now=now)
            ),
            "upcoming_career_events": self._section(
                "career events", lambda: repository.upcoming("career_events", limit=UPCOMING_LIMIT, now=now)
            ),
        })
        return context


class AboutView(TemplateView):
    template_name = "main/about.html"
