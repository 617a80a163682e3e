# resources/views.py
import logging

from django.contrib import messages
from django.views.generic import TemplateView

from pathway_connect.core import filters
from pathway_connect.core.exceptions import StorageError
from pathway_connect.core.filters import Criteria
from pathway_connect.core.repository import RepositoryMixin

from .models import Book, Job

logger = logging.getLogger(__name__)


class _PublishedListView(RepositoryMixin, TemplateView):
    collection = None
    error_message = "Failed to load content"

    def fetch_published(self):
        try:
            return self.get_repository().list(self.collection, Criteria(published_only=True))
        except StorageError:
            logger.exception("Listing %s failed", self.collection)
            messages.error(self.request, self.error_message)
            return []


class BookListView(_PublishedListView):
    """Digital library: search over title/author/description, filter by category."""

    template_name = "resources/book_list.html"
    collection = "books"
    error_message = "Failed to fetch books"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        criteria = Criteria.from_query(self.request.GET, "books")
        books = filters.apply(self.fetch_published(), "books", criteria)
        context.update({
            "books": books,
            "categories": Book.CATEGORY_CHOICES,
            "query": criteria.search,
            "selected_category": criteria.category,
        })
        return context


class JobListView(_PublishedListView):
    """
    Job board. Featured listings come first, then newest. Filters: free text
    (title, company, description, location), category, job type and
    experience level.
    """

    template_name = "resources/job_list.html"
    collection = "jobs"
    error_message = "Failed to fetch jobs"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        criteria = Criteria.from_query(self.request.GET, "jobs")
        published = self.fetch_published()
        jobs = filters.apply(published, "jobs", criteria)

        for job in jobs:
            job.closing_soon = job.deadline_near()

        context.update({
            "jobs": jobs,
            "featured_count": sum(1 for job in jobs if job.is_featured),
            "categories": filters.distinct_values(published, "category"),
            "job_types": [choice for choice in Job.JOB_TYPE_CHOICES
                          if choice[0] in filters.distinct_values(published, "job_type")],
            "experience_levels": [choice for choice in Job.EXPERIENCE_LEVEL_CHOICES
                                  if choice[0] in filters.distinct_values(published, "experience_level")],
            "query": criteria.search,
            "selected_category": criteria.category,
            "selected_job_type": criteria.exact.get("job_type", ""),
            "selected_experience": criteria.exact.get("experience_level", ""),
        })
        return context
