import logging

from django.contrib import messages
from django.http import Http404
from django.views.generic import TemplateView

from pathway_connect.core import filters
from pathway_connect.core.exceptions import NotFound, StorageError
from pathway_connect.core.filters import Criteria
from pathway_connect.core.repository import RepositoryMixin

from .models import NewsArticle

logger = logging.getLogger(__name__)

RELATED_LIMIT = 3


class NewsListView(RepositoryMixin, TemplateView):
    """Published articles with search (title/summary), category and tag filters."""

    template_name = "news/news_list.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        criteria = Criteria.from_query(self.request.GET, "news")

        try:
            published = self.get_repository().list("news", Criteria(published_only=True))
        except StorageError:
            logger.exception("News list failed while fetching articles")
            messages.error(self.request, "Failed to fetch news articles")
            published = []

        context.update({
            "articles": filters.apply(published, "news", criteria),
            "available_tags": filters.collect_tags(published),
            "categories": NewsArticle.CATEGORY_CHOICES,
            "query": criteria.search,
            "selected_category": criteria.category,
            "selected_tag": criteria.tag,
        })
        return context


class NewsDetailView(RepositoryMixin, TemplateView):
    template_name = "news/news_detail.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        repository = self.get_repository()
        try:
            article = repository.get("news", kwargs["pk"])
        except NotFound:
            raise Http404("Article not found")
        if not article.is_published:
            raise Http404("Article not found")

        try:
            related = repository.related("news", article, limit=RELATED_LIMIT)
        except StorageError:
            logger.exception("Related articles lookup failed for %s", article.pk)
            related = []

        context.update({"article": article, "related_articles": related})
        return context
