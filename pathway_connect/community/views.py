import logging

from django.contrib import messages
from django.views.generic import TemplateView

from pathway_connect.core import filters
from pathway_connect.core.exceptions import StorageError
from pathway_connect.core.filters import Criteria
from pathway_connect.core.repository import RepositoryMixin

from .models import WhatsAppGroup

logger = logging.getLogger(__name__)


class GroupDirectoryView(RepositoryMixin, TemplateView):
    """Published, active groups grouped by category in Major/Course/General order."""

    template_name = "community/group_list.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        criteria = Criteria.from_query(self.request.GET, "whatsapp_groups")
        try:
            groups = self.get_repository().list("whatsapp_groups", Criteria(published_only=True))
        except StorageError:
            logger.exception("Listing WhatsApp groups failed")
            messages.error(self.request, "Failed to fetch groups")
            groups = []

        groups = [group for group in filters.apply(groups, "whatsapp_groups", criteria) if group.is_active]
        sections = []
        for value, label in WhatsAppGroup.CATEGORY_CHOICES:
            members = [group for group in groups if group.category == value]
            if members:
                sections.append({"category": value, "label": label, "groups": members})

        context.update({
            "sections": sections,
            "group_count": len(groups),
            "categories": WhatsAppGroup.CATEGORY_CHOICES,
            "query": criteria.search,
            "selected_category": criteria.category,
        })
        return context
