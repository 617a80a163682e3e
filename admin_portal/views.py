import logging

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.core.paginator import Paginator
from django.http import Http404
from django.shortcuts import redirect, render
from django.utils.decorators import method_decorator
from django.views import View

from pathway_connect.core import codec, filters
from pathway_connect.core.exceptions import (
    ContentError,
    NotFound,
    StorageError,
    UnknownCollection,
    ValidationFailure,
)
from pathway_connect.core.repository import RepositoryMixin
from pathway_connect.core.schema import get_schema, registry

from .forms import RecordForm

logger = logging.getLogger(__name__)

FEATURABLE_COLLECTIONS = ("news", "devotionals", "career_events")


class StaffRequiredMixin:
    @method_decorator(staff_member_required)
    def dispatch(self, request, *args, **kwargs):
        return super().dispatch(request, *args, **kwargs)


class CollectionMixin(StaffRequiredMixin, RepositoryMixin):
    """Resolves the ``collection`` URL kwarg to its schema; unknown names are a 404."""

    def dispatch(self, request, *args, **kwargs):
        try:
            self.schema = get_schema(kwargs.get("collection"))
        except UnknownCollection:
            raise Http404("Unknown collection")
        return super().dispatch(request, *args, **kwargs)

    def list_url(self):
        return redirect("admin_portal:record_list", collection=self.schema.name)

    def base_context(self, **extra):
        context = {"schema": self.schema}
        context.update(extra)
        return context


def record_title(schema, record):
    return str(getattr(record, schema.title_field, "") or record.pk)


class PortalDashboardView(StaffRequiredMixin, RepositoryMixin, View):
    template_name = "admin_portal/dashboard.html"

    def get(self, request):
        repository = self.get_repository()
        cards = []
        for schema in registry.values():
            try:
                records = repository.list(schema.name)
            except StorageError:
                logger.exception("Dashboard count for %s failed", schema.name)
                messages.error(request, f"Failed to load {schema.label.lower()}")
                records = []
            cards.append({
                "schema": schema,
                "total": len(records),
                "published": sum(1 for record in records if record.is_published),
            })
        return render(request, self.template_name, {"cards": cards})


class RecordListView(CollectionMixin, View):
    template_name = "admin_portal/record_list.html"
    paginate_by = 20

    def get(self, request, collection):
        q = (request.GET.get("q") or "").strip()
        try:
            records = self.get_repository().list(self.schema, filters.Criteria(search=q))
        except StorageError:
            logger.exception("Portal list for %s failed", self.schema.name)
            messages.error(request, f"Failed to fetch {self.schema.label.lower()}")
            records = []

        page_obj = Paginator(records, self.paginate_by).get_page(request.GET.get("page"))
        rows = [
            {"record": record, "title": record_title(self.schema, record)}
            for record in page_obj.object_list
        ]
        return render(request, self.template_name, self.base_context(
            rows=rows, page_obj=page_obj, q=q,
        ))


class RecordCreateView(CollectionMixin, View):
    template_name = "admin_portal/record_form.html"

    def get(self, request, collection):
        form = RecordForm(self.schema, initial=codec.encode(self.schema, self.schema.defaults()))
        return render(request, self.template_name, self.base_context(form=form, is_edit=False))

    def post(self, request, collection):
        form = RecordForm(self.schema, request.POST)
        if form.is_valid():
            try:
                record = self.get_repository().create(self.schema, form.record)
            except ValidationFailure as failure:
                form.add_failure(failure)
            except (StorageError, ContentError):
                logger.exception("Creating %s record failed", self.schema.name)
                messages.error(request, f"Failed to create {self.schema.label.lower()} entry")
            else:
                messages.success(request, f'"{record_title(self.schema, record)}" created.')
                return self.list_url()
        else:
            logger.info("Invalid %s form submitted by %s", self.schema.name, request.user)
        return render(request, self.template_name, self.base_context(form=form, is_edit=False))


class RecordUpdateView(CollectionMixin, View):
    template_name = "admin_portal/record_form.html"

    def _load(self, request, pk):
        try:
            return self.get_repository().get(self.schema, pk)
        except NotFound:
            messages.error(request, f"That {self.schema.label.lower()} entry no longer exists.")
        except StorageError:
            logger.exception("Loading %s record %s failed", self.schema.name, pk)
            messages.error(request, f"Failed to load {self.schema.label.lower()} entry")
        return None

    def get(self, request, collection, pk):
        record = self._load(request, pk)
        if record is None:
            return self.list_url()
        form = RecordForm(self.schema, initial=codec.encode(self.schema, record))
        return render(request, self.template_name, self.base_context(form=form, record=record, is_edit=True))

    def post(self, request, collection, pk):
        record = self._load(request, pk)
        if record is None:
            return self.list_url()
        form = RecordForm(self.schema, request.POST)
        if form.is_valid():
            try:
                record = self.get_repository().update(self.schema, pk, form.record)
            except ValidationFailure as failure:
                form.add_failure(failure)
            except NotFound:
                messages.error(request, f"That {self.schema.label.lower()} entry no longer exists.")
                return self.list_url()
            except (StorageError, ContentError):
                logger.exception("Updating %s record %s failed", self.schema.name, pk)
                messages.error(request, f"Failed to update {self.schema.label.lower()} entry")
            else:
                messages.success(request, f'"{record_title(self.schema, record)}" updated.')
                return self.list_url()
        return render(request, self.template_name, self.base_context(form=form, record=record, is_edit=True))


class RecordDeleteView(CollectionMixin, View):
    template_name = "admin_portal/record_confirm_delete.html"

    def get(self, request, collection, pk):
        try:
            record = self.get_repository().get(self.schema, pk)
        except NotFound:
            messages.error(request, f"That {self.schema.label.lower()} entry no longer exists.")
            return self.list_url()
        return render(request, self.template_name, self.base_context(
            record=record, title=record_title(self.schema, record),
        ))

    def post(self, request, collection, pk):
        try:
            self.get_repository().delete(self.schema, pk)
        except NotFound:
            messages.error(request, f"That {self.schema.label.lower()} entry no longer exists.")
        except StorageError:
            logger.exception("Deleting %s record %s failed", self.schema.name, pk)
            messages.error(request, f"Failed to delete {self.schema.label.lower()} entry")
        else:
            messages.success(request, f"{self.schema.label} entry deleted.")
        return self.list_url()


class FeaturedManagerView(StaffRequiredMixin, RepositoryMixin, View):
    """Homepage featured manager: toggle the feature flag on news, devotionals and career events."""

    template_name = "admin_portal/featured.html"

    def get(self, request):
        repository = self.get_repository()
        sections = []
        for name in FEATURABLE_COLLECTIONS:
            schema = get_schema(name)
            try:
                records = repository.list(schema, filters.Criteria(published_only=True))
            except StorageError:
                logger.exception("Featured manager list for %s failed", name)
                messages.error(request, f"Failed to fetch {schema.label.lower()}")
                records = []
            sections.append({
                "schema": schema,
                "rows": [
                    {
                        "record": record,
                        "title": record_title(schema, record),
                        "featured": bool(getattr(record, schema.feature_field)),
                    }
                    for record in records
                ],
            })
        return render(request, self.template_name, {"sections": sections})

    def post(self, request):
        collection = request.POST.get("collection")
        if collection not in FEATURABLE_COLLECTIONS:
            messages.error(request, "That collection cannot be featured on the homepage.")
            return redirect("admin_portal:featured")

        value = codec.decode_field(get_schema(collection).field("featured_on_homepage"), request.POST)
        try:
            self.get_repository().set_feature(collection, request.POST.get("pk"), value)
        except NotFound:
            messages.error(request, "That entry no longer exists.")
        except (StorageError, ContentError):
            logger.exception("Toggling homepage feature on %s failed", collection)
            messages.error(request, "Failed to update homepage features")
        else:
            messages.success(request, "Added to homepage." if value else "Removed from homepage.")
        return redirect("admin_portal:featured")
