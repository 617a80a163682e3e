from django.urls import path

from . import views

urlpatterns = [
    path("", views.PortalDashboardView.as_view(), name="dashboard"),
    path("featured/", views.FeaturedManagerView.as_view(), name="featured"),
    path("<str:collection>/", views.RecordListView.as_view(), name="record_list"),
    path("<str:collection>/new/", views.RecordCreateView.as_view(), name="record_create"),
    path("<str:collection>/<uuid:pk>/edit/", views.RecordUpdateView.as_view(), name="record_edit"),
    path("<str:collection>/<uuid:pk>/delete/", views.RecordDeleteView.as_view(), name="record_delete"),
]
