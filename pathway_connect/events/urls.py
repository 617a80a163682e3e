from django.urls import path

from .views import CareerEventListView, DevotionalListView

urlpatterns = [
    path("devotionals/", DevotionalListView.as_view(), name="devotional_list"),
    path("career/", CareerEventListView.as_view(), name="career_event_list"),
]
