from django.urls import path

from .views import GroupDirectoryView

urlpatterns = [
    path("groups/", GroupDirectoryView.as_view(), name="group_list"),
]
