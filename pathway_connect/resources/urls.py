from django.urls import path

from .views import BookListView, JobListView

urlpatterns = [
    path("books/", BookListView.as_view(), name="book_list"),
    path("jobs/", JobListView.as_view(), name="job_list"),
]
