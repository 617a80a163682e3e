from django.urls import path

from . import views

urlpatterns = [
    path("", views.ChatView.as_view(), name="advisor_chat"),
    path("clear/", views.clear_conversation, name="advisor_clear"),
    path("api/", views.advisor_api, name="advisor_api"),
    path("plan/", views.CareerPlanView.as_view(), name="advisor_plan"),
    path("summary/", views.plan_summary, name="advisor_summary"),
    path("export/<str:fmt>/", views.export_plan, name="advisor_export"),
]
