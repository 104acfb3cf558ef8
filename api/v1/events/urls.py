"""
URL configuration for events API endpoints.
"""

from django.urls import path

from api.v1.events import views

app_name = "events"

urlpatterns = [
    path(
        "",
        views.LifecycleEventCallbackView.as_view(),
        name="lifecycle-event",
    ),
]
