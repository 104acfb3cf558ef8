"""
URL configuration for partner API endpoints.
"""

from django.urls import path

from api.v1.partner import views

app_name = "partner"

urlpatterns = [
    path(
        "<str:partner_id>/policy",
        views.ResolvePolicyView.as_view(),
        name="resolve-policy",
    ),
]
