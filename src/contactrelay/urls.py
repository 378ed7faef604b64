"""Contact relay URL configuration."""

from django.urls import path

from contactrelay import views

urlpatterns = [
    path("", views.RootView.as_view(), name="root"),
    path("health", views.HealthView.as_view(), name="health"),
    path("api/hubspot-proxy", views.HubSpotProxyView.as_view(), name="hubspot-proxy"),
]

handler404 = "contactrelay.views.not_found"
handler500 = "contactrelay.views.server_error"
