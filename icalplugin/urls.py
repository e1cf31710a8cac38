"""
URL configuration for the icalplugin project.
"""
from django.contrib.auth.decorators import login_required
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    # OpenAPI schema
    path('api/schema/', login_required(SpectacularAPIView.as_view()), name='schema'),
    path('', include('icalplugin.ical.urls')),
]
