from django.urls import path

from . import views

urlpatterns = [
    path('api/v1/ical/render', views.IcalRenderView.as_view(), name='ical-render'),
]
