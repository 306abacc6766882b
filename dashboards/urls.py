"""
URL configuration for the farm dashboard.

All endpoints are prefixed with /api/dashboard/
"""

from django.urls import path
from .exports import DashboardExportView
from .views import DashboardView

app_name = 'dashboards'

urlpatterns = [
    path('', DashboardView.as_view(), name='dashboard'),
    path('export/', DashboardExportView.as_view(), name='export'),
]
