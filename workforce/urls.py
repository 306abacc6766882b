"""
URL configuration for Workforce.

All endpoints are prefixed with /api/workforce/
"""

from django.urls import path
from . import views

app_name = 'workforce'

urlpatterns = [
    path('roles/', views.RoleListCreateView.as_view(), name='roles'),
    path('responsibility-areas/', views.ResponsibilityAreaListCreateView.as_view(), name='responsibility-areas'),
    path('workers/', views.WorkerListCreateView.as_view(), name='workers'),
    path('workers/<int:pk>/', views.WorkerDetailView.as_view(), name='worker-detail'),
    path('salary-payments/', views.SalaryPaymentView.as_view(), name='salary-payments'),
]
