"""
URL configuration for the Livestock Ledger.

All endpoints are prefixed with /api/livestock/
"""

from django.urls import path
from .views import (
    AnimalTypeView,
    AnimalSaleView,
    CostOfLivingView,
    CostOfLivingResetView,
    LivestockActionView,
    AnimalListCreateView,
    AnimalDetailView,
)

app_name = 'livestock'

urlpatterns = [
    path('types/', AnimalTypeView.as_view(), name='type-list'),
    path('sales/', AnimalSaleView.as_view(), name='sale-list'),
    path('costs/', CostOfLivingView.as_view(), name='cost-create'),
    path('costs/reset/', CostOfLivingResetView.as_view(), name='cost-reset'),
    path('actions/', LivestockActionView.as_view(), name='action'),
    path('animals/', AnimalListCreateView.as_view(), name='animal-list'),
    path('animals/<int:pk>/', AnimalDetailView.as_view(), name='animal-detail'),
]
