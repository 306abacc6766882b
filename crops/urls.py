"""
URL configuration for the Crop Ledger.

All endpoints are prefixed with /api/crops/
"""

from django.urls import path
from .views import CropView, CropSaleView, CropCostView, CropCostResetView

app_name = 'crops'

urlpatterns = [
    path('', CropView.as_view(), name='crop-list'),
    path('sales/', CropSaleView.as_view(), name='sale-list'),
    path('costs/', CropCostView.as_view(), name='cost-create'),
    path('costs/reset/', CropCostResetView.as_view(), name='cost-reset'),
]
