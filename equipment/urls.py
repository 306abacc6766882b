"""
URL configuration for Equipment.

All endpoints are prefixed with /api/equipment/
"""

from django.urls import path
from .views import EquipmentView

app_name = 'equipment'

urlpatterns = [
    path('', EquipmentView.as_view(), name='equipment'),
]
