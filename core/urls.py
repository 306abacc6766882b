"""
URL configuration for the Farm Ledger backend.

Every domain app is mounted under /api/. The Django admin stays available
for manual record inspection.
"""
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(url='/admin/', permanent=False)),
    path('admin/', admin.site.urls),
    path('api/livestock/', include('livestock.urls')),  # Animal types, sales, losses, cost of living
    path('api/crops/', include('crops.urls')),  # Crops, crop sales, cost of care
    path('api/equipment/', include('equipment.urls')),  # Equipment register and transactions
    path('api/workforce/', include('workforce.urls')),  # Roles, workers, salary payments
    path('api/schedule/', include('scheduling.urls')),  # Tasks and calendar
    path('api/dashboard/', include('dashboards.urls')),  # Earnings / costs / profit aggregation
]
