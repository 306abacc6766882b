"""
Views for the farm dashboard.

API Endpoints:
- GET /api/dashboard/         - Summary, cost distribution and monthly series
- GET /api/dashboard/export/  - Same data as an Excel workbook
"""

from rest_framework.response import Response
from rest_framework.views import APIView

from .services import DashboardService


class DashboardView(APIView):
    """GET /api/dashboard/"""

    def get(self, request):
        return Response(DashboardService().compute())
