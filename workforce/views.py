"""
Views for Workforce.

API Endpoints:
- /api/workforce/roles/                 - List / add roles
- /api/workforce/responsibility-areas/  - List / add responsibility areas
- /api/workforce/workers/               - List / add workers
- /api/workforce/workers/{id}/          - Retrieve / update / deactivate a worker
- /api/workforce/salary-payments/       - List (filter ?worker=) / record payments
"""

import logging

from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import InvalidInput

from .models import ResponsibilityArea, Role, SalaryPayment, Worker
from .serializers import (
    ResponsibilityAreaSerializer,
    RoleSerializer,
    SalaryPaymentCreateSerializer,
    SalaryPaymentSerializer,
    WorkerSerializer,
)
from .services import PayrollService

logger = logging.getLogger(__name__)


class RoleListCreateView(generics.ListCreateAPIView):
    queryset = Role.objects.all()
    serializer_class = RoleSerializer
    search_fields = ['name']


class ResponsibilityAreaListCreateView(generics.ListCreateAPIView):
    queryset = ResponsibilityArea.objects.all()
    serializer_class = ResponsibilityAreaSerializer
    search_fields = ['name']


class WorkerListCreateView(generics.ListCreateAPIView):
    """
    GET  /api/workforce/workers/?is_active=true&role=1
    POST /api/workforce/workers/
    """
    queryset = Worker.objects.select_related('role', 'responsibility_area').with_total_payments()
    serializer_class = WorkerSerializer
    filterset_fields = ['is_active', 'role', 'responsibility_area', 'payment_type']
    search_fields = ['name', 'notes']
    ordering_fields = ['name', 'created_at', 'payment_rate']

    def perform_create(self, serializer):
        worker = serializer.save()
        logger.info(f"Added worker {worker.name} ({worker.payment_type})")


class WorkerDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    GET/PUT/PATCH /api/workforce/workers/{id}/
    DELETE        /api/workforce/workers/{id}/  (deactivates)
    """
    queryset = Worker.objects.select_related('role', 'responsibility_area').with_total_payments()
    serializer_class = WorkerSerializer

    def destroy(self, request, *args, **kwargs):
        worker = PayrollService().deactivate_worker(kwargs['pk'])
        return Response({'message': f"Worker '{worker.name}' deactivated", 'id': worker.pk})


class SalaryPaymentView(APIView):
    """
    GET  /api/workforce/salary-payments/?worker=1
    POST /api/workforce/salary-payments/
    """

    def get(self, request):
        payments = SalaryPayment.objects.select_related('worker')
        worker_id = request.query_params.get('worker')
        if worker_id:
            try:
                worker_id = int(worker_id)
            except (TypeError, ValueError):
                raise InvalidInput("Worker ID must be a number")
            payments = payments.filter(worker_id=worker_id)
        return Response(SalaryPaymentSerializer(payments, many=True).data)

    def post(self, request):
        serializer = SalaryPaymentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        payment = PayrollService().record_payment(
            data['worker_id'],
            data['amount'],
            data['payment_type'],
            payment_date=data.get('payment_date'),
            task_description=data.get('task_description') or '',
            notes=data.get('notes') or '',
        )
        return Response(SalaryPaymentSerializer(payment).data, status=status.HTTP_201_CREATED)
