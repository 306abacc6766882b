"""
Serializers for Workforce.
"""

from decimal import Decimal
from rest_framework import serializers

from .models import PaymentType, ResponsibilityArea, Role, SalaryPayment, Worker


class RoleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Role
        fields = ['id', 'name', 'description', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']


class ResponsibilityAreaSerializer(serializers.ModelSerializer):
    class Meta:
        model = ResponsibilityArea
        fields = ['id', 'name', 'description', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']


class WorkerSerializer(serializers.ModelSerializer):
    role_name = serializers.CharField(source='role.name', read_only=True)
    responsibility_area_name = serializers.CharField(
        source='responsibility_area.name', read_only=True, default=None
    )
    total_payments = serializers.SerializerMethodField()

    class Meta:
        model = Worker
        fields = [
            'id', 'name', 'role', 'role_name', 'payment_type', 'payment_rate',
            'responsibility_area', 'responsibility_area_name', 'is_active',
            'notes', 'total_payments', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'is_active', 'created_at', 'updated_at']

    def get_total_payments(self, obj):
        total = getattr(obj, 'total_payments', None)
        if total is None:
            total = sum((p.amount for p in obj.payments.all()), Decimal('0.00'))
        return float(total)


class SalaryPaymentSerializer(serializers.ModelSerializer):
    worker_name = serializers.CharField(source='worker.name', read_only=True)

    class Meta:
        model = SalaryPayment
        fields = [
            'id', 'worker', 'worker_name', 'amount', 'payment_date',
            'payment_type', 'task_description', 'notes', 'created_at',
        ]
        read_only_fields = fields


class SalaryPaymentCreateSerializer(serializers.Serializer):
    worker_id = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=Decimal('0.00'))
    payment_type = serializers.ChoiceField(choices=PaymentType.choices)
    payment_date = serializers.DateField(required=False, allow_null=True)
    task_description = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
