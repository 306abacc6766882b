"""
Workforce Models

Role                 - job role a worker holds (e.g., 'Herdsman')
ResponsibilityArea   - part of the farm a worker looks after
Worker               - farm worker with a fixed payment type and rate
SalaryPayment        - one payment to a worker; labor cost on the dashboard
"""

from decimal import Decimal
from django.db import models
from django.db.models import Sum, Value
from django.db.models.functions import Coalesce
from django.core.validators import MinValueValidator
from django.utils import timezone


class PaymentType(models.TextChoices):
    MONTHLY = 'Monthly', 'Monthly'
    DAILY = 'Daily', 'Daily'
    PER_TASK = 'Per Task', 'Per Task'


class Role(models.Model):
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'roles'
        ordering = ['name']

    def __str__(self):
        return self.name


class ResponsibilityArea(models.Model):
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'responsibility_areas'
        ordering = ['name']

    def __str__(self):
        return self.name


class WorkerQuerySet(models.QuerySet):

    def active(self):
        return self.filter(is_active=True)

    def with_total_payments(self):
        return self.annotate(
            total_payments=Coalesce(
                Sum('payments__amount'),
                Value(Decimal('0.00')),
                output_field=models.DecimalField(max_digits=14, decimal_places=2),
            )
        )


class Worker(models.Model):
    """
    A farm worker. Payments recorded against a worker must use the
    worker's own payment type.
    """

    name = models.CharField(max_length=200)

    role = models.ForeignKey(
        Role,
        on_delete=models.PROTECT,
        related_name='workers',
    )

    payment_type = models.CharField(
        max_length=20,
        choices=PaymentType.choices,
        default=PaymentType.MONTHLY,
    )

    payment_rate = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Agreed rate per month, day or task"
    )

    responsibility_area = models.ForeignKey(
        ResponsibilityArea,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='workers',
    )

    is_active = models.BooleanField(default=True, db_index=True)

    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = WorkerQuerySet.as_manager()

    class Meta:
        db_table = 'workers'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.role.name})"


class SalaryPayment(models.Model):

    worker = models.ForeignKey(
        Worker,
        on_delete=models.CASCADE,
        related_name='payments',
    )

    amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
    )

    payment_date = models.DateField(default=timezone.localdate, db_index=True)

    payment_type = models.CharField(max_length=20, choices=PaymentType.choices)

    task_description = models.TextField(blank=True)

    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'salary_payments'
        ordering = ['-payment_date', '-id']

    def __str__(self):
        return f"{self.worker.name}: {self.amount} on {self.payment_date}"
