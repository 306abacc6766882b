"""
Equipment Models

Equipment              - a purchased or rented piece of equipment; purchased
                         equipment accrues maintenance cost on the record
EquipmentTransaction   - money spent on equipment (initial purchase or rental
                         payment, then recurring rental payments)

The dashboard counts equipment cost as accrued maintenance plus the sum of
transaction amounts.
"""

from decimal import Decimal
from django.db import models
from django.db.models import Sum, Value
from django.db.models.functions import Coalesce
from django.core.validators import MinValueValidator
from django.utils import timezone


class AcquisitionType(models.TextChoices):
    PURCHASED = 'Purchased', 'Purchased'
    RENTED = 'Rented', 'Rented'


class TransactionType(models.TextChoices):
    PURCHASED = 'Purchased', 'Purchase'
    RENTED = 'Rented', 'Initial Rental'
    RENTAL = 'Rental', 'Rental Payment'


class EquipmentQuerySet(models.QuerySet):

    def with_transaction_cost(self):
        return self.annotate(
            total_transaction_cost=Coalesce(
                Sum('transactions__amount'),
                Value(Decimal('0.00')),
                output_field=models.DecimalField(max_digits=14, decimal_places=2),
            )
        )


class Equipment(models.Model):

    type = models.CharField(
        max_length=100,
        help_text="Equipment description (e.g., 'Tractor', 'Water pump')"
    )

    acquisition_type = models.CharField(
        max_length=20,
        choices=AcquisitionType.choices,
    )

    acquisition_date = models.DateField(default=timezone.localdate)

    maintenance_cost = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Accrued maintenance cost (purchased equipment only)"
    )

    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = EquipmentQuerySet.as_manager()

    class Meta:
        db_table = 'equipments'
        ordering = ['id']
        verbose_name_plural = 'Equipment'

    def __str__(self):
        return f"{self.type} ({self.acquisition_type})"


class EquipmentTransaction(models.Model):

    equipment = models.ForeignKey(
        Equipment,
        on_delete=models.CASCADE,
        related_name='transactions',
    )

    transaction_type = models.CharField(
        max_length=20,
        choices=TransactionType.choices,
    )

    amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
    )

    transaction_date = models.DateField(default=timezone.localdate, db_index=True)

    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'equipment_transactions'
        ordering = ['-transaction_date', '-id']

    def __str__(self):
        return f"{self.equipment.type} {self.transaction_type}: {self.amount}"
