"""
Crop Ledger Models

Crop             - one balance row per crop type (quantity on hand, cumulative
                   quantity harvested/planted, accrued cost of care)
CropSale         - append-only sale record with the cost per unit frozen at
                   the moment of the sale
CropCost         - append-only cost-of-care entry (water, fertilizer, ...)

As with livestock, total sales are always summed from CropSale rows and the
accrued cost of care is a running total kept next to its history.
"""

from decimal import Decimal
from django.db import models
from django.db.models import Sum, Value
from django.db.models.functions import Coalesce
from django.core.validators import MinValueValidator
from django.utils import timezone


class CostType(models.TextChoices):
    """Kinds of cost of care recorded against a crop."""
    WATER = 'Water', 'Water'
    FERTILIZER = 'Fertilizer', 'Fertilizer'
    PESTICIDE = 'Pesticide', 'Pesticide'
    LABOR = 'Labor', 'Labor'
    SEEDS = 'Seeds', 'Seeds'
    OTHER = 'Other', 'Other'


class CropQuerySet(models.QuerySet):

    def with_total_sales(self):
        return self.annotate(
            total_sales=Coalesce(
                Sum('sales__sale_price'),
                Value(Decimal('0.00')),
                output_field=models.DecimalField(max_digits=14, decimal_places=2),
            )
        )


class Crop(models.Model):
    """Balance row for one crop type."""

    type = models.CharField(
        max_length=100,
        unique=True,
        help_text="Crop name (e.g., 'Maize', 'Tomatoes')"
    )

    quantity = models.PositiveIntegerField(
        default=0,
        help_text="Units currently on hand"
    )

    initial_quantity = models.PositiveIntegerField(
        default=0,
        help_text="Cumulative units added (cost allocation baseline)"
    )

    growth_stage = models.CharField(
        max_length=50,
        blank=True,
        help_text="Current growth stage (Seedling, Vegetative, Harvested, ...)"
    )

    total_cost_of_care = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Running total of cost-of-care entries"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CropQuerySet.as_manager()

    class Meta:
        db_table = 'crops'
        ordering = ['type']

    def __str__(self):
        return f"{self.type} ({self.quantity} on hand)"


class CropSale(models.Model):
    """A sale of crop units; ``cost_per_unit_at_sale`` never changes."""

    crop = models.ForeignKey(
        Crop,
        on_delete=models.CASCADE,
        related_name='sales',
    )

    quantity = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )

    sale_price = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Total price received for this sale"
    )

    cost_per_unit_at_sale = models.DecimalField(
        max_digits=14,
        decimal_places=4,
        default=Decimal('0.0000'),
    )

    notes = models.TextField(blank=True)

    sale_date = models.DateTimeField(db_index=True)

    class Meta:
        db_table = 'crop_sales'
        ordering = ['-sale_date', '-id']

    def __str__(self):
        return f"{self.quantity} x {self.crop.type} for {self.sale_price}"


class CropCost(models.Model):
    """
    One cost-of-care entry. ``cost_date`` is the date the caller assigns
    the cost to; the dashboard buckets it by that date's month.
    """

    crop = models.ForeignKey(
        Crop,
        on_delete=models.CASCADE,
        related_name='costs',
    )

    cost_type = models.CharField(
        max_length=20,
        choices=CostType.choices,
        default=CostType.OTHER,
    )

    amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
    )

    cost_date = models.DateField(
        default=timezone.localdate,
        db_index=True,
    )

    notes = models.TextField(blank=True)

    recorded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'crop_costs'
        ordering = ['-cost_date', '-recorded_at']

    def __str__(self):
        return f"{self.crop.type} {self.cost_type}: {self.amount}"
