"""
Livestock Ledger Models

Balances and transaction logs for animals kept on the farm:

AnimalType          - one balance row per kind of animal (quantity on hand,
                      cumulative quantity acquired, accrued cost of living)
AnimalSale          - append-only sale record with the cost per unit frozen
                      at the moment of the sale
CostOfLivingEntry   - append-only history of cost-of-living injections,
                      labelled with the month chosen by the caller
Animal              - optional register of individual animals

Total sales are never stored: they are always summed from AnimalSale rows.
Deleting an AnimalType cascades to its sales and cost history.
"""

from decimal import Decimal
from django.db import models
from django.db.models import Sum, Value
from django.db.models.functions import Coalesce
from django.core.validators import MinValueValidator


class AnimalTypeQuerySet(models.QuerySet):

    def with_total_sales(self):
        """Annotate each balance with the sum of its recorded sale prices."""
        return self.annotate(
            total_sales=Coalesce(
                Sum('sales__sale_price'),
                Value(Decimal('0.00')),
                output_field=models.DecimalField(max_digits=14, decimal_places=2),
            )
        )


class AnimalType(models.Model):
    """
    Balance row for one kind of animal.

    ``initial_quantity`` is the cumulative quantity ever acquired (creation
    plus every restock). It is the denominator for cost allocation and is
    never reduced by sales or losses.
    """

    type = models.CharField(
        max_length=100,
        unique=True,
        help_text="Animal type name (e.g., 'Sheep', 'Goat')"
    )

    quantity = models.PositiveIntegerField(
        default=0,
        help_text="Animals currently on hand"
    )

    initial_quantity = models.PositiveIntegerField(
        default=0,
        help_text="Cumulative animals acquired (cost allocation baseline)"
    )

    total_purchase_cost = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Total amount paid to acquire animals of this type"
    )

    total_cost_of_living = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Running total of cost-of-living entries (feed, vet, housing)"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AnimalTypeQuerySet.as_manager()

    class Meta:
        db_table = 'animal_types'
        ordering = ['type']
        verbose_name = 'Animal Type'
        verbose_name_plural = 'Animal Types'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(total_cost_of_living__gte=0),
                name='animal_type_cost_of_living_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.type} ({self.quantity} on hand)"


class AnimalSale(models.Model):
    """
    A sale of animals.

    ``cost_per_unit`` is captured when the sale is recorded and is never
    recomputed, even if the cost of living changes later.
    """

    animal_type = models.ForeignKey(
        AnimalType,
        on_delete=models.CASCADE,
        related_name='sales',
        help_text="Animal type sold"
    )

    quantity = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text="Number of animals sold"
    )

    sale_price = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Total price received for this sale"
    )

    cost_per_unit = models.DecimalField(
        max_digits=14,
        decimal_places=4,
        default=Decimal('0.0000'),
        help_text="Cost of living per animal at the time of sale"
    )

    notes = models.TextField(blank=True)

    sale_date = models.DateTimeField(
        db_index=True,
        help_text="When the sale was recorded"
    )

    class Meta:
        db_table = 'animal_sales'
        ordering = ['-sale_date', '-id']
        verbose_name = 'Animal Sale'
        verbose_name_plural = 'Animal Sales'

    def __str__(self):
        return f"{self.quantity} x {self.animal_type.type} for {self.sale_price}"

    @property
    def cost_of_goods_sold(self):
        return (self.cost_per_unit * self.quantity).quantize(Decimal('0.01'))


class CostOfLivingEntry(models.Model):
    """
    One cost-of-living injection for an animal type.

    ``month`` is the period label supplied by the caller and is used verbatim
    by the dashboard; it may differ from ``recorded_at``.
    """

    animal_type = models.ForeignKey(
        AnimalType,
        on_delete=models.CASCADE,
        related_name='cost_history',
        help_text="Animal type the cost applies to"
    )

    cost = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Amount spent"
    )

    month = models.CharField(
        max_length=7,
        db_index=True,
        help_text="Period label (YYYY-MM)"
    )

    notes = models.TextField(blank=True)

    recorded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'cost_of_living_history'
        ordering = ['-month', '-recorded_at']
        verbose_name = 'Cost of Living Entry'
        verbose_name_plural = 'Cost of Living History'

    def __str__(self):
        return f"{self.animal_type.type} {self.month}: {self.cost}"


class Animal(models.Model):
    """Individual animal record (tagging, purchase price, feed cost, lineage)."""

    HEALTH_STATUS_CHOICES = [
        ('Healthy', 'Healthy'),
        ('Sick', 'Sick'),
        ('Under Treatment', 'Under Treatment'),
        ('Quarantined', 'Quarantined'),
    ]

    animal_type = models.ForeignKey(
        AnimalType,
        on_delete=models.CASCADE,
        related_name='animals',
    )

    tag = models.CharField(
        max_length=50,
        blank=True,
        help_text="Ear tag or other identifier"
    )

    purchase_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
    )

    feed_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
    )

    health_status = models.CharField(
        max_length=20,
        choices=HEALTH_STATUS_CHOICES,
        default='Healthy',
    )

    production = models.CharField(
        max_length=255,
        blank=True,
        help_text="Production notes (milk, wool, eggs, ...)"
    )

    parent = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='offspring',
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'animals'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.animal_type.type} {self.tag or self.pk}"
