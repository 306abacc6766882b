"""
Crop Ledger Service

Mirrors the livestock ledger for crops: every mutation runs in one
transaction with a row lock on the crop balance. Crops have no loss
operation.
"""

import logging
from collections import defaultdict
from decimal import Decimal

from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from core.exceptions import Conflict, InsufficientStock, InvalidInput, NotFound
from core.ledger import (
    cost_per_unit,
    require_non_negative,
    require_positive,
    require_within_limit,
)

from .models import CostType, Crop, CropCost, CropSale

logger = logging.getLogger(__name__)


class CropLedger:
    """Service for crop balances, sales and cost of care."""

    def _clean_name(self, name):
        name = (name or '').strip()
        if not name:
            raise InvalidInput("Crop type is required.")
        return name

    def _locked_crop(self, name):
        name = self._clean_name(name)
        try:
            return Crop.objects.select_for_update().get(type=name)
        except Crop.DoesNotExist:
            raise NotFound(f"Crop '{name}' not found.")

    def get_crop(self, name):
        name = self._clean_name(name)
        try:
            return Crop.objects.with_total_sales().get(type=name)
        except Crop.DoesNotExist:
            raise NotFound(f"Crop '{name}' not found.")

    # =========================================================================
    # BALANCES
    # =========================================================================

    @transaction.atomic
    def create_crop(self, name, quantity, growth_stage=''):
        name = self._clean_name(name)
        require_non_negative(quantity, 'quantity')
        require_within_limit(quantity, 'quantity')

        if Crop.objects.filter(type=name).exists():
            raise Conflict(f"Crop '{name}' already exists.")

        try:
            with transaction.atomic():
                Crop.objects.create(
                    type=name,
                    quantity=quantity,
                    initial_quantity=quantity,
                    growth_stage=growth_stage or '',
                )
        except IntegrityError:
            raise Conflict(f"Crop '{name}' already exists.")

        logger.info(f"Created crop {name} with {quantity} on hand")
        return self.get_crop(name)

    @transaction.atomic
    def restock(self, name, quantity):
        require_positive(quantity, 'quantity')
        crop = self._locked_crop(name)
        require_within_limit(crop.initial_quantity + quantity, 'quantity')

        Crop.objects.filter(pk=crop.pk).update(
            quantity=F('quantity') + quantity,
            initial_quantity=F('initial_quantity') + quantity,
            updated_at=timezone.now(),
        )
        logger.info(f"Restocked crop {crop.type}: +{quantity}")
        return self.get_crop(crop.type)

    @transaction.atomic
    def update_crop(self, name, growth_stage=None, total_cost_of_care=None):
        crop = self._locked_crop(name)
        update_fields = ['updated_at']

        if growth_stage is not None:
            crop.growth_stage = growth_stage
            update_fields.append('growth_stage')

        if total_cost_of_care is not None:
            crop.total_cost_of_care = require_non_negative(total_cost_of_care, 'total_cost_of_care')
            update_fields.append('total_cost_of_care')

        crop.save(update_fields=update_fields)
        logger.info(f"Updated crop {crop.type}: {update_fields[1:]}")
        return self.get_crop(crop.type)

    @transaction.atomic
    def delete_crop(self, name):
        crop = self._locked_crop(name)
        crop.delete()
        logger.info(f"Deleted crop {crop.type} (cascaded sales and costs)")

    # =========================================================================
    # SALES
    # =========================================================================

    @transaction.atomic
    def sell(self, name, quantity, sale_price, notes=''):
        """
        Record a crop sale.

        Same allocation policy as livestock: accrued cost of care divided by
        the cumulative quantity added, frozen on the sale.
        """
        require_positive(quantity, 'quantity')
        require_non_negative(sale_price, 'sale_price')

        crop = self._locked_crop(name)
        if quantity > crop.quantity:
            logger.warning(
                f"Rejected sale of {quantity} {crop.type}: only {crop.quantity} on hand"
            )
            raise InsufficientStock(crop.type, crop.quantity, quantity)

        unit_cost = cost_per_unit(crop.total_cost_of_care, crop.initial_quantity)

        sale = CropSale.objects.create(
            crop=crop,
            quantity=quantity,
            sale_price=sale_price,
            cost_per_unit_at_sale=unit_cost,
            notes=notes or '',
            sale_date=timezone.now(),
        )

        Crop.objects.filter(pk=crop.pk).update(
            quantity=F('quantity') - quantity,
            updated_at=timezone.now(),
        )

        logger.info(f"Sold {quantity} {crop.type} for {sale_price} (cost/unit {unit_cost})")
        return sale

    @transaction.atomic
    def reset_all_sales(self):
        """Delete every crop sale and return the sold quantities to stock."""
        sold_by_crop = defaultdict(int)
        for crop_id, quantity in CropSale.objects.select_for_update().values_list('crop_id', 'quantity'):
            sold_by_crop[crop_id] += quantity

        deleted, _ = CropSale.objects.all().delete()

        restored = {}
        for crop in Crop.objects.select_for_update().filter(pk__in=sold_by_crop):
            quantity = sold_by_crop[crop.pk]
            Crop.objects.filter(pk=crop.pk).update(
                quantity=F('quantity') + quantity,
                updated_at=timezone.now(),
            )
            restored[crop.type] = quantity

        logger.info(f"Reset {deleted} crop sales; restored {restored}")
        return restored

    # =========================================================================
    # COST OF CARE
    # =========================================================================

    @transaction.atomic
    def add_cost(self, name, cost_type, amount, cost_date=None, notes=''):
        require_non_negative(amount, 'amount')
        if cost_type not in CostType.values:
            raise InvalidInput(
                f"Invalid cost type. Must be one of: {', '.join(CostType.values)}"
            )

        crop = self._locked_crop(name)

        entry = CropCost.objects.create(
            crop=crop,
            cost_type=cost_type,
            amount=amount,
            cost_date=cost_date or timezone.localdate(),
            notes=notes or '',
        )

        Crop.objects.filter(pk=crop.pk).update(
            total_cost_of_care=F('total_cost_of_care') + amount,
            updated_at=timezone.now(),
        )

        logger.info(f"Added {cost_type} cost {amount} to crop {crop.type}")
        return entry

    @transaction.atomic
    def reset_cost(self, name):
        """Zero the accrued cost of care; cost entries are kept."""
        crop = self._locked_crop(name)
        crop.total_cost_of_care = Decimal('0.00')
        crop.save(update_fields=['total_cost_of_care', 'updated_at'])

        logger.info(f"Reset cost of care for crop {crop.type}")
        return self.get_crop(crop.type)
