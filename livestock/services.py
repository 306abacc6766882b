"""
Livestock Ledger Service

All mutations of animal balances go through LivestockLedger. Each public
method runs inside one database transaction and takes a row lock on the
balance it changes before validating stock, so a rejected operation leaves
no partial state behind.

Example Usage:
    ledger = LivestockLedger()
    ledger.create_type('Sheep', quantity=10)
    ledger.add_cost('Sheep', Decimal('100'), month='2024-01')
    sale = ledger.sell('Sheep', quantity=4, sale_price=Decimal('500'))
    sale.cost_per_unit  # Decimal('10.0000')
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
    validate_month_label,
)

from .actions import AddCost, AddMore, AddType, RecordLoss, RecordSale, ResetCost
from .models import AnimalSale, AnimalType, CostOfLivingEntry

logger = logging.getLogger(__name__)


class LivestockLedger:
    """Service for animal balances, sales, losses and cost of living."""

    # =========================================================================
    # BALANCES
    # =========================================================================

    def _clean_name(self, name):
        name = (name or '').strip()
        if not name:
            raise InvalidInput("Animal type is required.")
        return name

    def _locked_balance(self, name):
        """Fetch a balance row with a row lock. Must be called inside atomic()."""
        name = self._clean_name(name)
        try:
            return AnimalType.objects.select_for_update().get(type=name)
        except AnimalType.DoesNotExist:
            raise NotFound(f"Animal type '{name}' not found.")

    def get_type(self, name):
        name = self._clean_name(name)
        try:
            return AnimalType.objects.with_total_sales().get(type=name)
        except AnimalType.DoesNotExist:
            raise NotFound(f"Animal type '{name}' not found.")

    @transaction.atomic
    def create_type(self, name, quantity, total_purchase_cost=Decimal('0.00'),
                    total_cost_of_living=Decimal('0.00')):
        """
        Register a new animal type.

        The starting quantity is also the first contribution to the
        cumulative ``initial_quantity`` baseline.
        """
        name = self._clean_name(name)
        require_non_negative(quantity, 'quantity')
        require_within_limit(quantity, 'quantity')
        require_non_negative(total_purchase_cost, 'total_purchase_cost')
        require_non_negative(total_cost_of_living, 'total_cost_of_living')

        if AnimalType.objects.filter(type=name).exists():
            raise Conflict(f"Animal type '{name}' already exists.")

        try:
            with transaction.atomic():
                animal_type = AnimalType.objects.create(
                    type=name,
                    quantity=quantity,
                    initial_quantity=quantity,
                    total_purchase_cost=total_purchase_cost,
                    total_cost_of_living=total_cost_of_living,
                )
        except IntegrityError:
            raise Conflict(f"Animal type '{name}' already exists.")

        logger.info(f"Created animal type {name} with {quantity} on hand")
        return self.get_type(name)

    @transaction.atomic
    def restock(self, name, quantity):
        """Add animals to an existing type (grows both quantity and baseline)."""
        require_positive(quantity, 'quantity')
        animal_type = self._locked_balance(name)
        require_within_limit(animal_type.initial_quantity + quantity, 'quantity')

        AnimalType.objects.filter(pk=animal_type.pk).update(
            quantity=F('quantity') + quantity,
            initial_quantity=F('initial_quantity') + quantity,
            updated_at=timezone.now(),
        )
        logger.info(f"Restocked {animal_type.type}: +{quantity}")
        return self.get_type(animal_type.type)

    @transaction.atomic
    def update_costs(self, name, total_purchase_cost=None, total_cost_of_living=None):
        """Overwrite the cost totals that were provided; leave the others as is."""
        animal_type = self._locked_balance(name)
        update_fields = ['updated_at']

        if total_purchase_cost is not None:
            animal_type.total_purchase_cost = require_non_negative(
                total_purchase_cost, 'total_purchase_cost'
            )
            update_fields.append('total_purchase_cost')

        if total_cost_of_living is not None:
            animal_type.total_cost_of_living = require_non_negative(
                total_cost_of_living, 'total_cost_of_living'
            )
            update_fields.append('total_cost_of_living')

        animal_type.save(update_fields=update_fields)
        logger.info(f"Updated costs for {animal_type.type}: {update_fields[1:]}")
        return self.get_type(animal_type.type)

    @transaction.atomic
    def delete_type(self, name):
        """Delete an animal type together with its sales and cost history."""
        animal_type = self._locked_balance(name)
        animal_type.delete()
        logger.info(f"Deleted animal type {animal_type.type} (cascaded sales and cost history)")

    # =========================================================================
    # SALES & LOSSES
    # =========================================================================

    def _check_stock(self, animal_type, quantity):
        if quantity > animal_type.quantity:
            logger.warning(
                f"Rejected removal of {quantity} {animal_type.type}: "
                f"only {animal_type.quantity} on hand"
            )
            raise InsufficientStock(animal_type.type, animal_type.quantity, quantity)

    @transaction.atomic
    def sell(self, name, quantity, sale_price, notes=''):
        """
        Record a sale.

        The cost per unit is the accrued cost of living divided by the
        cumulative quantity acquired, frozen on the sale record.
        """
        require_positive(quantity, 'quantity')
        require_non_negative(sale_price, 'sale_price')

        animal_type = self._locked_balance(name)
        self._check_stock(animal_type, quantity)

        unit_cost = cost_per_unit(
            animal_type.total_cost_of_living, animal_type.initial_quantity
        )

        sale = AnimalSale.objects.create(
            animal_type=animal_type,
            quantity=quantity,
            sale_price=sale_price,
            cost_per_unit=unit_cost,
            notes=notes or '',
            sale_date=timezone.now(),
        )

        AnimalType.objects.filter(pk=animal_type.pk).update(
            quantity=F('quantity') - quantity,
            updated_at=timezone.now(),
        )

        logger.info(
            f"Sold {quantity} {animal_type.type} for {sale_price} "
            f"(cost/unit {unit_cost})"
        )
        return sale

    @transaction.atomic
    def record_loss(self, name, quantity, notes=''):
        """
        Record animals lost (death, theft).

        Only the quantity on hand changes: no sale record is written and
        costs and sales are untouched.
        """
        require_positive(quantity, 'quantity')

        animal_type = self._locked_balance(name)
        self._check_stock(animal_type, quantity)

        AnimalType.objects.filter(pk=animal_type.pk).update(
            quantity=F('quantity') - quantity,
            updated_at=timezone.now(),
        )

        logger.info(f"Recorded loss of {quantity} {animal_type.type}")
        return self.get_type(animal_type.type)

    @transaction.atomic
    def reset_all_sales(self):
        """
        Delete every animal sale and return the sold quantities to stock.

        Irreversible: the sale history is discarded. Returns the quantity
        restored per animal type.
        """
        # Aggregate before deleting; both happen in this transaction
        sold_by_type = defaultdict(int)
        for type_id, quantity in AnimalSale.objects.select_for_update().values_list(
            'animal_type_id', 'quantity'
        ):
            sold_by_type[type_id] += quantity

        deleted, _ = AnimalSale.objects.all().delete()

        restored = {}
        for animal_type in AnimalType.objects.select_for_update().filter(pk__in=sold_by_type):
            quantity = sold_by_type[animal_type.pk]
            AnimalType.objects.filter(pk=animal_type.pk).update(
                quantity=F('quantity') + quantity,
                updated_at=timezone.now(),
            )
            restored[animal_type.type] = quantity

        logger.info(f"Reset {deleted} animal sales; restored {restored}")
        return restored

    # =========================================================================
    # COST OF LIVING
    # =========================================================================

    @transaction.atomic
    def add_cost(self, name, amount, month, notes=''):
        """
        Append a cost-of-living entry and add it to the running total.

        ``month`` is the period label the cost belongs to (YYYY-MM). It is
        supplied by the caller, never derived from the server clock here.
        """
        require_non_negative(amount, 'amount')
        month = validate_month_label(month)

        animal_type = self._locked_balance(name)

        entry = CostOfLivingEntry.objects.create(
            animal_type=animal_type,
            cost=amount,
            month=month,
            notes=notes or '',
        )

        AnimalType.objects.filter(pk=animal_type.pk).update(
            total_cost_of_living=F('total_cost_of_living') + amount,
            updated_at=timezone.now(),
        )

        logger.info(f"Added cost of living {amount} to {animal_type.type} for {month}")
        return entry

    @transaction.atomic
    def reset_cost(self, name):
        """
        Set the accrued cost of living to zero.

        History entries are kept but no longer add up to the balance, and
        later sales allocate no cost until new entries are added.
        """
        animal_type = self._locked_balance(name)
        animal_type.total_cost_of_living = Decimal('0.00')
        animal_type.save(update_fields=['total_cost_of_living', 'updated_at'])

        logger.info(f"Reset cost of living for {animal_type.type}")
        return self.get_type(animal_type.type)

    # =========================================================================
    # ACTION DISPATCH
    # =========================================================================

    def apply(self, action):
        """Run one livestock action (see livestock.actions)."""
        if isinstance(action, AddType):
            return self.create_type(
                action.name, action.quantity,
                total_purchase_cost=action.total_purchase_cost,
            )
        if isinstance(action, AddMore):
            return self.restock(action.name, action.quantity)
        if isinstance(action, RecordSale):
            return self.sell(action.name, action.quantity, action.sale_price, action.notes)
        if isinstance(action, RecordLoss):
            return self.record_loss(action.name, action.quantity, action.notes)
        if isinstance(action, AddCost):
            return self.add_cost(action.name, action.amount, action.month, action.notes)
        if isinstance(action, ResetCost):
            return self.reset_cost(action.name)
        raise InvalidInput(f"Unsupported livestock action: {type(action).__name__}")
