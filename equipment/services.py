"""
Equipment Service

Handles the equipment register and the money spent on equipment:
- Registering purchased or rented equipment (with an optional initial
  transaction)
- Rental payments (rented equipment only)
- Maintenance costs (purchased equipment only)
- Editing equipment and transactions
"""

import logging

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from core.exceptions import InvalidInput, NotFound
from core.ledger import require_non_negative, require_positive

from .actions import (
    AddEquipment,
    AddMaintenanceCost,
    AddRentalCost,
    EditEquipment,
    EditTransaction,
)
from .models import AcquisitionType, Equipment, EquipmentTransaction, TransactionType

logger = logging.getLogger(__name__)


class EquipmentService:
    """Service for equipment records and equipment spending."""

    def _validate_acquisition_type(self, acquisition_type):
        if acquisition_type not in AcquisitionType.values:
            raise InvalidInput(
                f"Invalid acquisition type. Must be one of: {', '.join(AcquisitionType.values)}"
            )

    def _locked_equipment(self, equipment_id):
        try:
            return Equipment.objects.select_for_update().get(pk=equipment_id)
        except Equipment.DoesNotExist:
            raise NotFound("Equipment not found")

    def get_equipment(self, equipment_id):
        try:
            return Equipment.objects.with_transaction_cost().get(pk=equipment_id)
        except Equipment.DoesNotExist:
            raise NotFound("Equipment not found")

    @transaction.atomic
    def add_equipment(self, action: AddEquipment):
        """
        Register equipment. When a transaction amount is given, the purchase
        price (or first rental payment) is recorded as a transaction dated
        on the acquisition date.
        """
        if not (action.type or '').strip():
            raise InvalidInput("Type and acquisition type are required")
        self._validate_acquisition_type(action.acquisition_type)

        acquisition_date = action.acquisition_date or timezone.localdate()
        equipment = Equipment.objects.create(
            type=action.type.strip(),
            acquisition_type=action.acquisition_type,
            acquisition_date=acquisition_date,
            notes=action.notes or '',
        )

        if action.transaction_amount is not None:
            require_non_negative(action.transaction_amount, 'transaction_amount')
            EquipmentTransaction.objects.create(
                equipment=equipment,
                transaction_type=action.acquisition_type,
                amount=action.transaction_amount,
                transaction_date=acquisition_date,
                notes=action.notes or '',
            )

        logger.info(f"Registered {action.acquisition_type.lower()} equipment {equipment.type}")
        return self.get_equipment(equipment.pk)

    @transaction.atomic
    def add_rental_cost(self, action: AddRentalCost):
        require_positive(action.amount, 'amount')
        equipment = self._locked_equipment(action.equipment_id)
        if equipment.acquisition_type != AcquisitionType.RENTED:
            raise InvalidInput("This equipment is not rented")

        entry = EquipmentTransaction.objects.create(
            equipment=equipment,
            transaction_type=TransactionType.RENTAL,
            amount=action.amount,
            transaction_date=action.transaction_date or timezone.localdate(),
            notes=action.notes or '',
        )
        logger.info(f"Recorded rental payment {action.amount} for {equipment.type}")
        return entry

    @transaction.atomic
    def add_maintenance_cost(self, action: AddMaintenanceCost):
        require_positive(action.amount, 'amount')
        equipment = self._locked_equipment(action.equipment_id)
        if equipment.acquisition_type != AcquisitionType.PURCHASED:
            raise InvalidInput("This equipment is not purchased")

        Equipment.objects.filter(pk=equipment.pk).update(
            maintenance_cost=F('maintenance_cost') + action.amount,
            updated_at=timezone.now(),
        )
        logger.info(f"Added maintenance cost {action.amount} to {equipment.type}")
        return self.get_equipment(equipment.pk)

    @transaction.atomic
    def edit_equipment(self, action: EditEquipment):
        self._validate_acquisition_type(action.acquisition_type)
        equipment = self._locked_equipment(action.id)

        equipment.type = action.type
        equipment.acquisition_type = action.acquisition_type
        equipment.acquisition_date = action.acquisition_date
        equipment.notes = action.notes or ''
        equipment.save()

        logger.info(f"Updated equipment {equipment.pk}")
        return self.get_equipment(equipment.pk)

    @transaction.atomic
    def edit_transaction(self, action: EditTransaction):
        require_non_negative(action.amount, 'amount')
        try:
            entry = EquipmentTransaction.objects.select_for_update().get(pk=action.id)
        except EquipmentTransaction.DoesNotExist:
            raise NotFound("Transaction not found")

        entry.amount = action.amount
        entry.transaction_date = action.transaction_date
        entry.notes = action.notes or ''
        entry.save(update_fields=['amount', 'transaction_date', 'notes'])

        logger.info(f"Updated equipment transaction {entry.pk}")
        return entry

    @transaction.atomic
    def delete_equipment(self, equipment_id):
        equipment = self._locked_equipment(equipment_id)
        equipment.delete()
        logger.info(f"Deleted equipment {equipment_id} (cascaded transactions)")

    def apply(self, action):
        handlers = {
            AddEquipment: self.add_equipment,
            AddRentalCost: self.add_rental_cost,
            AddMaintenanceCost: self.add_maintenance_cost,
            EditEquipment: self.edit_equipment,
            EditTransaction: self.edit_transaction,
        }
        handler = handlers.get(type(action))
        if handler is None:
            raise InvalidInput(f"Unsupported equipment action: {type(action).__name__}")
        return handler(action)
