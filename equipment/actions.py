"""
Equipment actions, one frozen dataclass per mutation the equipment page can
request. ``EquipmentService.apply`` dispatches on the class.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class AddEquipment:
    type: str
    acquisition_type: str
    acquisition_date: Optional[date] = None
    transaction_amount: Optional[Decimal] = None
    notes: str = ''


@dataclass(frozen=True)
class AddRentalCost:
    equipment_id: int
    amount: Decimal
    transaction_date: Optional[date] = None
    notes: str = ''


@dataclass(frozen=True)
class AddMaintenanceCost:
    equipment_id: int
    amount: Decimal


@dataclass(frozen=True)
class EditEquipment:
    id: int
    type: str
    acquisition_type: str
    acquisition_date: date
    notes: str = ''


@dataclass(frozen=True)
class EditTransaction:
    id: int
    amount: Decimal
    transaction_date: date
    notes: str = ''
