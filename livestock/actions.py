"""
Livestock actions.

The livestock dashboard drives six different mutations from one form. Each
mutation is its own frozen dataclass carrying exactly the fields it needs;
``LivestockLedger.apply`` dispatches on the class.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class AddType:
    name: str
    quantity: int
    total_purchase_cost: Decimal = Decimal('0.00')


@dataclass(frozen=True)
class AddMore:
    name: str
    quantity: int


@dataclass(frozen=True)
class RecordSale:
    name: str
    quantity: int
    sale_price: Decimal
    notes: str = ''


@dataclass(frozen=True)
class RecordLoss:
    name: str
    quantity: int
    notes: str = ''


@dataclass(frozen=True)
class AddCost:
    name: str
    amount: Decimal
    month: str
    notes: str = ''


@dataclass(frozen=True)
class ResetCost:
    name: str
