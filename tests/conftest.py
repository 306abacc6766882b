"""
Shared fixtures for the farm ledger tests.
"""

import pytest
from decimal import Decimal
from rest_framework.test import APIClient

from crops.services import CropLedger
from livestock.services import LivestockLedger


@pytest.fixture
def api_client():
    """Unauthenticated API client (the ledger API has no auth)."""
    return APIClient()


@pytest.fixture
def livestock():
    return LivestockLedger()


@pytest.fixture
def crops():
    return CropLedger()


@pytest.fixture
def sheep(db, livestock):
    """Sheep: 10 on hand, nothing spent yet."""
    return livestock.create_type('Sheep', 10, total_purchase_cost=Decimal('1500.00'))


@pytest.fixture
def maize(db, crops):
    """Maize: 100 units, seedling stage."""
    return crops.create_crop('Maize', 100, 'Seedling')
