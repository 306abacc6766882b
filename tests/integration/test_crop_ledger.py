"""
Tests for the Crop Ledger

Crops follow the same rules as livestock (one cost allocation policy,
stock never below zero, reset restores stock) but have no loss operation
and record typed, dated cost-of-care entries.
"""

import pytest
from datetime import date
from decimal import Decimal

from core.exceptions import Conflict, InsufficientStock, InvalidInput, NotFound
from core.ledger import MAX_QUANTITY
from crops.models import CostType, Crop, CropCost, CropSale


def reload(name):
    return Crop.objects.with_total_sales().get(type=name)


@pytest.mark.django_db
class TestCropLedger:

    def test_sale_uses_cumulative_baseline(self, crops, maize):
        crops.add_cost('Maize', CostType.FERTILIZER, Decimal('200.00'), cost_date=date(2024, 3, 5))

        first = crops.sell('Maize', 50, Decimal('300.00'))
        second = crops.sell('Maize', 25, Decimal('150.00'))

        assert first.cost_per_unit_at_sale == Decimal('2.0000')
        assert second.cost_per_unit_at_sale == Decimal('2.0000')
        maize = reload('Maize')
        assert maize.quantity == 25
        assert maize.total_sales == Decimal('450.00')

    def test_oversell_leaves_state_untouched(self, crops, maize):
        with pytest.raises(InsufficientStock) as excinfo:
            crops.sell('Maize', 101, Decimal('10.00'))

        assert 'Available: 100, Requested: 101' in str(excinfo.value.detail)
        assert reload('Maize').quantity == 100
        assert not CropSale.objects.exists()

    def test_restock_grows_baseline(self, crops, maize):
        crops.add_cost('Maize', CostType.SEEDS, Decimal('300.00'))
        crops.restock('Maize', 50)

        sale = crops.sell('Maize', 10, Decimal('100.00'))

        assert reload('Maize').initial_quantity == 150
        assert sale.cost_per_unit_at_sale == Decimal('2.0000')

    def test_restock_past_column_limit_rejected(self, crops, maize):
        with pytest.raises(InvalidInput):
            crops.restock('Maize', MAX_QUANTITY)

        assert reload('Maize').quantity == 100

    def test_reset_all_sales_restores_stock(self, crops, maize):
        crops.create_crop('Beans', 40)
        crops.sell('Maize', 30, Decimal('90.00'))
        crops.sell('Beans', 10, Decimal('50.00'))

        restored = crops.reset_all_sales()

        assert restored == {'Maize': 30, 'Beans': 10}
        assert reload('Maize').quantity == 100
        assert reload('Beans').quantity == 40
        assert reload('Maize').total_sales == Decimal('0.00')
        assert not CropSale.objects.exists()

    def test_cost_entry_defaults_to_today(self, crops, maize):
        entry = crops.add_cost('Maize', CostType.WATER, Decimal('12.50'))
        assert entry.cost_date is not None
        assert reload('Maize').total_cost_of_care == Decimal('12.50')

    def test_invalid_cost_type_rejected(self, crops, maize):
        with pytest.raises(InvalidInput):
            crops.add_cost('Maize', 'Magic', Decimal('1.00'))
        assert not CropCost.objects.exists()

    def test_reset_cost_keeps_entries(self, crops, maize):
        crops.add_cost('Maize', CostType.LABOR, Decimal('80.00'))
        crops.reset_cost('Maize')

        assert reload('Maize').total_cost_of_care == Decimal('0.00')
        assert CropCost.objects.count() == 1

    def test_update_crop(self, crops, maize):
        crops.update_crop('Maize', growth_stage='Harvested', total_cost_of_care=Decimal('10.00'))
        maize = reload('Maize')
        assert maize.growth_stage == 'Harvested'
        assert maize.total_cost_of_care == Decimal('10.00')

    def test_duplicate_and_unknown(self, crops, maize):
        with pytest.raises(Conflict):
            crops.create_crop('Maize', 1)
        with pytest.raises(NotFound):
            crops.sell('Rice', 1, Decimal('1.00'))


@pytest.mark.django_db
class TestCropAPI:

    def test_list(self, api_client, crops, maize):
        crops.add_cost('Maize', CostType.SEEDS, Decimal('20.00'))

        response = api_client.get('/api/crops/')

        assert response.status_code == 200
        body = response.json()
        assert body['crops'][0]['type'] == 'Maize'
        assert len(body['costs']) == 1
        assert body['sales'] == []

    def test_create_and_conflict(self, api_client, db):
        response = api_client.post('/api/crops/', {'type': 'Rice', 'quantity': 10}, format='json')
        assert response.status_code == 201

        response = api_client.post('/api/crops/', {'type': 'Rice', 'quantity': 10}, format='json')
        assert response.status_code == 409

    def test_sale(self, api_client, maize):
        response = api_client.post(
            '/api/crops/sales/', {'type': 'Maize', 'quantity': 10, 'sale_price': 70}, format='json'
        )
        assert response.status_code == 201
        assert reload('Maize').quantity == 90

    def test_loss_not_supported(self, api_client, maize):
        response = api_client.post(
            '/api/crops/sales/', {'type': 'Maize', 'quantity': 10, 'isLoss': True}, format='json'
        )
        assert response.status_code == 400
        assert response.json()['error'] == 'Loss recording is not supported for crops.'
        assert reload('Maize').quantity == 100

    def test_oversell(self, api_client, maize):
        response = api_client.post(
            '/api/crops/sales/', {'type': 'Maize', 'quantity': 500, 'sale_price': 1}, format='json'
        )
        assert response.status_code == 400
        assert 'Available: 100' in response.json()['error']

    def test_cost_and_reset(self, api_client, maize):
        response = api_client.post(
            '/api/crops/costs/',
            {'type': 'Maize', 'cost_type': 'Pesticide', 'amount': 40, 'cost_date': '2024-06-01'},
            format='json',
        )
        assert response.status_code == 201
        assert response.json()['crop']['total_cost_of_care'] == 40.0

        response = api_client.post('/api/crops/costs/reset/', {'type': 'Maize'}, format='json')
        assert response.status_code == 200
        assert response.json()['crop']['total_cost_of_care'] == 0.0

    def test_put_and_delete(self, api_client, maize):
        response = api_client.put(
            '/api/crops/', {'type': 'Maize', 'add_quantity': 5, 'growth_stage': 'Tasseling'}, format='json'
        )
        assert response.status_code == 200
        assert response.json()['quantity'] == 105
        assert response.json()['growth_stage'] == 'Tasseling'

        response = api_client.delete('/api/crops/?type=Maize')
        assert response.status_code == 200
        assert not Crop.objects.exists()

    def test_delete_unknown(self, api_client, db):
        response = api_client.delete('/api/crops/?type=Rice')
        assert response.status_code == 404
        assert response.json() == {'error': "Crop 'Rice' not found."}
