"""
Tests for Equipment

Purchased equipment accrues maintenance cost; rented equipment accrues
rental transactions. Both kinds feed the dashboard's equipment cost.
"""

import pytest
from datetime import date
from decimal import Decimal

from core.exceptions import InvalidInput, NotFound
from equipment import actions
from equipment.models import AcquisitionType, Equipment, EquipmentTransaction, TransactionType
from equipment.services import EquipmentService


@pytest.fixture
def service():
    return EquipmentService()


@pytest.fixture
def tractor(db, service):
    return service.add_equipment(actions.AddEquipment(
        type='Tractor',
        acquisition_type=AcquisitionType.PURCHASED,
        acquisition_date=date(2024, 1, 10),
        transaction_amount=Decimal('8000.00'),
    ))


@pytest.fixture
def pump(db, service):
    return service.add_equipment(actions.AddEquipment(
        type='Water pump',
        acquisition_type=AcquisitionType.RENTED,
        acquisition_date=date(2024, 2, 1),
        transaction_amount=Decimal('60.00'),
    ))


@pytest.mark.django_db
class TestEquipmentService:

    def test_initial_transaction_recorded(self, tractor):
        entry = EquipmentTransaction.objects.get(equipment=tractor)
        assert entry.transaction_type == TransactionType.PURCHASED
        assert entry.amount == Decimal('8000.00')
        assert entry.transaction_date == date(2024, 1, 10)
        assert tractor.total_transaction_cost == Decimal('8000.00')

    def test_no_amount_no_transaction(self, service, db):
        hoe = service.add_equipment(actions.AddEquipment('Hoe', AcquisitionType.PURCHASED))
        assert not hoe.transactions.exists()
        assert hoe.acquisition_date is not None

    def test_rental_cost_only_for_rented(self, service, pump, tractor):
        service.add_rental_cost(actions.AddRentalCost(pump.pk, Decimal('60.00'), date(2024, 3, 1)))
        assert EquipmentTransaction.objects.filter(
            equipment=pump, transaction_type=TransactionType.RENTAL
        ).count() == 1

        with pytest.raises(InvalidInput):
            service.add_rental_cost(actions.AddRentalCost(tractor.pk, Decimal('60.00')))

    def test_maintenance_only_for_purchased(self, service, pump, tractor):
        service.add_maintenance_cost(actions.AddMaintenanceCost(tractor.pk, Decimal('150.00')))
        service.add_maintenance_cost(actions.AddMaintenanceCost(tractor.pk, Decimal('50.00')))

        tractor.refresh_from_db()
        assert tractor.maintenance_cost == Decimal('200.00')

        with pytest.raises(InvalidInput):
            service.add_maintenance_cost(actions.AddMaintenanceCost(pump.pk, Decimal('10.00')))

    def test_edit_transaction(self, service, tractor):
        entry = tractor.transactions.get()
        service.apply(actions.EditTransaction(entry.pk, Decimal('7500.00'), date(2024, 1, 12), 'Discount'))

        entry.refresh_from_db()
        assert entry.amount == Decimal('7500.00')
        assert entry.notes == 'Discount'

    def test_unknown_equipment(self, service, db):
        with pytest.raises(NotFound):
            service.add_maintenance_cost(actions.AddMaintenanceCost(999, Decimal('1.00')))


@pytest.mark.django_db
class TestEquipmentAPI:

    def test_add_and_list(self, api_client, db):
        response = api_client.post('/api/equipment/', {
            'action': 'add_equipment',
            'type': 'Plough',
            'acquisition_type': 'Purchased',
            'acquisition_date': '2024-04-01',
            'transaction_amount': 1200,
        }, format='json')
        assert response.status_code == 201
        assert response.json()['equipment']['total_transaction_cost'] == 1200.0

        body = api_client.get('/api/equipment/').json()
        assert len(body['equipments']) == 1
        assert body['transactions'][0]['equipment_type'] == 'Plough'

    def test_rental_cost_on_purchased_rejected(self, api_client, tractor):
        response = api_client.post('/api/equipment/', {
            'action': 'add_rental_cost', 'equipment_id': tractor.pk, 'amount': 10,
        }, format='json')
        assert response.status_code == 400
        assert response.json() == {'error': 'This equipment is not rented'}

    def test_maintenance_over_http(self, api_client, tractor):
        response = api_client.post('/api/equipment/', {
            'action': 'add_maintenance_cost', 'equipment_id': tractor.pk, 'amount': 75,
        }, format='json')
        assert response.status_code == 200
        assert response.json()['equipment']['maintenance_cost'] == 75.0

    def test_edit_equipment(self, api_client, pump):
        response = api_client.put('/api/equipment/', {
            'action': 'edit_equipment',
            'id': pump.pk,
            'type': 'Solar pump',
            'acquisition_type': 'Rented',
            'acquisition_date': '2024-02-02',
        }, format='json')
        assert response.status_code == 200
        assert response.json()['equipment']['type'] == 'Solar pump'

    def test_invalid_action(self, api_client, db):
        response = api_client.post('/api/equipment/', {'action': 'edit_equipment'}, format='json')
        assert response.status_code == 400
        assert response.json() == {'error': 'Invalid action'}

    def test_delete(self, api_client, tractor):
        response = api_client.delete('/api/equipment/', {'id': tractor.pk}, format='json')
        assert response.status_code == 200
        assert not Equipment.objects.exists()
        assert not EquipmentTransaction.objects.exists()

        response = api_client.delete('/api/equipment/', {'id': tractor.pk}, format='json')
        assert response.status_code == 404
