"""
Tests for the Dashboard aggregation

Earnings, costs and profit are recomputed from every ledger on each call.
"""

import io
import pytest
from datetime import date
from decimal import Decimal

from openpyxl import load_workbook

from core.ledger import current_month_label
from crops.models import CostType
from dashboards.services import DashboardService
from equipment import actions as equipment_actions
from equipment.models import AcquisitionType
from equipment.services import EquipmentService
from workforce.models import PaymentType, Role, Worker
from workforce.services import PayrollService


@pytest.mark.django_db
class TestDashboardService:

    def test_empty_farm(self):
        data = DashboardService().compute()

        assert data['summary'] == {
            'totalEarnings': 0.0,
            'totalCosts': 0.0,
            'totalProfit': 0.0,
            'totalAnimals': 0,
            'totalCrops': 0,
        }
        assert data['costDistribution'] == {'Animals': 0.0, 'Crops': 0.0, 'Equipment': 0.0, 'Labor': 0.0}
        assert data['earningsOverTime'] == {}
        assert data['profitOverTime'] == {}

    def test_one_sale_one_cost_same_month(self, livestock, sheep):
        month = current_month_label()
        livestock.add_cost('Sheep', Decimal('100.00'), month)
        livestock.sell('Sheep', 4, Decimal('500.00'))

        data = DashboardService().compute()

        assert data['earningsOverTime'][month] == {'animals': 500.0, 'crops': 0.0}
        assert data['costsOverTime'][month]['animals'] == 100.0
        assert data['profitOverTime'][month] == 400.0
        assert data['summary']['totalProfit'] == 400.0
        assert data['summary']['totalAnimals'] == 6

    def test_month_only_on_one_side(self, livestock, sheep):
        livestock.add_cost('Sheep', Decimal('75.00'), '2020-01')

        data = DashboardService().compute()

        assert data['profitOverTime']['2020-01'] == -75.0
        assert '2020-01' not in data['earningsOverTime']

    def test_all_cost_sources(self, livestock, sheep, crops, maize):
        livestock.add_cost('Sheep', Decimal('100.00'), '2024-01')
        crops.add_cost('Maize', CostType.SEEDS, Decimal('50.00'), cost_date=date(2024, 1, 20))
        crops.sell('Maize', 10, Decimal('200.00'))

        service = EquipmentService()
        tractor = service.add_equipment(equipment_actions.AddEquipment(
            'Tractor', AcquisitionType.PURCHASED, date(2024, 2, 1), Decimal('1000.00'),
        ))
        service.add_maintenance_cost(equipment_actions.AddMaintenanceCost(tractor.pk, Decimal('30.00')))

        role = Role.objects.create(name='Herdsman')
        worker = Worker.objects.create(name='Kofi', role=role, payment_type=PaymentType.DAILY)
        PayrollService().record_payment(worker.pk, Decimal('20.00'), PaymentType.DAILY, date(2024, 2, 3))

        data = DashboardService().compute()

        assert data['costDistribution'] == {
            'Animals': 100.0, 'Crops': 50.0, 'Equipment': 1030.0, 'Labor': 20.0,
        }
        assert data['summary']['totalCosts'] == 1200.0
        assert data['summary']['totalEarnings'] == 200.0
        assert data['summary']['totalCrops'] == 90
        assert data['costsOverTime']['2024-01'] == {
            'animals': 100.0, 'crops': 50.0, 'equipment': 0.0, 'labor': 0.0,
        }
        # maintenance has no date, so it only counts in the totals
        assert data['costsOverTime']['2024-02'] == {
            'animals': 0.0, 'crops': 0.0, 'equipment': 1000.0, 'labor': 20.0,
        }

    def test_reset_cost_drops_total_but_keeps_month(self, livestock, sheep):
        livestock.add_cost('Sheep', Decimal('100.00'), '2024-01')
        livestock.reset_cost('Sheep')

        data = DashboardService().compute()

        assert data['costDistribution']['Animals'] == 0.0
        assert data['costsOverTime']['2024-01']['animals'] == 100.0

    def test_months_sorted_and_read_is_idempotent(self, livestock, sheep):
        for month in ('2024-03', '2023-11', '2024-01'):
            livestock.add_cost('Sheep', Decimal('10.00'), month)

        first = DashboardService().compute()
        second = DashboardService().compute()

        assert list(first['costsOverTime']) == ['2023-11', '2024-01', '2024-03']
        assert first == second


@pytest.mark.django_db
class TestDashboardAPI:

    def test_dashboard_endpoint(self, api_client, livestock, sheep):
        livestock.sell('Sheep', 2, Decimal('300.00'))

        response = api_client.get('/api/dashboard/')

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {
            'summary', 'costDistribution', 'earningsOverTime', 'costsOverTime', 'profitOverTime',
        }
        assert body['summary']['totalEarnings'] == 300.0

    def test_excel_export(self, api_client, livestock, sheep):
        livestock.add_cost('Sheep', Decimal('100.00'), '2024-01')

        response = api_client.get('/api/dashboard/export/')

        assert response.status_code == 200
        assert response['Content-Disposition'].startswith('attachment; filename="farm_dashboard_')
        workbook = load_workbook(io.BytesIO(response.content))
        assert workbook.sheetnames == ['Summary', 'Cost Distribution', 'Monthly']
        monthly = workbook['Monthly']
        assert monthly['A4'].value == '2024-01'
        assert monthly['H4'].value == -100.0
