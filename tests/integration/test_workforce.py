"""
Tests for Workforce

Salary payments are the labor cost source for the dashboard. A payment is
only accepted for an active worker and must match the worker's payment type.
"""

import pytest
from datetime import date
from decimal import Decimal

from core.exceptions import InvalidInput, NotFound
from workforce.models import PaymentType, ResponsibilityArea, Role, SalaryPayment, Worker
from workforce.services import PayrollService


@pytest.fixture
def herdsman(db):
    return Role.objects.create(name='Herdsman')


@pytest.fixture
def worker(db, herdsman):
    return Worker.objects.create(
        name='Kofi Mensah',
        role=herdsman,
        payment_type=PaymentType.MONTHLY,
        payment_rate=Decimal('400.00'),
    )


@pytest.fixture
def tasker(db, herdsman):
    return Worker.objects.create(name='Ama Owusu', role=herdsman, payment_type=PaymentType.PER_TASK)


@pytest.mark.django_db
class TestPayrollService:

    def test_record_payment(self, worker):
        payment = PayrollService().record_payment(
            worker.pk, Decimal('400.00'), PaymentType.MONTHLY, date(2024, 1, 31)
        )
        assert payment.worker == worker
        assert payment.payment_date == date(2024, 1, 31)

    def test_payment_type_must_match(self, worker):
        with pytest.raises(InvalidInput) as excinfo:
            PayrollService().record_payment(worker.pk, Decimal('20.00'), PaymentType.DAILY)
        assert 'mismatch' in str(excinfo.value.detail)
        assert not SalaryPayment.objects.exists()

    def test_per_task_requires_description(self, tasker):
        with pytest.raises(InvalidInput):
            PayrollService().record_payment(tasker.pk, Decimal('25.00'), PaymentType.PER_TASK)

        payment = PayrollService().record_payment(
            tasker.pk, Decimal('25.00'), PaymentType.PER_TASK, task_description='Weeding'
        )
        assert payment.task_description == 'Weeding'

    def test_inactive_worker_cannot_be_paid(self, worker):
        PayrollService().deactivate_worker(worker.pk)

        with pytest.raises(NotFound):
            PayrollService().record_payment(worker.pk, Decimal('400.00'), PaymentType.MONTHLY)

    def test_negative_amount_rejected(self, worker):
        with pytest.raises(InvalidInput):
            PayrollService().record_payment(worker.pk, Decimal('-1.00'), PaymentType.MONTHLY)


@pytest.mark.django_db
class TestWorkforceAPI:

    def test_roles_and_areas(self, api_client, db):
        response = api_client.post('/api/workforce/roles/', {'name': 'Picker'}, format='json')
        assert response.status_code == 201
        response = api_client.post(
            '/api/workforce/responsibility-areas/', {'name': 'North field'}, format='json'
        )
        assert response.status_code == 201

        assert [r['name'] for r in api_client.get('/api/workforce/roles/').json()] == ['Picker']
        assert ResponsibilityArea.objects.count() == 1

    def test_duplicate_role_rejected(self, api_client, herdsman):
        response = api_client.post('/api/workforce/roles/', {'name': 'Herdsman'}, format='json')
        assert response.status_code == 400
        assert response.json()['error'].startswith('name:')

    def test_worker_total_payments(self, api_client, worker):
        PayrollService().record_payment(worker.pk, Decimal('400.00'), PaymentType.MONTHLY)
        PayrollService().record_payment(worker.pk, Decimal('100.00'), PaymentType.MONTHLY)

        body = api_client.get('/api/workforce/workers/').json()

        assert body[0]['total_payments'] == 500.0
        assert body[0]['role_name'] == 'Herdsman'

    def test_create_worker(self, api_client, herdsman):
        response = api_client.post('/api/workforce/workers/', {
            'name': 'Yaw Boateng',
            'role': herdsman.pk,
            'payment_type': 'Daily',
            'payment_rate': '15.00',
        }, format='json')
        assert response.status_code == 201
        assert response.json()['is_active'] is True
        assert response.json()['total_payments'] == 0.0

    def test_deactivate_worker(self, api_client, worker):
        response = api_client.delete(f'/api/workforce/workers/{worker.pk}/')
        assert response.status_code == 200

        worker.refresh_from_db()
        assert worker.is_active is False

    def test_salary_payment_over_http(self, api_client, worker, tasker):
        response = api_client.post('/api/workforce/salary-payments/', {
            'worker_id': worker.pk, 'amount': 400, 'payment_type': 'Monthly',
            'payment_date': '2024-02-29',
        }, format='json')
        assert response.status_code == 201
        assert response.json()['worker_name'] == 'Kofi Mensah'

        PayrollService().record_payment(
            tasker.pk, Decimal('25.00'), PaymentType.PER_TASK, task_description='Harvest'
        )
        filtered = api_client.get(f'/api/workforce/salary-payments/?worker={worker.pk}').json()
        assert len(filtered) == 1

    def test_salary_payment_mismatch_over_http(self, api_client, worker):
        response = api_client.post('/api/workforce/salary-payments/', {
            'worker_id': worker.pk, 'amount': 10, 'payment_type': 'Daily',
        }, format='json')
        assert response.status_code == 400
        assert 'Payment type mismatch' in response.json()['error']

    def test_salary_payment_unknown_worker(self, api_client, db):
        response = api_client.post('/api/workforce/salary-payments/', {
            'worker_id': 999, 'amount': 10, 'payment_type': 'Daily',
        }, format='json')
        assert response.status_code == 404

    def test_salary_payment_filter_rejects_non_numeric_worker(self, api_client, worker):
        response = api_client.get('/api/workforce/salary-payments/?worker=abc')
        assert response.status_code == 400
        assert response.json() == {'error': 'Worker ID must be a number'}
