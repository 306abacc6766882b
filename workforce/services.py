"""
Workforce Service

Records salary payments. A payment is only accepted for an active worker,
with the worker's own payment type, and Per Task payments must say which
task they pay for.
"""

import logging

from django.db import transaction
from django.utils import timezone

from core.exceptions import InvalidInput, NotFound
from core.ledger import require_non_negative

from .models import PaymentType, SalaryPayment, Worker

logger = logging.getLogger(__name__)


class PayrollService:
    """Service for salary payments and worker status."""

    def _active_worker(self, worker_id):
        try:
            return Worker.objects.active().select_for_update().get(pk=worker_id)
        except Worker.DoesNotExist:
            raise NotFound("Worker not found or not active")

    @transaction.atomic
    def record_payment(self, worker_id, amount, payment_type, payment_date=None,
                       task_description='', notes=''):
        require_non_negative(amount, 'amount')
        if payment_type not in PaymentType.values:
            raise InvalidInput(
                f"Invalid payment_type: must be {', '.join(PaymentType.values)}"
            )
        if payment_type == PaymentType.PER_TASK and not (task_description or '').strip():
            raise InvalidInput("Task description is required for Per Task payments")

        worker = self._active_worker(worker_id)
        if worker.payment_type != payment_type:
            raise InvalidInput(
                f"Payment type mismatch: worker is paid {worker.payment_type}, "
                f"but payment is recorded as {payment_type}"
            )

        payment = SalaryPayment.objects.create(
            worker=worker,
            amount=amount,
            payment_date=payment_date or timezone.localdate(),
            payment_type=payment_type,
            task_description=task_description or '',
            notes=notes or '',
        )
        logger.info(f"Recorded {payment_type} payment of {amount} to {worker.name}")
        return payment

    @transaction.atomic
    def deactivate_worker(self, worker_id):
        """Workers with payment history are deactivated rather than deleted."""
        try:
            worker = Worker.objects.select_for_update().get(pk=worker_id)
        except Worker.DoesNotExist:
            raise NotFound("Worker not found")

        if worker.is_active:
            worker.is_active = False
            worker.save(update_fields=['is_active', 'updated_at'])
            logger.info(f"Deactivated worker {worker.name}")
        return worker
