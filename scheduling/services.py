"""
Schedule Service

Task CRUD plus expansion of recurring tasks into dated occurrences for
the calendar.
"""

import logging
from datetime import timedelta

from dateutil.relativedelta import relativedelta
from django.conf import settings
from django.db import transaction
from django.utils import timezone

from core.exceptions import InvalidInput, NotFound

from .models import Recurrence, Task, TaskStatus

logger = logging.getLogger(__name__)


STEPS = {
    Recurrence.DAILY: lambda n: relativedelta(days=n),
    Recurrence.WEEKLY: lambda n: relativedelta(weeks=n),
    Recurrence.MONTHLY: lambda n: relativedelta(months=n),
}


def expand_occurrences(task, window_start, window_end):
    """
    Return the dates in [window_start, window_end] on which ``task`` occurs.

    Each occurrence is computed from the first date rather than from the
    previous occurrence, so a monthly task on the 31st falls on the last
    day of shorter months and returns to the 31st afterwards.
    """
    if window_end < window_start:
        return []

    if task.recurrence == Recurrence.NONE:
        if window_start <= task.task_date <= window_end:
            return [task.task_date]
        return []

    step = STEPS[task.recurrence]
    dates = []
    n = 0

    # Skip straight to the window for daily and weekly tasks
    if task.task_date < window_start and task.recurrence in (Recurrence.DAILY, Recurrence.WEEKLY):
        stride = 1 if task.recurrence == Recurrence.DAILY else 7
        n = (window_start - task.task_date).days // stride

    while True:
        occurrence = task.task_date + step(n)
        if occurrence > window_end:
            break
        if occurrence >= window_start:
            dates.append(occurrence)
        n += 1
    return dates


class ScheduleService:
    """Service for farm tasks."""

    UPDATABLE_FIELDS = ('title', 'description', 'task_date', 'time', 'status', 'recurrence')

    def get_task(self, task_id):
        try:
            return Task.objects.get(pk=task_id)
        except Task.DoesNotExist:
            raise NotFound("Task not found")

    @transaction.atomic
    def create_task(self, title, task_date, description='', time=None, recurrence=Recurrence.NONE):
        if not (title or '').strip() or task_date is None:
            raise InvalidInput("Title and date are required")

        task = Task.objects.create(
            title=title.strip(),
            description=description or '',
            task_date=task_date,
            time=time,
            status=TaskStatus.PENDING,
            recurrence=recurrence or Recurrence.NONE,
        )
        logger.info(f"Scheduled task {task.pk} '{task.title}' ({task.recurrence})")
        return task

    @transaction.atomic
    def update_task(self, task_id, **changes):
        changes = {k: v for k, v in changes.items() if k in self.UPDATABLE_FIELDS}
        if not changes:
            raise InvalidInput("No updates provided")

        try:
            task = Task.objects.select_for_update().get(pk=task_id)
        except Task.DoesNotExist:
            raise NotFound("Task not found")

        for field, value in changes.items():
            if field == 'description':
                value = value or ''
            setattr(task, field, value)
        task.save(update_fields=[*changes, 'updated_at'])

        logger.info(f"Updated task {task.pk}: {sorted(changes)}")
        return task

    @transaction.atomic
    def delete_task(self, task_id):
        deleted, _ = Task.objects.filter(pk=task_id).delete()
        if not deleted:
            raise NotFound("Task not found")
        logger.info(f"Deleted task {task_id}")

    def calendar(self, start=None, end=None):
        """
        Expand every task into calendar events between ``start`` and ``end``
        (inclusive). Defaults to today through SCHEDULE_EXPANSION_DAYS ahead.
        """
        start = start or timezone.localdate()
        end = end or start + timedelta(days=settings.SCHEDULE_EXPANSION_DAYS)
        if end < start:
            raise InvalidInput("'end' must not be before 'start'")

        events = []
        for task in Task.objects.filter(task_date__lte=end):
            for occurrence in expand_occurrences(task, start, end):
                events.append({
                    'id': f"{task.pk}-{occurrence.isoformat()}" if task.is_recurring else str(task.pk),
                    'task_id': task.pk,
                    'title': task.title,
                    'description': task.description,
                    'date': occurrence,
                    'time': task.time,
                    'status': task.status,
                    'recurrence': task.recurrence,
                })

        events.sort(key=lambda e: (e['date'], e['time'] is None, e['time'] or '', e['task_id']))
        return events
