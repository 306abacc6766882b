"""
Tests for the farm schedule

Recurring tasks are stored once and expanded into dated occurrences for the
calendar window.
"""

import pytest
from datetime import date, time

from core.exceptions import InvalidInput, NotFound
from scheduling.models import Recurrence, Task, TaskStatus
from scheduling.services import ScheduleService, expand_occurrences


def make_task(task_date, recurrence):
    return Task(title='t', task_date=task_date, recurrence=recurrence)


# ==============================================================================
# TEST: OCCURRENCE EXPANSION
# ==============================================================================

class TestExpandOccurrences:

    def test_one_off_inside_and_outside_window(self):
        task = make_task(date(2024, 5, 10), Recurrence.NONE)
        assert expand_occurrences(task, date(2024, 5, 1), date(2024, 5, 31)) == [date(2024, 5, 10)]
        assert expand_occurrences(task, date(2024, 6, 1), date(2024, 6, 30)) == []

    def test_daily(self):
        task = make_task(date(2024, 1, 1), Recurrence.DAILY)
        dates = expand_occurrences(task, date(2024, 3, 1), date(2024, 3, 3))
        assert dates == [date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 3)]

    def test_weekly_starts_on_first_matching_weekday(self):
        task = make_task(date(2024, 1, 1), Recurrence.WEEKLY)  # a Monday
        dates = expand_occurrences(task, date(2024, 1, 3), date(2024, 1, 22))
        assert dates == [date(2024, 1, 8), date(2024, 1, 15), date(2024, 1, 22)]

    def test_monthly_clamps_to_month_end(self):
        task = make_task(date(2024, 1, 31), Recurrence.MONTHLY)
        dates = expand_occurrences(task, date(2024, 1, 1), date(2024, 4, 30))
        assert dates == [date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 31), date(2024, 4, 30)]

    def test_nothing_before_first_date(self):
        task = make_task(date(2024, 6, 15), Recurrence.DAILY)
        dates = expand_occurrences(task, date(2024, 6, 1), date(2024, 6, 16))
        assert dates == [date(2024, 6, 15), date(2024, 6, 16)]

    def test_inverted_window(self):
        task = make_task(date(2024, 6, 15), Recurrence.DAILY)
        assert expand_occurrences(task, date(2024, 6, 20), date(2024, 6, 1)) == []


# ==============================================================================
# TEST: TASK SERVICE & API
# ==============================================================================

@pytest.mark.django_db
class TestScheduleService:

    def test_create_forces_pending(self):
        task = ScheduleService().create_task('Vaccinate', date(2024, 5, 1))
        assert task.status == TaskStatus.PENDING
        assert task.recurrence == Recurrence.NONE

    def test_partial_update(self):
        service = ScheduleService()
        task = service.create_task('Vaccinate', date(2024, 5, 1), description='Goats')

        service.update_task(task.pk, status=TaskStatus.DONE)

        task.refresh_from_db()
        assert task.status == TaskStatus.DONE
        assert task.description == 'Goats'

    def test_empty_update_rejected(self):
        task = ScheduleService().create_task('Vaccinate', date(2024, 5, 1))
        with pytest.raises(InvalidInput):
            ScheduleService().update_task(task.pk)

    def test_unknown_task(self):
        with pytest.raises(NotFound):
            ScheduleService().update_task(999, title='x')
        with pytest.raises(NotFound):
            ScheduleService().delete_task(999)

    def test_calendar_event_ids(self):
        service = ScheduleService()
        once = service.create_task('Vet visit', date(2024, 5, 2), time=time(9, 0))
        daily = service.create_task('Feed', date(2024, 5, 1), recurrence=Recurrence.DAILY)

        events = service.calendar(date(2024, 5, 1), date(2024, 5, 2))

        ids = [e['id'] for e in events]
        # timed events sort ahead of untimed ones on the same day
        assert ids == [f'{daily.pk}-2024-05-01', str(once.pk), f'{daily.pk}-2024-05-02']


@pytest.mark.django_db
class TestScheduleAPI:

    def test_crud(self, api_client):
        response = api_client.post('/api/schedule/tasks/', {
            'title': 'Milk cows', 'task_date': '2024-05-01', 'recurrence': 'Daily', 'time': '06:30',
        }, format='json')
        assert response.status_code == 201
        task_id = response.json()['task']['id']
        assert response.json()['task']['status'] == 'Pending'

        response = api_client.put('/api/schedule/tasks/', {'id': task_id, 'status': 'Postponed'}, format='json')
        assert response.status_code == 200
        assert response.json()['task']['status'] == 'Postponed'

        assert len(api_client.get('/api/schedule/tasks/').json()) == 1

        response = api_client.delete('/api/schedule/tasks/', {'id': task_id}, format='json')
        assert response.status_code == 200
        assert not Task.objects.exists()

    def test_create_requires_title_and_date(self, api_client):
        response = api_client.post('/api/schedule/tasks/', {'title': 'No date'}, format='json')
        assert response.status_code == 400
        assert response.json()['error'].startswith('task_date:')

    def test_delete_rejects_non_numeric_id(self, api_client):
        response = api_client.delete('/api/schedule/tasks/', {'id': 'abc'}, format='json')
        assert response.status_code == 400
        assert response.json() == {'error': 'Task ID must be a number'}

    def test_invalid_recurrence(self, api_client):
        response = api_client.post('/api/schedule/tasks/', {
            'title': 'x', 'task_date': '2024-05-01', 'recurrence': 'Yearly',
        }, format='json')
        assert response.status_code == 400

    def test_put_without_changes(self, api_client):
        task = ScheduleService().create_task('x', date(2024, 5, 1))
        response = api_client.put('/api/schedule/tasks/', {'id': task.pk}, format='json')
        assert response.status_code == 400
        assert response.json() == {'error': 'No updates provided'}

    def test_put_requires_id(self, api_client):
        response = api_client.put('/api/schedule/tasks/', {'status': 'Done'}, format='json')
        assert response.status_code == 400
        assert response.json() == {'error': 'Task ID is required'}

    def test_calendar(self, api_client):
        ScheduleService().create_task('Pay salaries', date(2024, 1, 31), recurrence=Recurrence.MONTHLY)

        response = api_client.get('/api/schedule/calendar/?start=2024-02-01&end=2024-03-31')

        assert response.status_code == 200
        assert [e['date'] for e in response.json()] == ['2024-02-29', '2024-03-31']

    def test_calendar_bad_window(self, api_client):
        response = api_client.get('/api/schedule/calendar/?start=2024-03-01&end=2024-02-01')
        assert response.status_code == 400
