"""
Scheduling Models

Task - a farm task on a date, optionally repeating daily, weekly or monthly.
Recurring tasks are stored once and expanded into occurrences on read.
"""

from django.db import models


class TaskStatus(models.TextChoices):
    PENDING = 'Pending', 'Pending'
    DONE = 'Done', 'Done'
    POSTPONED = 'Postponed', 'Postponed'


class Recurrence(models.TextChoices):
    NONE = 'None', 'None'
    DAILY = 'Daily', 'Daily'
    WEEKLY = 'Weekly', 'Weekly'
    MONTHLY = 'Monthly', 'Monthly'


class Task(models.Model):

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    task_date = models.DateField(db_index=True, help_text="Date of the first occurrence")
    time = models.TimeField(null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=TaskStatus.choices,
        default=TaskStatus.PENDING,
    )

    recurrence = models.CharField(
        max_length=20,
        choices=Recurrence.choices,
        default=Recurrence.NONE,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tasks'
        ordering = ['task_date', 'time', 'id']

    def __str__(self):
        return f"{self.title} on {self.task_date}"

    @property
    def is_recurring(self):
        return self.recurrence != Recurrence.NONE
