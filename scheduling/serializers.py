"""
Serializers for the farm schedule.
"""

from rest_framework import serializers

from .models import Recurrence, Task, TaskStatus


class TaskSerializer(serializers.ModelSerializer):
    class Meta:
        model = Task
        fields = [
            'id', 'title', 'description', 'task_date', 'time',
            'status', 'recurrence', 'created_at', 'updated_at',
        ]
        read_only_fields = fields


class TaskCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    task_date = serializers.DateField(input_formats=['%Y-%m-%d'])
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
    time = serializers.TimeField(required=False, allow_null=True, default=None)
    recurrence = serializers.ChoiceField(choices=Recurrence.choices, required=False, default=Recurrence.NONE)


class TaskUpdateSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    task_date = serializers.DateField(input_formats=['%Y-%m-%d'], required=False)
    time = serializers.TimeField(required=False, allow_null=True)
    status = serializers.ChoiceField(choices=TaskStatus.choices, required=False)
    recurrence = serializers.ChoiceField(choices=Recurrence.choices, required=False)


class CalendarQuerySerializer(serializers.Serializer):
    start = serializers.DateField(input_formats=['%Y-%m-%d'], required=False)
    end = serializers.DateField(input_formats=['%Y-%m-%d'], required=False)


class CalendarEventSerializer(serializers.Serializer):
    id = serializers.CharField()
    task_id = serializers.IntegerField()
    title = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateField()
    time = serializers.TimeField(allow_null=True)
    status = serializers.CharField()
    recurrence = serializers.CharField()
