"""
Views for the farm schedule.

API Endpoints:
- /api/schedule/tasks/     - List, add, update (by id in body), delete (by id in body)
- /api/schedule/calendar/  - Occurrences of all tasks in a date window
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import InvalidInput
from .models import Task
from .serializers import (
    CalendarEventSerializer,
    CalendarQuerySerializer,
    TaskCreateSerializer,
    TaskSerializer,
    TaskUpdateSerializer,
)
from .services import ScheduleService


class TaskView(APIView):
    """
    GET    /api/schedule/tasks/
    POST   /api/schedule/tasks/
    PUT    /api/schedule/tasks/  {id, ...changed fields}
    DELETE /api/schedule/tasks/  {id}
    """

    def get(self, request):
        return Response(TaskSerializer(Task.objects.all(), many=True).data)

    def post(self, request):
        serializer = TaskCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        task = ScheduleService().create_task(**serializer.validated_data)
        return Response(
            {'task': TaskSerializer(task).data, 'message': 'Task added successfully'},
            status=status.HTTP_201_CREATED,
        )

    def put(self, request):
        if not request.data.get('id'):
            raise InvalidInput("Task ID is required")
        serializer = TaskUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        changes = dict(serializer.validated_data)
        task_id = changes.pop('id')
        task = ScheduleService().update_task(task_id, **changes)
        return Response({'task': TaskSerializer(task).data, 'message': 'Task updated successfully'})

    def delete(self, request):
        task_id = request.data.get('id')
        if not task_id:
            raise InvalidInput("Task ID is required")
        try:
            task_id = int(task_id)
        except (TypeError, ValueError):
            raise InvalidInput("Task ID must be a number")

        ScheduleService().delete_task(task_id)
        return Response({'message': 'Task deleted successfully'})


class CalendarView(APIView):
    """GET /api/schedule/calendar/?start=YYYY-MM-DD&end=YYYY-MM-DD"""

    def get(self, request):
        serializer = CalendarQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        events = ScheduleService().calendar(
            serializer.validated_data.get('start'),
            serializer.validated_data.get('end'),
        )
        return Response(CalendarEventSerializer(events, many=True).data)
