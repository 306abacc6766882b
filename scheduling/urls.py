"""
URL configuration for the farm schedule.

All endpoints are prefixed with /api/schedule/
"""

from django.urls import path
from .views import CalendarView, TaskView

app_name = 'scheduling'

urlpatterns = [
    path('tasks/', TaskView.as_view(), name='tasks'),
    path('calendar/', CalendarView.as_view(), name='calendar'),
]
