from django.contrib import admin

from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['title', 'task_date', 'time', 'status', 'recurrence']
    list_filter = ['status', 'recurrence']
    search_fields = ['title', 'description']
    date_hierarchy = 'task_date'
