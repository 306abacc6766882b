"""
Admin configuration for Workforce models.
"""

from django.contrib import admin

from .models import ResponsibilityArea, Role, SalaryPayment, Worker


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = ['name', 'description']
    search_fields = ['name']


@admin.register(ResponsibilityArea)
class ResponsibilityAreaAdmin(admin.ModelAdmin):
    list_display = ['name', 'description']
    search_fields = ['name']


class SalaryPaymentInline(admin.TabularInline):
    model = SalaryPayment
    extra = 0
    fields = ['payment_date', 'payment_type', 'amount', 'task_description']


@admin.register(Worker)
class WorkerAdmin(admin.ModelAdmin):
    list_display = ['name', 'role', 'payment_type', 'payment_rate', 'responsibility_area', 'is_active']
    list_filter = ['is_active', 'payment_type', 'role']
    search_fields = ['name', 'notes']
    inlines = [SalaryPaymentInline]


@admin.register(SalaryPayment)
class SalaryPaymentAdmin(admin.ModelAdmin):
    list_display = ['payment_date', 'worker', 'payment_type', 'amount']
    list_filter = ['payment_type']
    date_hierarchy = 'payment_date'
