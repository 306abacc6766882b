"""
Admin configuration for Equipment models.
"""

from django.contrib import admin

from .models import Equipment, EquipmentTransaction


class EquipmentTransactionInline(admin.TabularInline):
    model = EquipmentTransaction
    extra = 0
    fields = ['transaction_date', 'transaction_type', 'amount', 'notes']


@admin.register(Equipment)
class EquipmentAdmin(admin.ModelAdmin):
    list_display = ['type', 'acquisition_type', 'acquisition_date', 'maintenance_cost']
    list_filter = ['acquisition_type']
    search_fields = ['type', 'notes']
    inlines = [EquipmentTransactionInline]


@admin.register(EquipmentTransaction)
class EquipmentTransactionAdmin(admin.ModelAdmin):
    list_display = ['transaction_date', 'equipment', 'transaction_type', 'amount']
    list_filter = ['transaction_type']
    date_hierarchy = 'transaction_date'
