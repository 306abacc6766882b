"""
Admin configuration for Crop Ledger models.
"""

from django.contrib import admin

from .models import Crop, CropCost, CropSale


@admin.register(Crop)
class CropAdmin(admin.ModelAdmin):
    list_display = ['type', 'quantity', 'initial_quantity', 'growth_stage', 'total_cost_of_care', 'updated_at']
    search_fields = ['type']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(CropSale)
class CropSaleAdmin(admin.ModelAdmin):
    list_display = ['sale_date', 'crop', 'quantity', 'sale_price', 'cost_per_unit_at_sale']
    list_filter = ['crop']
    date_hierarchy = 'sale_date'
    readonly_fields = ['crop', 'quantity', 'sale_price', 'cost_per_unit_at_sale', 'sale_date']


@admin.register(CropCost)
class CropCostAdmin(admin.ModelAdmin):
    list_display = ['cost_date', 'crop', 'cost_type', 'amount']
    list_filter = ['crop', 'cost_type']
    date_hierarchy = 'cost_date'
