"""
Admin configuration for Livestock Ledger models.

Sales and cost history are append-only facts; the admin shows them read-only.
"""

from django.contrib import admin

from .models import Animal, AnimalSale, AnimalType, CostOfLivingEntry


class AnimalSaleInline(admin.TabularInline):
    """Recent sales shown on the animal type page"""
    model = AnimalSale
    extra = 0
    readonly_fields = ['sale_date', 'quantity', 'sale_price', 'cost_per_unit', 'notes']
    fields = readonly_fields
    can_delete = False
    max_num = 10

    def has_add_permission(self, request, obj=None):
        return False


class CostOfLivingInline(admin.TabularInline):
    model = CostOfLivingEntry
    extra = 0
    readonly_fields = ['month', 'cost', 'notes', 'recorded_at']
    fields = readonly_fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(AnimalType)
class AnimalTypeAdmin(admin.ModelAdmin):
    list_display = [
        'type', 'quantity', 'initial_quantity',
        'total_purchase_cost', 'total_cost_of_living', 'updated_at'
    ]
    search_fields = ['type']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [AnimalSaleInline, CostOfLivingInline]


@admin.register(AnimalSale)
class AnimalSaleAdmin(admin.ModelAdmin):
    list_display = ['sale_date', 'animal_type', 'quantity', 'sale_price', 'cost_per_unit']
    list_filter = ['animal_type', 'sale_date']
    date_hierarchy = 'sale_date'
    readonly_fields = ['animal_type', 'quantity', 'sale_price', 'cost_per_unit', 'sale_date']


@admin.register(CostOfLivingEntry)
class CostOfLivingEntryAdmin(admin.ModelAdmin):
    list_display = ['month', 'animal_type', 'cost', 'recorded_at']
    list_filter = ['animal_type', 'month']
    readonly_fields = ['animal_type', 'cost', 'month', 'recorded_at']


@admin.register(Animal)
class AnimalAdmin(admin.ModelAdmin):
    list_display = ['tag', 'animal_type', 'health_status', 'purchase_price', 'feed_cost', 'created_at']
    list_filter = ['animal_type', 'health_status']
    search_fields = ['tag', 'production']
