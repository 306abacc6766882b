"""
Serializers for the Crop Ledger.
"""

from decimal import Decimal
from django.db.models import Sum
from rest_framework import serializers

from core.ledger import MAX_QUANTITY

from .models import CostType, Crop, CropCost, CropSale


MONEY = dict(max_digits=14, decimal_places=2)


class CropSerializer(serializers.ModelSerializer):
    total_sales = serializers.SerializerMethodField()

    class Meta:
        model = Crop
        fields = [
            'id', 'type', 'quantity', 'initial_quantity', 'growth_stage',
            'total_cost_of_care', 'total_sales', 'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_total_sales(self, obj):
        total = getattr(obj, 'total_sales', None)
        if total is None:
            total = obj.sales.aggregate(total=Sum('sale_price'))['total'] or Decimal('0.00')
        return float(total)


class CropSaleSerializer(serializers.ModelSerializer):
    type = serializers.CharField(source='crop.type', read_only=True)

    class Meta:
        model = CropSale
        fields = [
            'id', 'crop', 'type', 'quantity', 'sale_price',
            'cost_per_unit_at_sale', 'notes', 'sale_date',
        ]
        read_only_fields = fields


class CropCostSerializer(serializers.ModelSerializer):
    type = serializers.CharField(source='crop.type', read_only=True)

    class Meta:
        model = CropCost
        fields = ['id', 'crop', 'type', 'cost_type', 'amount', 'cost_date', 'notes', 'recorded_at']
        read_only_fields = fields


class CropCreateSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    quantity = serializers.IntegerField(min_value=0, max_value=MAX_QUANTITY)
    growth_stage = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')


class CropUpdateSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    add_quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY, required=False)
    growth_stage = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    total_cost_of_care = serializers.DecimalField(
        min_value=Decimal('0.00'), required=False, allow_null=True, **MONEY
    )

    def validate(self, attrs):
        if not any(attrs.get(f) is not None for f in ('add_quantity', 'growth_stage', 'total_cost_of_care')):
            raise serializers.ValidationError(
                "Provide add_quantity, growth_stage or total_cost_of_care."
            )
        return attrs


class CropSaleCreateSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)
    sale_price = serializers.DecimalField(
        min_value=Decimal('0.00'), required=False, allow_null=True, **MONEY
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
    isLoss = serializers.BooleanField(required=False, default=False)

    def validate(self, attrs):
        if attrs['isLoss']:
            raise serializers.ValidationError("Loss recording is not supported for crops.")
        if attrs.get('sale_price') is None:
            raise serializers.ValidationError({'sale_price': "This field is required."})
        attrs['notes'] = attrs.get('notes') or ''
        return attrs


class CropCostCreateSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    cost_type = serializers.ChoiceField(choices=CostType.choices)
    amount = serializers.DecimalField(min_value=Decimal('0.00'), **MONEY)
    cost_date = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class CropNameSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
