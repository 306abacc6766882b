"""
Serializers for the Livestock Ledger.

Read serializers render balances, sales and cost history. Write serializers
validate request bodies and hand plain values (or action objects) to
LivestockLedger; they never save models themselves.
"""

from decimal import Decimal
from django.db.models import Sum
from rest_framework import serializers

from core.ledger import MAX_QUANTITY, MONTH_LABEL_RE
from . import actions
from .models import Animal, AnimalSale, AnimalType, CostOfLivingEntry


MONEY = dict(max_digits=14, decimal_places=2)


# =============================================================================
# READ SERIALIZERS
# =============================================================================

class AnimalTypeSerializer(serializers.ModelSerializer):
    """Balance row with derived total sales."""
    total_sales = serializers.SerializerMethodField()

    class Meta:
        model = AnimalType
        fields = [
            'id', 'type', 'quantity', 'initial_quantity',
            'total_purchase_cost', 'total_cost_of_living', 'total_sales',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_total_sales(self, obj):
        total = getattr(obj, 'total_sales', None)
        if total is None:
            total = obj.sales.aggregate(total=Sum('sale_price'))['total'] or Decimal('0.00')
        return float(total)


class AnimalSaleSerializer(serializers.ModelSerializer):
    type = serializers.CharField(source='animal_type.type', read_only=True)
    cost_of_goods_sold = serializers.DecimalField(read_only=True, **MONEY)

    class Meta:
        model = AnimalSale
        fields = [
            'id', 'type', 'quantity', 'sale_price', 'cost_per_unit',
            'cost_of_goods_sold', 'notes', 'sale_date',
        ]
        read_only_fields = fields


class CostOfLivingEntrySerializer(serializers.ModelSerializer):
    type = serializers.CharField(source='animal_type.type', read_only=True)

    class Meta:
        model = CostOfLivingEntry
        fields = ['id', 'type', 'cost', 'month', 'notes', 'recorded_at']
        read_only_fields = fields


class AnimalSerializer(serializers.ModelSerializer):
    """Individual animal register (plain CRUD)."""
    type = serializers.SlugRelatedField(
        source='animal_type',
        slug_field='type',
        queryset=AnimalType.objects.all(),
    )
    parent_type = serializers.CharField(
        source='parent.animal_type.type', read_only=True, allow_null=True
    )

    class Meta:
        model = Animal
        fields = [
            'id', 'type', 'tag', 'purchase_price', 'feed_cost',
            'health_status', 'production', 'parent', 'parent_type',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate_parent(self, value):
        """Reject an animal as its own parent or as an ancestor of itself."""
        if value is None or self.instance is None:
            return value

        ancestor = value
        seen = set()
        while ancestor is not None and ancestor.pk not in seen:
            if ancestor.pk == self.instance.pk:
                raise serializers.ValidationError("An animal cannot be its own ancestor.")
            seen.add(ancestor.pk)
            ancestor = ancestor.parent
        return value


# =============================================================================
# WRITE SERIALIZERS
# =============================================================================

class AnimalTypeCreateSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    quantity = serializers.IntegerField(min_value=0, max_value=MAX_QUANTITY)
    total_purchase_cost = serializers.DecimalField(
        min_value=Decimal('0.00'), required=False, default=Decimal('0.00'), **MONEY
    )
    total_cost_of_living = serializers.DecimalField(
        min_value=Decimal('0.00'), required=False, default=Decimal('0.00'), **MONEY
    )


class AnimalTypeUpdateSerializer(serializers.Serializer):
    """
    PUT body: restock and/or overwrite cost totals.

    ``add_quantity`` grows both the quantity on hand and the cumulative
    baseline.
    """
    type = serializers.CharField(max_length=100)
    add_quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY, required=False)
    total_purchase_cost = serializers.DecimalField(
        min_value=Decimal('0.00'), required=False, allow_null=True, **MONEY
    )
    total_cost_of_living = serializers.DecimalField(
        min_value=Decimal('0.00'), required=False, allow_null=True, **MONEY
    )

    def validate(self, attrs):
        if not any(attrs.get(f) is not None for f in (
            'add_quantity', 'total_purchase_cost', 'total_cost_of_living'
        )):
            raise serializers.ValidationError(
                "Provide add_quantity, total_purchase_cost or total_cost_of_living."
            )
        return attrs


class AnimalTransactionSerializer(serializers.Serializer):
    """POST body for a sale, or a loss when ``isLoss`` is true."""
    type = serializers.CharField(max_length=100)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)
    sale_price = serializers.DecimalField(
        min_value=Decimal('0.00'), required=False, allow_null=True, **MONEY
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
    isLoss = serializers.BooleanField(required=False, default=False)

    def validate(self, attrs):
        if not attrs['isLoss'] and attrs.get('sale_price') is None:
            raise serializers.ValidationError({'sale_price': "This field is required for a sale."})
        attrs['notes'] = attrs.get('notes') or ''
        return attrs

    def to_action(self):
        data = self.validated_data
        if data['isLoss']:
            return actions.RecordLoss(data['type'], data['quantity'], data['notes'])
        return actions.RecordSale(
            data['type'], data['quantity'], data['sale_price'], data['notes']
        )


class CostOfLivingCreateSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    amount = serializers.DecimalField(min_value=Decimal('0.00'), **MONEY)
    month = serializers.RegexField(
        MONTH_LABEL_RE, error_messages={'invalid': "Use the YYYY-MM format."}
    )
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class TypeNameSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)


# =============================================================================
# ACTION SERIALIZERS
# =============================================================================

class AddTypeActionSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)
    total_purchase_cost = serializers.DecimalField(
        min_value=Decimal('0.00'), required=False, default=Decimal('0.00'), **MONEY
    )

    def to_action(self):
        data = self.validated_data
        return actions.AddType(data['type'], data['quantity'], data['total_purchase_cost'])


class AddMoreActionSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)

    def to_action(self):
        return actions.AddMore(self.validated_data['type'], self.validated_data['quantity'])


class RecordSaleActionSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)
    sale_price = serializers.DecimalField(min_value=Decimal('0.00'), **MONEY)
    notes = serializers.CharField(required=False, allow_blank=True, default='')

    def to_action(self):
        data = self.validated_data
        return actions.RecordSale(data['type'], data['quantity'], data['sale_price'], data['notes'])


class RecordLossActionSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)
    notes = serializers.CharField(required=False, allow_blank=True, default='')

    def to_action(self):
        data = self.validated_data
        return actions.RecordLoss(data['type'], data['quantity'], data['notes'])


class AddCostActionSerializer(CostOfLivingCreateSerializer):

    def to_action(self):
        data = self.validated_data
        return actions.AddCost(data['type'], data['amount'], data['month'], data['notes'])


class ResetCostActionSerializer(TypeNameSerializer):

    def to_action(self):
        return actions.ResetCost(self.validated_data['type'])


ACTION_SERIALIZERS = {
    'add_type': AddTypeActionSerializer,
    'add_more': AddMoreActionSerializer,
    'record_sale': RecordSaleActionSerializer,
    'record_loss': RecordLossActionSerializer,
    'add_cost': AddCostActionSerializer,
    'reset_cost': ResetCostActionSerializer,
}
