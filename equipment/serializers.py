"""
Serializers for Equipment.

The POST and PUT bodies carry an ``action`` tag; ACTION_SERIALIZERS maps
each tag to the serializer that validates exactly that action's fields.
"""

from decimal import Decimal
from rest_framework import serializers

from . import actions
from .models import AcquisitionType, Equipment, EquipmentTransaction


MONEY = dict(max_digits=14, decimal_places=2)


class EquipmentSerializer(serializers.ModelSerializer):
    total_transaction_cost = serializers.DecimalField(read_only=True, **MONEY)

    class Meta:
        model = Equipment
        fields = [
            'id', 'type', 'acquisition_type', 'acquisition_date',
            'maintenance_cost', 'total_transaction_cost', 'notes',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class EquipmentTransactionSerializer(serializers.ModelSerializer):
    equipment_type = serializers.CharField(source='equipment.type', read_only=True)

    class Meta:
        model = EquipmentTransaction
        fields = [
            'id', 'equipment', 'equipment_type', 'transaction_type',
            'amount', 'transaction_date', 'notes',
        ]
        read_only_fields = fields


class AddEquipmentSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    acquisition_type = serializers.ChoiceField(choices=AcquisitionType.choices)
    acquisition_date = serializers.DateField(required=False, allow_null=True)
    transaction_amount = serializers.DecimalField(
        min_value=Decimal('0.00'), required=False, allow_null=True, **MONEY
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    def to_action(self):
        data = self.validated_data
        return actions.AddEquipment(
            type=data['type'],
            acquisition_type=data['acquisition_type'],
            acquisition_date=data.get('acquisition_date'),
            transaction_amount=data.get('transaction_amount'),
            notes=data.get('notes') or '',
        )


class AddRentalCostSerializer(serializers.Serializer):
    equipment_id = serializers.IntegerField()
    amount = serializers.DecimalField(min_value=Decimal('0.01'), **MONEY)
    transaction_date = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    def to_action(self):
        data = self.validated_data
        return actions.AddRentalCost(
            equipment_id=data['equipment_id'],
            amount=data['amount'],
            transaction_date=data.get('transaction_date'),
            notes=data.get('notes') or '',
        )


class AddMaintenanceCostSerializer(serializers.Serializer):
    equipment_id = serializers.IntegerField()
    amount = serializers.DecimalField(min_value=Decimal('0.01'), **MONEY)

    def to_action(self):
        return actions.AddMaintenanceCost(
            equipment_id=self.validated_data['equipment_id'],
            amount=self.validated_data['amount'],
        )


class EditEquipmentSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    type = serializers.CharField(max_length=100)
    acquisition_type = serializers.ChoiceField(choices=AcquisitionType.choices)
    acquisition_date = serializers.DateField()
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    def to_action(self):
        data = self.validated_data
        return actions.EditEquipment(
            id=data['id'],
            type=data['type'],
            acquisition_type=data['acquisition_type'],
            acquisition_date=data['acquisition_date'],
            notes=data.get('notes') or '',
        )


class EditTransactionSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    amount = serializers.DecimalField(min_value=Decimal('0.00'), **MONEY)
    transaction_date = serializers.DateField()
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    def to_action(self):
        data = self.validated_data
        return actions.EditTransaction(
            id=data['id'],
            amount=data['amount'],
            transaction_date=data['transaction_date'],
            notes=data.get('notes') or '',
        )


CREATE_ACTION_SERIALIZERS = {
    'add_equipment': AddEquipmentSerializer,
    'add_rental_cost': AddRentalCostSerializer,
    'add_maintenance_cost': AddMaintenanceCostSerializer,
}

EDIT_ACTION_SERIALIZERS = {
    'edit_equipment': EditEquipmentSerializer,
    'edit_transaction': EditTransactionSerializer,
}
