"""
Views for Equipment.

API Endpoints:
- GET    /api/equipment/  equipment (with total transaction cost) + transactions
- POST   /api/equipment/  {action: add_equipment | add_rental_cost | add_maintenance_cost}
- PUT    /api/equipment/  {action: edit_equipment | edit_transaction}
- DELETE /api/equipment/  {id}
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import InvalidInput
from .models import Equipment, EquipmentTransaction
from .serializers import (
    CREATE_ACTION_SERIALIZERS,
    EDIT_ACTION_SERIALIZERS,
    EquipmentSerializer,
    EquipmentTransactionSerializer,
)
from .services import EquipmentService


class EquipmentView(APIView):

    def _action(self, request, serializers_by_tag):
        tag = request.data.get('action')
        serializer_class = serializers_by_tag.get(tag)
        if serializer_class is None:
            raise InvalidInput("Invalid action")
        serializer = serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        return tag, serializer.to_action()

    def _render(self, result):
        if isinstance(result, EquipmentTransaction):
            return {'transaction': EquipmentTransactionSerializer(result).data}
        return {'equipment': EquipmentSerializer(result).data}

    def get(self, request):
        equipments = Equipment.objects.with_transaction_cost().order_by('id')
        transactions = EquipmentTransaction.objects.select_related('equipment')
        return Response({
            'equipments': EquipmentSerializer(equipments, many=True).data,
            'transactions': EquipmentTransactionSerializer(transactions, many=True).data,
        })

    def post(self, request):
        tag, action = self._action(request, CREATE_ACTION_SERIALIZERS)
        result = EquipmentService().apply(action)

        payload = self._render(result)
        if tag == 'add_maintenance_cost':
            payload['message'] = 'Maintenance cost updated successfully'
            return Response(payload)
        if tag == 'add_rental_cost':
            payload['message'] = 'Rental cost recorded successfully'
        return Response(payload, status=status.HTTP_201_CREATED)

    def put(self, request):
        tag, action = self._action(request, EDIT_ACTION_SERIALIZERS)
        result = EquipmentService().apply(action)

        payload = self._render(result)
        payload['message'] = (
            'Equipment updated successfully' if tag == 'edit_equipment'
            else 'Transaction updated successfully'
        )
        return Response(payload)

    def delete(self, request):
        equipment_id = request.data.get('id') or request.query_params.get('id')
        if not equipment_id:
            raise InvalidInput("Equipment ID is required")
        try:
            equipment_id = int(equipment_id)
        except (TypeError, ValueError):
            raise InvalidInput("Equipment ID must be a number")

        EquipmentService().delete_equipment(equipment_id)
        return Response({'message': 'Equipment deleted successfully'})
