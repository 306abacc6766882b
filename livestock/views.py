"""
Views for the Livestock Ledger.

API Endpoints:
- /api/livestock/types/ - List balances + sales, add, restock/edit costs, delete
- /api/livestock/sales/ - Record a sale or loss, reset all sales
- /api/livestock/costs/ - Add a cost-of-living entry
- /api/livestock/costs/reset/ - Zero the accrued cost of living
- /api/livestock/actions/ - Run one tagged dashboard action
- /api/livestock/animals/ - Individual animal register
"""

import logging

from django.db import transaction
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import InvalidInput
from . import actions
from .models import Animal, AnimalSale, AnimalType, CostOfLivingEntry
from .serializers import (
    ACTION_SERIALIZERS,
    AnimalSaleSerializer,
    AnimalSerializer,
    AnimalTransactionSerializer,
    AnimalTypeCreateSerializer,
    AnimalTypeSerializer,
    AnimalTypeUpdateSerializer,
    CostOfLivingCreateSerializer,
    CostOfLivingEntrySerializer,
    TypeNameSerializer,
)
from .services import LivestockLedger

logger = logging.getLogger(__name__)


class LivestockLedgerMixin:
    """Gives views a ledger service instance."""

    def get_ledger(self):
        return LivestockLedger()


# =============================================================================
# ANIMAL TYPES (Balances)
# =============================================================================

class AnimalTypeView(LivestockLedgerMixin, APIView):
    """
    GET    /api/livestock/types/           balances, sales and cost history
    POST   /api/livestock/types/           add a new animal type
    PUT    /api/livestock/types/           restock and/or overwrite cost totals
    DELETE /api/livestock/types/?type=X    delete type (cascades)
    """

    def get(self, request):
        types = AnimalType.objects.with_total_sales().order_by('type')
        sales = AnimalSale.objects.select_related('animal_type').order_by('-sale_date', '-id')
        history = CostOfLivingEntry.objects.select_related('animal_type')
        return Response({
            'types': AnimalTypeSerializer(types, many=True).data,
            'sales': AnimalSaleSerializer(sales, many=True).data,
            'cost_history': CostOfLivingEntrySerializer(history, many=True).data,
        })

    def post(self, request):
        serializer = AnimalTypeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        animal_type = self.get_ledger().create_type(
            data['type'],
            data['quantity'],
            total_purchase_cost=data['total_purchase_cost'],
            total_cost_of_living=data['total_cost_of_living'],
        )
        return Response(AnimalTypeSerializer(animal_type).data, status=status.HTTP_201_CREATED)

    def put(self, request):
        serializer = AnimalTypeUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        ledger = self.get_ledger()

        with transaction.atomic():
            animal_type = ledger.get_type(data['type'])
            if data.get('add_quantity'):
                animal_type = ledger.restock(data['type'], data['add_quantity'])
            if data.get('total_purchase_cost') is not None or data.get('total_cost_of_living') is not None:
                animal_type = ledger.update_costs(
                    data['type'],
                    total_purchase_cost=data.get('total_purchase_cost'),
                    total_cost_of_living=data.get('total_cost_of_living'),
                )

        return Response(AnimalTypeSerializer(animal_type).data)

    def delete(self, request):
        name = request.query_params.get('type')
        if not name:
            raise InvalidInput("Query parameter 'type' is required.")

        self.get_ledger().delete_type(name)
        return Response({'message': f"Animal type '{name}' deleted successfully"})


# =============================================================================
# SALES & LOSSES
# =============================================================================

class AnimalSaleView(LivestockLedgerMixin, APIView):
    """
    POST   /api/livestock/sales/    record a sale (or a loss with isLoss=true)
    DELETE /api/livestock/sales/    delete every sale and restore stock
    """

    def post(self, request):
        serializer = AnimalTransactionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        action = serializer.to_action()
        ledger = self.get_ledger()

        if isinstance(action, actions.RecordLoss):
            animal_type = ledger.apply(action)
            return Response(
                {
                    'type': AnimalTypeSerializer(animal_type).data,
                    'message': 'Loss recorded successfully',
                },
                status=status.HTTP_201_CREATED,
            )

        sale = ledger.apply(action)
        return Response(
            {
                'sale': AnimalSaleSerializer(sale).data,
                'message': 'Sale recorded successfully',
            },
            status=status.HTTP_201_CREATED,
        )

    def delete(self, request):
        restored = self.get_ledger().reset_all_sales()
        return Response({
            'message': 'All sales reset successfully',
            'restored': restored,
        })


# =============================================================================
# COST OF LIVING
# =============================================================================

class CostOfLivingView(LivestockLedgerMixin, APIView):
    """
    POST /api/livestock/costs/

    Add a cost-of-living entry for the month given in the body (YYYY-MM).
    """

    def post(self, request):
        serializer = CostOfLivingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        ledger = self.get_ledger()

        entry = ledger.add_cost(data['type'], data['amount'], data['month'], data['notes'])
        return Response(
            {
                'entry': CostOfLivingEntrySerializer(entry).data,
                'type': AnimalTypeSerializer(ledger.get_type(data['type'])).data,
            },
            status=status.HTTP_201_CREATED,
        )


class CostOfLivingResetView(LivestockLedgerMixin, APIView):
    """
    POST /api/livestock/costs/reset/

    Zero the accrued cost of living. History entries are kept.
    """

    def post(self, request):
        serializer = TypeNameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        animal_type = self.get_ledger().reset_cost(serializer.validated_data['type'])
        return Response({
            'type': AnimalTypeSerializer(animal_type).data,
            'message': (
                'Cost of living reset to 0. Existing cost history entries are '
                'kept but no longer count toward this balance.'
            ),
        })


# =============================================================================
# TAGGED ACTIONS
# =============================================================================

class LivestockActionView(LivestockLedgerMixin, APIView):
    """
    POST /api/livestock/actions/

    Body: {"action": "<tag>", ...fields for that action}
    Tags: add_type, add_more, record_sale, record_loss, add_cost, reset_cost
    """

    def post(self, request):
        tag = request.data.get('action')
        serializer_class = ACTION_SERIALIZERS.get(tag)
        if serializer_class is None:
            raise InvalidInput(
                f"Invalid action. Must be one of: {', '.join(ACTION_SERIALIZERS)}"
            )

        serializer = serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        action = serializer.to_action()
        result = self.get_ledger().apply(action)

        if isinstance(result, AnimalSale):
            payload = {'sale': AnimalSaleSerializer(result).data}
        elif isinstance(result, CostOfLivingEntry):
            payload = {'entry': CostOfLivingEntrySerializer(result).data}
        else:
            payload = {'type': AnimalTypeSerializer(result).data}
        payload['action'] = tag

        created = isinstance(action, (actions.AddType, actions.RecordSale, actions.AddCost))
        return Response(payload, status=status.HTTP_201_CREATED if created else status.HTTP_200_OK)


# =============================================================================
# INDIVIDUAL ANIMALS
# =============================================================================

class AnimalListCreateView(generics.ListCreateAPIView):
    """
    GET  /api/livestock/animals/
    POST /api/livestock/animals/
    """
    queryset = Animal.objects.select_related('animal_type', 'parent__animal_type')
    serializer_class = AnimalSerializer
    filterset_fields = ['animal_type__type', 'health_status']
    search_fields = ['tag', 'production']
    ordering_fields = ['created_at', 'purchase_price']


class AnimalDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    GET/PUT/PATCH/DELETE /api/livestock/animals/{id}/
    """
    queryset = Animal.objects.select_related('animal_type', 'parent__animal_type')
    serializer_class = AnimalSerializer
