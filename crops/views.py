"""
Views for the Crop Ledger.

API Endpoints:
- /api/crops/ - List crops + sales + costs, add, restock/edit, delete (?type=X)
- /api/crops/sales/ - Record a sale, reset all sales
- /api/crops/costs/ - Add a cost-of-care entry
- /api/crops/costs/reset/ - Zero the accrued cost of care
"""

import logging

from django.db import transaction
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import InvalidInput
from .models import Crop, CropCost, CropSale
from .serializers import (
    CropCostCreateSerializer,
    CropCostSerializer,
    CropCreateSerializer,
    CropNameSerializer,
    CropSaleCreateSerializer,
    CropSaleSerializer,
    CropSerializer,
    CropUpdateSerializer,
)
from .services import CropLedger

logger = logging.getLogger(__name__)


class CropView(APIView):
    """
    GET    /api/crops/
    POST   /api/crops/
    PUT    /api/crops/
    DELETE /api/crops/?type=X
    """

    def get(self, request):
        crops = Crop.objects.with_total_sales().order_by('type')
        sales = CropSale.objects.select_related('crop')
        costs = CropCost.objects.select_related('crop')
        return Response({
            'crops': CropSerializer(crops, many=True).data,
            'sales': CropSaleSerializer(sales, many=True).data,
            'costs': CropCostSerializer(costs, many=True).data,
        })

    def post(self, request):
        serializer = CropCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        crop = CropLedger().create_crop(data['type'], data['quantity'], data['growth_stage'])
        return Response(CropSerializer(crop).data, status=status.HTTP_201_CREATED)

    def put(self, request):
        serializer = CropUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        ledger = CropLedger()

        with transaction.atomic():
            crop = ledger.get_crop(data['type'])
            if data.get('add_quantity'):
                crop = ledger.restock(data['type'], data['add_quantity'])
            if data.get('growth_stage') is not None or data.get('total_cost_of_care') is not None:
                crop = ledger.update_crop(
                    data['type'],
                    growth_stage=data.get('growth_stage'),
                    total_cost_of_care=data.get('total_cost_of_care'),
                )

        return Response(CropSerializer(crop).data)

    def delete(self, request):
        name = request.query_params.get('type')
        if not name:
            raise InvalidInput("Query parameter 'type' is required.")

        CropLedger().delete_crop(name)
        return Response({'message': f"Crop '{name}' deleted successfully"})


class CropSaleView(APIView):
    """
    POST   /api/crops/sales/
    DELETE /api/crops/sales/
    """

    def post(self, request):
        serializer = CropSaleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        sale = CropLedger().sell(data['type'], data['quantity'], data['sale_price'], data['notes'])
        return Response(
            {'sale': CropSaleSerializer(sale).data, 'message': 'Sale recorded successfully'},
            status=status.HTTP_201_CREATED,
        )

    def delete(self, request):
        restored = CropLedger().reset_all_sales()
        return Response({'message': 'All sales reset successfully', 'restored': restored})


class CropCostView(APIView):
    """POST /api/crops/costs/"""

    def post(self, request):
        serializer = CropCostCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        ledger = CropLedger()

        entry = ledger.add_cost(
            data['type'],
            data['cost_type'],
            data['amount'],
            cost_date=data.get('cost_date'),
            notes=data['notes'],
        )
        return Response(
            {
                'cost': CropCostSerializer(entry).data,
                'crop': CropSerializer(ledger.get_crop(data['type'])).data,
                'message': 'Cost recorded successfully',
            },
            status=status.HTTP_201_CREATED,
        )


class CropCostResetView(APIView):
    """POST /api/crops/costs/reset/"""

    def post(self, request):
        serializer = CropNameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        crop = CropLedger().reset_cost(serializer.validated_data['type'])
        return Response({
            'crop': CropSerializer(crop).data,
            'message': (
                'Cost of care reset to 0. Existing cost entries are kept but '
                'no longer count toward this balance.'
            ),
        })
