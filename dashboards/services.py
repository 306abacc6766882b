"""
Dashboard Service

Read-only aggregation across every ledger:
1. Summary - earnings, costs, profit, animals and crops on hand
2. Cost distribution - Animals / Crops / Equipment / Labor
3. Earnings over time - per month, animals vs crops
4. Costs over time - per month, per cost source
5. Profit over time - per month, earnings minus costs

Nothing is cached; every call reads the tables again. Month keys are
``YYYY-MM`` strings and every per-month mapping is sorted ascending so two
calls without intervening writes return identical payloads.
"""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Any, Dict

from django.db.models import Sum, Value, DecimalField
from django.db.models.functions import Coalesce

from core.ledger import ZERO, month_key, to_number
from crops.models import Crop, CropCost, CropSale
from equipment.models import Equipment, EquipmentTransaction
from livestock.models import AnimalSale, AnimalType, CostOfLivingEntry
from workforce.models import SalaryPayment

logger = logging.getLogger(__name__)


EARNING_SOURCES = ('animals', 'crops')
COST_SOURCES = ('animals', 'crops', 'equipment', 'labor')


def _sum(queryset, field):
    return queryset.aggregate(
        total=Coalesce(Sum(field), Value(ZERO), output_field=DecimalField(max_digits=16, decimal_places=2))
    )['total']


class DashboardService:
    """
    Usage:
        from dashboards.services import DashboardService

        data = DashboardService().compute()
        data['summary']['totalProfit']
    """

    # =========================================================================
    # TOTALS
    # =========================================================================

    def get_cost_totals(self) -> Dict[str, Decimal]:
        """
        Accrued cost per source. Animal and crop costs use the running
        balances, so a cost reset drops them here while their history rows
        still show in the monthly breakdown.
        """
        equipment = (
            _sum(Equipment.objects.all(), 'maintenance_cost')
            + _sum(EquipmentTransaction.objects.all(), 'amount')
        )
        return {
            'Animals': _sum(AnimalType.objects.all(), 'total_cost_of_living'),
            'Crops': _sum(Crop.objects.all(), 'total_cost_of_care'),
            'Equipment': equipment,
            'Labor': _sum(SalaryPayment.objects.all(), 'amount'),
        }

    def get_earning_totals(self) -> Dict[str, Decimal]:
        return {
            'animals': _sum(AnimalSale.objects.all(), 'sale_price'),
            'crops': _sum(CropSale.objects.all(), 'sale_price'),
        }

    # =========================================================================
    # MONTHLY BUCKETS
    # =========================================================================

    def get_earnings_by_month(self) -> Dict[str, Dict[str, Decimal]]:
        buckets = defaultdict(lambda: dict.fromkeys(EARNING_SOURCES, ZERO))

        for sale_date, price in AnimalSale.objects.values_list('sale_date', 'sale_price'):
            buckets[month_key(sale_date)]['animals'] += price
        for sale_date, price in CropSale.objects.values_list('sale_date', 'sale_price'):
            buckets[month_key(sale_date)]['crops'] += price

        return dict(buckets)

    def get_costs_by_month(self) -> Dict[str, Dict[str, Decimal]]:
        buckets = defaultdict(lambda: dict.fromkeys(COST_SOURCES, ZERO))

        # Animal cost entries carry the month the caller assigned them to
        for month, cost in CostOfLivingEntry.objects.values_list('month', 'cost'):
            buckets[month]['animals'] += cost
        for cost_date, amount in CropCost.objects.values_list('cost_date', 'amount'):
            buckets[month_key(cost_date)]['crops'] += amount
        for transaction_date, amount in EquipmentTransaction.objects.values_list('transaction_date', 'amount'):
            buckets[month_key(transaction_date)]['equipment'] += amount
        for payment_date, amount in SalaryPayment.objects.values_list('payment_date', 'amount'):
            buckets[month_key(payment_date)]['labor'] += amount

        return dict(buckets)

    def get_profit_by_month(self, earnings_by_month, costs_by_month) -> Dict[str, Decimal]:
        months = set(earnings_by_month) | set(costs_by_month)
        profit = {}
        for month in months:
            earned = sum(earnings_by_month.get(month, {}).values(), ZERO)
            spent = sum(costs_by_month.get(month, {}).values(), ZERO)
            profit[month] = earned - spent
        return profit

    # =========================================================================
    # FULL DASHBOARD
    # =========================================================================

    def compute(self) -> Dict[str, Any]:
        earnings = self.get_earning_totals()
        costs = self.get_cost_totals()

        total_earnings = sum(earnings.values(), ZERO)
        total_costs = sum(costs.values(), ZERO)

        earnings_by_month = self.get_earnings_by_month()
        costs_by_month = self.get_costs_by_month()
        profit_by_month = self.get_profit_by_month(earnings_by_month, costs_by_month)

        total_animals = AnimalType.objects.aggregate(total=Coalesce(Sum('quantity'), 0))['total']
        total_crops = Crop.objects.aggregate(total=Coalesce(Sum('quantity'), 0))['total']

        logger.debug(
            f"Dashboard computed: earnings={total_earnings} costs={total_costs} "
            f"months={len(profit_by_month)}"
        )

        return {
            'summary': {
                'totalEarnings': to_number(total_earnings),
                'totalCosts': to_number(total_costs),
                'totalProfit': to_number(total_earnings - total_costs),
                'totalAnimals': total_animals,
                'totalCrops': total_crops,
            },
            'costDistribution': {
                source: to_number(amount) for source, amount in costs.items()
            },
            'earningsOverTime': {
                month: {k: to_number(v) for k, v in earnings_by_month[month].items()}
                for month in sorted(earnings_by_month)
            },
            'costsOverTime': {
                month: {k: to_number(v) for k, v in costs_by_month[month].items()}
                for month in sorted(costs_by_month)
            },
            'profitOverTime': {
                month: to_number(profit_by_month[month])
                for month in sorted(profit_by_month)
            },
        }
