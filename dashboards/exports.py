"""
Dashboard Export View

Writes the dashboard to an Excel workbook with three sheets:
Summary, Cost Distribution and Monthly.
"""

import io

from django.conf import settings
from django.http import HttpResponse
from django.utils import timezone
from rest_framework.views import APIView

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from .services import DashboardService


HEADER_FONT = Font(bold=True, size=12, color='FFFFFF')
HEADER_FILL = PatternFill(start_color='2E7D32', end_color='2E7D32', fill_type='solid')
TITLE_FONT = Font(bold=True, size=14)
THIN_BORDER = Border(
    left=Side(style='thin'),
    right=Side(style='thin'),
    top=Side(style='thin'),
    bottom=Side(style='thin'),
)
MONEY_FORMAT = '#,##0.00'


class DashboardExportView(APIView):
    """GET /api/dashboard/export/"""

    def get(self, request):
        dashboard = DashboardService().compute()
        generated = timezone.localtime()

        wb = Workbook()

        ws_summary = wb.active
        ws_summary.title = "Summary"
        self._create_summary_sheet(ws_summary, dashboard['summary'], generated)

        ws_costs = wb.create_sheet("Cost Distribution")
        self._create_distribution_sheet(ws_costs, dashboard['costDistribution'])

        ws_monthly = wb.create_sheet("Monthly")
        self._create_monthly_sheet(ws_monthly, dashboard)

        output = io.BytesIO()
        wb.save(output)
        output.seek(0)

        filename = f"farm_dashboard_{generated.strftime('%Y%m%d')}.xlsx"
        response = HttpResponse(
            output.read(),
            content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        )
        response['Content-Disposition'] = f'attachment; filename="{filename}"'
        return response

    def _write_header(self, ws, row, headers):
        for col, header in enumerate(headers, 1):
            cell = ws.cell(row=row, column=col, value=header)
            cell.font = HEADER_FONT
            cell.fill = HEADER_FILL
            cell.border = THIN_BORDER
            cell.alignment = Alignment(horizontal='center')

    def _create_summary_sheet(self, ws, summary, generated):
        currency = settings.LEDGER_CURRENCY

        ws.merge_cells('A1:B1')
        ws['A1'] = "Farm Dashboard"
        ws['A1'].font = Font(bold=True, size=16)
        ws['A2'] = f"Generated: {generated.strftime('%Y-%m-%d %H:%M')}"

        rows = [
            (f'Total Earnings ({currency})', summary['totalEarnings']),
            (f'Total Costs ({currency})', summary['totalCosts']),
            (f'Total Profit ({currency})', summary['totalProfit']),
            ('Animals on Hand', summary['totalAnimals']),
            ('Crops on Hand', summary['totalCrops']),
        ]
        row = 4
        for label, value in rows:
            ws.cell(row=row, column=1, value=label).font = Font(bold=True)
            cell = ws.cell(row=row, column=2, value=value)
            if isinstance(value, float):
                cell.number_format = MONEY_FORMAT
            row += 1

        ws.column_dimensions['A'].width = 28
        ws.column_dimensions['B'].width = 18

    def _create_distribution_sheet(self, ws, distribution):
        ws['A1'] = "Cost Distribution"
        ws['A1'].font = TITLE_FONT
        self._write_header(ws, 3, ['Source', 'Amount'])

        row = 4
        for source, amount in distribution.items():
            ws.cell(row=row, column=1, value=source).border = THIN_BORDER
            cell = ws.cell(row=row, column=2, value=amount)
            cell.number_format = MONEY_FORMAT
            cell.border = THIN_BORDER
            row += 1

        ws.column_dimensions['A'].width = 20
        ws.column_dimensions['B'].width = 18

    def _create_monthly_sheet(self, ws, dashboard):
        earnings = dashboard['earningsOverTime']
        costs = dashboard['costsOverTime']
        profit = dashboard['profitOverTime']

        ws['A1'] = "Monthly Breakdown"
        ws['A1'].font = TITLE_FONT
        headers = [
            'Month', 'Animal Sales', 'Crop Sales', 'Animal Costs',
            'Crop Costs', 'Equipment', 'Labor', 'Profit',
        ]
        self._write_header(ws, 3, headers)

        row = 4
        for month in profit:
            earned = earnings.get(month, {})
            spent = costs.get(month, {})
            values = [
                month,
                earned.get('animals', 0.0),
                earned.get('crops', 0.0),
                spent.get('animals', 0.0),
                spent.get('crops', 0.0),
                spent.get('equipment', 0.0),
                spent.get('labor', 0.0),
                profit[month],
            ]
            for col, value in enumerate(values, 1):
                cell = ws.cell(row=row, column=col, value=value)
                cell.border = THIN_BORDER
                if col > 1:
                    cell.number_format = MONEY_FORMAT
            row += 1

        for letter in 'ABCDEFGH':
            ws.column_dimensions[letter].width = 15
