"""
Django Management Command: Seed Demo Data

Fills every ledger with a small, consistent demo farm:
- Livestock (types, cost of living, sales, a loss)
- Crops (crops, cost of care, sales)
- Equipment (purchased and rented, with transactions)
- Workforce (roles, areas, workers, salary payments)
- Schedule (one-off and recurring tasks)

All records go through the ledger services, so stock, cost counters and
cost-per-unit snapshots are the same as if they had been entered by hand.

Usage:
    python manage.py seed_demo_data
    python manage.py seed_demo_data --clear  # Clear existing data first
"""

from datetime import time, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from core.exceptions import LedgerError
from core.ledger import month_key
from crops.models import CostType, Crop
from crops.services import CropLedger
from equipment import actions as equipment_actions
from equipment.models import AcquisitionType, Equipment
from equipment.services import EquipmentService
from livestock import actions as livestock_actions
from livestock.models import Animal, AnimalType
from livestock.services import LivestockLedger
from scheduling.models import Recurrence, Task
from scheduling.services import ScheduleService
from workforce.models import PaymentType, ResponsibilityArea, Role, SalaryPayment, Worker
from workforce.services import PayrollService


class Command(BaseCommand):
    help = 'Seed a demo farm across livestock, crops, equipment, workforce and schedule'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete existing records before seeding',
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS('\n' + '=' * 60))
        self.stdout.write(self.style.SUCCESS('  DEMO DATA'))
        self.stdout.write(self.style.SUCCESS('=' * 60 + '\n'))

        if options['clear']:
            self.clear_data()
        elif AnimalType.objects.exists() or Crop.objects.exists():
            raise CommandError('Ledgers already contain data. Re-run with --clear to replace it.')

        today = timezone.localdate()
        last_month = (today.replace(day=1) - timedelta(days=1))

        try:
            with transaction.atomic():
                self.seed_livestock(today, last_month)
                self.seed_crops(today, last_month)
                self.seed_equipment(today, last_month)
                self.seed_workforce(today, last_month)
                self.seed_schedule(today)
        except LedgerError as e:
            raise CommandError(f'Seeding failed: {e.detail}')

        self.stdout.write(self.style.SUCCESS('\n✓ Demo data seeded successfully!\n'))

    def clear_data(self):
        self.stdout.write('Clearing existing data...')
        Animal.objects.all().delete()
        AnimalType.objects.all().delete()
        Crop.objects.all().delete()
        Equipment.objects.all().delete()
        SalaryPayment.objects.all().delete()
        Worker.objects.all().delete()
        Role.objects.all().delete()
        ResponsibilityArea.objects.all().delete()
        Task.objects.all().delete()
        self.stdout.write(self.style.SUCCESS('  Cleared'))

    def seed_livestock(self, today, last_month):
        self.stdout.write('\nLivestock...')
        ledger = LivestockLedger()

        for action in [
            livestock_actions.AddType('Goats', 20, Decimal('2400.00')),
            livestock_actions.AddType('Sheep', 10, Decimal('1500.00')),
            livestock_actions.AddType('Chickens', 120, Decimal('600.00')),
            livestock_actions.AddCost('Goats', Decimal('300.00'), month_key(last_month), 'Feed'),
            livestock_actions.AddCost('Goats', Decimal('250.00'), month_key(today), 'Feed'),
            livestock_actions.AddCost('Sheep', Decimal('100.00'), month_key(today), 'Vet visit'),
            livestock_actions.AddCost('Chickens', Decimal('180.00'), month_key(today), 'Layer mash'),
            livestock_actions.RecordSale('Goats', 3, Decimal('750.00'), 'Market day'),
            livestock_actions.RecordSale('Sheep', 4, Decimal('500.00')),
            livestock_actions.RecordLoss('Chickens', 5, 'Predator'),
            livestock_actions.AddMore('Chickens', 30),
        ]:
            ledger.apply(action)

        goats = AnimalType.objects.get(type='Goats')
        for n in range(1, 4):
            Animal.objects.create(
                animal_type=goats,
                tag=f'GT-{n:03d}',
                purchase_price=Decimal('120.00'),
                feed_cost=Decimal('15.00'),
            )
        self.stdout.write(f'  {AnimalType.objects.count()} animal types')

    def seed_crops(self, today, last_month):
        self.stdout.write('\nCrops...')
        ledger = CropLedger()

        ledger.create_crop('Maize', 500, 'Harvested')
        ledger.create_crop('Tomatoes', 200, 'Flowering')

        ledger.add_cost('Maize', CostType.SEEDS, Decimal('120.00'), cost_date=last_month)
        ledger.add_cost('Maize', CostType.FERTILIZER, Decimal('210.00'), cost_date=today)
        ledger.add_cost('Tomatoes', CostType.WATER, Decimal('45.00'), cost_date=today)

        ledger.sell('Maize', 150, Decimal('900.00'), 'Grain buyer')
        ledger.sell('Tomatoes', 40, Decimal('160.00'))
        self.stdout.write(f'  {Crop.objects.count()} crops')

    def seed_equipment(self, today, last_month):
        self.stdout.write('\nEquipment...')
        service = EquipmentService()

        tractor = service.apply(equipment_actions.AddEquipment(
            type='Tractor',
            acquisition_type=AcquisitionType.PURCHASED,
            acquisition_date=last_month,
            transaction_amount=Decimal('8500.00'),
        ))
        pump = service.apply(equipment_actions.AddEquipment(
            type='Water pump',
            acquisition_type=AcquisitionType.RENTED,
            acquisition_date=last_month,
            transaction_amount=Decimal('80.00'),
        ))
        service.apply(equipment_actions.AddMaintenanceCost(tractor.pk, Decimal('150.00')))
        service.apply(equipment_actions.AddRentalCost(pump.pk, Decimal('80.00'), today))
        self.stdout.write(f'  {Equipment.objects.count()} pieces of equipment')

    def seed_workforce(self, today, last_month):
        self.stdout.write('\nWorkforce...')
        herdsman = Role.objects.create(name='Herdsman', description='Looks after livestock')
        picker = Role.objects.create(name='Picker')
        pens = ResponsibilityArea.objects.create(name='Animal pens')
        field = ResponsibilityArea.objects.create(name='North field')

        kofi = Worker.objects.create(
            name='Kofi Mensah', role=herdsman, payment_type=PaymentType.MONTHLY,
            payment_rate=Decimal('400.00'), responsibility_area=pens,
        )
        ama = Worker.objects.create(
            name='Ama Owusu', role=picker, payment_type=PaymentType.PER_TASK,
            payment_rate=Decimal('25.00'), responsibility_area=field,
        )

        payroll = PayrollService()
        payroll.record_payment(kofi.pk, Decimal('400.00'), PaymentType.MONTHLY, last_month)
        payroll.record_payment(kofi.pk, Decimal('400.00'), PaymentType.MONTHLY, today)
        payroll.record_payment(
            ama.pk, Decimal('25.00'), PaymentType.PER_TASK, today,
            task_description='Tomato harvest',
        )
        self.stdout.write(f'  {Worker.objects.count()} workers')

    def seed_schedule(self, today):
        self.stdout.write('\nSchedule...')
        service = ScheduleService()
        service.create_task('Feed animals', today, time=time(7, 0), recurrence=Recurrence.DAILY)
        service.create_task('Clean pens', today, recurrence=Recurrence.WEEKLY)
        service.create_task('Vet check', today + timedelta(days=3), description='Goats and sheep')
        service.create_task('Pay salaries', today.replace(day=28), recurrence=Recurrence.MONTHLY)
        self.stdout.write(f'  {Task.objects.count()} tasks')
