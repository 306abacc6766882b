# Generated manually for equipment
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Equipment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(help_text="Equipment description (e.g., 'Tractor', 'Water pump')", max_length=100)),
                ('acquisition_type', models.CharField(choices=[('Purchased', 'Purchased'), ('Rented', 'Rented')], max_length=20)),
                ('acquisition_date', models.DateField(default=django.utils.timezone.localdate)),
                ('maintenance_cost', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Accrued maintenance cost (purchased equipment only)', max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name_plural': 'Equipment',
                'db_table': 'equipments',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='EquipmentTransaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('transaction_type', models.CharField(choices=[('Purchased', 'Purchase'), ('Rented', 'Initial Rental'), ('Rental', 'Rental Payment')], max_length=20)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('transaction_date', models.DateField(db_index=True, default=django.utils.timezone.localdate)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('equipment', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='transactions', to='equipment.equipment')),
            ],
            options={
                'db_table': 'equipment_transactions',
                'ordering': ['-transaction_date', '-id'],
            },
        ),
    ]
