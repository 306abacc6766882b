# Generated manually for the crop ledger
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
            name='Crop',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(help_text="Crop name (e.g., 'Maize', 'Tomatoes')", max_length=100, unique=True)),
                ('quantity', models.PositiveIntegerField(default=0, help_text='Units currently on hand')),
                ('initial_quantity', models.PositiveIntegerField(default=0, help_text='Cumulative units added (cost allocation baseline)')),
                ('growth_stage', models.CharField(blank=True, help_text='Current growth stage (Seedling, Vegetative, Harvested, ...)', max_length=50)),
                ('total_cost_of_care', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Running total of cost-of-care entries', max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'crops',
                'ordering': ['type'],
            },
        ),
        migrations.CreateModel(
            name='CropSale',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('sale_price', models.DecimalField(decimal_places=2, help_text='Total price received for this sale', max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('cost_per_unit_at_sale', models.DecimalField(decimal_places=4, default=Decimal('0.0000'), max_digits=14)),
                ('notes', models.TextField(blank=True)),
                ('sale_date', models.DateTimeField(db_index=True)),
                ('crop', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sales', to='crops.crop')),
            ],
            options={
                'db_table': 'crop_sales',
                'ordering': ['-sale_date', '-id'],
            },
        ),
        migrations.CreateModel(
            name='CropCost',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('cost_type', models.CharField(choices=[('Water', 'Water'), ('Fertilizer', 'Fertilizer'), ('Pesticide', 'Pesticide'), ('Labor', 'Labor'), ('Seeds', 'Seeds'), ('Other', 'Other')], default='Other', max_length=20)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('cost_date', models.DateField(db_index=True, default=django.utils.timezone.localdate)),
                ('notes', models.TextField(blank=True)),
                ('recorded_at', models.DateTimeField(auto_now_add=True)),
                ('crop', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='costs', to='crops.crop')),
            ],
            options={
                'db_table': 'crop_costs',
                'ordering': ['-cost_date', '-recorded_at'],
            },
        ),
    ]
