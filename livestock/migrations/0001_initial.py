# Generated manually for the livestock ledger
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AnimalType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(help_text="Animal type name (e.g., 'Sheep', 'Goat')", max_length=100, unique=True)),
                ('quantity', models.PositiveIntegerField(default=0, help_text='Animals currently on hand')),
                ('initial_quantity', models.PositiveIntegerField(default=0, help_text='Cumulative animals acquired (cost allocation baseline)')),
                ('total_purchase_cost', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Total amount paid to acquire animals of this type', max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('total_cost_of_living', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Running total of cost-of-living entries (feed, vet, housing)', max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Animal Type',
                'verbose_name_plural': 'Animal Types',
                'db_table': 'animal_types',
                'ordering': ['type'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(total_cost_of_living__gte=0), name='animal_type_cost_of_living_non_negative'),
                ],
            },
        ),
        migrations.CreateModel(
            name='AnimalSale',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.PositiveIntegerField(help_text='Number of animals sold', validators=[django.core.validators.MinValueValidator(1)])),
                ('sale_price', models.DecimalField(decimal_places=2, help_text='Total price received for this sale', max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('cost_per_unit', models.DecimalField(decimal_places=4, default=Decimal('0.0000'), help_text='Cost of living per animal at the time of sale', max_digits=14)),
                ('notes', models.TextField(blank=True)),
                ('sale_date', models.DateTimeField(db_index=True, help_text='When the sale was recorded')),
                ('animal_type', models.ForeignKey(help_text='Animal type sold', on_delete=django.db.models.deletion.CASCADE, related_name='sales', to='livestock.animaltype')),
            ],
            options={
                'verbose_name': 'Animal Sale',
                'verbose_name_plural': 'Animal Sales',
                'db_table': 'animal_sales',
                'ordering': ['-sale_date', '-id'],
            },
        ),
        migrations.CreateModel(
            name='CostOfLivingEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('cost', models.DecimalField(decimal_places=2, help_text='Amount spent', max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('month', models.CharField(db_index=True, help_text='Period label (YYYY-MM)', max_length=7)),
                ('notes', models.TextField(blank=True)),
                ('recorded_at', models.DateTimeField(auto_now_add=True)),
                ('animal_type', models.ForeignKey(help_text='Animal type the cost applies to', on_delete=django.db.models.deletion.CASCADE, related_name='cost_history', to='livestock.animaltype')),
            ],
            options={
                'verbose_name': 'Cost of Living Entry',
                'verbose_name_plural': 'Cost of Living History',
                'db_table': 'cost_of_living_history',
                'ordering': ['-month', '-recorded_at'],
            },
        ),
        migrations.CreateModel(
            name='Animal',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tag', models.CharField(blank=True, help_text='Ear tag or other identifier', max_length=50)),
                ('purchase_price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('feed_cost', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('health_status', models.CharField(choices=[('Healthy', 'Healthy'), ('Sick', 'Sick'), ('Under Treatment', 'Under Treatment'), ('Quarantined', 'Quarantined')], default='Healthy', max_length=20)),
                ('production', models.CharField(blank=True, help_text='Production notes (milk, wool, eggs, ...)', max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('animal_type', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='animals', to='livestock.animaltype')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='offspring', to='livestock.animal')),
            ],
            options={
                'db_table': 'animals',
                'ordering': ['-created_at'],
            },
        ),
    ]
