import uuid

import django.utils.timezone
from django.db import migrations, models


STATUS_CHOICES = [
    ('pending', 'Order placed'),
    ('confirmed', 'Confirmed'),
    ('processing', 'Being prepared'),
    ('shipped', 'Shipped'),
    ('delivered', 'Delivered'),
    ('cancelled', 'Cancelled'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CartModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('owner_id', models.CharField(max_length=64, unique=True)),
                ('items', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'carts',
            },
        ),
        migrations.CreateModel(
            name='OrderModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('tracking_id', models.CharField(max_length=32, unique=True)),
                ('owner_id', models.CharField(blank=True, db_index=True, max_length=64, null=True)),
                ('status', models.CharField(choices=STATUS_CHOICES, db_index=True, default='pending', max_length=20)),
                ('version', models.PositiveIntegerField(default=1)),
                ('customer_name', models.CharField(max_length=100)),
                ('phone', models.CharField(max_length=20)),
                ('district', models.CharField(max_length=100)),
                ('thana', models.CharField(blank=True, max_length=100)),
                ('address', models.TextField()),
                ('items', models.JSONField(default=list)),
                ('total', models.DecimalField(decimal_places=2, max_digits=12)),
                ('payment_info', models.JSONField(default=dict)),
                ('idempotency_key', models.CharField(blank=True, max_length=255, null=True, unique=True)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'orders',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['status', 'created_at'], name='orders_status_created_idx')],
            },
        ),
        migrations.CreateModel(
            name='CustomOrderModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('tracking_id', models.CharField(max_length=32, unique=True)),
                ('status', models.CharField(choices=STATUS_CHOICES, db_index=True, default='pending', max_length=20)),
                ('version', models.PositiveIntegerField(default=1)),
                ('product_id', models.UUIDField(db_index=True)),
                ('product_name', models.CharField(max_length=255)),
                ('quantity', models.PositiveIntegerField()),
                ('base_price', models.DecimalField(decimal_places=2, max_digits=12)),
                ('customer_name', models.CharField(max_length=100)),
                ('phone', models.CharField(max_length=20)),
                ('district', models.CharField(max_length=100)),
                ('thana', models.CharField(blank=True, max_length=100)),
                ('address', models.TextField()),
                ('customization_instructions', models.TextField()),
                ('customization_images', models.JSONField(blank=True, default=list)),
                ('customization_cost', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('total_price', models.DecimalField(decimal_places=2, max_digits=12)),
                ('payment_info', models.JSONField(default=dict)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'custom_orders',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['status', 'created_at'], name='custom_orders_status_idx')],
            },
        ),
    ]
