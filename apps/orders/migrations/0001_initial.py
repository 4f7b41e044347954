from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='OrderModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('customer_id', models.BigIntegerField(db_index=True)),
                ('status', models.CharField(
                    choices=[
                        ('PENDING', 'awaiting payment'),
                        ('PAID', 'paid'),
                        ('SHIPPED', 'being shipped'),
                        ('DELIVERED', 'delivered'),
                        ('CANCELLED', 'cancelled'),
                    ],
                    db_index=True, default='PENDING', max_length=20,
                )),
                ('shipping_address', models.CharField(max_length=200)),
                ('coupon_code', models.CharField(blank=True, max_length=20, null=True)),
                ('discount_amount', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('ordered_at', models.DateTimeField(blank=True, null=True)),
                ('paid_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'orders',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='OrderItemModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('position', models.PositiveSmallIntegerField()),
                ('product_id', models.BigIntegerField()),
                ('product_name', models.CharField(max_length=255)),
                ('price', models.DecimalField(decimal_places=2, max_digits=12)),
                ('quantity', models.PositiveIntegerField()),
                ('order', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='items', to='orders.ordermodel',
                )),
            ],
            options={
                'db_table': 'order_items',
                'ordering': ['position'],
            },
        ),
        migrations.AddConstraint(
            model_name='orderitemmodel',
            constraint=models.UniqueConstraint(fields=('order', 'position'), name='uniq_order_item_position'),
        ),
    ]
