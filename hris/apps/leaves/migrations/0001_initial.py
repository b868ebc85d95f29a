import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('employees', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Leave',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('leave_type', models.CharField(max_length=100)),
                ('leave_start_date', models.DateField()),
                ('leave_end_date', models.DateField()),
                ('leave_days', models.PositiveIntegerField()),
                ('leave_reason', models.TextField()),
                ('leave_comments', models.TextField(blank=True)),
                ('leave_date_reported', models.DateField()),
                ('leave_date_approved', models.DateField(blank=True, null=True)),
                ('leave_status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected'), ('cancelled', 'Cancelled')], default='pending', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='leaves', to='employees.employee')),
            ],
            options={
                'verbose_name': 'Отпуск',
                'verbose_name_plural': 'Отпуска',
                'db_table': 'leaves',
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='LeaveCredit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('total_credits', models.PositiveIntegerField(default=0, verbose_name='Всего кредитов')),
                ('used_credits', models.PositiveIntegerField(default=0, verbose_name='Использовано')),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('employee', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='leavecredit', to='employees.employee')),
            ],
            options={
                'verbose_name': 'Кредиты отпуска',
                'verbose_name_plural': 'Кредиты отпуска',
                'db_table': 'leave_credits',
            },
        ),
    ]
