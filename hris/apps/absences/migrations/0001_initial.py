import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('departments', '0001_initial'),
        ('employees', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Absence',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('full_name', models.CharField(max_length=255)),
                ('employee_id_number', models.CharField(max_length=255)),
                ('position', models.CharField(max_length=255)),
                ('absence_type', models.CharField(choices=[('Annual Leave', 'Annual Leave'), ('Personal Leave', 'Personal Leave'), ('Maternity/Paternity', 'Maternity/Paternity'), ('Sick Leave', 'Sick Leave'), ('Emergency Leave', 'Emergency Leave'), ('Other', 'Other')], max_length=30)),
                ('from_date', models.DateField()),
                ('to_date', models.DateField()),
                ('is_partial_day', models.BooleanField(default=False)),
                ('reason', models.TextField(validators=[django.core.validators.MinLengthValidator(10)])),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected')], default='pending', max_length=20)),
                ('submitted_at', models.DateTimeField(auto_now_add=True)),
                ('approved_at', models.DateTimeField(blank=True, null=True)),
                ('approval_comments', models.TextField(blank=True, null=True)),
                ('approved_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='approved_absences', to=settings.AUTH_USER_MODEL)),
                ('department', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='absences', to='departments.department')),
                ('employee', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='absences', to='employees.employee')),
            ],
            options={
                'verbose_name': 'Отсутствие',
                'verbose_name_plural': 'Отсутствия',
                'db_table': 'absences',
                'ordering': ['-submitted_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='AbsenceCredit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('total_credits', models.PositiveIntegerField(default=0, verbose_name='Всего кредитов')),
                ('used_credits', models.PositiveIntegerField(default=0, verbose_name='Использовано')),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('employee', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='absencecredit', to='employees.employee')),
            ],
            options={
                'verbose_name': 'Кредиты отсутствия',
                'verbose_name_plural': 'Кредиты отсутствия',
                'db_table': 'absence_credits',
            },
        ),
    ]
