"""
Общие абстрактные модели
"""
from django.conf import settings
from django.db import models
from django.db.models import F


class CreditBalance(models.Model):
    """
    Баланс кредитов сотрудника (1 кредит = 1 день).

    Наследники задают ``default_credits_setting`` - имя настройки
    с годовым лимитом, который выдается при первом обращении.
    """
    default_credits_setting = None

    employee = models.OneToOneField(
        'employees.Employee',
        on_delete=models.CASCADE,
        related_name='%(class)s'
    )
    total_credits = models.PositiveIntegerField(default=0, verbose_name='Всего кредитов')
    used_credits = models.PositiveIntegerField(default=0, verbose_name='Использовано')
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def __str__(self):
        return f"{self.employee}: {self.remaining_credits}/{self.total_credits}"

    @property
    def remaining_credits(self) -> int:
        return max(self.total_credits - self.used_credits, 0)

    @classmethod
    def get_or_create_for_employee(cls, employee_id: int):
        credits, _ = cls.objects.get_or_create(
            employee_id=employee_id,
            defaults={'total_credits': getattr(settings, cls.default_credits_setting, 0)},
        )
        return credits

    def use_credits(self, amount: int) -> None:
        """Списать кредиты при одобрении заявки"""
        type(self).objects.filter(pk=self.pk).update(used_credits=F('used_credits') + amount)
        self.refresh_from_db(fields=['used_credits'])

    def refund_credits(self, amount: int) -> None:
        """Вернуть кредиты, если одобренная заявка отклонена или отменена"""
        self.refresh_from_db(fields=['used_credits'])
        self.used_credits = max(self.used_credits - amount, 0)
        self.save(update_fields=['used_credits', 'updated_at'])
