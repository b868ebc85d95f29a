from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Модель пользователя системы"""

    class RoleType(models.TextChoices):
        SUPER_ADMIN = 'super_admin', 'Super Admin'
        HR_ADMIN = 'hr_admin', 'HR Admin'
        SUPERVISOR = 'supervisor', 'Supervisor'
        MANAGER = 'manager', 'Manager'
        EMPLOYEE = 'employee', 'Employee'

    role = models.CharField(
        max_length=20,
        choices=RoleType.choices,
        default=RoleType.EMPLOYEE
    )

    class Meta:
        db_table = 'users'

    @property
    def full_name(self) -> str:
        return self.get_full_name() or self.username

    def is_super_admin(self) -> bool:
        return self.is_superuser or self.role == self.RoleType.SUPER_ADMIN

    def is_hr_admin(self) -> bool:
        return self.role == self.RoleType.HR_ADMIN

    def can_process_returns(self) -> bool:
        """Обрабатывать формы возвращения на работу может только кадровик или суперадмин"""
        return self.is_super_admin() or self.is_hr_admin()
