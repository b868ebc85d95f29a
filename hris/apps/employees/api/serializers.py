from rest_framework import serializers

from hris.apps.employees.models import Employee


class EmployeeSerializer(serializers.ModelSerializer):
    department_name = serializers.CharField(source='department.name', read_only=True)

    class Meta:
        model = Employee
        fields = [
            'id', 'employee_id_number', 'employee_name',
            'department', 'department_name', 'position',
            'email', 'picture', 'work_status',
        ]


class EmployeeBriefSerializer(serializers.ModelSerializer):
    """Сотрудник внутри заявок"""
    department_name = serializers.CharField(source='department.name', read_only=True)

    class Meta:
        model = Employee
        fields = ['id', 'employee_id_number', 'employee_name', 'department_name', 'position', 'picture']
