from rest_framework import serializers

from hris.apps.departments.models import Department, SupervisorDepartment


class SupervisorAssignmentSerializer(serializers.ModelSerializer):
    supervisor_name = serializers.CharField(source='user.full_name', read_only=True)

    class Meta:
        model = SupervisorDepartment
        fields = ['id', 'user', 'supervisor_name', 'can_evaluate', 'created_at']


class DepartmentSerializer(serializers.ModelSerializer):
    supervisor_assignments = SupervisorAssignmentSerializer(many=True, read_only=True)

    class Meta:
        model = Department
        fields = ['id', 'name', 'supervisor_assignments']
