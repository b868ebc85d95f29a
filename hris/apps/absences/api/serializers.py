from rest_framework import serializers

from hris.apps.absences.models import Absence, AbsenceCredit
from hris.apps.employees.api.serializers import EmployeeBriefSerializer


class AbsenceSerializer(serializers.ModelSerializer):
    employee_detail = EmployeeBriefSerializer(source='employee', read_only=True)
    department_name = serializers.CharField(source='department.name', read_only=True)
    approved_by_name = serializers.SerializerMethodField()
    days = serializers.IntegerField(read_only=True)

    class Meta:
        model = Absence
        fields = [
            'id', 'employee', 'employee_detail',
            'full_name', 'employee_id_number', 'department', 'department_name', 'position',
            'absence_type', 'from_date', 'to_date', 'days', 'is_partial_day', 'reason',
            'status', 'submitted_at', 'approved_at', 'approved_by', 'approved_by_name',
            'approval_comments',
        ]
        read_only_fields = fields

    def get_approved_by_name(self, obj):
        return obj.approved_by.full_name if obj.approved_by else None


class AbsenceCreateSerializer(serializers.Serializer):
    employee_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    full_name = serializers.CharField(max_length=255)
    employee_id_number = serializers.CharField(max_length=255)
    department_id = serializers.IntegerField()
    position = serializers.CharField(max_length=255)
    absence_type = serializers.ChoiceField(choices=Absence.AbsenceType.choices)
    from_date = serializers.DateField()
    to_date = serializers.DateField()
    is_partial_day = serializers.BooleanField(required=False, default=False)
    reason = serializers.CharField(min_length=10)

    def validate(self, attrs):
        if attrs['to_date'] < attrs['from_date']:
            raise serializers.ValidationError({'to_date': "End date must be on or after the start date."})
        return attrs


class AbsenceStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Absence.AbsenceStatus.choices)
    approval_comments = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)


class AbsenceCreditSerializer(serializers.ModelSerializer):
    remaining_credits = serializers.IntegerField(read_only=True)

    class Meta:
        model = AbsenceCredit
        fields = ['employee', 'total_credits', 'used_credits', 'remaining_credits', 'updated_at']
