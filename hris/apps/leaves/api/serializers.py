from rest_framework import serializers

from hris.apps.employees.api.serializers import EmployeeBriefSerializer
from hris.apps.leaves.models import Leave, LeaveCredit


class LeaveSerializer(serializers.ModelSerializer):
    employee_detail = EmployeeBriefSerializer(source='employee', read_only=True)

    class Meta:
        model = Leave
        fields = [
            'id', 'employee', 'employee_detail',
            'leave_type', 'leave_start_date', 'leave_end_date', 'leave_days',
            'leave_reason', 'leave_comments', 'leave_date_reported',
            'leave_date_approved', 'leave_status',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class LeaveCreateSerializer(serializers.Serializer):
    """Входные данные заявки на отпуск"""
    employee_id = serializers.IntegerField()
    leave_type = serializers.CharField(max_length=100)
    leave_start_date = serializers.DateField()
    leave_end_date = serializers.DateField()
    leave_days = serializers.IntegerField(min_value=1)
    leave_reason = serializers.CharField()
    leave_date_reported = serializers.DateField()
    leave_comments = serializers.CharField(required=False, allow_blank=True, default="")

    def validate(self, attrs):
        if attrs['leave_end_date'] < attrs['leave_start_date']:
            raise serializers.ValidationError({'leave_end_date': "End date must be on or after the start date."})
        return attrs


class LeaveStatusSerializer(serializers.Serializer):
    leave_status = serializers.ChoiceField(choices=Leave.LeaveStatus.choices)
    leave_comments = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    leave_date_approved = serializers.DateField(required=False, allow_null=True, default=None)


class LeaveCreditSerializer(serializers.ModelSerializer):
    remaining_credits = serializers.IntegerField(read_only=True)

    class Meta:
        model = LeaveCredit
        fields = ['employee', 'total_credits', 'used_credits', 'remaining_credits', 'updated_at']
