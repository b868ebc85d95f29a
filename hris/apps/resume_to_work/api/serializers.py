from rest_framework import serializers

from hris.apps.employees.api.serializers import EmployeeBriefSerializer
from hris.apps.resume_to_work.models import ResumeToWork


class ResumeToWorkSerializer(serializers.ModelSerializer):
    employee_detail = EmployeeBriefSerializer(source='employee', read_only=True)
    processed_by_name = serializers.SerializerMethodField()

    class Meta:
        model = ResumeToWork
        fields = [
            'id', 'employee', 'employee_detail', 'return_date',
            'previous_absence_reference', 'comments', 'status',
            'processed_by', 'processed_by_name', 'processed_at',
            'supervisor_notified', 'supervisor_notified_at',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_processed_by_name(self, obj):
        return obj.processed_by.full_name if obj.processed_by else None


class ResumeToWorkCreateSerializer(serializers.Serializer):
    employee_id = serializers.IntegerField()
    return_date = serializers.DateField()
    previous_absence_reference = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    comments = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
