from rest_framework import serializers

from main.serializers import IssueRequestSerializer
from .state import LabIssueRequest, USER_TYPES


class DatedItemSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True)
    quantity = serializers.CharField(allow_blank=True)
    issueDate = serializers.CharField(source='issue_date', allow_blank=True)
    returnDate = serializers.CharField(source='return_date', allow_blank=True)
    remark = serializers.CharField(required=False, allow_blank=True, default='')


class LabIssueSerializer(IssueRequestSerializer):
    state_class = LabIssueRequest

    userType = serializers.ChoiceField(source='user_type', choices=USER_TYPES)
    items = DatedItemSerializer(many=True, allow_empty=False)
