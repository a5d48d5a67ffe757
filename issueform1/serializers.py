from rest_framework import serializers

from main.serializers import IssueRequestSerializer
from .state import ItemIssueRequest, USER_TYPES


class CatalogItemSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True)
    quantity = serializers.CharField(allow_blank=True)


class ItemIssueSerializer(IssueRequestSerializer):
    state_class = ItemIssueRequest

    userType = serializers.ChoiceField(source='user_type', choices=USER_TYPES)
    otherDepartment = serializers.CharField(
        source='other_department', write_only=True, required=False, allow_blank=True,
    )
    instructorName = serializers.CharField(
        source='instructor_name', required=False, allow_blank=True, default='',
    )
    issueDate = serializers.CharField(source='issue_date', required=False, allow_blank=True, default='')
    returnDate = serializers.CharField(source='return_date', required=False, allow_blank=True, default='')
    items = CatalogItemSerializer(many=True, allow_empty=False)
