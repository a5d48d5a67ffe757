from django.conf import settings
from rest_framework.decorators import api_view

from main.views_api import submit_issue_request
from .serializers import ItemIssueSerializer


@api_view(['POST'])
def api_item_issue(request):
    return submit_issue_request(request, ItemIssueSerializer, settings.ITEM_ISSUE_SCRIPT_URL)
