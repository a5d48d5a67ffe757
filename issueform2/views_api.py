from django.conf import settings
from rest_framework.decorators import api_view

from main.views_api import submit_issue_request
from .serializers import LabIssueSerializer


@api_view(['POST'])
def api_lab_issue(request):
    return submit_issue_request(request, LabIssueSerializer, settings.LAB_ISSUE_SCRIPT_URL)
