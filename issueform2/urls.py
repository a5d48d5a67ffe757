from django.urls import path
from .views import LabIssueFormView
from .views_api import api_lab_issue

urlpatterns = [
    path('lab-issue/', LabIssueFormView.as_view(), name='lab_issue_form'),
    path('api/lab-issue/', api_lab_issue, name='api_lab_issue'),
]
