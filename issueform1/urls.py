from django.urls import path
from .views import ItemIssueFormView
from .views_api import api_item_issue

urlpatterns = [
    path('item-issue/', ItemIssueFormView.as_view(), name='item_issue_form'),
    path('api/item-issue/', api_item_issue, name='api_item_issue'),
]
