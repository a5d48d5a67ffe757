from main.views import IssueFormView
from .forms import DatedItemForm
from .serializers import LabIssueSerializer
from .state import LabIssueRequest


class LabIssueFormView(IssueFormView):
    """Форма 2: даты выдачи и возврата по каждой позиции, без каталога."""
    template_name = 'issueform2/issue_form.html'
    state_class = LabIssueRequest
    item_form_class = DatedItemForm
    serializer_class = LabIssueSerializer
    script_url_setting = 'LAB_ISSUE_SCRIPT_URL'
    session_key = 'issueform2_session'
