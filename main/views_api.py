#апи для отправки заявки без HTML-формы (JSON в том же формате, что уходит в таблицу)
from rest_framework import status
from rest_framework.response import Response

from . import state as st
from .views import run_submission


def submit_issue_request(request, serializer_class, script_url):
    serializer = serializer_class(data=request.data)
    if not serializer.is_valid():
        return Response(
            {'status': 'error', 'message': 'Malformed request', 'errors': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )

    form_session = run_submission(
        st.FormSession(state=serializer.to_state()), script_url, serializer_class
    )
    if form_session.is_submitted:
        return Response({
            'status': 'success',
            'request': serializer_class(form_session.snapshot.for_submission()).data
        })

    if form_session.error_kind == st.NETWORK_FAILED:
        code = status.HTTP_502_BAD_GATEWAY
    else:
        code = status.HTTP_400_BAD_REQUEST
    return Response(
        {'status': 'error', 'message': form_session.error},
        status=code
    )
