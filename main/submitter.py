"""
Отправка заявки в Google Apps Script.

Вызов работает в режиме "отправил и забыл": ответ скрипта не читается,
успехом считается любой вызов, который не упал с сетевой ошибкой.
Подтверждения записи от таблицы у нас нет.
"""
import logging

import requests
from django.conf import settings

from .serializers import build_payload

logger = logging.getLogger(__name__)

SUBMIT_ERROR = 'Failed to submit form. Please check your internet connection and try again.'


class SubmissionError(Exception):
    """Сетевая ошибка при отправке заявки."""

    def __init__(self, message=SUBMIT_ERROR):
        super().__init__(message)
        self.message = message


def submit_request(url, state, serializer_class, session=None):
    payload = build_payload(serializer_class, state)
    http = session or requests
    try:
        http.post(url, json=payload, timeout=settings.ISSUE_FORMS_HTTP_TIMEOUT)
    except requests.exceptions.RequestException as e:
        logger.exception("Error submitting form to %s", url)
        raise SubmissionError() from e

    logger.info("Issue request submitted: %s (%s), %d item(s)",
                payload.get('name'), payload.get('id'), len(payload.get('items', [])))
    return payload
