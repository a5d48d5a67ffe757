import re

from django.conf import settings


EMAIL_ERROR = "Email must be a valid LNMIIT email address (@lnmiit.ac.in)"
MOBILE_ERROR = "Mobile number must be exactly 10 digits"
REQUIRED_ERROR = "Please fill in all required fields."

MOBILE_RE = re.compile(r'[0-9]{10}')


def is_lnmiit_email(email):
    domain = getattr(settings, 'LNMIIT_EMAIL_DOMAIN', '@lnmiit.ac.in')
    return (email or '').endswith(domain)


def is_valid_mobile(mobile):
    # \d в Python пропускает и не-ASCII цифры, поэтому явный диапазон
    return bool(MOBILE_RE.fullmatch(mobile or ''))


def missing_required(state):
    """Имена незаполненных обязательных полей, включая поля позиций."""
    missing = [name for name in state.active_required_fields() if not getattr(state, name).strip()]
    for index, item in enumerate(state.items):
        for name in item.required_fields:
            if not getattr(item, name).strip():
                missing.append(f'items[{index}].{name}')
    return missing


def validate_request(state):
    """
    Проверка заявки перед отправкой.
    Возвращает текст первой найденной ошибки или None.
    """
    if not is_lnmiit_email(state.email):
        return EMAIL_ERROR
    if not is_valid_mobile(state.mobile):
        return MOBILE_ERROR
    if missing_required(state):
        return REQUIRED_ERROR
    return None
