from django.conf import settings


def institute_info(request):
    """Шапка и подвал страниц: название института и контакты."""
    return {
        'institute': settings.INSTITUTE_INFO,
    }
