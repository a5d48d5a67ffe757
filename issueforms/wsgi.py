"""
WSGI-точка входа проекта issueforms.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'issueforms.settings')

application = get_wsgi_application()
