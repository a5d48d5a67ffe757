from django.apps import AppConfig


class Issueform2Config(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'issueform2'
    verbose_name = 'Item Issue Form (per-item dates)'
