from django.apps import AppConfig


class Issueform1Config(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'issueform1'
    verbose_name = 'Item Issue Form (catalog)'
