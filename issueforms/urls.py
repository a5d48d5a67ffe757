from django.conf import settings
from django.urls import include, path

urlpatterns = [
    path(settings.URL_PREFIX, include('main.urls')),
    path(settings.URL_PREFIX, include('issueform1.urls')),
    path(settings.URL_PREFIX, include('issueform2.urls')),
]
