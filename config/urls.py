from django.urls import include, path
from django.views.generic import RedirectView


urlpatterns = [
    path("", RedirectView.as_view(url="/api/doc/", permanent=False)),
    path("api/docs/", RedirectView.as_view(url="/api/doc/", permanent=False, query_string=True)),
    path("api/", include("catalog_app.urls")),
    path("", include("config.docs.urls")),
]
