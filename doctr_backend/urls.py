"""Doctr URL Configuration.

API routes:
    /api/health/   - Health check (core)
    /api/doctors   - Doctor registry (doctors)
    /api/schema/   - OpenAPI schema
    /api/docs/     - Swagger UI
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("doctr_backend.core.urls")),
    path("api/", include("doctr_backend.doctors.urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
]
