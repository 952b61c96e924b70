from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

from .health import health_check

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", health_check, name="health_check"),
    path("auth/", include("accounts.urls")),
    path("", include("events.urls")),
    path("", include("eventhub.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

handler403 = "eventhub.views.permission_denied_view"
handler404 = "eventhub.views.page_not_found_view"
