# pager/pager/urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: pager/pager/urls.py
# Назначение: корневые URL-маршруты проекта + подключение debug_toolbar
# ─────────────────────────────────────────────────────────────────────────────

from django.urls import path, include  # функции для описания маршрутов
from django.conf import settings       # проверка DEBUG

urlpatterns = [
    path("", include(("pagewindow.urls", "pagewindow"), namespace="pagewindow")),
]

# URL-ы тулбара — только при DEBUG и включённом тулбаре
if settings.DEBUG and getattr(settings, "ENABLE_DEBUG_TOOLBAR", False):
    import debug_toolbar
    urlpatterns = [path("__debug__/", include(debug_toolbar.urls))] + urlpatterns
