# pager/pagewindow/api_urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: pager/pagewindow/api_urls.py
# Назначение: маршруты DRF (router) и ручки окна пагинации
# ─────────────────────────────────────────────────────────────────────────────

from django.urls import path, include                 # функции маршрутизации
from rest_framework.routers import DefaultRouter      # роутер DRF
from . import api_views                               # вью API

router = DefaultRouter()
router.register(r"items", api_views.SampleItemViewSet, basename="api-items")  # демо-список

urlpatterns = [
    path("page-window/", api_views.api_page_window, name="page_window"),                             # окно страниц
    path("pagination/", api_views.PaginationStateView.as_view(), name="pagination"),                 # состояние
    path("pagination/navigate/", api_views.PaginationNavigateView.as_view(), name="pagination_navigate"),  # переходы
    path("", include(router.urls)),
]
