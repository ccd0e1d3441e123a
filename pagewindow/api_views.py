# pager/pagewindow/api_views.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: pager/pagewindow/api_views.py
# Назначение: DRF-представления: окно страниц, состояние контроллера,
# переходы и демонстрационный список с «оконной» пагинацией
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations  # поддержка современных аннотаций

import logging
from typing import Any, Dict, List

from django.http import JsonResponse  # возврат JSON с ошибкой

from rest_framework import mixins, viewsets  # базовые классы DRF
from rest_framework.decorators import api_view  # функции-обработчики
from rest_framework.response import Response  # DRF-ответ
from rest_framework.views import APIView  # базовый API-класс

# ===== НАШИ СЕРВИСЫ И СЕРИАЛИЗАТОРЫ ===========================================
from .pagination import WindowedPagination  # пагинация с окном страниц
from .serializers import (
    NavigateSerializer,          # переход (action / target_page / page_size)
    PageTokenSerializer,         # маркер окна
    PageWindowQuerySerializer,   # параметры генератора
    PaginationQuerySerializer,   # состояние контроллера
    SampleItemSerializer,        # элемент демо-списка
)
from .services.controller import (
    PageState,
    PaginationController,
    PaginationError,
    WindowConfig,
    default_max_visible,
    get_variant,
)
from .services.pagination import generate_page_window, to_literal

logger = logging.getLogger(__name__)

MAX_SAMPLE_ITEMS = 10_000


def _error(message: str, status: int = 400) -> JsonResponse:
    return JsonResponse({"error": message}, status=status, json_dumps_params={"ensure_ascii": False})


def _controller_from(data: Dict[str, Any]) -> PaginationController:
    """Собирает контроллер из провалидированных параметров (PaginationQuerySerializer)."""
    state = PageState.for_count(data["page"], data["per"], data["count"])
    config = WindowConfig(
        max_visible=data.get("max_visible", default_max_visible()),
        show_first_last=data["show_first_last"],
    )
    return PaginationController(
        state,
        variant=get_variant(data["variant"]),
        config=config,
        mode=data["mode"],
        is_loading=data["is_loading"],
    )


# ==============================================================================
#                           ОКНО СТРАНИЦ И КОНТРОЛЛЕР
# ==============================================================================
@api_view(["GET"])
def api_page_window(request):
    """
    Окно страниц: ?current_page=&total_pages=&max_visible=
    Ответ: {"tokens": [{"kind": "page", "number": 1}, ...], "pages": [1, "…", 10]}
    """
    ser = PageWindowQuerySerializer(data=request.query_params)
    ser.is_valid(raise_exception=True)  # не числа -> 400 с ошибками полей
    data = ser.validated_data

    max_visible = data.get("max_visible", default_max_visible())
    tokens = generate_page_window(data["current_page"], data["total_pages"], max_visible)
    return Response({
        "current_page": data["current_page"],
        "total_pages": data["total_pages"],
        "max_visible": max_visible,
        "tokens": PageTokenSerializer(tokens, many=True).data,
        "pages": to_literal(tokens),
    })


class PaginationStateView(APIView):
    """GET: полное состояние контроллера (кнопки, prev/next, инфо) для ?page=&per=&count=&variant=."""

    def get(self, request, *args, **kwargs):
        ser = PaginationQuerySerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)
        try:
            controller = _controller_from(ser.validated_data)
        except PaginationError as e:
            return _error(str(e))
        return Response(controller.as_dict())


class PaginationNavigateView(APIView):
    """
    POST: переход по действию/странице/размеру. Тело — как у GET-состояния плюс
    ровно одно из: action (first/previous/next/last, ArrowLeft/ArrowRight/Home/End),
    target_page, page_size. Ответ: {"changed": bool, "state": {...}}
    """

    def post(self, request, *args, **kwargs):
        ser = NavigateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        try:
            controller = _controller_from(data)
            if "action" in data:
                new_state = controller.navigate(data["action"])
            elif "target_page" in data:
                new_state = controller.change_page(data["target_page"])
            else:
                new_state = controller.change_page_size(data["page_size"])
        except PaginationError as e:
            logger.info("Navigation rejected: %s", e)
            return _error(str(e))

        if new_state is not None:
            controller = PaginationController(
                new_state,
                variant=controller.variant,
                config=controller.config,
                mode=controller.mode,
                is_loading=controller.is_loading,
            )
        return Response({"changed": new_state is not None, "state": controller.as_dict()})


# ==============================================================================
#                         ДЕМО-СПИСОК С ПАГИНАЦИЕЙ
# ==============================================================================
class SampleItemViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """Список-заглушка (?count=, по умолчанию 250) с WindowedPagination (?page=&page_size=)."""
    serializer_class = SampleItemSerializer
    pagination_class = WindowedPagination

    def get_queryset(self) -> List[Dict[str, Any]]:
        count_s = (self.request.query_params.get("count") or "250").strip()
        try:
            count = max(0, min(int(count_s), MAX_SAMPLE_ITEMS))
        except ValueError:
            count = 250
        return [{"id": n, "title": f"Item {n}"} for n in range(1, count + 1)]
