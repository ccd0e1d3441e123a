# pager/pagewindow/pagination.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: pager/pagewindow/pagination.py
# Назначение: пагинация DRF с окном номеров страниц. Отдельный модуль:
# на него ссылается REST_FRAMEWORK["DEFAULT_PAGINATION_CLASS"], поэтому
# здесь нельзя импортировать viewsets/generics.
# ─────────────────────────────────────────────────────────────────────────────

from rest_framework.pagination import PageNumberPagination  # пагинация DRF
from rest_framework.response import Response                # DRF-ответ

from .services.controller import default_max_visible
from .services.pagination import generate_page_window, to_literal


class WindowedPagination(PageNumberPagination):
    """Стандартная пагинация + готовое окно номеров страниц с многоточиями."""
    page_size_query_param = "page_size"
    max_page_size = 100

    def get_paginated_response(self, data):
        paginator = self.page.paginator
        tokens = generate_page_window(self.page.number, paginator.num_pages, default_max_visible())
        return Response({
            "count": paginator.count,
            "page": self.page.number,
            "pages": paginator.num_pages,
            "page_size": self.get_page_size(self.request),
            "page_window": to_literal(tokens),
            "next": self.get_next_link(),
            "previous": self.get_previous_link(),
            "results": data,
        })
