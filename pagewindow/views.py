# pager/pagewindow/views.py
import logging
from typing import Any, Dict

from django.core.paginator import Paginator
from django.views.generic import TemplateView

from .services.controller import (
    EVENTS,
    MAX_TOTAL_COUNT,
    MODE_LOAD_MORE,
    MODE_PAGINATION,
    PageState,
    PaginationController,
    PaginationVariant,
    WindowConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 120


# ---------- PAGES ----------
class HomeView(TemplateView):
    template_name = "pagewindow/index.html"

    def get_context_data(self, **kwargs):
        return {"title": "Pager — старт"}


class PaginatedListView(TemplateView):
    """
    Список-заглушка с пагинацией: одно окно страниц на два места вызова
    (события и ресурсы отличаются только пресетом variant).
    Параметры (GET):
      - page:  номер страницы (мусор -> 1, за пределами -> ближайшая граница)
      - per:   размер страницы из variant.page_sizes, иначе значение по умолчанию
      - count: сколько элементов «в базе» (0..100000), по умолчанию 120
      - mode:  pagination / load-more (если вариант поддерживает)
    """
    template_name = "pagewindow/list.html"
    variant: PaginationVariant = EVENTS
    scroll_target = "list-top"

    def get_count(self) -> int:
        raw = (self.request.GET.get("count") or "").strip()
        try:
            return max(0, min(int(raw), MAX_TOTAL_COUNT)) if raw else DEFAULT_COUNT
        except ValueError:
            logger.warning("Invalid count %r, using %s", raw, DEFAULT_COUNT)
            return DEFAULT_COUNT

    def get_mode(self) -> str:
        mode = (self.request.GET.get("mode") or MODE_PAGINATION).strip()
        if mode == MODE_LOAD_MORE and self.variant.supports_load_more:
            return mode
        return MODE_PAGINATION

    def get_context_data(self, **kwargs: Any) -> Dict[str, Any]:
        ctx = super().get_context_data(**kwargs)

        count = self.get_count()
        state = PageState.from_query(self.request.GET, self.variant, count)
        controller = PaginationController(
            state,
            variant=self.variant,
            config=WindowConfig(scroll_target=self.scroll_target),
            mode=self.get_mode(),
            query=self.request.GET,
        )

        entries = [f"{self.variant.noun.title()[:-1]} #{n}" for n in range(1, count + 1)]
        paginator = Paginator(entries, state.page_size)
        page_obj = paginator.get_page(controller.current_page)

        # load-more показывает всё, что «подгружено» до текущей страницы включительно
        if controller.mode == MODE_LOAD_MORE:
            items = entries[:controller.end_item]
        else:
            items = page_obj.object_list

        ctx.update(
            title=self.variant.noun.title(),
            variant=self.variant,
            items=items,
            page_obj=page_obj,
            pager=controller,
            scroll_target=self.scroll_target,
        )
        return ctx
