# pager/pagewindow/services/controller.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: контроллер пагинации — состояние страницы (PageState),
# настройки окна (WindowConfig), пресеты вариантов (события/ресурсы)
# и «view model» для шаблона/API: кнопки, многоточия, prev/next, выбор размера.
# Генератор окна остаётся чистой функцией, всё изменяемое — здесь.
# ─────────────────────────────────────────────────────────────────────────────
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

from django.conf import settings
from django.http import QueryDict

from .pagination import (
    DEFAULT_MAX_VISIBLE,
    PageToken,
    clamp_page,
    generate_page_window,
    to_literal,
    total_pages_for,
)

logger = logging.getLogger(__name__)

PAGE_PARAM = "page"
PAGE_SIZE_PARAM = "per"

MODE_PAGINATION = "pagination"
MODE_LOAD_MORE = "load-more"
MODES = (MODE_PAGINATION, MODE_LOAD_MORE)

# клавиатурная навигация: клавиша -> действие
KEY_ACTIONS = {
    "ArrowLeft": "previous",
    "ArrowRight": "next",
    "Home": "first",
    "End": "last",
}
ACTIONS = ("first", "previous", "next", "last")

# верхние границы входных данных (API и страницы списков)
MAX_TOTAL_PAGES = 10_000
MAX_TOTAL_COUNT = 100_000
MAX_VISIBLE_LIMIT = 15


class PaginationError(ValueError):
    """Базовая ошибка контроллера пагинации."""


class UnknownNavigationAction(PaginationError):
    pass


class UnknownVariant(PaginationError):
    pass


def default_max_visible() -> int:
    return int(getattr(settings, "PAGE_WINDOW_MAX_VISIBLE", DEFAULT_MAX_VISIBLE))


def _parse_int(raw: Any) -> Optional[int]:
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return None


# ---------- ВАРИАНТЫ ----------
@dataclass(frozen=True)
class PaginationVariant:
    """Пресет места вызова: как называются элементы и что показываем."""
    name: str
    noun: str
    page_sizes: Tuple[int, ...] = (12, 24, 48)
    default_page_size: int = 12
    hide_single_page: bool = False   # True — прячем, если страниц <= 1
    show_summary: bool = True        # «Showing 1 - 12 of 120 events»
    show_page_size: bool = True      # селектор размера страницы
    supports_load_more: bool = False

    def is_visible(self, state: "PageState") -> bool:
        if self.hide_single_page:
            return state.total_pages > 1
        return state.total_count > 0


EVENTS = PaginationVariant(name="events", noun="events", supports_load_more=True)
RESOURCES = PaginationVariant(
    name="resources",
    noun="resources",
    hide_single_page=True,
    show_summary=False,
    show_page_size=False,
)
VARIANTS: Dict[str, PaginationVariant] = {v.name: v for v in (EVENTS, RESOURCES)}


def get_variant(name: str) -> PaginationVariant:
    try:
        return VARIANTS[name]
    except KeyError:
        raise UnknownVariant(f"Unknown pagination variant: {name!r}") from None


# ---------- СОСТОЯНИЕ ----------
@dataclass(frozen=True)
class PageState:
    """Сериализуемое состояние пагинации; передаётся по значению."""
    current_page: int
    total_pages: int
    page_size: int
    total_count: int = 0

    @classmethod
    def for_count(cls, current_page: int, page_size: int, total_count: int) -> "PageState":
        return cls(
            current_page=current_page,
            total_pages=total_pages_for(total_count, page_size),
            page_size=page_size,
            total_count=total_count,
        )

    @classmethod
    def from_query(cls, query: Mapping[str, Any], variant: PaginationVariant,
                   total_count: int) -> "PageState":
        """Читает ?page= и ?per= из GET; мусор -> страница 1 и размер по умолчанию."""
        page = _parse_int(query.get(PAGE_PARAM)) or 1
        per = _parse_int(query.get(PAGE_SIZE_PARAM))
        if per not in variant.page_sizes:
            if query.get(PAGE_SIZE_PARAM) not in (None, ""):
                logger.warning("Invalid page size %r for %s, falling back to %s",
                               query.get(PAGE_SIZE_PARAM), variant.name, variant.default_page_size)
            per = variant.default_page_size
        return cls.for_count(page, per, max(0, total_count))

    def to_query(self, base: Optional[QueryDict] = None) -> str:
        """Кладёт page/per в query string, сохраняя остальные параметры (фильтры)."""
        query = base.copy() if base is not None else QueryDict(mutable=True)
        query[PAGE_PARAM] = str(self.current_page)
        query[PAGE_SIZE_PARAM] = str(self.page_size)
        return query.urlencode()


@dataclass(frozen=True)
class WindowConfig:
    max_visible: int = field(default_factory=default_max_visible)
    show_first_last: bool = True
    scroll_to_top: bool = True
    scroll_target: Optional[str] = None  # id элемента, к которому прокручиваем


# ---------- ЭЛЕМЕНТЫ УПРАВЛЕНИЯ ----------
@dataclass(frozen=True)
class PageControl:
    """Кнопка страницы или неинтерактивное многоточие."""
    token: PageToken
    is_current: bool = False
    disabled: bool = True
    label: str = ""
    url: str = ""

    @property
    def is_ellipsis(self) -> bool:
        return self.token.is_ellipsis

    @property
    def page(self) -> Optional[int]:
        return self.token.number

    def as_dict(self) -> Dict[str, Any]:
        if self.is_ellipsis:
            return {"kind": "ellipsis"}
        return {
            "kind": "page",
            "page": self.page,
            "current": self.is_current,
            "disabled": self.disabled,
            "label": self.label,
            "url": self.url,
        }


@dataclass(frozen=True)
class NavControl:
    action: str
    page: int
    label: str
    title: str
    disabled: bool
    url: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return {
            "action": self.action,
            "page": self.page,
            "label": self.label,
            "title": self.title,
            "disabled": self.disabled,
            "url": self.url,
        }


_NAV_TEXT = {
    "first": ("Go to first page", "First page"),
    "previous": ("Go to previous page", "Previous page"),
    "next": ("Go to next page", "Next page"),
    "last": ("Go to last page", "Last page"),
}


# ---------- КОНТРОЛЛЕР ----------
class PaginationController:
    """Собирает всё, что нужно шаблону/API, из PageState + WindowConfig.

    Сам ничего не мутирует: change_page/change_page_size/navigate возвращают
    новое состояние (или None, если переход не нужен).
    """

    def __init__(self, state: PageState, variant: PaginationVariant = EVENTS,
                 config: Optional[WindowConfig] = None, mode: str = MODE_PAGINATION,
                 is_loading: bool = False, query: Optional[QueryDict] = None):
        if mode not in MODES:
            raise PaginationError(f"Unknown pagination mode: {mode!r}")
        if mode == MODE_LOAD_MORE and not variant.supports_load_more:
            raise PaginationError(f"Variant {variant.name!r} does not support {mode!r}")
        self.state = state
        self.variant = variant
        self.config = config or WindowConfig()
        self.mode = mode
        self.is_loading = is_loading
        self.query = query

    # --- производные значения ---
    @property
    def current_page(self) -> int:
        return clamp_page(self.state.current_page, self.state.total_pages)

    @property
    def total_pages(self) -> int:
        return self.state.total_pages

    @property
    def is_first_page(self) -> bool:
        return self.current_page == 1

    @property
    def is_last_page(self) -> bool:
        # при 0/1 странице «вперёд» тоже некуда
        return self.current_page >= self.total_pages

    @property
    def has_more_pages(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def is_visible(self) -> bool:
        return self.variant.is_visible(self.state)

    @property
    def start_item(self) -> int:
        if self.state.total_count <= 0:
            return 0
        return (self.current_page - 1) * self.state.page_size + 1

    @property
    def end_item(self) -> int:
        return max(0, min(self.current_page * self.state.page_size, self.state.total_count))

    @property
    def status_text(self) -> str:
        return f"Page {self.current_page} of {self.total_pages}"

    @property
    def summary_text(self) -> str:
        if self.state.total_count <= 0:
            return ""
        return (f"Showing {self.start_item} - {self.end_item} "
                f"of {self.state.total_count} {self.variant.noun}")

    @property
    def load_more_label(self) -> str:
        return "Loading..." if self.is_loading else f"Load More {self.variant.noun.title()}"

    @property
    def tokens(self) -> List[PageToken]:
        return generate_page_window(self.current_page, self.total_pages, self.config.max_visible)

    # --- URL ---
    def page_url(self, page: int, page_size: Optional[int] = None) -> str:
        state = replace(self.state, current_page=page,
                        page_size=page_size or self.state.page_size)
        url = "?" + state.to_query(self.query)
        if self.config.scroll_to_top and self.config.scroll_target:
            url += "#" + self.config.scroll_target
        return url

    # --- элементы управления ---
    @property
    def controls(self) -> List[PageControl]:
        current = self.current_page
        result: List[PageControl] = []
        for token in self.tokens:
            if token.is_ellipsis:
                result.append(PageControl(token=token))
                continue
            is_current = token.number == current
            result.append(PageControl(
                token=token,
                is_current=is_current,
                disabled=is_current or self.is_loading,
                label=f"Go to page {token.number}",
                url=self.page_url(token.number),
            ))
        return result

    def _nav(self, action: str, page: int, disabled: bool) -> NavControl:
        label, title = _NAV_TEXT[action]
        return NavControl(
            action=action,
            page=page,
            label=label,
            title=title,
            disabled=disabled or self.is_loading,
            url="" if disabled else self.page_url(page),
        )

    @property
    def first(self) -> Optional[NavControl]:
        if not self.config.show_first_last:
            return None
        return self._nav("first", 1, self.is_first_page)

    @property
    def previous(self) -> NavControl:
        return self._nav("previous", self.current_page - 1, self.is_first_page)

    @property
    def next(self) -> NavControl:
        return self._nav("next", self.current_page + 1, self.is_last_page)

    @property
    def last(self) -> Optional[NavControl]:
        if not self.config.show_first_last:
            return None
        return self._nav("last", self.total_pages, self.is_last_page)

    # --- переходы ---
    def change_page(self, page: int) -> Optional[PageState]:
        """Новое состояние для перехода на page; None — если переход не нужен."""
        if page == self.current_page or page < 1 or page > self.total_pages:
            return None
        return replace(self.state, current_page=page)

    def change_page_size(self, size: int) -> Optional[PageState]:
        """Смена размера страницы всегда возвращает на первую страницу."""
        if size == self.state.page_size or size not in self.variant.page_sizes:
            return None
        return PageState.for_count(1, size, self.state.total_count)

    def navigate(self, action: str) -> Optional[PageState]:
        action = KEY_ACTIONS.get(action, action)
        if action == "first":
            target = 1
        elif action == "previous":
            target = self.current_page - 1
        elif action == "next":
            target = self.current_page + 1
        elif action == "last":
            target = self.total_pages
        else:
            raise UnknownNavigationAction(f"Unknown navigation action: {action!r}")
        return self.change_page(target)

    # --- сериализация ---
    def as_dict(self) -> Dict[str, Any]:
        navigation = {
            name: control.as_dict()
            for name, control in (
                ("first", self.first),
                ("previous", self.previous),
                ("next", self.next),
                ("last", self.last),
            )
            if control is not None
        }
        return {
            "variant": self.variant.name,
            "mode": self.mode,
            "visible": self.is_visible,
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "page_size": self.state.page_size,
            "page_sizes": list(self.variant.page_sizes),
            "total_count": self.state.total_count,
            "start_item": self.start_item,
            "end_item": self.end_item,
            "status": self.status_text,
            "summary": self.summary_text,
            "has_more_pages": self.has_more_pages,
            "pages": to_literal(self.tokens),
            "controls": [control.as_dict() for control in self.controls],
            "navigation": navigation,
            "scroll_target": self.config.scroll_target if self.config.scroll_to_top else None,
        }
