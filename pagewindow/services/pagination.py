# pager/pagewindow/services/pagination.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: генерация «окна» номеров страниц с многоточиями
# (1 … 4 5 6 … 10). Чистые функции, без I/O и без состояния.
# ─────────────────────────────────────────────────────────────────────────────
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Union

logger = logging.getLogger(__name__)

DEFAULT_MAX_VISIBLE = 7
# меньше пяти слотов не вмещают якоря + многоточие + текущую страницу
MIN_VISIBLE = 5
ELLIPSIS_GLYPH = "…"


@dataclass(frozen=True)
class PageNumber:
    """Маркер конкретной страницы (нумерация с 1)."""
    number: int

    kind = "page"
    is_ellipsis = False

    def __str__(self) -> str:
        return str(self.number)


@dataclass(frozen=True)
class EllipsisMarker:
    """Маркер пропущенного диапазона страниц. Это не номер страницы."""

    kind = "ellipsis"
    is_ellipsis = True
    number = None

    def __str__(self) -> str:
        return ELLIPSIS_GLYPH


ELLIPSIS = EllipsisMarker()

PageToken = Union[PageNumber, EllipsisMarker]


def clamp_page(page: int, total_pages: int) -> int:
    """Приводит номер страницы к диапазону [1, total_pages] (1, если страниц нет)."""
    return max(1, min(page, total_pages))


def total_pages_for(total_count: int, page_size: int) -> int:
    """Количество страниц для total_count элементов по page_size на страницу."""
    if page_size <= 0 or total_count <= 0:
        return 0
    return -(-total_count // page_size)


def generate_page_window(current_page: int, total_pages: int,
                         max_visible: int = DEFAULT_MAX_VISIBLE) -> List[PageToken]:
    """Возвращает последовательность маркеров для кнопок пагинации.

    Первая и последняя страницы видны всегда, вокруг текущей страницы
    показывается непрерывное окно, длинные пропуски сворачиваются в ELLIPSIS.

    Parameters
    ----------
    current_page : int
        Текущая страница (1-based). Значения вне [1, total_pages] приводятся
        к ближайшей границе.
    total_pages : int
        Общее число страниц.
    max_visible : int, optional
        Максимум слотов (каждое многоточие занимает один слот), по умолчанию 7.

    Returns
    -------
    List[PageToken]
        Например, для (5, 10, 7): [1, …, 4, 5, 6, …, 10].
    """
    if total_pages <= 0:
        return []

    # всё помещается (или слотов слишком мало для сворачивания) — показываем всё
    if total_pages <= max_visible or max_visible < MIN_VISIBLE:
        return [PageNumber(n) for n in range(1, total_pages + 1)]

    current = clamp_page(current_page, total_pages)
    if current != current_page:
        logger.debug("Page %s clamped to %s (total=%s)", current_page, current, total_pages)

    side_pages = (max_visible - 3) // 2

    if current <= side_pages + 2:
        # прижимаемся к началу: 1 2 3 4 5 … N
        start_page = 2
        end_page = min(total_pages - 1, max_visible - 2)
    elif current >= total_pages - side_pages - 1:
        # прижимаемся к концу: 1 … N-4 N-3 N-2 N-1 N
        start_page = max(2, total_pages - max_visible + 3)
        end_page = total_pages - 1
    else:
        # середина: два якоря и два многоточия занимают 4 слота
        # при чётном max_visible многоточие может скрывать ровно одну страницу:
        # (16, 20, 8) -> 1 … 15 16 17 18 … 20; длина окна важнее
        width = max_visible - 4
        start_page = current - (width - 1) // 2
        end_page = start_page + width - 1

    pages: List[PageToken] = [PageNumber(1)]
    if start_page > 2:
        pages.append(ELLIPSIS)
    pages.extend(PageNumber(n) for n in range(start_page, end_page + 1))
    if end_page < total_pages - 1:
        pages.append(ELLIPSIS)
    pages.append(PageNumber(total_pages))
    return pages


def to_literal(tokens: Sequence[PageToken], ellipsis: str = ELLIPSIS_GLYPH) -> list:
    """[PageNumber(1), ELLIPSIS, PageNumber(9)] -> [1, "…", 9]."""
    return [ellipsis if token.is_ellipsis else token.number for token in tokens]
