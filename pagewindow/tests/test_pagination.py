"""
Окно страниц с многоточиями: конкретные сценарии + свойства (hypothesis).

Свойства: тотальность, «всё влезает — без многоточий», якоря 1 и N,
не больше двух многоточий, строго возрастающие номера, длина <= max_visible,
идемпотентность.
"""
import pytest
from hypothesis import given, settings, strategies as st

from pagewindow.services.pagination import (
    ELLIPSIS,
    EllipsisMarker,
    PageNumber,
    clamp_page,
    generate_page_window,
    to_literal,
    total_pages_for,
)

E = "…"


def window(current, total, max_visible=7):
    return to_literal(generate_page_window(current, total, max_visible))


@pytest.mark.parametrize(
    "current_page, total_pages, max_visible, expected",
    [
        (1, 7, 7, [1, 2, 3, 4, 5, 6, 7]),
        (4, 7, 7, [1, 2, 3, 4, 5, 6, 7]),
        (1, 10, 7, [1, 2, 3, 4, 5, E, 10]),
        (4, 10, 7, [1, 2, 3, 4, 5, E, 10]),
        (5, 10, 7, [1, E, 4, 5, 6, E, 10]),
        (6, 10, 7, [1, E, 5, 6, 7, E, 10]),
        (7, 10, 7, [1, E, 6, 7, 8, 9, 10]),
        (10, 10, 7, [1, E, 6, 7, 8, 9, 10]),
        (10, 20, 7, [1, E, 9, 10, 11, E, 20]),
        (1, 20, 5, [1, 2, 3, E, 20]),
        (10, 20, 5, [1, E, 10, E, 20]),
        (19, 20, 5, [1, E, 18, 19, 20]),
        (4, 10, 6, [1, E, 4, 5, E, 10]),
        (5, 20, 8, [1, E, 4, 5, 6, 7, E, 20]),
        (16, 20, 8, [1, E, 15, 16, 17, 18, E, 20]),  # многоточие на месте одной страницы
        (1, 1, 7, [1]),
        (1, 0, 7, []),
    ],
)
def test_window_scenarios(current_page, total_pages, max_visible, expected):
    assert window(current_page, total_pages, max_visible) == expected


def test_middle_window_has_two_ellipses_around_current():
    tokens = generate_page_window(10, 20, 7)
    numbers = [t.number for t in tokens if not t.is_ellipsis]

    assert tokens[0] == PageNumber(1)
    assert tokens[-1] == PageNumber(20)
    assert sum(1 for t in tokens if t.is_ellipsis) == 2
    assert numbers.count(10) == 1
    # окно без якорей не шире max_visible - 4
    assert len(numbers) - 2 <= 7 - 4


@pytest.mark.parametrize("current_page, same_as", [(0, 1), (-3, 1), (15, 10), (11, 10)])
def test_out_of_range_current_page_is_clamped(current_page, same_as):
    assert window(current_page, 10) == window(same_as, 10)


def test_small_max_visible_shows_all_pages():
    assert window(3, 10, 3) == list(range(1, 11))
    assert window(3, 10, 0) == list(range(1, 11))


def test_negative_total_pages_gives_empty_window():
    assert generate_page_window(1, -4) == []


def test_ellipsis_is_not_a_page_number():
    tokens = generate_page_window(1, 10, 7)
    marker = tokens[5]

    assert marker is ELLIPSIS
    assert isinstance(marker, EllipsisMarker)
    assert marker.is_ellipsis and marker.kind == "ellipsis"
    assert marker.number is None
    assert str(marker) == E
    assert not any(isinstance(t, PageNumber) and t.is_ellipsis for t in tokens)


def test_to_literal_custom_glyph():
    assert to_literal(generate_page_window(5, 10), ellipsis="...") == [1, "...", 4, 5, 6, "...", 10]


@pytest.mark.parametrize(
    "page, total, expected",
    [(0, 5, 1), (3, 5, 3), (9, 5, 5), (-2, 5, 1), (4, 0, 1)],
)
def test_clamp_page(page, total, expected):
    assert clamp_page(page, total) == expected


@pytest.mark.parametrize(
    "count, size, expected",
    [(120, 12, 10), (121, 12, 11), (1, 48, 1), (0, 12, 0), (37, 10, 4), (10, 0, 0), (-5, 10, 0)],
)
def test_total_pages_for(count, size, expected):
    assert total_pages_for(count, size) == expected


# ---------- СВОЙСТВА ----------

@st.composite
def window_args(draw, max_total=10_000):
    total = draw(st.integers(min_value=0, max_value=max_total))
    current = draw(st.integers(min_value=-10, max_value=total + 10))
    max_visible = draw(st.integers(min_value=5, max_value=15))
    return current, total, max_visible


@settings(max_examples=300)
@given(args=window_args())
def test_window_is_total_and_well_formed(args):
    current, total, max_visible = args
    tokens = generate_page_window(current, total, max_visible)

    numbers = [t.number for t in tokens if not t.is_ellipsis]
    ellipses = [t for t in tokens if t.is_ellipsis]

    # якоря
    if total >= 1:
        assert tokens[0] == PageNumber(1)
    if total >= 2:
        assert tokens[-1] == PageNumber(total)
    # не больше двух многоточий, номера строго возрастают и в диапазоне
    assert len(ellipses) <= 2
    assert all(a < b for a, b in zip(numbers, numbers[1:]))
    assert all(1 <= n <= total for n in numbers)
    # многоточия никогда не стоят рядом и не стоят по краям
    assert all(not (a.is_ellipsis and b.is_ellipsis) for a, b in zip(tokens, tokens[1:]))
    if tokens:
        assert not tokens[0].is_ellipsis and not tokens[-1].is_ellipsis
    # текущая (приведённая) страница всегда видна
    if total >= 1:
        assert clamp_page(current, total) in numbers


@settings(max_examples=300)
@given(args=window_args())
def test_window_length(args):
    current, total, max_visible = args
    tokens = generate_page_window(current, total, max_visible)

    if total <= max_visible:
        assert to_literal(tokens) == list(range(1, total + 1))
    else:
        assert len(tokens) <= max_visible
        assert len(tokens) == max_visible


@settings(max_examples=100)
@given(args=window_args(max_total=500))
def test_window_is_idempotent(args):
    assert generate_page_window(*args) == generate_page_window(*args)
