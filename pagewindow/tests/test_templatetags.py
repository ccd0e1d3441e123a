from django.core.paginator import Paginator
from django.template import Context, Template

from pagewindow.services.controller import MODE_LOAD_MORE, RESOURCES
from pagewindow.services.pagination import to_literal

NAV = Template("{% load pagewindow_extras %}{% pagination_nav pager %}")


def render_nav(controller) -> str:
    return NAV.render(Context({"pager": controller}))


def test_page_window_tag_for_django_page():
    page_obj = Paginator(list(range(95)), 10).get_page(5)
    tpl = Template(
        "{% load pagewindow_extras %}{% page_window page_obj 7 as tokens %}"
        "{% for t in tokens %}{% if t.is_ellipsis %}_{% else %}{{ t.number }}{% endif %} {% endfor %}"
    )
    assert tpl.render(Context({"page_obj": page_obj})).split() == ["1", "_", "4", "5", "6", "_", "10"]


def test_page_window_tag_returns_tokens():
    from pagewindow.templatetags.pagewindow_extras import page_window

    page_obj = Paginator(list(range(30)), 10).get_page(2)
    assert to_literal(page_window(page_obj)) == [1, 2, 3]


def test_nav_renders_buttons_and_ellipses(make_controller):
    html = render_nav(make_controller(page=10, count=240))

    assert 'aria-label="Events pagination navigation"' in html
    assert 'aria-label="Go to page 10"' in html
    assert 'aria-current="page"' in html
    assert html.count('class="pager-ellipsis"') == 2
    assert "Page 10 of 20" in html
    assert "Showing 109 - 120 of 240 events" in html
    assert 'aria-label="Go to first page"' in html


def test_nav_links_pages_but_not_current(make_controller):
    html = render_nav(make_controller(page=1))

    assert 'href="?page=2&amp;per=12"' in html
    assert 'href="?page=1&amp;per=12"' not in html


def test_nav_page_size_selector(make_controller):
    html = render_nav(make_controller(per=24))

    assert "Events per page:" in html
    assert 'aria-label="Select page size"' in html
    for size in ("12", "24", "48"):
        assert f'<option value="{size}"' in html
    assert '<option value="24" selected>' in html


def test_nav_hidden_for_single_resource_page(make_controller):
    assert render_nav(make_controller(variant=RESOURCES, count=5)).strip() == ""


def test_resources_nav_has_no_summary_or_selector(make_controller):
    html = render_nav(make_controller(variant=RESOURCES, count=100))

    assert 'aria-label="Resources pagination navigation"' in html
    assert "Showing" not in html
    assert "per page" not in html


def test_nav_load_more(make_controller):
    html = render_nav(make_controller(page=1, mode=MODE_LOAD_MORE))

    assert "Load More Events" in html
    assert 'href="?page=2&amp;per=12"' in html
    assert "Showing 1 - 12 of 120 events" in html
    assert 'role="navigation"' not in html


def test_nav_load_more_on_last_page(make_controller):
    html = render_nav(make_controller(page=10, mode=MODE_LOAD_MORE))
    assert "Load More" not in html
