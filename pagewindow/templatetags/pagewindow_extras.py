from django import template

from ..forms import PageSizeForm
from ..services.controller import MODE_LOAD_MORE
from ..services.pagination import generate_page_window

register = template.Library()


@register.simple_tag
def page_window(page_obj, max_visible=7):
    """
    Маркеры страниц для Django Page: номера и многоточия.
    Использование: {% page_window page_obj 7 as tokens %}
    """
    return generate_page_window(page_obj.number, page_obj.paginator.num_pages, int(max_visible))


@register.inclusion_tag("pagewindow/includes/pagination.html")
def pagination_nav(controller, css_class=""):
    """Полный блок пагинации по PaginationController (кнопки, инфо, размер страницы)."""
    form = None
    if controller.variant.show_page_size:
        form = PageSizeForm(controller=controller)
    return {
        "pager": controller,
        "form": form,
        "load_more": controller.mode == MODE_LOAD_MORE,
        "css_class": css_class,
    }
