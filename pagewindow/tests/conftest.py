# pager/pagewindow/tests/conftest.py
import pytest
from rest_framework.test import APIClient

from pagewindow.services.controller import (
    EVENTS,
    PageState,
    PaginationController,
    WindowConfig,
)


@pytest.fixture
def api_client() -> APIClient:
    """DRF-клиент без авторизации (API публичное)."""
    return APIClient()


@pytest.fixture
def make_controller():
    """Фабрика контроллера: make_controller(page=3, count=120, per=12, variant=EVENTS, ...)."""
    def _make(page=1, count=120, per=12, variant=EVENTS, max_visible=7, query=None, **kwargs):
        config_kwargs = {
            name: kwargs.pop(name)
            for name in ("show_first_last", "scroll_to_top", "scroll_target")
            if name in kwargs
        }
        return PaginationController(
            PageState.for_count(page, per, count),
            variant=variant,
            config=WindowConfig(max_visible=max_visible, **config_kwargs),
            query=query,
            **kwargs,
        )
    return _make
