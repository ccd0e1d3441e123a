from django.urls import path, include
from . import views
from .services.controller import EVENTS, RESOURCES

app_name = "pagewindow"

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),

    # API
    path("api/", include(("pagewindow.api_urls", "pagewindow_api"), namespace="pagewindow_api")),

    # Два места вызова одного генератора окна
    path("events/", views.PaginatedListView.as_view(variant=EVENTS), name="events"),
    path("resources/", views.PaginatedListView.as_view(variant=RESOURCES), name="resources"),
]
