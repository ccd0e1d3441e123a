from django.apps import AppConfig


class PagewindowConfig(AppConfig):
    name = "pagewindow"
    verbose_name = "Окно пагинации"
