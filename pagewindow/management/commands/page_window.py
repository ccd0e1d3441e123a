import json
import logging

from django.core.management.base import BaseCommand, CommandParser

from pagewindow.services.controller import default_max_visible
from pagewindow.services.pagination import generate_page_window, to_literal

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Печатает окно страниц с многоточиями, например: 1 … 4 5 6 … 10"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("current_page", type=int, help="Текущая страница (1-based)")
        parser.add_argument("total_pages", type=int, help="Всего страниц")
        parser.add_argument("--max-visible", type=int, default=None,
                            help="Слотов в окне (по умолчанию PAGE_WINDOW_MAX_VISIBLE)")
        parser.add_argument("--json", action="store_true", help="Вывести JSON-список")

    def handle(self, *args, **opts):
        current: int = opts["current_page"]
        total: int = opts["total_pages"]
        max_visible: int = opts["max_visible"] if opts["max_visible"] is not None else default_max_visible()

        tokens = generate_page_window(current, total, max_visible)
        logger.info("page_window current=%s total=%s max_visible=%s -> %s tokens",
                    current, total, max_visible, len(tokens))

        if opts["json"]:
            self.stdout.write(json.dumps(to_literal(tokens), ensure_ascii=False))
            return
        if not tokens:
            self.stdout.write(self.style.WARNING("! Страниц нет"))
            return
        self.stdout.write(" ".join(str(token) for token in tokens))
