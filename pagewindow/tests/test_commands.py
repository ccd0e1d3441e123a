import json
from io import StringIO

from django.core.management import call_command


def run(*args) -> str:
    out = StringIO()
    call_command("page_window", *args, stdout=out)
    return out.getvalue().strip()


def test_prints_window():
    assert run("5", "10") == "1 … 4 5 6 … 10"


def test_custom_max_visible():
    assert run("1", "20", "--max-visible", "5") == "1 2 3 … 20"


def test_json_output():
    assert json.loads(run("10", "20", "--json")) == [1, "…", 9, 10, 11, "…", 20]


def test_empty_window_warns():
    assert "Страниц нет" in run("1", "0")
