from django.http import QueryDict

from pagewindow.forms import PageSizeForm


def test_hidden_params_skip_page_and_size(make_controller):
    form = PageSizeForm(controller=make_controller(query=QueryDict("type=workshop&page=3&per=24")))
    assert form.hidden_params() == [("type", "workshop")]


def test_hidden_params_keep_every_value_of_filter(make_controller):
    form = PageSizeForm(controller=make_controller(query=QueryDict("tag=a&tag=b&page=2")))
    assert form.hidden_params() == [("tag", "a"), ("tag", "b")]


def test_hidden_params_without_query(make_controller):
    assert PageSizeForm(controller=make_controller()).hidden_params() == []


def test_choices_and_initial_from_controller(make_controller):
    form = PageSizeForm(controller=make_controller(per=48))
    assert [value for value, _ in form.fields["per"].choices] == [12, 24, 48]
    assert form.initial["per"] == 48
    assert form.fields["per"].label == "Events per page:"
