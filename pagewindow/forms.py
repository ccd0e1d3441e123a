from django import forms

from .services.controller import PAGE_PARAM, PAGE_SIZE_PARAM, PaginationController


class PageSizeForm(forms.Form):
    """Селектор «Events per page»: варианты берутся из пресета контроллера."""
    per = forms.TypedChoiceField(coerce=int, label="Events per page:")

    def __init__(self, *args, controller: PaginationController, **kwargs):
        kwargs.setdefault("initial", {PAGE_SIZE_PARAM: controller.state.page_size})
        super().__init__(*args, **kwargs)
        self.controller = controller
        field = self.fields[PAGE_SIZE_PARAM]
        field.choices = [(size, str(size)) for size in controller.variant.page_sizes]
        field.label = f"{controller.variant.noun.title()} per page:"
        field.widget.attrs.update({
            "aria-label": "Select page size",
            "disabled": controller.is_loading,
            "onchange": "this.form.submit()",
        })

    def hidden_params(self):
        """Остальные параметры запроса (фильтры), кроме page/per — уходят hidden-полями."""
        query = self.controller.query
        if query is None:
            return []
        return [
            (key, value)
            for key, values in query.lists()
            if key not in (PAGE_PARAM, PAGE_SIZE_PARAM)
            for value in values
        ]
