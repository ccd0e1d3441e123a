# pager/pagewindow/serializers.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: pager/pagewindow/serializers.py
# Назначение: DRF-сериализаторы входных параметров API и маркеров окна
# ─────────────────────────────────────────────────────────────────────────────

from rest_framework import serializers  # базовые сериализаторы DRF

from .services.controller import (
    MAX_TOTAL_COUNT,
    MAX_TOTAL_PAGES,
    MAX_VISIBLE_LIMIT,
    MODE_PAGINATION,
    MODES,
    VARIANTS,
)


class PageTokenSerializer(serializers.Serializer):
    """Маркер окна: {"kind": "page", "number": 5} или {"kind": "ellipsis", "number": null}."""
    kind = serializers.CharField(read_only=True)
    number = serializers.IntegerField(read_only=True, allow_null=True)


class PageWindowQuerySerializer(serializers.Serializer):
    """Параметры генератора. Текущую страницу генератор приводит сам, сверху ограничиваем размер окна."""
    current_page = serializers.IntegerField(default=1)
    total_pages = serializers.IntegerField(max_value=MAX_TOTAL_PAGES)
    max_visible = serializers.IntegerField(required=False, max_value=MAX_VISIBLE_LIMIT)


class PaginationQuerySerializer(serializers.Serializer):
    """Состояние пагинации для контроллера (те же имена, что в URL страниц)."""
    variant = serializers.ChoiceField(choices=sorted(VARIANTS), default="events")
    mode = serializers.ChoiceField(choices=MODES, default=MODE_PAGINATION)
    page = serializers.IntegerField(default=1)
    per = serializers.IntegerField(required=False)
    count = serializers.IntegerField(min_value=0, max_value=MAX_TOTAL_COUNT, default=0)
    max_visible = serializers.IntegerField(required=False, max_value=MAX_VISIBLE_LIMIT)
    show_first_last = serializers.BooleanField(default=True)
    is_loading = serializers.BooleanField(default=False)

    def validate(self, attrs):
        variant = VARIANTS[attrs["variant"]]
        per = attrs.get("per", variant.default_page_size)
        if per not in variant.page_sizes:
            raise serializers.ValidationError(
                {"per": f"Choose one of {list(variant.page_sizes)}."}
            )
        attrs["per"] = per
        return attrs


class NavigateSerializer(PaginationQuerySerializer):
    """Переход: ровно одно из action / target_page / page_size."""
    action = serializers.CharField(required=False)  # first|previous|next|last или клавиша
    target_page = serializers.IntegerField(required=False)
    page_size = serializers.IntegerField(required=False)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        given = [name for name in ("action", "target_page", "page_size") if name in attrs]
        if len(given) != 1:
            raise serializers.ValidationError(
                "Provide exactly one of 'action', 'target_page' or 'page_size'."
            )
        return attrs


class SampleItemSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()

