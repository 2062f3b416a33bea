from django.conf import settings
from rest_framework import serializers

from .models import ID_MAX, NAME_MAX_LENGTH, STOCK_MAX, STOCK_MIN


def _default_page_size():
    return settings.CATALOG_DEFAULT_PAGE_SIZE


class CategorySerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    # Presence and blankness are business rules checked by CategoryService.
    name = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
        max_length=NAME_MAX_LENGTH,
    )

    def to_representation(self, instance):
        if instance is None:
            return None
        if hasattr(instance, "__dataclass_fields__"):
            return {
                "id": getattr(instance, "id"),
                "name": getattr(instance, "name"),
            }
        return super().to_representation(instance)


class ProductSerializer(serializers.Serializer):
    # Matches ProductDTO shape used for responses
    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.FloatField(allow_null=True)
    stock = serializers.IntegerField()
    categoryId = serializers.IntegerField(allow_null=True)

    def to_representation(self, instance):
        if instance is None:
            return None
        if hasattr(instance, "__dataclass_fields__"):
            return {
                "id": getattr(instance, "id"),
                "name": getattr(instance, "name"),
                "price": getattr(instance, "price"),
                "stock": getattr(instance, "stock"),
                "categoryId": getattr(instance, "category_id"),
            }
        return super().to_representation(instance)


class ProductWriteSerializer(serializers.Serializer):
    # Payload for create and full-replace update.
    # 'id' is server-assigned and silently ignored when clients send it.
    name = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
        max_length=NAME_MAX_LENGTH,
    )
    price = serializers.FloatField(required=False, allow_null=True)
    # null and omitted both mean 0; ProductCommand does the mapping.
    stock = serializers.IntegerField(
        default=0, allow_null=True, min_value=STOCK_MIN, max_value=STOCK_MAX
    )
    categoryId = serializers.IntegerField(
        source="category_id", required=False, allow_null=True, max_value=ID_MAX
    )


class PageQuerySerializer(serializers.Serializer):
    """Query string of list routes that default ``page`` and ``size``."""

    name = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False
    )
    page = serializers.IntegerField(default=0)
    size = serializers.IntegerField(default=_default_page_size)


class RequiredPageQuerySerializer(serializers.Serializer):
    """Query string of the categories list, where ``page`` and ``size`` are mandatory."""

    name = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False
    )
    page = serializers.IntegerField()
    size = serializers.IntegerField()


class SearchQuerySerializer(PageQuerySerializer):
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
