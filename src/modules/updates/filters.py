import django_filters

from modules.updates.constants import UpdateStatus
from modules.updates.models import Update


class UpdateFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=UpdateStatus.choices)
    productId = django_filters.UUIDFilter(field_name="product_id")
    version = django_filters.CharFilter(field_name="version", lookup_expr="iexact")

    class Meta:
        model = Update
        fields = ["status", "productId", "version"]
