import django_filters

from modules.update_points.models import UpdatePoint


class UpdatePointFilter(django_filters.FilterSet):
    updateId = django_filters.UUIDFilter(field_name="update_id")
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = UpdatePoint
        fields = ["updateId", "name"]
