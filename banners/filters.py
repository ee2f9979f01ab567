import django_filters

from .models import AdBanner


def placement_list(value):
    """Accepts 'a,b' or a list of tags."""
    if isinstance(value, (list, tuple)):
        tags = value
    else:
        tags = str(value).split(',')
    return [tag.strip() for tag in tags if tag and tag.strip()]


def with_placement(queryset, tags):
    """
    Banners whose placement list shares at least one tag with `tags`.
    JSONField containment lookups are unavailable on SQLite, so membership
    is checked in Python and turned back into a queryset.
    """
    wanted = set(tags)
    ids = [
        banner_id
        for banner_id, placement in queryset.values_list('id', 'placement')
        if wanted.intersection(placement or [])
    ]
    return queryset.filter(pk__in=ids)


class AdBannerFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(field_name='name', lookup_expr='icontains')
    status = django_filters.CharFilter(method='filter_status')
    placement = django_filters.CharFilter(method='filter_placement')

    class Meta:
        model = AdBanner
        fields = ['search', 'status', 'placement']

    def filter_status(self, queryset, name, value):
        if value not in AdBanner.Status.values:
            return queryset
        return queryset.filter(status=value)

    def filter_placement(self, queryset, name, value):
        tags = placement_list(value)
        if not tags:
            return queryset
        return with_placement(queryset, tags)
