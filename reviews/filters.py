import django_filters

from .models import Review


class ReviewFilter(django_filters.FilterSet):
    """
    Query string filters shared by the vendor and admin review listings.
    Unknown statuses and out of range ratings are ignored rather than rejected.
    """
    status = django_filters.CharFilter(method='filter_status')
    rating = django_filters.NumberFilter(method='filter_rating')
    search = django_filters.CharFilter(method='filter_search')
    flagged = django_filters.BooleanFilter(method='filter_flagged')

    class Meta:
        model = Review
        fields = ['status', 'rating', 'search', 'flagged']

    def filter_status(self, queryset, name, value):
        if value.lower() == 'all' or value not in Review.Status.values:
            return queryset
        return queryset.filter(status=value)

    def filter_rating(self, queryset, name, value):
        if value != int(value) or not 1 <= value <= 5:
            return queryset
        return queryset.filter(rating=int(value))

    def filter_search(self, queryset, name, value):
        return queryset.filter(comment__icontains=value)

    def filter_flagged(self, queryset, name, value):
        if value:
            return queryset.filter(flagged_for_removal=True)
        return queryset
