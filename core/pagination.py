# core/pagination.py

import math

DEFAULT_PAGE_SIZE = 10


def parse_positive_int(value, default):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def paginate_queryset(queryset, params, default_limit=DEFAULT_PAGE_SIZE):
    """
    Offset pagination with 1-indexed pages.
    Pages past the end return an empty item list instead of a 404.
    """
    page = parse_positive_int(params.get('page'), 1)
    limit = parse_positive_int(params.get('limit'), default_limit)
    skip = (page - 1) * limit

    total = queryset.count()
    items = list(queryset[skip:skip + limit])

    return {
        'page': page,
        'limit': limit,
        'total': total,
        'total_pages': math.ceil(total / limit),
        'items': items,
    }
