# reviews/rating.py
# Vendor rating aggregate, derived from Approved reviews and written only from here.

import logging
from decimal import Decimal, ROUND_HALF_UP

from django.contrib.auth import get_user_model
from django.db.models import Count

from users.models import empty_rating_breakdown
from .models import Review

User = get_user_model()
logger = logging.getLogger(__name__)

ONE_DECIMAL = Decimal('0.1')


def rating_stats(vendor_id):
    """Returns (average_rating, review_count, rating_breakdown) for the approved set."""
    breakdown = empty_rating_breakdown()
    rows = (
        Review.objects.filter(vendor_id=vendor_id, status=Review.Status.APPROVED)
        .order_by()
        .values('rating')
        .annotate(total=Count('id'))
    )
    for row in rows:
        breakdown[str(row['rating'])] = row['total']

    review_count = sum(breakdown.values())
    if review_count == 0:
        return Decimal('0.0'), 0, breakdown

    rating_sum = sum(int(star) * count for star, count in breakdown.items())
    # Half away from zero: 4.25 -> 4.3
    average = (Decimal(rating_sum) / Decimal(review_count)).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return average, review_count, breakdown


def recompute_vendor_rating(vendor_id):
    """
    Recalculates and stores the vendor's rating stats.

    A failure here never undoes the review change that triggered it: the
    error is logged and the stale aggregate is fixed by the next recompute.
    """
    try:
        average, review_count, breakdown = rating_stats(vendor_id)
        User.objects.filter(pk=vendor_id).update(
            average_rating=average,
            review_count=review_count,
            rating_breakdown=breakdown,
        )
    except Exception as e:
        logger.error(f"Error updating vendor rating for {vendor_id}: {e}", exc_info=True)
