# reviews/services.py

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound, PermissionDenied

from core.exceptions import Conflict
from core.ids import validate_object_id
from core.pagination import paginate_queryset
from .filters import ReviewFilter
from .models import Review
from .rating import recompute_vendor_rating

User = get_user_model()
logger = logging.getLogger(__name__)

DUPLICATE_REVIEW_MESSAGE = "You've already reviewed this vendor."


def get_vendor_or_404(vendor_id):
    vendor_id = validate_object_id(vendor_id, 'Vendor')
    vendor = User.objects.filter(pk=vendor_id, role='VENDOR').first()
    if not vendor:
        raise NotFound("Vendor not found.")
    return vendor


def get_review_or_404(review_id):
    review_id = validate_object_id(review_id, 'Review')
    try:
        return Review.objects.select_related('user', 'vendor').get(pk=review_id)
    except Review.DoesNotExist:
        raise NotFound("Review not found.")


# ------------------
# Mutations
# ------------------
def create_review(vendor_id, user, rating, comment):
    vendor = get_vendor_or_404(vendor_id)

    if Review.objects.filter(vendor=vendor, user=user).exists():
        raise Conflict(DUPLICATE_REVIEW_MESSAGE)

    try:
        with transaction.atomic():
            review = Review.objects.create(vendor=vendor, user=user, rating=rating, comment=comment.strip())
    except IntegrityError:
        # Lost a race against a concurrent create for the same pair
        raise Conflict(DUPLICATE_REVIEW_MESSAGE)

    # New reviews are Pending and not counted yet; recompute keeps every path uniform
    recompute_vendor_rating(vendor.pk)
    logger.info(f"Review {review.pk} created by {user.pk} for vendor {vendor.pk}")
    return review


def update_review(review_id, requester, rating=None, comment=None):
    review = get_review_or_404(review_id)

    if review.user_id != requester.pk:
        raise PermissionDenied("Not authorized to update this review")

    if rating is not None:
        review.rating = rating
    if comment is not None:
        review.comment = comment.strip()
    review.save(update_fields=['rating', 'comment', 'updated_at'])

    recompute_vendor_rating(review.vendor_id)
    return review


def delete_review(review_id, requester):
    review = get_review_or_404(review_id)

    if review.user_id != requester.pk:
        raise PermissionDenied("Not authorized to delete this review")

    _delete(review)


def admin_delete_review(review_id):
    review = get_review_or_404(review_id)
    _delete(review)


def _delete(review):
    vendor_id = review.vendor_id
    review.delete()
    recompute_vendor_rating(vendor_id)


def flag_review(review_id, vendor):
    """A vendor asks for one of its own reviews to be removed; it goes back to moderation."""
    review = get_review_or_404(review_id)

    if review.vendor_id != vendor.pk:
        raise PermissionDenied("You are not allowed to flag reviews for other vendors.")

    if review.flagged_for_removal:
        raise Conflict("This review has already been flagged for removal.")

    review.flagged_for_removal = True
    review.status = Review.Status.PENDING
    review.save(update_fields=['flagged_for_removal', 'status', 'updated_at'])

    recompute_vendor_rating(review.vendor_id)
    return review


def moderate_review(review_id, status=None, flagged_for_removal=None):
    """
    Admin update of status and/or flag.
      - approving clears the flag
      - raising the flag sends the review back to Pending
      - dismissing the flag approves the review
    The flag rule is applied last, so it wins when both fields are sent.
    """
    review = get_review_or_404(review_id)

    if status is not None:
        review.status = status
        if status == Review.Status.APPROVED:
            review.flagged_for_removal = False

    if flagged_for_removal is not None:
        review.flagged_for_removal = flagged_for_removal
        review.status = Review.Status.PENDING if flagged_for_removal else Review.Status.APPROVED

    review.save(update_fields=['flagged_for_removal', 'status', 'updated_at'])

    recompute_vendor_rating(review.vendor_id)
    return review


# ------------------
# Listings
# ------------------
def list_public_reviews(vendor_id, params):
    """Approved reviews of one vendor, newest first."""
    vendor = get_vendor_or_404(vendor_id)
    queryset = Review.objects.filter(vendor=vendor, status=Review.Status.APPROVED).select_related('user')
    queryset = ReviewFilter({'rating': params.get('rating')}, queryset=queryset).qs
    return paginate_queryset(queryset.order_by('-created_at'), params)


def list_vendor_reviews(vendor_id, requester, params):
    """All statuses for one vendor. Vendors may only read their own reviews."""
    vendor = get_vendor_or_404(vendor_id)

    if not requester.is_admin and requester.pk != vendor.pk:
        raise PermissionDenied("You are not allowed to view reviews of other vendors.")

    queryset = Review.objects.filter(vendor=vendor).select_related('user')
    filters = {key: params.get(key) for key in ('status', 'rating', 'search')}
    queryset = ReviewFilter(filters, queryset=queryset).qs
    return paginate_queryset(queryset.order_by('-created_at'), params)


def list_all_reviews(params, flagged_only=False):
    queryset = Review.objects.all().select_related('user', 'vendor')
    filters = {key: params.get(key) for key in ('status', 'rating', 'search', 'flagged')}
    if flagged_only:
        filters['flagged'] = 'true'
    queryset = ReviewFilter(filters, queryset=queryset).qs
    return paginate_queryset(queryset.order_by('-created_at'), params)
