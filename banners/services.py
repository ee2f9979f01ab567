# banners/services.py

import logging

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from core.ids import validate_object_id
from .filters import AdBannerFilter, placement_list, with_placement
from .models import AdBanner

User = get_user_model()
logger = logging.getLogger(__name__)

SORTABLE_FIELDS = ('created_at', 'updated_at', 'name', 'status', 'active_from', 'active_until')


def get_banner_or_404(banner_id):
    banner_id = validate_object_id(banner_id, 'Banner')
    try:
        return AdBanner.objects.select_related('vendor').get(pk=banner_id)
    except AdBanner.DoesNotExist:
        raise NotFound("Ad Banner not found.")


def _resolve_vendor(vendor_id, not_found_message="Vendor not found."):
    vendor_id = validate_object_id(vendor_id, 'Vendor')
    vendor = User.objects.filter(pk=vendor_id, role='VENDOR').first()
    if not vendor:
        raise NotFound(not_found_message)
    return vendor


def _save_banner(banner):
    try:
        banner.full_clean()
    except DjangoValidationError as e:
        raise ValidationError(e.messages)
    banner.save()
    return banner


def _apply(banner, data):
    for field, value in data.items():
        if field == 'vendor':
            continue
        if field == 'placement':
            value = placement_list(value)
        setattr(banner, field, value)


# ------------------
# Mutations
# ------------------
def create_banner(data):
    data = dict(data)
    is_vendor_specific = data.get('is_vendor_specific', True)
    vendor_id = data.pop('vendor', None)
    vendor = None

    if is_vendor_specific:
        if not vendor_id:
            raise ValidationError("Vendor required.")
        vendor = _resolve_vendor(vendor_id)
        data['custom_url'] = None
    elif not (data.get('custom_url') or '').strip():
        raise ValidationError("Custom URL required.")

    banner = AdBanner(vendor=vendor)
    _apply(banner, data)
    _save_banner(banner)

    logger.info(f"Ad banner {banner.pk} created ({banner.name})")
    return banner


def update_banner(banner_id, data):
    """
    Partial update. Switching to vendor-specific looks up the new vendor and
    drops the custom URL; switching away drops the vendor.
    """
    banner_id = validate_object_id(banner_id, 'Banner')
    data = dict(data)
    vendor_id = data.pop('vendor', None)
    vendor = None

    if vendor_id and data.get('is_vendor_specific', True):
        vendor = _resolve_vendor(vendor_id, "Specified Vendor not found.")

    if data.get('is_vendor_specific') is True:
        data['custom_url'] = None

    banner = get_banner_or_404(banner_id)
    _apply(banner, data)
    if vendor is not None:
        banner.vendor = vendor
    elif data.get('is_vendor_specific') is False:
        banner.vendor = None

    _save_banner(banner)
    logger.info(f"Ad banner {banner.pk} updated")
    return banner


def toggle_banner_status(banner_id):
    banner = get_banner_or_404(banner_id)
    if banner.status == AdBanner.Status.ACTIVE:
        banner.status = AdBanner.Status.INACTIVE
    else:
        banner.status = AdBanner.Status.ACTIVE
    banner.save(update_fields=['status', 'updated_at'])
    return banner


def delete_banner(banner_id):
    banner = get_banner_or_404(banner_id)
    banner.delete()
    logger.info(f"Ad banner {banner_id} deleted")


# ------------------
# Listings
# ------------------
def list_active_banners(placement=None, within_window=True, now=None):
    """Active banners for the storefront, newest first."""
    queryset = AdBanner.objects.filter(status=AdBanner.Status.ACTIVE).select_related('vendor')

    if placement and placement != 'all':
        queryset = with_placement(queryset, [placement])

    banners = list(queryset.order_by('-created_at'))
    if within_window:
        now = now or timezone.now()
        banners = [banner for banner in banners if banner.is_within_window(now)]
    return banners


def list_all_banners(params):
    queryset = AdBanner.objects.all().select_related('vendor')

    placements = params.getlist('placement') if hasattr(params, 'getlist') else params.get('placement')
    filters = {
        'search': (params.get('search') or '').strip(),
        'status': params.get('status'),
        'placement': ','.join(placement_list(placements or [])),
    }
    queryset = AdBannerFilter(filters, queryset=queryset).qs

    sort_by = params.get('sort_by') or 'created_at'
    if sort_by not in SORTABLE_FIELDS:
        sort_by = 'created_at'
    sort_order = '' if params.get('sort_order') == 'asc' else '-'
    return list(queryset.order_by(f"{sort_order}{sort_by}"))
