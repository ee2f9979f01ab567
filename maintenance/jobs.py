# maintenance/jobs.py

import logging
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import get_user_model
from django.utils import timezone

from banners.models import AdBanner
from core.mail import send_templated_email, vendor_email_context

User = get_user_model()
logger = logging.getLogger(__name__)


def _failed(job, error, now):
    logger.error(f"[CRON] Error in {job}: {error}", exc_info=True)
    return {"success": False, "error": str(error), "timestamp": now}


def _local_day_start(now):
    return timezone.localtime(now).replace(hour=0, minute=0, second=0, microsecond=0)


def _approved_vendors():
    return User.objects.filter(role='VENDOR', vendor_status='approved').select_related('selected_bundle')


# ------------------
# Banner sweep
# ------------------
def deactivate_banners(now=None):
    """Switches off Active banners whose active_until has passed. Never reactivates."""
    now = now or timezone.now()
    try:
        count = AdBanner.objects.filter(
            status=AdBanner.Status.ACTIVE,
            active_until__isnull=False,
            active_until__lt=now,
        ).update(status=AdBanner.Status.INACTIVE, updated_at=now)
    except Exception as e:
        return _failed("banner deactivation job", e, now)

    logger.info(f"[CRON] Banner Deactivation Job - {now.isoformat()}")
    logger.info(f"[CRON] Deactivated {count} banner(s)")
    return {"success": True, "deactivated_count": count, "timestamp": now}


# ------------------
# Subscription sweep
# ------------------
def send_subscription_warnings(now, result):
    """
    Warns approved vendors whose subscription ends on the local calendar day
    `today + offset` for each configured offset. Admin alerts go out for the
    offsets in ADMIN_SUBSCRIPTION_WARNING_DAYS.
    """
    today = _local_day_start(now)
    admin_offsets = set(settings.ADMIN_SUBSCRIPTION_WARNING_DAYS)

    for offset in sorted(set(settings.SUBSCRIPTION_WARNING_DAYS)):
        day_start = today + timedelta(days=offset)
        vendors = _approved_vendors().filter(
            subscription_end_date__gte=day_start,
            subscription_end_date__lt=day_start + timedelta(days=1),
        )

        for vendor in vendors:
            context = vendor_email_context(vendor, days_remaining=offset)
            try:
                send_templated_email('vendor-subscription-warning', context, to=vendor.email)
                result['warnings_sent'] += 1

                if offset in admin_offsets:
                    send_templated_email('admin-subscription-warning', context)
                    result['admin_warnings_sent'] += 1
            except Exception as e:
                logger.error(f"[CRON] Failed to send {offset}-day warning to vendor {vendor.pk}: {e}", exc_info=True)
                result['errors'].append({"vendor_id": vendor.pk, "stage": "warning", "error": str(e)})


def expire_vendors(now, result):
    """Approved vendors past their end date become expired and get one notice."""
    vendors = _approved_vendors().filter(
        subscription_end_date__isnull=False,
        subscription_end_date__lt=now,
    )

    for vendor in vendors:
        try:
            vendor.vendor_status = 'expired'
            vendor.save(update_fields=['vendor_status'])
            result['expired_count'] += 1
        except Exception as e:
            logger.error(f"[CRON] Failed to expire vendor {vendor.pk}: {e}", exc_info=True)
            result['errors'].append({"vendor_id": vendor.pk, "stage": "expire", "error": str(e)})
            continue

        # Status change stands even if the notice cannot be delivered
        try:
            send_templated_email('vendor-expired', vendor_email_context(vendor), to=vendor.email)
            result['emails_sent'] += 1
        except Exception as e:
            logger.error(f"[CRON] Failed to send expiration email to vendor {vendor.pk}: {e}", exc_info=True)
            result['errors'].append({"vendor_id": vendor.pk, "stage": "expired-email", "error": str(e)})


def process_vendor_subscriptions(now=None):
    now = now or timezone.now()
    result = {
        "success": True,
        "warnings_sent": 0,
        "admin_warnings_sent": 0,
        "expired_count": 0,
        "emails_sent": 0,
        "errors": [],
        "timestamp": now,
    }

    try:
        # 1️⃣ Warnings before expiry
        send_subscription_warnings(now, result)
        # 2️⃣ Expire overdue subscriptions
        expire_vendors(now, result)
    except Exception as e:
        return _failed("vendor subscription job", e, now)

    logger.info(f"[CRON] Vendor Subscription Job - {now.isoformat()}")
    logger.info(
        f"[CRON] Warnings sent: {result['warnings_sent']} (admin: {result['admin_warnings_sent']}), "
        f"expired: {result['expired_count']}, errors: {len(result['errors'])}"
    )
    return result


def run_all(now=None):
    now = now or timezone.now()
    return {
        "vendors": process_vendor_subscriptions(now),
        "banners": deactivate_banners(now),
    }
