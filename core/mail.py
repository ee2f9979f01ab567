# core/mail.py

import logging

from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.utils.html import strip_tags

logger = logging.getLogger(__name__)


# Template name -> subject (string or callable on the context) and,
# for internal notifications, a fixed recipient taken from settings.
EMAIL_TEMPLATES = {
    'vendor-subscription-warning': {
        'subject': lambda ctx: f"Your Karyaa subscription expires in {ctx['days_remaining']} day(s)",
    },
    'admin-subscription-warning': {
        'subject': lambda ctx: f"Vendor subscription expiring soon - {ctx['business_name']}",
        'recipient': lambda: settings.ADMIN_ALERT_EMAIL,
    },
    'vendor-expired': {
        'subject': 'Your Karyaa Subscription Has Expired',
    },
    'contact-form': {
        'subject': lambda ctx: f"New contact form submission from {ctx['name']}",
        'recipient': lambda: settings.SUPPORT_EMAIL,
    },
}


def send_templated_email(template_name, context, to=None):
    """
    Renders emails/<template_name>.html and sends it.

    Errors from the mail backend are not caught here: the caller decides
    whether a failed send aborts its work or is only recorded.
    """
    try:
        config = EMAIL_TEMPLATES[template_name]
    except KeyError:
        raise ValueError(f"Unknown email template: {template_name}")

    recipient = config['recipient']() if 'recipient' in config else to
    if not recipient:
        raise ValueError(f"Recipient email is required for template {template_name}")

    subject = config['subject']
    if callable(subject):
        subject = subject(context)

    html_message = render_to_string(f"emails/{template_name}.html", context)

    send_mail(
        subject,
        strip_tags(html_message),
        settings.DEFAULT_FROM_EMAIL,
        [recipient],
        html_message=html_message,
        fail_silently=False,
    )
    logger.info(f"Email '{template_name}' sent to {recipient}")


def vendor_email_context(vendor, **extra):
    """Common template variables for vendor facing emails."""
    bundle = vendor.selected_bundle
    context = {
        'business_name': vendor.store_name or vendor.username,
        'owner_name': vendor.get_full_name() or vendor.username,
        'email': vendor.email,
        'vendor_id': vendor.pk,
        'expiry_date': (
            vendor.subscription_end_date.strftime('%B %d, %Y')
            if vendor.subscription_end_date else None
        ),
        'bundle_name': bundle.name if bundle else None,
        'bundle_price': bundle.price if bundle else None,
        'dashboard_url': f"{settings.FRONTEND_URL}/vendor/dashboard",
        'renewal_url': f"{settings.FRONTEND_URL}/vendor/subscription",
        'review_url': f"{settings.ADMIN_PANEL_URL}/vendors/{vendor.pk}",
    }
    context.update(extra)
    return context
