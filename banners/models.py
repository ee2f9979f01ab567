from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from core.ids import new_object_id


def default_placement():
    return ['Homepage Carousel']


class AdBanner(models.Model):
    class Status(models.TextChoices):
        ACTIVE = 'Active', 'Active'
        INACTIVE = 'Inactive', 'Inactive'

    MEDIA_TYPES = [('image', 'Image'), ('video', 'Video')]
    DISPLAY_MODES = [('standard', 'Standard'), ('auto', 'Auto')]

    id = models.CharField(primary_key=True, max_length=24, default=new_object_id, editable=False)

    # --- Identity & media ---
    name = models.CharField(max_length=100)
    media_type = models.CharField(max_length=10, choices=MEDIA_TYPES, default='image')
    image_url = models.CharField(max_length=500, blank=True, null=True)  # poster for video banners
    mobile_image_url = models.CharField(max_length=500, blank=True, null=True)
    video_url = models.CharField(max_length=500, blank=True, null=True)

    # --- Text overlay ---
    title = models.CharField(max_length=100, blank=True, null=True)
    tagline = models.CharField(max_length=200, blank=True, null=True)
    show_title = models.BooleanField(default=True)
    show_overlay = models.BooleanField(default=True)
    display_mode = models.CharField(max_length=10, choices=DISPLAY_MODES, default='standard')

    # --- Schedule ---
    active_from = models.DateTimeField(default=timezone.now, null=True, blank=True)
    active_until = models.DateTimeField(null=True, blank=True, db_index=True)

    # --- Status & placement ---
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.ACTIVE, db_index=True)
    # Free-form tags: categories, subcategories, static pages
    placement = models.JSONField(default=default_placement, blank=True)

    # --- Target: a vendor profile or a custom URL, never both ---
    is_vendor_specific = models.BooleanField(default=True, db_index=True)
    vendor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        limit_choices_to={'role': 'VENDOR'},
        related_name='banners'
    )
    custom_url = models.CharField(max_length=500, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def clean(self):
        placement = self.placement if isinstance(self.placement, list) else []
        self.placement = [str(tag).strip() for tag in placement if str(tag).strip()]
        if not self.placement:
            raise ValidationError('At least one placement location is required.')

        if self.media_type == 'video':
            if not self.video_url:
                raise ValidationError('Video URL is required for video banners.')
        elif not self.image_url:
            raise ValidationError('Image URL is required for image banners.')

        if self.is_vendor_specific:
            if not self.vendor_id:
                raise ValidationError('Vendor is required for vendor-specific banners.')
            self.custom_url = None
        else:
            self.custom_url = (self.custom_url or '').strip()
            if not self.custom_url:
                raise ValidationError('Custom URL is required for non-vendor-specific banners.')
            self.vendor = None

        if self.active_from and self.active_until and self.active_from > self.active_until:
            raise ValidationError('Active From date must be before Active Until date.')

    def is_within_window(self, now=None):
        now = now or timezone.now()
        if self.active_from and self.active_from > now:
            return False
        if self.active_until and self.active_until < now:
            return False
        return True

    def __str__(self):
        return f"{self.name} ({self.status})"
