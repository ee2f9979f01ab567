from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.text import slugify
from decimal import Decimal

from core.ids import new_object_id


def empty_rating_breakdown():
    return {str(star): 0 for star in range(1, 6)}


# -----------------------------
# 1️⃣ Bundle Model (subscription plans)
# -----------------------------
class Bundle(models.Model):
    DURATION_UNITS = [
        ('days', 'Days'),
        ('months', 'Months'),
        ('years', 'Years'),
    ]
    STATUS_CHOICES = [
        ('active', 'Active'),
        ('inactive', 'Inactive'),
    ]

    id = models.CharField(primary_key=True, max_length=24, default=new_object_id, editable=False)
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default='')
    price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    duration_value = models.PositiveIntegerField(default=12)
    duration_unit = models.CharField(max_length=10, choices=DURATION_UNITS, default='months')
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='active')
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.name} ({self.duration_value} {self.duration_unit})"


# -----------------------------
# 2️⃣ CustomUser Model (customers, vendors, admins)
# -----------------------------
class CustomUser(AbstractUser):
    USER_ROLES = [
        ('CUSTOMER', 'Customer'),
        ('VENDOR', 'Vendor'),
        ('ADMIN', 'Admin'),
    ]
    VENDOR_STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('approved', 'Approved'),
        ('rejected', 'Rejected'),
        ('expired', 'Expired'),
    ]

    id = models.CharField(primary_key=True, max_length=24, default=new_object_id, editable=False)
    role = models.CharField(max_length=10, choices=USER_ROLES, default='CUSTOMER')
    email = models.EmailField(unique=True)

    # Vendor profile
    store_name = models.CharField(max_length=100, blank=True, null=True)
    slug = models.SlugField(max_length=120, unique=True, blank=True, null=True)
    store_logo = models.CharField(max_length=500, blank=True, null=True)
    vendor_status = models.CharField(max_length=10, choices=VENDOR_STATUS_CHOICES, default='pending', db_index=True)

    # Subscription
    selected_bundle = models.ForeignKey(
        Bundle,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='vendors'
    )
    subscription_start_date = models.DateTimeField(null=True, blank=True)
    subscription_end_date = models.DateTimeField(null=True, blank=True, db_index=True)

    # Derived from approved reviews; written only by reviews.rating
    average_rating = models.DecimalField(max_digits=2, decimal_places=1, default=Decimal('0.0'))
    review_count = models.PositiveIntegerField(default=0)
    rating_breakdown = models.JSONField(default=empty_rating_breakdown)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username', 'role']

    @property
    def is_vendor(self):
        return self.role == 'VENDOR'

    @property
    def is_admin(self):
        return self.is_superuser or self.role == 'ADMIN'

    def save(self, *args, **kwargs):
        if self.role == 'VENDOR' and self.store_name and not self.slug:
            self.slug = self._unique_slug()
        super().save(*args, **kwargs)

    def _unique_slug(self):
        base_slug = slugify(self.store_name.replace('&', 'and')) or 'vendor'
        slug = base_slug
        count = 1
        while CustomUser.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f"{base_slug}-{count}"
            count += 1
        return slug

    def __str__(self):
        return f"{self.email} ({self.role})"
