from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.ids import new_object_id


class Review(models.Model):
    class Status(models.TextChoices):
        PENDING = 'Pending', 'Pending'
        APPROVED = 'Approved', 'Approved'
        REJECTED = 'Rejected', 'Rejected'

    id = models.CharField(primary_key=True, max_length=24, default=new_object_id, editable=False)
    vendor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        limit_choices_to={'role': 'VENDOR'},
        related_name='vendor_reviews'
    )
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reviews')

    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField()

    # New reviews wait for moderation
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.PENDING, db_index=True)
    flagged_for_removal = models.BooleanField(default=False, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ('vendor', 'user')
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.email} -> {self.vendor.store_name} ({self.rating}, {self.status})"
