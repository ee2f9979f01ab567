from django.conf import settings
from django.db import models

from core.ids import new_object_id


def normalize_key(key):
    return (key or '').strip().lower()


class Content(models.Model):
    """Keyed JSON blob behind CMS pages, landing page sections, FAQs and site settings."""

    TYPE_CHOICES = [
        ('page', 'Page'),
        ('section', 'Section'),
        ('faq', 'FAQ'),
        ('setting', 'Setting'),
    ]

    id = models.CharField(primary_key=True, max_length=24, default=new_object_id, editable=False)
    key = models.CharField(max_length=150, unique=True)
    type = models.CharField(max_length=10, choices=TYPE_CHOICES, db_index=True)
    content = models.JSONField()
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='content_updates'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['type', 'key']

    def save(self, *args, **kwargs):
        self.key = normalize_key(self.key)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.key} ({self.type})"
