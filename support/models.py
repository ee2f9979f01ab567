from django.db import models

from core.ids import new_object_id


class ContactSubmission(models.Model):
    id = models.CharField(primary_key=True, max_length=24, default=new_object_id, editable=False)
    fullname = models.CharField(max_length=150)
    email = models.EmailField()
    phone = models.CharField(max_length=30, blank=True, null=True)
    subject = models.CharField(max_length=200, blank=True, null=True)
    message = models.TextField()
    email_sent = models.BooleanField(default=False)
    is_resolved = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.fullname} <{self.email}>"
