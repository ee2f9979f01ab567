# support/admin.py
from django.contrib import admin
from .models import ContactSubmission

@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):
    list_display = ('fullname', 'email', 'subject', 'created_at', 'email_sent', 'is_resolved')
    list_filter = ('is_resolved', 'email_sent', 'created_at')
    search_fields = ('fullname', 'email', 'subject', 'message')
