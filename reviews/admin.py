from django.contrib import admin

from .models import Review
from .rating import recompute_vendor_rating


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ('id', 'vendor', 'user', 'rating', 'status', 'flagged_for_removal', 'created_at')
    list_filter = ('status', 'flagged_for_removal', 'rating')
    search_fields = ('comment', 'user__email', 'vendor__store_name')
    raw_id_fields = ('vendor', 'user')
    readonly_fields = ('created_at', 'updated_at')

    actions = ['approve_reviews', 'reject_reviews']

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        recompute_vendor_rating(obj.vendor_id)

    def delete_model(self, request, obj):
        vendor_id = obj.vendor_id
        super().delete_model(request, obj)
        recompute_vendor_rating(vendor_id)

    def delete_queryset(self, request, queryset):
        vendor_ids = set(queryset.values_list('vendor_id', flat=True))
        super().delete_queryset(request, queryset)
        for vendor_id in vendor_ids:
            recompute_vendor_rating(vendor_id)

    def _set_status(self, request, queryset, status, **extra):
        vendor_ids = set(queryset.values_list('vendor_id', flat=True))
        updated = queryset.update(status=status, **extra)
        for vendor_id in vendor_ids:
            recompute_vendor_rating(vendor_id)
        self.message_user(request, f"{updated} reviews marked as {status}.")

    @admin.action(description="Approve selected reviews")
    def approve_reviews(self, request, queryset):
        self._set_status(request, queryset, Review.Status.APPROVED, flagged_for_removal=False)

    @admin.action(description="Reject selected reviews")
    def reject_reviews(self, request, queryset):
        self._set_status(request, queryset, Review.Status.REJECTED)
