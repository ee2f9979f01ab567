from django.contrib import admin

from .models import AdBanner


@admin.register(AdBanner)
class AdBannerAdmin(admin.ModelAdmin):
    list_display = ('name', 'media_type', 'status', 'is_vendor_specific', 'vendor', 'active_from', 'active_until')
    list_filter = ('status', 'media_type', 'is_vendor_specific')
    search_fields = ('name', 'title', 'vendor__store_name')
    raw_id_fields = ('vendor',)
    readonly_fields = ('created_at', 'updated_at')
