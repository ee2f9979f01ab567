from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import CustomUser, Bundle


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    model = CustomUser
    list_display = ('email', 'username', 'role', 'store_name', 'vendor_status', 'subscription_end_date', 'average_rating')
    list_filter = ('role', 'vendor_status', 'is_staff', 'is_superuser')
    search_fields = ('email', 'username', 'store_name')
    ordering = ('role', 'email')
    # Rating stats are recomputed from approved reviews, never edited by hand
    readonly_fields = ('last_login', 'date_joined', 'average_rating', 'review_count', 'rating_breakdown')

    fieldsets = (
        (None, {'fields': ('email', 'username', 'password', 'role')}),
        ('Vendor', {'fields': ('store_name', 'slug', 'store_logo', 'vendor_status')}),
        ('Subscription', {'fields': ('selected_bundle', 'subscription_start_date', 'subscription_end_date')}),
        ('Ratings', {'fields': ('average_rating', 'review_count', 'rating_breakdown')}),
        ('Permissions', {'fields': ('is_staff', 'is_active', 'is_superuser')}),
        ('Important dates', {'fields': ('last_login', 'date_joined')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'username', 'password1', 'password2', 'role', 'store_name', 'is_staff', 'is_active')}
        ),
    )

    def has_add_permission(self, request):
        return request.user.is_authenticated and request.user.is_admin

    def has_change_permission(self, request, obj=None):
        return request.user.is_authenticated and request.user.is_admin

    def has_delete_permission(self, request, obj=None):
        return request.user.is_authenticated and request.user.is_admin


@admin.register(Bundle)
class BundleAdmin(admin.ModelAdmin):
    list_display = ('name', 'price', 'duration_value', 'duration_unit', 'status')
    list_filter = ('status', 'duration_unit')
    search_fields = ('name',)
