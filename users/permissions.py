# users/permissions.py

from rest_framework.permissions import BasePermission


class IsVendor(BasePermission):
    """
    Custom permission to only allow access to users with role='VENDOR'.
    """
    message = "Vendor access required."

    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.role == 'VENDOR'


class IsAdmin(BasePermission):
    """Superusers and users with role='ADMIN'."""
    message = "Admin access required."

    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.is_admin


class IsVendorOrAdmin(BasePermission):
    """
    Vendors and admins. Views still have to check that a vendor only
    touches its own records.
    """
    message = "Vendor or admin access required."

    def has_permission(self, request, view):
        user = request.user
        if not user.is_authenticated:
            return False
        return user.is_admin or user.role == 'VENDOR'
