from rest_framework import serializers
from djoser.serializers import UserCreatePasswordRetypeSerializer

from .models import CustomUser, Bundle


class CustomUserCreateSerializer(UserCreatePasswordRetypeSerializer):
    """Registration for customers and vendors. Admin accounts are never self-registered."""

    class Meta(UserCreatePasswordRetypeSerializer.Meta):
        model = CustomUser
        fields = ('id', 'email', 'username', 'password', 'role', 'store_name')

    def validate_role(self, value):
        if value == 'ADMIN':
            raise serializers.ValidationError("Admin accounts cannot be registered.")
        return value

    def validate(self, attrs):
        if attrs.get('role') == 'VENDOR' and not attrs.get('store_name'):
            raise serializers.ValidationError({"store_name": "Store name is required for vendors."})
        return super().validate(attrs)


class CustomUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomUser
        fields = ('id', 'username', 'email', 'role', 'store_name', 'slug', 'vendor_status', 'is_active', 'is_staff')


class BundleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Bundle
        fields = ['id', 'name', 'price', 'duration_value', 'duration_unit']


class VendorSummarySerializer(serializers.ModelSerializer):
    """Small vendor card embedded in review and banner payloads."""
    class Meta:
        model = CustomUser
        fields = ['id', 'store_name', 'slug', 'store_logo', 'email']


class AdminVendorSerializer(serializers.ModelSerializer):
    selected_bundle = BundleSerializer(read_only=True)

    class Meta:
        model = CustomUser
        fields = [
            'id', 'email', 'store_name', 'slug', 'vendor_status',
            'selected_bundle', 'subscription_start_date', 'subscription_end_date',
            'average_rating', 'review_count', 'rating_breakdown', 'date_joined',
        ]


class VendorStatusSerializer(serializers.Serializer):
    vendor_status = serializers.ChoiceField(
        choices=CustomUser.VENDOR_STATUS_CHOICES,
        error_messages={
            'invalid_choice': "Invalid status. Must be 'approved', 'pending', 'rejected', or 'expired'",
        },
    )
