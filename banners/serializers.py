from rest_framework import serializers

from users.serializers import VendorSummarySerializer
from .models import AdBanner


class AdBannerSerializer(serializers.ModelSerializer):
    vendor = VendorSummarySerializer(read_only=True)

    class Meta:
        model = AdBanner
        fields = [
            'id', 'name', 'media_type', 'image_url', 'mobile_image_url', 'video_url',
            'title', 'tagline', 'show_title', 'show_overlay', 'display_mode',
            'active_from', 'active_until', 'status', 'placement',
            'is_vendor_specific', 'vendor', 'custom_url',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class PublicBannerSerializer(AdBannerSerializer):
    """Flattens the vendor's slug, name and logo onto vendor banners for the storefront."""

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if instance.is_vendor_specific and instance.vendor:
            data['vendor_slug'] = instance.vendor.slug
            data['business_name'] = instance.vendor.store_name
            data['business_logo'] = instance.vendor.store_logo
        return data


class BannerWriteSerializer(serializers.Serializer):
    """
    Request payload for create (full) and update (partial=True).
    The vendor is taken as a raw id so the service can answer 400 for a
    malformed id and 404 for an unknown vendor.
    """
    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    placement = serializers.ListField(child=serializers.CharField(), required=False)
    media_type = serializers.ChoiceField(choices=AdBanner.MEDIA_TYPES, required=False)
    image_url = serializers.CharField(max_length=500, required=False, allow_null=True, allow_blank=True)
    mobile_image_url = serializers.CharField(max_length=500, required=False, allow_null=True, allow_blank=True)
    video_url = serializers.CharField(max_length=500, required=False, allow_null=True, allow_blank=True)
    title = serializers.CharField(max_length=100, required=False, allow_null=True, allow_blank=True)
    tagline = serializers.CharField(max_length=200, required=False, allow_null=True, allow_blank=True)
    show_title = serializers.BooleanField(required=False)
    show_overlay = serializers.BooleanField(required=False)
    display_mode = serializers.ChoiceField(choices=AdBanner.DISPLAY_MODES, required=False)
    active_from = serializers.DateTimeField(required=False, allow_null=True)
    active_until = serializers.DateTimeField(required=False, allow_null=True)
    status = serializers.ChoiceField(choices=AdBanner.Status.choices, required=False)
    is_vendor_specific = serializers.BooleanField(required=False)
    vendor = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    custom_url = serializers.CharField(max_length=500, required=False, allow_null=True, allow_blank=True)

    def validate(self, attrs):
        for field in ('name', 'placement'):
            missing = field not in attrs and not self.partial
            if missing or (field in attrs and not attrs[field]):
                raise serializers.ValidationError("Name and placement are required.")
        if 'name' in attrs:
            attrs['name'] = attrs['name'].strip()
        return attrs
