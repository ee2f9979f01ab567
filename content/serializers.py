from rest_framework import serializers

from .models import Content, normalize_key


class ContentSerializer(serializers.ModelSerializer):
    updated_by = serializers.SerializerMethodField()

    class Meta:
        model = Content
        fields = ['id', 'key', 'type', 'content', 'updated_by', 'created_at', 'updated_at']

    def get_updated_by(self, obj):
        if not obj.updated_by:
            return None
        return {"id": obj.updated_by.pk, "username": obj.updated_by.username, "email": obj.updated_by.email}


class BulkKeysSerializer(serializers.Serializer):
    keys = serializers.ListField(child=serializers.CharField(), required=False)

    def validate(self, attrs):
        keys = [normalize_key(key) for key in attrs.get('keys') or []]
        if not keys:
            raise serializers.ValidationError("Keys array is required")
        return {'keys': keys}


class ContentUpsertSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=Content.TYPE_CHOICES, required=False)
    content = serializers.JSONField(required=False, allow_null=True)

    def validate(self, attrs):
        if not attrs.get('type') or attrs.get('content') in (None, ''):
            raise serializers.ValidationError("Type and content are required")
        return attrs


class SectionSerializer(serializers.Serializer):
    key = serializers.CharField()
    type = serializers.ChoiceField(choices=Content.TYPE_CHOICES, default='section')
    content = serializers.JSONField()

    def validate_key(self, value):
        key = normalize_key(value)
        if not key:
            raise serializers.ValidationError("Key is required.")
        return key


class BulkSectionsSerializer(serializers.Serializer):
    sections = SectionSerializer(many=True, required=False)

    def validate(self, attrs):
        if not attrs.get('sections'):
            raise serializers.ValidationError("Sections array is required")
        return attrs
