from rest_framework import serializers
from .models import ContactSubmission


class ContactSubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactSubmission
        fields = ['id', 'fullname', 'email', 'phone', 'subject', 'message', 'email_sent', 'is_resolved', 'created_at']
        read_only_fields = ['id', 'email_sent', 'created_at']


class ContactFormSerializer(serializers.Serializer):
    fullname = serializers.CharField(required=False, allow_blank=True, max_length=150)
    email = serializers.CharField(required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=30)
    subject = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)
    message = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if not all((attrs.get(field) or '').strip() for field in ('fullname', 'email', 'message')):
            raise serializers.ValidationError("Name, email, and message are required fields.")

        attrs['email'] = attrs['email'].strip()
        try:
            serializers.EmailField().run_validation(attrs['email'])
        except serializers.ValidationError:
            raise serializers.ValidationError("Please provide a valid email address.")
        return attrs
