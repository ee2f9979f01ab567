from rest_framework import serializers

from users.models import CustomUser
from users.serializers import VendorSummarySerializer
from .models import Review


class ReviewUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomUser
        fields = ['id', 'username']


class ReviewSerializer(serializers.ModelSerializer):
    user = ReviewUserSerializer(read_only=True)

    class Meta:
        model = Review
        fields = [
            'id', 'vendor', 'user', 'rating', 'comment',
            'status', 'flagged_for_removal', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class AdminReviewSerializer(ReviewSerializer):
    """Admin listings also show who the review is about."""
    user = serializers.SerializerMethodField()
    vendor = VendorSummarySerializer(read_only=True)

    def get_user(self, obj):
        return {'id': obj.user.id, 'username': obj.user.username, 'email': obj.user.email}


# ----------------------------------------------------
# Request payloads
# ----------------------------------------------------
class ReviewCreateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(
        min_value=1, max_value=5,
        error_messages={'required': "Rating value is required (1-5)"}
    )
    comment = serializers.CharField(error_messages={
        'required': "Review comment is required",
        'blank': "Review comment is required",
    })


class ReviewUpdateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)
    comment = serializers.CharField(required=False)


class ReviewModerationSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Review.Status.choices, required=False)
    flagged_for_removal = serializers.BooleanField(required=False)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Provide status and/or flagged_for_removal.")
        return attrs
