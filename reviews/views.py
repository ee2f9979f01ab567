# reviews/views.py

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import IsAdmin, IsVendor, IsVendorOrAdmin
from . import services
from .serializers import (
    ReviewSerializer,
    AdminReviewSerializer,
    ReviewCreateSerializer,
    ReviewUpdateSerializer,
    ReviewModerationSerializer,
)


def paginated_response(page, serializer_class, **extra):
    reviews = serializer_class(page['items'], many=True).data
    body = {
        "success": True,
        "page": page['page'],
        "limit": page['limit'],
        "total_reviews": page['total'],
        "total_pages": page['total_pages'],
        "count": len(reviews),
        "reviews": reviews,
    }
    body.update(extra)
    return Response(body, status=status.HTTP_200_OK)


# ------------------
# 1. PUBLIC / USER VIEWS
# ------------------
class VendorActiveReviewsView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, vendor_id):
        page = services.list_public_reviews(vendor_id, request.query_params)
        return paginated_response(
            page, ReviewSerializer,
            rating_filter=request.query_params.get('rating') or 'all',
            message="Successfully fetched vendor reviews.",
        )


class CreateReviewView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, vendor_id):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = services.create_review(vendor_id, request.user, **serializer.validated_data)
        return Response({
            "success": True,
            "message": "Review submitted successfully and is awaiting moderation.",
            "review": ReviewSerializer(review).data,
        }, status=status.HTTP_201_CREATED)


class ReviewDetailView(APIView):
    """The review's author edits or removes it."""
    permission_classes = [IsAuthenticated]

    def patch(self, request, review_id):
        serializer = ReviewUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = services.update_review(review_id, request.user, **serializer.validated_data)
        return Response({
            "success": True,
            "message": "Review updated successfully and vendor statistics recalculated.",
            "review": ReviewSerializer(review).data,
        })

    def delete(self, request, review_id):
        services.delete_review(review_id, request.user)
        return Response({
            "success": True,
            "message": "Review deleted successfully and vendor statistics recalculated.",
        })


# ------------------
# 2. VENDOR VIEWS
# ------------------
class VendorAllReviewsView(APIView):
    permission_classes = [IsVendorOrAdmin]

    def get(self, request, vendor_id):
        page = services.list_vendor_reviews(vendor_id, request.user, request.query_params)
        params = request.query_params
        return paginated_response(
            page, ReviewSerializer,
            rating_filter=params.get('rating') or 'all',
            status_filter=params.get('status') or 'all',
            search_term=(params.get('search') or '').strip(),
            message="Successfully fetched vendor reviews.",
        )


class FlagReviewView(APIView):
    permission_classes = [IsVendor]

    def patch(self, request, review_id):
        review = services.flag_review(review_id, request.user)
        return Response({
            "success": True,
            "message": "Review successfully flagged for removal and set to Pending.",
            "review": ReviewSerializer(review).data,
        })


# ------------------
# 3. ADMIN VIEWS
# ------------------
class AdminAllReviewsView(APIView):
    permission_classes = [IsAdmin]
    flagged_only = False

    def get(self, request):
        page = services.list_all_reviews(request.query_params, flagged_only=self.flagged_only)
        return paginated_response(page, AdminReviewSerializer, current_page=page['page'])


class AdminFlaggedReviewsView(AdminAllReviewsView):
    flagged_only = True


class AdminReviewDetailView(APIView):
    permission_classes = [IsAdmin]

    def patch(self, request, review_id):
        serializer = ReviewModerationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = services.moderate_review(review_id, **serializer.validated_data)
        return Response({
            "success": True,
            "message": "Review updated successfully",
            "review": AdminReviewSerializer(review).data,
        })

    def delete(self, request, review_id):
        services.admin_delete_review(review_id)
        return Response({"success": True, "message": "Review deleted successfully"})
