# reviews/urls.py
from django.urls import path
from .views import (
    VendorActiveReviewsView,
    CreateReviewView,
    ReviewDetailView,
    VendorAllReviewsView,
    FlagReviewView,
    AdminAllReviewsView,
    AdminFlaggedReviewsView,
    AdminReviewDetailView,
)

urlpatterns = [
    # Admin
    path('admin/all/', AdminAllReviewsView.as_view(), name='admin-reviews'),
    path('admin/flagged/', AdminFlaggedReviewsView.as_view(), name='admin-flagged-reviews'),
    path('admin/<str:review_id>/', AdminReviewDetailView.as_view(), name='admin-review-detail'),

    # Vendor
    path('vendor/all/<str:vendor_id>/', VendorAllReviewsView.as_view(), name='vendor-all-reviews'),
    path('flag/<str:review_id>/', FlagReviewView.as_view(), name='flag-review'),

    # Public / user
    path('vendor/<str:vendor_id>/', VendorActiveReviewsView.as_view(), name='vendor-reviews'),
    path('new/<str:vendor_id>/', CreateReviewView.as_view(), name='create-review'),
    path('<str:review_id>/', ReviewDetailView.as_view(), name='review-detail'),
]
