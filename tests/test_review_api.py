"""HTTP tests for the review endpoints and the error envelope."""

import pytest

from core.ids import new_object_id
from reviews.models import Review

pytestmark = pytest.mark.django_db


class TestCreateReviewEndpoint:
    def test_requires_authentication(self, api_client, vendor):
        response = api_client.post(f"/api/v1/reviews/new/{vendor.pk}/", {"rating": 5, "comment": "Hi"}, format="json")

        assert response.status_code == 401
        assert response.data["success"] is False

    def test_creates_review(self, client_for, customer, vendor):
        response = client_for(customer).post(
            f"/api/v1/reviews/new/{vendor.pk}/", {"rating": 5, "comment": "Fantastic"}, format="json",
        )

        assert response.status_code == 201
        assert response.data["success"] is True
        assert response.data["review"]["status"] == "Pending"

    def test_duplicate_is_409(self, client_for, customer, vendor):
        client = client_for(customer)
        client.post(f"/api/v1/reviews/new/{vendor.pk}/", {"rating": 5, "comment": "One"}, format="json")

        response = client.post(f"/api/v1/reviews/new/{vendor.pk}/", {"rating": 4, "comment": "Two"}, format="json")

        assert response.status_code == 409
        assert response.data == {"success": False, "message": "You've already reviewed this vendor."}

    def test_malformed_vendor_id_is_400(self, client_for, customer):
        response = client_for(customer).post("/api/v1/reviews/new/xyz/", {"rating": 5, "comment": "Hi"}, format="json")

        assert response.status_code == 400
        assert response.data["message"] == "Invalid Vendor ID format."

    def test_rating_out_of_range_is_400(self, client_for, customer, vendor):
        response = client_for(customer).post(
            f"/api/v1/reviews/new/{vendor.pk}/", {"rating": 9, "comment": "Hi"}, format="json",
        )

        assert response.status_code == 400
        assert "rating" in response.data["errors"]
        assert not Review.objects.exists()


class TestPublicListingEndpoint:
    def test_lists_approved_reviews(self, api_client, vendor, customer):
        Review.objects.create(vendor=vendor, user=customer, rating=4, comment="ok", status=Review.Status.APPROVED)

        response = api_client.get(f"/api/v1/reviews/vendor/{vendor.pk}/")

        assert response.status_code == 200
        assert response.data["total_reviews"] == 1
        assert response.data["total_pages"] == 1
        assert response.data["rating_filter"] == "all"
        assert response.data["reviews"][0]["rating"] == 4

    def test_unknown_vendor_is_404(self, api_client):
        response = api_client.get(f"/api/v1/reviews/vendor/{new_object_id()}/")

        assert response.status_code == 404
        assert response.data["message"] == "Vendor not found."


class TestOwnershipEndpoints:
    def test_other_user_cannot_edit(self, client_for, vendor, customer, other_customer):
        review = Review.objects.create(vendor=vendor, user=customer, rating=4, comment="ok")

        response = client_for(other_customer).patch(f"/api/v1/reviews/{review.pk}/", {"rating": 1}, format="json")

        assert response.status_code == 403
        assert response.data["message"] == "Not authorized to update this review"

    def test_vendor_flags_own_review(self, client_for, vendor, customer):
        review = Review.objects.create(vendor=vendor, user=customer, rating=1, comment="bad", status=Review.Status.APPROVED)

        response = client_for(vendor).patch(f"/api/v1/reviews/flag/{review.pk}/")

        assert response.status_code == 200
        assert response.data["review"]["flagged_for_removal"] is True
        assert response.data["review"]["status"] == "Pending"

    def test_customer_cannot_flag(self, client_for, vendor, customer):
        review = Review.objects.create(vendor=vendor, user=customer, rating=1, comment="bad")

        response = client_for(customer).patch(f"/api/v1/reviews/flag/{review.pk}/")

        assert response.status_code == 403

    def test_vendor_cannot_list_rival_reviews(self, client_for, vendor, other_vendor):
        response = client_for(vendor).get(f"/api/v1/reviews/vendor/all/{other_vendor.pk}/")

        assert response.status_code == 403


class TestAdminEndpoints:
    def test_admin_moderates_review(self, client_for, admin, vendor, customer):
        review = Review.objects.create(vendor=vendor, user=customer, rating=5, comment="great")

        response = client_for(admin).patch(
            f"/api/v1/reviews/admin/{review.pk}/", {"status": "Approved"}, format="json",
        )
        vendor.refresh_from_db()

        assert response.status_code == 200
        assert response.data["review"]["vendor"]["id"] == vendor.pk
        assert vendor.review_count == 1

    def test_empty_moderation_payload_is_400(self, client_for, admin, vendor, customer):
        review = Review.objects.create(vendor=vendor, user=customer, rating=5, comment="great")

        response = client_for(admin).patch(f"/api/v1/reviews/admin/{review.pk}/", {}, format="json")

        assert response.status_code == 400

    def test_vendor_is_not_admin(self, client_for, vendor):
        response = client_for(vendor).get("/api/v1/reviews/admin/all/")

        assert response.status_code == 403
        assert response.data["message"] == "Admin access required."

    def test_admin_lists_all(self, client_for, admin, vendor, customer):
        Review.objects.create(vendor=vendor, user=customer, rating=5, comment="great")

        response = client_for(admin).get("/api/v1/reviews/admin/all/")

        assert response.status_code == 200
        assert response.data["current_page"] == 1
        assert response.data["reviews"][0]["user"]["email"] == customer.email
