"""Tests for registration and admin vendor management."""

from datetime import timedelta

import pytest
from django.utils import timezone

from core.ids import new_object_id
from tests.conftest import make_vendor
from users.models import Bundle, CustomUser

pytestmark = pytest.mark.django_db

PASSWORD = "Sunset-Venue-2024"


class TestRegistration:
    def test_vendor_registration_builds_slug(self, api_client):
        response = api_client.post("/api/v1/auth/users/", {
            "email": "hello@roses.ae",
            "username": "roses",
            "password": PASSWORD,
            "re_password": PASSWORD,
            "role": "VENDOR",
            "store_name": "Roses & Rings",
        }, format="json")

        assert response.status_code == 201
        vendor = CustomUser.objects.get(email="hello@roses.ae")
        assert vendor.slug == "roses-and-rings"
        assert vendor.vendor_status == "pending"

    def test_admin_self_registration_rejected(self, api_client):
        response = api_client.post("/api/v1/auth/users/", {
            "email": "boss@example.com",
            "username": "boss",
            "password": PASSWORD,
            "re_password": PASSWORD,
            "role": "ADMIN",
        }, format="json")

        assert response.status_code == 400
        assert not CustomUser.objects.filter(email="boss@example.com").exists()

    def test_duplicate_store_names_get_distinct_slugs(self):
        first = make_vendor("one", store_name="Glow Studio")
        second = make_vendor("two", store_name="Glow Studio")

        assert first.slug == "glow-studio"
        assert second.slug == "glow-studio-1"


class TestAdminVendorStatus:
    def test_approval_starts_subscription(self, client_for, admin):
        bundle = Bundle.objects.create(name="Yearly", duration_value=1, duration_unit="years")
        vendor = make_vendor("fresh", vendor_status="pending", selected_bundle=bundle)

        before = timezone.now()
        response = client_for(admin).patch(
            f"/api/v1/users/admin/vendors/{vendor.pk}/status/", {"vendor_status": "approved"}, format="json",
        )

        assert response.status_code == 200
        vendor.refresh_from_db()
        assert vendor.vendor_status == "approved"
        assert vendor.subscription_start_date >= before
        assert vendor.subscription_end_date - vendor.subscription_start_date >= timedelta(days=365)

    def test_reapproval_keeps_dates(self, client_for, admin, vendor):
        end = timezone.now() + timedelta(days=40)
        vendor.subscription_end_date = end
        vendor.save()

        client_for(admin).patch(
            f"/api/v1/users/admin/vendors/{vendor.pk}/status/", {"vendor_status": "approved"}, format="json",
        )

        vendor.refresh_from_db()
        assert vendor.subscription_end_date == end

    def test_invalid_status(self, client_for, admin, vendor):
        response = client_for(admin).patch(
            f"/api/v1/users/admin/vendors/{vendor.pk}/status/", {"vendor_status": "banned"}, format="json",
        )

        assert response.status_code == 400

    def test_unknown_vendor(self, client_for, admin):
        response = client_for(admin).patch(
            f"/api/v1/users/admin/vendors/{new_object_id()}/status/", {"vendor_status": "approved"}, format="json",
        )

        assert response.status_code == 404

    def test_list_filters_by_status(self, client_for, admin, vendor):
        make_vendor("waiting", vendor_status="pending")

        response = client_for(admin).get("/api/v1/users/admin/vendors/all/", {"vendor_status": "pending"})

        assert response.data["count"] == 1
        assert response.data["data"][0]["store_name"] == "Waiting Events"
