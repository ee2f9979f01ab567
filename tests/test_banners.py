"""Tests for ad banner validation, lifecycle and listings."""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from banners import services
from banners.models import AdBanner
from core.ids import new_object_id

pytestmark = pytest.mark.django_db


def _banner(**overrides):
    fields = {
        "name": "Summer promo",
        "image_url": "https://cdn.example.com/summer.jpg",
        "placement": ["Homepage Carousel"],
        "is_vendor_specific": False,
        "custom_url": "https://karyaa.ae/summer",
    }
    fields.update(overrides)
    return AdBanner.objects.create(**fields)


class TestCreateBanner:
    def test_vendor_banner_drops_custom_url(self, vendor):
        banner = services.create_banner({
            "name": "Vendor spotlight",
            "image_url": "https://cdn.example.com/v.jpg",
            "placement": ["Photographers"],
            "is_vendor_specific": True,
            "vendor": vendor.pk,
            "custom_url": "https://ignored.example.com",
        })

        assert banner.vendor_id == vendor.pk
        assert banner.custom_url is None
        assert banner.status == AdBanner.Status.ACTIVE

    def test_custom_url_banner_requires_url(self):
        with pytest.raises(ValidationError) as exc:
            services.create_banner({
                "name": "No target",
                "image_url": "https://cdn.example.com/x.jpg",
                "placement": ["Homepage Carousel"],
                "is_vendor_specific": False,
            })
        assert "Custom URL required." in str(exc.value.detail)

    def test_unknown_vendor_is_not_found(self):
        with pytest.raises(NotFound):
            services.create_banner({
                "name": "Ghost",
                "image_url": "https://cdn.example.com/x.jpg",
                "placement": ["Homepage Carousel"],
                "is_vendor_specific": True,
                "vendor": new_object_id(),
            })

    def test_malformed_vendor_id(self):
        with pytest.raises(ValidationError):
            services.create_banner({
                "name": "Ghost",
                "image_url": "https://cdn.example.com/x.jpg",
                "placement": ["Homepage Carousel"],
                "is_vendor_specific": True,
                "vendor": "123",
            })

    def test_video_banner_requires_video_url(self):
        with pytest.raises(ValidationError) as exc:
            services.create_banner({
                "name": "Reel",
                "media_type": "video",
                "placement": ["Homepage Carousel"],
                "is_vendor_specific": False,
                "custom_url": "https://karyaa.ae",
            })
        assert "Video URL is required for video banners." in str(exc.value.detail)

    def test_window_must_be_ordered(self):
        now = timezone.now()
        with pytest.raises(ValidationError) as exc:
            services.create_banner({
                "name": "Backwards",
                "image_url": "https://cdn.example.com/x.jpg",
                "placement": ["Homepage Carousel"],
                "is_vendor_specific": False,
                "custom_url": "https://karyaa.ae",
                "active_from": now,
                "active_until": now - timedelta(days=1),
            })
        assert "Active From date must be before Active Until date." in str(exc.value.detail)


class TestUpdateBanner:
    def test_switching_to_vendor_clears_custom_url(self, vendor):
        banner = _banner()

        updated = services.update_banner(banner.pk, {"is_vendor_specific": True, "vendor": vendor.pk})

        assert updated.vendor_id == vendor.pk
        assert updated.custom_url is None

    def test_switching_away_from_vendor_clears_vendor(self, vendor):
        banner = _banner(is_vendor_specific=True, vendor=vendor, custom_url=None)

        updated = services.update_banner(banner.pk, {"is_vendor_specific": False, "custom_url": "https://karyaa.ae/x"})

        assert updated.vendor is None
        assert updated.custom_url == "https://karyaa.ae/x"

    def test_switching_away_from_vendor_requires_custom_url(self, vendor):
        banner = _banner(is_vendor_specific=True, vendor=vendor, custom_url=None)

        with pytest.raises(ValidationError) as exc:
            services.update_banner(banner.pk, {"is_vendor_specific": False})
        assert "Custom URL is required for non-vendor-specific banners." in str(exc.value.detail)
        banner.refresh_from_db()
        assert banner.vendor_id == vendor.pk

    def test_update_revalidates(self):
        banner = _banner()

        with pytest.raises(ValidationError) as exc:
            services.update_banner(banner.pk, {"custom_url": "   "})
        assert "Custom URL is required for non-vendor-specific banners." in str(exc.value.detail)

    def test_empty_placement_rejected(self):
        banner = _banner()

        with pytest.raises(ValidationError):
            services.update_banner(banner.pk, {"placement": ["  "]})

    def test_missing_banner(self):
        with pytest.raises(NotFound):
            services.update_banner(new_object_id(), {"name": "x"})


class TestToggleAndDelete:
    def test_toggle_flips_status(self):
        banner = _banner()

        assert services.toggle_banner_status(banner.pk).status == AdBanner.Status.INACTIVE
        assert services.toggle_banner_status(banner.pk).status == AdBanner.Status.ACTIVE

    def test_delete_missing(self):
        with pytest.raises(NotFound):
            services.delete_banner(new_object_id())


class TestActiveListing:
    def test_filters_by_placement_and_status(self):
        _banner(name="home")
        _banner(name="photo", placement=["Photographers", "Venues"])
        _banner(name="off", placement=["Photographers"], status=AdBanner.Status.INACTIVE)

        names = [banner.name for banner in services.list_active_banners(placement="Photographers")]
        assert names == ["photo"]
        assert len(services.list_active_banners(placement="all")) == 2

    def test_window_filter_treats_missing_bounds_as_open(self):
        now = timezone.now()
        _banner(name="open", active_from=None, active_until=None)
        _banner(name="future", active_from=now + timedelta(days=2))
        _banner(name="past", active_until=now - timedelta(days=1))

        names = {banner.name for banner in services.list_active_banners(now=now)}
        assert names == {"open"}
        assert len(services.list_active_banners(within_window=False, now=now)) == 3


class TestBannerEndpoints:
    def test_public_listing_enriches_vendor_banners(self, api_client, vendor):
        _banner(is_vendor_specific=True, vendor=vendor, custom_url=None)

        response = api_client.get("/api/v1/banners/")

        assert response.status_code == 200
        assert response.data["count"] == 1
        item = response.data["data"][0]
        assert item["vendor_slug"] == vendor.slug
        assert item["business_name"] == vendor.store_name

    def test_admin_create_requires_name_and_placement(self, client_for, admin):
        response = client_for(admin).post("/api/v1/admin/banners/", {"name": "x", "placement": []}, format="json")

        assert response.status_code == 400
        assert response.data["message"] == "Name and placement are required."

    def test_admin_create_and_sorted_listing(self, client_for, admin):
        client = client_for(admin)
        for name in ("Bravo", "Alpha"):
            response = client.post("/api/v1/admin/banners/", {
                "name": name,
                "image_url": "https://cdn.example.com/x.jpg",
                "placement": ["Homepage Carousel"],
                "is_vendor_specific": False,
                "custom_url": "https://karyaa.ae",
            }, format="json")
            assert response.status_code == 201

        response = client.get("/api/v1/admin/banners/", {"sort_by": "name", "sort_order": "asc"})

        assert [item["name"] for item in response.data["data"]] == ["Alpha", "Bravo"]

    def test_admin_toggle_endpoint(self, client_for, admin):
        banner = _banner()

        response = client_for(admin).put(f"/api/v1/admin/banners/{banner.pk}/toggle-status/")

        assert response.status_code == 200
        assert response.data["message"] == "Ad Banner status set to Inactive."

    def test_admin_placement_filter(self, client_for, admin):
        _banner(name="home")
        _banner(name="venue", placement=["Venues"])

        response = client_for(admin).get("/api/v1/admin/banners/", {"placement": "Venues,Caterers"})

        assert [item["name"] for item in response.data["data"]] == ["venue"]
