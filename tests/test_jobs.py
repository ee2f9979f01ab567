"""Tests for the daily maintenance sweeps."""

from datetime import timedelta
from unittest import mock

import pytest
from django.core import mail
from django.core.management import call_command
from django.core.management.base import CommandError
from django.utils import timezone
from rest_framework.test import APIRequestFactory

from banners.models import AdBanner
from maintenance import jobs
from maintenance.views import RunAllJobsView
from tests.conftest import make_vendor
from users.models import Bundle

pytestmark = pytest.mark.django_db


def _start_of_today():
    return timezone.localtime(timezone.now()).replace(hour=0, minute=0, second=0, microsecond=0)


def _banner(**overrides):
    fields = {
        "name": "Promo",
        "image_url": "https://cdn.example.com/p.jpg",
        "is_vendor_specific": False,
        "custom_url": "https://karyaa.ae",
    }
    fields.update(overrides)
    return AdBanner.objects.create(**fields)


class TestDeactivateBanners:
    def test_expired_banners_become_inactive(self):
        now = timezone.now()
        expired = _banner(active_until=now - timedelta(days=1))
        open_ended = _banner(active_until=None)
        running = _banner(active_until=now + timedelta(days=3))

        result = jobs.deactivate_banners(now)

        assert result["success"] is True
        assert result["deactivated_count"] == 1
        expired.refresh_from_db()
        open_ended.refresh_from_db()
        running.refresh_from_db()
        assert expired.status == AdBanner.Status.INACTIVE
        assert open_ended.status == AdBanner.Status.ACTIVE
        assert running.status == AdBanner.Status.ACTIVE

    def test_never_reactivates(self):
        now = timezone.now()
        banner = _banner(status=AdBanner.Status.INACTIVE, active_until=now + timedelta(days=3))

        assert jobs.deactivate_banners(now)["deactivated_count"] == 0
        banner.refresh_from_db()
        assert banner.status == AdBanner.Status.INACTIVE

    def test_database_failure_reports_failed_run(self):
        with mock.patch.object(AdBanner.objects, "filter", side_effect=RuntimeError("db down")):
            result = jobs.deactivate_banners()

        assert result["success"] is False
        assert result["error"] == "db down"


class TestSubscriptionWarnings:
    def test_two_day_vendor_gets_vendor_and_admin_warning(self, settings):
        bundle = Bundle.objects.create(name="Gold", price="999.00")
        vendor = make_vendor("twoday", selected_bundle=bundle,
                             subscription_end_date=_start_of_today() + timedelta(days=2, hours=10))

        result = jobs.process_vendor_subscriptions()

        assert result["warnings_sent"] == 1
        assert result["admin_warnings_sent"] == 1
        recipients = sorted(message.to[0] for message in mail.outbox)
        assert recipients == sorted([vendor.email, settings.ADMIN_ALERT_EMAIL])
        assert "Gold" in mail.outbox[0].alternatives[0][0]

    def test_seven_day_vendor_gets_only_vendor_warning(self):
        vendor = make_vendor("sevenday", subscription_end_date=_start_of_today() + timedelta(days=7, hours=1))

        result = jobs.process_vendor_subscriptions()

        assert result["warnings_sent"] == 1
        assert result["admin_warnings_sent"] == 0
        assert [message.to for message in mail.outbox] == [[vendor.email]]

    def test_other_days_and_statuses_are_ignored(self):
        make_vendor("fiveday", subscription_end_date=_start_of_today() + timedelta(days=5))
        make_vendor("pending", vendor_status="pending",
                    subscription_end_date=_start_of_today() + timedelta(days=7, hours=1))

        result = jobs.process_vendor_subscriptions()

        assert result["warnings_sent"] == 0
        assert mail.outbox == []

    def test_rerun_sends_warning_again(self):
        make_vendor("again", subscription_end_date=_start_of_today() + timedelta(days=30, hours=2))

        jobs.process_vendor_subscriptions()
        jobs.process_vendor_subscriptions()

        assert len(mail.outbox) == 2


class TestExpireVendors:
    def test_expires_once_and_notifies_once(self):
        vendor = make_vendor("late", subscription_end_date=timezone.now() - timedelta(days=1))

        first = jobs.process_vendor_subscriptions()
        second = jobs.process_vendor_subscriptions()

        vendor.refresh_from_db()
        assert vendor.vendor_status == "expired"
        assert first["expired_count"] == 1
        assert first["emails_sent"] == 1
        assert second["expired_count"] == 0
        assert len(mail.outbox) == 1

    def test_email_failure_is_isolated(self):
        first = make_vendor("first", subscription_end_date=timezone.now() - timedelta(days=1))
        second = make_vendor("second", subscription_end_date=timezone.now() - timedelta(days=2))

        with mock.patch("maintenance.jobs.send_templated_email", side_effect=OSError("smtp down")):
            result = jobs.process_vendor_subscriptions()

        assert result["success"] is True
        assert result["expired_count"] == 2
        assert len(result["errors"]) == 2
        first.refresh_from_db()
        second.refresh_from_db()
        assert first.vendor_status == second.vendor_status == "expired"

    def test_vendor_without_end_date_is_untouched(self):
        vendor = make_vendor("forever")

        jobs.process_vendor_subscriptions()

        vendor.refresh_from_db()
        assert vendor.vendor_status == "approved"


class TestRunCronJobsCommand:
    def test_runs_both_sweeps(self, capsys):
        _banner(active_until=timezone.now() - timedelta(hours=1))

        call_command("run_cron_jobs")

        out = capsys.readouterr().out
        assert "Banners: 1 deactivated" in out
        assert "Cron jobs completed" in out

    def test_failed_sweep_raises(self):
        failed = {"success": False, "error": "db down", "timestamp": timezone.now()}
        with mock.patch("maintenance.jobs.deactivate_banners", return_value=failed):
            with pytest.raises(CommandError):
                call_command("run_cron_jobs", "--job", "banners")


class TestCronTestRoutes:
    def test_run_all_view(self):
        request = APIRequestFactory().get("/api/v1/test/cron/run-all/")

        response = RunAllJobsView.as_view()(request)

        assert response.status_code == 200
        assert response.data["message"] == "All cron jobs executed"
        assert response.data["banners"]["success"] is True
        assert response.data["vendors"]["success"] is True
