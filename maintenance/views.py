# maintenance/views.py
# Manual triggers for the daily sweeps. Only mounted when ENABLE_CRON_TEST_ROUTES is on.

from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from . import jobs


class ExpireVendorsView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        result = jobs.process_vendor_subscriptions()
        return Response({"message": "Vendor expiration job executed", **result})


class DeactivateBannersView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        result = jobs.deactivate_banners()
        return Response({"message": "Banner deactivation job executed", **result})


class RunAllJobsView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({"message": "All cron jobs executed", **jobs.run_all()})
