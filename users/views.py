import logging
from dateutil.relativedelta import relativedelta
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework import generics, views, status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from core.ids import validate_object_id
from .permissions import IsAdmin
from .serializers import AdminVendorSerializer, VendorStatusSerializer

User = get_user_model()
logger = logging.getLogger(__name__)


def subscription_end_date(start_date, bundle):
    """Adds the bundle's duration to start_date, or None when no bundle is selected."""
    if bundle is None:
        return None
    delta = relativedelta(**{bundle.duration_unit: bundle.duration_value})
    return start_date + delta


class AdminVendorStatusView(views.APIView):
    """
    Changes a vendor's status. Approving a vendor that was not approved
    starts a new subscription period from now.
    """
    permission_classes = [IsAdmin]

    def patch(self, request, pk, *args, **kwargs):
        pk = validate_object_id(pk, 'Vendor')

        serializer = VendorStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        new_status = serializer.validated_data['vendor_status']

        vendor = User.objects.select_related('selected_bundle').filter(pk=pk, role='VENDOR').first()
        if not vendor:
            raise NotFound("Vendor not found.")

        update_fields = ['vendor_status']
        if new_status == 'approved' and vendor.vendor_status != 'approved':
            start_date = timezone.now()
            vendor.subscription_start_date = start_date
            update_fields.append('subscription_start_date')

            end_date = subscription_end_date(start_date, vendor.selected_bundle)
            if end_date:
                vendor.subscription_end_date = end_date
                update_fields.append('subscription_end_date')

        vendor.vendor_status = new_status
        vendor.save(update_fields=update_fields)
        logger.info(f"Vendor {vendor.pk} status set to {new_status} by {request.user.pk}")

        return Response({
            "success": True,
            "message": f"Vendor status updated to {new_status}",
            "data": AdminVendorSerializer(vendor).data,
        }, status=status.HTTP_200_OK)


class AdminAllVendorsView(generics.ListAPIView):
    """
    Lists ALL vendors (any status) with their rating stats.
    """
    permission_classes = [IsAdmin]
    serializer_class = AdminVendorSerializer

    def get_queryset(self):
        queryset = User.objects.filter(role='VENDOR').select_related('selected_bundle').order_by('-date_joined')
        vendor_status = self.request.query_params.get('vendor_status')
        if vendor_status:
            queryset = queryset.filter(vendor_status=vendor_status)
        return queryset

    def list(self, request, *args, **kwargs):
        vendors = self.get_serializer(self.get_queryset(), many=True).data
        return Response({"success": True, "count": len(vendors), "data": vendors})
