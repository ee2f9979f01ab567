# banners/views.py

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import IsAdmin
from . import services
from .serializers import AdBannerSerializer, BannerWriteSerializer, PublicBannerSerializer


def _flag(value, default=True):
    if value is None:
        return default
    return str(value).lower() not in ('false', '0', 'no')


# ------------------
# PUBLIC
# ------------------
class ActiveBannersView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        banners = services.list_active_banners(
            placement=request.query_params.get('placement'),
            within_window=_flag(request.query_params.get('within_window')),
        )
        data = PublicBannerSerializer(banners, many=True).data
        return Response({"success": True, "count": len(data), "data": data})


# ------------------
# ADMIN
# ------------------
class AdminBannerListView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        banners = services.list_all_banners(request.query_params)
        return Response({
            "success": True,
            "message": "Ad Banners fetched successfully.",
            "data": AdBannerSerializer(banners, many=True).data,
        })

    def post(self, request):
        serializer = BannerWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        banner = services.create_banner(serializer.validated_data)
        return Response({
            "success": True,
            "message": "Ad Banner created!",
            "data": AdBannerSerializer(banner).data,
        }, status=status.HTTP_201_CREATED)


class AdminBannerDetailView(APIView):
    permission_classes = [IsAdmin]

    def put(self, request, pk):
        serializer = BannerWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        banner = services.update_banner(pk, serializer.validated_data)
        return Response({
            "success": True,
            "message": "Ad Banner updated successfully!",
            "data": AdBannerSerializer(banner).data,
        })

    patch = put

    def delete(self, request, pk):
        services.delete_banner(pk)
        return Response({"success": True, "message": "Ad Banner deleted successfully!", "data": None})


class AdminBannerToggleView(APIView):
    permission_classes = [IsAdmin]

    def put(self, request, pk):
        banner = services.toggle_banner_status(pk)
        return Response({
            "success": True,
            "message": f"Ad Banner status set to {banner.status}.",
            "data": AdBannerSerializer(banner).data,
        })
