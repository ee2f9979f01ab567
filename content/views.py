# content/views.py

import logging

from django.db import transaction
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import IsAdmin
from .models import Content, normalize_key
from .serializers import (
    ContentSerializer,
    BulkKeysSerializer,
    ContentUpsertSerializer,
    BulkSectionsSerializer,
)

logger = logging.getLogger(__name__)

LANDING_PAGE_SECTIONS = [
    'hero-section',
    'why-choose-us',
    'how-it-works',
    'testimonials',
    'cta-sections',
]


def get_content_or_404(key):
    content = Content.objects.select_related('updated_by').filter(key=normalize_key(key)).first()
    if not content:
        raise NotFound(f"Content not found for key: {key}")
    return content


# ------------------
# PUBLIC
# ------------------
class ContentByKeyView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, key):
        return Response({"success": True, "data": ContentSerializer(get_content_or_404(key)).data})


class BulkContentView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = BulkKeysSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        contents = Content.objects.filter(key__in=serializer.validated_data['keys']).select_related('updated_by')
        return Response({"success": True, "data": ContentSerializer(contents, many=True).data})


# ------------------
# ADMIN
# ------------------
class AdminContentListView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        contents = Content.objects.select_related('updated_by').order_by('type', 'key')
        content_type = request.query_params.get('type')
        if content_type:
            contents = contents.filter(type=content_type)

        data = ContentSerializer(contents, many=True).data
        return Response({"success": True, "count": len(data), "data": data})


class LandingPageStructureView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        contents = Content.objects.filter(key__in=LANDING_PAGE_SECTIONS, type='section').order_by('key')
        structure = {content.key: content.content for content in contents}
        return Response({"success": True, "data": structure})


class AdminContentDetailView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request, key):
        return Response({"success": True, "data": ContentSerializer(get_content_or_404(key)).data})

    def put(self, request, key):
        serializer = ContentUpsertSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        content, created = Content.objects.update_or_create(
            key=normalize_key(key),
            defaults={**serializer.validated_data, 'updated_by': request.user},
        )
        logger.info(f"Content '{content.key}' {'created' if created else 'updated'} by {request.user.pk}")
        return Response({
            "success": True,
            "message": "Content updated successfully",
            "data": ContentSerializer(content).data,
        })

    def delete(self, request, key):
        content = get_content_or_404(key)
        data = ContentSerializer(content).data
        content.delete()
        return Response({"success": True, "message": "Content deleted successfully", "data": data})


class BulkUpdateContentView(APIView):
    """Save All from the landing page editor."""
    permission_classes = [IsAdmin]

    def put(self, request):
        serializer = BulkSectionsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        modified = upserted = 0
        with transaction.atomic():
            for section in serializer.validated_data['sections']:
                _, created = Content.objects.update_or_create(
                    key=section['key'],
                    defaults={'type': section['type'], 'content': section['content'], 'updated_by': request.user},
                )
                if created:
                    upserted += 1
                else:
                    modified += 1

        return Response({
            "success": True,
            "message": "All sections updated successfully",
            "data": {"modified": modified, "upserted": upserted},
        })
