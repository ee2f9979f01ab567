# support/views.py
import logging

from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.ids import validate_object_id
from core.mail import send_templated_email
from users.permissions import IsAdmin
from .models import ContactSubmission
from .serializers import ContactSubmissionSerializer, ContactFormSerializer

logger = logging.getLogger(__name__)


# --- Public API for the contact form ---
class ContactSubmitView(APIView):
    permission_classes = [permissions.AllowAny]  # Anyone can submit

    def post(self, request):
        serializer = ContactFormSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        # 1️⃣ Keep a copy even if the mail backend is down
        submission = ContactSubmission.objects.create(
            fullname=data['fullname'].strip(),
            email=data['email'],
            phone=data.get('phone') or None,
            subject=data.get('subject') or None,
            message=data['message'].strip(),
        )

        # 2️⃣ Forward to the support inbox
        try:
            send_templated_email('contact-form', {
                'name': submission.fullname,
                'email': submission.email,
                'phone': submission.phone,
                'subject': submission.subject,
                'message': submission.message,
            })
        except Exception as e:
            logger.error(f"Error sending contact form email for submission {submission.pk}: {e}", exc_info=True)
            return Response({
                "success": False,
                "message": "Failed to send your message. Please try again later.",
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        submission.email_sent = True
        submission.save(update_fields=['email_sent'])
        logger.info(f"Contact form email sent from {submission.email}")

        return Response({
            "success": True,
            "message": "Thank you for contacting us! We'll get back to you soon.",
        })


# --- Admin API to list all submissions ---
class ContactSubmissionListAPIView(generics.ListAPIView):
    queryset = ContactSubmission.objects.all().order_by('-created_at')
    serializer_class = ContactSubmissionSerializer
    permission_classes = [IsAdmin]

    def get_queryset(self):
        queryset = super().get_queryset()
        resolved = self.request.query_params.get('is_resolved')
        if resolved in ('true', 'false'):
            queryset = queryset.filter(is_resolved=resolved == 'true')
        return queryset

    def list(self, request, *args, **kwargs):
        data = self.get_serializer(self.get_queryset(), many=True).data
        return Response({"success": True, "count": len(data), "data": data})


# --- Admin API to read, resolve or delete one submission ---
class ContactSubmissionDetailAPIView(generics.RetrieveUpdateDestroyAPIView):
    queryset = ContactSubmission.objects.all()
    serializer_class = ContactSubmissionSerializer
    permission_classes = [IsAdmin]

    def get_object(self):
        self.kwargs['pk'] = validate_object_id(self.kwargs['pk'], 'Submission')
        return super().get_object()
