# support/urls.py
from django.urls import path
from .views import ContactSubmitView, ContactSubmissionListAPIView, ContactSubmissionDetailAPIView

urlpatterns = [
    # Endpoint for visitors to submit the contact form
    path('new/', ContactSubmitView.as_view(), name='contact-submit'),

    # Endpoint for admin to view all submissions
    path('admin/list/', ContactSubmissionListAPIView.as_view(), name='admin-contact-list'),

    # Endpoint for admin to read/update/delete a specific submission
    path('admin/<str:pk>/', ContactSubmissionDetailAPIView.as_view(), name='admin-contact-detail'),
]
