from django.urls import path
from users.views import (
    AdminVendorStatusView,
    AdminAllVendorsView,
)

urlpatterns = [
    path('admin/vendors/all/', AdminAllVendorsView.as_view(), name='admin-all-vendors-list'),
    path('admin/vendors/<str:pk>/status/', AdminVendorStatusView.as_view(), name='admin-vendor-status'),
]
