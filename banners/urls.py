from django.urls import path

from .views import ActiveBannersView, AdminBannerListView, AdminBannerDetailView, AdminBannerToggleView

public_urlpatterns = [
    path('', ActiveBannersView.as_view(), name='active-banners'),
]

admin_urlpatterns = [
    path('', AdminBannerListView.as_view(), name='admin-banners'),
    path('<str:pk>/toggle-status/', AdminBannerToggleView.as_view(), name='admin-banner-toggle'),
    path('<str:pk>/', AdminBannerDetailView.as_view(), name='admin-banner-detail'),
]
