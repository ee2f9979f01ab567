from django.urls import path

from .views import (
    ContentByKeyView,
    BulkContentView,
    AdminContentListView,
    LandingPageStructureView,
    AdminContentDetailView,
    BulkUpdateContentView,
)

public_urlpatterns = [
    path('bulk/', BulkContentView.as_view(), name='content-bulk'),
    path('<str:key>/', ContentByKeyView.as_view(), name='content-by-key'),
]

admin_urlpatterns = [
    path('', AdminContentListView.as_view(), name='admin-content'),
    path('landing-page/structure/', LandingPageStructureView.as_view(), name='admin-landing-page-structure'),
    path('bulk-update/', BulkUpdateContentView.as_view(), name='admin-content-bulk-update'),
    path('<str:key>/', AdminContentDetailView.as_view(), name='admin-content-detail'),
]
