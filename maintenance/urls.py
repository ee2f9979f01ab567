from django.urls import path

from .views import ExpireVendorsView, DeactivateBannersView, RunAllJobsView

urlpatterns = [
    path('expire-vendors/', ExpireVendorsView.as_view(), name='cron-expire-vendors'),
    path('deactivate-banners/', DeactivateBannersView.as_view(), name='cron-deactivate-banners'),
    path('run-all/', RunAllJobsView.as_view(), name='cron-run-all'),
]
