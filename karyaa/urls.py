from django.contrib import admin
from django.urls import path, include
from django.conf import settings

from banners.urls import public_urlpatterns as banner_urls, admin_urlpatterns as admin_banner_urls
from content.urls import public_urlpatterns as content_urls, admin_urlpatterns as admin_content_urls

api_urlpatterns = [
    # Authentication (registration, JWT login, password reset)
    path('auth/', include('djoser.urls')),
    path('auth/', include('djoser.urls.jwt')),

    path('users/', include('users.urls')),
    path('reviews/', include('reviews.urls')),
    path('banners/', include(banner_urls)),
    path('admin/banners/', include(admin_banner_urls)),
    path('content/', include(content_urls)),
    path('admin/content/', include(admin_content_urls)),
    path('contact/', include('support.urls')),
]

if settings.ENABLE_CRON_TEST_ROUTES:
    api_urlpatterns += [path('test/cron/', include('maintenance.urls'))]

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include(api_urlpatterns)),
]
