from djoser import email
from django.conf import settings


class CustomPasswordResetEmail(email.PasswordResetEmail):
    """Password reset links point at the frontend, not at the API host."""

    def get_context_data(self):
        context = super().get_context_data()

        context['domain'] = settings.FRONTEND_DOMAIN
        context['protocol'] = settings.PROTOCOL
        context['site_name'] = 'Karyaa'

        return context
