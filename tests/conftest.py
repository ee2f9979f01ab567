import pytest
from rest_framework.test import APIClient

from users.models import CustomUser


def make_user(username, role='CUSTOMER', **extra):
    return CustomUser.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password="s3cret-pass!",
        role=role,
        **extra,
    )


def make_vendor(username, **extra):
    extra.setdefault('store_name', f"{username.title()} Events")
    extra.setdefault('vendor_status', 'approved')
    return make_user(username, role='VENDOR', **extra)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def customer(db):
    return make_user("customer")


@pytest.fixture
def other_customer(db):
    return make_user("other-customer")


@pytest.fixture
def vendor(db):
    return make_vendor("vendor")


@pytest.fixture
def other_vendor(db):
    return make_vendor("rival")


@pytest.fixture
def admin(db):
    return make_user("admin", role='ADMIN')


@pytest.fixture
def client_for(api_client):
    def _login(user):
        api_client.force_authenticate(user=user)
        return api_client
    return _login
