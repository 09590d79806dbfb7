# 📄 File: tests/conftest.py
# 🧭 Purpose (Layman Explanation):
# Shared test setup: a ready-to-use SnapThePlant app with fake outside services, a clock
# the tests control and an admin account already created.
# 🧪 Purpose (Technical Summary):
# Pytest fixtures wiring the service container over the memory storage backend and the
# fakes from tests.support. The TestClient fixture drives the real lifespan (startup
# seeding, shutdown).
# 🔗 Dependencies:
# pytest, fastapi.testclient, snaptheplant
# 🔄 Connected Modules / Calls From:
# every test module

import pytest
from fastapi.testclient import TestClient

from snaptheplant.main import create_application
from snaptheplant.shared.config.settings import Settings
from snaptheplant.shared.core.container import build_container
from snaptheplant.shared.infrastructure.storage.memory import MemoryStorageBackend
from tests.support import (
    ADMIN_PASSWORD,
    MAX_TEST_IMAGE_SIZE,
    FakeEmailService,
    FakeIdentifier,
    FakePaymentGateway,
    FrozenClock,
)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def identifier() -> FakeIdentifier:
    return FakeIdentifier()


@pytest.fixture
def gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def email_service() -> FakeEmailService:
    return FakeEmailService()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        STORAGE_BACKEND="memory",
        SESSION_BACKEND="memory",
        TRIAL_SWEEP_ENABLED=False,
        ANALYTICS_LOG_DIR=str(tmp_path / "analytics"),
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        STRIPE_WEBHOOK_SECRET="whsec_test",
        STRIPE_PRICE_ID="price_test",
        MAX_IMAGE_SIZE=MAX_TEST_IMAGE_SIZE,
        LOG_FORMAT="text",
    )


@pytest.fixture
def storage() -> MemoryStorageBackend:
    return MemoryStorageBackend()


@pytest.fixture
def container(settings, storage, clock, identifier, gateway, email_service):
    return build_container(
        settings,
        storage=storage,
        identifier=identifier,
        payment_gateway=gateway,
        email_service=email_service,
        clock=clock,
    )


@pytest.fixture
def app(settings, container):
    return create_application(settings=settings, container=container)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
