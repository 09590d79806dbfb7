# 📄 File: snaptheplant/shared/core/container.py
# 🧭 Purpose (Layman Explanation):
# Builds every part of SnapThePlant (database, email, payments, plant recognition and the
# services that use them) once at startup, and shuts them all down cleanly at the end.
# 🧪 Purpose (Technical Summary):
# Composition root. build_container(settings) selects the storage backend, session store
# and collaborators from configuration (each overridable for tests), wires the domain
# services, and owns the startup/shutdown lifecycle including account seeding and the
# in-process trial sweep scheduler.
# 🔗 Dependencies:
# All module services and infrastructure adapters, snaptheplant.shared.config
# 🔄 Connected Modules / Calls From:
# snaptheplant.main (lifespan), snaptheplant.shared.core.dependencies,
# snaptheplant.background_jobs.tasks.trial_sweep

from dataclasses import dataclass
from typing import Any, Dict, Optional

from snaptheplant.modules.analytics.domain.services.analytics_recorder import AnalyticsRecorder
from snaptheplant.modules.community_social.domain.services.community_service import CommunityService
from snaptheplant.modules.notification_communication.domain.models.email_message import EmailService
from snaptheplant.modules.notification_communication.domain.services.notification_service import (
    NotificationService,
)
from snaptheplant.modules.notification_communication.infrastructure.external.sendgrid_email_service import (
    SendGridEmailService,
)
from snaptheplant.modules.payment_subscription.domain.models.payment import PaymentGateway
from snaptheplant.modules.payment_subscription.domain.services.payment_service import PaymentService
from snaptheplant.modules.payment_subscription.domain.services.subscription_service import (
    SubscriptionService,
)
from snaptheplant.modules.payment_subscription.domain.services.trial_sweep import (
    TrialSweeper,
    TrialSweepScheduler,
)
from snaptheplant.modules.payment_subscription.infrastructure.external.stripe_gateway import (
    StripePaymentGateway,
)
from snaptheplant.modules.plant_identification.domain.models.identification import PlantIdentifier
from snaptheplant.modules.plant_identification.domain.services.identification_service import (
    IdentificationService,
)
from snaptheplant.modules.plant_identification.infrastructure.external.plant_id_client import (
    PlantIdClient,
)
from snaptheplant.modules.plant_management.domain.services.care_scheduler import CareScheduler
from snaptheplant.modules.plant_management.domain.services.plant_service import PlantService
from snaptheplant.modules.user_management.domain.models.user import UserRole
from snaptheplant.modules.user_management.domain.services.auth_service import AuthService
from snaptheplant.modules.user_management.domain.services.user_service import UserService
from snaptheplant.shared.config.redis import RedisConfig
from snaptheplant.shared.config.settings import Settings
from snaptheplant.shared.infrastructure.sessions.session_store import (
    MemorySessionStore,
    RedisSessionStore,
    SessionStore,
)
from snaptheplant.shared.infrastructure.storage.base import StorageBackend
from snaptheplant.shared.infrastructure.storage.memory import MemoryStorageBackend
from snaptheplant.shared.infrastructure.storage.sql import SqlStorageBackend
from snaptheplant.shared.utils.helpers import Clock, utc_now
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_USERNAME = "demo"
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "password"


@dataclass
class ServiceContainer:
    """Every long-lived component of a running application."""
    settings: Settings
    clock: Clock
    storage: StorageBackend
    session_store: SessionStore
    email_service: EmailService
    identifier: Optional[PlantIdentifier]
    payment_gateway: Optional[PaymentGateway]
    auth: AuthService
    users: UserService
    scheduler: CareScheduler
    plants: PlantService
    community: CommunityService
    notifications: NotificationService
    analytics: AnalyticsRecorder
    subscriptions: SubscriptionService
    payments: PaymentService
    identification: IdentificationService
    trial_sweeper: TrialSweeper
    trial_sweep_scheduler: Optional[TrialSweepScheduler] = None
    redis_config: Optional[RedisConfig] = None

    async def startup(self) -> None:
        """Open connections, seed accounts and start the trial sweep."""
        await self.storage.initialize()
        logger.info(f"✅ Storage backend '{self.storage.name}' initialized")

        await self._seed_accounts()

        if self.trial_sweep_scheduler is not None:
            self.trial_sweep_scheduler.start()

    async def shutdown(self) -> None:
        """Stop background work and release every connection; safe to call twice."""
        if self.trial_sweep_scheduler is not None:
            await self.trial_sweep_scheduler.stop()

        if self.identifier is not None:
            await self.identifier.close()
        await self.email_service.close()
        await self.session_store.close()
        if self.redis_config is not None:
            await self.redis_config.close_connections()

        await self.storage.close()
        logger.info("✅ Storage connections closed")

    async def _seed_accounts(self) -> None:
        if self.settings.ADMIN_PASSWORD:
            await self.auth.ensure_user(
                username=self.settings.ADMIN_USERNAME,
                email=self.settings.ADMIN_EMAIL,
                password=self.settings.ADMIN_PASSWORD,
                role=UserRole.ADMIN,
                first_name="Admin",
            )
        if self.settings.SEED_DEMO_USER:
            await self.auth.ensure_user(
                username=DEMO_USERNAME,
                email=DEMO_EMAIL,
                password=DEMO_PASSWORD,
                first_name="Demo",
                last_name="User",
            )

    async def health_check(self) -> Dict[str, Any]:
        checks: Dict[str, Any] = {"storage": await self.storage.health_check()}
        if self.redis_config is not None:
            checks["redis"] = await self.redis_config.health_check()
        checks["collaborators"] = {
            "plant_identification": self.identification.is_configured,
            "payments": self.payments.is_configured,
            "email": getattr(self.email_service, "is_configured", True),
        }
        if self.trial_sweep_scheduler is not None:
            checks["trial_sweep"] = {
                "running": self.trial_sweep_scheduler.is_running,
                "ticks": self.trial_sweep_scheduler.ticks,
            }
        if isinstance(self.identifier, PlantIdClient):
            checks["plant_id_stats"] = self.identifier.get_stats()
        return checks


# =============================================================================
# FACTORIES
# =============================================================================

def build_storage(settings: Settings) -> StorageBackend:
    if settings.use_sql_storage:
        return SqlStorageBackend(settings)
    return MemoryStorageBackend()


def build_identifier(settings: Settings) -> Optional[PlantIdentifier]:
    if not settings.PLANT_ID_API_KEY:
        logger.warning("PLANT_ID_API_KEY is not set. Plant identification is disabled.")
        return None
    return PlantIdClient(
        api_key=settings.PLANT_ID_API_KEY,
        api_url=settings.PLANT_ID_API_URL,
        timeout=settings.PLANT_ID_TIMEOUT,
    )


def build_payment_gateway(settings: Settings) -> Optional[PaymentGateway]:
    if not settings.STRIPE_SECRET_KEY:
        logger.warning("STRIPE_SECRET_KEY is not set. Payment endpoints will answer 503.")
        return None
    return StripePaymentGateway(settings.STRIPE_SECRET_KEY)


def build_container(
    settings: Settings,
    *,
    storage: Optional[StorageBackend] = None,
    identifier: Optional[PlantIdentifier] = None,
    payment_gateway: Optional[PaymentGateway] = None,
    email_service: Optional[EmailService] = None,
    session_store: Optional[SessionStore] = None,
    clock: Clock = utc_now,
) -> ServiceContainer:
    """
    Wire the application from configuration.

    Keyword arguments replace the component that would otherwise be built
    from ``settings``; tests use them to inject fakes.

    Args:
        settings: Application settings
        storage: Storage backend override
        identifier: Plant recognizer override
        payment_gateway: Payment processor override
        email_service: Email delivery override
        session_store: Session store override
        clock: Time source shared by every service

    Returns:
        ServiceContainer: Wired, not yet started
    """
    redis_config = None
    if session_store is None:
        if settings.SESSION_BACKEND == "redis":
            redis_config = RedisConfig(settings)
            session_store = RedisSessionStore(
                redis_config.create_redis_client(),
                settings.SESSION_TTL_SECONDS,
            )
        else:
            session_store = MemorySessionStore(settings.SESSION_TTL_SECONDS, clock=clock)

    storage = storage or build_storage(settings)
    if identifier is None:
        identifier = build_identifier(settings)
    if payment_gateway is None:
        payment_gateway = build_payment_gateway(settings)
    if email_service is None:
        email_service = SendGridEmailService(settings.SENDGRID_API_KEY, settings.SENDGRID_FROM_EMAIL)

    notifications = NotificationService(
        email_service,
        subscribe_url=f"{settings.PUBLIC_BASE_URL.rstrip('/')}/subscribe",
    )
    analytics = AnalyticsRecorder(settings.ANALYTICS_LOG_DIR, clock=clock)
    scheduler = CareScheduler(storage, clock=clock)
    subscriptions = SubscriptionService(
        storage,
        notifications,
        analytics,
        trial_duration_days=settings.TRIAL_DURATION_DAYS,
        clock=clock,
    )
    trial_sweeper = TrialSweeper(storage, notifications, clock=clock)

    sweep_scheduler = None
    if settings.TRIAL_SWEEP_ENABLED:
        sweep_scheduler = TrialSweepScheduler(trial_sweeper, settings.TRIAL_SWEEP_INTERVAL_SECONDS)

    return ServiceContainer(
        settings=settings,
        clock=clock,
        storage=storage,
        session_store=session_store,
        email_service=email_service,
        identifier=identifier,
        payment_gateway=payment_gateway,
        auth=AuthService(storage, session_store, clock=clock),
        users=UserService(storage),
        scheduler=scheduler,
        plants=PlantService(storage, scheduler),
        community=CommunityService(storage, clock=clock),
        notifications=notifications,
        analytics=analytics,
        subscriptions=subscriptions,
        payments=PaymentService(
            storage,
            payment_gateway,
            subscriptions,
            notifications,
            lifetime_price_cents=settings.LIFETIME_PRICE_CENTS,
            currency=settings.PAYMENT_CURRENCY,
            price_id=settings.STRIPE_PRICE_ID,
            webhook_secret=settings.STRIPE_WEBHOOK_SECRET,
        ),
        identification=IdentificationService(storage, identifier, settings.MAX_IMAGE_SIZE),
        trial_sweeper=trial_sweeper,
        trial_sweep_scheduler=sweep_scheduler,
        redis_config=redis_config,
    )
