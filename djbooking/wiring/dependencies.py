from functools import lru_cache
import logging
from zoneinfo import ZoneInfo

from pymongo import MongoClient

from djbooking.core.config import settings
from djbooking.application.ports.booking_repository import BookingRepositoryPort
from djbooking.application.ports.notification_gateway import NotificationGatewayPort
from djbooking.application.use_cases.booking_service import BookingService
from djbooking.application.use_cases.booking_wizard import BookingWizard
from djbooking.application.use_cases.draft_autosave import DraftAutoSaver
from djbooking.infrastructure.analytics.logging_analytics import LoggingAnalytics
from djbooking.infrastructure.email.email_gateway import EmailNotificationGateway
from djbooking.infrastructure.email.logging_gateway import LoggingNotificationGateway
from djbooking.infrastructure.email.sendgrid_client import SendGridClient
from djbooking.infrastructure.http.booking_api_client import BookingApiClient
from djbooking.infrastructure.store.json_draft_store import JsonDraftStore
from djbooking.infrastructure.store.memory_booking_repository import MemoryBookingRepository
from djbooking.infrastructure.store.mongo_booking_repository import MongoBookingRepository


_booking_repository: BookingRepositoryPort | None = None


def get_booking_repository() -> BookingRepositoryPort:
    global _booking_repository
    if _booking_repository is None:
        provider = settings.STORE_PROVIDER.lower()
        if provider == "mongo":
            if not settings.MONGODB_URI:
                raise ValueError("MONGODB_URI is required when STORE_PROVIDER=mongo.")
            client = MongoClient(settings.MONGODB_URI)
            _booking_repository = MongoBookingRepository(client[settings.MONGODB_DB])
        else:
            _booking_repository = MemoryBookingRepository()
        logging.getLogger(__name__).info("Booking store provider=%s", provider)
    return _booking_repository


@lru_cache
def get_notification_gateway() -> NotificationGatewayPort:
    logger = logging.getLogger(__name__)
    if settings.MOCK_EMAIL or not (settings.SENDGRID_API_KEY and settings.SENDGRID_API_KEY.strip()):
        if settings.ENV.lower() not in {"dev", "local", "test"}:
            logger.warning("SENDGRID_API_KEY missing; emails will only be logged")
        return LoggingNotificationGateway(business_name=settings.BUSINESS_NAME)

    client = SendGridClient(api_key=settings.SENDGRID_API_KEY, base_url=settings.SENDGRID_BASE_URL)
    return EmailNotificationGateway(
        client=client,
        sender=settings.BUSINESS_EMAIL,
        admin_email=settings.ADMIN_EMAIL,
        business_name=settings.BUSINESS_NAME,
    )


def get_booking_service() -> BookingService:
    return BookingService(
        repository=get_booking_repository(),
        notifications=get_notification_gateway(),
        timezone=ZoneInfo(settings.BUSINESS_TIMEZONE),
    )


def get_booking_wizard(base_url: str | None = None) -> BookingWizard:
    autosaver = DraftAutoSaver(
        store=JsonDraftStore(data_dir=settings.DRAFT_DIR),
        delay_seconds=settings.DRAFT_AUTOSAVE_SECONDS,
    )
    return BookingWizard(
        api=BookingApiClient(base_url or settings.BOOKING_API_BASE_URL),
        autosaver=autosaver,
        analytics=LoggingAnalytics(),
    )
