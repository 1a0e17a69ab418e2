"""Test configuration."""
import os
from collections.abc import AsyncIterator, Callable, Iterator
from datetime import timedelta
from pathlib import Path
from uuid import uuid4

from alembic import command
from alembic.config import Config
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

# --- Default environment, set before the app reads its settings
os.environ.setdefault("DATABASE_URL", "sqlite:///./bookings_test.db")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("SECRET_KEY", "test-secret")

from app.main import app  # noqa: E402
from app.db import get_db  # noqa: E402
from app.models import ApiKey, Booking, BookingStatus, Payment, PaymentOption, User  # noqa: E402
from app.utils.apikey import hash_key  # noqa: E402
from app.utils.time import utcnow  # noqa: E402

ROOT = Path(__file__).resolve().parents[1]
DB_PATH = Path("./bookings_test.db")


def _run_migrations() -> None:
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", os.environ["DATABASE_URL"])
    cfg.attributes["configure_logger"] = False
    command.upgrade(cfg, "head")


# --- (1) Fresh database file for the session
if DB_PATH.exists():
    DB_PATH.unlink()

engine = create_engine(
    os.environ["DATABASE_URL"],
    connect_args={"check_same_thread": False},
    future=True,
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False,
                                   future=True, expire_on_commit=False)

# --- (2) Schema comes from Alembic only
_run_migrations()


@pytest.fixture
def db_session() -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)
    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()


@pytest.fixture(autouse=True)
def override_db_dependency(db_session: Session) -> Iterator[None]:
    def _get_db() -> Iterator[Session]:
        yield db_session
    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as async_client:
        yield async_client


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def make_user(db_session: Session) -> Callable[..., User]:
    def _factory(username: str | None = None) -> User:
        username = username or f"user-{uuid4().hex[:8]}"
        user = User(username=username, email=f"{username}@example.com", name=username.title())
        db_session.add(user)
        db_session.flush()
        return user

    return _factory


@pytest.fixture
def make_booking(db_session: Session) -> Callable[..., Booking]:
    def _factory(user: User, status: BookingStatus = BookingStatus.ACCEPTED) -> Booking:
        start = utcnow() + timedelta(days=1)
        booking = Booking(
            uid=uuid4().hex,
            title=f"Session with {user.username}",
            start_time=start,
            end_time=start + timedelta(minutes=30),
            status=status,
            user_id=user.id,
        )
        db_session.add(booking)
        db_session.flush()
        return booking

    return _factory


@pytest.fixture
def make_payment(db_session: Session) -> Callable[..., Payment]:
    def _factory(
        booking: Booking,
        *,
        amount: int = 5000,
        fee: int = 0,
        currency: str = "usd",
        success: bool = True,
        payment_option: PaymentOption = PaymentOption.ON_BOOKING,
    ) -> Payment:
        payment = Payment(
            uid=uuid4().hex,
            booking_id=booking.id,
            amount=amount,
            fee=fee,
            currency=currency,
            success=success,
            refunded=False,
            payment_option=payment_option,
            app_id="stripe",
            external_id=f"pi_{uuid4().hex}",
            data={"client_secret": "secret-from-provider"},
        )
        db_session.add(payment)
        db_session.flush()
        return payment

    return _factory


@pytest.fixture
def make_api_key(db_session: Session) -> Callable[..., str]:
    """Create a key for ``user`` and return the raw token."""

    def _factory(user: User, *, is_active: bool = True, expires_in: timedelta | None = None) -> str:
        token = f"bk_test.{uuid4().hex}"
        api_key = ApiKey(
            name=f"key-{uuid4().hex[:8]}",
            prefix=f"bk_{uuid4().hex[:10]}",
            key_hash=hash_key(token),
            user_id=user.id,
            is_active=is_active,
            expires_at=utcnow() + expires_in if expires_in is not None else None,
        )
        db_session.add(api_key)
        db_session.flush()
        return token

    return _factory


@pytest.fixture
def auth_headers(make_api_key: Callable[..., str]) -> Callable[[User], dict[str, str]]:
    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_api_key(user)}"}

    return _headers
