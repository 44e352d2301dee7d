"""
Shared fixtures: in-memory SQLite store, recording event publisher,
fake course client and an httpx client bound to the FastAPI app.
"""
import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import List, Optional, Tuple  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from authuser.main import create_application  # noqa: E402
from authuser.modules.user_management.domain.events.publisher import UserEventPublisher  # noqa: E402
from authuser.modules.user_management.domain.events.user_events import UserEvent  # noqa: E402
from authuser.modules.user_management.domain.models.course import CourseSummary  # noqa: E402
from authuser.modules.user_management.infrastructure.database.models import UserModel  # noqa: E402,F401
from authuser.modules.user_management.presentation.dependencies import (  # noqa: E402
    get_course_client,
    get_user_event_publisher,
)
from authuser.shared.core.pagination import Page, PageRequest  # noqa: E402
from authuser.shared.events.base import ActionType  # noqa: E402
from authuser.shared.infrastructure.database.connection import Base  # noqa: E402
from authuser.shared.infrastructure.database.session import get_db_session  # noqa: E402


class RecordingUserEventPublisher(UserEventPublisher):
    """Stands in for the broker-backed publisher and remembers every event."""

    def __init__(self, deliver: bool = True):
        self.deliver = deliver
        self.events: List[Tuple[dict, ActionType]] = []

    async def publish_user_event(self, event: UserEvent, action_type: ActionType) -> bool:
        self.events.append((event.with_action(action_type).to_payload(), action_type))
        return self.deliver

    @property
    def actions(self) -> List[ActionType]:
        return [action for _, action in self.events]


class FakeCourseClient:
    def __init__(self, page: Optional[Page[CourseSummary]] = None):
        self.page = page
        self.calls: List[Tuple[UUID, PageRequest]] = []

    async def get_all_courses_by_user(self, user_id: UUID, page_request: Optional[PageRequest] = None):
        page_request = page_request or PageRequest(sort="courseId,asc")
        self.calls.append((user_id, page_request))
        return self.page or Page[CourseSummary].empty_page(page_request)


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def publisher():
    return RecordingUserEventPublisher()


@pytest.fixture
def course_client():
    return FakeCourseClient()


@pytest.fixture
def app(session_factory, publisher, course_client):
    app = create_application()

    async def override_db_session():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_user_event_publisher] = lambda: publisher
    app.dependency_overrides[get_course_client] = lambda: course_client
    return app


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


def registration_payload(**overrides) -> dict:
    payload = {
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret123",
        "fullName": "Alice Liddell",
        "phoneNumber": "5511999990000",
        "nationalId": "12345678900",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
async def registered_user(client, publisher) -> dict:
    """A user created through the signup endpoint; recorded events are cleared."""
    response = await client.post("/auth/signup", json=registration_payload())
    assert response.status_code == 201
    publisher.events.clear()
    return response.json()
