"""Pytest configuration and fixtures."""
# ruff: noqa: E402

import asyncio
import os

# Settings are cached on first use; configure them before importing the app
os.environ["SECRET_KEY"] = "test-secret-key-that-is-at-least-32-bytes-long"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("AI_PROVIDER", None)

from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from mindweave import models
from mindweave.application.sources.protocols.job_queue import MindmapJob
from mindweave.core import container
from mindweave.database import Base, get_db
from mindweave.domain.aids.entities.aid_kind import AidKind
from mindweave.domain.mindmaps.entities.mindmap_draft import MindmapDraft
from mindweave.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

FLASHCARDS_CONTENT = (
    "Q: What is photosynthesis?\n"
    "A: The process plants use to turn light into chemical energy.\n"
    "Q: Where does it happen?\n"
    "A: In the chloroplasts.\n"
    "Q: What gas is released?\n"
    "A: Oxygen."
)


class FakeGenerationService:
    """Records every generation request and returns canned content."""

    def __init__(self) -> None:
        self.calls: list[tuple[AidKind, str]] = []
        self.error: Exception | None = None
        self.content: str | None = None

    async def generate(self, kind: AidKind, source_text: str) -> str:
        self.calls.append((kind, source_text))
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return self.content
        if kind == AidKind.FLASHCARDS:
            return FLASHCARDS_CONTENT
        return f"Generated {kind.value} #{len(self.calls)}"


class FakeKnowledgeWeaver:
    def __init__(self) -> None:
        self.draft: MindmapDraft | None = None
        self.error: Exception | None = None
        self.calls: list[str] = []

    async def weave(self, raw_text: str) -> MindmapDraft:
        self.calls.append(raw_text)
        if self.error is not None:
            raise self.error
        if self.draft is None:
            raise AssertionError("FakeKnowledgeWeaver.draft was not set")
        return self.draft


class FakeTextExtraction:
    def __init__(self) -> None:
        self.transcript = "Transcript of the video about cells."
        self.page_text = "Article text about photosynthesis."
        self.transcript_urls: list[str] = []
        self.scraped_urls: list[str] = []

    async def fetch_transcript(self, url: str) -> str:
        self.transcript_urls.append(url)
        return self.transcript

    async def scrape_text(self, url: str) -> str:
        self.scraped_urls.append(url)
        return self.page_text


class FakeJobQueue:
    def __init__(self) -> None:
        self.jobs: list[MindmapJob] = []
        self.closed = False
        self.error: Exception | None = None

    async def enqueue(self, job: MindmapJob) -> None:
        if self.error is not None:
            raise self.error
        self.jobs.append(job)

    async def dequeue(self, timeout_seconds: int) -> MindmapJob | None:
        # Yield like a real blocking pop
        await asyncio.sleep(0)
        return self.jobs.pop(0) if self.jobs else None

    async def close(self) -> None:
        self.closed = True


def create_access_token(user_id: int, **claims: Any) -> str:
    payload = {
        "sub": str(user_id),
        "type": "access",
        "exp": datetime.now(UTC) + timedelta(minutes=30),
        **claims,
    }
    return jwt.encode(payload, os.environ["SECRET_KEY"], algorithm="HS256")


def auth_headers(user_id: int) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


def create_test_user(
    db_session: Session, email: str = "test@example.com", display_name: str = "Test User"
) -> models.User:
    user = models.User(email=email, display_name=display_name)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def create_test_source(
    db_session: Session,
    owner: models.User,
    origin: str = "https://example.com/article",
    status: str = "completed",
    type: str = "url",
) -> models.Source:
    source = models.Source(owner_id=owner.id, type=type, origin=origin, status=status)
    db_session.add(source)
    db_session.commit()
    db_session.refresh(source)
    return source


def create_test_node(
    db_session: Session,
    source: models.Source,
    title: str = "Photosynthesis",
    summary: str = "How plants make food from light.",
) -> models.Node:
    node = models.Node(source_id=source.id, title=title, summary=summary)
    db_session.add(node)
    db_session.commit()
    db_session.refresh(node)
    return node


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def generation_service() -> Generator[FakeGenerationService, None, None]:
    fake = FakeGenerationService()
    container.generation_service.override(providers.Object(fake))
    yield fake
    container.generation_service.reset_override()


@pytest.fixture
def knowledge_weaver() -> Generator[FakeKnowledgeWeaver, None, None]:
    fake = FakeKnowledgeWeaver()
    container.knowledge_weaver_service.override(providers.Object(fake))
    yield fake
    container.knowledge_weaver_service.reset_override()


@pytest.fixture
def text_extraction() -> Generator[FakeTextExtraction, None, None]:
    fake = FakeTextExtraction()
    container.text_extraction_service.override(providers.Object(fake))
    yield fake
    container.text_extraction_service.reset_override()


@pytest.fixture
def job_queue() -> Generator[FakeJobQueue, None, None]:
    fake = FakeJobQueue()
    container.job_queue.override(providers.Object(fake))
    yield fake
    container.job_queue.reset_override()


@pytest.fixture
def client(
    db_session: Session,
    generation_service: FakeGenerationService,
    knowledge_weaver: FakeKnowledgeWeaver,
    text_extraction: FakeTextExtraction,
    job_queue: FakeJobQueue,
) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and in-process fakes."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    return create_test_user(db_session)


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    return create_test_user(db_session, email="other@example.com", display_name="Other User")


@pytest.fixture
def headers(test_user: models.User) -> dict[str, str]:
    return auth_headers(test_user.id)


@pytest.fixture
def test_source(db_session: Session, test_user: models.User) -> models.Source:
    return create_test_source(db_session, test_user)


@pytest.fixture
def test_node(db_session: Session, test_source: models.Source) -> models.Node:
    return create_test_node(db_session, test_source)
