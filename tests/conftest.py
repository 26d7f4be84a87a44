"""Pytest configuration and fixtures."""
import os

# Must be set before the application modules read settings
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("FEED_LOAD_ON_STARTUP", "false")
os.environ.setdefault("STATUS_PROBE_ENABLED", "false")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import toolboard.models  # noqa: F401
from toolboard.db import Base, get_db
from toolboard.main import app
from toolboard.schemas.tool import Tool
from toolboard.services.catalog import CatalogState, get_catalog

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def make_tool():
    """Factory for Tool records with sensible defaults."""
    def _make_tool(tool_id, title=None, description="", votes=0, source="Product Hunt", **kwargs):
        return Tool(
            id=tool_id,
            title=title if title is not None else f"Tool {tool_id}",
            description=description,
            votes=votes,
            source=source,
            **kwargs
        )
    return _make_tool


@pytest.fixture
def sample_tools(make_tool):
    """Small mixed catalog covering several categories and sources."""
    return [
        make_tool("1", "CodePilot", "AI pair programming", votes=120, comments=10,
                  source="Product Hunt", url="https://codepilot.example"),
        make_tool("2", "BlogBot", "writing assistant", votes=80, comments=5,
                  source="Hacker News", url="https://blogbot.example"),
        make_tool("3", "PixelDream", "image generator", votes=60, comments=4,
                  source="Product Hunt", url="https://pixeldream.example"),
        make_tool("4", "ChartGenie", "turns spreadsheets into charts", votes=40, comments=1,
                  source="Reddit", url="https://chartgenie.example"),
        make_tool("5", "CodeReview AI", "review pull requests on github", votes=100, comments=7,
                  source="Hacker News", url="https://codereview.example"),
        Tool(id="6", title="Mystery Box", description=None, votes=None, source="Reddit"),
    ]


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def catalog(sample_tools):
    """Catalog pre-loaded with the sample tools."""
    return CatalogState(sample_tools)


@pytest.fixture(scope="function")
def client(db_session, catalog):
    """Create a test client with overridden database and catalog."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog] = lambda: catalog
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
