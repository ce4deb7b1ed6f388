"""Shared fixtures: an in-memory MongoDB behind a real Datastore, and an HTTP client."""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

os.environ.setdefault("ENV", "local")

from portfolio.base import create_app
from portfolio.core import Datastore


@pytest_asyncio.fixture
async def datastore():
    store = Datastore("mongodb://localhost:27017", "portfolio_test", client=AsyncMongoMockClient())
    assert await store.connect()
    return store


@pytest_asyncio.fixture
async def test_client(datastore):
    app = create_app(datastore)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def missing_id():
    # well-formed ObjectId that is never generated during a test
    return "0123456789abcdef01234567"


@pytest.fixture
def project_payload():
    return {
        "image": "https://example.com/shot.png",
        "title": "Portfolio site",
        "description": "Personal site built with React",
        "technology": ["React", "Node.js", "MongoDB"],
    }


@pytest.fixture
def experience_payload():
    return {
        "period": "2022 - 2024",
        "position": "Backend Engineer",
        "company": "Acme",
        "companyDescription": "Logistics software",
        "responsibilities": ["Built APIs", "Ran on-call"],
        "technologies": ["Python", "MongoDB"],
    }


@pytest.fixture
def profile_payload():
    return {
        "name": "Akash",
        "jobRole": "Full Stack Developer",
        "experience": "3+ years",
        "address": "Mumbai, India",
        "skills": [{"name": "Python", "percentage": 90}, {"name": "React", "percentage": 80}],
        "about": {
            "description": "I build web applications.",
            "profile": {
                "image": "https://example.com/me.jpg",
                "title": "Developer",
                "domain": ["Web", "Backend"],
                "education": "B.Tech",
                "languages": ["English", "Hindi"],
                "otherSkills": ["Docker"],
                "interests": ["Chess"],
                "projectsCompleted": 12,
            },
        },
    }
