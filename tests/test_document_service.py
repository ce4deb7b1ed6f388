"""DocumentService against an in-memory MongoDB."""

import asyncio

import pytest
from bson.errors import InvalidId
from pydantic import ValidationError

from portfolio.core import Datastore
from portfolio.models import Experience, Project
from portfolio.services import (
    DocumentService,
    DocumentNotFoundError,
    DatastoreUnavailableError,
)


@pytest.fixture
def projects(datastore):
    return DocumentService(datastore, Project, "Project")


@pytest.fixture
def experiences(datastore):
    return DocumentService(datastore, Experience, "Experience", sort_desc="period")


class TestCreate:
    async def test_create_assigns_id(self, projects):
        project = await projects.create({"title": "X"})

        assert project.id is not None
        assert (await projects.get(str(project.id))).title == "X"

    async def test_create_validation_error(self, projects):
        with pytest.raises(ValidationError):
            await projects.create({"technology": ["Go"]})

        assert await projects.list() == []


class TestUpdate:
    async def test_merge_keeps_unsupplied_fields(self, projects):
        project = await projects.create({"title": "X", "description": "d", "technology": ["Go"]})

        updated = await projects.update(str(project.id), {"technology": ["Rust"]})

        assert updated.id == project.id
        assert updated.title == "X"
        assert updated.description == "d"
        assert updated.technology == ["Rust"]

    async def test_failed_validation_writes_nothing(self, projects):
        project = await projects.create({"title": "X", "description": "d"})

        with pytest.raises(ValidationError):
            await projects.update(str(project.id), {"title": None, "description": "changed"})

        stored = await projects.get(str(project.id))
        assert stored.title == "X"
        assert stored.description == "d"

    async def test_concurrent_updates_to_different_fields(self, projects, monkeypatch):
        project = await projects.create({"title": "X", "description": "d"})
        document_id = str(project.id)
        read = DocumentService.get

        async def get_then_yield(self, document_id):
            document = await read(self, document_id)
            await asyncio.sleep(0)
            return document

        monkeypatch.setattr(DocumentService, "get", get_then_yield)

        await asyncio.gather(
            projects.update(document_id, {"title": "new title"}),
            projects.update(document_id, {"description": "new description"}),
        )

        stored = await read(projects, document_id)
        assert stored.title == "new title"
        assert stored.description == "new description"

    async def test_delete_between_read_and_write(self, projects, monkeypatch):
        project = await projects.create({"title": "X"})
        read = DocumentService.get

        async def get_then_delete(self, document_id):
            document = await read(self, document_id)
            await self.model.find_one({"_id": document.id}).delete()
            return document

        monkeypatch.setattr(DocumentService, "get", get_then_delete)

        with pytest.raises(DocumentNotFoundError):
            await projects.update(str(project.id), {"title": "Y"})

    async def test_update_with_only_unknown_fields_changes_nothing(self, projects):
        project = await projects.create({"title": "X"})

        updated = await projects.update(str(project.id), {"stars": 5})

        assert updated.title == "X"
        assert (await projects.get(str(project.id))).title == "X"

    async def test_update_by_wire_name(self, datastore):
        experiences = DocumentService(datastore, Experience, "Experience")
        experience = await experiences.create({"period": "2024", "position": "Dev", "company": "Acme"})

        await experiences.update(str(experience.id), {"companyDescription": "Logistics"})

        stored = await experiences.get(str(experience.id))
        assert stored.company_description == "Logistics"
        assert stored.company == "Acme"

    async def test_update_unknown_id(self, projects, missing_id):
        with pytest.raises(DocumentNotFoundError) as exc_info:
            await projects.update(missing_id, {"title": "X"})

        assert str(exc_info.value) == "Project not found"
        assert exc_info.value.document_id == missing_id


class TestLookups:
    async def test_malformed_id(self, projects):
        with pytest.raises(InvalidId):
            await projects.get("1234")

    async def test_first_on_empty_collection(self, projects):
        with pytest.raises(DocumentNotFoundError):
            await projects.first()

    async def test_list_sorted_descending(self, experiences):
        for period in ("2021", "2024", "2023"):
            await experiences.create({"period": period, "position": "Dev", "company": "Acme"})

        assert [e.period for e in await experiences.list()] == ["2024", "2023", "2021"]

    async def test_delete(self, projects):
        project = await projects.create({"title": "X"})

        await projects.delete(str(project.id))

        with pytest.raises(DocumentNotFoundError):
            await projects.delete(str(project.id))


class TestToPublic:
    async def test_wire_names_and_string_id(self, experiences):
        experience = await experiences.create(
            {"period": "2024", "position": "Dev", "company": "Acme", "companyDescription": "x"}
        )

        public = experience.to_public()

        assert public["_id"] == str(experience.id)
        assert public["companyDescription"] == "x"
        assert "id" not in public
        assert "revision_id" not in public


async def test_disconnected_datastore_refuses_calls():
    service = DocumentService(Datastore("mongodb://localhost:1", "portfolio_test"), Project, "Project")

    with pytest.raises(DatastoreUnavailableError, match="Database not available"):
        await service.list()
