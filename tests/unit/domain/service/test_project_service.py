"""Unit tests for ProjectService."""

from datetime import datetime, timedelta, timezone

import pytest

from learnhub.domain.error import ForbiddenError, NotFoundError
from learnhub.domain.query import ProjectCriteria, compose_project_spec
from learnhub.domain.repository import ProjectRepository, UserRepository
from learnhub.domain.service import ProjectService
from learnhub.domain.value import ProjectSortCategory, ProjectType, Role
from tests.conftest import make_caller, make_project, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

DAY = datetime(2026, 6, 1, tzinfo=timezone.utc)


class TestProjectMutations:
    """Tests for project create/update/delete/reprioritize."""

    @pytest.mark.asyncio
    async def test_admin_creates_project_with_zero_priority(self, unit_env):
        # Arrange
        service = await unit_env.get(ProjectService)
        users = await unit_env.get(UserRepository)
        admin = await users.save(make_user("root", role=Role.ADMIN))

        # Act
        project = await service.create_project(
            make_caller(admin), "Label images", "Details", ProjectType.PAID
        )

        # Assert
        detail = await service.get_project_detail(project.id)
        assert detail.priority == 0
        assert detail.author_name == "root"
        assert detail.type == ProjectType.PAID

    @pytest.mark.asyncio
    async def test_regular_user_cannot_create(self, unit_env):
        # Arrange
        service = await unit_env.get(ProjectService)
        users = await unit_env.get(UserRepository)
        alice = await users.save(make_user("alice"))

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await service.create_project(
                make_caller(alice), "Label images", "Details", ProjectType.FREE
            )

    @pytest.mark.asyncio
    async def test_owner_update_keeps_priority(self, unit_env):
        # Arrange
        service = await unit_env.get(ProjectService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        alice = await users.save(make_user("alice"))
        project = await projects.save(make_project(alice, priority=7))

        # Act
        await service.update_project(
            make_caller(alice), project.id, "Renamed", "New body", ProjectType.PAID
        )

        # Assert
        stored = await service.get_project(project.id)
        assert stored.title == "Renamed"
        assert stored.priority == 7

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        # Arrange
        service = await unit_env.get(ProjectService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        alice = await users.save(make_user("alice"))
        bob = await users.save(make_user("bob"))
        project = await projects.save(make_project(alice))

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await service.delete_project(make_caller(bob), project.id)

    @pytest.mark.asyncio
    async def test_owner_deletes_project(self, unit_env):
        # Arrange
        service = await unit_env.get(ProjectService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        alice = await users.save(make_user("alice"))
        project = await projects.save(make_project(alice))

        # Act
        await service.delete_project(make_caller(alice), project.id)

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_project(project.id)

    @pytest.mark.asyncio
    async def test_only_admin_reprioritizes(self, unit_env):
        # Arrange
        service = await unit_env.get(ProjectService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        alice = await users.save(make_user("alice"))
        admin = await users.save(make_user("root", role=Role.ADMIN))
        project = await projects.save(make_project(alice))

        # Act
        with pytest.raises(ForbiddenError):
            await service.update_priority(make_caller(alice), project.id, 3)
        await service.update_priority(make_caller(admin), project.id, 3)

        # Assert
        stored = await service.get_project(project.id)
        assert stored.priority == 3


class TestListProjects:
    """Tests for project listings."""

    @pytest.mark.asyncio
    async def test_type_and_title_filters_with_priority_order(self, unit_env):
        # Arrange
        service = await unit_env.get(ProjectService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        alice = await users.save(make_user("alice"))
        for title, type, priority in [
            ("Paid survey", ProjectType.PAID, 1),
            ("Paid review", ProjectType.PAID, 5),
            ("Free survey", ProjectType.FREE, 9),
            ("Paid survey two", ProjectType.PAID, 3),
        ]:
            await projects.save(make_project(alice, title, type, priority))
        spec = compose_project_spec(
            ProjectCriteria(type=ProjectType.PAID, title="survey")
        )

        # Act
        page = await service.list_projects(spec, 0, 10)

        # Assert
        assert [row.title for row in page.items] == ["Paid survey two", "Paid survey"]
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_sort_by_created_at_descending(self, unit_env):
        # Arrange
        service = await unit_env.get(ProjectService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        alice = await users.save(make_user("alice"))
        for offset in range(3):
            await projects.save(
                make_project(
                    alice, f"Project {offset}", created_at=DAY + timedelta(days=offset)
                )
            )
        spec = compose_project_spec(
            ProjectCriteria(sort=ProjectSortCategory.CREATED_AT)
        )

        # Act
        page = await service.list_projects(spec, 0, 2)

        # Assert
        assert [row.title for row in page.items] == ["Project 2", "Project 1"]
        assert page.total == 3
