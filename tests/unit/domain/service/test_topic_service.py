"""Unit tests for TopicService."""

import pytest

from learnhub.domain.error import ConflictError, NotFoundError
from learnhub.domain.repository import ContentRepository, UserRepository
from learnhub.domain.service import TopicService
from learnhub.domain.value import TopicId
from tests.conftest import make_content, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestTopicService:
    """Tests for topic lifecycle."""

    @pytest.mark.asyncio
    async def test_create_and_list(self, unit_env):
        # Arrange
        service = await unit_env.get(TopicService)

        # Act
        await service.create_topic(TopicId("physics"), "Matter and energy")
        await service.create_topic(TopicId("biology"), "Living things")
        topics = await service.list_topics()

        # Assert
        assert {t.id for t in topics} == {"physics", "biology"}

    @pytest.mark.asyncio
    async def test_reusing_an_id_raises_conflict(self, unit_env):
        # Arrange
        service = await unit_env.get(TopicService)
        await service.create_topic(TopicId("physics"), "Matter and energy")

        # Act & Assert
        with pytest.raises(ConflictError):
            await service.create_topic(TopicId("physics"), "Again")

    @pytest.mark.asyncio
    async def test_delete_removes_topic_and_its_content(self, unit_env):
        # Arrange
        service = await unit_env.get(TopicService)
        users = await unit_env.get(UserRepository)
        contents = await unit_env.get(ContentRepository)
        topic = await service.create_topic(TopicId("physics"), "Matter and energy")
        owner = await users.save(make_user("owner"))
        content = await contents.save(make_content(owner, topic))

        # Act
        await service.delete_topic(topic.id)

        # Assert
        assert await service.list_topics() == []
        assert await contents.find_by_id(content.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_topic_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(TopicService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Topic"):
            await service.delete_topic(TopicId("nothing"))
