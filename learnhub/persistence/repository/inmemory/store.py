"""Shared state behind the in-memory repositories.

Every in-memory repository of one container reads and writes the same
store, so a vote saved through one repository is visible to listings
served by another. Foreign-key cascades are reproduced by hand.
"""

from learnhub.domain.model import Content, Project, ProjectResponse, Topic, User, Vote
from learnhub.domain.value import (
    ContentId,
    ProjectId,
    ProjectResponseId,
    TopicId,
    UserId,
)


class InMemoryStore:
    """Tables of the in-memory persistence backend."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.topics: dict[TopicId, Topic] = {}
        self.contents: dict[ContentId, Content] = {}
        self.votes: dict[tuple[ContentId, UserId], Vote] = {}
        self.projects: dict[ProjectId, Project] = {}
        self.responses: dict[ProjectResponseId, ProjectResponse] = {}

    def delete_content(self, content_id: ContentId) -> None:
        """Remove a content item and every vote on it."""
        self.contents.pop(content_id, None)
        for key in [k for k in self.votes if k[0] == content_id]:
            del self.votes[key]

    def delete_topic(self, topic_id: TopicId) -> None:
        """Remove a topic and the content filed under it."""
        self.topics.pop(topic_id, None)
        for content_id in [
            c.id for c in self.contents.values() if c.topic_id == topic_id
        ]:
            self.delete_content(content_id)

    def delete_project(self, project_id: ProjectId) -> None:
        """Remove a project and its responses."""
        self.projects.pop(project_id, None)
        for response_id in [
            r.id for r in self.responses.values() if r.project_id == project_id
        ]:
            del self.responses[response_id]
