"""Project aggregate root and its responses."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from learnhub.domain.model.common import DomainModel, utcnow
from learnhub.domain.value import ProjectId, ProjectResponseId, ProjectType, UserId


class Project(DomainModel):
    """Project aggregate root.

    Priority is only changed through the explicit reprioritization
    operation; editing a project leaves it untouched.
    """

    id: ProjectId
    owner_id: UserId
    title: str = Field(min_length=1, max_length=255)
    body: str = Field(min_length=1, max_length=65535)
    type: ProjectType
    priority: int = 0
    created_at: datetime = Field(default_factory=utcnow)


class ProjectResponse(DomainModel):
    """A user's response to a project.

    Responses start unverified; the project owner (or an admin) verifies them.
    """

    id: ProjectResponseId
    project_id: ProjectId
    responder_id: UserId
    body: str = Field(min_length=1, max_length=65535)
    payment_number: Optional[str] = Field(default=None, max_length=20)
    is_verified: bool = False
    created_at: datetime = Field(default_factory=utcnow)
