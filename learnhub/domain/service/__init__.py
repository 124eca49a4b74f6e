"""Domain services."""

from .authorization import require_admin, require_owner_or_admin
from .base import Service
from .content_service import ContentService
from .jwt_service import JWTService
from .leaderboard_service import LeaderboardService
from .project_response_service import ProjectResponseService
from .project_service import ProjectService
from .topic_service import TopicService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "ContentService",
    "JWTService",
    "LeaderboardService",
    "ProjectResponseService",
    "ProjectService",
    "Service",
    "TopicService",
    "UserService",
    "VoteService",
    "require_admin",
    "require_owner_or_admin",
]
