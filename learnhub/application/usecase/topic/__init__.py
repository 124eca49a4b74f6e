"""Topic use cases."""

from .create_topic import CreateTopicRequest, CreateTopicResponse, CreateTopicUseCase
from .delete_topic import DeleteTopicRequest, DeleteTopicUseCase
from .list_topics import ListTopicsResponse, ListTopicsUseCase

__all__ = [
    "CreateTopicRequest",
    "CreateTopicResponse",
    "CreateTopicUseCase",
    "DeleteTopicRequest",
    "DeleteTopicUseCase",
    "ListTopicsResponse",
    "ListTopicsUseCase",
]
