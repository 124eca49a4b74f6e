"""Strongly typed identifiers for LearnHub domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Issued by the identity provider (Firebase uid), opaque to us
UserId = NewType("UserId", str)

# Chosen by whoever creates the topic (e.g. "physics")
TopicId = NewType("TopicId", str)

ContentId = NewType("ContentId", UUID)
VoteId = NewType("VoteId", UUID)
ProjectId = NewType("ProjectId", UUID)
ProjectResponseId = NewType("ProjectResponseId", UUID)
