"""Content, topic and vote routes."""

from datetime import date
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from learnhub.application.usecase.auth import ResolveCallerUseCase
from learnhub.application.usecase.content import (
    CreateContentRequest,
    CreateContentResponse,
    CreateContentUseCase,
    DeleteContentRequest,
    DeleteContentUseCase,
    GetContentRequest,
    GetContentUseCase,
    ListContentsRequest,
    ListContentsResponse,
    ListContentsUseCase,
    UpdateContentRequest,
    UpdateContentUseCase,
)
from learnhub.application.usecase.topic import (
    CreateTopicRequest,
    CreateTopicResponse,
    CreateTopicUseCase,
    DeleteTopicRequest,
    DeleteTopicUseCase,
    ListTopicsResponse,
    ListTopicsUseCase,
)
from learnhub.application.usecase.vote import (
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)
from learnhub.domain.model import ContentFullRow
from learnhub.domain.value import (
    ContentId,
    ContentSortCategory,
    SortDirection,
    TopicId,
)
from learnhub.interface.api.auth import optional_caller, require_caller

router = APIRouter(prefix="/v1/contents", tags=["contents"], route_class=DishkaRoute)


class ContentAPIRequest(BaseModel):
    """API request for creating or replacing a content item."""

    title: str = Field(min_length=1, max_length=255)
    topic_id: str = Field(min_length=1, max_length=255)
    cover_photo: str = Field(min_length=1, max_length=1000)
    summary: str = Field(min_length=1, max_length=1000)
    body: str = Field(min_length=1)


class TopicAPIRequest(BaseModel):
    """API request for creating a topic."""

    id: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1, max_length=255)


# Topic routes come first so "/topics" is never read as a content ID


@router.get("/topics", response_model=ListTopicsResponse)
async def list_topics(
    list_topics_use_case: FromDishka[ListTopicsUseCase],
) -> ListTopicsResponse:
    """List every topic."""
    return await list_topics_use_case.execute()


@router.post(
    "/topics", response_model=CreateTopicResponse, status_code=status.HTTP_201_CREATED
)
async def create_topic(
    request: TopicAPIRequest,
    create_topic_use_case: FromDishka[CreateTopicUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> CreateTopicResponse:
    """Create a topic. Requires authentication.

    Raises:
        ConflictError: If the topic ID is taken (409)
    """
    await require_caller(authorization, resolve_caller)
    return await create_topic_use_case.execute(
        CreateTopicRequest(topic_id=TopicId(request.id), description=request.description)
    )


@router.delete("/topics/{topic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_topic(
    topic_id: str,
    delete_topic_use_case: FromDishka[DeleteTopicUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """Delete a topic and the content filed under it."""
    await require_caller(authorization, resolve_caller)
    await delete_topic_use_case.execute(DeleteTopicRequest(topic_id=TopicId(topic_id)))


@router.get("", response_model=ListContentsResponse)
async def list_contents(
    list_contents_use_case: FromDishka[ListContentsUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    start_date: date | None = Query(default=None),
    end_date: date | None = Query(default=None),
    zone_id: str | None = Query(default=None),
    author_id: str | None = Query(default=None),
    title: str | None = Query(default=None),
    author_name: str | None = Query(default=None),
    topic_id: str | None = Query(default=None),
    sort_type: ContentSortCategory = Query(default=ContentSortCategory.VOTES),
    sort_direction: SortDirection = Query(default=SortDirection.DESC),
    page: int = Query(default=0),
    size: int = Query(default=10),
    authorization: str | None = Header(default=None),
) -> ListContentsResponse:
    """List content items.

    Filters combine with AND. Dates are calendar days in ``zone_id``.
    When authenticated, each row carries the caller's vote ID, if any.

    Example:
        GET /v1/contents?topic_id=physics&sort_type=CREATED_AT&page=0&size=20
    """
    caller = await optional_caller(authorization, resolve_caller)
    return await list_contents_use_case.execute(
        ListContentsRequest(
            start_date=start_date,
            end_date=end_date,
            zone_id=zone_id,
            author_id=author_id,
            title=title,
            author_name=author_name,
            topic_id=topic_id,
            sort_type=sort_type,
            sort_direction=sort_direction,
            page=page,
            size=size,
            viewer_id=caller.user_id if caller else None,
        )
    )


@router.post(
    "", response_model=CreateContentResponse, status_code=status.HTTP_201_CREATED
)
async def create_content(
    request: ContentAPIRequest,
    create_content_use_case: FromDishka[CreateContentUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> CreateContentResponse:
    """Publish a content item. Requires the admin scope."""
    caller = await require_caller(authorization, resolve_caller)
    return await create_content_use_case.execute(
        CreateContentRequest(
            caller=caller,
            title=request.title,
            topic_id=TopicId(request.topic_id),
            cover_photo=request.cover_photo,
            summary=request.summary,
            body=request.body,
        )
    )


@router.get("/{content_id}", response_model=ContentFullRow)
async def get_content(
    content_id: UUID,
    get_content_use_case: FromDishka[GetContentUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> ContentFullRow:
    """Get a content item with its body."""
    caller = await optional_caller(authorization, resolve_caller)
    return await get_content_use_case.execute(
        GetContentRequest(
            content_id=ContentId(content_id),
            viewer_id=caller.user_id if caller else None,
        )
    )


@router.put("/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_content(
    content_id: UUID,
    request: ContentAPIRequest,
    update_content_use_case: FromDishka[UpdateContentUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """Replace a content item. Owner or admin only."""
    caller = await require_caller(authorization, resolve_caller)
    await update_content_use_case.execute(
        UpdateContentRequest(
            caller=caller,
            content_id=ContentId(content_id),
            title=request.title,
            topic_id=TopicId(request.topic_id),
            cover_photo=request.cover_photo,
            summary=request.summary,
            body=request.body,
        )
    )


@router.delete("/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_content(
    content_id: UUID,
    delete_content_use_case: FromDishka[DeleteContentUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """Delete a content item and its votes. Owner or admin only."""
    caller = await require_caller(authorization, resolve_caller)
    await delete_content_use_case.execute(
        DeleteContentRequest(caller=caller, content_id=ContentId(content_id))
    )


@router.put("/{content_id}/vote", response_model=ToggleVoteResponse)
async def toggle_vote(
    content_id: UUID,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> ToggleVoteResponse:
    """Vote on a content item, or withdraw the caller's vote.

    Example:
        PUT /v1/contents/123e4567-e89b-12d3-a456-426614174000/vote

        Response:
        {"delta": 1}
    """
    caller = await require_caller(authorization, resolve_caller)
    return await toggle_vote_use_case.execute(
        ToggleVoteRequest(content_id=ContentId(content_id), voter_id=caller.user_id)
    )
