"""Story use cases."""

from .create_story import CreateStoryRequest, CreateStoryResponse, CreateStoryUseCase
from .delete_story import DeleteStoryRequest, DeleteStoryResponse, DeleteStoryUseCase
from .get_story import GetStoryRequest, GetStoryResponse, GetStoryUseCase
from .list_author_stories import (
    ListAuthorStoriesRequest,
    ListAuthorStoriesResponse,
    ListAuthorStoriesUseCase,
)
from .list_stories import ListStoriesRequest, ListStoriesResponse, ListStoriesUseCase
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase
from .update_story import UpdateStoryRequest, UpdateStoryResponse, UpdateStoryUseCase

__all__ = [
    "CreateStoryRequest",
    "CreateStoryResponse",
    "CreateStoryUseCase",
    "DeleteStoryRequest",
    "DeleteStoryResponse",
    "DeleteStoryUseCase",
    "GetStoryRequest",
    "GetStoryResponse",
    "GetStoryUseCase",
    "ListAuthorStoriesRequest",
    "ListAuthorStoriesResponse",
    "ListAuthorStoriesUseCase",
    "ListStoriesRequest",
    "ListStoriesResponse",
    "ListStoriesUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "UpdateStoryRequest",
    "UpdateStoryResponse",
    "UpdateStoryUseCase",
]
