"""Persistence providers (repositories over the document store)."""

from dishka import Scope, provide

from sodfa.adapter.store import DocumentStore
from sodfa.domain.repository import (
    CascadeDeleter,
    CommentRepository,
    ReactionRepository,
    StoryRepository,
)
from sodfa.persistence.repository import (
    StoreCascadeDeleter,
    StoreCommentRepository,
    StoreReactionRepository,
    StoreStoryRepository,
)
from sodfa.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Repositories built on whichever DocumentStore is provided."""

    scope = Scope.REQUEST

    @provide
    def get_story_repository(self, store: DocumentStore) -> StoryRepository:
        """Provide Story repository."""
        return StoreStoryRepository(store)

    @provide
    def get_comment_repository(self, store: DocumentStore) -> CommentRepository:
        """Provide Comment repository."""
        return StoreCommentRepository(store)

    @provide
    def get_reaction_repository(self, store: DocumentStore) -> ReactionRepository:
        """Provide Reaction repository."""
        return StoreReactionRepository(store)

    @provide
    def get_cascade_deleter(self, store: DocumentStore) -> CascadeDeleter:
        """Provide cascade deleter."""
        return StoreCascadeDeleter(store)
