"""Domain layer DI providers."""

from dishka import Scope, provide

from sodfa.config import AuthSettings, StorySettings
from sodfa.domain.repository import (
    CascadeDeleter,
    CommentRepository,
    ReactionRepository,
    StoryRepository,
)
from sodfa.domain.service import (
    CommentService,
    IdentityProvider,
    IdentityService,
    JWTService,
    ReactionService,
    SessionService,
    StoryService,
)
from sodfa.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_service(self, story_settings: StorySettings) -> IdentityService:
        """Provide identity resolution service."""
        return IdentityService(story_settings=story_settings)

    @provide
    def get_session_service(
        self, identity_provider: IdentityProvider
    ) -> SessionService:
        """Provide session domain service."""
        return SessionService(identity_provider=identity_provider)

    @provide
    def get_reaction_service(
        self,
        story_repository: StoryRepository,
        reaction_repository: ReactionRepository,
    ) -> ReactionService:
        """Provide reaction ledger."""
        return ReactionService(
            story_repository=story_repository,
            reaction_repository=reaction_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        story_repository: StoryRepository,
    ) -> CommentService:
        """Provide comment ledger."""
        return CommentService(
            comment_repository=comment_repository,
            story_repository=story_repository,
        )

    @provide
    def get_story_service(
        self,
        story_repository: StoryRepository,
        comment_repository: CommentRepository,
        reaction_repository: ReactionRepository,
        cascade_deleter: CascadeDeleter,
        story_settings: StorySettings,
    ) -> StoryService:
        """Provide story domain service."""
        return StoryService(
            story_repository=story_repository,
            comment_repository=comment_repository,
            reaction_repository=reaction_repository,
            cascade_deleter=cascade_deleter,
            story_settings=story_settings,
        )
