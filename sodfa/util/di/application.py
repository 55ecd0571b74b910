"""Application layer DI providers."""

from dishka import Scope, provide

from sodfa.application.usecase.auth import (
    CreateAnonymousSessionUseCase,
    FederatedSignInUseCase,
    GetCurrentIdentityUseCase,
    SignInUseCase,
    SignUpUseCase,
)
from sodfa.application.usecase.comment import AddCommentUseCase, ListCommentsUseCase
from sodfa.application.usecase.reaction import GetReactionUseCase, ReactUseCase
from sodfa.application.usecase.story import (
    CreateStoryUseCase,
    DeleteStoryUseCase,
    GetStoryUseCase,
    ListAuthorStoriesUseCase,
    ListStoriesUseCase,
    ListTagsUseCase,
    UpdateStoryUseCase,
)
from sodfa.domain.service import (
    CommentService,
    IdentityService,
    JWTService,
    ReactionService,
    SessionService,
    StoryService,
)
from sodfa.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_create_anonymous_session_use_case(
        self, session_service: SessionService, jwt_service: JWTService
    ) -> CreateAnonymousSessionUseCase:
        """Provide anonymous session use case."""
        return CreateAnonymousSessionUseCase(
            session_service=session_service, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_sign_up_use_case(
        self, session_service: SessionService, jwt_service: JWTService
    ) -> SignUpUseCase:
        """Provide sign-up use case."""
        return SignUpUseCase(session_service=session_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_sign_in_use_case(
        self, session_service: SessionService, jwt_service: JWTService
    ) -> SignInUseCase:
        """Provide sign-in use case."""
        return SignInUseCase(session_service=session_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_federated_sign_in_use_case(
        self, session_service: SessionService, jwt_service: JWTService
    ) -> FederatedSignInUseCase:
        """Provide federated sign-in use case."""
        return FederatedSignInUseCase(
            session_service=session_service, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_current_identity_use_case(
        self, identity_service: IdentityService
    ) -> GetCurrentIdentityUseCase:
        """Provide current identity use case."""
        return GetCurrentIdentityUseCase(identity_service=identity_service)

    # Story use cases
    @provide(scope=Scope.REQUEST)
    def get_create_story_use_case(
        self, identity_service: IdentityService, story_service: StoryService
    ) -> CreateStoryUseCase:
        """Provide create story use case."""
        return CreateStoryUseCase(
            identity_service=identity_service, story_service=story_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_story_use_case(self, story_service: StoryService) -> GetStoryUseCase:
        """Provide get story use case."""
        return GetStoryUseCase(story_service=story_service)

    @provide(scope=Scope.REQUEST)
    def get_list_stories_use_case(
        self, story_service: StoryService
    ) -> ListStoriesUseCase:
        """Provide list stories use case."""
        return ListStoriesUseCase(story_service=story_service)

    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, story_service: StoryService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(story_service=story_service)

    @provide(scope=Scope.REQUEST)
    def get_list_author_stories_use_case(
        self, story_service: StoryService
    ) -> ListAuthorStoriesUseCase:
        """Provide author stories use case."""
        return ListAuthorStoriesUseCase(story_service=story_service)

    @provide(scope=Scope.REQUEST)
    def get_update_story_use_case(
        self, identity_service: IdentityService, story_service: StoryService
    ) -> UpdateStoryUseCase:
        """Provide update story use case."""
        return UpdateStoryUseCase(
            identity_service=identity_service, story_service=story_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_story_use_case(
        self, identity_service: IdentityService, story_service: StoryService
    ) -> DeleteStoryUseCase:
        """Provide delete story use case."""
        return DeleteStoryUseCase(
            identity_service=identity_service, story_service=story_service
        )

    # Reaction use cases
    @provide(scope=Scope.REQUEST)
    def get_react_use_case(
        self, identity_service: IdentityService, reaction_service: ReactionService
    ) -> ReactUseCase:
        """Provide react use case."""
        return ReactUseCase(
            identity_service=identity_service, reaction_service=reaction_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_reaction_use_case(
        self, identity_service: IdentityService, reaction_service: ReactionService
    ) -> GetReactionUseCase:
        """Provide get reaction use case."""
        return GetReactionUseCase(
            identity_service=identity_service, reaction_service=reaction_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, identity_service: IdentityService, comment_service: CommentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            identity_service=identity_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)
