"""Reaction ledger domain service."""

from typing import Optional

import logfire

from sodfa.domain.error import NotFoundError
from sodfa.domain.model import ResolvedIdentity, Story
from sodfa.domain.model.reaction import Reaction, reaction_id_for
from sodfa.domain.repository import ReactionRepository, StoryRepository
from sodfa.domain.value import IdentityClass, OwnerKey, ReactionType, StoryId
from sodfa.domain.value.common import ValueObject

from .base import Service


class ReactionOutcome(ValueObject):
    """Result of a reaction call: whether a reaction is now in place, and which."""

    reacted: bool
    type: Optional[ReactionType] = None


def adjusted_counters(
    story: Story, deltas: dict[ReactionType, int]
) -> tuple[int, int]:
    """Apply counter deltas to a story, clamping each counter at 0.

    Args:
        story: Story holding the current counters
        deltas: Change per reaction type

    Returns:
        New (likes, loves)
    """
    likes = max(story.likes + deltas.get(ReactionType.LIKE, 0), 0)
    loves = max(story.loves + deltas.get(ReactionType.LOVE, 0), 0)
    return likes, loves


class ReactionService(Service):
    """Domain service for likes and loves.

    Trackable identities (authenticated and shadow) hold at most one
    reaction row per story and toggle or switch it. Pseudo identities keep
    no row: every call is a fresh increment and cannot be undone.

    Counters are updated read-modify-write; concurrent writers race and the
    last write wins.
    """

    def __init__(
        self,
        story_repository: StoryRepository,
        reaction_repository: ReactionRepository,
    ) -> None:
        """Initialize reaction service.

        Args:
            story_repository: Story repository (holds the counters)
            reaction_repository: Reaction repository
        """
        self.story_repository = story_repository
        self.reaction_repository = reaction_repository

    async def react(
        self,
        story_id: StoryId,
        reaction_type: ReactionType,
        identity: ResolvedIdentity,
    ) -> ReactionOutcome:
        """Place, toggle off or switch a reaction.

        Args:
            story_id: Story ID
            reaction_type: like or love
            identity: Resolved actor identity

        Returns:
            Reaction outcome

        Raises:
            NotFoundError: If the story does not exist
            InfrastructureError: If the store fails
        """
        with logfire.span(
            "react",
            story_id=story_id,
            reaction_type=reaction_type.value,
            identity_class=identity.identity_class.value,
        ):
            story = await self.story_repository.find_by_id(story_id)
            if story is None:
                logfire.warn("Reaction on non-existent story", story_id=story_id)
                raise NotFoundError("Story", story_id)

            match identity.identity_class:
                case IdentityClass.AUTHENTICATED | IdentityClass.SHADOW:
                    return await self._toggle(story, reaction_type, identity.owner_key)
                case IdentityClass.PSEUDO:
                    return await self._increment(story, reaction_type)

    async def _increment(
        self, story: Story, reaction_type: ReactionType
    ) -> ReactionOutcome:
        likes, loves = adjusted_counters(story, {reaction_type: 1})
        await self.story_repository.set_counters(story.id, likes, loves)
        logfire.info(
            "Untracked reaction counted",
            story_id=story.id,
            reaction_type=reaction_type.value,
        )
        return ReactionOutcome(reacted=True, type=reaction_type)

    async def _toggle(
        self, story: Story, reaction_type: ReactionType, owner_key: OwnerKey
    ) -> ReactionOutcome:
        existing = await self.reaction_repository.find(owner_key, story.id)

        if existing is None:
            await self.reaction_repository.save(
                Reaction(
                    id=reaction_id_for(owner_key, story.id),
                    user_id=owner_key,
                    story_id=story.id,
                    type=reaction_type,
                )
            )
            likes, loves = adjusted_counters(story, {reaction_type: 1})
            await self.story_repository.set_counters(story.id, likes, loves)
            logfire.info("Reaction added", story_id=story.id, owner_key=owner_key)
            return ReactionOutcome(reacted=True, type=reaction_type)

        if existing.type == reaction_type:
            await self.reaction_repository.delete(existing.id)
            likes, loves = adjusted_counters(story, {reaction_type: -1})
            await self.story_repository.set_counters(story.id, likes, loves)
            logfire.info("Reaction removed", story_id=story.id, owner_key=owner_key)
            return ReactionOutcome(reacted=False, type=None)

        await self.reaction_repository.update_type(existing.id, reaction_type)
        likes, loves = adjusted_counters(story, {existing.type: -1, reaction_type: 1})
        await self.story_repository.set_counters(story.id, likes, loves)
        logfire.info(
            "Reaction switched",
            story_id=story.id,
            owner_key=owner_key,
            old_type=existing.type.value,
            new_type=reaction_type.value,
        )
        return ReactionOutcome(reacted=True, type=reaction_type)

    async def get_reaction(
        self, story_id: StoryId, identity: ResolvedIdentity
    ) -> ReactionOutcome:
        """Current reaction of an identity on a story.

        Pseudo identities have no stored reaction and always get "none".

        Args:
            story_id: Story ID
            identity: Resolved actor identity

        Returns:
            Reaction outcome
        """
        match identity.identity_class:
            case IdentityClass.AUTHENTICATED | IdentityClass.SHADOW:
                reaction = await self.reaction_repository.find(
                    identity.owner_key, story_id
                )
            case IdentityClass.PSEUDO:
                reaction = None

        if reaction is None:
            return ReactionOutcome(reacted=False, type=None)
        return ReactionOutcome(reacted=True, type=reaction.type)
