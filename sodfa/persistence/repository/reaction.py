"""Document store implementation of Reaction repository."""

from typing import Optional

from sodfa.adapter.store import SERVER_TIMESTAMP, DocumentStore, FieldFilter
from sodfa.domain.model import Reaction, reaction_id_for
from sodfa.domain.repository import ReactionRepository
from sodfa.domain.value import OwnerKey, ReactionId, ReactionType, StoryId
from sodfa.persistence.mappers import REACTIONS, doc_to_reaction, reaction_to_document
from sodfa.persistence.repository.base import map_documents, translate_store_errors


class StoreReactionRepository(ReactionRepository):
    """DocumentStore implementation of ReactionRepository.

    Reaction documents use the id ``{owner_key}_{story_id}``, so a lookup
    is a direct get rather than a query.
    """

    def __init__(self, store: DocumentStore) -> None:
        """Initialize repository with a document store.

        Args:
            store: Document store client
        """
        self.store = store

    async def find(self, owner_key: OwnerKey, story_id: StoryId) -> Optional[Reaction]:
        """Find an owner's reaction on a story."""
        with translate_store_errors("find reaction"):
            doc = await self.store.get(REACTIONS, reaction_id_for(owner_key, story_id))
            return doc_to_reaction(doc) if doc else None

    async def save(self, reaction: Reaction) -> Reaction:
        """Create (or overwrite) the reaction document."""
        with translate_store_errors("save reaction"):
            await self.store.set(REACTIONS, reaction.id, reaction_to_document(reaction))
            doc = await self.store.get(REACTIONS, reaction.id)
            return doc_to_reaction(doc) if doc else reaction

    async def update_type(
        self, reaction_id: ReactionId, reaction_type: ReactionType
    ) -> None:
        """Replace the type of an existing reaction."""
        with translate_store_errors("update reaction", "Reaction", reaction_id):
            await self.store.update(
                REACTIONS,
                reaction_id,
                {"type": reaction_type.value, "updatedAt": SERVER_TIMESTAMP},
            )

    async def delete(self, reaction_id: ReactionId) -> None:
        """Delete a reaction."""
        with translate_store_errors("delete reaction"):
            await self.store.delete(REACTIONS, reaction_id)

    async def find_by_story(self, story_id: StoryId) -> list[Reaction]:
        """Find all reactions on a story."""
        with translate_store_errors("list reactions"):
            docs = await self.store.query(
                REACTIONS, filters=[FieldFilter(field="storyId", value=story_id)]
            )
        return map_documents(docs, doc_to_reaction)

    async def find_ids_by_story(self, story_id: StoryId) -> list[ReactionId]:
        """IDs of all reactions on a story, readable or not."""
        with translate_store_errors("list reaction ids"):
            docs = await self.store.query(
                REACTIONS, filters=[FieldFilter(field="storyId", value=story_id)]
            )
        return [ReactionId(doc.id) for doc in docs]
