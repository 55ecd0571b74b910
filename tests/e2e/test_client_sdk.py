"""End-to-end tests for the client SDK against the API."""

import httpx
import pytest

from sodfa.client import (
    ClientSession,
    CommentMutation,
    CommentThreadView,
    CommentView,
    MemoryStorage,
    PseudoIdentityProvider,
    ReactionMutation,
    ReactionView,
    ReconciliationError,
    SodfaAPIError,
    SodfaClient,
)
from sodfa.domain.value import ReactionType
from sodfa.interface.api.app import create_app
from tests.conftest import LOST_BOOK_CONTENT
from tests.di import build_test_container


@pytest.fixture
def app():
    return create_app(build_test_container())


def _client(app, pseudo: PseudoIdentityProvider | None = None) -> SodfaClient:
    return SodfaClient(
        "http://testserver", pseudo, transport=httpx.ASGITransport(app=app)
    )


class TestClientSDK:
    """Pseudo identity, session listeners and optimistic mutations."""

    @pytest.mark.asyncio
    async def test_session_transitions_notify_listeners(self, app):
        async with _client(app) as client:
            session = ClientSession(client)
            seen = []
            session.current_session_changed(seen.append)

            await session.sign_up("a@x.io", "secret1", "Amira")
            await session.sign_out()
            await session.sign_in_anonymously()

        assert seen[0] is None
        assert seen[1].display_name == "Amira"
        assert seen[2] is None
        assert seen[3].is_ephemeral is True

    @pytest.mark.asyncio
    async def test_pseudo_identity_header_is_sent(self, app):
        pseudo = PseudoIdentityProvider(MemoryStorage())
        async with _client(app, pseudo) as client:
            me = await client.me()

        assert me.identity_class == "pseudo"
        assert me.owner_key == f"client_{pseudo.get_or_create_id()}"

    @pytest.mark.asyncio
    async def test_optimistic_reaction_and_comment(self, app):
        pseudo = PseudoIdentityProvider(MemoryStorage())
        async with _client(app, pseudo) as client:
            created = await client.create_story("Lost Book", LOST_BOOK_CONTENT)
            story_id = created.story.id

            reactions = ReactionView()
            await ReactionMutation(
                reactions,
                ReactionType.LIKE,
                send=lambda: client.react(story_id, ReactionType.LIKE),
                tracked=False,
            ).run()

            async def refetch() -> list[CommentView]:
                listing = await client.list_comments(story_id)
                return [CommentView.from_item(c) for c in listing.comments]

            thread = CommentThreadView()
            await CommentMutation(
                thread,
                "Amazing",
                "visitor",
                send=lambda: client.add_comment(story_id, "Amazing"),
                refetch=refetch,
            ).run()

            story = (await client.get_story(story_id)).story

        assert reactions.likes == story.likes == 1
        assert [c.content for c in thread.comments] == ["Amazing"]
        assert not thread.comments[0].is_pending

    @pytest.mark.asyncio
    async def test_rejected_mutation_rolls_back(self, app):
        async with _client(app) as client:
            view = ReactionView(likes=5)

            with pytest.raises(ReconciliationError) as exc_info:
                await ReactionMutation(
                    view,
                    ReactionType.LIKE,
                    send=lambda: client.react("some-story", ReactionType.LIKE),
                ).run()

        assert view == ReactionView(likes=5)
        assert isinstance(exc_info.value.cause, SodfaAPIError)
        assert exc_info.value.cause.kind == "identity_unavailable"
