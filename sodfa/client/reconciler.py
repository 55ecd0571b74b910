"""Optimistic UI reconciliation.

A mutation command snapshots the displayed state, applies a tentative
change right away, then issues the remote call. On failure the exact
snapshot is restored before the error surfaces; on success reactions keep
the tentative state and comments swap the placeholder for a refetch of the
authoritative list.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from sodfa.application.usecase.common import CommentItem
from sodfa.domain.value import ReactionType
from sodfa.util.logging import get_logger

TEMP_ID_PREFIX = "temp-"

logger = get_logger(__name__)


class ReconciliationError(Exception):
    """Remote mutation failed; the view was rolled back."""

    def __init__(self, message: str, cause: Exception):
        self.cause = cause
        super().__init__(message)


class ReactionView(BaseModel):
    """Displayed reaction state of a story page."""

    likes: int = 0
    loves: int = 0
    user_reaction: Optional[ReactionType] = None


class CommentView(BaseModel):
    """Displayed comment. Placeholders are pending until reconciled."""

    id: str
    author: str
    is_anonymous: bool = False
    content: str
    created_at: Optional[datetime] = None
    is_pending: bool = False

    @classmethod
    def from_item(cls, item: CommentItem) -> "CommentView":
        """Build from an API comment."""
        return cls(
            id=item.id,
            author=item.author,
            is_anonymous=item.is_anonymous,
            content=item.content,
            created_at=item.created_at,
        )


class CommentThreadView(BaseModel):
    """Displayed comment list, newest first."""

    comments: list[CommentView] = Field(default_factory=list)


def is_temporary_id(comment_id: str) -> bool:
    """Whether an id belongs to a local placeholder."""
    return comment_id.startswith(TEMP_ID_PREFIX)


ViewT = TypeVar("ViewT", bound=BaseModel)


class OptimisticMutation(ABC, Generic[ViewT]):
    """Snapshot/apply/rollback command over a mutable view."""

    def __init__(self, view: ViewT) -> None:
        self.view = view
        self._snapshot: ViewT | None = None

    @abstractmethod
    def _apply_tentative(self) -> None:
        """Mutate the view as if the remote call succeeded."""
        pass

    @abstractmethod
    async def _commit(self) -> Any:
        """Issue the remote mutation."""
        pass

    async def _settle(self, result: Any) -> None:
        """Reconcile the view after a successful remote call."""
        pass

    def apply(self) -> None:
        """Snapshot the view, then apply the tentative change."""
        self._snapshot = self.view.model_copy(deep=True)
        self._apply_tentative()

    def rollback(self) -> None:
        """Restore the view to the snapshot taken by ``apply``."""
        if self._snapshot is None:
            return
        for name in type(self.view).model_fields:
            setattr(self.view, name, getattr(self._snapshot, name))
        self._snapshot = None

    async def run(self) -> Any:
        """Apply, commit and reconcile.

        Returns:
            Result of the remote call

        Raises:
            ReconciliationError: If the remote call failed (view rolled back)
        """
        self.apply()
        try:
            result = await self._commit()
        except Exception as e:
            self.rollback()
            logger.warning(f"{type(self).__name__} rolled back: {e}")
            raise ReconciliationError(str(e), cause=e) from e

        await self._settle(result)
        self._snapshot = None
        return result


def _bump(view: ReactionView, type: ReactionType, delta: int) -> None:
    field = type.counter_field
    setattr(view, field, max(getattr(view, field) + delta, 0))


class ReactionMutation(OptimisticMutation[ReactionView]):
    """Like/love click.

    Tracked identities toggle or switch their reaction; untracked (pseudo)
    identities always add one, like the server does.

    Args:
        view: Reaction view to mutate
        type: Clicked reaction
        send: Remote call, e.g. ``lambda: client.react(story_id, type)``
        tracked: False for pseudo identities
    """

    def __init__(
        self,
        view: ReactionView,
        type: ReactionType,
        send: Callable[[], Awaitable[Any]],
        tracked: bool = True,
    ) -> None:
        super().__init__(view)
        self.type = type
        self.send = send
        self.tracked = tracked

    def _apply_tentative(self) -> None:
        current = self.view.user_reaction
        if not self.tracked or current is None:
            _bump(self.view, self.type, 1)
            self.view.user_reaction = self.type
        elif current == self.type:
            _bump(self.view, self.type, -1)
            self.view.user_reaction = None
        else:
            _bump(self.view, current, -1)
            _bump(self.view, self.type, 1)
            self.view.user_reaction = self.type

    async def _commit(self) -> Any:
        return await self.send()


class CommentMutation(OptimisticMutation[CommentThreadView]):
    """Comment submission.

    Args:
        view: Comment thread view to mutate
        text: Comment text (trimmed, must not be empty)
        author: Display name shown on the placeholder
        send: Remote call creating the comment
        refetch: Loads the authoritative list after success
        is_anonymous: Anonymous flag shown on the placeholder

    Raises:
        ValueError: If the trimmed text is empty
    """

    def __init__(
        self,
        view: CommentThreadView,
        text: str,
        author: str,
        send: Callable[[], Awaitable[Any]],
        refetch: Callable[[], Awaitable[list[CommentView]]],
        is_anonymous: bool = False,
    ) -> None:
        super().__init__(view)
        self.text = text.strip()
        if not self.text:
            raise ValueError("Comment text cannot be empty")
        self.author = author
        self.is_anonymous = is_anonymous
        self.send = send
        self.refetch = refetch
        self.placeholder_id = f"{TEMP_ID_PREFIX}{int(time.time() * 1000)}"

    def _apply_tentative(self) -> None:
        placeholder = CommentView(
            id=self.placeholder_id,
            author=self.author,
            is_anonymous=self.is_anonymous,
            content=self.text,
            created_at=datetime.now(),
            is_pending=True,
        )
        self.view.comments = [placeholder, *self.view.comments]

    async def _commit(self) -> Any:
        return await self.send()

    async def _settle(self, result: Any) -> None:
        self.view.comments = [
            c for c in self.view.comments if c.id != self.placeholder_id
        ]
        try:
            self.view.comments = await self.refetch()
        except Exception as e:
            # Comment is stored; the list stays without it until the next load
            logger.warning(f"Comment list refetch failed: {e}")
