"""Unit tests for document mappers."""

from datetime import UTC, datetime

import pytest

from sodfa.adapter.store import SERVER_TIMESTAMP, StoredDocument
from sodfa.domain.model import Story
from sodfa.domain.value import StoryId, StoryStatus, TagName
from sodfa.persistence.mappers import (
    STORIES,
    DocumentMappingError,
    doc_to_comment,
    doc_to_reaction,
    doc_to_story,
    story_to_document,
)


class TestStoryMapping:
    """Story document conversion."""

    def test_document_uses_frontend_field_names(self):
        story = Story(
            id=StoryId(""),
            title="Lost Book",
            content="content",
            excerpt="content",
            tags=[TagName("travel")],
            author_id=None,
            author="Amira",
        )

        data = story_to_document(story)

        assert data["authorId"] is None
        assert data["isAnonymous"] is False
        assert data["tags"] == ["travel"]
        assert data["status"] == "pending"
        assert data["createdAt"] is SERVER_TIMESTAMP
        assert data["updatedAt"] is SERVER_TIMESTAMP

    def test_legacy_document_defaults(self):
        """Old documents without tags, status or counters still load."""
        doc = StoredDocument(
            id="s1",
            data={"title": "Old", "content": "Old story", "author": "x"},
        )

        story = doc_to_story(doc)

        assert story.tag_names == ["general"]
        assert story.status is None
        assert (story.likes, story.loves) == (0, 0)
        assert story.author_id is None

    def test_negative_counters_are_clamped(self):
        doc = StoredDocument(
            id="s1",
            data={
                "title": "T",
                "content": "C",
                "author": "x",
                "tags": ["love"],
                "likes": -2,
                "loves": 3,
                "status": "approved",
            },
        )

        story = doc_to_story(doc)

        assert (story.likes, story.loves) == (0, 3)
        assert story.status == StoryStatus.APPROVED


class TestCommentMapping:
    """Comment document conversion."""

    def test_doc_to_comment(self):
        created = datetime(2025, 3, 1, tzinfo=UTC)
        doc = StoredDocument(
            id="c1",
            data={
                "storyId": "s1",
                "authorId": None,
                "author": "زائر مجهول",
                "isAnonymous": True,
                "content": "hello",
                "createdAt": created,
            },
        )

        comment = doc_to_comment(doc)

        assert comment.id == "c1"
        assert comment.story_id == "s1"
        assert comment.author_id is None
        assert comment.is_anonymous is True
        assert comment.created_at == created


class TestLenientReads:
    """Documents written by other clients."""

    def test_out_of_range_fields_are_defaulted(self):
        doc = StoredDocument(
            id="s1",
            data={
                "title": "T" * 301,
                "content": "",
                "tags": ["travel", "x" * 60, "  ", "travel"],
                "likes": "many",
                "loves": None,
            },
        )

        story = doc_to_story(doc)

        assert len(story.title) == 301
        assert story.content == ""
        assert story.author == ""
        assert story.tag_names == ["travel"]
        assert (story.likes, story.loves) == (0, 0)

    def test_unknown_status_raises_mapping_error(self):
        doc = StoredDocument(id="s1", data={"title": "T", "status": "archived"})

        with pytest.raises(DocumentMappingError) as exc_info:
            doc_to_story(doc)

        assert exc_info.value.collection == STORIES
        assert exc_info.value.doc_id == "s1"

    def test_reaction_without_type_raises_mapping_error(self):
        doc = StoredDocument(id="r1", data={"userId": "u", "storyId": "s1"})

        with pytest.raises(DocumentMappingError):
            doc_to_reaction(doc)

    def test_comment_without_story_raises_mapping_error(self):
        doc = StoredDocument(id="c1", data={"content": "orphan"})

        with pytest.raises(DocumentMappingError):
            doc_to_comment(doc)
