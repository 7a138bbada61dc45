"""
Tests unitarios para las entidades RemotePost y StoredPost.
"""
from datetime import datetime, timezone

import pytest

from post_importer.domain.entities.post import RemotePost, StoredPost
from post_importer.shared.constants.post_constants import BODY_MAX_LENGTH, TITLE_MAX_LENGTH


def test_from_remote_copies_fields_without_identity():
    remote = RemotePost(external_id=7, author_id=3, title="t", body="b")

    post = StoredPost.from_remote(remote)

    assert post.external_id == 7
    assert post.author_id == 3
    assert post.title == "t"
    assert post.body == "b"
    assert post.id is None
    assert post.imported_at is None


def test_title_at_limit_is_accepted():
    post = StoredPost(external_id=1, title="a" * TITLE_MAX_LENGTH)
    assert len(post.title) == TITLE_MAX_LENGTH


def test_title_over_limit_raises_error():
    with pytest.raises(ValueError):
        StoredPost(external_id=1, title="a" * (TITLE_MAX_LENGTH + 1))


def test_body_over_limit_raises_error():
    with pytest.raises(ValueError):
        StoredPost.from_remote(RemotePost(external_id=1, body="b" * (BODY_MAX_LENGTH + 1)))


def test_overwrite_content_keeps_id_and_imported_at():
    imported_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    stored = StoredPost(external_id=102, author_id=2, title="QUI venture", body="y", id=5, imported_at=imported_at)
    incoming = StoredPost(external_id=102, author_id=9, title="QUI updated", body=None)

    stored.overwrite_content(incoming)

    assert stored.id == 5
    assert stored.imported_at == imported_at
    assert stored.author_id == 9
    assert stored.title == "QUI updated"
    assert stored.body is None
