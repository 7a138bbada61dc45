"""
Tests del pipeline de importacion (fuente -> filtro -> UPSERT).

La fuente se reemplaza por un AsyncMock; la persistencia es real
(SQLite en memoria) para verificar commit, rollback y SAVEPOINT.
"""
from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from post_importer.application.use_cases.post_import_use_cases import PostImportUseCases
from post_importer.domain.entities.post import RemotePost, StoredPost
from post_importer.infrastructure.external.posts_source import FetchResult
from post_importer.infrastructure.repositories.post_repository_impl import PostRepositoryImpl
from post_importer.shared.exceptions.domain import (
    PersistenceFailureException,
    SourceUnavailableException,
)
from post_importer.shared.utils.datetime_utils import DateTimeUtils


def _source(*posts: RemotePost) -> AsyncMock:
    source = AsyncMock()
    source.fetch_all = AsyncMock(return_value=FetchResult(posts=list(posts)))
    return source


def _sample_posts():
    return (
        RemotePost(external_id=101, author_id=1, title="hello world", body="x"),
        RemotePost(external_id=102, author_id=2, title="QUI venture", body="y"),
    )


@pytest.mark.asyncio
async def test_import_with_keyword_returns_matching_post(db_session):
    use_cases = PostImportUseCases(db_session, _source(*_sample_posts()))

    result = await use_cases.import_filtered("qui")

    assert [p.external_id for p in result] == [102]
    assert result[0].id is not None
    assert result[0].imported_at is not None


@pytest.mark.asyncio
async def test_import_with_empty_keyword_returns_all(db_session):
    use_cases = PostImportUseCases(db_session, _source(*_sample_posts()))

    result = await use_cases.import_filtered("")

    assert [p.external_id for p in result] == [101, 102]
    stored = await PostRepositoryImpl(db_session).list_all()
    assert [p.external_id for p in stored] == [101, 102]


@pytest.mark.asyncio
async def test_reimport_updates_content_and_keeps_identity(db_session):
    first = await PostImportUseCases(
        db_session,
        _source(RemotePost(external_id=102, author_id=2, title="QUI venture", body="y")),
    ).import_filtered("qui")

    second = await PostImportUseCases(
        db_session,
        _source(RemotePost(external_id=102, author_id=3, title="QUI updated", body="z")),
    ).import_filtered("qui")

    assert len(second) == 1
    assert second[0].id == first[0].id
    assert second[0].imported_at == first[0].imported_at
    assert second[0].title == "QUI updated"
    assert second[0].author_id == 3

    stored = await PostRepositoryImpl(db_session).list_all()
    assert len(stored) == 1
    assert stored[0].title == "QUI updated"


@pytest.mark.asyncio
async def test_repeated_import_is_idempotent(db_session):
    source = _source(*_sample_posts())

    first = await PostImportUseCases(db_session, source).import_filtered(None)
    second = await PostImportUseCases(db_session, source).import_filtered(None)

    assert len(first) == len(second) == 2
    assert [(p.id, p.imported_at) for p in first] == [(p.id, p.imported_at) for p in second]
    assert len(await PostRepositoryImpl(db_session).list_all()) == 2


@pytest.mark.asyncio
async def test_empty_source_writes_nothing(db_session):
    result = await PostImportUseCases(db_session, _source()).import_filtered("qui")

    assert result == []
    assert await PostRepositoryImpl(db_session).list_all() == []


@pytest.mark.asyncio
async def test_no_match_writes_nothing(db_session):
    result = await PostImportUseCases(db_session, _source(*_sample_posts())).import_filtered("zzz")

    assert result == []
    assert await PostRepositoryImpl(db_session).list_all() == []


@pytest.mark.asyncio
async def test_source_failure_propagates_without_writes(db_session):
    source = AsyncMock()
    source.fetch_all = AsyncMock(
        side_effect=SourceUnavailableException("caida", details={"reason": "timeout"})
    )

    with pytest.raises(SourceUnavailableException):
        await PostImportUseCases(db_session, source).import_filtered(None)

    assert await PostRepositoryImpl(db_session).list_all() == []


@pytest.mark.asyncio
async def test_persistence_failure_rolls_back_whole_import(db_session):
    repo = PostRepositoryImpl(db_session)
    real_insert = repo.insert
    calls = {"count": 0}

    async def failing_insert(post: StoredPost) -> StoredPost:
        calls["count"] += 1
        if calls["count"] == 2:
            raise OperationalError("INSERT INTO posts", {}, Exception("disk I/O error"))
        return await real_insert(post)

    repo.insert = failing_insert
    use_cases = PostImportUseCases(db_session, _source(*_sample_posts()), repo)

    with pytest.raises(PersistenceFailureException) as exc_info:
        await use_cases.import_filtered(None)

    assert exc_info.value.status_code == 500
    assert exc_info.value.details["external_id"] == 102
    assert await PostRepositoryImpl(db_session).list_all() == []


@pytest.mark.asyncio
async def test_length_violation_aborts_before_any_write(db_session):
    source = _source(
        RemotePost(external_id=1, title="ok", body="b"),
        RemotePost(external_id=2, title="t" * 201, body="b"),
    )

    with pytest.raises(PersistenceFailureException) as exc_info:
        await PostImportUseCases(db_session, source).import_filtered(None)

    assert exc_info.value.details["external_id"] == 2
    assert await PostRepositoryImpl(db_session).list_all() == []


@pytest.mark.asyncio
async def test_concurrent_insert_is_resolved_with_read_repair(db_session):
    repo = PostRepositoryImpl(db_session)
    imported_at = DateTimeUtils.now_utc()
    # Otra importacion ya inserto la fila entre el find y el insert
    existing = await repo.insert(
        StoredPost(external_id=102, author_id=2, title="QUI venture", body="y", imported_at=imported_at)
    )
    await db_session.commit()

    real_find = repo.find_by_external_id
    calls = {"count": 0}

    async def stale_find(external_id: int):
        calls["count"] += 1
        if calls["count"] == 1:
            return None
        return await real_find(external_id)

    repo.find_by_external_id = stale_find
    use_cases = PostImportUseCases(
        db_session,
        _source(RemotePost(external_id=102, author_id=2, title="QUI updated", body="y")),
        repo,
    )

    result = await use_cases.import_filtered("qui")

    assert len(result) == 1
    assert result[0].id == existing.id
    assert result[0].imported_at == existing.imported_at
    assert result[0].title == "QUI updated"

    stored = await PostRepositoryImpl(db_session).list_all()
    assert len(stored) == 1
    assert stored[0].title == "QUI updated"


@pytest.mark.asyncio
async def test_unique_violation_without_existing_row_is_persistence_failure(db_session):
    repo = PostRepositoryImpl(db_session)
    repo.insert = AsyncMock(side_effect=_integrity_error())
    use_cases = PostImportUseCases(
        db_session,
        _source(RemotePost(external_id=7, title="x", body="y")),
        repo,
    )

    with pytest.raises(PersistenceFailureException) as exc_info:
        await use_cases.import_filtered(None)

    assert exc_info.value.details["external_id"] == 7
    assert await PostRepositoryImpl(db_session).list_all() == []


def _integrity_error():
    return IntegrityError("INSERT INTO posts", {}, Exception("NOT NULL constraint failed"))
