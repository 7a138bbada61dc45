"""
Tests unitarios del filtro por palabra clave.
"""
from post_importer.application.services.post_filter import (
    filter_by_keyword,
    normalize_keyword,
    title_matches,
)
from post_importer.domain.entities.post import RemotePost


def _posts():
    return [
        RemotePost(external_id=101, author_id=1, title="hello world", body="x"),
        RemotePost(external_id=102, author_id=2, title="QUI venture", body="y"),
        RemotePost(external_id=103, author_id=2, title=None, body="z"),
        RemotePost(external_id=104, author_id=3, title="aliquid quia", body="w"),
    ]


def test_normalize_keyword():
    assert normalize_keyword(None) == ""
    assert normalize_keyword("") == ""
    assert normalize_keyword("QuI") == "qui"
    # sin trim: los espacios forman parte de la busqueda
    assert normalize_keyword(" Qui ") == " qui "


def test_empty_keyword_matches_everything_including_null_titles():
    assert title_matches(None, "")
    assert title_matches("anything", "")


def test_null_title_never_matches_non_empty_keyword():
    assert not title_matches(None, "qui")


def test_filter_is_case_insensitive_and_preserves_order():
    result = filter_by_keyword(_posts(), "qui")

    assert [p.external_id for p in result] == [102, 104]


def test_filter_with_uppercase_keyword():
    result = filter_by_keyword(_posts(), "HELLO")

    assert [p.external_id for p in result] == [101]


def test_filter_without_keyword_keeps_all():
    assert [p.external_id for p in filter_by_keyword(_posts(), None)] == [101, 102, 103, 104]
    assert [p.external_id for p in filter_by_keyword(_posts(), "")] == [101, 102, 103, 104]


def test_filter_whitespace_is_not_trimmed():
    result = filter_by_keyword(_posts(), " venture")

    assert [p.external_id for p in result] == [102]
    assert filter_by_keyword(_posts(), "venture ") == []


def test_filter_no_matches():
    assert filter_by_keyword(_posts(), "zzz") == []
