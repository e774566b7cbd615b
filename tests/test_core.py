import pytest

from anilist_querybuilder.core import (
    ABSENT,
    Present,
    QueryRequest,
    encode_fuzzy_year,
    is_present,
    present,
    present_if_not_blank,
    present_if_not_empty,
    present_if_not_null,
    require_id,
    year_bound,
)


def test_absent_is_falsy():
    assert not ABSENT
    assert not is_present(ABSENT)


def test_present_none_is_distinct_from_absent():
    assert present(None) == Present(None)
    assert present(None) != ABSENT
    assert is_present(present(None))


@pytest.mark.parametrize("value", [None, "", " ", "\t\n  "])
def test_blank_strings_are_absent(value):
    assert present_if_not_blank(value) is ABSENT


def test_non_blank_string_is_sent_as_given():
    assert present_if_not_blank("frieren") == Present("frieren")
    assert present_if_not_blank(" one piece ") == Present(" one piece ")


@pytest.mark.parametrize("value", [None, [], ()])
def test_empty_lists_are_absent(value):
    assert present_if_not_empty(value) is ABSENT


def test_non_empty_list_keeps_order():
    assert present_if_not_empty(["Drama", "Action", "Comedy"]) == Present(["Drama", "Action", "Comedy"])


@pytest.mark.parametrize("value", [False, 0, True, "JP"])
def test_non_null_scalars_are_present(value):
    assert present_if_not_null(value) == Present(value)


def test_null_scalar_is_absent():
    assert present_if_not_null(None) is ABSENT


def test_year_encoding():
    assert encode_fuzzy_year(2016) == 20160000
    assert year_bound(2016) == Present(20160000)
    assert year_bound(None) is ABSENT


@pytest.mark.parametrize("value", [None, 0, -3, True, "12", 1.5])
def test_require_id_rejects_bad_identifiers(value):
    with pytest.raises(ValueError):
        require_id("media_id", value)


def test_require_id_accepts_positive_int():
    assert require_id("media_id", 21) == 21


def test_query_request_variables_omit_absent_fields():
    request = QueryRequest(
        operation="Test",
        document="query Test { x }",
        fields={"page": Present(1), "search": ABSENT, "status": Present(None)},
    )
    assert request.variables() == {"page": 1, "status": None}
    assert request.present_fields() == ["page", "status"]
    assert request.get("search") is ABSENT
    assert request.get("unknown") is ABSENT


def test_query_request_fields_are_read_only():
    fields = {"page": Present(1)}
    request = QueryRequest(operation="Test", document="query Test { x }", fields=fields)

    with pytest.raises(TypeError):
        request.fields["page"] = Present(2)
    fields["search"] = Present("late edit")
    assert request.variables() == {"page": 1}
