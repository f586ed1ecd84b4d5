"""Consistency checks for the static tag tables."""

import pytest

from tagsniff.tables import EXTENSIONS, EXTENSIONS_NEED_BINARY_CHECK, INTERPRETERS, NAMES
from tagsniff.tags import ENCODING_TAGS, MODE_TAGS, TYPE_TAGS


@pytest.mark.parametrize("table", [EXTENSIONS, NAMES], ids=["extensions", "names"])
def test_entries_carry_exactly_one_encoding_tag(table) -> None:
    offenders = {key: sorted(tags) for key, tags in table.items() if len(tags & ENCODING_TAGS) != 1}

    assert offenders == {}


def test_binary_check_extensions_leave_encoding_to_content() -> None:
    for extension, tags in EXTENSIONS_NEED_BINARY_CHECK.items():
        assert not tags & ENCODING_TAGS, extension


def test_extension_tables_are_disjoint() -> None:
    assert set(EXTENSIONS).isdisjoint(EXTENSIONS_NEED_BINARY_CHECK)


def test_extension_keys_are_normalized() -> None:
    for key in [*EXTENSIONS, *EXTENSIONS_NEED_BINARY_CHECK]:
        assert key == key.lower()
        assert not key.startswith(".")


def test_tables_never_use_filesystem_tags() -> None:
    reserved = TYPE_TAGS | MODE_TAGS
    for table in (EXTENSIONS, EXTENSIONS_NEED_BINARY_CHECK, NAMES, INTERPRETERS):
        for key, tags in table.items():
            assert not tags & reserved, key


def test_interpreters_never_claim_an_encoding() -> None:
    for name, tags in INTERPRETERS.items():
        assert not tags & ENCODING_TAGS, name


def test_tag_groups_are_disjoint() -> None:
    assert TYPE_TAGS.isdisjoint(MODE_TAGS)
    assert TYPE_TAGS.isdisjoint(ENCODING_TAGS)
    assert MODE_TAGS.isdisjoint(ENCODING_TAGS)


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        EXTENSIONS["py"] = frozenset({"text"})  # type: ignore[index]
