import pytest
from address_book.core.commands.argument_tokenizer import ArgumentMultimap, tokenize
from address_book.core.commands.cli_syntax import (
    PREFIX_ADD,
    PREFIX_NAME,
    PREFIX_NOTES,
    PREFIX_TAG,
    PREFIX_VIEW,
    Prefix,
)
from address_book.core.common.exceptions import ParseError


def test_no_prefixes_gives_preamble_only():
    arg_map = tokenize("  some random text ", PREFIX_VIEW)

    assert arg_map.preamble == "some random text"
    assert not arg_map.is_present(PREFIX_VIEW)
    assert arg_map.get_value(PREFIX_VIEW) is None


def test_values_are_split_and_stripped():
    arg_map = tokenize(" a/John Doe  nt/Likes  tea ", PREFIX_ADD, PREFIX_NOTES)

    assert arg_map.preamble == ""
    assert arg_map.get_value(PREFIX_ADD) == "John Doe"
    assert arg_map.get_value(PREFIX_NOTES) == "Likes  tea"


def test_prefix_order_does_not_matter():
    arg_map = tokenize(" nt/hello a/Amy", PREFIX_ADD, PREFIX_NOTES)

    assert arg_map.get_value(PREFIX_ADD) == "Amy"
    assert arg_map.get_value(PREFIX_NOTES) == "hello"


def test_prefix_inside_value_is_ignored():
    arg_map = tokenize(" nt/see http://a/b and data/x", PREFIX_NOTES, PREFIX_ADD)

    assert arg_map.get_value(PREFIX_NOTES) == "see http://a/b and data/x"
    assert not arg_map.is_present(PREFIX_ADD)


def test_repeated_prefix_keeps_all_values():
    arg_map = tokenize(" t/friends t/colleagues n/Amy", PREFIX_TAG, PREFIX_NAME)

    assert arg_map.get_all_values(PREFIX_TAG) == ["friends", "colleagues"]
    assert arg_map.get_value(PREFIX_TAG) == "colleagues"


def test_empty_value_is_present():
    arg_map = tokenize(" nt/", PREFIX_NOTES)

    assert arg_map.get_all_values(PREFIX_NOTES) == [""]


def test_verify_no_duplicates_raises_for_repeated_prefix():
    arg_map = tokenize(" v/Amy v/Bob", PREFIX_VIEW)

    with pytest.raises(ParseError) as exc_info:
        arg_map.verify_no_duplicate_prefixes_for(PREFIX_VIEW)

    assert "v/" in exc_info.value.message
    assert exc_info.value.details == {"prefixes": ["v/"]}


def test_verify_no_duplicates_passes_for_single_values():
    arg_map = ArgumentMultimap()
    arg_map.put(Prefix("x/"), "1")

    arg_map.verify_no_duplicate_prefixes_for(Prefix("x/"), Prefix("y/"))
