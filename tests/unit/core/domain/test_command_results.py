from address_book.core.domain.command_results import CommandResult


def test_defaults():
    result = CommandResult(success=True, message="Listed all persons")

    assert result.name == ""
    assert result.data == {}
    assert result.exit is False


def test_name_is_not_taken_from_data():
    result = CommandResult(success=True, message="ok", data={"name": "Alice Pauline"})

    assert result.name == ""
    assert result.data == {"name": "Alice Pauline"}
