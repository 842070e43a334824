import pytest
from address_book.core.common.exceptions import CommandError
from address_book.core.domain.commands.notes_command import NotesCommand, NotesMode
from address_book.core.domain.person import Name, Notes, Person
from address_book.core.domain.predicates import NameContainsKeywordsPredicate
from address_book.core.services.model_manager import ModelManager


def _find(model: ModelManager, name: str) -> Person:
    return next(p for p in model.get_address_book().persons if str(p.name) == name)


@pytest.mark.asyncio
async def test_view_returns_notes_verbatim(model: ModelManager):
    # Arrange
    command = NotesCommand(Name(value="Alice Pauline"), NotesMode.VIEW)

    # Act
    result = await command.execute(model)

    # Assert
    assert result.success is True
    assert result.name == "notes"
    assert result.message == "Notes for Alice Pauline: Likes tea"
    assert result.data == {"notes": "Likes tea"}


@pytest.mark.asyncio
async def test_view_does_not_modify_model(model: ModelManager):
    before = model.get_address_book().persons

    await NotesCommand(Name(value="Alice Pauline"), NotesMode.VIEW).execute(model)

    assert model.get_address_book().persons == before


@pytest.mark.asyncio
async def test_view_person_without_notes(model: ModelManager):
    result = await NotesCommand(Name(value="Carl Kurz"), NotesMode.VIEW).execute(model)

    assert result.message == "Notes for Carl Kurz: "


@pytest.mark.asyncio
async def test_add_sets_notes_and_keeps_other_fields(model: ModelManager, benson: Person):
    command = NotesCommand(
        Name(value="Benson Meier"), NotesMode.ADD, Notes(value="Prefers email contact")
    )

    result = await command.execute(model)

    assert result.message == "Added notes for Benson Meier: Prefers email contact"
    assert result.data == {"notes": "Prefers email contact"}
    edited = _find(model, "Benson Meier")
    assert edited.notes == Notes(value="Prefers email contact")
    assert edited == benson.with_notes(Notes(value="Prefers email contact"))


@pytest.mark.asyncio
async def test_add_overwrites_existing_notes(model: ModelManager):
    command = NotesCommand(
        Name(value="Alice Pauline"), NotesMode.ADD, Notes(value="Switched to coffee")
    )

    await command.execute(model)

    assert str(_find(model, "Alice Pauline").notes) == "Switched to coffee"


@pytest.mark.asyncio
async def test_add_preserves_list_order(model: ModelManager):
    names_before = [str(p.name) for p in model.get_filtered_person_list()]

    await NotesCommand(
        Name(value="Benson Meier"), NotesMode.ADD, Notes(value="x")
    ).execute(model)

    assert [str(p.name) for p in model.get_filtered_person_list()] == names_before


@pytest.mark.asyncio
async def test_delete_clears_notes(model: ModelManager, alice: Person):
    result = await NotesCommand(Name(value="Alice Pauline"), NotesMode.DELETE).execute(
        model
    )

    assert result.success is True
    assert result.message == "Deleted notes for Alice Pauline"
    edited = _find(model, "Alice Pauline")
    assert edited.notes.is_empty()
    assert edited == alice.with_notes(Notes.empty())


@pytest.mark.asyncio
async def test_delete_when_no_notes_succeeds(model: ModelManager):
    result = await NotesCommand(Name(value="Carl Kurz"), NotesMode.DELETE).execute(model)

    assert result.message == "Deleted notes for Carl Kurz"
    assert _find(model, "Carl Kurz").notes.is_empty()


@pytest.mark.asyncio
@pytest.mark.parametrize("mode", [NotesMode.VIEW, NotesMode.DELETE])
async def test_unknown_name_fails(model: ModelManager, mode: NotesMode):
    command = NotesCommand(Name(value="Nobody Here"), mode)

    with pytest.raises(CommandError) as exc_info:
        await command.execute(model)

    assert exc_info.value.message == "No person found with name: Nobody Here"
    assert exc_info.value.details["name"] == "Nobody Here"


@pytest.mark.asyncio
async def test_add_for_unknown_name_fails_and_leaves_model_unchanged(model: ModelManager):
    before = model.get_address_book().persons
    command = NotesCommand(Name(value="Nobody Here"), NotesMode.ADD, Notes(value="hi"))

    with pytest.raises(CommandError, match="No person found with name: Nobody Here"):
        await command.execute(model)

    assert model.get_address_book().persons == before


@pytest.mark.asyncio
async def test_name_match_is_case_sensitive(model: ModelManager):
    command = NotesCommand(Name(value="alice pauline"), NotesMode.VIEW)

    with pytest.raises(CommandError):
        await command.execute(model)


@pytest.mark.asyncio
async def test_only_searches_filtered_list(model: ModelManager):
    model.update_filtered_person_list(NameContainsKeywordsPredicate(("Benson",)))
    command = NotesCommand(Name(value="Alice Pauline"), NotesMode.VIEW)

    with pytest.raises(CommandError):
        await command.execute(model)


@pytest.mark.asyncio
async def test_edit_keeps_current_filter(model: ModelManager):
    model.update_filtered_person_list(NameContainsKeywordsPredicate(("Benson",)))

    await NotesCommand(
        Name(value="Benson Meier"), NotesMode.ADD, Notes(value="note")
    ).execute(model)

    shown = model.get_filtered_person_list()
    assert [str(p.name) for p in shown] == ["Benson Meier"]
    assert str(shown[0].notes) == "note"


def test_constructor_rejects_missing_arguments():
    with pytest.raises(ValueError):
        NotesCommand(None, NotesMode.VIEW)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        NotesCommand(Name(value="Amy"), None)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        NotesCommand(Name(value="Amy"), NotesMode.ADD)


def test_equality():
    view_amy = NotesCommand(Name(value="Amy"), NotesMode.VIEW)

    assert view_amy == view_amy
    assert view_amy == NotesCommand(Name(value="Amy"), NotesMode.VIEW)
    assert view_amy != NotesCommand(Name(value="Bob"), NotesMode.VIEW)
    assert view_amy != NotesCommand(Name(value="Amy"), NotesMode.DELETE)
    assert view_amy != "notes v/Amy"
    assert NotesCommand(Name(value="Amy"), NotesMode.ADD, Notes(value="a")) != (
        NotesCommand(Name(value="Amy"), NotesMode.ADD, Notes(value="b"))
    )


def test_repr_lists_fields():
    command = NotesCommand(Name(value="Amy"), NotesMode.ADD, Notes(value="hello"))

    text = repr(command)

    assert text.startswith("NotesCommand(")
    assert "target_name=" in text
    assert "mode=" in text
    assert "notes=" in text


def test_usage_mentions_every_mode():
    command = NotesCommand(Name(value="Amy"), NotesMode.VIEW)

    assert command.name == "notes"
    assert "v/NAME" in command.format
    assert "a/NAME nt/NOTES" in command.format
    assert "d/NAME" in command.format
    assert len(command.examples) == 3
