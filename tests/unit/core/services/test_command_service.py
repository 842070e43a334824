import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from address_book.core.common.exceptions import CommandError, ParseError
from address_book.core.domain.command_results import CommandResult
from address_book.core.services.command_service import CommandService
from address_book.core.services.model_manager import ModelManager
from structlog.testing import capture_logs


@pytest.fixture
def service(model: ModelManager) -> CommandService:
    return CommandService(model)


@pytest.mark.asyncio
async def test_execute_notes_end_to_end(service: CommandService):
    # Act
    added = await service.execute("notes a/Carl Kurz nt/Owes me lunch")
    viewed = await service.execute("notes v/Carl Kurz")

    # Assert
    assert added.message == "Added notes for Carl Kurz: Owes me lunch"
    assert viewed.message == "Notes for Carl Kurz: Owes me lunch"


@pytest.mark.asyncio
async def test_parse_errors_propagate(service: CommandService, caplog):
    with caplog.at_level(logging.WARNING):
        with pytest.raises(ParseError):
            await service.execute("notes v/Amy d/Amy")

    assert "Failed to parse command" in caplog.text


@pytest.mark.asyncio
async def test_command_errors_propagate(service: CommandService):
    with capture_logs() as logs:
        with pytest.raises(CommandError, match="No person found with name: Zed"):
            await service.execute("notes d/Zed")

    assert logs == [
        {
            "event": "command_failed",
            "log_level": "warning",
            "command": "notes",
            "error": {
                "message": "No person found with name: Zed",
                "type": "CommandError",
                "details": {"name": "Zed", "mode": "delete"},
            },
        }
    ]


@pytest.mark.asyncio
async def test_success_is_logged_with_command_context(service: CommandService):
    with capture_logs() as logs:
        await service.execute("notes v/Alice Pauline")

    assert logs == [
        {
            "event": "command_succeeded",
            "log_level": "debug",
            "command": "notes",
            "result": "Notes for Alice Pauline: Likes tea",
        }
    ]


@pytest.mark.asyncio
async def test_uses_injected_parser(model: ModelManager):
    # Arrange
    command = MagicMock()
    command.name = "fake"
    command.execute = AsyncMock(
        return_value=CommandResult(success=True, message="done", name="fake")
    )
    parser = MagicMock()
    parser.parse_command.return_value = command
    service = CommandService(model, parser)

    # Act
    result = await service.execute("anything at all")

    # Assert
    parser.parse_command.assert_called_once_with("anything at all")
    command.execute.assert_awaited_once_with(model)
    assert result.message == "done"
    assert service.model is model
