from __future__ import annotations

import logging

from address_book.core.commands.parser import AddressBookParser
from address_book.core.common.exceptions import CommandError, ParseError
from address_book.core.common.logging_utils import LogContext, get_logger
from address_book.core.domain.command_results import CommandResult
from address_book.core.interfaces.model_interface import IModel

logger = logging.getLogger(__name__)


class CommandService:
    """
    Parses user input and executes the resulting command against the model.
    """

    def __init__(self, model: IModel, parser: AddressBookParser | None = None):
        """
        Initializes the command service.

        Args:
            model: The model commands operate on.
            parser: The parser used to turn input lines into commands.
        """
        self._model = model
        self._parser = parser or AddressBookParser()

    @property
    def model(self) -> IModel:
        return self._model

    async def execute(self, command_text: str) -> CommandResult:
        """
        Parse and execute one line of user input.

        Raises:
            ParseError: If the input is not a valid command
            CommandError: If the command fails against the current model
        """
        logger.info("Executing command: %s", command_text.strip())

        try:
            command = self._parser.parse_command(command_text)
        except ParseError as e:
            logger.warning("Failed to parse command: %s", e.message)
            raise

        with LogContext(get_logger(__name__), command=command.name) as log:
            try:
                result = await command.execute(self._model)
            except CommandError as e:
                log.warning("command_failed", **e.to_dict())
                raise

            log.debug("command_succeeded", result=result.message)
        return result
