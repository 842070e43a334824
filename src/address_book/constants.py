from enum import Enum

MESSAGE_INVALID_COMMAND_FORMAT: str = "Invalid command format! \n{usage}"
MESSAGE_UNKNOWN_COMMAND: str = "Unknown command"
MESSAGE_DUPLICATE_FIELDS: str = (
    "Multiple values specified for the following single-valued field(s): {prefixes}"
)

DEFAULT_PROMPT: str = "> "
ENV_PREFIX: str = "ADDRESS_BOOK_"


class ConfigKey(str, Enum):
    """Enum for environment-backed configuration keys."""

    LOG_LEVEL = "LOG_LEVEL"
    LOG_FILE = "LOG_FILE"
    SEED_FILE = "SEED_FILE"
    SAMPLE_DATA = "SAMPLE_DATA"

    @property
    def env_name(self) -> str:
        return f"{ENV_PREFIX}{self.value}"
