"""Error taxonomy for the command executor and remote protocol status codes."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Status codes carried in the ``status`` field of a response envelope."""

    SUCCESS = 0
    NO_SUCH_ELEMENT = 7
    NO_SUCH_FRAME = 8
    UNKNOWN_COMMAND = 9
    STALE_ELEMENT_REFERENCE = 10
    ELEMENT_NOT_VISIBLE = 11
    INVALID_ELEMENT_STATE = 12
    UNKNOWN_ERROR = 13
    ELEMENT_NOT_SELECTABLE = 15
    JAVASCRIPT_ERROR = 17
    XPATH_LOOKUP_ERROR = 19
    TIMEOUT = 21
    NO_SUCH_WINDOW = 23
    INVALID_COOKIE_DOMAIN = 24
    UNABLE_TO_SET_COOKIE = 25
    UNEXPECTED_ALERT_OPEN = 26
    NO_SUCH_ALERT = 27
    SCRIPT_TIMEOUT = 28
    INVALID_ELEMENT_COORDINATES = 29
    IME_NOT_AVAILABLE = 30
    IME_ENGINE_ACTIVATION_FAILED = 31
    INVALID_SELECTOR_ERROR = 32
    SESSION_NOT_CREATED = 33
    MOVE_TARGET_OUT_OF_BOUNDS = 34
    SQL_DATABASE_ERROR = 35
    INVALID_XPATH_SELECTOR = 51
    INVALID_XPATH_SELECTOR_RETURN_TYPE = 52
    INVALID_ARGUMENT = 61
    METHOD_NOT_ALLOWED = 405


class WireError(Exception):
    """Client-side failure raised while executing a command."""

    def __init__(self, code: str, message: str) -> None:
        """Initialize with a machine-readable code and a human-readable message.

        Args:
            code: Machine-readable error code (e.g. "unknown_command").
            message: Human-readable error description.

        """
        super().__init__(message)
        self.code = code


class UnknownCommandError(WireError):
    """No resource is mapped to the requested command name."""

    def __init__(self, message: str) -> None:  # noqa: D107
        super().__init__("unknown_command", message)


class InvalidArgumentError(WireError):
    """A path template segment has no matching command parameter."""

    def __init__(self, message: str) -> None:  # noqa: D107
        super().__init__("invalid_argument", message)


class RedirectParseError(WireError):
    """The server answered with a redirect whose Location cannot be parsed."""

    def __init__(self, message: str) -> None:  # noqa: D107
        super().__init__("redirect_parse_failure", message)


class TransportError(WireError):
    """Network-level failure while talking to the remote end."""

    def __init__(self, message: str) -> None:  # noqa: D107
        super().__init__("transport", message)
