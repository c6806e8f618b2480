"""Mapping of command names to the HTTP resources that implement them."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from wd_remote.command import CommandName as C
from wd_remote.errors import UnknownCommandError


@dataclass(frozen=True, slots=True)
class Resource:
    """HTTP method plus a path template with ``:name`` placeholder segments."""

    method: str
    path: str


def get(path: str) -> Resource:
    """GET resource."""
    return Resource("GET", path)


def post(path: str) -> Resource:
    """POST resource."""
    return Resource("POST", path)


def delete(path: str) -> Resource:
    """DELETE resource."""
    return Resource("DELETE", path)


class ResourceTable(Mapping[str, Resource]):
    """Immutable registry of command name → resource."""

    def __init__(self, entries: Mapping[str, Resource]) -> None:
        """Initialize from a mapping, taking a read-only copy of it.

        Args:
            entries: Command name to resource mapping.

        """
        self._entries: Mapping[str, Resource] = MappingProxyType(dict(entries))

    def __getitem__(self, name: str) -> Resource:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def resolve(self, name: str, overrides: Mapping[str, Resource] | None = None) -> Resource:
        """Look up a command, checking ``overrides`` before this table.

        Raises:
            UnknownCommandError: Neither mapping knows the command.

        """
        if overrides and name in overrides:
            return overrides[name]
        resource = self._entries.get(name)
        if resource is None:
            raise UnknownCommandError(f"Unrecognized command: {name}")
        return resource


DEFAULT_RESOURCES = ResourceTable(
    {
        C.GET_SERVER_STATUS: get("/status"),
        C.NEW_SESSION: post("/session"),
        C.GET_SESSIONS: get("/sessions"),
        C.DESCRIBE_SESSION: get("/session/:sessionId"),
        C.QUIT: delete("/session/:sessionId"),
        C.CLOSE: delete("/session/:sessionId/window"),
        C.GET_CURRENT_WINDOW_HANDLE: get("/session/:sessionId/window_handle"),
        C.GET_WINDOW_HANDLES: get("/session/:sessionId/window_handles"),
        C.GET_CURRENT_URL: get("/session/:sessionId/url"),
        C.GET: post("/session/:sessionId/url"),
        C.GO_BACK: post("/session/:sessionId/back"),
        C.GO_FORWARD: post("/session/:sessionId/forward"),
        C.REFRESH: post("/session/:sessionId/refresh"),
        C.ADD_COOKIE: post("/session/:sessionId/cookie"),
        C.GET_ALL_COOKIES: get("/session/:sessionId/cookie"),
        C.DELETE_ALL_COOKIES: delete("/session/:sessionId/cookie"),
        C.DELETE_COOKIE: delete("/session/:sessionId/cookie/:name"),
        C.FIND_ELEMENT: post("/session/:sessionId/element"),
        C.FIND_ELEMENTS: post("/session/:sessionId/elements"),
        C.GET_ACTIVE_ELEMENT: post("/session/:sessionId/element/active"),
        C.FIND_CHILD_ELEMENT: post("/session/:sessionId/element/:id/element"),
        C.FIND_CHILD_ELEMENTS: post("/session/:sessionId/element/:id/elements"),
        C.CLEAR_ELEMENT: post("/session/:sessionId/element/:id/clear"),
        C.CLICK_ELEMENT: post("/session/:sessionId/element/:id/click"),
        C.SEND_KEYS_TO_ELEMENT: post("/session/:sessionId/element/:id/value"),
        C.SUBMIT_ELEMENT: post("/session/:sessionId/element/:id/submit"),
        C.GET_ELEMENT_TEXT: get("/session/:sessionId/element/:id/text"),
        C.GET_ELEMENT_TAG_NAME: get("/session/:sessionId/element/:id/name"),
        C.IS_ELEMENT_SELECTED: get("/session/:sessionId/element/:id/selected"),
        C.IS_ELEMENT_ENABLED: get("/session/:sessionId/element/:id/enabled"),
        C.IS_ELEMENT_DISPLAYED: get("/session/:sessionId/element/:id/displayed"),
        C.GET_ELEMENT_LOCATION: get("/session/:sessionId/element/:id/location"),
        C.GET_ELEMENT_SIZE: get("/session/:sessionId/element/:id/size"),
        C.GET_ELEMENT_ATTRIBUTE: get("/session/:sessionId/element/:id/attribute/:name"),
        C.GET_ELEMENT_VALUE_OF_CSS_PROPERTY: get("/session/:sessionId/element/:id/css/:propertyName"),
        C.ELEMENT_EQUALS: get("/session/:sessionId/element/:id/equals/:other"),
        C.TAKE_ELEMENT_SCREENSHOT: get("/session/:sessionId/element/:id/screenshot"),
        C.SWITCH_TO_WINDOW: post("/session/:sessionId/window"),
        C.MAXIMIZE_WINDOW: post("/session/:sessionId/window/:windowHandle/maximize"),
        C.GET_WINDOW_POSITION: get("/session/:sessionId/window/:windowHandle/position"),
        C.SET_WINDOW_POSITION: post("/session/:sessionId/window/:windowHandle/position"),
        C.GET_WINDOW_SIZE: get("/session/:sessionId/window/:windowHandle/size"),
        C.SET_WINDOW_SIZE: post("/session/:sessionId/window/:windowHandle/size"),
        C.SWITCH_TO_FRAME: post("/session/:sessionId/frame"),
        C.GET_PAGE_SOURCE: get("/session/:sessionId/source"),
        C.GET_TITLE: get("/session/:sessionId/title"),
        C.EXECUTE_SCRIPT: post("/session/:sessionId/execute"),
        C.EXECUTE_ASYNC_SCRIPT: post("/session/:sessionId/execute_async"),
        C.SCREENSHOT: get("/session/:sessionId/screenshot"),
        C.SET_TIMEOUT: post("/session/:sessionId/timeouts"),
        C.SET_SCRIPT_TIMEOUT: post("/session/:sessionId/timeouts/async_script"),
        C.IMPLICITLY_WAIT: post("/session/:sessionId/timeouts/implicit_wait"),
        C.MOVE_TO: post("/session/:sessionId/moveto"),
        C.CLICK: post("/session/:sessionId/click"),
        C.DOUBLE_CLICK: post("/session/:sessionId/doubleclick"),
        C.MOUSE_DOWN: post("/session/:sessionId/buttondown"),
        C.MOUSE_UP: post("/session/:sessionId/buttonup"),
        C.SEND_KEYS_TO_ACTIVE_ELEMENT: post("/session/:sessionId/keys"),
        C.TOUCH_SINGLE_TAP: post("/session/:sessionId/touch/click"),
        C.TOUCH_DOUBLE_TAP: post("/session/:sessionId/touch/doubleclick"),
        C.TOUCH_DOWN: post("/session/:sessionId/touch/down"),
        C.TOUCH_UP: post("/session/:sessionId/touch/up"),
        C.TOUCH_MOVE: post("/session/:sessionId/touch/move"),
        C.TOUCH_SCROLL: post("/session/:sessionId/touch/scroll"),
        C.TOUCH_LONG_PRESS: post("/session/:sessionId/touch/longclick"),
        C.TOUCH_FLICK: post("/session/:sessionId/touch/flick"),
        C.ACCEPT_ALERT: post("/session/:sessionId/accept_alert"),
        C.DISMISS_ALERT: post("/session/:sessionId/dismiss_alert"),
        C.GET_ALERT_TEXT: get("/session/:sessionId/alert_text"),
        C.SET_ALERT_TEXT: post("/session/:sessionId/alert_text"),
        C.GET_LOG: post("/session/:sessionId/log"),
        C.GET_AVAILABLE_LOG_TYPES: get("/session/:sessionId/log/types"),
        C.GET_SESSION_LOGS: post("/logs"),
        C.UPLOAD_FILE: post("/session/:sessionId/file"),
    }
)
