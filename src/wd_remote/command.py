"""Commands sent to the remote end and the registry of their names."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class CommandName(StrEnum):
    """Identifiers of every command the executor knows how to route."""

    GET_SERVER_STATUS = "getStatus"
    NEW_SESSION = "newSession"
    GET_SESSIONS = "getSessions"
    DESCRIBE_SESSION = "getSessionCapabilities"
    CLOSE = "close"
    QUIT = "quit"
    GET_CURRENT_URL = "getCurrentUrl"
    GET = "get"
    GO_BACK = "goBack"
    GO_FORWARD = "goForward"
    REFRESH = "refresh"
    ADD_COOKIE = "addCookie"
    GET_ALL_COOKIES = "getCookies"
    DELETE_ALL_COOKIES = "deleteAllCookies"
    DELETE_COOKIE = "deleteCookie"
    FIND_ELEMENT = "findElement"
    FIND_ELEMENTS = "findElements"
    GET_ACTIVE_ELEMENT = "getActiveElement"
    FIND_CHILD_ELEMENT = "findChildElement"
    FIND_CHILD_ELEMENTS = "findChildElements"
    CLEAR_ELEMENT = "clearElement"
    CLICK_ELEMENT = "clickElement"
    SEND_KEYS_TO_ELEMENT = "sendKeysToElement"
    SUBMIT_ELEMENT = "submitElement"
    GET_ELEMENT_TEXT = "getElementText"
    GET_ELEMENT_TAG_NAME = "getElementTagName"
    IS_ELEMENT_SELECTED = "isElementSelected"
    IS_ELEMENT_ENABLED = "isElementEnabled"
    IS_ELEMENT_DISPLAYED = "isElementDisplayed"
    GET_ELEMENT_LOCATION = "getElementLocation"
    GET_ELEMENT_SIZE = "getElementSize"
    GET_ELEMENT_ATTRIBUTE = "getElementAttribute"
    GET_ELEMENT_VALUE_OF_CSS_PROPERTY = "getElementValueOfCssProperty"
    ELEMENT_EQUALS = "elementEquals"
    TAKE_ELEMENT_SCREENSHOT = "takeElementScreenshot"
    GET_CURRENT_WINDOW_HANDLE = "getCurrentWindowHandle"
    GET_WINDOW_HANDLES = "getWindowHandles"
    SWITCH_TO_WINDOW = "switchToWindow"
    MAXIMIZE_WINDOW = "maximizeWindow"
    GET_WINDOW_POSITION = "getWindowPosition"
    SET_WINDOW_POSITION = "setWindowPosition"
    GET_WINDOW_SIZE = "getWindowSize"
    SET_WINDOW_SIZE = "setWindowSize"
    SWITCH_TO_FRAME = "switchToFrame"
    GET_PAGE_SOURCE = "getPageSource"
    GET_TITLE = "getTitle"
    EXECUTE_SCRIPT = "executeScript"
    EXECUTE_ASYNC_SCRIPT = "executeAsyncScript"
    SCREENSHOT = "screenshot"
    SET_TIMEOUT = "setTimeout"
    SET_SCRIPT_TIMEOUT = "setScriptTimeout"
    IMPLICITLY_WAIT = "implicitlyWait"
    MOVE_TO = "mouseMove"
    CLICK = "mouseClick"
    DOUBLE_CLICK = "mouseDoubleClick"
    MOUSE_DOWN = "mouseButtonDown"
    MOUSE_UP = "mouseButtonUp"
    SEND_KEYS_TO_ACTIVE_ELEMENT = "sendKeysToActiveElement"
    TOUCH_SINGLE_TAP = "touchSingleTap"
    TOUCH_DOUBLE_TAP = "touchDoubleTap"
    TOUCH_DOWN = "touchDown"
    TOUCH_UP = "touchUp"
    TOUCH_MOVE = "touchMove"
    TOUCH_SCROLL = "touchScroll"
    TOUCH_LONG_PRESS = "touchLongPress"
    TOUCH_FLICK = "touchFlick"
    ACCEPT_ALERT = "acceptAlert"
    DISMISS_ALERT = "dismissAlert"
    GET_ALERT_TEXT = "getAlertText"
    SET_ALERT_TEXT = "setAlertValue"
    GET_LOG = "getLog"
    GET_AVAILABLE_LOG_TYPES = "getAvailableLogTypes"
    GET_SESSION_LOGS = "getSessionLogs"
    UPLOAD_FILE = "uploadFile"


@dataclass
class Command:
    """A named operation plus the parameters it is sent with."""

    name: str
    parameters: dict[str, Any] = field(default_factory=dict)

    def set_parameter(self, key: str, value: Any) -> "Command":  # noqa: ANN401
        """Set a single parameter and return the command for chaining."""
        self.parameters[key] = value
        return self
