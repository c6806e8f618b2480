"""Tests for the Executor: resolution, request building, decoding, and tracing."""

import logging

import pytest

from wd_remote.command import Command, CommandName
from wd_remote.errors import ErrorCode, InvalidArgumentError, UnknownCommandError
from wd_remote.log import TRACE
from wd_remote.remote.executor import Executor
from wd_remote.remote.messages import HttpRequest, HttpResponse
from wd_remote.remote.resources import ResourceTable, get


class FakeClient:
    """Transport stand-in that records requests and returns a canned response."""

    def __init__(self, response: HttpResponse | None = None) -> None:
        self.response = response or HttpResponse(200, {}, '{"status":0,"value":"ok"}')
        self.sent: list[HttpRequest] = []

    async def send(self, request: HttpRequest) -> HttpResponse:
        self.sent.append(request)
        return self.response


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def executor(client: FakeClient) -> Executor:
    return Executor(client)


class TestExecute:
    """Happy path."""

    @pytest.mark.asyncio
    async def test_builds_request(self, executor: Executor, client: FakeClient):
        """Path parameters go into the URL; the rest become the payload."""
        cmd = Command(CommandName.CLICK_ELEMENT, {"sessionId": "S1", "id": "E1", "extra": 1})
        result = await executor.execute(cmd)
        assert result == {"status": 0, "value": "ok"}
        [request] = client.sent
        assert request.method == "POST"
        assert request.path == "/session/S1/element/E1/click"
        assert request.data == {"extra": 1}

    @pytest.mark.asyncio
    async def test_command_parameters_untouched(self, executor: Executor):
        """The command keeps all of its parameters."""
        cmd = Command(CommandName.GET_ELEMENT_TEXT, {"sessionId": "S1", "id": {"ELEMENT": "E1"}})
        await executor.execute(cmd)
        assert cmd.parameters == {"sessionId": "S1", "id": {"ELEMENT": "E1"}}

    @pytest.mark.asyncio
    async def test_element_reference_in_path(self, executor: Executor, client: FakeClient):
        """Element references are spliced in as bare ids."""
        await executor.execute(Command(CommandName.GET_ELEMENT_TEXT, {"sessionId": "S1", "id": {"ELEMENT": "xyz"}}))
        assert client.sent[0].path == "/session/S1/element/xyz/text"
        assert client.sent[0].method == "GET"

    @pytest.mark.asyncio
    async def test_non_json_error_body(self):
        """A non-JSON 404 decodes to UNKNOWN_COMMAND."""
        executor = Executor(FakeClient(HttpResponse(404, {}, "not json")))
        result = await executor.execute(Command(CommandName.GET_SERVER_STATUS))
        assert result == {"status": ErrorCode.UNKNOWN_COMMAND, "value": "not json"}

    @pytest.mark.asyncio
    async def test_server_error_envelope_passed_through(self):
        """A JSON error envelope is returned, not raised."""
        body = '{"status":7,"value":{"message":"no such element"}}'
        executor = Executor(FakeClient(HttpResponse(500, {}, body)))
        result = await executor.execute(Command(CommandName.FIND_ELEMENT, {"sessionId": "S1", "using": "id", "value": "q"}))
        assert result["status"] == ErrorCode.NO_SUCH_ELEMENT

    @pytest.mark.asyncio
    async def test_transport_failure_propagates(self):
        """Transport errors reach the caller."""

        class FailingClient:
            async def send(self, request: HttpRequest) -> HttpResponse:
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await Executor(FailingClient()).execute(Command(CommandName.GET_SERVER_STATUS))


class TestValidation:
    """Failures raised before anything is sent."""

    def test_unknown_command_raises_on_call(self, executor: Executor, client: FakeClient):
        """An unknown command fails synchronously without touching the transport."""
        with pytest.raises(UnknownCommandError, match="Unrecognized command: bogus"):
            executor.execute(Command("bogus"))
        assert client.sent == []

    def test_missing_parameter_raises_on_call(self, executor: Executor, client: FakeClient):
        """A missing path parameter fails synchronously."""
        with pytest.raises(InvalidArgumentError, match="Missing required parameter: id"):
            executor.execute(Command(CommandName.CLICK_ELEMENT, {"sessionId": "S1"}))
        assert client.sent == []


class TestDefineCommand:
    """Per-executor custom commands."""

    @pytest.mark.asyncio
    async def test_override_takes_priority(self, executor: Executor, client: FakeClient):
        """A custom definition replaces the shared one for this executor."""
        executor.define_command(CommandName.NEW_SESSION, "GET", "/custom")
        await executor.execute(Command(CommandName.NEW_SESSION, {"desiredCapabilities": {}}))
        assert client.sent[0].method == "GET"
        assert client.sent[0].path == "/custom"

    @pytest.mark.asyncio
    async def test_new_command_with_segments(self, executor: Executor, client: FakeClient):
        """Custom paths support :name segments."""
        executor.define_command("greet", "POST", "/person/:name")
        await executor.execute(Command("greet", {"name": "Bob", "greeting": "hi"}))
        assert client.sent[0].path == "/person/Bob"
        assert client.sent[0].data == {"greeting": "hi"}

    @pytest.mark.asyncio
    async def test_redefine(self, executor: Executor, client: FakeClient):
        """Defining a command again overwrites it."""
        executor.define_command("x", "GET", "/one")
        executor.define_command("x", "DELETE", "/two")
        await executor.execute(Command("x"))
        assert (client.sent[0].method, client.sent[0].path) == ("DELETE", "/two")

    def test_not_shared_between_executors(self, executor: Executor):
        """Custom commands belong to one executor."""
        executor.define_command("x", "GET", "/x")
        with pytest.raises(UnknownCommandError):
            Executor(FakeClient()).execute(Command("x"))

    @pytest.mark.asyncio
    async def test_custom_resource_table(self, client: FakeClient):
        """An injected table replaces the default one."""
        executor = Executor(client, ResourceTable({"ping": get("/ping")}))
        await executor.execute(Command("ping"))
        assert client.sent[0].path == "/ping"
        with pytest.raises(UnknownCommandError):
            executor.execute(Command(CommandName.GET_SERVER_STATUS))


class TestTracing:
    """Request/response traces."""

    @pytest.mark.asyncio
    async def test_traces_request_and_response(self, executor: Executor, caplog: pytest.LogCaptureFixture):
        """Both messages are logged at TRACE level in canonical form."""
        caplog.set_level(TRACE, logger="wd_remote")
        await executor.execute(Command(CommandName.GET, {"sessionId": "S1", "url": "http://example.com"}))
        messages = [r.getMessage() for r in caplog.records if r.levelno == TRACE]
        assert messages[0].startswith(">>>\nPOST /session/S1/url HTTP/1.1\n")
        assert messages[0].endswith('{"url":"http://example.com"}')
        assert messages[1].startswith("<<<\nHTTP/1.1 200\n")

    @pytest.mark.asyncio
    async def test_custom_logger(self, client: FakeClient, caplog: pytest.LogCaptureFixture):
        """An injected logger receives the traces."""
        logger = logging.getLogger("tests.executor")
        caplog.set_level(TRACE, logger="tests.executor")
        await Executor(client, logger=logger).execute(Command(CommandName.GET_SERVER_STATUS))
        assert len([r for r in caplog.records if r.name == "tests.executor"]) == 2

    @pytest.mark.asyncio
    async def test_nothing_logged_when_disabled(self, executor: Executor, caplog: pytest.LogCaptureFixture):
        """Traces are dropped above TRACE level."""
        caplog.set_level(logging.DEBUG, logger="wd_remote")
        await executor.execute(Command(CommandName.GET_SERVER_STATUS))
        assert [r for r in caplog.records if r.levelno == TRACE] == []
