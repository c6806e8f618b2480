"""Command executor that talks to the remote end over HTTP + JSON."""

import logging
from collections.abc import Awaitable
from typing import Any, Protocol

from wd_remote.command import Command
from wd_remote.log import TRACE
from wd_remote.remote.decoder import parse_http_response
from wd_remote.remote.messages import HttpRequest, HttpResponse
from wd_remote.remote.paths import build_path
from wd_remote.remote.resources import DEFAULT_RESOURCES, Resource, ResourceTable


class Transport(Protocol):
    """Anything that can deliver an :class:`HttpRequest` (normally :class:`HttpClient`)."""

    async def send(self, request: HttpRequest) -> HttpResponse: ...


class Executor:
    """Executes commands by mapping them to HTTP resources on the remote end."""

    def __init__(
        self,
        client: Transport,
        resources: ResourceTable = DEFAULT_RESOURCES,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            client: Transport used to send requests.
            resources: Command name → resource table.
            logger: Receives request/response traces. Defaults to this module's logger.

        """
        self._client = client
        self._resources = resources
        self._custom_commands: dict[str, Resource] = {}
        self._log = logger or logging.getLogger(__name__)

    def define_command(self, name: str, method: str, path: str) -> None:
        """Define (or redefine) a command for this executor only.

        Any ``:name`` segment in ``path`` is replaced by the command parameter of the
        same name, e.g. "/person/:name" with ``{"name": "Bob"}`` is sent to "/person/Bob".
        Custom commands take priority over the shared resource table.
        """
        self._custom_commands[name] = Resource(method, path)

    def execute(self, command: Command) -> Awaitable[Any]:
        """Send a command and return an awaitable of the decoded response envelope.

        Resolution and path building happen immediately, so an unknown command or a
        missing path parameter is raised by this call before anything is sent.

        Raises:
            UnknownCommandError: No resource is mapped to the command name.
            InvalidArgumentError: A path parameter is missing.

        """
        resource = self._resources.resolve(command.name, self._custom_commands)
        path, data = build_path(resource.path, command.parameters)
        return self._send(HttpRequest(resource.method, path, data))

    async def _send(self, request: HttpRequest) -> Any:  # noqa: ANN401
        self._log.log(TRACE, ">>>\n%s", request)
        response = await self._client.send(request)
        self._log.log(TRACE, "<<<\n%s", response)
        return parse_http_response(response)
