"""Asynchronous HTTP client that delivers requests to the remote end.

Redirects (302/303) are followed as GET requests and a connection reset by
the peer is retried after a short fixed delay. Both loops are bounded.
"""

import asyncio
import base64
import errno
import logging
from dataclasses import dataclass, replace
from types import TracebackType
from urllib.parse import SplitResult, urljoin, urlsplit

import httpx

from wd_remote.config import Config
from wd_remote.errors import RedirectParseError, TransportError
from wd_remote.remote.messages import ACCEPT_JSON, HttpRequest, HttpResponse, dump_json

logger = logging.getLogger(__name__)

DEFAULT_MAX_REDIRECTS = 20
DEFAULT_MAX_RESET_RETRIES = 10
DEFAULT_RESET_RETRY_DELAY = 0.015


@dataclass(frozen=True)
class _RequestOptions:
    """Everything needed to issue (or reissue) one physical request."""

    method: str
    scheme: str
    host: str
    port: int | None
    path: str
    headers: httpx.Headers
    auth: tuple[str, str] | None = None
    content: bytes | None = None


def _parse_url(url: str) -> SplitResult:
    """Split a URL, forcing port validation so malformed ports fail here."""
    parts = urlsplit(url)
    _ = parts.port
    return parts


def _userinfo(parts: SplitResult) -> tuple[str, str] | None:
    if parts.username is None:
        return None
    return parts.username, parts.password or ""


def _netloc(host: str, port: int | None) -> str:
    if ":" in host:
        host = f"[{host}]"
    return host if port is None else f"{host}:{port}"


def _os_error(exc: BaseException) -> OSError | None:
    """Find the OS-level error behind an exception, following its cause chain."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, OSError):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None


def is_connection_reset(exc: BaseException) -> bool:
    """Check whether an error means the peer abruptly closed the connection."""
    os_error = _os_error(exc)
    if os_error is None:
        return False
    return isinstance(os_error, ConnectionResetError) or os_error.errno == errno.ECONNRESET


def describe_error(exc: BaseException) -> str:
    """Render an error message prefixed with its errno symbol when one is known."""
    message = str(exc) or type(exc).__name__
    os_error = _os_error(exc)
    if os_error is not None and os_error.errno is not None:
        code = errno.errorcode.get(os_error.errno)
        if code:
            return f"{code} {message}"
    return message


class HttpClient:
    """Sends :class:`HttpRequest` messages to a remote end and returns its responses."""

    def __init__(
        self,
        server_url: str,
        agent: httpx.AsyncClient | None = None,
        proxy: str | None = None,
        *,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        max_reset_retries: int = DEFAULT_MAX_RESET_RETRIES,
        reset_retry_delay: float = DEFAULT_RESET_RETRY_DELAY,
    ) -> None:
        """Initialize the client.

        Args:
            server_url: URL of the server's command root. User info becomes basic auth.
            agent: Client whose connection pool is used for every request. One is created if omitted.
            proxy: Proxy URL to route requests through. User info becomes ``Proxy-Authorization``.
            max_redirects: Longest redirect chain followed before giving up.
            max_reset_retries: How many times a reset connection is retried.
            reset_retry_delay: Seconds to wait before retrying a reset connection.

        Raises:
            ValueError: The server or proxy URL has no host.

        """
        parts = urlsplit(server_url)
        if not parts.hostname:
            msg = f"Invalid server URL: {server_url}"
            raise ValueError(msg)
        self._proxy: SplitResult | None = None
        if proxy:
            self._proxy = urlsplit(proxy)
            if not self._proxy.hostname:
                msg = f"Invalid proxy URL: {proxy}"
                raise ValueError(msg)

        self._scheme = parts.scheme or "http"
        self._host = parts.hostname
        self._port = parts.port
        self._path = parts.path or "/"
        self._auth = _userinfo(parts)

        self._owns_agent = agent is None
        self._agent = agent if agent is not None else httpx.AsyncClient(timeout=None)
        self._max_redirects = max_redirects
        self._max_reset_retries = max_reset_retries
        self._reset_retry_delay = reset_retry_delay

    @staticmethod
    def from_config(cfg: Config, agent: httpx.AsyncClient | None = None) -> "HttpClient":
        """Build a client from application configuration."""
        return HttpClient(
            cfg.server_url,
            agent,
            cfg.proxy_url,
            max_redirects=cfg.max_redirects,
            max_reset_retries=cfg.max_reset_retries,
            reset_retry_delay=cfg.reset_retry_delay,
        )

    async def aclose(self) -> None:
        """Close the connection pool if this client created it."""
        if self._owns_agent:
            await self._agent.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def send(self, request: HttpRequest) -> HttpResponse:
        """Send a request, following redirects, and return the final response.

        Raises:
            RedirectParseError: A redirect carried an unusable Location header.
            TransportError: The request could not be delivered.

        """
        headers = httpx.Headers(request.headers)
        headers["Content-Length"] = "0"
        content: bytes | None = None
        if request.method in ("POST", "PUT"):
            content = dump_json(request.data).encode()
            headers["Content-Length"] = str(len(content))
            headers["Content-Type"] = "application/json;charset=UTF-8"

        path = self._path
        if path.endswith("/") and request.path.startswith("/"):
            path += request.path[1:]
        else:
            path += request.path

        options = _RequestOptions(
            method=request.method,
            scheme=self._scheme,
            host=self._host,
            port=self._port,
            path=path,
            headers=headers,
            auth=self._auth,
            content=content,
        )
        return await self._send_request(options)

    async def _send_request(self, options: _RequestOptions) -> HttpResponse:
        """Issue a request, looping over redirects and connection-reset retries."""
        redirects = 0
        resets = 0
        while True:
            auth = httpx.BasicAuth(*options.auth) if options.auth is not None else None
            try:
                response = await self._agent.send(self._build(options), auth=auth, follow_redirects=False, stream=True)
                try:
                    if response.status_code in (302, 303):
                        if redirects >= self._max_redirects:
                            msg = f"Too many redirects (limit {self._max_redirects})"
                            raise TransportError(msg)
                        options = self._redirect(options, response)
                        redirects += 1
                        logger.debug("Following redirect to %s%s", _netloc(options.host, options.port), options.path)
                        continue
                    body = await response.aread()
                finally:
                    await response.aclose()
            except (httpx.RequestError, OSError) as exc:
                if not is_connection_reset(exc):
                    raise TransportError(describe_error(exc)) from exc
                if resets >= self._max_reset_retries:
                    msg = f"{describe_error(exc)} (gave up after {resets} retries)"
                    raise TransportError(msg) from exc
                resets += 1
                logger.debug("Connection reset by %s, retry %d", _netloc(options.host, options.port), resets)
                await asyncio.sleep(self._reset_retry_delay)
                continue

            text = body.decode("utf-8", errors="replace").replace("\0", "")
            return HttpResponse(response.status_code, response.headers, text)

    def _build(self, options: _RequestOptions) -> httpx.Request:
        """Build the physical request, routing it through the proxy when one is set."""
        headers = httpx.Headers(options.headers)
        scheme, netloc = options.scheme, _netloc(options.host, options.port)
        if self._proxy is not None:
            headers["Host"] = netloc
            scheme = self._proxy.scheme or "http"
            netloc = _netloc(self._proxy.hostname or "", self._proxy.port)
            credentials = _userinfo(self._proxy)
            if credentials is not None:
                token = base64.b64encode(":".join(credentials).encode()).decode()
                headers["Proxy-Authorization"] = f"Basic {token}"
        return httpx.Request(options.method, f"{scheme}://{netloc}{options.path}", headers=headers, content=options.content)

    @staticmethod
    def _redirect(options: _RequestOptions, response: httpx.Response) -> _RequestOptions:
        """Build the GET request that follows a redirect response.

        Raises:
            RedirectParseError: The Location header is missing or malformed.

        """
        try:
            location = response.headers.get("location")
            if location is None:
                msg = 'missing "Location" header'
                raise ValueError(msg)
            target = _parse_url(location)
            # A location without a host is relative to the request that was redirected
            host, port = options.host, options.port
            if target.hostname:
                host, port = target.hostname, target.port
            else:
                target = _parse_url(urljoin(options.path, location))
            scheme = target.scheme or options.scheme
            path = target.path or "/"
            if target.query:
                path += f"?{target.query}"
            httpx.URL(f"{scheme}://{_netloc(host, port)}{path}")
        except (ValueError, httpx.InvalidURL) as exc:
            partial = HttpResponse(response.status_code, response.headers, "")
            msg = f'Failed to parse "Location" header for server redirect: {exc}\nResponse was: \n{partial}'
            raise RedirectParseError(msg) from exc

        return replace(
            options,
            method="GET",
            scheme=scheme,
            host=host,
            port=port,
            path=path,
            headers=httpx.Headers({"Accept": ACCEPT_JSON}),
            auth=None,
            content=None,
        )
