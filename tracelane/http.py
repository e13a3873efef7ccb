"""Shared HTTP transport used by every resource client."""

import logging
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote

import httpx

from tracelane.config import Config
from tracelane.exceptions import APIException, ValidationException

logger = logging.getLogger(__name__)

_LOG_PREFIX = "tracelane.http"

TimeoutTypes = Union[float, httpx.Timeout, None]


class HttpClient:
    """Thin wrapper around a single ``httpx.Client`` shared by all resource clients.

    The wrapper owns base URL resolution, authentication and header injection,
    path parameter substitution, and the mapping of non-2xx responses to
    :class:`APIException`. Transport failures (connection errors, timeouts)
    propagate unchanged as ``httpx`` exceptions.

    Attributes:
        _client: The underlying httpx client instance.
        _owns_client: Whether ``close()`` should close the underlying client.
    """

    __slots__ = ("_client", "_owns_client")

    def __init__(self, config: Config, http_client: Optional[httpx.Client] = None) -> None:
        """Initialize the transport.

        Args:
            config: The Tracelane configuration object.
            http_client: Optional pre-built httpx client. Base URL and auth are
                only filled in when the given client does not define them, and
                the client is left open on ``close()``.
        """
        if http_client is None:
            self._client = self._create_client(config)
            self._owns_client = True
        else:
            self._client = self._adopt_client(http_client, config)
            self._owns_client = False

    def _create_client(self, config: Config) -> httpx.Client:
        return httpx.Client(
            base_url=config.base_url,
            headers=self._build_headers(config),
            auth=self._build_auth(config),
            timeout=config.timeout,
        )

    def _adopt_client(self, client: httpx.Client, config: Config) -> httpx.Client:
        if not str(client.base_url):
            client.base_url = httpx.URL(config.base_url)
        if client.auth is None:
            auth = self._build_auth(config)
            if auth is not None:
                client.auth = auth
        user_agent = client.headers.get("User-Agent")
        if user_agent is None or user_agent.startswith("python-httpx/"):
            client.headers["User-Agent"] = self._user_agent()
        for key, value in config.headers.items():
            client.headers.setdefault(key, value)
        return client

    def _build_headers(self, config: Config) -> Dict[str, str]:
        headers: Dict[str, str] = {"User-Agent": self._user_agent()}
        headers.update(config.headers)
        return headers

    @staticmethod
    def _user_agent() -> str:
        return f"{Config.SDK_NAME}-sdk/{Config.LIBRARY_VERSION}"

    def _build_auth(self, config: Config) -> Optional[httpx.BasicAuth]:
        if config.public_key and config.secret_key:
            return httpx.BasicAuth(config.public_key, config.secret_key)
        return None

    @staticmethod
    def format_path(template: str, path_params: Mapping[str, str]) -> str:
        """Substitute ``{name}`` placeholders with URL-quoted values.

        Every value must be a non-empty string, so that a missing identifier can
        never collapse two path segments into one.
        """
        for name, value in path_params.items():
            if not value:
                raise ValidationException.required(name)
            template = template.replace("{" + name + "}", quote(str(value), safe=""))
        return template

    def request(
        self,
        method: str,
        path: str,
        *,
        path_params: Optional[Mapping[str, str]] = None,
        query: str = "",
        json: Any = None,
        timeout: TimeoutTypes = None,
        operation: Optional[str] = None,
    ) -> httpx.Response:
        """Issue one request and return the successful response.

        Args:
            method: HTTP method.
            path: Path template relative to the API base URL, e.g. ``/v2/datasets/{datasetName}``.
            path_params: Values for the placeholders in ``path``.
            query: Pre-encoded query string, appended verbatim.
            json: JSON-serializable request body.
            timeout: Per-call timeout overriding the client default.
            operation: Human-readable name of the call, used in error messages.

        Returns:
            The httpx response, guaranteed to have a 2xx status.

        Raises:
            ValidationException: If a path parameter is empty.
            APIException: If the server answers outside the 2xx range.
            httpx.HTTPError: If the request could not be completed.
        """
        resolved_path = self.format_path(path, path_params or {})
        url = f"{resolved_path}?{query}" if query else resolved_path

        kwargs: Dict[str, Any] = {}
        if json is not None:
            kwargs["json"] = json
        if timeout is not None:
            kwargs["timeout"] = timeout

        logger.debug("%s: %s %s", _LOG_PREFIX, method, url)
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s: %s %s could not be completed: %s", _LOG_PREFIX, method, url, exc)
            raise

        if not response.is_success:
            body = response.text
            message = f"{operation or f'{method} {path}'} failed with status code {response.status_code}"
            if body:
                message = f"{message}: {body}"
            logger.error("%s: %s %s returned status code %d", _LOG_PREFIX, method, url, response.status_code)
            raise APIException(
                message,
                status_code=response.status_code,
                body=body or None,
                method=method,
                path=resolved_path,
            )
        return response

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()
