"""Generic base for the per-resource API clients."""

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

import httpx

from tracelane.common.query import ListParams
from tracelane.exceptions import APIException
from tracelane.http import HttpClient, TimeoutTypes

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class ResourceClient:
    """Base class holding the shared transport for one API resource.

    Subclasses only declare paths, validation and response models; the request
    and decode plumbing lives here.

    Attributes:
        _http: The shared transport.
    """

    __slots__ = ("_http",)

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def _send(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        path_params: Optional[Mapping[str, str]] = None,
        params: Optional[ListParams] = None,
        body: Any = None,
        timeout: TimeoutTypes = None,
    ) -> httpx.Response:
        return self._http.request(
            method,
            path,
            path_params=path_params,
            query=params.to_query_string() if params is not None else "",
            json=body,
            timeout=timeout,
            operation=operation,
        )

    def _call(
        self,
        method: str,
        path: str,
        response_model: Type[ModelT],
        *,
        operation: str,
        path_params: Optional[Mapping[str, str]] = None,
        params: Optional[ListParams] = None,
        body: Any = None,
        timeout: TimeoutTypes = None,
    ) -> ModelT:
        """Send one request and decode the JSON body into ``response_model``.

        A 2xx answer without a body (e.g. ``204 No Content`` on delete) decodes
        as an empty object, so the model comes back with its field defaults.
        """
        response = self._send(
            method,
            path,
            operation=operation,
            path_params=path_params,
            params=params,
            body=body,
            timeout=timeout,
        )
        return self._decode(response, response_model, operation, HttpClient.format_path(path, path_params or {}))

    @staticmethod
    def _decode(response: httpx.Response, response_model: Type[ModelT], operation: str, path: str) -> ModelT:
        try:
            payload = {} if response.status_code == 204 or not response.content else response.json()
            return response_model.model_validate(payload)  # type: ignore[attr-defined,no-any-return]
        except ValueError as exc:
            logger.error("tracelane.resource: Failed to decode response for %s: %s", operation, exc)
            raise APIException(
                f"{operation} returned an undecodable body with status code {response.status_code}: {exc}",
                status_code=response.status_code,
                body=response.text or None,
                method=response.request.method,
                path=path,
            ) from exc
