from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import urlencode

from httpx import URL, AsyncClient, Response


class AbstractHttpRemoteAsyncService(ABC):
    """
    JSON over HTTP client with request and response hooks.

    Subclasses add authentication in `_apply_request_interceptor` and map error
    answers in `_apply_response_interceptor`. Any extra keyword argument given to
    `_perform_http_request` (e.g. the session) is forwarded to both hooks.
    """

    async def _perform_http_request(
        self,
        *,
        method: str = "GET",
        url: URL | str = "/",
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
        body: Any | None = None,
        client: AsyncClient | None = None,
        **kwargs,
    ) -> Response:
        """
        Sends `body` as JSON to `url`, relative to the client base URL.
        A short-lived client is opened when none is given, so callers fetching
        several resources in a row should pass their own.
        """
        params, headers = await self._apply_request_interceptor(
            method=method, url=url, params=dict(params or {}), headers=dict(headers or {}), body=body, **kwargs
        )
        if client:
            response = await client.request(method=method, url=url, params=params, headers=headers, json=body)
        else:
            async with await self.get_http_client() as client:
                response = await client.request(method=method, url=url, params=params, headers=headers, json=body)
        response = await self._apply_response_interceptor(
            method=method, url=url, params=params, headers=headers, body=body, response=response, **kwargs
        )
        return response

    async def _apply_request_interceptor(
        self,
        *,
        method: str = "GET",
        url: URL | str = "/",
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
        body: Any | None = None,
        **kwargs,
    ) -> tuple[dict[str, Any] | None, dict[str, Any] | None]:
        """
        Returns the query params and headers actually sent. Both are copies owned by this request.
        """
        return params, headers

    async def _apply_response_interceptor(
        self,
        *,
        method: str = "GET",
        url: URL | str = "/",
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
        body: Any | None = None,
        response: Response,
        **kwargs,
    ) -> Response:
        """
        Returns the response handed back to the caller, or raises when it is an error answer.
        """
        return response

    @abstractmethod
    async def get_http_client(self) -> AsyncClient:
        """
        New client bound to the remote API base URL. The caller closes it.
        """

    def _build_full_url(self, path: str, query_params: dict[str, Any] | None) -> str:
        full_url = str(path)
        if query_params:
            query_string = urlencode(query_params, doseq=True)
            full_url += "?" + query_string
        return full_url
