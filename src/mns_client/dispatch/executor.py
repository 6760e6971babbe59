"""
Module: executor.py
Description: Signs logical requests and dispatches them over httpx.

Turns a method, resource, header set and optional payload into a
signed HTTP request, sends it on the client's long-lived connection
pool, and maps the response into a typed result or a typed error.
The blocking, coroutine and callback entry points share the same
signing and response mapping.

Key Components:
- RequestExecutor.execute(): Blocking dispatch
- RequestExecutor.execute_async(): Coroutine dispatch for long polling
- RequestExecutor.submit(): Worker-thread dispatch with callbacks
- map_response(): Response-to-result rules shared by every path

Dependencies: httpx, concurrent.futures, structlog (via logger)
"""

import asyncio
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Mapping, Optional, Tuple, Type

import httpx

from ..auth.headers import HeaderSet, prepare_headers
from ..exceptions import RequestError, ResponseParseError
from ..models.endpoint import Credentials, Endpoint
from ..models.request import LogicalRequest, Method, MNSRequest
from ..models.response import ErrorResponse, MNSResponse
from ..serialization.xml import deserialize, serialize
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Statuses that mean success even when no body came back.
EMPTY_SUCCESS_STATUSES = (200, 201, 204)


def map_response(
    response: httpx.Response,
    result_type: Optional[Type[MNSResponse]]
) -> Optional[MNSResponse]:
    """
    Map a transport response to a typed result.

    A decoded body of the expected type is returned whatever the
    status code. Otherwise 200, 201 and 204 yield None and every other
    status raises RequestError("{status}:{reason}").

    Args:
        response: Completed httpx response
        result_type: Expected response variant, or None

    Returns:
        Typed result, or None for an empty success

    Raises:
        RequestError: For <Error> documents and unexpected statuses
        ResponseParseError: If a success response carries an unreadable body
    """
    status = response.status_code
    reason = response.reason_phrase

    try:
        result = deserialize(response.content, result_type, status_code=status)
    except ResponseParseError as e:
        if status in EMPTY_SUCCESS_STATUSES:
            raise
        raise RequestError(status, reason) from e

    if isinstance(result, ErrorResponse):
        raise RequestError(
            status,
            reason,
            error_code=result.code,
            error_message=result.message,
            request_id=result.request_id
        )

    if result is not None:
        if status not in EMPTY_SUCCESS_STATUSES:
            logger.warning(
                "Returning decoded body despite unexpected status",
                status_code=status,
                result_type=type(result).__name__
            )
        return result

    if status in EMPTY_SUCCESS_STATUSES:
        return None

    raise RequestError(status, reason)


class RequestExecutor:
    """
    Dispatches signed requests for one client.

    The httpx clients are shared by every call and every thread; all
    per-call state (header set, body, signature) lives on the stack of
    the call that builds it.
    """

    def __init__(
        self,
        endpoint: Endpoint,
        credentials: Credentials,
        http_client: httpx.Client,
        async_client_factory: Callable[[], httpx.AsyncClient],
        content_md5: bool = False,
        max_workers: int = 4
    ):
        """
        Initialize the executor.

        Args:
            endpoint: Endpoint identity (base URL, host, version)
            credentials: Access key pair
            http_client: Long-lived blocking client
            async_client_factory: Builds the long-lived async client on
                first use, so blocking-only callers never create one
            content_md5: Send Content-MD5 for request bodies
            max_workers: Size of the pool used by submit()
        """
        self.endpoint = endpoint
        self.credentials = credentials
        self.content_md5 = content_md5

        self._http = http_client
        self._async_client_factory = async_client_factory
        self._async_http: Optional[httpx.AsyncClient] = None
        self._async_loop: Optional[asyncio.AbstractEventLoop] = None
        self._async_lock = threading.Lock()

        self._max_workers = max_workers
        self._pool: Optional[ThreadPoolExecutor] = None
        self._pool_lock = threading.Lock()

    def _prepare(
        self,
        method: Method,
        resource: str,
        headers: Optional[Mapping[str, str]],
        payload: Optional[MNSRequest]
    ) -> Tuple[LogicalRequest, HeaderSet, Optional[bytes]]:
        request = LogicalRequest(
            method=method,
            resource=resource,
            headers=dict(headers or {}),
            payload=payload
        )
        body = serialize(request.payload) if request.has_body else None

        signed = prepare_headers(
            request.method.value,
            request.headers,
            request.resource,
            request.has_body,
            host=self.endpoint.host,
            version=self.endpoint.version,
            access_key_id=self.credentials.access_key_id,
            secret=self.credentials.access_key_secret.get_secret_value(),
            body=body,
            content_md5=self.content_md5
        )
        return request, signed, body

    def _log_response(
        self,
        request: LogicalRequest,
        response: httpx.Response,
        started: float
    ) -> None:
        logger.debug(
            "Response received",
            method=request.method.value,
            resource=request.resource,
            status_code=response.status_code,
            response_time_ms=round((time.perf_counter() - started) * 1000, 2)
        )

    def execute(
        self,
        method: Method,
        resource: str,
        headers: Optional[Mapping[str, str]] = None,
        payload: Optional[MNSRequest] = None,
        result_type: Optional[Type[MNSResponse]] = None
    ) -> Optional[MNSResponse]:
        """
        Dispatch a request and block until its response is mapped.

        Args:
            method: HTTP method
            resource: Resource path including any query string
            headers: Custom headers; never mutated
            payload: Optional typed body
            result_type: Expected response variant

        Returns:
            Typed result, or None for an empty success

        Raises:
            RequestError: If the service rejected the request
            ResponseParseError: If a success body could not be decoded
            SignatureError: If the request cannot be signed
            httpx.TransportError: On network failures
        """
        request, signed, body = self._prepare(method, resource, headers, payload)

        http_request = self._http.build_request(
            request.method.value,
            self.endpoint.url(request.resource),
            headers=dict(signed),
            content=body
        )

        started = time.perf_counter()
        try:
            response = self._http.send(http_request)
        except httpx.TransportError as e:
            logger.warning(
                "Request transport error",
                method=request.method.value,
                resource=request.resource,
                error=str(e),
                error_type=type(e).__name__
            )
            raise

        self._log_response(request, response, started)
        return map_response(response, result_type)

    async def execute_async(
        self,
        method: Method,
        resource: str,
        headers: Optional[Mapping[str, str]] = None,
        payload: Optional[MNSRequest] = None,
        result_type: Optional[Type[MNSResponse]] = None
    ) -> Optional[MNSResponse]:
        """
        Dispatch a request without blocking the event loop.

        Same signing, result and error contract as execute(). Intended
        for long-polling receives where the service may hold the
        connection open for the whole wait.

        The async client is tied to the event loop that created it. A
        call from a different loop builds a fresh client.
        """
        request, signed, body = self._prepare(method, resource, headers, payload)

        client = self._async_client()
        http_request = client.build_request(
            request.method.value,
            self.endpoint.url(request.resource),
            headers=dict(signed),
            content=body
        )

        started = time.perf_counter()
        try:
            response = await client.send(http_request)
        except httpx.TransportError as e:
            logger.warning(
                "Async request transport error",
                method=request.method.value,
                resource=request.resource,
                error=str(e),
                error_type=type(e).__name__
            )
            raise

        self._log_response(request, response, started)
        return map_response(response, result_type)

    def submit(
        self,
        method: Method,
        resource: str,
        headers: Optional[Mapping[str, str]] = None,
        payload: Optional[MNSRequest] = None,
        result_type: Optional[Type[MNSResponse]] = None,
        callback: Optional[Callable[[Optional[MNSResponse]], None]] = None,
        error_callback: Optional[Callable[[BaseException], None]] = None
    ) -> Future:
        """
        Dispatch a request on a worker thread and return immediately.

        Exactly one of callback(result_or_None) or error_callback(exc)
        runs on the worker thread once the round trip completes. The
        outcome is also set on the returned Future.

        Returns:
            Future resolving to the typed result or raising the error
        """
        future = self._worker_pool().submit(
            self.execute, method, resource, headers, payload, result_type
        )

        def _complete(done: Future) -> None:
            if done.cancelled():
                return
            error = done.exception()
            try:
                if error is not None:
                    if error_callback is not None:
                        error_callback(error)
                    else:
                        logger.error(
                            "Background request failed",
                            resource=resource,
                            error=str(error),
                            error_type=type(error).__name__
                        )
                elif callback is not None:
                    callback(done.result())
            except Exception as e:
                logger.error(
                    "Completion callback failed",
                    resource=resource,
                    error=str(e),
                    error_type=type(e).__name__
                )

        future.add_done_callback(_complete)
        return future

    def _async_client(self) -> httpx.AsyncClient:
        # Pooled async connections belong to the loop that opened them.
        loop = asyncio.get_running_loop()
        with self._async_lock:
            if self._async_http is not None and self._async_loop is not loop:
                logger.warning(
                    "Event loop changed; replacing async HTTP client",
                    endpoint=self.endpoint.base_url
                )
                self._async_http = None
            if self._async_http is None:
                self._async_http = self._async_client_factory()
                self._async_loop = loop
            return self._async_http

    def _worker_pool(self) -> ThreadPoolExecutor:
        with self._pool_lock:
            if self._pool is None:
                self._pool = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="mns-request"
                )
            return self._pool

    def close(self) -> None:
        """
        Wait for submitted requests, then close the blocking client.

        An async client cannot be closed without its event loop. If one
        is still open it is released with a warning; call aclose() from
        that loop to close it cleanly.
        """
        with self._pool_lock:
            if self._pool is not None:
                self._pool.shutdown(wait=True)
                self._pool = None
        self._http.close()

        with self._async_lock:
            client, self._async_http = self._async_http, None
            self._async_loop = None
        if client is not None and not client.is_closed:
            logger.warning(
                "Async HTTP client released without aclose()",
                endpoint=self.endpoint.base_url
            )

    async def aclose(self) -> None:
        """Close the async client if one was created."""
        with self._async_lock:
            client, self._async_http = self._async_http, None
            self._async_loop = None
        if client is not None:
            await client.aclose()
