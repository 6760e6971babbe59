"""
Module: client.py
Description: Client handle for an MNS account endpoint.

Holds the credentials, endpoint identity and protocol version, owns
the long-lived httpx connection pools every call is sent on, and
creates queue façades bound to itself.
"""

import asyncio
from typing import Optional

import httpx

from .config.settings import DEFAULT_VERSION, Settings
from .dispatch.executor import RequestExecutor
from .models.endpoint import Credentials, Endpoint
from .models.request import Method
from .models.response import QueueList
from .queue.queue import MNSQueue
from .utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

LIST_PREFIX = "x-mns-prefix"
LIST_RET_NUMBER = "x-mns-ret-number"
LIST_MARKER = "x-mns-marker"


class MNSClient:
    """
    Authenticated client for one service endpoint.

    One httpx.Client (and, once an async call is made, one
    httpx.AsyncClient) is reused for every request so connections stay
    pooled. The handle is safe to share between threads.

    Example:
        >>> client = MNSClient("http://1234.mns.cn-hangzhou.aliyuncs.com", "id", "secret")
        >>> queue = client.get_queue("orders")
        >>> queue.send_message("hello")
    """

    def __init__(
        self,
        url: str,
        access_key_id: str,
        access_key_secret: str,
        version: str = DEFAULT_VERSION,
        timeout: float = 35.0,
        keepalive_expiry: float = 8.0,
        max_workers: int = 4,
        content_md5: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the client.

        Args:
            url: Endpoint URL, e.g. http://<account>.mns.<region>.aliyuncs.com
            access_key_id: Access key id
            access_key_secret: Access key secret
            version: x-mns-version sent with every request
            timeout: HTTP timeout in seconds
            keepalive_expiry: Seconds idle pooled connections are kept
            max_workers: Worker threads for callback-style calls
            content_md5: Send Content-MD5 for request bodies
            transport: Optional httpx transport (for testing)
            async_transport: Optional async httpx transport (for testing)

        Raises:
            ValueError: If url or credentials are invalid
        """
        if not url or not isinstance(url, str):
            raise ValueError("url must be a non-empty string")

        self.endpoint = Endpoint(base_url=url, version=version)
        self.credentials = Credentials(
            access_key_id=access_key_id,
            access_key_secret=access_key_secret
        )

        self._timeout = httpx.Timeout(timeout)
        self._limits = httpx.Limits(keepalive_expiry=keepalive_expiry)
        self._async_transport = async_transport

        self.executor = RequestExecutor(
            endpoint=self.endpoint,
            credentials=self.credentials,
            http_client=httpx.Client(
                timeout=self._timeout,
                limits=self._limits,
                transport=transport
            ),
            async_client_factory=self._build_async_client,
            content_md5=content_md5,
            max_workers=max_workers
        )

        logger.info(
            "MNS client initialized",
            endpoint=self.endpoint.base_url,
            version=self.endpoint.version,
            access_key_id=access_key_id
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "MNSClient":
        """
        Build a client from Settings (read from MNS_* environment variables by default).

        Also applies settings.log_level to the package loggers.
        """
        settings = settings or Settings()
        configure_logging(settings.log_level)
        return cls(
            settings.endpoint,
            settings.access_key_id,
            settings.access_key_secret.get_secret_value(),
            version=settings.version,
            timeout=settings.timeout,
            keepalive_expiry=settings.keepalive_expiry,
            max_workers=settings.max_workers,
            content_md5=settings.content_md5,
            **kwargs
        )

    def _build_async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            limits=self._limits,
            transport=self._async_transport
        )

    @property
    def host(self) -> str:
        return self.endpoint.host

    @property
    def version(self) -> str:
        """Protocol version; changes apply to requests signed afterwards."""
        return self.endpoint.version

    @version.setter
    def version(self, value: str) -> None:
        self.endpoint.version = value
        logger.info("MNS protocol version changed", version=value)

    def get_queue(self, name: str) -> MNSQueue:
        return MNSQueue(self, name)

    def list_queues(
        self,
        prefix: Optional[str] = None,
        ret_number: Optional[int] = None,
        marker: Optional[str] = None
    ) -> QueueList:
        """
        List queue URLs, optionally filtered by name prefix.

        Args:
            prefix: Only queues whose names start with this
            ret_number: Page size (1-1000)
            marker: NextMarker from a previous page

        Returns:
            QueueList (empty when the account has no queues)
        """
        headers = {}
        if prefix:
            headers[LIST_PREFIX] = prefix
        if ret_number is not None:
            if not 1 <= ret_number <= 1000:
                raise ValueError("ret_number must be between 1 and 1000")
            headers[LIST_RET_NUMBER] = str(ret_number)
        if marker:
            headers[LIST_MARKER] = marker

        result = self.executor.execute(
            Method.GET, "/queues", headers=headers, result_type=QueueList
        )
        return result if result is not None else QueueList()

    def close(self) -> None:
        self.executor.close()

    async def aclose(self) -> None:
        await self.executor.aclose()
        # Waiting for worker threads must not block the event loop.
        await asyncio.to_thread(self.executor.close)

    def __enter__(self) -> "MNSClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    async def __aenter__(self) -> "MNSClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
