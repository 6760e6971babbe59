"""
Module: queue.py
Description: Per-queue façade over the request executor.

Each operation supplies a method, resource path, custom headers,
optional payload and the expected response variant, then returns
whatever the executor returns. Errors propagate unchanged.
"""

from concurrent.futures import Future
from typing import TYPE_CHECKING, Callable, Optional
from urllib.parse import quote

from ..models.request import Method, MessageRequest, QueueAttributesRequest
from ..models.response import (
    ChangeVisibilityResult,
    QueueAttributes,
    ReceivedMessage,
    SendMessageResult,
)
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from ..client import MNSClient

logger = get_logger(__name__)


class MNSQueue:
    """
    A named queue bound to a client.

    Attributes:
        client: Client whose executor dispatches every call
        name: Queue name used in resource paths
    """

    def __init__(self, client: "MNSClient", name: str):
        if not name or not isinstance(name, str):
            raise ValueError("name must be a non-empty string")

        self.client = client
        self.name = name

    def __repr__(self) -> str:
        return f"MNSQueue(name={self.name!r})"

    @property
    def resource(self) -> str:
        return f"/queues/{quote(self.name, safe='')}"

    @property
    def messages_resource(self) -> str:
        return f"{self.resource}/messages"

    def create(self, attributes: Optional[QueueAttributesRequest] = None) -> None:
        """Create the queue. Re-creating with identical attributes succeeds."""
        self.client.executor.execute(
            Method.PUT,
            self.resource,
            payload=attributes or QueueAttributesRequest()
        )
        logger.info("Queue created", queue_name=self.name)

    def set_attributes(self, attributes: QueueAttributesRequest) -> None:
        """Override attributes of an existing queue."""
        self.client.executor.execute(
            Method.PUT,
            f"{self.resource}?metaoverride=true",
            payload=attributes
        )

    def get_attributes(self) -> QueueAttributes:
        return self.client.executor.execute(
            Method.GET,
            self.resource,
            result_type=QueueAttributes
        )

    def delete(self) -> None:
        self.client.executor.execute(Method.DELETE, self.resource)
        logger.info("Queue deleted", queue_name=self.name)

    def send_message(
        self,
        message_body: str,
        delay_seconds: Optional[int] = None,
        priority: Optional[int] = None
    ) -> SendMessageResult:
        """
        Send a message.

        Args:
            message_body: Message text
            delay_seconds: Seconds before the message becomes visible
            priority: 1 (highest) to 16 (lowest)

        Returns:
            Message id and body MD5 assigned by the service
        """
        payload = MessageRequest(
            message_body=message_body,
            delay_seconds=delay_seconds,
            priority=priority
        )
        return self.client.executor.execute(
            Method.POST,
            self.messages_resource,
            payload=payload,
            result_type=SendMessageResult
        )

    def _receive_resource(self, wait_seconds: Optional[int]) -> str:
        if wait_seconds is None:
            return self.messages_resource
        if not 0 <= wait_seconds <= 30:
            raise ValueError("wait_seconds must be between 0 and 30")
        return f"{self.messages_resource}?waitseconds={wait_seconds}"

    def receive_message(self, wait_seconds: Optional[int] = None) -> ReceivedMessage:
        """
        Receive one message, blocking for up to wait_seconds of long polling.

        An empty queue is reported by the service as a 404 MessageNotExist
        error, raised here as RequestError.
        """
        return self.client.executor.execute(
            Method.GET,
            self._receive_resource(wait_seconds),
            result_type=ReceivedMessage
        )

    async def receive_message_async(
        self,
        wait_seconds: Optional[int] = None
    ) -> ReceivedMessage:
        """Coroutine form of receive_message() for long polling."""
        return await self.client.executor.execute_async(
            Method.GET,
            self._receive_resource(wait_seconds),
            result_type=ReceivedMessage
        )

    def receive_message_in_background(
        self,
        callback: Callable[[Optional[ReceivedMessage]], None],
        error_callback: Optional[Callable[[BaseException], None]] = None,
        wait_seconds: Optional[int] = None
    ) -> Future:
        """
        Receive on a worker thread; callback gets the ReceivedMessage.

        Returns:
            concurrent.futures.Future for the same outcome
        """
        return self.client.executor.submit(
            Method.GET,
            self._receive_resource(wait_seconds),
            result_type=ReceivedMessage,
            callback=callback,
            error_callback=error_callback
        )

    def peek_message(self) -> ReceivedMessage:
        return self.client.executor.execute(
            Method.GET,
            f"{self.messages_resource}?peekonly=true",
            result_type=ReceivedMessage
        )

    def delete_message(self, receipt_handle: str) -> None:
        if not receipt_handle or not isinstance(receipt_handle, str):
            raise ValueError("receipt_handle must be a non-empty string")

        self.client.executor.execute(
            Method.DELETE,
            f"{self.messages_resource}?ReceiptHandle={quote(receipt_handle, safe='')}"
        )

    def change_visibility(
        self,
        receipt_handle: str,
        visibility_timeout: int
    ) -> ChangeVisibilityResult:
        """Extend or shorten how long a received message stays invisible."""
        if not receipt_handle or not isinstance(receipt_handle, str):
            raise ValueError("receipt_handle must be a non-empty string")
        if not 1 <= visibility_timeout <= 43200:
            raise ValueError("visibility_timeout must be between 1 and 43200")

        return self.client.executor.execute(
            Method.PUT,
            f"{self.messages_resource}"
            f"?receiptHandle={quote(receipt_handle, safe='')}"
            f"&visibilityTimeout={visibility_timeout}",
            result_type=ChangeVisibilityResult
        )
