"""
mns-client: authenticated HTTP client for the MNS message queue service.

Signs requests with the MNS HMAC-SHA1 scheme and dispatches them over
httpx, either blocking, as coroutines, or on worker threads with
completion callbacks.
"""

from .client import MNSClient
from .config.settings import Settings
from .exceptions import MNSClientError, RequestError, ResponseParseError, SignatureError
from .models import (
    ChangeVisibilityResult,
    MessageRequest,
    Method,
    QueueAttributes,
    QueueAttributesRequest,
    QueueList,
    ReceivedMessage,
    SendMessageResult,
)
from .queue import MNSQueue

__version__ = "0.1.0"

__all__ = [
    "MNSClient",
    "MNSQueue",
    "Settings",
    "MNSClientError",
    "RequestError",
    "ResponseParseError",
    "SignatureError",
    "ChangeVisibilityResult",
    "MessageRequest",
    "Method",
    "QueueAttributes",
    "QueueAttributesRequest",
    "QueueList",
    "ReceivedMessage",
    "SendMessageResult",
]
