"""
Module: models
Description: Pydantic data models for the MNS client.

- endpoint: Credentials and endpoint identity
- request: HTTP methods, logical requests and XML request payloads
- response: Typed response variants decoded from XML

All models are exported here for convenient importing.
"""

from .endpoint import Credentials, Endpoint
from .request import (
    LogicalRequest,
    MessageRequest,
    Method,
    MNSRequest,
    QueueAttributesRequest,
)
from .response import (
    ChangeVisibilityResult,
    ErrorResponse,
    MNSResponse,
    QueueAttributes,
    QueueList,
    ReceivedMessage,
    SendMessageResult,
)

__all__ = [
    "Credentials",
    "Endpoint",
    "LogicalRequest",
    "MessageRequest",
    "Method",
    "MNSRequest",
    "QueueAttributesRequest",
    "ChangeVisibilityResult",
    "ErrorResponse",
    "MNSResponse",
    "QueueAttributes",
    "QueueList",
    "ReceivedMessage",
    "SendMessageResult",
]
