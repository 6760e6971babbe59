"""
Module: request.py
Description: Logical request and request payload models.

Defines the HTTP methods the service accepts, the per-call logical
request handed to the executor, and the typed payloads serialized
into XML request bodies.

Key Components:
- Method: HTTP methods used by the service
- LogicalRequest: Method, resource, headers and optional payload
- MNSRequest: Base class for XML request payloads
- QueueAttributesRequest: <Queue> body for create/set attributes
- MessageRequest: <Message> body for send message

Dependencies: pydantic, enum, typing
"""

from enum import Enum
from typing import ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Method(str, Enum):
    """HTTP methods accepted by the queue service."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class MNSRequest(BaseModel):
    """
    Base class for typed request payloads.

    Subclasses set root_tag to the XML element name of the body and
    declare fields with the service's element names as aliases.
    """

    model_config = ConfigDict(populate_by_name=True)

    root_tag: ClassVar[str] = ""


class QueueAttributesRequest(MNSRequest):
    """Queue attributes sent when creating a queue or overriding its metadata."""

    root_tag: ClassVar[str] = "Queue"

    delay_seconds: Optional[int] = Field(
        default=None, ge=0, le=604800, alias="DelaySeconds"
    )
    maximum_message_size: Optional[int] = Field(
        default=None, ge=1024, le=65536, alias="MaximumMessageSize"
    )
    message_retention_period: Optional[int] = Field(
        default=None, ge=60, le=604800, alias="MessageRetentionPeriod"
    )
    visibility_timeout: Optional[int] = Field(
        default=None, ge=1, le=43200, alias="VisibilityTimeout"
    )
    polling_wait_seconds: Optional[int] = Field(
        default=None, ge=0, le=30, alias="PollingWaitSeconds"
    )
    logging_enabled: Optional[bool] = Field(default=None, alias="LoggingEnabled")


class MessageRequest(MNSRequest):
    """Message body sent to a queue."""

    root_tag: ClassVar[str] = "Message"

    message_body: str = Field(..., alias="MessageBody")
    delay_seconds: Optional[int] = Field(
        default=None, ge=0, le=604800, alias="DelaySeconds"
    )
    priority: Optional[int] = Field(default=None, ge=1, le=16, alias="Priority")


class LogicalRequest(BaseModel):
    """
    One call's worth of request data, built per call and discarded.

    Attributes:
        method: HTTP method
        resource: Resource path including any query string
        headers: Caller-supplied headers (exact, case-sensitive keys)
        payload: Optional typed body
    """

    method: Method
    resource: str
    headers: Dict[str, str] = Field(default_factory=dict)
    payload: Optional[MNSRequest] = None

    @property
    def has_body(self) -> bool:
        return self.payload is not None
