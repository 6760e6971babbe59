"""
Module: response.py
Description: Typed response variants decoded from service XML.

Each variant names the XML root element it decodes from. Callers
pick the variant they expect; the codec refuses documents whose root
does not match, and <Error> documents decode into ErrorResponse.

Key Components:
- MNSResponse: Base class for response variants
- QueueAttributes, QueueList: Queue metadata
- SendMessageResult, ReceivedMessage, ChangeVisibilityResult: Messages
- ErrorResponse: Service error document

Dependencies: pydantic, xml.etree, typing
"""

from typing import Any, ClassVar, Dict, List, Optional
from xml.etree.ElementTree import Element

from pydantic import BaseModel, ConfigDict, Field


def local_name(tag: str) -> str:
    """Strip an ElementTree '{namespace}' prefix from a tag."""
    return tag.rsplit("}", 1)[-1]


class MNSResponse(BaseModel):
    """
    Base class for response variants.

    from_element() maps each child element's local name onto the field
    aliased to it; unknown elements are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    root_tag: ClassVar[str] = ""

    @classmethod
    def from_element(cls, element: Element) -> "MNSResponse":
        values: Dict[str, Any] = {}
        for child in element:
            text = child.text
            if text and text.strip():
                values[local_name(child.tag)] = text
        return cls.model_validate(values)


class QueueAttributes(MNSResponse):
    """Attributes returned by GetQueueAttributes."""

    root_tag: ClassVar[str] = "Queue"

    queue_name: Optional[str] = Field(default=None, alias="QueueName")
    create_time: Optional[int] = Field(default=None, alias="CreateTime")
    last_modify_time: Optional[int] = Field(default=None, alias="LastModifyTime")
    delay_seconds: Optional[int] = Field(default=None, alias="DelaySeconds")
    maximum_message_size: Optional[int] = Field(default=None, alias="MaximumMessageSize")
    message_retention_period: Optional[int] = Field(default=None, alias="MessageRetentionPeriod")
    visibility_timeout: Optional[int] = Field(default=None, alias="VisibilityTimeout")
    polling_wait_seconds: Optional[int] = Field(default=None, alias="PollingWaitSeconds")
    active_messages: Optional[int] = Field(default=None, alias="ActiveMessages")
    inactive_messages: Optional[int] = Field(default=None, alias="InactiveMessages")
    delay_messages: Optional[int] = Field(default=None, alias="DelayMessages")
    logging_enabled: Optional[bool] = Field(default=None, alias="LoggingEnabled")


class QueueList(MNSResponse):
    """Page of queue URLs returned by ListQueue."""

    root_tag: ClassVar[str] = "Queues"

    queue_urls: List[str] = Field(default_factory=list)
    next_marker: Optional[str] = Field(default=None, alias="NextMarker")

    @classmethod
    def from_element(cls, element: Element) -> "QueueList":
        urls = []
        next_marker = None
        for child in element:
            name = local_name(child.tag)
            if name == "Queue":
                for item in child:
                    if local_name(item.tag) == "QueueURL" and item.text:
                        urls.append(item.text.strip())
            elif name == "NextMarker":
                next_marker = (child.text or "").strip() or None
        return cls(queue_urls=urls, next_marker=next_marker)

    @property
    def queue_names(self) -> List[str]:
        return [url.rstrip("/").rsplit("/", 1)[-1] for url in self.queue_urls]


class SendMessageResult(MNSResponse):
    """Identifiers of a message accepted by SendMessage."""

    root_tag: ClassVar[str] = "Message"

    message_id: str = Field(..., alias="MessageId")
    message_body_md5: Optional[str] = Field(default=None, alias="MessageBodyMD5")
    receipt_handle: Optional[str] = Field(default=None, alias="ReceiptHandle")


class ReceivedMessage(MNSResponse):
    """A message returned by ReceiveMessage or PeekMessage."""

    root_tag: ClassVar[str] = "Message"

    message_id: str = Field(..., alias="MessageId")
    receipt_handle: Optional[str] = Field(default=None, alias="ReceiptHandle")
    message_body: str = Field(default="", alias="MessageBody")
    message_body_md5: Optional[str] = Field(default=None, alias="MessageBodyMD5")
    enqueue_time: Optional[int] = Field(default=None, alias="EnqueueTime")
    next_visible_time: Optional[int] = Field(default=None, alias="NextVisibleTime")
    first_dequeue_time: Optional[int] = Field(default=None, alias="FirstDequeueTime")
    dequeue_count: Optional[int] = Field(default=None, alias="DequeueCount")
    priority: Optional[int] = Field(default=None, alias="Priority")


class ChangeVisibilityResult(MNSResponse):
    """New receipt handle issued by ChangeMessageVisibility."""

    root_tag: ClassVar[str] = "ChangeVisibility"

    receipt_handle: str = Field(..., alias="ReceiptHandle")
    next_visible_time: Optional[int] = Field(default=None, alias="NextVisibleTime")


class ErrorResponse(MNSResponse):
    """Error document the service returns alongside failing statuses."""

    root_tag: ClassVar[str] = "Error"

    code: Optional[str] = Field(default=None, alias="Code")
    message: Optional[str] = Field(default=None, alias="Message")
    request_id: Optional[str] = Field(default=None, alias="RequestId")
    host_id: Optional[str] = Field(default=None, alias="HostId")
