"""Data models for annotation queues and their items."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from tracelane.common.models import ApiModel
from tracelane.common.query import ListParams, query_field
from tracelane.common.validation import coerce_enum, coerce_optional_enum, require


class ObjectType(str, Enum):
    """Kind of object an annotation queue item points at."""

    TRACE = "TRACE"
    OBSERVATION = "OBSERVATION"


class ItemStatus(str, Enum):
    """Annotation progress of a queue item."""

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


class Queue(ApiModel):
    """
    An annotation queue: a named set of traces/observations awaiting manual review.

    Attributes:
        id: Server-assigned identifier.
        name: Queue name.
        description: Optional free-text description.
        score_config_ids: Score configurations annotators can use in this queue.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: str
    name: str
    description: Optional[str] = None
    score_config_ids: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class QueueAssignment(ApiModel):
    """A user assigned to an annotation queue within a project."""

    user_id: str
    queue_id: str
    project_id: Optional[str] = None


class DeleteAssignmentResponse(ApiModel):
    success: bool = False


class AnnotationQueueItem(ApiModel):
    """
    An item inside an annotation queue.

    Attributes:
        id: Server-assigned identifier.
        queue_id: Queue the item belongs to.
        object_id: Id of the referenced trace or observation.
        object_type: Whether ``object_id`` is a trace or an observation.
        status: Annotation status, the only field mutable through ``update``.
        completed_at: When the item was marked completed, if it was.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: str
    queue_id: str
    object_id: str
    object_type: ObjectType
    status: ItemStatus
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DeleteItemResponse(ApiModel):
    success: bool = False
    message: Optional[str] = None


@dataclass
class CreateQueueRequest:
    """Body of ``POST /annotation-queues``. Both ``name`` and at least one score config are required."""

    name: str
    score_config_ids: List[str] = field(default_factory=list)
    description: Optional[str] = None

    def validate(self) -> None:
        require(self.name, "name")
        require(self.score_config_ids, "scoreConfigIds")

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": self.name, "scoreConfigIds": list(self.score_config_ids)}
        if self.description:
            payload["description"] = self.description
        return payload


@dataclass
class AssignmentRequest:
    """Body shared by the create and delete assignment calls."""

    user_id: str

    def validate(self) -> None:
        require(self.user_id, "userId")

    def to_payload(self) -> Dict[str, Any]:
        return {"userId": self.user_id}


@dataclass
class CreateItemRequest:
    """Body of ``POST /annotation-queues/{queueID}/items``."""

    object_id: str
    object_type: Any
    status: Any = None

    def validate(self) -> None:
        require(self.object_id, "objectId")
        require(self.object_type, "objectType")
        self.object_type = coerce_enum(ObjectType, self.object_type, "objectType")
        self.status = coerce_optional_enum(ItemStatus, self.status, "status")

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "objectId": self.object_id,
            "objectType": ObjectType(self.object_type).value,
        }
        if self.status:
            payload["status"] = ItemStatus(self.status).value
        return payload


@dataclass
class UpdateItemRequest:
    """Body of ``PATCH /annotation-queues/{queueID}/items/{itemID}``; an empty body is allowed."""

    status: Any = None

    def validate(self) -> None:
        self.status = coerce_optional_enum(ItemStatus, self.status, "status")

    def to_payload(self) -> Dict[str, Any]:
        if not self.status:
            return {}
        return {"status": ItemStatus(self.status).value}


@dataclass
class QueueListParams(ListParams):
    page: Optional[int] = query_field("page")
    limit: Optional[int] = query_field("limit")


@dataclass
class ItemListParams(ListParams):
    status: Optional[ItemStatus] = query_field("status")
    page: Optional[int] = query_field("page")
    limit: Optional[int] = query_field("limit")
