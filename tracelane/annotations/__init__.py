from tracelane.annotations.api import AnnotationQueueItems, AnnotationQueues
from tracelane.annotations.models import (
    AnnotationQueueItem,
    DeleteAssignmentResponse,
    DeleteItemResponse,
    ItemListParams,
    ItemStatus,
    ObjectType,
    Queue,
    QueueAssignment,
    QueueListParams,
)

__all__ = [
    "AnnotationQueues",
    "AnnotationQueueItems",
    "AnnotationQueueItem",
    "DeleteAssignmentResponse",
    "DeleteItemResponse",
    "ItemListParams",
    "ItemStatus",
    "ObjectType",
    "Queue",
    "QueueAssignment",
    "QueueListParams",
]
