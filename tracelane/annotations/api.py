from typing import Any, List, Optional

from tracelane.annotations.models import (
    AnnotationQueueItem,
    AssignmentRequest,
    CreateItemRequest,
    CreateQueueRequest,
    DeleteAssignmentResponse,
    DeleteItemResponse,
    ItemListParams,
    ItemStatus,
    Queue,
    QueueAssignment,
    QueueListParams,
    UpdateItemRequest,
)
from tracelane.common.models import PaginatedResponse
from tracelane.common.validation import coerce_optional_enum, require
from tracelane.http import TimeoutTypes
from tracelane.resource import ResourceClient


class AnnotationQueues(ResourceClient):
    """Public entry-point exposed as Tracelane.annotation_queues"""

    __slots__ = ()

    def get(self, queue_id: str, *, timeout: TimeoutTypes = None) -> Queue:
        """
        Get an annotation queue by id.

        Args:
            queue_id: Queue identifier
            timeout: Optional per-call timeout in seconds

        Returns:
            Queue: The annotation queue
        """
        require(queue_id, "queueID")
        return self._call(
            "GET",
            "/annotation-queues/{queueID}",
            Queue,
            operation="get annotation queue",
            path_params={"queueID": queue_id},
            timeout=timeout,
        )

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> PaginatedResponse[Queue]:
        """
        List annotation queues, one page at a time.

        Args:
            page: Page number, server default when omitted
            limit: Page size, server default when omitted
            timeout: Optional per-call timeout in seconds

        Returns:
            PaginatedResponse[Queue]: The requested page
        """
        return self._call(
            "GET",
            "/annotation-queues",
            PaginatedResponse[Queue],
            operation="list annotation queues",
            params=QueueListParams(page=page, limit=limit),
            timeout=timeout,
        )

    def create(
        self,
        name: str,
        score_config_ids: List[str],
        description: Optional[str] = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> Queue:
        """
        Create an annotation queue.

        Args:
            name: Queue name, required
            score_config_ids: Score configurations for the queue, at least one required
            description: Optional description
            timeout: Optional per-call timeout in seconds

        Returns:
            Queue: The created queue as returned by the server
        """
        request = CreateQueueRequest(name=name, score_config_ids=score_config_ids, description=description)
        request.validate()
        return self._call(
            "POST",
            "/annotation-queues",
            Queue,
            operation="create annotation queue",
            body=request.to_payload(),
            timeout=timeout,
        )

    def create_assignment(self, queue_id: str, user_id: str, *, timeout: TimeoutTypes = None) -> QueueAssignment:
        """Assign a user to an annotation queue."""
        require(queue_id, "queueID")
        request = AssignmentRequest(user_id=user_id)
        request.validate()
        return self._call(
            "POST",
            "/annotation-queues/{queueID}/assignments",
            QueueAssignment,
            operation="create annotation queue assignment",
            path_params={"queueID": queue_id},
            body=request.to_payload(),
            timeout=timeout,
        )

    def delete_assignment(
        self, queue_id: str, user_id: str, *, timeout: TimeoutTypes = None
    ) -> DeleteAssignmentResponse:
        """Remove a user's assignment from an annotation queue."""
        require(queue_id, "queueID")
        request = AssignmentRequest(user_id=user_id)
        request.validate()
        return self._call(
            "DELETE",
            "/annotation-queues/{queueID}/assignments",
            DeleteAssignmentResponse,
            operation="delete annotation queue assignment",
            path_params={"queueID": queue_id},
            body=request.to_payload(),
            timeout=timeout,
        )


class AnnotationQueueItems(ResourceClient):
    """Public entry-point exposed as Tracelane.annotation_items"""

    __slots__ = ()

    def get(self, queue_id: str, item_id: str, *, timeout: TimeoutTypes = None) -> AnnotationQueueItem:
        """Get a single item of an annotation queue."""
        require(queue_id, "queueID")
        require(item_id, "itemID")
        return self._call(
            "GET",
            "/annotation-queues/{queueID}/items/{itemID}",
            AnnotationQueueItem,
            operation="get annotation queue item",
            path_params={"queueID": queue_id, "itemID": item_id},
            timeout=timeout,
        )

    def list(
        self,
        queue_id: str,
        status: Any = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> PaginatedResponse[AnnotationQueueItem]:
        """
        List the items of an annotation queue.

        Args:
            queue_id: Queue identifier
            status: Only return items with this status (ItemStatus or its string value)
            page: Page number, server default when omitted
            limit: Page size, server default when omitted
            timeout: Optional per-call timeout in seconds

        Returns:
            PaginatedResponse[AnnotationQueueItem]: The requested page
        """
        require(queue_id, "queueID")
        params = ItemListParams(
            status=coerce_optional_enum(ItemStatus, status, "status"),
            page=page,
            limit=limit,
        )
        return self._call(
            "GET",
            "/annotation-queues/{queueID}/items",
            PaginatedResponse[AnnotationQueueItem],
            operation="list annotation queue items",
            path_params={"queueID": queue_id},
            params=params,
            timeout=timeout,
        )

    def create(
        self,
        queue_id: str,
        object_id: str,
        object_type: Any,
        status: Any = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> AnnotationQueueItem:
        """
        Add a trace or observation to an annotation queue.

        Args:
            queue_id: Queue identifier
            object_id: Id of the trace or observation
            object_type: ObjectType.TRACE or ObjectType.OBSERVATION
            status: Optional initial status, server default when omitted
            timeout: Optional per-call timeout in seconds

        Returns:
            AnnotationQueueItem: The created item
        """
        require(queue_id, "queueID")
        request = CreateItemRequest(object_id=object_id, object_type=object_type, status=status)
        request.validate()
        return self._call(
            "POST",
            "/annotation-queues/{queueID}/items",
            AnnotationQueueItem,
            operation="create annotation queue item",
            path_params={"queueID": queue_id},
            body=request.to_payload(),
            timeout=timeout,
        )

    def update(
        self,
        queue_id: str,
        item_id: str,
        status: Any = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> AnnotationQueueItem:
        """Update an item's status. Without a status an empty body is still sent."""
        require(queue_id, "queueID")
        require(item_id, "itemID")
        request = UpdateItemRequest(status=status)
        request.validate()
        return self._call(
            "PATCH",
            "/annotation-queues/{queueID}/items/{itemID}",
            AnnotationQueueItem,
            operation="update annotation queue item",
            path_params={"queueID": queue_id, "itemID": item_id},
            body=request.to_payload(),
            timeout=timeout,
        )

    def delete(self, queue_id: str, item_id: str, *, timeout: TimeoutTypes = None) -> DeleteItemResponse:
        """Remove an item from an annotation queue."""
        require(queue_id, "queueID")
        require(item_id, "itemID")
        return self._call(
            "DELETE",
            "/annotation-queues/{queueID}/items/{itemID}",
            DeleteItemResponse,
            operation="delete annotation queue item",
            path_params={"queueID": queue_id, "itemID": item_id},
            timeout=timeout,
        )
