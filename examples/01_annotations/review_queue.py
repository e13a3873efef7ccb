"""
Annotation Queue Example

This example shows how to route traces to human reviewers with the Tracelane SDK.
It covers:
1. Creating an annotation queue with score configurations
2. Assigning a reviewer and adding a trace to the queue
3. Paging through pending items and marking them completed

Set TRACELANE_HOST, TRACELANE_PUBLIC_KEY and TRACELANE_SECRET_KEY before running.
"""

import logging
import sys

from tracelane import APIException, Tracelane, ValidationException
from tracelane.annotations import ItemStatus, ObjectType

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", stream=sys.stdout
)


def main() -> None:
    with Tracelane() as client:
        try:
            queue = client.annotation_queues.create(
                name="Support answers",
                score_config_ids=["helpfulness-config"],
                description="Weekly review of support bot answers",
            )
            print(f"Created queue {queue.id}")

            client.annotation_queues.create_assignment(queue.id, user_id="reviewer-1")
            client.annotation_items.create(queue.id, object_id="trace-123", object_type=ObjectType.TRACE)

            page = 1
            while True:
                result = client.annotation_items.list(queue.id, status=ItemStatus.PENDING, page=page, limit=50)
                for item in result.data:
                    client.annotation_items.update(queue.id, item.id, status=ItemStatus.COMPLETED)
                    print(f"Completed {item.object_type.value} {item.object_id}")
                if page >= result.meta.total_pages:
                    break
                page += 1

        except ValidationException as e:
            print(f"Invalid request: {e}", file=sys.stderr)
            sys.exit(1)
        except APIException as e:
            print(f"API call failed with status {e.status_code}: {e.body}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
