"""
Dataset Run Example

This example builds a small dataset and records an evaluation run against it.
Run items create the run on first use; later calls with the same run name
update its description and metadata.

Set TRACELANE_HOST, TRACELANE_PUBLIC_KEY and TRACELANE_SECRET_KEY before running.
"""

import logging
import sys
import uuid

from tracelane import APIException, Tracelane

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", stream=sys.stdout
)

EXAMPLES = [
    ({"question": "What is the capital of France?"}, "Paris"),
    ({"question": "2 + 2?"}, "4"),
]


def main() -> None:
    with Tracelane(timeout=30) as client:
        try:
            dataset = client.datasets.create("capitals-smoke", metadata={"owner": "evals"})
            for item_input, expected in EXAMPLES:
                client.dataset_items.create(dataset.name, input=item_input, expected_output=expected)

            items = client.dataset_items.list(dataset_name=dataset.name, limit=100)
            for item in items.data:
                # The trace id would normally come from the instrumented application.
                trace_id = uuid.uuid4().hex
                client.dataset_runs.create_item(
                    run_name="nightly",
                    trace_id=trace_id,
                    dataset_item_id=item.id,
                    run_description="Nightly smoke run",
                )

            run = client.dataset_runs.get(dataset.name, "nightly")
            print(f"Run {run.name} has {len(run.dataset_run_items)} items")

        except APIException as e:
            print(f"API call failed with status {e.status_code}: {e.body}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
