"""
Unit tests for the Tracelane facade in tracelane/__init__.py.
"""

import threading

import httpx

from tracelane import Tracelane
from tracelane.annotations import AnnotationQueueItems, AnnotationQueues
from tracelane.datasets import DatasetItems, DatasetRuns, Datasets
from tracelane.health import Health


class TestTracelaneInitialization:
    def test_resource_clients_share_one_transport(self, client):
        resources = [
            client.annotation_queues,
            client.annotation_items,
            client.datasets,
            client.dataset_items,
            client.dataset_runs,
            client.health,
        ]

        assert isinstance(client.annotation_queues, AnnotationQueues)
        assert isinstance(client.annotation_items, AnnotationQueueItems)
        assert isinstance(client.datasets, Datasets)
        assert isinstance(client.dataset_items, DatasetItems)
        assert isinstance(client.dataset_runs, DatasetRuns)
        assert isinstance(client.health, Health)
        assert len({id(resource._http) for resource in resources}) == 1

    def test_config_is_built_from_arguments(self):
        with Tracelane(host="https://tracelane.test", public_key="pk", secret_key="sk", timeout=4) as tracelane:
            assert tracelane.config.base_url == "https://tracelane.test/api/public"
            assert tracelane.config.timeout == 4.0

    def test_context_manager_closes_owned_transport(self):
        with Tracelane(host="https://tracelane.test") as tracelane:
            pass
        assert tracelane._http._client.is_closed


class TestHealth:
    def test_check(self, client, server):
        server.respond_with(200, {"status": "OK", "version": "3.12.0"})

        health = client.health.check()

        assert server.last_path == "/health"
        assert health.status == "OK"
        assert health.version == "3.12.0"


class TestConcurrentCalls:
    def test_calls_from_several_threads(self, client, server):
        server.handle_with(
            lambda request: httpx.Response(200, json={"id": request.url.path.rsplit("/", 1)[-1], "name": "n"})
        )
        results = {}

        def _fetch(name):
            results[name] = client.datasets.get(name).id

        threads = [threading.Thread(target=_fetch, args=(f"ds-{i}",)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == {f"ds-{i}": f"ds-{i}" for i in range(8)}
        assert len(server.requests) == 8
