import logging
from types import TracebackType
from typing import Mapping, Optional, Type, Union

import httpx

from .annotations import AnnotationQueueItems, AnnotationQueues
from .config import Config
from .datasets import DatasetItems, DatasetRuns, Datasets
from .exceptions import APIException, TracelaneException, ValidationException
from .health import Health
from .http import HttpClient
from .version import __version__

logger = logging.getLogger(__name__)


class Tracelane:
    """
    Main SDK class. Build one instance per set of credentials and reach each
    API area through its property; all areas share one HTTP connection pool.

        with Tracelane(host="https://cloud.langfuse.com", public_key="pk-...", secret_key="sk-...") as client:
            queue = client.annotation_queues.create("review", score_config_ids=["cfg-1"])
    """

    def __init__(
        self,
        host: Optional[str] = None,
        public_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        headers: Optional[Union[str, Mapping[str, str]]] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = Config(
            host=host,
            public_key=public_key,
            secret_key=secret_key,
            headers=headers,
            timeout=timeout,
        )
        self._http = HttpClient(self._config, http_client=http_client)

        self._annotation_queues = AnnotationQueues(self._http)
        self._annotation_items = AnnotationQueueItems(self._http)
        self._datasets = Datasets(self._http)
        self._dataset_items = DatasetItems(self._http)
        self._dataset_runs = DatasetRuns(self._http)
        self._health = Health(self._http)
        logger.debug("tracelane: client initialized for %s", self._config.base_url)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def annotation_queues(self) -> AnnotationQueues:
        """Annotation queues and queue assignments."""
        return self._annotation_queues

    @property
    def annotation_items(self) -> AnnotationQueueItems:
        """Items inside annotation queues."""
        return self._annotation_items

    @property
    def datasets(self) -> Datasets:
        return self._datasets

    @property
    def dataset_items(self) -> DatasetItems:
        return self._dataset_items

    @property
    def dataset_runs(self) -> DatasetRuns:
        """Dataset runs and dataset run items."""
        return self._dataset_runs

    @property
    def health(self) -> Health:
        return self._health

    def close(self) -> None:
        """Release the connection pool. A client passed in as ``http_client`` is left open."""
        self._http.close()

    def __enter__(self) -> "Tracelane":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()


__all__ = [
    "Tracelane",
    "Config",
    "TracelaneException",
    "ValidationException",
    "APIException",
    "__version__",
]
