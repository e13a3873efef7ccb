from typing import Any, Optional

from tracelane.common.models import PaginatedResponse
from tracelane.common.validation import require
from tracelane.datasets.models import (
    CreateDatasetItemRequest,
    CreateDatasetRequest,
    CreateDatasetRunItemRequest,
    Dataset,
    DatasetItem,
    DatasetItemListParams,
    DatasetListParams,
    DatasetRun,
    DatasetRunItem,
    DatasetRunItemListParams,
    DatasetRunListParams,
    DatasetRunWithItems,
    DeleteDatasetRunResponse,
)
from tracelane.http import TimeoutTypes
from tracelane.resource import ResourceClient


class Datasets(ResourceClient):
    """Public entry-point exposed as Tracelane.datasets"""

    __slots__ = ()

    def get(self, dataset_name: str, *, timeout: TimeoutTypes = None) -> Dataset:
        """
        Get a dataset by name.

        Args:
            dataset_name: Name of the dataset
            timeout: Optional per-call timeout in seconds

        Returns:
            Dataset: The dataset
        """
        require(dataset_name, "datasetName")
        return self._call(
            "GET",
            "/v2/datasets/{datasetName}",
            Dataset,
            operation="get dataset",
            path_params={"datasetName": dataset_name},
            timeout=timeout,
        )

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> PaginatedResponse[Dataset]:
        """List datasets. Omitted page/limit are left to the server defaults."""
        return self._call(
            "GET",
            "/v2/datasets",
            PaginatedResponse[Dataset],
            operation="list datasets",
            params=DatasetListParams(page=page, limit=limit),
            timeout=timeout,
        )

    def create(
        self,
        name: str,
        description: Optional[str] = None,
        metadata: Any = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> Dataset:
        """
        Create a dataset.

        Args:
            name: Dataset name, required
            description: Optional description
            metadata: Optional JSON-serializable metadata
            timeout: Optional per-call timeout in seconds

        Returns:
            Dataset: The created dataset
        """
        request = CreateDatasetRequest(name=name, description=description, metadata=metadata)
        request.validate()
        return self._call(
            "POST",
            "/v2/datasets",
            Dataset,
            operation="create dataset",
            body=request.to_payload(),
            timeout=timeout,
        )


class DatasetItems(ResourceClient):
    """Public entry-point exposed as Tracelane.dataset_items"""

    __slots__ = ()

    def get(self, item_id: str, *, timeout: TimeoutTypes = None) -> DatasetItem:
        """Get a dataset item by id."""
        require(item_id, "id")
        return self._call(
            "GET",
            "/dataset-items/{id}",
            DatasetItem,
            operation="get dataset item",
            path_params={"id": item_id},
            timeout=timeout,
        )

    def list(
        self,
        dataset_name: Optional[str] = None,
        source_trace_id: Optional[str] = None,
        source_observation_id: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> PaginatedResponse[DatasetItem]:
        """
        List dataset items, optionally filtered.

        Args:
            dataset_name: Only items of this dataset
            source_trace_id: Only items created from this trace
            source_observation_id: Only items created from this observation
            page: Page number, server default when omitted
            limit: Page size, server default when omitted
            timeout: Optional per-call timeout in seconds

        Returns:
            PaginatedResponse[DatasetItem]: The requested page
        """
        params = DatasetItemListParams(
            dataset_name=dataset_name,
            source_trace_id=source_trace_id,
            source_observation_id=source_observation_id,
            page=page,
            limit=limit,
        )
        return self._call(
            "GET",
            "/dataset-items",
            PaginatedResponse[DatasetItem],
            operation="list dataset items",
            params=params,
            timeout=timeout,
        )

    def create(
        self,
        dataset_name: str,
        input: Any = None,
        expected_output: Any = None,
        metadata: Any = None,
        source_trace_id: Optional[str] = None,
        source_observation_id: Optional[str] = None,
        status: Optional[str] = None,
        id: Optional[str] = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> DatasetItem:
        """
        Create a dataset item.

        Args:
            dataset_name: Dataset the item belongs to, required
            input: Input value of any JSON shape
            expected_output: Expected output of any JSON shape
            metadata: Metadata of any JSON shape
            source_trace_id: Trace the item was derived from
            source_observation_id: Observation the item was derived from
            status: Item status string, passed through as is
            id: Client-chosen id; the server generates one when omitted
            timeout: Optional per-call timeout in seconds

        Returns:
            DatasetItem: The created item
        """
        request = CreateDatasetItemRequest(
            dataset_name=dataset_name,
            input=input,
            expected_output=expected_output,
            metadata=metadata,
            source_trace_id=source_trace_id,
            source_observation_id=source_observation_id,
            status=status,
            id=id,
        )
        request.validate()
        return self._call(
            "POST",
            "/dataset-items",
            DatasetItem,
            operation="create dataset item",
            body=request.to_payload(),
            timeout=timeout,
        )

    def delete(self, item_id: str, *, timeout: TimeoutTypes = None) -> None:
        """Delete a dataset item by id."""
        require(item_id, "id")
        self._send(
            "DELETE",
            "/dataset-items/{id}",
            operation="delete dataset item",
            path_params={"id": item_id},
            timeout=timeout,
        )


class DatasetRuns(ResourceClient):
    """Public entry-point exposed as Tracelane.dataset_runs"""

    __slots__ = ()

    def list(
        self,
        dataset_name: str,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> PaginatedResponse[DatasetRun]:
        """List the runs of a dataset."""
        require(dataset_name, "datasetName")
        return self._call(
            "GET",
            "/datasets/{datasetName}/runs",
            PaginatedResponse[DatasetRun],
            operation="get dataset runs",
            path_params={"datasetName": dataset_name},
            params=DatasetRunListParams(page=page, limit=limit),
            timeout=timeout,
        )

    def get(self, dataset_name: str, run_name: str, *, timeout: TimeoutTypes = None) -> DatasetRunWithItems:
        """Get a dataset run together with all of its run items."""
        require(dataset_name, "datasetName")
        require(run_name, "runName")
        return self._call(
            "GET",
            "/datasets/{datasetName}/runs/{runName}",
            DatasetRunWithItems,
            operation="get dataset run",
            path_params={"datasetName": dataset_name, "runName": run_name},
            timeout=timeout,
        )

    def delete(self, dataset_name: str, run_name: str, *, timeout: TimeoutTypes = None) -> DeleteDatasetRunResponse:
        """Delete a dataset run and all of its run items."""
        require(dataset_name, "datasetName")
        require(run_name, "runName")
        return self._call(
            "DELETE",
            "/datasets/{datasetName}/runs/{runName}",
            DeleteDatasetRunResponse,
            operation="delete dataset run",
            path_params={"datasetName": dataset_name, "runName": run_name},
            timeout=timeout,
        )

    def create_item(
        self,
        run_name: str,
        trace_id: str,
        run_description: Optional[str] = None,
        dataset_item_id: Optional[str] = None,
        metadata: Any = None,
        observation_id: Optional[str] = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> DatasetRunItem:
        """
        Record a run item, creating the run on the server if it does not exist yet.

        If the run already exists its description and metadata are replaced by
        ``run_description`` and ``metadata``.

        Args:
            run_name: Name of the run, required
            trace_id: Trace produced for the dataset item, required
            run_description: Optional run description
            dataset_item_id: Dataset item the trace belongs to
            metadata: Optional run metadata of any JSON shape
            observation_id: Optional observation within the trace
            timeout: Optional per-call timeout in seconds

        Returns:
            DatasetRunItem: The created run item
        """
        request = CreateDatasetRunItemRequest(
            run_name=run_name,
            trace_id=trace_id,
            run_description=run_description,
            dataset_item_id=dataset_item_id,
            metadata=metadata,
            observation_id=observation_id,
        )
        request.validate()
        return self._call(
            "POST",
            "/dataset-run-items",
            DatasetRunItem,
            operation="create dataset run item",
            body=request.to_payload(),
            timeout=timeout,
        )

    def list_items(
        self,
        dataset_id: str,
        run_name: str,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        *,
        timeout: TimeoutTypes = None,
    ) -> PaginatedResponse[DatasetRunItem]:
        """List the items of a run; both the dataset id and the run name are required."""
        require(dataset_id, "datasetId")
        require(run_name, "runName")
        params = DatasetRunItemListParams(dataset_id=dataset_id, run_name=run_name, page=page, limit=limit)
        return self._call(
            "GET",
            "/dataset-run-items",
            PaginatedResponse[DatasetRunItem],
            operation="list dataset run items",
            params=params,
            timeout=timeout,
        )
