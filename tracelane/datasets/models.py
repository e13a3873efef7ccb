"""Data models for datasets, dataset items and dataset runs."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from tracelane.common.models import ApiModel
from tracelane.common.query import ListParams, query_field
from tracelane.common.validation import require


class Dataset(ApiModel):
    """
    A named collection of input/expected-output examples.

    Attributes:
        id: Server-assigned identifier.
        name: Dataset name, unique within a project.
        description: Optional description.
        metadata: Arbitrary JSON value attached to the dataset.
        project_id: Owning project.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: str
    name: str
    description: Optional[str] = None
    metadata: Any = None
    project_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DatasetItem(ApiModel):
    """
    A single example of a dataset, optionally linked to the trace/observation it came from.

    ``input``, ``expected_output`` and ``metadata`` are opaque JSON values.
    """

    id: str
    dataset_id: Optional[str] = None
    dataset_name: Optional[str] = None
    input: Any = None
    expected_output: Any = None
    metadata: Any = None
    source_trace_id: Optional[str] = None
    source_observation_id: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DatasetRun(ApiModel):
    """A named evaluation pass over a dataset."""

    id: str
    name: str
    description: Optional[str] = None
    metadata: Any = None
    dataset_id: Optional[str] = None
    dataset_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DatasetRunItem(ApiModel):
    """Links one dataset item to the trace produced for it during a run."""

    id: str
    dataset_run_id: Optional[str] = None
    dataset_run_name: Optional[str] = None
    dataset_item_id: Optional[str] = None
    trace_id: Optional[str] = None
    observation_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DatasetRunWithItems(DatasetRun):
    dataset_run_items: List[DatasetRunItem] = []


class DeleteDatasetRunResponse(ApiModel):
    message: Optional[str] = None


@dataclass
class CreateDatasetRequest:
    """Body of ``POST /v2/datasets``."""

    name: str
    description: Optional[str] = None
    metadata: Any = None

    def validate(self) -> None:
        require(self.name, "name")

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": self.name}
        if self.description:
            payload["description"] = self.description
        if self.metadata is not None:
            payload["metadata"] = self.metadata
        return payload


@dataclass
class CreateDatasetItemRequest:
    """
    Body of ``POST /dataset-items``.

    Only ``dataset_name`` is required; every other field is passed through
    untouched and omitted from the body when unset.
    """

    dataset_name: str
    input: Any = None
    expected_output: Any = None
    metadata: Any = None
    source_trace_id: Optional[str] = None
    source_observation_id: Optional[str] = None
    status: Optional[str] = None
    id: Optional[str] = None

    def validate(self) -> None:
        require(self.dataset_name, "datasetName")

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"datasetName": self.dataset_name}
        optional = {
            "input": self.input,
            "expectedOutput": self.expected_output,
            "metadata": self.metadata,
            "sourceTraceId": self.source_trace_id,
            "sourceObservationId": self.source_observation_id,
            "status": self.status,
            "id": self.id,
        }
        payload.update({key: value for key, value in optional.items() if value is not None and value != ""})
        return payload


@dataclass
class CreateDatasetRunItemRequest:
    """
    Body of ``POST /dataset-run-items``.

    The server creates the run named ``run_name`` if it does not exist yet and
    otherwise updates its description and metadata.
    """

    run_name: str
    trace_id: str
    run_description: Optional[str] = None
    dataset_item_id: Optional[str] = None
    metadata: Any = None
    observation_id: Optional[str] = None

    def validate(self) -> None:
        require(self.run_name, "runName")
        require(self.trace_id, "traceId")

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"runName": self.run_name, "traceId": self.trace_id}
        if self.run_description:
            payload["runDescription"] = self.run_description
        if self.dataset_item_id:
            payload["datasetItemId"] = self.dataset_item_id
        if self.metadata is not None:
            payload["metadata"] = self.metadata
        if self.observation_id:
            payload["observationId"] = self.observation_id
        return payload


@dataclass
class DatasetListParams(ListParams):
    page: Optional[int] = query_field("page")
    limit: Optional[int] = query_field("limit")


@dataclass
class DatasetItemListParams(ListParams):
    dataset_name: Optional[str] = query_field("datasetName")
    source_trace_id: Optional[str] = query_field("sourceTraceId")
    source_observation_id: Optional[str] = query_field("sourceObservationId")
    page: Optional[int] = query_field("page")
    limit: Optional[int] = query_field("limit")


@dataclass
class DatasetRunListParams(ListParams):
    page: Optional[int] = query_field("page")
    limit: Optional[int] = query_field("limit")


@dataclass
class DatasetRunItemListParams(ListParams):
    dataset_id: Optional[str] = query_field("datasetId")
    run_name: Optional[str] = query_field("runName")
    page: Optional[int] = query_field("page")
    limit: Optional[int] = query_field("limit")
