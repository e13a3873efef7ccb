from tracelane.datasets.api import DatasetItems, DatasetRuns, Datasets
from tracelane.datasets.models import (
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

__all__ = [
    "Datasets",
    "DatasetItems",
    "DatasetRuns",
    "Dataset",
    "DatasetItem",
    "DatasetItemListParams",
    "DatasetListParams",
    "DatasetRun",
    "DatasetRunItem",
    "DatasetRunItemListParams",
    "DatasetRunListParams",
    "DatasetRunWithItems",
    "DeleteDatasetRunResponse",
]
