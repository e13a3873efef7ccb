from tracelane.common.models import ApiModel, ListMetadata, PaginatedResponse
from tracelane.common.query import ListParams, query_field

__all__ = ["ApiModel", "ListMetadata", "PaginatedResponse", "ListParams", "query_field"]
