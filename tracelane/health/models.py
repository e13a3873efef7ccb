from tracelane.common.models import ApiModel


class HealthResponse(ApiModel):
    """Server health status (e.g. "OK") and version."""

    status: str
    version: str = ""
