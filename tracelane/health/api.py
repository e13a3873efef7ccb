from tracelane.health.models import HealthResponse
from tracelane.http import TimeoutTypes
from tracelane.resource import ResourceClient


class Health(ResourceClient):
    """Public entry-point exposed as Tracelane.health"""

    __slots__ = ()

    def check(self, *, timeout: TimeoutTypes = None) -> HealthResponse:
        """Return the API health status and server version."""
        return self._call("GET", "/health", HealthResponse, operation="get health", timeout=timeout)
