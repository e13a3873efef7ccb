from tracelane.health.api import Health
from tracelane.health.models import HealthResponse

__all__ = ["Health", "HealthResponse"]
