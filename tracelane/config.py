import logging
import os
from typing import Dict, Mapping, Optional, Union

from .version import __version__

logger = logging.getLogger(__name__)

_DEFAULT_HOST = "https://cloud.langfuse.com"
_DEFAULT_TIMEOUT = 10.0


class Config:
    """
    Holds configuration options for the API client:
      - host:        Base URL of the platform (without the /api/public prefix)
      - public_key:  Public API key, sent as the basic auth username
      - secret_key:  Secret API key, sent as the basic auth password
      - headers:     Additional headers, as a dict or "key1=value1,key2=value2"
      - timeout:     Default request timeout in seconds
    """

    # SDK Constants
    SDK_NAME = "tracelane"
    LIBRARY_NAME = "tracelane"
    LIBRARY_VERSION = __version__
    API_PREFIX = "/api/public"

    def __init__(
        self,
        host: Optional[str] = None,
        public_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        headers: Optional[Union[str, Mapping[str, str]]] = None,
        timeout: Optional[float] = None,
    ) -> None:
        # Host: param, else env, else the hosted platform
        self.host = (host or os.getenv("TRACELANE_HOST") or _DEFAULT_HOST).strip()

        self.public_key = public_key or os.getenv("TRACELANE_PUBLIC_KEY")
        self.secret_key = secret_key or os.getenv("TRACELANE_SECRET_KEY")
        if not (self.public_key and self.secret_key):
            logger.warning(
                "tracelane.config: TRACELANE_PUBLIC_KEY and TRACELANE_SECRET_KEY are not both set; "
                "requests will be sent without authentication"
            )

        if headers is None:
            headers = os.getenv("TRACELANE_HEADERS")
        self.headers: Dict[str, str] = self._parse_headers(headers)

        if timeout is not None:
            self.timeout = float(timeout)
        else:
            self.timeout = self._timeout_from_env()

    @property
    def base_url(self) -> str:
        """Host joined with the public API prefix, without a trailing slash."""
        host = self.host.rstrip("/")
        if host.endswith(self.API_PREFIX):
            return host
        return host + self.API_PREFIX

    @staticmethod
    def _parse_headers(headers: Optional[Union[str, Mapping[str, str]]]) -> Dict[str, str]:
        if not headers:
            return {}
        if isinstance(headers, Mapping):
            return {str(k): str(v) for k, v in headers.items()}

        parsed: Dict[str, str] = {}
        for pair in headers.split(","):
            if not pair.strip():
                continue
            key, sep, value = pair.partition("=")
            if not sep or not key.strip():
                logger.warning("tracelane.config: Ignoring malformed header entry '%s'", pair)
                continue
            parsed[key.strip()] = value.strip()
        return parsed

    @staticmethod
    def _timeout_from_env() -> float:
        timeout_env = os.getenv("TRACELANE_TIMEOUT")
        if not timeout_env:
            return _DEFAULT_TIMEOUT
        try:
            return float(timeout_env)
        except ValueError:
            logger.warning(
                "tracelane.config: Invalid TRACELANE_TIMEOUT value '%s', using default %.1f",
                timeout_env,
                _DEFAULT_TIMEOUT,
            )
            return _DEFAULT_TIMEOUT
