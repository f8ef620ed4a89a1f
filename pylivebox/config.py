import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import urlsplit

from pylivebox.exceptions import InvalidURLError

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0  # seconds, used as both connect and read timeout
VALID_SCHEMES = ('http', 'https')


def validate_url(url: str) -> str:
    """Return url unchanged when it is an absolute http(s) URL with a host."""
    if not isinstance(url, str) or not url:
        raise InvalidURLError(str(url))
    try:
        parts = urlsplit(url)
        # Accessing port validates it
        _ = parts.port
    except ValueError as exc:
        log.debug(f"unable to parse url '{url}': {exc}")
        raise InvalidURLError(url) from exc
    if parts.scheme.lower() not in VALID_SCHEMES or not parts.hostname:
        raise InvalidURLError(url)
    return url


@dataclass(frozen=True)
class LiveboxClientConfiguration:
    """
    Everything the dispatcher needs to reach the router.

    timeout is handed to requests as (connect, read): it bounds the TCP
    connection setup and each wait for data from the router, not the total
    transfer time. A router that keeps trickling bytes can take longer.

    Instances are never modified; use replace() (or the router's
    update_base_url / update_credentials) to get a new one.
    """
    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    default_headers: Dict[str, str] = field(default_factory=dict)
    username: Optional[str] = None
    password: Optional[str] = None

    def __post_init__(self):
        validate_url(self.base_url)

    @classmethod
    def from_string(cls, url: str, timeout: float = DEFAULT_TIMEOUT,
                    default_headers: Optional[Dict[str, str]] = None,
                    username: Optional[str] = None, password: Optional[str] = None) -> "LiveboxClientConfiguration":
        return cls(base_url=validate_url(url), timeout=timeout,
                   default_headers=dict(default_headers or {}),
                   username=username, password=password)

    def replace(self, **changes) -> "LiveboxClientConfiguration":
        return dataclasses.replace(self, **changes)

    @property
    def has_credentials(self) -> bool:
        return self.username is not None and self.password is not None

    def __repr__(self):
        # Keep the password out of logs and tracebacks
        masked = None if self.password is None else '***'
        return (f"LiveboxClientConfiguration(base_url={self.base_url!r}, timeout={self.timeout!r}, "
                f"default_headers={self.default_headers!r}, username={self.username!r}, password={masked!r})")
