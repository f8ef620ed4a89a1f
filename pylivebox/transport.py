import abc
import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple, Union

import requests
from requests.adapters import HTTPAdapter

from pylivebox.exceptions import InvalidURLError, NetworkError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    status_code: Optional[int]
    headers: Mapping[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None


class HTTPTransport(abc.ABC):
    """Sends one HTTP request and returns the raw response, no retries."""

    @abc.abstractmethod
    def send(self, method: str, url: str, headers: Mapping[str, str], body: Optional[bytes],
             timeout: Union[float, Tuple[float, float]]) -> TransportResponse:
        raise NotImplementedError

    def close(self):
        pass


class RequestsTransport(HTTPTransport):

    def __init__(self, poolmaxsize: int = 10, verify: bool = True):
        self.poolmaxsize = poolmaxsize  # pool max size for http connection re-use
        self.verify = verify
        if self.poolmaxsize > 0:
            # Create session object for http connection re-use
            self.session = requests.Session()
            adapter = HTTPAdapter(pool_maxsize=self.poolmaxsize)
            self.session.mount('http://', adapter)
            self.session.mount('https://', adapter)
        else:
            # Disable http persistent connections
            self.session = requests

    def send(self, method, url, headers, body, timeout):
        try:
            r = self.session.request(method, url, headers=dict(headers), data=body,
                                     timeout=timeout, verify=self.verify)
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema) as exc:
            log.debug(f"invalid url {url}: {exc}")
            raise InvalidURLError(url) from exc
        except requests.exceptions.RequestException as exc:
            log.debug(f"{method} {url} failed: {exc}")
            raise NetworkError(exc) from exc
        return TransportResponse(status_code=r.status_code, headers=dict(r.headers), content=r.content)

    def close(self):
        if isinstance(self.session, requests.Session):
            self.session.close()
