import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

import requests

from .registry import Registry

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class HealthChecker:
    """Reachability probe: a service is up only if GET returns HTTP 200."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, workers: int = 1) -> None:
        self.timeout = timeout
        self.workers = workers

    def check_one(self, url: str) -> bool:
        try:
            # stream=True so the body is never downloaded
            with requests.get(url, timeout=self.timeout, stream=True) as resp:
                return resp.status_code == 200
        except (requests.RequestException, ValueError) as exc:
            logger.debug("Check failed for %s: %s", url, exc)
            return False

    def _check_all(self, urls: Sequence[str]) -> List[bool]:
        if self.workers <= 1 or len(urls) <= 1:
            return [self.check_one(url) for url in urls]
        with ThreadPoolExecutor(max_workers=min(self.workers, len(urls))) as pool:
            return list(pool.map(self.check_one, urls))

    def sweep(self, registry: Registry) -> None:
        registry.update_statuses(self._check_all)
        if logger.isEnabledFor(logging.DEBUG):
            services = registry.snapshot()
            up = sum(1 for s in services if s.status)
            logger.debug("Sweep finished: %d/%d services up", up, len(services))
