import json
import logging
import os
from pathlib import Path
from typing import Callable, List, Sequence, Union

from pydantic import ValidationError

from .locks import ReadWriteLock
from .models import Service

logger = logging.getLogger(__name__)

DEFAULT_SERVICES = (
    ("Google", "https://www.google.com"),
    ("GitHub", "https://github.com"),
)


class RegistryError(Exception):
    pass


class RegistryParseError(RegistryError):
    pass


class RegistryIOError(RegistryError):
    pass


class Registry:
    """Ordered list of monitored services, written through to a JSON file.

    Positions are the only identity a service has: removing index i shifts
    every later entry down by one, so clients must re-fetch the list before
    issuing another removal.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        self._services: List[Service] = []
        self._lock = ReadWriteLock()

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._services)

    def load(self) -> None:
        """Replace the in-memory list with the contents of the backing file.

        A missing file is not an error and leaves the registry as it is.
        """
        with self._lock.write():
            try:
                raw = self._path.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.info("Services file %s not found, starting with an empty list", self._path)
                return
            except OSError as exc:
                raise RegistryIOError(f"cannot read {self._path}: {exc}") from exc
            self._services = self._parse(raw)
            logger.info("Loaded %d services from %s", len(self._services), self._path)

    def _parse(self, raw: str) -> List[Service]:
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise RegistryParseError(f"invalid JSON in {self._path}: {exc}") from exc
        if data is None:
            return []
        if not isinstance(data, list):
            raise RegistryParseError(f"{self._path} must contain a JSON array of services")
        try:
            return [Service.model_validate(item) for item in data]
        except ValidationError as exc:
            raise RegistryParseError(f"invalid service entry in {self._path}: {exc}") from exc

    def persist(self) -> None:
        with self._lock.write():
            self._persist_locked()

    def _persist_locked(self) -> None:
        payload = json.dumps([s.model_dump() for s in self._services], indent=2, ensure_ascii=False)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            raise RegistryIOError(f"cannot write {self._path}: {exc}") from exc

    def _flush(self) -> None:
        # Memory stays authoritative when the write fails
        try:
            self._persist_locked()
        except RegistryIOError as exc:
            logger.error("Failed to save services: %s", exc)

    def add(self, name: str, url: str) -> None:
        with self._lock.write():
            self._services.append(Service(name=name, url=url, status=False))
            self._flush()
        logger.info("Added service %r (%s)", name, url)

    def remove(self, index: int) -> bool:
        with self._lock.write():
            if index < 0 or index >= len(self._services):
                return False
            removed = self._services.pop(index)
            self._flush()
        logger.info("Removed service %r at index %d", removed.name, index)
        return True

    def snapshot(self) -> List[Service]:
        with self._lock.read():
            return [s.model_copy() for s in self._services]

    def update_statuses(self, compute: Callable[[Sequence[str]], Sequence[bool]]) -> None:
        """Overwrite every status with the verdicts ``compute`` returns for the URLs.

        Runs under the exclusive lock so readers see either the old or the
        new statuses, never a mix. Statuses are not persisted.
        """
        with self._lock.write():
            verdicts = list(compute([s.url for s in self._services]))
            if len(verdicts) != len(self._services):
                raise ValueError(
                    f"expected {len(self._services)} verdicts, got {len(verdicts)}"
                )
            for service, up in zip(self._services, verdicts):
                service.status = bool(up)


def open_registry(path: Union[str, Path]) -> Registry:
    """Create the registry used for the process lifetime, seeding defaults if empty."""
    registry = Registry(path)
    try:
        registry.path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Failed to create data directory %s: %s", registry.path.parent, exc)
    try:
        registry.load()
    except RegistryError as exc:
        logger.error("Failed to load services: %s", exc)
    if len(registry) == 0:
        logger.info("No services configured, adding defaults")
        for name, url in DEFAULT_SERVICES:
            registry.add(name, url)
    return registry
