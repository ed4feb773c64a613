import json
import threading
import time
from pathlib import Path

import pytest

from webmonitor.registry import (
    DEFAULT_SERVICES,
    Registry,
    RegistryIOError,
    RegistryParseError,
    open_registry,
)


def _on_disk(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_add_appends_with_status_down_and_persists(registry, services_path):
    registry.add("Example", "https://example.com")

    services = registry.snapshot()
    assert len(services) == 3
    assert services[-1].model_dump() == {"name": "Example", "url": "https://example.com", "status": False}
    assert _on_disk(services_path) == [s.model_dump() for s in services]


def test_remove_shifts_later_entries(registry, services_path):
    registry.add("Example", "https://example.com")
    before = registry.snapshot()

    assert registry.remove(1) is True

    after = registry.snapshot()
    assert len(after) == 2
    assert after[0] == before[0]
    assert after[1] == before[2]
    assert _on_disk(services_path) == [s.model_dump() for s in after]


@pytest.mark.parametrize("index", [-1, 2, 99])
def test_remove_out_of_range_changes_nothing(registry, services_path, index):
    raw_before = services_path.read_bytes()
    before = registry.snapshot()

    assert registry.remove(index) is False

    assert registry.snapshot() == before
    assert services_path.read_bytes() == raw_before


def test_snapshot_is_an_independent_copy(registry):
    first = registry.snapshot()
    first[0].name = "changed"
    first.pop()

    second = registry.snapshot()
    assert [s.name for s in second] == ["Google", "GitHub"]
    assert registry.snapshot() == second


def test_persist_then_load_round_trip(registry, services_path):
    registry.update_statuses(lambda urls: [True, False])
    registry.persist()

    fresh = Registry(services_path)
    fresh.load()

    assert fresh.snapshot() == registry.snapshot()


def test_load_missing_file_is_not_an_error(tmp_path):
    reg = Registry(tmp_path / "absent.json")
    reg.load()
    assert reg.snapshot() == []


def test_load_null_document_is_empty(services_path):
    services_path.write_text("null")
    reg = Registry(services_path)
    reg.load()
    assert len(reg) == 0


@pytest.mark.parametrize("content", [
    "not json",
    '{"name": "x"}',
    '[{"name": "x"}]',
    '[{"name": "x", "url": 5}]',
])
def test_load_rejects_malformed_content(services_path, content):
    services_path.write_text(content)
    reg = Registry(services_path)
    with pytest.raises(RegistryParseError):
        reg.load()
    assert reg.snapshot() == []


def test_load_unreadable_path_raises_io_error(tmp_path):
    # a directory exists but cannot be read as a file
    reg = Registry(tmp_path)
    with pytest.raises(RegistryIOError):
        reg.load()


def test_persist_failure_keeps_memory(tmp_path, caplog):
    reg = Registry(tmp_path / "missing-dir" / "services.json")

    reg.add("Example", "https://example.com")

    assert [s.name for s in reg.snapshot()] == ["Example"]
    assert "Failed to save services" in caplog.text
    with pytest.raises(RegistryIOError):
        reg.persist()


def test_update_statuses_is_positional(registry):
    registry.update_statuses(lambda urls: [url == "https://github.com" for url in urls])
    assert [s.status for s in registry.snapshot()] == [False, True]


def test_update_statuses_rejects_wrong_count(registry):
    with pytest.raises(ValueError):
        registry.update_statuses(lambda urls: [True])
    assert [s.status for s in registry.snapshot()] == [False, False]


def test_concurrent_adds_are_not_lost(registry, services_path):
    workers = 20
    threads = [
        threading.Thread(target=registry.add, args=(f"svc-{i}", f"https://svc{i}.example"))
        for i in range(workers)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    services = registry.snapshot()
    assert len(services) == 2 + workers
    assert sorted(s.name for s in services[2:]) == sorted(f"svc-{i}" for i in range(workers))
    assert _on_disk(services_path) == [s.model_dump() for s in services]


def test_open_registry_seeds_defaults(tmp_path):
    path = tmp_path / "data" / "services.json"

    reg = open_registry(path)

    services = reg.snapshot()
    assert [(s.name, s.url) for s in services] == list(DEFAULT_SERVICES)
    assert not any(s.status for s in services)
    assert len(_on_disk(path)) == 2


def test_open_registry_keeps_existing_services(services_path):
    services_path.write_text(json.dumps([{"name": "Only", "url": "https://only.example", "status": True}]))

    reg = open_registry(services_path)

    assert [s.name for s in reg.snapshot()] == ["Only"]


def test_open_registry_survives_corrupt_file(services_path, caplog):
    services_path.write_text("{broken")

    reg = open_registry(services_path)

    assert "Failed to load services" in caplog.text
    assert [(s.name, s.url) for s in reg.snapshot()] == list(DEFAULT_SERVICES)


def test_load_permission_error_raises_io_error(services_path, monkeypatch):
    def denied(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_text", denied)
    reg = Registry(services_path)

    with pytest.raises(RegistryIOError):
        reg.load()


def test_open_registry_survives_unreadable_file(services_path, monkeypatch, caplog):
    def denied(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_text", denied)

    reg = open_registry(services_path)

    assert "Failed to load services" in caplog.text
    assert [(s.name, s.url) for s in reg.snapshot()] == list(DEFAULT_SERVICES)


@pytest.mark.parametrize("entry", [
    {"name": "a", "url": "b", "status": "yes"},
    {"name": "a", "url": "b", "status": 1},
    {"name": 1, "url": "b"},
])
def test_load_rejects_coercible_field_types(services_path, entry):
    services_path.write_text(json.dumps([entry]))
    with pytest.raises(RegistryParseError):
        Registry(services_path).load()


def test_snapshot_waits_for_status_update(registry):
    started = threading.Event()
    seen = []

    def slow_compute(urls):
        started.set()
        time.sleep(0.3)
        return [True] * len(urls)

    updater = threading.Thread(target=registry.update_statuses, args=(slow_compute,))
    updater.start()
    assert started.wait(5)

    reader = threading.Thread(target=lambda: seen.append([s.status for s in registry.snapshot()]))
    reader.start()
    reader.join(5)
    updater.join(5)

    assert seen == [[True, True]]
