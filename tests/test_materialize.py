"""Tests for materializing a single license into a directory pair."""

import json
import threading

import pytest

from conftest import FakeProvider
from getlicense.catalog import LicenseSummary
from getlicense.errors import (
    DeserializeFailedError,
    FetchFailedError,
    WriteFileFailedError,
)
from getlicense.materialize import Materialize, MaterializeOutcome
from getlicense.outcomes import OutcomeCollector


@pytest.fixture
def dirs(tmp_path):
    rawDir, templatesDir = tmp_path / "raw", tmp_path / "templates"
    rawDir.mkdir()
    templatesDir.mkdir()

    return rawDir, templatesDir


def test_writes_raw_and_template(dirs, provider):
    rawDir, templatesDir = dirs

    Materialize(LicenseSummary("mit", "MIT License"), rawDir, templatesDir, provider)

    raw = json.loads((rawDir / "mit.json").read_bytes())
    template = (templatesDir / "mit.tmpl").read_text(encoding="utf-8")
    assert raw["key"] == "mit"
    assert "Copyright (c) {{ year }} {{ fullname }}" in template
    assert "[year]" not in template


def test_passes_index_url_to_provider(dirs, provider):
    rawDir, templatesDir = dirs
    summary = LicenseSummary("mit", "MIT License", "https://api.github.com/licenses/mit")

    Materialize(summary, rawDir, templatesDir, provider)

    assert provider.detailUrls == ["https://api.github.com/licenses/mit"]


def test_fetch_failure(dirs):
    rawDir, templatesDir = dirs
    provider = FakeProvider(failDetail={"mit"})

    with pytest.raises(FetchFailedError):
        Materialize(LicenseSummary("mit", "MIT License"), rawDir, templatesDir, provider)

    assert list(rawDir.iterdir()) == []


def test_deserialize_failure_keeps_payload(dirs):
    rawDir, templatesDir = dirs
    provider = FakeProvider(badDetail={"mit"})

    with pytest.raises(DeserializeFailedError) as excinfo:
        Materialize(LicenseSummary("mit", "MIT License"), rawDir, templatesDir, provider)

    assert excinfo.value.payload == b"{not json"


def test_write_failure_names_path(tmp_path, provider):
    rawDir = tmp_path / "missing" / "raw"

    with pytest.raises(WriteFileFailedError) as excinfo:
        Materialize(LicenseSummary("mit", "MIT License"), rawDir, tmp_path, provider)

    assert excinfo.value.path == rawDir / "mit.json"


def test_outcome_wraps_errors(dirs):
    rawDir, templatesDir = dirs
    provider = FakeProvider(failDetail={"gpl-3.0"})

    ok = MaterializeOutcome(LicenseSummary("mit", "MIT"), rawDir, templatesDir, provider)
    failed = MaterializeOutcome(
        LicenseSummary("gpl-3.0", "GPL"), rawDir, templatesDir, provider
    )

    assert ok.ok and ok.key == "mit"
    assert not failed.ok
    assert isinstance(failed.error, FetchFailedError)


@pytest.mark.parametrize("attempt", range(5))
def test_fifty_concurrent_materializations(tmp_path, attempt):
    """Every concurrent task posts exactly one outcome, none lost or duplicated."""
    keys = [f"license-{i:02d}" for i in range(50)]
    provider = FakeProvider({k: k.title() for k in keys})
    rawDir, templatesDir = tmp_path / "raw", tmp_path / "templates"
    rawDir.mkdir()
    templatesDir.mkdir()
    collector = OutcomeCollector(len(keys))
    start = threading.Barrier(len(keys))

    def Task(summary):
        start.wait()
        collector.Post(MaterializeOutcome(summary, rawDir, templatesDir, provider))

    threads = [
        threading.Thread(target=Task, args=(LicenseSummary(k, k.title()),))
        for k in keys
    ]

    for t in threads:
        t.start()

    for t in threads:
        t.join()

    outcomes = collector.Drain()
    assert len(outcomes) == 50
    assert sorted(o.key for o in outcomes) == keys
    assert all(o.ok for o in outcomes)
    assert len(list(rawDir.iterdir())) == 50
    assert len(list(templatesDir.iterdir())) == 50
