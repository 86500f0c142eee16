"""Shared fixtures: an in-memory license provider and an isolated temp dir."""

import json
import tempfile
import threading

import pytest

from getlicense.cache import CacheLayout
from getlicense.errors import ProviderError

DEFAULT_LICENSES = {
    "mit": "MIT License",
    "apache-2.0": "Apache License 2.0",
    "gpl-3.0": "GNU General Public License v3.0",
}


def DetailPayload(key: str, name: str) -> bytes:

    return json.dumps(
        {
            "key": key,
            "name": name,
            "spdx_id": key.upper(),
            "url": f"https://api.github.com/licenses/{key}",
            "description": f"The {name}.",
            "permissions": ["commercial-use", "modifications"],
            "conditions": ["include-copyright"],
            "limitations": ["liability", "warranty"],
            "body": f"{name}\n\nCopyright (c) [year] [fullname]\n\nPermission is granted.\n",
            "featured": key == "mit",
        }
    ).encode("utf-8")


class FakeProvider:
    """Index provider backed by a dict, with optional fault injection."""

    def __init__(
        self,
        licenses: dict[str, str] | None = None,
        failIndex: bool = False,
        failDetail: set[str] | None = None,
        badDetail: set[str] | None = None,
        indexPayload: bytes | None = None,
    ):

        self.licenses = dict(DEFAULT_LICENSES if licenses is None else licenses)
        self.failIndex = failIndex
        self.failDetail = failDetail or set()
        self.badDetail = badDetail or set()
        self.indexPayload = indexPayload
        self.detailCalls: list[str] = []
        self.detailUrls: list[str | None] = []
        self._lock = threading.Lock()

    def FetchIndex(self) -> bytes:

        if self.failIndex:
            raise ProviderError("index unavailable")

        if self.indexPayload is not None:
            return self.indexPayload

        return json.dumps(
            [
                {"key": k, "name": n, "url": f"https://api.github.com/licenses/{k}"}
                for k, n in self.licenses.items()
            ]
        ).encode("utf-8")

    def FetchDetail(self, key: str, url: str | None = None) -> bytes:

        with self._lock:
            self.detailCalls.append(key)
            self.detailUrls.append(url)

        if key in self.failDetail:
            raise ProviderError(f"detail unavailable for {key}")

        if key in self.badDetail:
            return b"{not json"

        return DetailPayload(key, self.licenses[key])


@pytest.fixture(autouse=True)
def cleanEnvironment(monkeypatch):

    for name in ("GITHUB_TOKEN", "GETLICENSE_CONFIG", "GETLICENSE_API_URL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def scratchDir(tmp_path, monkeypatch):
    """Points tempfile at a private directory so leftover staging roots are visible."""

    scratch = tmp_path / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))

    return scratch


@pytest.fixture
def licenseCache(tmp_path) -> CacheLayout:

    return CacheLayout(tmp_path / "home" / ".license")


@pytest.fixture
def provider() -> FakeProvider:

    return FakeProvider()


def SnapshotTree(root) -> dict[str, bytes]:

    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }
