import json
from dataclasses import dataclass, field
from pathlib import PurePosixPath, PureWindowsPath

from .errors import DeserializeFailedError


@dataclass(frozen=True)
class LicenseSummary:
    key: str
    name: str
    # Detail URL reported by the index, if any
    url: str | None = None


@dataclass(frozen=True)
class LicenseDetail:
    key: str
    name: str
    body: str
    spdxId: str | None = None
    description: str | None = None
    implementation: str | None = None
    htmlUrl: str | None = None
    permissions: tuple[str, ...] = field(default_factory=tuple)
    conditions: tuple[str, ...] = field(default_factory=tuple)
    limitations: tuple[str, ...] = field(default_factory=tuple)
    featured: bool = False


def LoadJson(payload: bytes) -> object:

    try:

        return json.loads(payload)

    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DeserializeFailedError(payload, str(e)) from e


def RequireText(record: dict, name: str, payload: bytes) -> str:

    value = record.get(name)

    if not isinstance(value, str) or not value:
        raise DeserializeFailedError(payload, f"missing or empty '{name}'")

    return value


def OptionalText(record: dict, name: str) -> str | None:

    value = record.get(name)

    return value if isinstance(value, str) else None


def RequireFileKey(record: dict, payload: bytes) -> str:
    """
    Reads a license key that is safe to use as a single file name.
    """

    key = RequireText(record, "key", payload)

    if (
        key in (".", "..")
        or any(c in key for c in "/\\\0")
        or PurePosixPath(key).name != key
        or PureWindowsPath(key).name != key
    ):
        raise DeserializeFailedError(payload, f"invalid license key '{key}'")

    return key


def DecodeCatalog(payload: bytes) -> list[LicenseSummary]:
    """
    Decodes the raw license index into summaries.
    Parameters
    ----------
    payload : bytes
        JSON array of license records as served by the licenses endpoint.
    Returns
    -------
    list[LicenseSummary]
        One summary per record, in the order they appear in the payload.
    Raises
    ------
    DeserializeFailedError
        If the payload is not JSON, not an array of license-like records, or has
        a key that is duplicated or not a plain file name.
    """

    records = LoadJson(payload)

    if not isinstance(records, list):
        raise DeserializeFailedError(payload, "index is not a list")

    summaries = []
    seen = set()

    for record in records:

        if not isinstance(record, dict):
            raise DeserializeFailedError(payload, "index entry is not an object")

        key = RequireFileKey(record, payload)

        # Each key owns one raw/template file pair
        if key in seen:
            raise DeserializeFailedError(payload, f"duplicate key '{key}'")
        seen.add(key)

        summaries.append(
            LicenseSummary(
                key=key,
                name=RequireText(record, "name", payload),
                url=OptionalText(record, "url"),
            )
        )

    return summaries


def DecodeDetail(payload: bytes) -> LicenseDetail:
    """
    Decodes the full record for one license.
    Parameters
    ----------
    payload : bytes
        JSON object for a single license.
    Returns
    -------
    LicenseDetail
        The decoded license, rule tags kept as tuples.
    """

    record = LoadJson(payload)

    if not isinstance(record, dict):
        raise DeserializeFailedError(payload, "license detail is not an object")

    body = record.get("body")

    if not isinstance(body, str):
        raise DeserializeFailedError(payload, "missing 'body'")

    def Tags(name: str) -> tuple[str, ...]:
        value = record.get(name) or []

        if not isinstance(value, list):
            raise DeserializeFailedError(payload, f"'{name}' is not a list")

        return tuple(str(tag) for tag in value)

    return LicenseDetail(
        key=RequireText(record, "key", payload),
        name=RequireText(record, "name", payload),
        body=body,
        spdxId=OptionalText(record, "spdx_id"),
        description=OptionalText(record, "description"),
        implementation=OptionalText(record, "implementation"),
        htmlUrl=OptionalText(record, "html_url"),
        permissions=Tags("permissions"),
        conditions=Tags("conditions"),
        limitations=Tags("limitations"),
        featured=bool(record.get("featured", False)),
    )
