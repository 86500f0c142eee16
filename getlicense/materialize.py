from pathlib import Path

from .catalog import DecodeDetail, LicenseSummary
from .errors import FetchFailedError, ProviderError, WriteFileFailedError
from .outcomes import RefreshOutcome
from .provider import IndexProvider
from .templates import RenderTemplate


def WriteBytes(path: Path, content: bytes) -> None:

    try:
        path.write_bytes(content)

    except OSError as e:
        raise WriteFileFailedError(path) from e


def Materialize(
    summary: LicenseSummary, rawDir: Path, templatesDir: Path, provider: IndexProvider
) -> None:
    """
    Fetches one license and writes its raw JSON and rendered template.
    Parameters
    ----------
    summary : LicenseSummary
        The license to fetch.
    rawDir : Path
        Directory receiving <key>.json.
    templatesDir : Path
        Directory receiving <key>.tmpl.
    provider : IndexProvider
        Source of the detail bytes.
    Raises
    ------
    FetchFailedError
        If the provider fails.
    DeserializeFailedError
        If the detail bytes are not a license record.
    WriteFileFailedError
        If either file cannot be written. A partial file may remain.
    """

    try:
        content = provider.FetchDetail(summary.key, summary.url)

    except ProviderError as e:
        raise FetchFailedError(f"{summary.key}: {e}") from e

    detail = DecodeDetail(content)

    WriteBytes(rawDir / f"{summary.key}.json", content)
    WriteBytes(
        templatesDir / f"{summary.key}.tmpl", RenderTemplate(detail).encode("utf-8")
    )


def MaterializeOutcome(
    summary: LicenseSummary, rawDir: Path, templatesDir: Path, provider: IndexProvider
) -> RefreshOutcome:
    """
    Runs Materialize and turns any exception into a failed outcome.
    """

    try:
        Materialize(summary, rawDir, templatesDir, provider)

    except Exception as e:

        return RefreshOutcome.Failure(summary.key, e)

    return RefreshOutcome.Success(summary.key)
