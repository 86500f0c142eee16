import shutil
from concurrent.futures import ThreadPoolExecutor

from .cache import CacheLayout
from .catalog import DecodeCatalog, LicenseSummary
from .errors import (
    CopyTreeFailedError,
    FetchFailedError,
    ProviderError,
    RemovePathFailedError,
    WriteFileFailedError,
)
from .materialize import MaterializeOutcome
from .outcomes import OutcomeCollector, RefreshOutcome
from .provider import IndexProvider
from .reporting import Reporter
from .staging import StagedArea, StagingArea


def Bootstrap(
    provider: IndexProvider, cache: CacheLayout, reporter: Reporter | None = None
) -> list[LicenseSummary]:
    """
    Replaces the local license cache with the latest remote versions.
    The index is fetched once, every license is materialized concurrently into a
    staging area, and the real cache is swapped only if every license succeeded.
    On any failure the real cache is left untouched.
    Parameters
    ----------
    provider : IndexProvider
        Source of the index and per-license detail.
    cache : CacheLayout
        The cache to replace.
    reporter : Reporter | None, optional
        Receives checkpoints and progress, by default a quiet reporter.
    Returns
    -------
    list[LicenseSummary]
        The licenses now in the cache, in index order.
    Raises
    ------
    LicenseError
        FetchFailedError if the index cannot be fetched, staging and commit
        errors as raised, or the first failure reported by a license task.
    """

    reporter = reporter or Reporter(quiet=True)

    try:
        serialized = provider.FetchIndex()

    except ProviderError as e:
        raise FetchFailedError(str(e)) from e

    reporter.Checkpoint("index-fetched")

    with StagedArea() as area:
        WriteIndex(area, serialized)
        reporter.Checkpoint("index-written")

        licenses = DecodeCatalog(serialized)
        reporter.Verbose(f"Found {len(licenses)} licenses in index.")

        for outcome in FanOut(licenses, area, provider, reporter):

            if not outcome.ok:
                raise outcome.error

        reporter.Checkpoint("templates-written")

        Commit(area, cache)
        reporter.Checkpoint("commit-complete")

    return licenses


def WriteIndex(area: StagingArea, serialized: bytes) -> None:

    try:
        area.indexFilePath.write_bytes(serialized)

    except OSError as e:
        raise WriteFileFailedError(area.indexFilePath) from e


def FanOut(
    licenses: list[LicenseSummary],
    area: StagingArea,
    provider: IndexProvider,
    reporter: Reporter,
) -> list[RefreshOutcome]:
    """
    Materializes every license on its own worker thread and waits for all of them.
    Parameters
    ----------
    licenses : list[LicenseSummary]
        One task is started per entry.
    area : StagingArea
        Staging directories the tasks write into.
    provider : IndexProvider
        Source of the detail bytes.
    reporter : Reporter
        Progress is advanced once per finished task.
    Returns
    -------
    list[RefreshOutcome]
        Exactly one outcome per license, in completion order.
    """

    collector = OutcomeCollector(len(licenses))

    if not licenses:

        return collector.Drain()

    with reporter.Track("Syncing licenses...", len(licenses)) as advance:

        def Task(summary: LicenseSummary) -> None:

            try:
                collector.Post(
                    MaterializeOutcome(summary, area.rawDir, area.templatesDir, provider)
                )

            finally:
                advance()

        with ThreadPoolExecutor(
            max_workers=len(licenses), thread_name_prefix="materialize"
        ) as executor:
            futures = [executor.submit(Task, summary) for summary in licenses]

    # Every task has finished here; surface anything that escaped a task
    for future in futures:
        future.result()

    return collector.Drain()


def Commit(area: StagingArea, cache: CacheLayout) -> None:
    """
    Swaps the staged data directory in as the real cache.
    Raises
    ------
    RemovePathFailedError
        If the existing cache cannot be removed. A missing cache is fine.
    CopyTreeFailedError
        If the staged data cannot be moved into place.
    """

    try:
        shutil.rmtree(cache.root)

    except FileNotFoundError:
        pass

    except OSError as e:
        raise RemovePathFailedError(cache.root) from e

    try:
        cache.root.mkdir(mode=0o700, parents=True, exist_ok=True)
        shutil.move(str(area.dataDir), str(cache.dataDir))

    except OSError as e:
        raise CopyTreeFailedError(area.dataDir, cache.dataDir) from e
