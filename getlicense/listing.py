from rich.console import Console
from rich.markup import escape

from .cache import CacheLayout
from .catalog import DecodeCatalog, LicenseSummary
from .errors import (
    DeserializeFailedError,
    FetchFailedError,
    ProviderError,
    ReadFailedError,
)
from .provider import IndexProvider

INDENT: str = "    "

stdoutConsole = Console(highlight=False)


def GetLocalList(cache: CacheLayout) -> list[LicenseSummary]:

    try:
        content = cache.indexFilePath.read_bytes()

    except OSError as e:
        raise ReadFailedError(str(e)) from e

    try:

        return DecodeCatalog(content)

    except DeserializeFailedError as e:
        raise ReadFailedError(str(e)) from e


def GetRemoteList(provider: IndexProvider) -> list[LicenseSummary]:

    try:

        return DecodeCatalog(provider.FetchIndex())

    except (ProviderError, DeserializeFailedError) as e:
        raise FetchFailedError(str(e)) from e


def PrintList(licenses: list[LicenseSummary], console: Console | None = None) -> None:
    """
    Prints licenses sorted by key.
    Parameters
    ----------
    licenses : list[LicenseSummary]
        Sorted in place as a side effect.
    console : Console | None, optional
        Output console, by default stdout.
    """

    console = console or stdoutConsole
    licenses.sort(key=lambda l: l.key)

    console.print("Available licenses:\n")

    for l in licenses:
        console.print(f"{INDENT}[cyan]{escape(l.key):<14}[/cyan]({escape(l.name)})")
    console.print()


def ListLocal(cache: CacheLayout, console: Console | None = None) -> list[LicenseSummary]:
    """
    Reads the locally cached index and prints the licenses in it.
    Raises
    ------
    ReadFailedError
        If the local index is missing or cannot be decoded.
    """

    licenses = GetLocalList(cache)
    PrintList(licenses, console)

    return licenses


def ListRemote(
    provider: IndexProvider, console: Console | None = None
) -> list[LicenseSummary]:
    """
    Fetches the remote index and prints the licenses in it.
    Raises
    ------
    FetchFailedError
        If the index cannot be fetched or decoded.
    """

    licenses = GetRemoteList(provider)
    PrintList(licenses, console)

    return licenses
