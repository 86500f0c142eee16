from collections.abc import Callable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

CHECKPOINT_MESSAGES: dict[str, str] = {
    "index-fetched": "fetched license index...",
    "index-written": "created local index file...",
    "templates-written": "created license templates...",
    "commit-complete": "bootstrap complete!",
}


class Reporter:
    """
    Console output for one command invocation.
    Parameters
    ----------
    quiet : bool, optional
        Suppress everything except errors, by default False.
    verbose : bool, optional
        Emit progress checkpoints, by default False. Ignored when quiet.
    console : Console | None, optional
        Where to print, by default a stderr console.
    """

    def __init__(
        self, quiet: bool = False, verbose: bool = False, console: Console | None = None
    ):

        self.quiet = quiet
        self.verbose = verbose and not quiet
        self.console = console or Console(stderr=True, highlight=False)

    def Info(self, *args, **kwargs) -> None:

        if not self.quiet:
            self.console.print(*args, **kwargs)

    def Verbose(self, *args, **kwargs) -> None:

        if self.verbose:
            self.console.print(*args, **kwargs)

    def Error(self, message: str) -> None:

        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def Checkpoint(self, name: str) -> None:
        """
        Reports that the refresh passed a named checkpoint.
        Parameters
        ----------
        name : str
            One of the keys of CHECKPOINT_MESSAGES.
        """

        self.Verbose(CHECKPOINT_MESSAGES.get(name, name))

    @contextmanager
    def Track(self, description: str, total: int) -> Iterator[Callable[[], None]]:
        """
        Shows a progress bar while the body runs.
        Parameters
        ----------
        description : str
            Label shown next to the bar.
        total : int
            Number of steps the bar counts to.
        Yields
        ------
        Callable[[], None]
            Advances the bar by one step. Safe to call from worker threads.
        """

        progressColumns = [
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=None),
            MofNCompleteColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TimeElapsedColumn(),
        ]

        with Progress(
            *progressColumns,
            console=self.console,
            transient=True,
            disable=self.quiet,
        ) as progress:
            task = progress.add_task(f"[cyan]{description}", total=total)

            yield lambda: progress.advance(task)
