import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from .config import (
    DATA_DIRECTORY,
    INDEX_FILE,
    RAW_DIRECTORY,
    TEMP_DIR_PREFIX,
    TEMPLATES_DIRECTORY,
)
from .errors import CreateDirFailedError, CreateTempDirFailedError


@dataclass(frozen=True)
class StagingArea:
    root: Path
    dataDir: Path
    rawDir: Path
    templatesDir: Path
    indexFilePath: Path


def CreateStagingArea() -> StagingArea:
    """
    Allocates a fresh scratch root in the system temporary directory.
    Returns
    -------
    StagingArea
        Paths under the new root. Only the root itself exists yet.
    Raises
    ------
    CreateTempDirFailedError
        If no unique temporary directory could be created.
    """

    try:
        root = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX))

    except OSError as e:
        raise CreateTempDirFailedError(str(e)) from e

    dataDir = root / DATA_DIRECTORY

    return StagingArea(
        root=root,
        dataDir=dataDir,
        rawDir=dataDir / RAW_DIRECTORY,
        templatesDir=dataDir / TEMPLATES_DIRECTORY,
        indexFilePath=dataDir / INDEX_FILE,
    )


def EnsureLayout(area: StagingArea) -> None:
    """
    Creates the raw and templates directories of a staging area.
    Raises
    ------
    CreateDirFailedError
        Naming the directory that could not be created.
    """

    for path in (area.rawDir, area.templatesDir):

        try:
            path.mkdir(mode=0o700, parents=True, exist_ok=False)

        except OSError as e:
            raise CreateDirFailedError(path) from e


def RemoveStagingArea(area: StagingArea) -> None:

    shutil.rmtree(area.root, ignore_errors=True)


@contextmanager
def StagedArea() -> Iterator[StagingArea]:
    """
    Scoped staging area: created with its layout on entry, deleted on every exit path.
    """

    area = CreateStagingArea()

    try:
        EnsureLayout(area)

        yield area

    finally:
        RemoveStagingArea(area)
