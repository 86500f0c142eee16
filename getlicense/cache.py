from dataclasses import dataclass
from pathlib import Path

from .config import (
    DATA_DIRECTORY,
    INDEX_FILE,
    LICENSE_DIRECTORY,
    RAW_DIRECTORY,
    TEMPLATES_DIRECTORY,
)
from .errors import CannotLocateHomeDirError


@dataclass(frozen=True)
class CacheLayout:
    """
    The user-visible license cache rooted at root:
    data/index.json, data/raw/<key>.json and data/templates/<key>.tmpl.
    """

    root: Path

    @property
    def dataDir(self) -> Path:
        return self.root / DATA_DIRECTORY

    @property
    def rawDir(self) -> Path:
        return self.dataDir / RAW_DIRECTORY

    @property
    def templatesDir(self) -> Path:
        return self.dataDir / TEMPLATES_DIRECTORY

    @property
    def indexFilePath(self) -> Path:
        return self.dataDir / INDEX_FILE

    def TemplatePath(self, key: str) -> Path:
        return self.templatesDir / f"{key}.tmpl"


def DefaultCacheLayout(cacheDir: Path | None = None) -> CacheLayout:
    """
    Resolves the cache location, ~/.license unless cacheDir is given.
    Raises
    ------
    CannotLocateHomeDirError
        If the home directory cannot be determined.
    """

    if cacheDir is not None:

        return CacheLayout(Path(cacheDir))

    try:
        home = Path.home()

    except (RuntimeError, KeyError) as e:
        raise CannotLocateHomeDirError() from e

    return CacheLayout(home / LICENSE_DIRECTORY)
