from datetime import datetime
from pathlib import Path

from .cache import CacheLayout
from .errors import ReadFailedError, WriteFileFailedError
from .templates import FillTemplate, TemplateFields


def GenerateLicense(
    cache: CacheLayout,
    key: str,
    values: dict[str, str],
    outputPath: Path,
) -> set[str]:
    """
    Fills a cached license template and writes the result.
    Parameters
    ----------
    cache : CacheLayout
        The bootstrapped cache to read templates from.
    key : str
        License key (case-insensitive, e.g. "MIT").
    values : dict[str, str]
        Standard placeholder keys mapped to values. "year" defaults to the current year.
    outputPath : Path
        Where to write the filled license.
    Returns
    -------
    set[str]
        Template fields that had no value and remain in the written file.
    """

    templatePath = cache.TemplatePath(key.lower())

    try:
        template = templatePath.read_text(encoding="utf-8")

    except OSError as e:
        raise ReadFailedError(f"no template for '{key}' at {templatePath}") from e

    replacements = {k: v for k, v in values.items() if v is not None}
    replacements.setdefault("year", str(datetime.now().year))

    filledLicense = FillTemplate(template, replacements)

    try:
        outputPath.write_text(filledLicense, encoding="utf-8")

    except OSError as e:
        raise WriteFileFailedError(outputPath) from e

    return TemplateFields(filledLicense)
