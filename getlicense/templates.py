import re

from .catalog import LicenseDetail

RAW_PLACEHOLDER_TO_STANDARD_KEY: dict[str, str] = {
    "fullname": "fullname",
    "name of copyright owner": "fullname",
    "login": "fullname",
    "project": "project",
    "email": "email",
    "projecturl": "projecturl",
    "year": "year",
    "yyyy": "year",
    "description": "description",
}

RAW_PLACEHOLDER_PATTERN = re.compile(r"\[([^\]\n]+)\]")
TEMPLATE_FIELD_PATTERN = re.compile(r"\{\{ ([a-z]+) \}\}")


def RenderTemplate(detail: LicenseDetail) -> str:
    """
    Renders a license body into the cached template format.
    Recognized placeholders such as "[year]" or "[name of copyright owner]" become
    "{{ year }}" and "{{ fullname }}"; anything else in brackets is left alone.
    Parameters
    ----------
    detail : LicenseDetail
        The decoded license.
    Returns
    -------
    str
        The template text.
    """

    def Replace(match: re.Match) -> str:
        standardKey = RAW_PLACEHOLDER_TO_STANDARD_KEY.get(match.group(1).lower())

        return "{{ " + standardKey + " }}" if standardKey else match.group(0)

    return RAW_PLACEHOLDER_PATTERN.sub(Replace, detail.body)


def TemplateFields(template: str) -> set[str]:

    return set(TEMPLATE_FIELD_PATTERN.findall(template))


def FillTemplate(template: str, replacements: dict[str, str]) -> str:
    """
    Fills template fields with provided values.
    Parameters
    ----------
    template : str
        Text produced by RenderTemplate.
    replacements : dict[str, str]
        Standard keys (e.g., "year", "fullname") mapped to the text to insert.
    Returns
    -------
    str
        The filled text. Fields without a replacement stay in place.
    """

    def Replace(match: re.Match) -> str:
        value = replacements.get(match.group(1))

        return str(value) if value is not None else match.group(0)

    return TEMPLATE_FIELD_PATTERN.sub(Replace, template)
