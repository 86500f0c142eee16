from .bootstrap import Bootstrap
from .cache import CacheLayout, DefaultCacheLayout
from .catalog import DecodeCatalog, DecodeDetail, LicenseDetail, LicenseSummary
from .errors import LicenseError
from .listing import ListLocal, ListRemote
from .provider import GithubLicenseProvider, IndexProvider
from .reporting import Reporter

__all__ = [
    "Bootstrap",
    "CacheLayout",
    "DecodeCatalog",
    "DecodeDetail",
    "DefaultCacheLayout",
    "GithubLicenseProvider",
    "IndexProvider",
    "LicenseDetail",
    "LicenseError",
    "LicenseSummary",
    "ListLocal",
    "ListRemote",
    "Reporter",
]
