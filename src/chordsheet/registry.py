from .adapters.base import SiteAdapter
from .adapters.supermusic import SupermusicAdapter
from .adapters.ultimate_guitar import UltimateGuitarAdapter
from .exceptions import UnsupportedSiteError
from .models import Options

_ADAPTERS: list[type[SiteAdapter]] = [
    UltimateGuitarAdapter,
    SupermusicAdapter,
]


def get_adapter(url: str, options: Options | None = None) -> SiteAdapter:
    """Return an instantiated adapter for the given URL.

    Raises UnsupportedSiteError if no adapter matches.
    """
    for cls in _ADAPTERS:
        if cls.can_handle(url):
            return cls(options)
    raise UnsupportedSiteError(url)
