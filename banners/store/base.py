"""Abstract banner store.

The hosting application supplies the concrete store (database, flat file,
remote service). The selector only ever reads the full list and appends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from banners.models.banner import Banner


class BannerStore(ABC):
    """Storage access for banner records.

    Implementations signal failures by raising; ``StoreReadError`` and
    ``StoreWriteError`` are provided for that purpose.
    """

    @abstractmethod
    def get_banners(self) -> list["Banner"]:
        """Return every stored banner, in store order."""
        ...

    @abstractmethod
    def save_banner(self, banner: "Banner") -> None:
        """Persist *banner*."""
        ...
