"""Type aliases and protocols for layerview."""

from typing import TypeAlias, Protocol, Tuple, List, Optional

# Type aliases for better user experience
MapSize: TypeAlias = Tuple[int, int]  # (width, height) in pixels
Padding: TypeAlias = Tuple[int, int]  # (x, y) in pixels

# Protocols for service interfaces
class TileUrlFunction(Protocol):
    """Callable producing the request URL for one tile."""

    def __call__(self, coord: "TileCoord") -> str:
        ...


class CapabilitiesReader(Protocol):
    """Protocol for layer metadata readers."""

    def get_title(self, locator: "ServerLocator") -> Optional[str]:
        """Get the layer title."""
        ...

    def get_styles(self, locator: "ServerLocator") -> List["StyleInfo"]:
        """Get the styles declared for the layer."""
        ...

    def get_bounding_box(self, locator: "ServerLocator") -> Optional["LayerBounds"]:
        """Get the layer extent in degrees."""
        ...


# Import types that are used in protocols
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .types import LayerBounds, ServerLocator, StyleInfo, TileCoord
