"""Base abstract class for library layout rule sets.

A rule set decides which directory an item's files live in, relative to the
library root. It is pure: no filesystem access, no collaborators beyond the
sanitizer it is handed.

Extensibility:
- To add a new layout, subclass RuleSet and implement directory_path.
"""

from abc import ABC, abstractmethod
from typing import Callable, Self

from assetgnome.models.core import MediaItemRef, ServerIdentity

Sanitizer = Callable[[str], str]


class RuleSet(ABC):
    """Abstract base class for library layout rule sets."""

    def __init__(self: Self, layout_name: str) -> None:
        """Initialize a rule set.

        Args:
            layout_name: Short name identifying the layout.
        """
        self.layout_name = layout_name

    @abstractmethod
    def directory_path(
        self: Self,
        item: MediaItemRef,
        server: ServerIdentity,
        sanitize: Sanitizer,
    ) -> list[str]:
        """Return the directory segments holding *item*'s files.

        Args:
            item: The media item to place.
            server: The server the item was synced from.
            sanitize: Callable applied to every segment before it is returned.

        Returns:
            A non-empty list of sanitized segments, starting with the server.
        """
        pass
