"""base exporter interface."""

from abc import ABC, abstractmethod

from mdrender.core.models import Document


class Exporter(ABC):  # pylint: disable=too-few-public-methods
    """abstract base class for document exporters."""

    @abstractmethod
    def export(
        self,
        document: Document,
        destination: str,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> bool:
        """
        Export a rendered document to the destination.

        Args:
            document: The rendered document to export
            destination: Where to write the export (interpretation varies by exporter)
            dry_run: If True, don't actually write anything
            overwrite: If True, overwrite existing content

        Returns:
            True if the document was written
        """
        ...  # pylint: disable=unnecessary-ellipsis
