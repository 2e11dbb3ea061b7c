"""Base renderer class."""

from abc import ABC, abstractmethod

from bookpress.export.models import ExportInput


class BaseRenderer(ABC):
    """Abstract base class for export renderers."""

    content_type: str = "application/octet-stream"

    @abstractmethod
    def render(self, export_input: ExportInput) -> bytes:
        """Render the export input to artifact bytes."""
        pass

    @abstractmethod
    def get_extension(self) -> str:
        """Get the file extension for this renderer's output."""
        pass
