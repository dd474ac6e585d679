"""Archive writers that receive the files discovered by the tree walker."""

from .base_sink import ArchiveSink
from .zip_sink import ZipArchiveSink

__all__ = ["ArchiveSink", "ZipArchiveSink"]
