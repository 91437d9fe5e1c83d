"""File collection and content scanning."""

from wildgrep.processors.content_scanner import ContentScanner
from wildgrep.processors.file_processor import FileProcessor

__all__ = ["ContentScanner", "FileProcessor"]
