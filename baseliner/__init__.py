"""Flag non-Baseline web-platform features in HTML and CSS sources."""

from ._version import __version__
from .model import ScanIssue, ScanOptions, ScanResult
from .scanner import Scanner, scan

__all__ = ["ScanIssue", "ScanOptions", "ScanResult", "Scanner", "__version__", "scan"]
