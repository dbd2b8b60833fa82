"""Doc comment extraction engine."""

from .classifier import end_of_signature
from .machine import LineScanner, scan_lines, scan_text, split_lines, step

__all__ = ["LineScanner", "end_of_signature", "scan_lines", "scan_text", "split_lines", "step"]
