"""
Simple logging for apngspec: timestamped console lines plus an optional log file.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO


class SimpleLogger:
    """Simple logger that writes to console and file.

    Args:
        log_file: Optional path; every line is appended to it as well
        verbose: Emit debug messages
        stream: Console stream for normal output (stdout by default)
        error_stream: Console stream for errors (stderr by default)
    """

    def __init__(
        self,
        log_file: Optional[Path] = None,
        verbose: bool = False,
        stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
    ):
        self.log_file = log_file
        self.verbose = verbose
        self.stream = stream
        self.error_stream = error_stream
        self.warnings = 0

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"\n{'='*60}\n")
                f.write(f"Session started: {datetime.now().isoformat()}\n")
                f.write(f"{'='*60}\n")

    def log(self, message: str, prefix: str = "", error: bool = False) -> None:
        """Log a message to console and file.

        Args:
            message: The message to log
            prefix: Optional prefix like [INFO], [ERROR], etc.
            error: Whether to write to the error stream
        """
        timestamp = datetime.now().strftime("%H:%M:%S")

        if prefix:
            formatted = f"[{timestamp}] {prefix} {message}"
        else:
            formatted = f"[{timestamp}] {message}"

        if error:
            output = self.error_stream or sys.stderr
        else:
            output = self.stream or sys.stdout
        print(formatted, file=output, flush=True)

        if self.log_file:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(formatted + '\n')

    def table(self, headers: List[str], rows: List[List[str]]) -> None:
        """Log rows as a boxed, left-aligned table; nothing is logged without rows."""
        if not headers or not rows:
            return

        cells = [[str(cell) for cell in row[:len(headers)]] for row in rows]
        widths = [max(len(text) for text in column) for column in zip(headers, *cells)]
        rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

        def line(values: List[str]) -> str:
            return "| " + " | ".join(v.ljust(w) for v, w in zip(values, widths)) + " |"

        for text in (rule, line(headers), rule, *map(line, cells), rule):
            self.log(text)

    def section(self, title: str) -> None:
        """Print a section header."""
        self.log("")
        self.log("=" * 60)
        self.log(title.center(60))
        self.log("=" * 60)

    def success(self, message: str) -> None:
        self.log(message, prefix="[SUCCESS]")

    def error(self, message: str) -> None:
        self.log(message, prefix="[ERROR]", error=True)

    def warning(self, message: str) -> None:
        """Log a warning message and count it."""
        self.warnings += 1
        self.log(message, prefix="[WARNING]")

    def info(self, message: str) -> None:
        self.log(message, prefix="[INFO]")

    def debug(self, message: str) -> None:
        """Log a debug message, only in verbose mode."""
        if self.verbose:
            self.log(message, prefix="[DEBUG]")
