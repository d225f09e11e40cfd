from enum import Enum
from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console
from rich.markup import escape


class DiagnosticLevel(Enum):
    ERROR = "error"
    WARNING = "warning"


_STYLES = {
    DiagnosticLevel.ERROR: "red",
    DiagnosticLevel.WARNING: "yellow",
}


@dataclass(frozen=True)
class SourceLocation:
    """Human-facing location, 1-based line and column"""
    line: int
    column: int
    file: str = "<stdin>"
    raw_line: str = ""

    def __str__(self):
        return f"{self.file}:{self.line}:{self.column}"

    def caret_padding(self) -> str:
        # Keep tabs so the caret lines up under the raw line
        prefix = self.raw_line[:self.column - 1]
        return ''.join('\t' if ch == '\t' else ' ' for ch in prefix)


@dataclass
class Diagnostic:
    level: DiagnosticLevel
    message: str
    location: Optional[SourceLocation] = None
    error: Optional[Exception] = None

    def format(self, with_colors: bool = True) -> str:
        """Render as text, as rich markup when with_colors is set"""
        text = f"{self.level.value}: {self.message}"
        if with_colors:
            style = _STYLES[self.level]
            result = f"[{style}]{escape(text)}[/{style}]"
        else:
            result = text

        if self.location:
            where = escape(str(self.location)) if with_colors else str(self.location)
            result = f"{where}: {result}"
            if self.location.raw_line:
                raw_line = escape(self.location.raw_line) if with_colors else self.location.raw_line
                result += f"\n  {raw_line}"
                result += f"\n  {self.location.caret_padding()}^"

        return result


class DiagnosticEngine:
    def __init__(self):
        self.diagnostics: List[Diagnostic] = []
        self.error_count = 0
        self.warning_count = 0

    def report(self, diag: Diagnostic):
        self.diagnostics.append(diag)
        if diag.level == DiagnosticLevel.ERROR:
            self.error_count += 1
        elif diag.level == DiagnosticLevel.WARNING:
            self.warning_count += 1

    def error(self, message: str, location: Optional[SourceLocation] = None, **kwargs):
        self.report(Diagnostic(DiagnosticLevel.ERROR, message, location, **kwargs))

    def warning(self, message: str, location: Optional[SourceLocation] = None, **kwargs):
        self.report(Diagnostic(DiagnosticLevel.WARNING, message, location, **kwargs))

    def has_errors(self) -> bool:
        return self.error_count > 0

    @property
    def errors(self) -> List[Exception]:
        """Exceptions attached to error diagnostics, in report order"""
        return [d.error for d in self.diagnostics
                if d.level == DiagnosticLevel.ERROR and d.error is not None]

    def of_level(self, level: DiagnosticLevel) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.level == level]

    def __iter__(self):
        return iter(self.diagnostics)

    def __len__(self):
        return len(self.diagnostics)

    def print_all(self, console: Optional[Console] = None, with_colors: bool = True,
                  level: Optional[DiagnosticLevel] = None):
        console = console or Console(stderr=True, soft_wrap=True)
        for diag in self.diagnostics:
            if level is not None and diag.level != level:
                continue
            console.print(diag.format(with_colors), markup=with_colors, highlight=False)
