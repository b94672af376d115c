"""Records produced by the scanner: one SourceFile per input file."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IncludeDirective:
    """A single ``#include`` as written in the file.

    ``path`` is the verbatim text between the delimiters; ``system`` is True
    for the ``<...>`` form and False for ``"..."``.
    """

    path: str
    system: bool = False
    line: int = 0

    def __str__(self) -> str:
        return f"<{self.path}>" if self.system else f'"{self.path}"'


@dataclass(frozen=True)
class ScanResult:
    """What the lexer learns from one file's text."""

    text_lines: int
    code_lines: int
    includes: tuple[IncludeDirective, ...] = ()


@dataclass(frozen=True)
class SourceFile:
    """A scanned header or translation unit.

    ``path`` is the normalized identity (POSIX separators, ``normpath``) and is
    unique within a run. ``includes`` keeps directives in file order,
    duplicates included.
    """

    path: str
    size_bytes: int
    text_lines: int
    code_lines: int
    includes: tuple[IncludeDirective, ...] = field(default_factory=tuple)
    is_source: bool = False

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]
