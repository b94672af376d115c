"""Include resolution: directive text -> scanned file or placeholder.

Resolution is by base name against a precomputed index. When several scanned
files share a base name the tie is broken deterministically:

  1. the file the text names relative to the includer's directory
     (``dirname(includer)/text``), i.e. a same-directory match;
  2. otherwise files whose path ends with the full include text;
  3. the lexicographically first identity among what remains.

Angle-bracket and quoted includes resolve the same way; search paths are
not modelled.
"""

import posixpath
from collections import defaultdict
from typing import Iterable, Union

from ..logging_config import get_logger
from ..scanning.models import IncludeDirective, SourceFile
from .models import ExternalPlaceholder

logger = get_logger(__name__)

Target = Union[str, ExternalPlaceholder]


class IncludeResolver:
    """Maps include directives onto a fixed corpus.

    Build once per corpus; lookups are dictionary hits. Placeholders are
    cached so every file naming the same missing header gets the same object.
    """

    def __init__(
        self,
        corpus: Iterable[SourceFile],
        case_sensitive: bool = True,
        placeholder_lines: int = 1,
    ) -> None:
        self._case_sensitive = case_sensitive
        self._placeholder_lines = placeholder_lines
        self._by_name: dict[str, list[str]] = defaultdict(list)
        self._by_key: dict[str, str] = {}
        self._placeholders: dict[str, ExternalPlaceholder] = {}

        for path in sorted(f.path for f in corpus):
            key = self._fold(path)
            self._by_key[key] = path
            self._by_name[posixpath.basename(key)].append(path)

    @property
    def placeholders(self) -> dict[str, ExternalPlaceholder]:
        """Placeholders handed out so far, keyed by normalized path."""
        return dict(self._placeholders)

    def _fold(self, text: str) -> str:
        return text if self._case_sensitive else text.casefold()

    @staticmethod
    def normalize(text: str) -> str:
        """Separator and dot-segment normalization of include text."""
        text = text.strip().replace("\\", "/")
        if not text:
            return text
        return posixpath.normpath(text)

    def resolve(self, directive: IncludeDirective, includer: str) -> Target:
        """Resolve ``directive`` as written in the file ``includer``."""
        normalized = self.normalize(directive.path)
        key = self._fold(normalized)
        candidates = self._by_name.get(posixpath.basename(key))

        if not candidates:
            return self._placeholder(key, directive)
        if len(candidates) == 1:
            return candidates[0]

        relative = self._fold(
            posixpath.normpath(posixpath.join(posixpath.dirname(includer), normalized))
        )
        if relative in self._by_key:
            return self._by_key[relative]

        suffixed = [
            c for c in candidates if self._fold(c) == key or self._fold(c).endswith("/" + key)
        ]
        chosen = (suffixed or candidates)[0]
        logger.debug(
            f"Ambiguous include {directive} in {includer}: "
            f"{len(candidates)} candidates, chose {chosen}"
        )
        return chosen

    def _placeholder(self, key: str, directive: IncludeDirective) -> ExternalPlaceholder:
        placeholder = self._placeholders.get(key)
        if placeholder is None:
            placeholder = ExternalPlaceholder(
                key=key,
                display=self.normalize(directive.path),
                system=directive.system,
                code_lines=self._placeholder_lines,
            )
            self._placeholders[key] = placeholder
        return placeholder
