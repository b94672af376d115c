"""Tab-separated report, shaped for pasting into a spreadsheet.

Rows come in three blocks separated by blank lines: project headers,
external (unresolved) headers, source files. A short totals block follows.
Numbers carry no thousands separators so spreadsheets parse them as numbers.
"""

from typing import List

from ..graph.models import AnalysisResult, FileMetrics, PlaceholderMetrics
from .base import BaseFormatter

HEADERS = [
    "File",
    "File size",
    "Text lines",
    "Code lines",
    "Includes (direct)",
    "Includes (total)",
    "Included by (direct)",
    "Included by sources (total)",
    "Code lines with all includes",
    "Contributes to cmp (self)",
    "Contributes to cmp (total)",
    "Most commonly included direct includes",
]


class TsvFormatter(BaseFormatter):
    """Render the analysis as tab-separated text."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result), end="")

    def format(self, result: AnalysisResult) -> str:
        lines: List[str] = ["\t".join(HEADERS)]

        lines.extend(self._file_row(result, m) for m in result.headers)
        lines.append("")
        lines.extend(self._placeholder_row(p) for p in result.placeholders.values())
        lines.append("")
        lines.extend(self._file_row(result, m) for m in result.sources)
        lines.append("")
        lines.append("")

        lines.append(
            f"Total files: {len(result.sources)} sources, {len(result.headers)} includes, "
            f"{len(result.placeholders)} other includes"
        )
        lines.append(f"Total code lines: {result.total_code_lines}")
        lines.append(f"Total compiled code lines: {result.total_compiled_lines}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _file_row(result: AnalysisResult, m: FileMetrics) -> str:
        return "\t".join(
            [
                m.path,
                str(m.size_bytes),
                str(m.text_lines),
                str(m.code_lines),
                str(m.direct_includes),
                str(m.transitive_includes),
                str(m.included_by),
                str(m.source_includers),
                str(m.total_contribution),
                str(m.compile_cost_self),
                str(m.compile_cost_total),
                " ".join(result.label(node) for node in m.includees),
            ]
        )

    @staticmethod
    def _placeholder_row(p: PlaceholderMetrics) -> str:
        cost = p.code_lines * p.source_includers
        return "\t".join(
            [
                f"<{p.display}>",
                str(p.code_lines),
                str(p.code_lines),
                str(p.code_lines),
                "0",
                "0",
                str(p.included_by),
                str(p.source_includers),
                str(p.code_lines),
                str(cost),
                str(cost),
                "",
            ]
        )
