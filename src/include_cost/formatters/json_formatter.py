"""JSON formatter for include-cost."""

import json
from dataclasses import asdict

from ..graph.models import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the analysis as JSON."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result))

    def format(self, result: AnalysisResult) -> str:
        data = {
            "summary": {
                "source_files": len(result.sources),
                "header_files": len(result.headers),
                "external_headers": len(result.placeholders),
                "edges": result.edge_count,
                "total_code_lines": result.total_code_lines,
                "total_compiled_lines": result.total_compiled_lines,
            },
            "files": {path: asdict(m) for path, m in result.files.items()},
            "external": {key: asdict(p) for key, p in result.placeholders.items()},
            "most_included": [result.label(node) for node in result.most_included],
        }
        return json.dumps(data, indent=2)
