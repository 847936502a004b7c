"""
Quality Report Generator
=========================

Writes machine-readable JSON reports of password quality results,
suitable for CI pipelines and audit tooling. Reports never contain the
password itself.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pwquality import __version__
from pwquality.core.models import QualityResult


class QualityReportGenerator:
    """Generates JSON reports from evaluation results.

    Usage::

        generator = QualityReportGenerator()
        generator.generate_json(result, Path("report.json"))
    """

    def build_report(self, result: QualityResult) -> dict[str, Any]:
        """Assemble the report document for *result*."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "pwquality",
                "version": __version__,
            },
            "result": result.to_dict(),
        }

    def generate_json(self, result: QualityResult, output_path: Path) -> Path:
        """Write a JSON report to *output_path*.

        Args:
            result: Evaluation result.
            output_path: Destination file; parent directories are created.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(self.build_report(result), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        return output_path
