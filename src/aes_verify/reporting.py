"""Reporting for verification runs.

Generates a text summary, JSON and CSV reports from a ValidationReport.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from .harness import ValidationReport


CSV_FIELDS = ["kind", "name", "key_bits", "correct", "error_detail"]


def format_report(report: ValidationReport, verbose: bool = False) -> str:
    """Format a human-readable summary.

    Args:
        report: Verification report
        verbose: Also list every passing check

    Returns:
        Multi-line string
    """
    lines: list[str] = []
    labels = {
        "kat": "FIPS-197 KAT tests",
        "schedule": "Key schedule tests",
        "random": "Random tests",
    }

    for kind, (passed, total) in report.by_kind().items():
        lines.append(f"{labels.get(kind, kind)}: {passed}/{total} passed")

    if verbose:
        for r in report.results:
            if r.correct and r.kind != "random":
                lines.append(f"  PASS {r.name}")

    for r in report.failures():
        lines.append(f"  FAIL {r.name} - {r.error_detail}")

    lines.append("")
    total = len(report.results)
    if report.all_passed:
        lines.append(f"VALIDATION PASSED: All {total} tests passed")
    else:
        lines.append(f"VALIDATION FAILED: {report.failed} failures")
    return "\n".join(lines)


def export_to_json(report: ValidationReport, output_path: str | Path) -> Path:
    """Export the report to a JSON file.

    Returns:
        Path to written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(report.to_dict(), f, indent=2)

    return output_path


def export_to_csv(report: ValidationReport, output_path: str | Path) -> Path:
    """Export one row per check to a CSV file.

    Returns:
        Path to written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for r in report.results:
            writer.writerow(r.to_dict())

    return output_path
