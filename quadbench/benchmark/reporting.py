# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark output.

Two audiences:
  - stdout gets one line per run, `<n>\\t<elapsed_ms>\\t<checksum>`, under a
    header per convention. That is the format downstream scripts parse.
  - optionally, a run directory gets the same data in machine-readable form:

    <output_directory>/
    ├── results.json          every RunResult, plus any mode mismatches
    ├── report.txt            human-readable summary
    └── config_snapshot.yaml  the config used for this sweep

results.json is the authoritative record; report.txt is a convenience view.
"""

import json
from datetime import datetime, timezone
from pathlib import Path

import yaml

from quadbench.benchmark.models import ExecutionMode, ModeMismatch, RunResult
from quadbench.logging.logger import get_logger
from quadbench.solver.conventions import CallingConvention

logger = get_logger(__name__)


def format_section_header(
    convention: CallingConvention,
    mode: ExecutionMode = ExecutionMode.SEQUENTIAL,
    show_mode: bool = False,
) -> str:
    title = convention.title
    if show_mode:
        title = f"{title} ({mode.value})"
    return f"\t\t\t--------{title}-----------"


def format_run_line(result: RunResult) -> str:
    return f"{result.n}\t{result.elapsed_ms}\t{result.checksum}"


def _result_to_dict(result: RunResult) -> dict[str, object]:
    return {
        "n": result.n,
        "elapsed_ms": result.elapsed_ms,
        "checksum": result.checksum,
        "convention": result.convention.value,
        "mode": result.mode.value,
        "workers": result.workers,
    }


def _mismatch_to_dict(mismatch: ModeMismatch) -> dict[str, object]:
    return {
        "n": mismatch.n,
        "convention": mismatch.convention.value,
        "sequential_checksum": mismatch.sequential_checksum,
        "parallel_checksum": mismatch.parallel_checksum,
        "tolerance": mismatch.tolerance,
    }


def write_report(
    results: list[RunResult],
    output_dir: Path,
    config_snapshot: dict[str, object] | None = None,
    mismatches: list[ModeMismatch] | None = None,
) -> Path:
    """Write results.json, report.txt and (if given) config_snapshot.yaml."""
    output_dir.mkdir(parents=True, exist_ok=True)

    payload = {
        "runs": [_result_to_dict(r) for r in results],
        "mode_mismatches": [_mismatch_to_dict(m) for m in mismatches or []],
    }
    (output_dir / "results.json").write_text(
        json.dumps(payload, indent=2, sort_keys=True),
        encoding="utf-8",
    )

    (output_dir / "report.txt").write_text(
        format_report_text(results, mismatches or []),
        encoding="utf-8",
    )

    if config_snapshot is not None:
        (output_dir / "config_snapshot.yaml").write_text(
            yaml.dump(config_snapshot, default_flow_style=False, sort_keys=True),
            encoding="utf-8",
        )

    logger.info("Benchmark report written", extra={"output_dir": str(output_dir)})
    return output_dir


def format_report_text(results: list[RunResult], mismatches: list[ModeMismatch]) -> str:
    """
    Human-readable summary: per (mode, convention) the total time spent and
    the largest run, then any checksum disagreements between modes.
    """
    timestamp = datetime.now(tz=timezone.utc).isoformat()
    lines: list[str] = [
        "=" * 60,
        "QUADBENCH REPORT",
        f"Generated: {timestamp}",
        f"Runs: {len(results)}",
        "=" * 60,
    ]

    groups: dict[tuple[ExecutionMode, CallingConvention], list[RunResult]] = {}
    for result in results:
        groups.setdefault((result.mode, result.convention), []).append(result)

    for (mode, convention), group in groups.items():
        largest = max(group, key=lambda r: r.n)
        total_ms = sum(r.elapsed_ms for r in group)
        lines.extend(
            [
                "",
                f"--- {convention.title.upper()} ({mode.value}) ---",
                f"Total time: {total_ms:.3f} ms",
                f"Largest run: n={largest.n} in {largest.elapsed_ms:.3f} ms",
                f"Largest checksum: {largest.checksum!r}",
            ]
        )

    if mismatches:
        lines.extend(["", "--- MODE MISMATCHES ---"])
        for m in mismatches:
            lines.append(
                f"  {m.convention.value} n={m.n}: sequential={m.sequential_checksum!r} "
                f"parallel={m.parallel_checksum!r} tolerance={m.tolerance!r}"
            )

    lines.extend(["", "=" * 60])
    return "\n".join(lines) + "\n"
