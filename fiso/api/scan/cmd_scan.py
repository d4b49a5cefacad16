"""Scan API function.

Walks a directory and reports file counts, total size, an extension
histogram and the number of old files.
Matches CLI: fiso scan <directory> [--recursive] [LIMIT]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .RootNotFoundError import RootNotFoundError


def cmd_scan(
    path: str,
    recursive: bool = False,
    limit: int | None = None,
) -> StageResult:
    """Scan a directory and render its summary report.

    Args:
        path: Directory to scan
        recursive: Whether to descend into subdirectories
        limit: Maximum extension rows in the report (config default if None)

    Returns:
        StageResult whose output carries the summary counters and the report text
    """

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        summary: dict | None = None,
        elapsed_ms: int = 0,
        report: str = "",
        errors: list[str] | None = None,
    ) -> None:
        """Helper to build and assign the output result."""
        counters = summary or {
            "file_count": 0,
            "directory_count": 0,
            "total_bytes": 0,
            "extensions": {},
            "old_files": 0,
        }
        result_obj.output = {
            "errors": errors or [],
            "warnings": [],
            "path": path,
            "recursive": recursive,
            **counters,
            "elapsed_ms": elapsed_ms,
            "report": report,
            "success": success,
        }
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        from ..config.FisoConfig import FisoConfig
        from .render_summary import render_summary
        from .scan_directory import scan_directory

        yield (0.1, "Loading configuration...")
        try:
            config = FisoConfig.load()
        except ValueError as exc:
            yield (1.0, "Complete")
            _build_result(result_obj, success=False, message=str(exc), errors=[str(exc)])
            return

        display_limit = config.scan.extension_display_limit if limit is None else limit
        if display_limit < 0:
            message = f"Extension display limit must be non-negative, got {display_limit}"
            yield (1.0, "Complete")
            _build_result(result_obj, success=False, message=message, errors=[message])
            return

        yield (0.2, f"Walking {path}...")
        try:
            scan = scan_directory(path, recursive=recursive, old_file_days=config.scan.old_file_days)
        except RootNotFoundError as exc:
            yield (1.0, "Complete")
            _build_result(result_obj, success=False, message=str(exc), errors=[str(exc)])
            return

        yield (0.9, "Rendering report...")
        report = render_summary(scan.summary, display_limit, scan.elapsed)

        yield (1.0, "Complete")
        _build_result(
            result_obj,
            success=True,
            message=f"Scanned {scan.summary.file_count} file(s) in {scan.summary.directory_count} directory(ies)",
            summary=scan.summary.to_dict(),
            elapsed_ms=scan.elapsed_ms,
            report=report,
        )

    return StageResult(
        announce=f"Scanning {path}...",
        progress_callback=do_work,
    )
