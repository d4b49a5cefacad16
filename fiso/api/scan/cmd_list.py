"""List API function.

Lists the names of non-directory entries below a directory.
Matches CLI: fiso list <directory> [--recursive]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .RootNotFoundError import RootNotFoundError


def cmd_list(path: str, recursive: bool = False) -> StageResult:
    """List file names under a directory, flat or recursive."""

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        names: list[str],
        errors: list[str] | None = None,
    ) -> None:
        result_obj.output = {
            "errors": errors or [],
            "warnings": [],
            "path": path,
            "recursive": recursive,
            "names": names,
            "count": len(names),
            "success": success,
        }
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ...utils.normalize_path import normalize_path
        from .extract_metadata import extract_metadata
        from .walk_entries import walk_entries

        yield (0.2, f"Walking {path}...")
        try:
            entries = walk_entries(normalize_path(path), recursive=recursive)
        except RootNotFoundError as exc:
            yield (1.0, "Complete")
            _build_result(result_obj, success=False, message=str(exc), names=[], errors=[str(exc)])
            return

        names = [
            scan_entry.name
            for scan_entry in map(extract_metadata, entries)
            if scan_entry is not None and scan_entry.kind != "directory"
        ]

        yield (1.0, "Complete")
        _build_result(result_obj, success=True, message=f"Listed {len(names)} file(s)", names=names)

    return StageResult(
        announce=f"Listing {path}...",
        progress_callback=do_work,
    )
