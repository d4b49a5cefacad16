"""Sort API function.

Acknowledges a sort request. No files are moved and the rules file is not read.
Matches CLI: fiso sort <directory> [--rules RULES]
"""

from collections.abc import Iterator

from ..StageResult import StageResult


def cmd_sort(path: str, rules: str | None = None) -> StageResult:
    """Acknowledge sorting ``path`` with ``rules`` (config default if None)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.FisoConfig import FisoConfig

        yield (0.5, "Loading configuration...")
        errors: list[str] = []
        rules_path = rules
        if rules_path is None:
            try:
                rules_path = FisoConfig.load().sort.rules
            except ValueError as exc:
                errors.append(str(exc))

        yield (1.0, "Complete")
        success = not errors
        message = f"Sorting directory {path}\nWith rules from {rules_path}" if success else errors[0]
        result_obj.output = {
            "errors": errors,
            "warnings": [],
            "path": path,
            "rules": rules_path or "",
            "message": message,
            "success": success,
        }
        result_obj.result = message
        result_obj.success = success

    return StageResult(
        announce=f"Sorting {path}...",
        progress_callback=do_work,
    )
