"""Text report for a finished scan."""

from datetime import timedelta

from ...utils.render_template import render_template
from .ScanSummary import ScanSummary

REPORT_TEMPLATE = """Scan Summary
{{ "-" * header_width }}
{% for label, value in header_rows %}
{{ label.ljust(label_width) }} : {{ value.rjust(value_width) }}
{% endfor %}
{{ "-" * header_width }}

Top Extensions
{{ "-" * table_width }}
{% for ext, count in extension_rows %}
{{ ext.ljust(ext_width) }} : {{ count.rjust(count_width) }}
{% endfor %}
{{ "-" * table_width }}
Scan took {{ elapsed_ms }} ms."""

COLUMN_SEPARATOR = " : "


def render_summary(summary: ScanSummary, limit: int, elapsed: timedelta) -> str:
    """Render the aligned report for ``summary``.

    Only the ``limit`` most frequent extensions are listed, and the table's
    column widths are computed over those rows alone. Does not modify
    ``summary``.
    """
    header_rows = [
        ("Files", str(summary.file_count)),
        ("Directories", str(summary.directory_count)),
        ("Size", f"{summary.total_bytes} bytes"),
        ("Old files", str(summary.old_files)),
    ]
    extension_rows = [(ext, str(count)) for ext, count in summary.top_extensions(limit)]

    label_width = _column_width(label for label, _ in header_rows)
    value_width = _column_width(value for _, value in header_rows)
    ext_width = _column_width(ext for ext, _ in extension_rows)
    count_width = _column_width(count for _, count in extension_rows)

    return render_template(
        REPORT_TEMPLATE,
        {
            "header_rows": header_rows,
            "label_width": label_width,
            "value_width": value_width,
            "header_width": label_width + len(COLUMN_SEPARATOR) + value_width,
            "extension_rows": extension_rows,
            "ext_width": ext_width,
            "count_width": count_width,
            "table_width": ext_width + len(COLUMN_SEPARATOR) + count_width,
            "elapsed_ms": elapsed // timedelta(milliseconds=1),
        },
    )


def _column_width(cells) -> int:
    return max((len(cell) for cell in cells), default=0)
