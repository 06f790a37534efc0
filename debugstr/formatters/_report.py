"""Formatters for rendered debug reports."""


def render_payload(report, layout, maximum_line_length):
    """Build the JSON payload for a rendered report.
    layout is None when the text was empty."""
    if layout is None:
        return {
            "report": report,
            "length": 0,
            "row_groups": 0,
            "column_content_width": 0,
            "columns_per_line": 0,
            "maximum_line_length": maximum_line_length,
        }
    return {
        "report": report,
        "length": layout.length,
        "row_groups": len(layout.row_groups),
        "column_content_width": layout.column_content_width,
        "columns_per_line": layout.columns_per_line,
        "maximum_line_length": maximum_line_length,
    }


def format_render_table(payload):
    """Table output for render is the report itself."""
    return payload["report"]
