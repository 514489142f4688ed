#!/usr/bin/env python3
"""
Nested Column Headers Example

Demonstrates grouped and multi-level column headers, useful for:
- Benchmark reports (latency split into p50/p95/p99)
- Before/after comparisons under one heading
- Any table whose columns share a common label

Key patterns:
- Plain columns and subcolumn groups side by side
- Three-level headers with add_column_path()
- Reusing a table's structure with clear()
- Catching row and structure errors

Run:
    uv run python examples/nested_headers.py
"""

from meretable import (
    ArgumentCountMismatch,
    InvalidStructuralEdit,
    RenderOptions,
    Table,
)


def main() -> None:
    """Demonstrate nested column headers."""
    print("=== Nested Column Headers Example ===\n")

    # Two-level headers
    table = Table(["Endpoint"])
    for percentile in ("p50", "p95", "p99"):
        table.add_subcolumn("Latency (ms)", percentile)
    table.add_values("/users", "12", "48", "130")
    table.add_values("/orders", "20", "95", "410")
    print(table)

    # Three-level headers
    report = Table(["Region"])
    for phase in ("Before", "After"):
        report.add_column_path("Throughput", phase, "rps")
        report.add_column_path("Throughput", phase, "errors")
    report.add_values("us-east-1", "1200", "3", "1850", "0")
    report.add_values("eu-west-1", "900", "12", "1400", "1")
    report.write()
    print()

    # Same structure, new rows, left aligned
    table.clear()
    table.add_values("/health", "1", "2", "5")
    print(table.render(RenderOptions(align="l")))

    # Rows must fill every leaf column
    try:
        table.add_values("/health", "1")
    except ArgumentCountMismatch as e:
        print(f"Rejected row: {e}")

    # Structure is fixed while rows exist
    try:
        table.add_subcolumn("Endpoint", "method")
    except InvalidStructuralEdit as e:
        print(f"Rejected edit: {e}")

    print("\nDone!")


if __name__ == "__main__":
    main()
