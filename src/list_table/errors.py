"""Exceptions for input that makes row/column semantics unrecoverable.

Both are raised internally and turned into an ``ErrorReport`` by
``pipeline.build_table``; callers of the top-level API never see them.
"""


class StructureError(ValueError):
    """The content is not a single list-of-rows."""

    def __init__(self, message: str, observed: str = ""):
        super().__init__(message)
        self.observed = observed


class BoundsError(ValueError):
    """Header and footer rows together exceed the table's row count."""

    def __init__(self, header_rows: int, footer_rows: int, total_rows: int):
        super().__init__(f"headerRows ({header_rows}) + footerRows ({footer_rows}) exceeds total rows ({total_rows})")
        self.header_rows = header_rows
        self.footer_rows = footer_rows
        self.total_rows = total_rows
