"""Exceptions for meretable."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class MereTableError(Exception):
    """
    Base exception for all meretable errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class StructureError(MereTableError):
    """
    Base exception for errors in the column structure.

    This includes edits that would break the leaf/group invariant of the
    column tree.
    """

    pass


class RowError(MereTableError):
    """
    Base exception for errors while appending row data.
    """

    pass


# ---------------------------------------------------------------------------
# Structure Exceptions
# ---------------------------------------------------------------------------


class InvalidStructuralEdit(StructureError):  # noqa: N818
    """
    Raised when a column edit is not allowed in the current table state.

    New leaves cannot be added once rows exist, since they would hold
    fewer values than the table has rows. This covers turning a leaf that
    already holds values into a group.

    Attributes:
        column: Title path of the column being edited
        reason: Human readable explanation
    """

    def __init__(self, column: tuple[str, ...], reason: str) -> None:
        self.column = column
        self.reason = reason
        super().__init__(f"Cannot edit column '{'/'.join(column)}': {reason}")


# ---------------------------------------------------------------------------
# Row Exceptions
# ---------------------------------------------------------------------------


class ArgumentCountMismatch(RowError):  # noqa: N818
    """
    Raised when a row does not supply exactly one value per leaf column.

    Attributes:
        expected: Number of leaf columns in the table
        actual: Number of values supplied
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row has {actual} value(s) but the table has {expected} leaf column(s)"
        )


# ---------------------------------------------------------------------------
# Manifest Exceptions
# ---------------------------------------------------------------------------


class ManifestError(MereTableError):
    """
    Raised when a table manifest document is malformed.

    Attributes:
        path: Location of the problem inside the document (e.g. "columns[1]")
        message: Description of the problem
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Invalid manifest at '{path}': {message}")
