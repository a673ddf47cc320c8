"""Core data structures for parsed tabular data.

Minimal, immutable containers: a ``Dataset`` is a tuple of headers and a
tuple of read-only rows, each row holding exactly one cell per header.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

import pandas as pd

from trendkit.core.errors import EContract
from trendkit.core.types import CellValue, Number, Text

Row = Mapping[str, CellValue]


def make_row(headers: Sequence[str], cells: Sequence[CellValue]) -> Row:
    """Align cells to headers positionally.

    Missing trailing cells become empty text and extra cells are dropped.
    """
    values = {
        header: cells[i] if i < len(cells) else Text("")
        for i, header in enumerate(headers)
    }
    return MappingProxyType(values)


@dataclass(frozen=True)
class Dataset:
    """Parsed delimited dataset.

    Built once by the ingestor and never mutated; a new ingestion produces
    a new instance. Rows are read-only mappings, so datasets compare by
    value but are not hashable.
    """

    __hash__ = None  # type: ignore[assignment]

    headers: tuple[str, ...]
    rows: tuple[Row, ...]
    delimiter: str | None = None  # None when whitespace fallback was used

    @classmethod
    def from_cells(
        cls,
        headers: Iterable[str],
        cell_rows: Iterable[Sequence[CellValue]],
        delimiter: str | None = None,
    ) -> Dataset:
        """Create a Dataset from headers and positional cell rows."""
        headers = tuple(headers)
        if len(set(headers)) != len(headers):
            raise EContract(
                "Headers must be unique",
                context={"headers": list(headers)},
            )
        rows = tuple(make_row(headers, cells) for cells in cell_rows)
        return cls(headers=headers, rows=rows, delimiter=delimiter)

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    def _check_column(self, column: str) -> None:
        if column not in self.headers:
            raise EContract(
                f"Unknown column: {column!r}",
                context={"headers": list(self.headers)},
            )

    def column_values(self, column: str) -> tuple[CellValue, ...]:
        """All cells of one column, in row order."""
        self._check_column(column)
        return tuple(row[column] for row in self.rows)

    def series(self, column: str) -> tuple[float, ...]:
        """Numeric values of one column in row order.

        Text cells are skipped, not coerced to zero.
        """
        return tuple(
            cell.value for cell in self.column_values(column) if isinstance(cell, Number)
        )

    def to_frame(self) -> pd.DataFrame:
        """Return the dataset as a DataFrame.

        Numeric cells become floats; text cells keep their string (empty
        fields included), so mixed columns have object dtype.
        """
        records = [{h: row[h].value for h in self.headers} for row in self.rows]
        return pd.DataFrame.from_records(records, columns=list(self.headers))
