from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from ..core.constants import DEFAULT_SHEET_NAME

logger = logging.getLogger(__name__)


def _keep_formulas_as_text(worksheet) -> None:
    # openpyxl treats any string starting with "=" as a formula
    for row in worksheet.iter_rows():
        for cell in row:
            if cell.data_type == "f" and isinstance(cell.value, str):
                cell.data_type = "s"


class ExcelExporter:
    """Serialize flat export rows to an .xlsx workbook (pandas + openpyxl)."""

    def __init__(self, *, sheet_name: str = DEFAULT_SHEET_NAME):
        self._sheet_name = sheet_name

    def to_bytes(self, rows: Sequence[dict], columns: Optional[Sequence[str]] = None) -> bytes:
        # Explicit columns keep the header row when there are no records.
        df = pd.DataFrame(list(rows), columns=list(columns) if columns else None)

        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=self._sheet_name)
            _keep_formulas_as_text(writer.sheets[self._sheet_name])

        return output.getvalue()

    def write(
        self,
        rows: Sequence[dict],
        *,
        filename: str,
        directory: str | Path = ".",
        columns: Optional[Sequence[str]] = None,
    ) -> Path:
        path = Path(directory) / f"{filename}.xlsx"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.to_bytes(rows, columns))
        logger.info("exported %d rows to %s", len(rows), path)
        return path

    def read_rows(self, data: bytes | str | Path) -> list[dict[str, str]]:
        """Read a workbook written by this exporter back as string rows."""

        source = io.BytesIO(data) if isinstance(data, bytes) else data
        df = pd.read_excel(source, sheet_name=self._sheet_name, dtype=str, keep_default_na=False, engine="openpyxl")
        return df.to_dict(orient="records")
