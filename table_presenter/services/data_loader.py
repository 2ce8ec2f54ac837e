"""Load table records from CSV files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import pandas as pd

from table_presenter.models import ColumnSpec


def _coerce_numeric(series: pd.Series) -> pd.Series:
    """Convert a column to numbers when every non-blank value parses and none is zero-padded."""
    non_blank = series[series.astype(str).str.strip() != ""]
    if non_blank.empty:
        return series
    # Codes such as "00501" keep their leading zeros as text.
    if non_blank.astype(str).str.match(r"^[+-]?0\d").any():
        return series
    converted = pd.to_numeric(non_blank, errors="coerce")
    if converted.isna().any():
        return series
    # Blank cells become NaN here and None in the records.
    return pd.to_numeric(series, errors="coerce")


def dataframe_to_records(dataframe: pd.DataFrame) -> List[Dict[str, Any]]:
    """Turn a dataframe into plain dict records with None for blanks."""
    records: List[Dict[str, Any]] = []
    for row in dataframe.to_dict(orient="records"):
        record: Dict[str, Any] = {}
        for key, value in row.items():
            if isinstance(value, float) and pd.isna(value):
                record[str(key)] = None
            elif isinstance(value, float) and value.is_integer():
                record[str(key)] = int(value)
            elif isinstance(value, str) and not value.strip():
                record[str(key)] = None
            else:
                record[str(key)] = value
        records.append(record)
    return records


def load_records(records_file: Path, columns: Optional[Sequence[str]] = None) -> List[Dict[str, Any]]:
    """Load and normalize records from CSV, keeping file order."""
    if not records_file.exists():
        raise FileNotFoundError(f"Missing required file: {records_file}")

    dataframe = pd.read_csv(records_file, dtype=str, keep_default_na=False)
    if columns is not None:
        for column in columns:
            if column not in dataframe.columns:
                dataframe[column] = ""
        dataframe = dataframe[list(columns)].copy()

    for column in dataframe.columns:
        dataframe[column] = _coerce_numeric(dataframe[column].str.strip())
    return dataframe_to_records(dataframe)


def infer_columns(
    records: Sequence[Mapping[str, Any]],
    ignore_filtering: Sequence[str] = (),
) -> List[ColumnSpec]:
    """Build one column per record key, in first-seen order."""
    keys: List[str] = []
    for record in records:
        for key in record:
            if key not in keys:
                keys.append(key)
    return [
        ColumnSpec(key=key, label=key.replace("_", " ").title(), ignore_filtering=key in ignore_filtering)
        for key in keys
    ]
