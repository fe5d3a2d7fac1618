"""
CSV reader - decode an Azure usage export into row mappings.
"""

import io
from pathlib import Path
from typing import IO, Any, Optional, Union

import pandas as pd
import structlog

from costlens.config.settings import COST_FIELD, EXPECTED_COLUMNS, get_settings
from costlens.errors import DecodeFailure

logger = structlog.get_logger(__name__)

CsvSource = Union[str, Path, IO[str], IO[bytes]]


def _infer_cost_cells(column: pd.Series) -> pd.Series:
    """Per-cell numeric inference for a cost column pandas left as text."""
    column = column.astype(object)
    numeric = pd.to_numeric(column, errors="coerce")
    return column.where(numeric.isna(), numeric.astype(object))


def _frame_to_rows(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Row dicts with empty cells as None instead of NaN."""
    if COST_FIELD in df.columns and not pd.api.types.is_numeric_dtype(df[COST_FIELD]):
        df = df.assign(**{COST_FIELD: _infer_cost_cells(df[COST_FIELD])})
    df = df.astype(object).where(df.notna(), None)
    return df.to_dict(orient="records")


def read_usage_csv(
    source: CsvSource,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> list[dict[str, Any]]:
    """
    Read a usage CSV into a list of row dicts.

    The header row supplies the keys and numeric columns are inferred
    (costInBillingCurrency becomes a float). Only empty cells count as
    missing, so literal "null" strings reach the aggregator unchanged.

    Raises DecodeFailure when the source cannot be read or parsed.
    """
    settings = get_settings()
    label = str(source) if isinstance(source, (str, Path)) else getattr(source, "name", "<stream>")

    try:
        df = pd.read_csv(
            source,
            sep=delimiter or settings.csv_delimiter,
            encoding=encoding or settings.csv_encoding,
            keep_default_na=False,
            na_values=[""],
            skipinitialspace=True,
        )
    except FileNotFoundError as e:
        logger.warning("csv_decode_failed", source=label, reason="not_found")
        raise DecodeFailure(f"File not found: {label}", details={"source": label}) from e
    except pd.errors.EmptyDataError as e:
        logger.warning("csv_decode_failed", source=label, reason="empty")
        raise DecodeFailure("File is empty", details={"source": label}) from e
    except (pd.errors.ParserError, UnicodeDecodeError, LookupError, ValueError, OSError) as e:
        logger.warning("csv_decode_failed", source=label, reason=str(e))
        raise DecodeFailure(str(e), details={"source": label}) from e

    missing = [c for c in EXPECTED_COLUMNS if c not in df.columns]
    if missing:
        logger.warning("csv_missing_columns", source=label, missing=missing)

    rows = _frame_to_rows(df)
    logger.debug("csv_decoded", source=label, rows=len(rows), columns=len(df.columns))
    return rows


def decode_usage_csv(
    data: bytes,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> list[dict[str, Any]]:
    """Decode an in-memory upload."""
    return read_usage_csv(io.BytesIO(data), delimiter=delimiter, encoding=encoding)
