from __future__ import annotations

import csv
import io
import logging
import warnings
from pathlib import Path
from typing import IO, Optional, Tuple, Union

import pandas as pd

from .observations import Observation, build_observations

logger = logging.getLogger(__name__)

CsvSource = Union[bytes, bytearray, str, Path, IO]


def load_price_csv(source: CsvSource) -> pd.DataFrame:
    """
    Load a price-history CSV with every field kept as a string.

    `source` is raw bytes, a path, or a file-like object (e.g. a Streamlit
    UploadedFile). Empty input, or input that is not tabular text, gives an
    empty frame instead of raising.

    Rows are read at the header's width: extra fields on a row (including a
    trailing comma on every row) are dropped instead of shifting columns or
    failing the whole file. Short rows are padded with missing values.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(bytes(source))
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", pd.errors.ParserWarning)
            frame = pd.read_csv(
                source,
                dtype=str,
                keep_default_na=False,
                encoding="utf-8-sig",
                engine="python",
                index_col=False,
            )
    except pd.errors.EmptyDataError:
        logger.info("Uploaded CSV is empty.")
        return pd.DataFrame()
    except (pd.errors.ParserError, csv.Error, UnicodeDecodeError) as e:
        logger.warning("Could not parse CSV: %s", e)
        return pd.DataFrame()

    for w in caught:
        logger.warning("%s while reading CSV: %s", w.category.__name__, w.message)
    return frame


def ingest_price_csv(source: Optional[CsvSource]) -> Optional[Tuple[Observation, ...]]:
    """
    Load + build observations in one step.

    Returns None when no file was given, so callers keep their current
    dataset. Otherwise the result replaces the dataset in full.
    """
    if source is None:
        logger.debug("No file selected; dataset unchanged.")
        return None
    raw = load_price_csv(source)
    observations = build_observations(raw)
    logger.info("Ingested %d observations from %d rows.", len(observations), len(raw))
    return observations
