import json
import datetime as dt
import pandas as pd
from pathlib import Path
from typing import IO, Any, Dict, List, Union
from pydantic import ValidationError
from config.paths import SAMPLE_BATCH_PATH
from exceptions.custom_errors import FileContentError, FileReadingError
from schemas.schedule.generate import LabData

SHEETS = ("samples", "technicians", "equipment")
LIST_COLUMNS = {"technicians": ["specialty"], "equipment": ["compatibleTypes"]}
TIME_COLUMNS = ["arrivalTime", "startTime", "endTime"]


def parse_lab_data(payload: Dict[str, Any]) -> LabData:
    """Validate a raw batch document into LabData, reporting schema errors as FileContentError."""
    if not isinstance(payload, dict):
        raise FileContentError("Lab batch must be an object with samples, technicians and equipment.")
    missing = [key for key in SHEETS if key not in payload]
    if missing:
        raise FileContentError(f"Lab batch is missing: {', '.join(missing)}")
    try:
        return LabData.model_validate(payload)
    except ValidationError as e:
        raise FileContentError(f"Invalid lab batch: {e}")


def load_lab_data(
    path_or_buffer: Union[str, Path, IO, None] = None) -> LabData:
    """
    Load a lab batch from a JSON document or an Excel workbook.

    Parameters:
        path_or_buffer: Path to a .json / .xlsx file, or a file-like object holding JSON.
                        Defaults to 'data/lab_data.json'.

    Returns:
        LabData: The validated batch.
    """
    if path_or_buffer is None:
        path_or_buffer = SAMPLE_BATCH_PATH

    if isinstance(path_or_buffer, (str, Path)) and Path(path_or_buffer).suffix.lower() in (".xlsx", ".xls"):
        return load_lab_workbook(path_or_buffer)

    try:
        if isinstance(path_or_buffer, (str, Path)):
            with open(path_or_buffer, "r", encoding="utf-8") as f:
                payload = json.load(f)
        else:
            payload = json.load(path_or_buffer)
    except (OSError, json.JSONDecodeError) as e:
        raise FileReadingError(f"Error loading lab batch: {e}")

    return parse_lab_data(payload)


def _cell_to_clock(value: Any) -> Any:
    """Excel stores times as time/datetime objects; bring them back to 'HH:MM'."""
    if isinstance(value, (dt.time, dt.datetime)):
        return value.strftime("%H:%M")
    if isinstance(value, pd.Timestamp):
        return value.strftime("%H:%M")
    return value


def _split_list(value: Any) -> List[str]:
    if isinstance(value, list):
        return value
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return []
    return [part.strip() for part in str(value).split(",") if part.strip()]


def _cell_to_id(value: Any) -> Any:
    """Numeric id columns with blanks load as floats; 1.0 goes back to "1". Blanks stay None."""
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _sheet_records(df: pd.DataFrame, sheet: str) -> List[Dict[str, Any]]:
    df = df.rename(columns=lambda c: str(c).strip())
    df = df.astype(object).where(pd.notna(df), None)
    for col in TIME_COLUMNS:
        if col in df.columns:
            df[col] = df[col].map(_cell_to_clock)
    for col in LIST_COLUMNS.get(sheet, []):
        if col in df.columns:
            df[col] = df[col].map(_split_list)
    if "id" in df.columns:
        df["id"] = df["id"].map(_cell_to_id)
    # blank cells fall back to the model defaults
    return [{k: v for k, v in r.items() if v is not None} for r in df.to_dict(orient="records")]


def load_lab_workbook(
    path_or_buffer: Union[str, Path, bytes, IO]) -> LabData:
    """
    Load a lab batch from an Excel workbook with one sheet per collection.

    Sheets: 'samples', 'technicians', 'equipment'. List-valued columns (technician
    specialty, equipment compatibleTypes) are comma-separated strings.
    """
    try:
        sheets = pd.read_excel(path_or_buffer, sheet_name=None)
    except Exception as e:
        raise FileReadingError(f"Error loading lab workbook: {e}")

    sheets = {str(name).strip().lower(): df for name, df in sheets.items()}
    missing = [s for s in SHEETS if s not in sheets]
    if missing:
        raise FileContentError(f"Workbook is missing sheets: {', '.join(missing)}")

    payload = {sheet: _sheet_records(sheets[sheet], sheet) for sheet in SHEETS}
    return parse_lab_data(payload)
