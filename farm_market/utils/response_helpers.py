"""
Response helper utilities for turning database rows into plain dicts and
validated response models
"""
from typing import Any, Dict, List, Optional
from decimal import Decimal
from collections.abc import Mapping
from pydantic import BaseModel


def convert_decimals_to_floats(obj: Any) -> Any:
    """
    Recursively convert Decimal values (NUMERIC columns) to floats
    """
    if isinstance(obj, Decimal):
        return float(obj)
    elif isinstance(obj, Mapping):
        return {key: convert_decimals_to_floats(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [convert_decimals_to_floats(item) for item in obj]
    else:
        return obj


def row_to_dict(row: Any) -> Optional[Dict[str, Any]]:
    """Convert a RowMapping, dict or ORM object into a plain dict"""
    if row is None:
        return None
    if isinstance(row, Mapping):
        return dict(row)
    if hasattr(row, '__dict__'):
        # Skip SQLAlchemy internal attributes
        return {k: v for k, v in row.__dict__.items() if not k.startswith('_')}
    return dict(row)


def rows_to_dicts(rows: List[Any]) -> List[Dict[str, Any]]:
    return [row_to_dict(row) for row in rows]


def safe_model_validate(model_class: BaseModel, data: Any) -> BaseModel:
    """
    Safely validate a model from a database row
    """
    clean_data = convert_decimals_to_floats(row_to_dict(data))
    return model_class.model_validate(clean_data)


def safe_model_validate_list(model_class: BaseModel, data_list: List[Any]) -> List[BaseModel]:
    return [safe_model_validate(model_class, item) for item in data_list]


def parse_id(raw_id: str) -> Optional[int]:
    """Parse a path id, returning None when it is not a positive integer"""
    try:
        value = int(raw_id)
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None
