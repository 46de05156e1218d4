"""
Base service class.
Services contain business logic and coordinate repositories.
"""

from abc import ABC
from decimal import Decimal
from typing import Any, Dict, Optional


def to_decimal(value: Optional[float]) -> Optional[Decimal]:
    """Money values are stored as DECIMAL(10,2)."""
    if value is None:
        return None
    return Decimal(str(value)).quantize(Decimal("0.01"))


def to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    return float(value)


def column_values(instance: Any) -> Dict[str, Any]:
    """Plain dict of a model instance's column attributes."""
    return {column.key: getattr(instance, column.key) for column in instance.__table__.columns}


class BaseService(ABC):
    """Base service class for all services."""
    pass
