from typing import Mapping, Optional, Tuple, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def alpha_from_mapping(record: Mapping, default: float = 1.0) -> Tuple[float, bool]:
    """Return (alpha, explicit) where explicit is False when the key is absent or None."""
    alpha = record.get("alpha")
    return value_or_default(alpha, default), alpha is not None
