from .normalize import normalize_dataset
from .table import parse_table

__all__ = ["normalize_dataset", "parse_table"]
