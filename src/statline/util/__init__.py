from .perms import WRITE_BITS, format_permissions, is_readonly
from .size import DECIMAL_UNITS, format_size
from .time import TIMESTAMP_FORMAT, format_local, from_epoch_ns, normalize_dt, to_local

__all__ = [
    "WRITE_BITS",
    "format_permissions",
    "is_readonly",
    "DECIMAL_UNITS",
    "format_size",
    "TIMESTAMP_FORMAT",
    "from_epoch_ns",
    "normalize_dt",
    "to_local",
    "format_local",
]
