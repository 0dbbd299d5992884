from .schema import KINDS, DTYPES, AttemptRecord
from .store import (
    init_store,
    validate_records,
    append_attempts,
    load_all,
    export_ndjson,
)

__all__ = [
    "KINDS",
    "DTYPES",
    "AttemptRecord",
    "init_store",
    "validate_records",
    "append_attempts",
    "load_all",
    "export_ndjson",
]
