from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure reported by the catalog store."""

    VALIDATION = "validation"
    DUPLICATE_CODE = "duplicate_code"
    DUPLICATE_ID = "duplicate_id"
    NOT_FOUND = "not_found"
    PARSE = "parse"
