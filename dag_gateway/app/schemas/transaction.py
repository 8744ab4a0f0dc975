"""
Pydantic models for upstream transaction records.

Different ledger API versions place the memo in different spots: at
the top level, under ``transactionOriginal.value`` or directly under
``transactionOriginal``.  The models declare all three explicitly.
Construction never fails: values of the wrong type are treated as
absent, so one odd record cannot break a whole history walk.
Fields the gateway does not interpret are kept as extras.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


def non_empty_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def mapping_or_none(value: Any) -> Any:
    return value if isinstance(value, dict) else None


class OriginalValue(BaseModel):
    model_config = ConfigDict(extra="allow")

    memo: Optional[str] = None

    @field_validator("memo", mode="before")
    @classmethod
    def coerce_memo(cls, value: Any) -> Optional[str]:
        return non_empty_str(value)


class TransactionOriginal(BaseModel):
    model_config = ConfigDict(extra="allow")

    value: Optional[OriginalValue] = None
    memo: Optional[str] = None

    @field_validator("memo", mode="before")
    @classmethod
    def coerce_memo(cls, value: Any) -> Optional[str]:
        return non_empty_str(value)

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, value: Any) -> Any:
        return mapping_or_none(value)


class RawTransaction(BaseModel):
    """A transaction record as returned by the ledger client."""

    model_config = ConfigDict(extra="allow")

    hash: Optional[str] = None
    memo: Optional[str] = None
    transactionOriginal: Optional[TransactionOriginal] = None

    @field_validator("memo", mode="before")
    @classmethod
    def coerce_memo(cls, value: Any) -> Optional[str]:
        return non_empty_str(value)

    @field_validator("hash", mode="before")
    @classmethod
    def coerce_hash(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, (dict, list)):
            return None
        return str(value)

    @field_validator("transactionOriginal", mode="before")
    @classmethod
    def coerce_original(cls, value: Any) -> Any:
        return mapping_or_none(value)

    @classmethod
    def from_raw(cls, record: Any) -> "RawTransaction":
        """Build a model from any upstream value."""
        if isinstance(record, RawTransaction):
            return record
        if not isinstance(record, dict):
            return cls()
        try:
            return cls.model_validate(record)
        except ValidationError:
            return cls()
