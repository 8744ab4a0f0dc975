"""
Recover structured documents from transaction memos.

Memos are free-form text.  Clients that attach a JSON document to a
transfer encode it either once (the memo *is* the JSON document) or
twice (the memo is a JSON string literal whose content is the
document).  Producers do not say which, so :func:`decode` tries a
fixed sequence of parse strategies and falls back to returning the
raw memo together with the transaction hash.

Each strategy returns a :class:`ParseResult` instead of raising, and
:func:`decode` itself never raises.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

# Characters removed before parsing.  Removal applies everywhere in the
# text, including inside JSON string values.
_CONTROL_CHARS_RE = re.compile(r"[\n\t\r]")


@dataclass(frozen=True)
class ParseResult:
    ok: bool
    value: Any = None


_FAILED = ParseResult(ok=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


def _loads(text: str) -> ParseResult:
    """Strict JSON parse: ``NaN`` and ``Infinity`` are refused."""
    try:
        return ParseResult(ok=True, value=json.loads(text, parse_constant=_reject_constant))
    except (ValueError, RecursionError):
        return _FAILED


def clean_memo(text: str) -> str:
    return _CONTROL_CHARS_RE.sub("", text).strip()


def parse_direct(memo: str) -> ParseResult:
    return _loads(clean_memo(memo))


def parse_direct_structured(memo: str) -> ParseResult:
    # A memo that parses to a JSON string may be a double-encoded
    # document; leave it to the next strategy.
    result = parse_direct(memo)
    if result.ok and isinstance(result.value, str):
        return _FAILED
    return result


def parse_double_encoded(memo: str) -> ParseResult:
    # The untouched memo must itself be a JSON string literal, and its
    # content must be a JSON object or array.  A quoted scalar such as
    # "123" stays a string.
    outer = _loads(memo)
    if not outer.ok or not isinstance(outer.value, str):
        return _FAILED
    inner = _loads(clean_memo(outer.value))
    if not inner.ok or not isinstance(inner.value, (dict, list)):
        return _FAILED
    return inner


# A plain JSON string such as "hello" or "123" (quotes included) is only
# accepted once the double-encoded reading has failed.
STRATEGIES: List[Callable[[str], ParseResult]] = [
    parse_direct_structured,
    parse_double_encoded,
    parse_direct,
]


def fallback_document(memo: str, tx_hash: Optional[str]) -> Dict[str, Any]:
    return {"raw_memo": memo, "hash": tx_hash}


def decode(memo: str, tx_hash: Optional[str]) -> Any:
    """Turn ``memo`` into a document.

    Returns the first successful strategy's value, otherwise
    ``{"raw_memo": memo, "hash": tx_hash}``.
    """
    for strategy in STRATEGIES:
        result = strategy(memo)
        if result.ok:
            return result.value
    return fallback_document(memo, tx_hash)
