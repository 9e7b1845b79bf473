"""Masking of sensitive pipeline parameters.

Parameters are copied into an event's properties. Any parameter whose key
matches one of the redactor's matchers is stored as a run of asterisks as
long as the original value, so the value's length survives but its content
does not.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

MASK_CHAR = "*"

DEFAULT_SENSITIVE_PATTERNS: tuple[str, ...] = ("password",)

Matcher = Union[str, re.Pattern[str]]


def compile_matchers(patterns: Iterable[Matcher]) -> list[re.Pattern[str]]:
    """Compile key patterns case-insensitively; compiled patterns pass through."""
    compiled = []
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
        else:
            compiled.append(re.compile(pattern, re.IGNORECASE))
    return compiled


class Redactor:
    """Applies a list of key matchers to parameter values."""

    def __init__(self, matchers: Optional[Iterable[Matcher]] = None):
        self.matchers = compile_matchers(
            DEFAULT_SENSITIVE_PATTERNS if matchers is None else matchers
        )

    def is_sensitive(self, key: str) -> bool:
        return any(matcher.search(key) for matcher in self.matchers)

    def redact(self, key: str, value: Any) -> str:
        """
        Render a parameter value for storage.

        A ``None`` value under a sensitive key renders as an empty mask;
        under any other key it renders as ``str(None)``.
        """
        text = str(value)
        if self.is_sensitive(key):
            if value is None:
                return ""
            return MASK_CHAR * len(text)
        return text

    def __repr__(self) -> str:
        return f"Redactor({[m.pattern for m in self.matchers]!r})"


def redact_parameters(
    parameters: Optional[Mapping[str, Any]],
    redactor: Optional[Redactor] = None,
) -> dict[str, str]:
    """Redact every entry of a parameter mapping, preserving key order."""
    if not parameters:
        return {}
    redactor = redactor or Redactor()
    redacted = {key: redactor.redact(key, value) for key, value in parameters.items()}
    masked = sum(1 for key in parameters if redactor.is_sensitive(key))
    if masked:
        logger.debug(f"Masked {masked} sensitive parameter(s) of {len(parameters)}")
    return redacted
