from __future__ import annotations

from enum import StrEnum


class MatchConfigError(ValueError):
    """Raised when a run is configured with an unsupported match mode."""


class MatchMode(StrEnum):
    EMAIL = "email"
    PHONE = "phone"
    EMAIL_OR_PHONE = "email_or_phone"

    @classmethod
    def parse(cls, value: "MatchMode | str") -> "MatchMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = "|".join(mode.value for mode in cls)
            raise MatchConfigError(f"Unsupported match mode: {value!r}. [{supported}]") from None
