from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

MIN_SIZE = 1
MAX_SIZE = 5000
DEFAULT_SIZE = "100"
DEFAULT_STATUS = "active"

# ASCII digits only: "١٢" is not a number here
_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")

# Longer digit runs saturate to this magnitude
MAX_MAGNITUDE = 10**18


def parse_int(value: Optional[str]) -> int:
    """Lenient integer parsing: read the leading (signed) decimal digits and
    ignore the rest. "12abc" -> 12, "3.9" -> 3, "abc" -> 0, None -> 0.
    """
    if value is None:
        return 0
    m = _LEADING_INT.match(str(value))
    if not m:
        return 0
    sign, digits = m.groups()
    digits = digits.lstrip("0") or "0"
    magnitude = MAX_MAGNITUDE if len(digits) > 18 else int(digits)
    return -magnitude if sign == "-" else magnitude


def clamp(value: Optional[str], lo: int, hi: int) -> int:
    return min(max(parse_int(value), lo), hi)


@dataclass(frozen=True)
class CompanySearch:
    """Browser query after defaults and clamping."""

    location: str
    status: str = DEFAULT_STATUS
    sic: str = ""
    types: str = ""
    incorporated_from: str = ""
    incorporated_to: str = ""
    size: int = int(DEFAULT_SIZE)
    start_index: int = 0

    @classmethod
    def from_args(cls, args: Mapping[str, str], default_location: str) -> "CompanySearch":
        return cls(
            location=args.get("location") or default_location,
            status=args.get("status", DEFAULT_STATUS),
            sic=args.get("sic", ""),
            types=args.get("types", ""),
            incorporated_from=args.get("incorporated_from", ""),
            incorporated_to=args.get("incorporated_to", ""),
            size=clamp(args.get("size", DEFAULT_SIZE), MIN_SIZE, MAX_SIZE),
            start_index=max(0, parse_int(args.get("start_index", "0"))),
        )

    def upstream_params(self) -> Dict[str, str]:
        # Companies House parameter names; empty filters are left out entirely
        optional = (
            ("location", self.location),
            ("company_status", self.status),
            ("sic_codes", self.sic),
            ("company_type", self.types),
            ("incorporated_from", self.incorporated_from),
            ("incorporated_to", self.incorporated_to),
        )
        params: Dict[str, str] = {k: v for k, v in optional if v}
        params["size"] = str(self.size)
        params["start_index"] = str(self.start_index)
        return params
