# helpers_format.py
# Rupiah formatting with id-ID grouping (13.000.000)
from __future__ import annotations

from typing import Optional


def fmt_int(n) -> str:
    try: return f"{int(round(float(n))):,}".replace(",", ".")
    except (TypeError, ValueError): return "0"


def fmt_idr(x) -> str:
    try: return "Rp " + f"{float(x):,.0f}".replace(",", ".")
    except (TypeError, ValueError): return "Rp 0"


def fmt_optional_idr(x: Optional[float], placeholder: str = "-") -> str:
    # 0 counts as missing here, same as the detail popup always did
    if not x:
        return placeholder
    return fmt_idr(x)


def fmt_text(s: Optional[str], placeholder: str = "-") -> str:
    return s if s else placeholder
