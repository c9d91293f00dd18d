from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

MISSING_TOKENS = {"", "nan", "none", "null", "n/a", "undefined"}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def is_missing(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, float) and math.isnan(v):
        return True
    if isinstance(v, str) and v.strip().lower() in MISSING_TOKENS:
        return True
    return False


def parse_optional_number(v: Any, default: Any = None) -> Any:
    """
    Convertit une valeur venue du réseau en float fini.
    Tout ce qui est absent, non numérique, NaN ou infini -> default.
    """
    if is_missing(v) or isinstance(v, bool):
        return default

    if isinstance(v, str):
        # accepte "1,23" -> 1.23
        v = v.strip().replace(",", ".")
    elif not isinstance(v, (int, float)):
        return default

    try:
        value = float(v)
    except (OverflowError, ValueError):
        # entier JSON trop grand pour un float, ou texte non numérique
        return default

    if not math.isfinite(value):
        return default
    return value


def parse_optional_int(v: Any, default: Any = None) -> Any:
    value = parse_optional_number(v, default=None)
    if value is None:
        return default
    return int(value)


def parse_optional_text(v: Any, default: Optional[str] = None) -> Optional[str]:
    if is_missing(v) or isinstance(v, bool):
        return default
    if isinstance(v, (int, float)):
        return str(v)
    if isinstance(v, str):
        return v.strip()
    return default


def parse_form_integer(raw: Any) -> Union[int, str]:
    """
    Sémantique d'un champ numérique du formulaire :
    - vide -> "" (le champ reste vide, coercé à 0 au submit)
    - "12abc" -> 12 (entier en tête)
    - illisible -> ""
    """
    if isinstance(raw, bool):
        return ""
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else ""
    if raw is None:
        return ""

    m = _LEADING_INT.match(str(raw))
    if not m:
        return ""
    return int(m.group(1))
