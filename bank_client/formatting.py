from __future__ import annotations

import math
from typing import List, Optional, Sequence

from bank_client.normalize import parse_optional_number

NOT_AVAILABLE = "N/A"

SUCCESS_COLOR = "#28a745"
WARNING_COLOR = "#ffc107"
ERROR_COLOR = "#dc3545"
LEVEL_COLORS = {"success": SUCCESS_COLOR, "warning": WARNING_COLOR, "error": ERROR_COLOR}


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def format_probability(probability_yes: float) -> str:
    return f"{probability_yes * 100:.2f}%"


def format_percent(fraction: Optional[float], decimals: int = 1) -> str:
    """Fraction (0-1) -> pourcentage ; None / invalide -> N/A (jamais 'nan%')."""
    value = parse_optional_number(fraction)
    if value is None:
        return NOT_AVAILABLE
    return f"{value * 100:.{decimals}f}%"


def format_rate(rate: Optional[float], decimals: int = 1) -> str:
    """Valeur déjà en pourcentage (0-100)."""
    value = parse_optional_number(rate)
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}%"


def format_decimal(value: Optional[float], decimals: int = 3) -> str:
    value = parse_optional_number(value)
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}"


def format_count(value: Optional[float]) -> str:
    value = parse_optional_number(value)
    if value is None:
        return NOT_AVAILABLE
    return f"{_round_half_up(value):,}"


def format_seconds(value: Optional[float]) -> str:
    value = parse_optional_number(value)
    if value is None:
        return NOT_AVAILABLE
    return f"{value:g}s"


def format_optional_text(value: Optional[object]) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def prediction_label(prediction: str) -> str:
    return "YA" if prediction == "yes" else "TIDAK"


def pie_slice_percentages(values: Sequence[float]) -> List[int]:
    """
    Pourcentage de chaque part, arrondi indépendamment (la somme peut valoir 99 à 101).
    Total nul -> toutes les parts à 0.
    """
    cleaned = [parse_optional_number(v, default=0.0) for v in values]
    total = sum(cleaned)
    if total <= 0:
        return [0 for _ in cleaned]
    return [_round_half_up(v / total * 100.0) for v in cleaned]


def success_rate_level(rate: float) -> str:
    if rate > 15:
        return "success"
    if rate > 10:
        return "warning"
    return "error"
