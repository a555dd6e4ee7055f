"""
Rounding — целочисленное округление количеств единиц

Разложение Span извлекает из дробного количества единиц целую часть
усечением к нулю (не floor): -1.7 → -1, 1.7 → 1.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знак результата совпадает со знаком входа (или результат равен 0)
2. |truncate_toward_zero(x)| <= |x|
3. NaN/Inf не округляются, а отклоняются через ValueError
"""

import math


def is_valid_float(value: float) -> bool:
    """
    Проверка, что значение — конечное число (не NaN и не Inf).

    Examples:
        >>> is_valid_float(1.5)
        True
        >>> is_valid_float(float("nan"))
        False
        >>> is_valid_float(float("-inf"))
        False
    """
    return not (math.isnan(value) or math.isinf(value))


def truncate_toward_zero(value: float) -> int:
    """
    Усечение к нулю до целого.

    Args:
        value: Дробное количество единиц

    Returns:
        Целая часть value без изменения знака

    Raises:
        ValueError: Если value содержит NaN/Inf

    Examples:
        >>> truncate_toward_zero(2.78)
        2
        >>> truncate_toward_zero(-1.7)
        -1
        >>> truncate_toward_zero(-0.36)
        0
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot truncate non-finite value: {value}")

    return math.trunc(value)
