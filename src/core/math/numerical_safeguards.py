"""
Numerical Safeguards — IEEE-754 примитивы для value-типов

Модуль даёт value-типам корректную работу с double:
- Total-order сравнение float (аналог Double.compare) вместо ==
- Хеширование по битовому представлению, согласованное со сравнением
- Деление по правилам IEEE-754 без исключений при нулевом делителе
- Epsilon-сравнения для проверок с учётом округления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN равен NaN, -0.0 строго меньше 0.0 (total order)
2. compare_total_order(a, b) == 0 ⇒ double_hash_code(a) == double_hash_code(b)
3. ieee_divide никогда не бросает исключений: ±Inf и NaN пропагируют
4. Все операции детерминированы и воспроизводимы
"""

import math
import struct
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Каноническое битовое представление NaN (все NaN сводятся к нему)
CANONICAL_NAN_BITS: Final[int] = 0x7FF8000000000000


# =============================================================================
# БИТОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def double_to_long_bits(value: float) -> int:
    """
    Битовое представление double как знаковое 64-битное целое.

    Все NaN (любой payload, любой знак) сводятся к CANONICAL_NAN_BITS,
    поэтому два NaN неразличимы для сравнения и хеширования.

    Args:
        value: Исходное значение

    Returns:
        Знаковое 64-битное целое с тем же битовым шаблоном

    Examples:
        >>> double_to_long_bits(0.0)
        0
        >>> double_to_long_bits(-0.0)
        -9223372036854775808
        >>> double_to_long_bits(1.0)
        4607182418800017408
    """
    if math.isnan(value):
        return CANONICAL_NAN_BITS
    return struct.unpack(">q", struct.pack(">d", value))[0]


# =============================================================================
# TOTAL-ORDER СРАВНЕНИЕ И ХЕШ
# =============================================================================


def compare_total_order(a: float, b: float) -> int:
    """
    Сравнение двух float в total order.

    Порядок: -Inf < ... < -0.0 < 0.0 < ... < +Inf < NaN.
    В отличие от ==, NaN равен NaN, а -0.0 и 0.0 различаются.

    Алгоритм:
        Сначала обычное числовое сравнение, при равенстве (или NaN)
        решает битовое представление.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        -1 если a < b
         0 если a и b неразличимы
        +1 если a > b

    Examples:
        >>> compare_total_order(1.0, 2.0)
        -1
        >>> compare_total_order(float("nan"), float("nan"))
        0
        >>> compare_total_order(-0.0, 0.0)
        -1
        >>> compare_total_order(float("nan"), float("inf"))
        1
    """
    if a < b:
        return -1
    if a > b:
        return 1

    # Равны численно либо хотя бы один NaN
    a_bits = double_to_long_bits(a)
    b_bits = double_to_long_bits(b)

    if a_bits == b_bits:
        return 0
    elif a_bits < b_bits:
        return -1
    else:
        return 1


def double_hash_code(value: float) -> int:
    """
    Хеш double по битовому представлению (bits ^ (bits >>> 32)).

    Согласован с compare_total_order: неразличимые значения дают
    одинаковый хеш. Встроенный hash(nan) зависит от identity объекта
    и для этой цели не подходит.

    Args:
        value: Исходное значение

    Returns:
        Знаковое 32-битное целое

    Examples:
        >>> double_hash_code(0.0)
        0
        >>> double_hash_code(1.0)
        1072693248
    """
    bits = double_to_long_bits(value) & 0xFFFFFFFFFFFFFFFF
    folded = (bits ^ (bits >> 32)) & 0xFFFFFFFF
    if folded >= 0x80000000:
        folded -= 0x100000000
    return folded


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754 без исключений.

    Оператор / в Python бросает ZeroDivisionError для нулевого делителя.
    Здесь нулевой делитель даёт то же, что и аппаратное деление:
    - x / ±0.0 (x != 0, x не NaN) → ±Inf, знак = XOR знаков операндов
    - 0.0 / 0.0 и NaN / 0.0 → NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Результат деления (может быть ±Inf или NaN)

    Examples:
        >>> ieee_divide(10.0, 2.0)
        5.0
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Реализация Python's math.isclose с настраиваемыми толерантностями.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True  # abs diff < abs_tol
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
