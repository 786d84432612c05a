"""
Complex — Immutable комплексное число

Immutable Pydantic модель: пара double (real, imaginary) с функциональной
арифметикой. Операции plus/minus/times/divided_by возвращают новый
экземпляр и никогда не изменяют операнды. Имена методов — предлоги, а не
глаголы (plus, а не add), чтобы подчеркнуть отсутствие мутации.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После создания real и imaginary не меняются (frozen=True)
2. Равенство — total-order сравнение компонент, а не == (NaN == NaN, -0.0 != 0.0)
3. Равные значения имеют равный хеш
4. Арифметика не бросает исключений: NaN/Inf пропагируют по IEEE-754
"""

from types import NotImplementedType
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    compare_total_order,
    double_hash_code,
    ieee_divide,
    is_close,
)


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Модель комплексного числа.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Компоненты — только числа (int приводится к float); строки и bool
    отклоняются. Диапазон не проверяется: NaN и ±Inf принимаются как есть.

    Usage:
        >>> z = Complex(3, 4)
        >>> str(z)
        '(3.0 + 4.0i)'
        >>> str(z.plus(ONE))
        '(4.0 + 4.0i)'
    """

    real: float = Field(..., description="Действительная часть")
    imaginary: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, real: float, imaginary: float) -> None:
        super().__init__(real=real, imaginary=imaginary)

    @field_validator("real", "imaginary", mode="before")
    @classmethod
    def reject_non_numeric(cls, v: Any) -> Any:
        """
        Запрет неявной конверсии строк и bool.

        В lax-режиме Pydantic превращает "3" в 3.0 и True в 1.0.
        """
        if isinstance(v, (str, bytes, bool)):
            raise ValueError(f"component must be a real number, got {type(v).__name__}: {v!r}")
        return v

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def real_part(self) -> float:
        return self.real

    def imaginary_part(self) -> float:
        return self.imaginary

    # -------------------------------------------------------------------------
    # Арифметика (функциональные методы)
    # -------------------------------------------------------------------------

    def plus(self, c: "Complex") -> "Complex":
        """Сумма: (re1 + re2, im1 + im2)"""
        return Complex(self.real + c.real, self.imaginary + c.imaginary)

    def minus(self, c: "Complex") -> "Complex":
        """Разность: (re1 - re2, im1 - im2)"""
        return Complex(self.real - c.real, self.imaginary - c.imaginary)

    def times(self, c: "Complex") -> "Complex":
        """
        Произведение.

        Формула:
            (re1*re2 - im1*im2, re1*im2 + im1*re2)
        """
        return Complex(
            self.real * c.real - self.imaginary * c.imaginary,
            self.real * c.imaginary + self.imaginary * c.real,
        )

    def divided_by(self, c: "Complex") -> "Complex":
        """
        Частное.

        Формула:
            d = re2² + im2²
            ((re1*re2 + im1*im2) / d, (im1*re2 - re1*im2) / d)

        Деление на ноль не проверяется: при d == 0 компоненты результата
        становятся ±Inf или NaN по правилам IEEE-754.

        Args:
            c: Делитель

        Returns:
            Новый экземпляр с результатом деления

        Examples:
            >>> str(Complex(1, 0).divided_by(ZERO))
            '(nan + nani)'
        """
        tmp = c.real * c.real + c.imaginary * c.imaginary
        return Complex(
            ieee_divide(self.real * c.real + self.imaginary * c.imaginary, tmp),
            ieee_divide(self.imaginary * c.real - self.real * c.imaginary, tmp),
        )

    def is_close(
        self,
        c: "Complex",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Покомпонентное сравнение с толерантностью.

        Для проверок, чувствительных к округлению (например, a + b - b ≈ a).
        Строгое равенство — через ==.

        Args:
            c: Второе значение
            rel_tol: Относительная толерантность (default: 1e-9)
            abs_tol: Абсолютная толерантность (default: 1e-12)

        Returns:
            True если обе компоненты близки
        """
        return is_close(self.real, c.real, rel_tol, abs_tol) and is_close(
            self.imaginary, c.imaginary, rel_tol, abs_tol
        )

    # -------------------------------------------------------------------------
    # Операторы Python
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Complex | NotImplementedType":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Any) -> "Complex | NotImplementedType":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: Any) -> "Complex | NotImplementedType":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.times(other)

    def __truediv__(self, other: Any) -> "Complex | NotImplementedType":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.divided_by(other)

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> "bool | NotImplementedType":
        if other is self:
            return True
        if not isinstance(other, Complex):
            return NotImplemented
        # Для float нет абсолютного ==, поэтому compare_total_order
        return (
            compare_total_order(other.real, self.real) == 0
            and compare_total_order(other.imaginary, self.imaginary) == 0
        )

    def __hash__(self) -> int:
        return 31 * double_hash_code(self.real) + double_hash_code(self.imaginary)

    def __str__(self) -> str:
        return f"({self.real!r} + {self.imaginary!r}i)"


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Complex] = Complex(0.0, 0.0)
ONE: Final[Complex] = Complex(1.0, 0.0)
I: Final[Complex] = Complex(0.0, 1.0)
