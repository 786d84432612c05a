"""
SealedComplex — закрытый конструктор + статическая фабрика

Конструктор недоступен вне модуля, единственный публичный способ создать
экземпляр — SealedComplex.value_of(re, im). Наследование из других модулей
запрещено, поэтому для клиентов класс эквивалентен final. Внутри модуля
фабрика сохраняет свободу: может вернуть экземпляр подкласса или
переиспользовать экземпляр, не меняя публичный контракт.

Арифметики и переопределённого равенства нет (identity equality).
"""

from dataclasses import InitVar, dataclass

# Токен доступа к конструктору (виден только этому модулю)
_CONSTRUCTOR_TOKEN = object()


@dataclass(frozen=True, eq=False)
class SealedComplex:
    """Комплексное число, создаваемое только через value_of."""

    _re: float
    _im: float
    _token: InitVar[object] = None

    def __post_init__(self, _token: object) -> None:
        if _token is not _CONSTRUCTOR_TOKEN:
            raise TypeError(
                "SealedComplex cannot be instantiated directly, use SealedComplex.value_of()"
            )

    def __init_subclass__(cls, **kwargs: object) -> None:
        if cls.__module__ != __name__:
            raise TypeError(
                f"SealedComplex cannot be subclassed outside {__name__} "
                f"(attempted by {cls.__module__}.{cls.__qualname__})"
            )
        super().__init_subclass__(**kwargs)

    @staticmethod
    def value_of(re: float, im: float) -> "SealedComplex":
        """
        Статическая фабрика.

        Args:
            re: Действительная часть
            im: Мнимая часть

        Returns:
            Новый экземпляр (без кэширования)
        """
        return SealedComplex(float(re), float(im), _CONSTRUCTOR_TOKEN)
