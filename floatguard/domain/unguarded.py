"""
Unguarded — значение с отложенной валидацией

Unguarded может содержать NaN или бесконечность. Он существует только для
того, чтобы отложить стоимость проверки на цепочку операций: проверка
выполняется один раз, в check().

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. check() — единственный путь обратно в Guarded
2. Сравнение и хеширование запрещены (TypeError): сначала check()
3. In-place операторы (+= и т.д.) перепривязывают имя к новому Unguarded
"""

from typing import Any, ClassVar, NoReturn

from floatguard.domain.base import FloatValue
from floatguard.domain.functions import FunctionsMixin
from floatguard.domain.operators import ArithmeticMixin
from floatguard.errors import FloatError
from floatguard.math.validation import check_float, classify_float, is_valid_float


class Unguarded(FunctionsMixin, ArithmeticMixin, FloatValue):
    """
    Float значение без гарантии конечности.

    Конкретные типы — UnguardedF64 и UnguardedF32.

    Examples:
        >>> from floatguard import UnguardedF64
        >>> value = UnguardedF64(1.0) / 0.0
        >>> value.error
        <FloatError.POSITIVE_INFINITY: 'PositiveInfinity'>
    """

    _guarded: ClassVar[type]

    @classmethod
    def _unguarded_type(cls) -> type:
        return cls

    def check(self):
        """
        Валидация: Unguarded → Guarded.

        Returns:
            Guarded той же разрядности с тем же значением (бит в бит)

        Raises:
            PoisonedValueError: Если значение NaN / ±inf (error указывает причину)
        """
        return self._guarded._wrap(check_float(self.value))

    @property
    def error(self) -> FloatError | None:
        """Причина невалидности без исключения (None для конечного значения)."""
        return classify_float(self.value)

    def is_valid(self) -> bool:
        return is_valid_float(self.value)

    # -------------------------------------------------------------------------
    # Сравнение запрещено
    # -------------------------------------------------------------------------

    def _reject_comparison(self, other: Any) -> NoReturn:
        raise TypeError(
            f"{type(self).__name__} values cannot be compared; call check() first"
        )

    __eq__ = _reject_comparison
    __ne__ = _reject_comparison
    __lt__ = _reject_comparison
    __le__ = _reject_comparison
    __gt__ = _reject_comparison
    __ge__ = _reject_comparison
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        error = self.error
        if error is None:
            return f"{type(self).__name__}({self.value!r}, valid=True)"
        return f"{type(self).__name__}({self.value!r}, valid=False, error={error.value})"
