"""
Float Widths — параметризация по разрядности

Описание разрядности (64-bit / 32-bit), общее для валидации, операторов и
констант. Для каждой разрядности создаётся ровно одна пара типов
(Guarded / Unguarded), вся логика которых разделяется через FloatWidth.

Python float всегда binary64, поэтому 32-bit значения хранятся как float,
округлённый до ближайшего binary32 (round-half-to-even; при переполнении —
бесконечность со знаком).
"""

import math
import struct
import sys
from dataclasses import dataclass
from typing import Final


def _round_to_binary32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        # struct отказывается упаковывать значения, округляющиеся в inf
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class FloatWidth:
    """
    Разрядность IEEE-754 с её характеристиками.

    Attributes:
        name: Короткое имя разрядности ("f64" / "f32")
        bits: Число бит
        mantissa_digits: Значащих двоичных разрядов
        digits: Значащих десятичных разрядов
        epsilon: Разница между 1.0 и следующим представимым числом
        max_value: Наибольшее конечное значение
        min_positive: Наименьшее положительное нормализованное значение
        min_exp / max_exp: Границы двоичной экспоненты
        min_10_exp / max_10_exp: Границы десятичной экспоненты
    """

    name: str
    bits: int
    mantissa_digits: int
    digits: int
    epsilon: float
    max_value: float
    min_positive: float
    min_exp: int
    max_exp: int
    min_10_exp: int
    max_10_exp: int
    radix: int = 2

    def coerce(self, value: float) -> float:
        """
        Привести сырое значение к разрядности.

        Args:
            value: Значение (int или float)

        Returns:
            float, точно представимый в данной разрядности
        """
        try:
            raw = float(value)
        except OverflowError:
            # int за пределами double
            raw = math.inf if value > 0 else -math.inf
        if self.bits == 64:
            return raw
        return _round_to_binary32(raw)


F64: Final[FloatWidth] = FloatWidth(
    name="f64",
    bits=64,
    mantissa_digits=sys.float_info.mant_dig,
    digits=sys.float_info.dig,
    epsilon=sys.float_info.epsilon,
    max_value=sys.float_info.max,
    min_positive=sys.float_info.min,
    min_exp=sys.float_info.min_exp,
    max_exp=sys.float_info.max_exp,
    min_10_exp=sys.float_info.min_10_exp,
    max_10_exp=sys.float_info.max_10_exp,
)

F32: Final[FloatWidth] = FloatWidth(
    name="f32",
    bits=32,
    mantissa_digits=24,
    digits=6,
    epsilon=2.0**-23,
    max_value=(2.0 - 2.0**-23) * 2.0**127,
    min_positive=2.0**-126,
    min_exp=-125,
    max_exp=128,
    min_10_exp=-37,
    max_10_exp=38,
)
