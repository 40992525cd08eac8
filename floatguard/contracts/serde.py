"""
Serialization Adapter — Pydantic V2 интеграция

Opt-in адаптер: сами типы не несут сериализационных хуков, они подключаются
через Annotated-аннотации этого модуля.

Контракт на проводе:
- Guarded и Unguarded сериализуются как голое число (JSON Schema: number)
- Sentinel для "невалидного" значения не существует: передаётся то значение,
  которое было записано
- Десериализация Guarded заново выполняет валидацию; NaN / ±inf на входе —
  ошибка валидации (pydantic.ValidationError), а не молча принятое значение
- В JSON нет чисел NaN / ±inf: модели с Unguarded полями используют
  WIRE_MODEL_CONFIG, и значения пишутся литералами NaN, Infinity, -Infinity.
  Без него pydantic пишет null, который Unguarded поле не примет обратно

Example:
    >>> from pydantic import BaseModel
    >>> class Reading(BaseModel):
    ...     value: GuardedF64Field
    >>> Reading(value=2.5).model_dump_json()
    '{"value":2.5}'
    >>> class RawReading(BaseModel):
    ...     model_config = WIRE_MODEL_CONFIG
    ...     value: UnguardedF64Field
    >>> RawReading(value=float("inf")).model_dump_json()
    '{"value":Infinity}'
"""

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import ConfigDict, GetCoreSchemaHandler
from pydantic_core import core_schema

from floatguard.domain import (
    Guarded,
    GuardedF32,
    GuardedF64,
    Unguarded,
    UnguardedF32,
    UnguardedF64,
)

# JSON-литералы NaN / Infinity вместо null для невалидных Unguarded значений
WIRE_MODEL_CONFIG = ConfigDict(ser_json_inf_nan="constants")


def _serialize(value: Guarded | Unguarded) -> float:
    return value.value


def _wire_schema(target: type, accepted: type) -> core_schema.CoreSchema:
    from_number = core_schema.no_info_after_validator_function(
        target,
        core_schema.float_schema(allow_inf_nan=True),
    )
    return core_schema.json_or_python_schema(
        json_schema=from_number,
        python_schema=core_schema.union_schema(
            [
                core_schema.is_instance_schema(target),
                core_schema.no_info_after_validator_function(
                    target, core_schema.is_instance_schema(accepted)
                ),
                from_number,
            ]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _serialize,
            return_schema=core_schema.float_schema(allow_inf_nan=True),
        ),
    )


@dataclass(frozen=True)
class GuardedSchema:
    """
    Аннотация pydantic для Guarded типа.

    Принимает число, Guarded или Unguarded той же разрядности; любое
    входное значение проходит валидацию конечности.

    Attributes:
        target: Конкретный Guarded тип (GuardedF64 / GuardedF32)
    """

    target: type[Guarded]

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _wire_schema(self.target, self.target._unguarded)


@dataclass(frozen=True)
class UnguardedSchema:
    """
    Аннотация pydantic для Unguarded типа.

    Принимает любое число (включая NaN / ±inf), Guarded или Unguarded той же
    разрядности без проверки.

    Attributes:
        target: Конкретный Unguarded тип (UnguardedF64 / UnguardedF32)
    """

    target: type[Unguarded]

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _wire_schema(self.target, self.target._guarded)


GuardedF64Field = Annotated[GuardedF64, GuardedSchema(GuardedF64)]
UnguardedF64Field = Annotated[UnguardedF64, UnguardedSchema(UnguardedF64)]
GuardedF32Field = Annotated[GuardedF32, GuardedSchema(GuardedF32)]
UnguardedF32Field = Annotated[UnguardedF32, UnguardedSchema(UnguardedF32)]
