"""
FrobeniusReport — Сериализуемый отчёт о вычислении

Immutable Pydantic модель, представляющая FrobeniusResult на JSON-границе.
Правила согласованности status / method / frobenius_number совпадают с
контрактом frobenius_report (src/core/contracts/schema/frobenius_report.json).
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.contracts import FROBENIUS_REPORT_CONTRACT, validate_contract
from src.core.domain.generator_set import GENERATOR_SET_SCHEMA_VERSION
from src.core.math.frobenius import FrobeniusResult, FrobeniusStatus, SolveMethod

_DEFINED = (FrobeniusStatus.OK, FrobeniusStatus.ALL_REPRESENTABLE)


class FrobeniusReport(BaseModel):
    """
    Отчёт о вычислении числа Фробениуса.

    Для OK / ALL_REPRESENTABLE заданы frobenius_number и method;
    для NON_COPRIME / INVALID_GENERATOR / UNREACHABLE_RESIDUE оба null.
    """

    schema_version: str = Field(
        ..., pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    generators: list[int] = Field(
        ..., min_length=1, description="Генераторы в порядке возрастания"
    )
    gcd: int = Field(..., description="НОД всех генераторов")
    status: FrobeniusStatus = Field(..., description="Статус вычисления")
    method: Optional[SolveMethod] = Field(
        None, description="Ветка решателя (null для неопределённого результата)"
    )
    frobenius_number: Optional[int] = Field(
        ..., description="Число Фробениуса (null если не определено)"
    )
    details: str = Field(..., description="Диагностика")

    model_config = {"frozen": True}

    @field_validator("frobenius_number")
    @classmethod
    def validate_number_matches_status(cls, v: Optional[int], info) -> Optional[int]:
        """frobenius_number задан тогда и только тогда, когда статус определён."""
        if "status" in info.data:
            status = info.data["status"]
            if status in _DEFINED and v is None:
                raise ValueError(f"frobenius_number is required for status {status.value}")
            if status not in _DEFINED and v is not None:
                raise ValueError(
                    f"frobenius_number must be null for status {status.value}, got {v}"
                )
        return v

    @model_validator(mode="after")
    def validate_method_matches_status(self) -> "FrobeniusReport":
        """method задан тогда и только тогда, когда статус определён."""
        if self.status in _DEFINED and self.method is None:
            raise ValueError(f"method is required for status {self.status.value}")
        if self.status not in _DEFINED and self.method is not None:
            raise ValueError(
                f"method must be null for status {self.status.value}, got {self.method.value}"
            )
        return self

    @classmethod
    def from_result(cls, result: FrobeniusResult) -> "FrobeniusReport":
        """Построение отчёта из FrobeniusResult."""
        return cls(
            schema_version=GENERATOR_SET_SCHEMA_VERSION,
            generators=list(result.generators),
            gcd=result.gcd,
            status=result.status,
            method=result.method,
            frobenius_number=result.value,
            details=result.details,
        )

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "FrobeniusReport":
        """
        Построение из JSON данных с проверкой контракта.

        Raises:
            jsonschema.ValidationError: данные не соответствуют frobenius_report
        """
        validate_contract(FROBENIUS_REPORT_CONTRACT, data)
        return cls.model_validate(data)

    def to_contract(self) -> Dict[str, Any]:
        """JSON-представление, проверенное контрактом frobenius_report."""
        data = self.model_dump(mode="json")
        validate_contract(FROBENIUS_REPORT_CONTRACT, data)
        return data
