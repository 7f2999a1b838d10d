"""
GeneratorSet — Модель входного набора генераторов

Immutable Pydantic модель запроса на вычисление числа Фробениуса.
На JSON-границе проверяется контрактом generator_set
(src/core/contracts/schema/generator_set.json).
"""

from typing import Any, Dict, Final, Optional

from pydantic import BaseModel, Field, StrictInt

from src.core.contracts import GENERATOR_SET_CONTRACT, validate_contract
from src.core.math.frobenius import FrobeniusResult, SolverConfig, frobenius_number

GENERATOR_SET_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# GENERATOR SET MODEL
# =============================================================================


class GeneratorSet(BaseModel):
    """
    Набор генераторов числовой полугруппы.

    Immutable модель (frozen=True). Порядок генераторов сохраняется как есть,
    solve() работает с копией и не мутирует модель.
    """

    schema_version: str = Field(
        ..., pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    generators: list[StrictInt] = Field(
        ..., min_length=1, description="Генераторы (целые числа, порядок произвольный)"
    )

    model_config = {"frozen": True}

    @classmethod
    def of(cls, *generators: int) -> "GeneratorSet":
        """Сокращённый конструктор с текущей версией схемы."""
        return cls(schema_version=GENERATOR_SET_SCHEMA_VERSION, generators=list(generators))

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "GeneratorSet":
        """
        Построение из JSON данных с проверкой контракта.

        Raises:
            jsonschema.ValidationError: данные не соответствуют generator_set
        """
        validate_contract(GENERATOR_SET_CONTRACT, data)
        return cls.model_validate(data)

    def to_contract(self) -> Dict[str, Any]:
        """JSON-представление, проверенное контрактом generator_set."""
        data = self.model_dump(mode="json")
        validate_contract(GENERATOR_SET_CONTRACT, data)
        return data

    def solve(self, config: Optional[SolverConfig] = None) -> FrobeniusResult:
        """
        Вычисление числа Фробениуса для набора.

        Args:
            config: SolverConfig (sort_in_place игнорируется: используется копия)

        Returns:
            FrobeniusResult
        """
        return frobenius_number(list(self.generators), config)
