"""
Frobenius Number — Round-Robin Residue Solver

Модуль вычисляет число Фробениуса набора генераторов: наибольшее целое,
не представимое как неотрицательная целочисленная комбинация генераторов.

Порядок решения (FrobeniusSolver.solve):
1. Coprimality gate: gcd_many(generators) != ±1 → NON_COPRIME
2. Сортировка по возрастанию, m0 = наименьший генератор
3. Вырожденные случаи:
   - m0 <= 0 → INVALID_GENERATOR
   - m0 == 1 → -1 (все неотрицательные числа представимы)
   - два генератора → closed form a*b - a - b
4. Общий случай: residue DP (round-robin) по вычетам mod m0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. table[0] == 0 на протяжении всего вычисления
2. Элементы таблицы только уменьшаются
3. Легитимный ответ -1 (ALL_REPRESENTABLE) никогда не совпадает с
   неопределённым результатом (value=None)
4. Входной список не мутируется, если не включён SolverConfig.sort_in_place

ФОРМУЛЫ:
    table[r] = min { x >= 0 : x ≡ r (mod m0), x представимо }
    Frobenius = max(table) - m0
    Frobenius(a, b) = a*b - a - b    (gcd(a, b) == 1)

Residue DP эквивалентен поиску кратчайших путей в циркулянтном графе на m0
вершинах (вычеты mod m0) с рёбрами r → (r + g) mod m0 веса g. Для каждого
генератора g граф распадается на d = gcd(m0, g) циклов длины m0 / d; каждый
цикл обходится один раз, начиная с минимального известного значения.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Sequence

from src.core.logging import get_logger
from src.core.math.gcd import gcd_many, gcd_pair

logger = get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Ответ для вырожденного случая m0 == 1: gaps отсутствуют
FROBENIUS_ALL_REPRESENTABLE: Final[int] = -1

# Маркер "вычет ещё не достигнут" в residue table (наружу не выходит)
_UNREACHED: Final[None] = None


# =============================================================================
# ENUMS
# =============================================================================


class FrobeniusStatus(str, Enum):
    """Статус вычисления числа Фробениуса."""

    OK = "OK"
    ALL_REPRESENTABLE = "ALL_REPRESENTABLE"
    NON_COPRIME = "NON_COPRIME"
    INVALID_GENERATOR = "INVALID_GENERATOR"
    UNREACHABLE_RESIDUE = "UNREACHABLE_RESIDUE"


class SolveMethod(str, Enum):
    """Ветка решателя, которая дала ответ."""

    DEGENERATE = "DEGENERATE"
    CLOSED_FORM = "CLOSED_FORM"
    RESIDUE_DP = "RESIDUE_DP"


_DEFINED_STATUSES: Final[frozenset[FrobeniusStatus]] = frozenset(
    {FrobeniusStatus.OK, FrobeniusStatus.ALL_REPRESENTABLE}
)


# =============================================================================
# CONFIG & RESULT
# =============================================================================


@dataclass(frozen=True)
class SolverConfig:
    """Конфигурация FrobeniusSolver.

    - sort_in_place: сортировать список вызывающего на месте (только list,
      только после прохождения coprimality gate)
    - use_closed_form: для двух генераторов использовать a*b - a - b;
      False принудительно запускает residue DP
    """

    sort_in_place: bool = False
    use_closed_form: bool = True


@dataclass(frozen=True)
class FrobeniusResult:
    """Результат FrobeniusSolver."""

    value: Optional[int]
    status: FrobeniusStatus
    method: Optional[SolveMethod]

    # Входные параметры для диагностики
    generators: tuple[int, ...]
    gcd: int

    details: str

    @property
    def is_defined(self) -> bool:
        """True если число Фробениуса конечно (включая -1)."""
        return self.status in _DEFINED_STATUSES


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FrobeniusUndefined(Exception):
    """
    Число Фробениуса не определено для данного набора генераторов.

    Используется strict API (frobenius_number_strict, residue_table).
    Исходный FrobeniusResult доступен в атрибуте result.
    """

    def __init__(self, result: FrobeniusResult):
        self.result = result
        super().__init__(f"{result.status.value}: {result.details}")


class NonCoprimeInput(FrobeniusUndefined):
    """gcd(generators) != 1: бесконечно много непредставимых чисел."""


class InvalidGenerator(FrobeniusUndefined):
    """Наименьший генератор <= 0."""


class UnreachableResidue(FrobeniusUndefined):
    """Вычет остался недостижимым после обхода всех генераторов."""


_EXCEPTION_BY_STATUS: Final[dict[FrobeniusStatus, type[FrobeniusUndefined]]] = {
    FrobeniusStatus.NON_COPRIME: NonCoprimeInput,
    FrobeniusStatus.INVALID_GENERATOR: InvalidGenerator,
    FrobeniusStatus.UNREACHABLE_RESIDUE: UnreachableResidue,
}


def raise_for_result(result: FrobeniusResult) -> None:
    """Поднимает соответствующий FrobeniusUndefined, если result не определён."""
    if not result.is_defined:
        raise _EXCEPTION_BY_STATUS[result.status](result)


# =============================================================================
# RESIDUE TABLE
# =============================================================================


def _relax_generator(table: list[Optional[int]], m0: int, generator: int) -> None:
    """
    Один проход round-robin для генератора.

    Вычеты 0..m0-1 разбиваются на d = gcd(m0, generator) классов
    {r, r+d, r+2d, ...}. В каждом классе обход начинается с минимального
    известного значения и делает m0 // d шагов "+ generator".
    """
    d = gcd_pair(m0, generator)

    for r in range(d):
        known = [table[q] for q in range(r, m0, d) if table[q] is not _UNREACHED]
        if not known:
            continue

        n = min(known)
        for _ in range(m0 // d):
            n += generator
            p = n % m0
            current = table[p]
            if current is not _UNREACHED and current < n:
                n = current
            table[p] = n


def _build_residue_table(ordered: Sequence[int]) -> list[Optional[int]]:
    # ordered: отсортированные генераторы, ordered[0] >= 1
    m0 = ordered[0]
    table: list[Optional[int]] = [_UNREACHED] * m0
    table[0] = 0

    for generator in ordered[1:]:
        _relax_generator(table, m0, generator)

    return table


# =============================================================================
# SOLVER
# =============================================================================


class FrobeniusSolver:
    """Frobenius number solver (coprimality gate → closed form | residue DP).

    Stateless между вызовами: экземпляр хранит только SolverConfig.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()

    def solve(self, generators: Sequence[int]) -> FrobeniusResult:
        """
        Вычисление числа Фробениуса.

        Args:
            generators: непустая последовательность int

        Returns:
            FrobeniusResult. Для NON_COPRIME / INVALID_GENERATOR /
            UNREACHABLE_RESIDUE value=None, исключение не поднимается.

        Raises:
            ValueError: если generators пустая
            TypeError: если элемент не int, или sort_in_place=True для не-list

        Examples:
            >>> FrobeniusSolver().solve([6, 9, 20]).value
            43
            >>> FrobeniusSolver().solve([3, 5]).value
            7
            >>> FrobeniusSolver().solve([2, 4, 6]).value is None
            True
        """
        ordered, g, rejected = self._gate(generators)
        if rejected is not None:
            return rejected

        m0 = ordered[0]

        if m0 == 1:
            logger.debug("frobenius_degenerate", generators=ordered)
            return FrobeniusResult(
                value=FROBENIUS_ALL_REPRESENTABLE,
                status=FrobeniusStatus.ALL_REPRESENTABLE,
                method=SolveMethod.DEGENERATE,
                generators=ordered,
                gcd=g,
                details="Generator 1 present: every non-negative integer is representable",
            )

        if len(ordered) == 2 and self.config.use_closed_form:
            a, b = ordered
            value = a * b - a - b
            logger.debug("frobenius_closed_form", generators=ordered, value=value)
            return FrobeniusResult(
                value=value,
                status=FrobeniusStatus.OK,
                method=SolveMethod.CLOSED_FORM,
                generators=ordered,
                gcd=g,
                details=f"Closed form {a}*{b} - {a} - {b}",
            )

        table = _build_residue_table(ordered)

        if _UNREACHED in table:
            unreached = [r for r, x in enumerate(table) if x is _UNREACHED]
            return self._undefined(
                FrobeniusStatus.UNREACHABLE_RESIDUE,
                ordered,
                g,
                f"Residues {unreached} mod {m0} not reached by any combination",
            )

        value = max(table) - m0
        logger.debug(
            "frobenius_residue_dp", generators=ordered, modulus=m0, value=value
        )
        return FrobeniusResult(
            value=value,
            status=FrobeniusStatus.OK,
            method=SolveMethod.RESIDUE_DP,
            generators=ordered,
            gcd=g,
            details=f"Residue DP over {m0} residues",
        )

    def residue_table(self, generators: Sequence[int]) -> list[int]:
        """
        Заполненная residue table (Apéry set относительно m0).

        table[r]: наименьшее представимое число, сравнимое с r по mod m0.

        Raises:
            FrobeniusUndefined: для NON_COPRIME / INVALID_GENERATOR /
                UNREACHABLE_RESIDUE

        Examples:
            >>> FrobeniusSolver().residue_table([6, 9, 20])
            [0, 49, 20, 9, 40, 29]
        """
        ordered, g, rejected = self._gate(generators)
        if rejected is not None:
            raise_for_result(rejected)

        table = _build_residue_table(ordered)

        if _UNREACHED in table:
            raise_for_result(
                self._undefined(
                    FrobeniusStatus.UNREACHABLE_RESIDUE,
                    ordered,
                    g,
                    f"Residue table mod {ordered[0]} is incomplete",
                )
            )

        return table

    def _gate(
        self, generators: Sequence[int]
    ) -> tuple[tuple[int, ...], int, Optional[FrobeniusResult]]:
        # Coprimality gate + сортировка + проверка m0 > 0
        if len(generators) == 0:
            raise ValueError("generators cannot be empty")

        if self.config.sort_in_place and not isinstance(generators, list):
            raise TypeError(
                f"sort_in_place requires a list, got {type(generators).__name__}"
            )

        g = gcd_many(generators)

        if abs(g) != 1:
            ordered = tuple(sorted(generators))
            return ordered, g, self._undefined(
                FrobeniusStatus.NON_COPRIME,
                ordered,
                g,
                f"gcd(generators) = {g}: infinitely many integers are not representable",
            )

        if self.config.sort_in_place:
            generators.sort()
            ordered = tuple(generators)
        else:
            ordered = tuple(sorted(generators))

        if ordered[0] <= 0:
            return ordered, g, self._undefined(
                FrobeniusStatus.INVALID_GENERATOR,
                ordered,
                g,
                f"Smallest generator {ordered[0]} <= 0",
            )

        return ordered, g, None

    @staticmethod
    def _undefined(
        status: FrobeniusStatus,
        ordered: tuple[int, ...],
        g: int,
        details: str,
    ) -> FrobeniusResult:
        logger.info(
            "frobenius_undefined",
            status=status.value,
            gcd=g,
            generators=ordered,
            details=details,
        )
        return FrobeniusResult(
            value=None,
            status=status,
            method=None,
            generators=ordered,
            gcd=g,
            details=details,
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def frobenius_number(
    generators: Sequence[int], config: Optional[SolverConfig] = None
) -> FrobeniusResult:
    """
    Число Фробениуса как FrobeniusResult (без исключений для undefined).

    Examples:
        >>> frobenius_number([4, 7]).value
        17
        >>> frobenius_number([1, 9]).status
        <FrobeniusStatus.ALL_REPRESENTABLE: 'ALL_REPRESENTABLE'>
    """
    return FrobeniusSolver(config).solve(generators)


def frobenius_number_strict(
    generators: Sequence[int], config: Optional[SolverConfig] = None
) -> int:
    """
    Число Фробениуса как int.

    Raises:
        NonCoprimeInput: gcd(generators) != 1
        InvalidGenerator: наименьший генератор <= 0
        UnreachableResidue: residue table не заполнена
    """
    result = FrobeniusSolver(config).solve(generators)
    raise_for_result(result)
    return result.value


def residue_table(
    generators: Sequence[int], config: Optional[SolverConfig] = None
) -> list[int]:
    """Residue table набора генераторов, см. FrobeniusSolver.residue_table."""
    return FrobeniusSolver(config).residue_table(generators)


def is_representable(n: int, generators: Sequence[int]) -> bool:
    """
    Представимо ли n неотрицательной комбинацией генераторов.

    n представимо ⇔ n >= 0 и n >= table[n mod m0].

    Raises:
        FrobeniusUndefined: если generators не проходят coprimality gate
            или содержат неположительный генератор

    Examples:
        >>> is_representable(43, [6, 9, 20])
        False
        >>> is_representable(44, [6, 9, 20])
        True
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be int, got {type(n).__name__}: {n!r}")

    table = residue_table(generators)
    if n < 0:
        return False

    return n >= table[n % len(table)]
