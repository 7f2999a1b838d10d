"""
GCD — Greatest Common Divisor primitives

Модуль содержит целочисленные НОД-примитивы, на которых строится
Frobenius solver:
- gcd_pair: НОД двух чисел (алгоритм Евклида)
- gcd_many: НОД последовательности (divide-and-conquer по парам)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd_pair(a, 0) == a
2. gcd_pair(a, b) == gcd_pair(b, a % b)
3. Рекурсия не используется: глубина стека не зависит от входа
4. Все операции детерминированы и не имеют side effects
"""

from typing import Sequence


# =============================================================================
# VALIDATION
# =============================================================================


def _require_int(value: object, name: str) -> int:
    # bool is a subclass of int but is never a meaningful operand here
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}: {value!r}")
    return value


# =============================================================================
# PAIRWISE GCD
# =============================================================================


def gcd_pair(a: int, b: int) -> int:
    """
    НОД двух целых чисел (алгоритм Евклида).

    Пара (a, b) заменяется на (b, a % b), пока b != 0. Знак не нормализуется:
    gcd_pair(a, 0) возвращает a как есть.

    Args:
        a: Первый операнд
        b: Второй операнд

    Returns:
        Greatest common divisor

    Raises:
        TypeError: если операнд не int

    Examples:
        >>> gcd_pair(12, 18)
        6
        >>> gcd_pair(17, 13)
        1
        >>> gcd_pair(7, 0)
        7
        >>> gcd_pair(0, 7)
        7
    """
    _require_int(a, "a")
    _require_int(b, "b")

    while b != 0:
        a, b = b, a % b

    return a


# =============================================================================
# SET GCD
# =============================================================================


def gcd_many(values: Sequence[int]) -> int:
    """
    НОД последовательности целых чисел.

    Divide-and-conquer без рекурсии: на каждом уровне соседние частичные
    результаты объединяются через gcd_pair, число уровней O(log n).
    Слияния внутри уровня независимы друг от друга.

    Для одного элемента возвращается gcd_pair(x, x), то есть сам x.

    Args:
        values: Непустая последовательность int

    Returns:
        НОД всех элементов

    Raises:
        ValueError: если values пустая
        TypeError: если элемент не int

    Examples:
        >>> gcd_many([6, 9, 20])
        1
        >>> gcd_many([2, 4, 6])
        2
        >>> gcd_many([15])
        15
    """
    if len(values) == 0:
        raise ValueError("values cannot be empty")

    level = [_require_int(v, "value") for v in values]

    if len(level) == 1:
        return gcd_pair(level[0], level[0])

    while len(level) > 1:
        merged = [gcd_pair(level[i], level[i + 1]) for i in range(0, len(level) - 1, 2)]
        if len(level) % 2 == 1:
            # Нечётный хвост переходит на следующий уровень без изменений
            merged.append(level[-1])
        level = merged

    return level[0]
