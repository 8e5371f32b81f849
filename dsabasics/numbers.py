"""Small number-theory, bit and recursion routines."""

from __future__ import annotations

from functools import reduce
from math import isqrt
from operator import xor
from typing import Iterable, Iterator, List, Sequence, Tuple


def _require_non_negative(n: int, name: str = "n") -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def digit_count(n: int) -> int:
    """Return the number of decimal digits of ``n``; zero has none."""
    n = abs(n)
    count = 0
    while n:
        n //= 10
        count += 1
    return count


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative ``n``."""
    _require_non_negative(n)
    return reduce(lambda acc, i: acc * i, range(2, n + 1), 1)


def factors(n: int) -> List[int]:
    """Return every divisor of ``n`` in ascending order."""
    return [i for i in range(1, n + 1) if n % i == 0]


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting from ``fibonacci(0) == 0``."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_sequence(count: int) -> List[int]:
    """Return the first ``count`` Fibonacci numbers."""
    result: List[int] = []
    previous, current = 0, 1
    for _ in range(count):
        result.append(previous)
        previous, current = current, previous + current
    return result


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two positive integers."""
    if a <= 0 or b <= 0:
        raise ValueError("gcd needs two positive integers")
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two positive integers."""
    return a * b // gcd(a, b)


def is_palindrome_number(n: int) -> bool:
    """Return True if the decimal digits of ``n`` read the same both ways."""
    remaining = abs(n)
    reversed_value = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value == abs(n)


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a power of two greater than one."""
    return n > 1 and n & (n - 1) == 0


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def prime_factors(n: int) -> List[int]:
    """Return the prime factors of ``n`` in ascending order, with repetition."""
    result: List[int] = []
    if n <= 1:
        return result
    i = 2
    while i * i <= n:
        while n % i == 0:
            result.append(i)
            n //= i
        i += 1
    if n > 1:
        result.append(n)
    return result


def count_down(n: int) -> List[int]:
    """Return ``n, n-1, ..., 1``."""
    return list(range(n, 0, -1))


def count_up(n: int) -> List[int]:
    """Return ``1, 2, ..., n``."""
    return list(range(1, n + 1))


def is_bit_set(n: int, k: int) -> bool:
    """Return True if bit ``k`` of ``n`` is set, counting bits from 1."""
    if k < 1:
        raise ValueError(f"bit position must be at least 1, got {k}")
    return bool(n & (1 << (k - 1)))


def count_set_bits(n: int) -> int:
    """Return the number of one bits in a positive ``n``; zero for ``n <= 0``."""
    count = 0
    while n > 0:
        count += n & 1
        n >>= 1
    return count


def largest(values: Iterable[int]) -> int:
    """Return the largest value."""
    items = list(values)
    if not items:
        raise ValueError("largest of an empty sequence")
    return max(items)


def second_largest(values: Iterable[int]) -> int:
    """Return the second value from the top in sorted order.

    Duplicates count separately, so ``[5, 5]`` gives 5.
    """
    items = sorted(values)
    if len(items) < 2:
        raise ValueError("second largest needs at least two values")
    return items[-2]


def sum_of_digits(n: int) -> int:
    """Return the sum of the decimal digits of a non-negative ``n``."""
    _require_non_negative(n)
    total = 0
    while n >= 10:
        n, digit = divmod(n, 10)
        total += digit
    return total + n


def sum_natural(n: int) -> int:
    """Return ``1 + 2 + ... + n``."""
    _require_non_negative(n)
    return n * (n + 1) // 2


def tower_of_hanoi(
    n: int, source: str = "A", auxiliary: str = "B", target: str = "C"
) -> Iterator[Tuple[int, str, str]]:
    """Yield the moves ``(disk, from_peg, to_peg)`` that carry ``n`` disks to ``target``."""
    if n < 1:
        raise ValueError(f"number of disks must be at least 1, got {n}")
    return _hanoi(n, source, auxiliary, target)


def _hanoi(n: int, source: str, auxiliary: str, target: str) -> Iterator[Tuple[int, str, str]]:
    if n == 1:
        yield (1, source, target)
        return
    yield from _hanoi(n - 1, source, target, auxiliary)
    yield (n, source, target)
    yield from _hanoi(n - 1, auxiliary, source, target)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def max_rope_pieces(n: int, a: int, b: int, c: int) -> int:
    """Return the most pieces a rope of length ``n`` cuts into using lengths a, b and c.

    Raises ValueError when no combination of the lengths makes up ``n``.
    """
    _require_non_negative(n)
    pieces = (a, b, c)
    if any(p <= 0 for p in pieces):
        raise ValueError("piece lengths must be positive")
    best: List[int | None] = [0] + [None] * n
    for length in range(1, n + 1):
        options = [
            best[length - p] for p in pieces if p <= length and best[length - p] is not None
        ]
        if options:
            best[length] = max(options) + 1
    if best[n] is None:
        raise ValueError(f"a rope of length {n} cannot be cut into pieces {pieces}")
    return best[n]


def odd_occurring(values: Iterable[int]) -> int:
    """Return the value that occurs an odd number of times when all others occur evenly."""
    return reduce(xor, values, 0)


def two_odd_occurring(values: Sequence[int]) -> Tuple[int, int]:
    """Return the two values that occur an odd number of times.

    The first value returned is the one holding the lowest bit in which they differ.
    """
    combined = reduce(xor, values, 0)
    if combined == 0:
        raise ValueError("no pair of distinct odd-occurring values")
    lowest_bit = combined & -combined
    with_bit = reduce(xor, (v for v in values if v & lowest_bit), 0)
    return with_bit, combined ^ with_bit