#!/usr/bin/env python3
"""
Numeric kernels behind the fibonacci, prime, lcm and hcf operations.

Usage:
    python -m bfhl.numeric fibonacci 10
    python -m bfhl.numeric prime 1 2 3 4 17
    python -m bfhl.numeric lcm 4 6
    python -m bfhl.numeric hcf 12 18

Output:
    JSON result on stdout
"""

import argparse
import json
import sys
from functools import reduce
from typing import Any, Iterable, List

from bfhl.utils.validation import is_integer


def fibonacci(n: int) -> List[int]:
    """
    Generate the first n Fibonacci terms, starting 0, 1, 1, 2, ...

    Args:
        n: Number of terms (n <= 0 gives an empty list)

    Returns:
        List of n terms
    """
    if n <= 0:
        return []
    if n == 1:
        return [0]

    seq = [0, 1]
    for i in range(2, n):
        seq.append(seq[i - 1] + seq[i - 2])
    return seq


def is_prime(num: int) -> bool:
    """
    Deterministic trial-division primality test.

    Args:
        num: Integer to test

    Returns:
        True if num is prime
    """
    if num <= 1:
        return False
    if num == 2:
        return True
    if num % 2 == 0:
        return False

    i = 3
    while i * i <= num:
        if num % i == 0:
            return False
        i += 2
    return True


def gcd(a: int, b: int) -> int:
    """Euclidean GCD, always non-negative."""
    while b != 0:
        a, b = b, a % b
    return abs(a)


def lcm(a: int, b: int) -> int:
    """
    Least common multiple of two integers.

    Raises:
        ValueError: If both a and b are zero
    """
    if a == 0 and b == 0:
        raise ValueError("lcm is undefined when both operands are zero")
    return abs(a * b) // gcd(a, b)


def filter_primes(values: Iterable[Any]) -> List[int]:
    """
    Keep the elements that are prime integers, in order.

    Non-integer elements are skipped rather than rejected.

    Args:
        values: Decoded JSON array

    Returns:
        Prime elements as ints
    """
    return [int(v) for v in values if is_integer(v) and is_prime(int(v))]


def lcm_of(values: List[int]) -> int:
    """
    Fold lcm over a non-empty sequence.

    Raises:
        ValueError: If values is empty
    """
    if not values:
        raise ValueError("lcm requires at least one value")
    return reduce(lcm, (int(v) for v in values))


def hcf_of(values: List[int]) -> int:
    """
    Fold gcd over a non-empty sequence.

    Raises:
        ValueError: If values is empty
    """
    if not values:
        raise ValueError("hcf requires at least one value")
    return reduce(gcd, (int(v) for v in values))


def main() -> int:
    """
    CLI entry point.

    Returns:
        Exit code (0=success, 1=validation error)
    """
    parser = argparse.ArgumentParser(description="Run a BFHL numeric kernel")
    parser.add_argument("operation", choices=["fibonacci", "prime", "lcm", "hcf"])
    parser.add_argument("values", nargs="+", type=int, help="Integer operand(s)")

    args = parser.parse_args()

    try:
        if args.operation == "fibonacci":
            if len(args.values) != 1 or args.values[0] < 0:
                raise ValueError("fibonacci takes a single non-negative integer")
            result: Any = fibonacci(args.values[0])
        elif args.operation == "prime":
            result = filter_primes(args.values)
        else:
            if any(v <= 0 for v in args.values):
                raise ValueError(f"{args.operation} takes positive integers only")
            fold = lcm_of if args.operation == "lcm" else hcf_of
            result = fold(args.values)
    except ValueError as e:
        print(f"[ERROR] Validation error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
