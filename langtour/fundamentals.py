"""Basic helpers: greetings, arithmetic, primes and grading."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence
from itertools import product, takewhile


def greet(name: str) -> str:
    """Return a greeting for ``name``."""
    return f"Hello, {name}!"


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def factorial(n: int) -> int:
    """Return ``n!``; 0 and 1 both give 1."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    return math.prod(range(2, n + 1))


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def min_max(arr: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and largest values of a non-empty sequence."""
    values = list(arr)
    if not values:
        raise ValueError("min_max of an empty sequence")
    return min(values), max(values)


def grade(score: int) -> str:
    """Letter grade for a numeric score."""
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    return "F"


def main(argv: Sequence[str] | None = None) -> int:
    """Print a walk-through of values, control flow, functions and strings."""
    argparse.ArgumentParser(description="Fundamentals demonstrations.").parse_args(argv)
    print("===== Fundamentals =====\n")

    print("--- Numeric Ops ---")
    a, b = 17, 5
    print(f"{a} + {b} = {a + b}")
    print(f"{a} - {b} = {a - b}")
    print(f"{a} * {b} = {a * b}")
    print(f"{a} / {b} = {a // b}")
    print(f"{a} % {b} = {a % b}")
    print(f"2^10 = {2 ** 10}")
    print(f"abs(-42) = {abs(-42)}")
    print(f"sqrt(144.0) = {math.sqrt(144.0)}")
    print(f"pi: {math.pi:.6f}")

    print("\n--- Tuples ---")
    person = ("Alice", 30, 5.6)
    name, age, height = person
    print(f"Name: {name}, Age: {age}, Height: {height}")

    print("\n--- Arrays ---")
    primes = [2, 3, 5, 7, 11, 13, 17, 19]
    print(f"Primes: {primes}")
    print(f"First: {primes[0]}, Last: {primes[-1]}")
    print(f"Sum: {sum(primes)}")
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    print(f"Matrix center: {matrix[1][1]}")

    print("\n--- Control Flow ---")
    n = 42
    print(f"{n} is {'even' if n % 2 == 0 else 'odd'}")
    score = 87
    print(f"Score {score} → grade {grade(score)}")
    print(f"Loop result: {5 * 5}")
    print("Countdown: " + " ".join(str(t) for t in range(5, 0, -1)) + " Blast off!")
    print("Squares: " + " ".join(str(i * i) for i in range(1, 7)))
    for i, fruit in enumerate(["apple", "banana", "cherry"]):
        print(f"  {i}: {fruit}")
    pairs = takewhile(lambda p: p[0] + p[1] <= 4, product(range(5), repeat=2))
    print(" ".join(f"({i},{j})" for i, j in pairs))

    print("\n--- Functions ---")
    print(f"greet: {greet('World')}")
    print(f"add(7,8): {add(7, 8)}")
    print(f"factorial(10): {factorial(10)}")
    print(f"is_prime(17): {is_prime(17)}")
    print(f"is_prime(18): {is_prime(18)}")
    data = [5, 2, 8, 1, 9, 3, 7]
    low, high = min_max(data)
    print(f"data={data}  min={low} max={high}")

    print("\n--- Strings ---")
    text = "Hello" + "," + " World" + "!"
    print(f"String: {text}")
    print(f"uppercase: {text.upper()}")
    print(f"len: {len(text)}")
    print(f"contains 'World': {'World' in text}")
    print(f"replace: {text.replace('World', 'Python')}")
    print(f"trim: '{'  spaces  '.strip()}'")
    print(f"slice [0:5]: {text[0:5]}")
    print(f"colors: {'red,green,blue,yellow'.split(',')}")
    print(f"{'right':>10} | {'left':<10} | {'center':^10}")

    print("\nFundamentals complete!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())