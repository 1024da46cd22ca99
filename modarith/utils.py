from functools import lru_cache

from .constants import PRIMITIVE_ROOTS


def gcd(a: int, b: int) -> int:
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    return a // gcd(a, b) * b


def extgcd(a: int, b: int):
    """
    Extended Euclid, iterative.
    Returns (g, x, y) with a*x + b*y == g.
    """
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b > 0:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def signed_mod(x: int, modulus: int) -> int:
    """Reduce x into [0, modulus) for either sign of x."""
    return x % modulus


def powmod(x: int, n: int, modulus: int) -> int:
    """Binary exponentiation, O(log n) multiplications."""
    result = 1 % modulus
    x %= modulus
    while n > 0:
        if n & 1:
            result = result * x % modulus
        x = x * x % modulus
        n >>= 1
    return result


def invmod(x: int, modulus: int) -> int:
    """Inverse of x mod modulus via extended Euclid."""
    x = signed_mod(x, modulus)
    if x == 0:
        raise ZeroDivisionError(f"0 has no inverse mod {modulus}")
    g, u, _ = extgcd(x, modulus)
    if g != 1:
        raise ValueError(f"{x} is not invertible mod {modulus} (gcd={g})")
    return signed_mod(u, modulus)


def inverse_table(n: int, modulus: int) -> list:
    """inv[i] = i^-1 mod prime modulus for 1 <= i <= n (inv[0] is unused)."""
    inv = [0, 1] + [0] * max(0, n - 1)
    for i in range(2, n + 1):
        inv[i] = (modulus - (modulus // i) * inv[modulus % i] % modulus) % modulus
    return inv[:n + 1]


def next_power_of_two(n: int) -> int:
    size = 1
    while size < n:
        size <<= 1
    return size


def prime_factors(n: int) -> set:
    factors = set()
    while n % 2 == 0:
        factors.add(2); n //= 2
    p = 3
    while p * p <= n:
        while n % p == 0:
            factors.add(p); n //= p
        p += 2
    if n > 1:
        factors.add(n)
    return factors


@lru_cache(maxsize=None)
def find_primitive_root(q: int) -> int:
    """Find a primitive root mod prime q."""
    if q in PRIMITIVE_ROOTS:
        return PRIMITIVE_ROOTS[q]
    if q == 2:
        return 1
    phi = q - 1
    factors = prime_factors(phi)
    for g in range(2, q):
        if all(pow(g, phi // f, q) != 1 for f in factors):
            return g
    raise RuntimeError(f"No primitive root for {q}")
