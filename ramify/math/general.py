from ramify.utilities.exceptions import DomainException, UnsupportedOperationException
from ramify.utilities.runtime import RUNTIME
from functools import reduce
import math


def gcd(*args: int) -> int:
    """
    Greatest common divisor of all arguments. Negative arguments are allowed; the result is non-negative.

    Parameters:
        *args (int): Integers.

    Returns:
        int: GCD.

    Examples:
        >>> from ramify.math.general import gcd
        >>> gcd(12, 18, -30)
        6

    """
    return reduce(math.gcd, args, 0)


def lcm(a: int, b: int) -> int:
    """
    Least common multiple of `a` and `b`.

    Parameters:
        a (int): First integer.
        b (int): Second integer.

    Returns:
        int: LCM.
    """
    return abs(a*b) // math.gcd(a, b)


def is_prime(n: int) -> bool:
    """
    Deterministic primality test by trial division.

    Parameters:
        n (int): Integer to test.

    Returns:
        bool: Whether or not `n` is prime.
    """
    if n < 2:
        return False

    if n < 4:
        return True

    if not n % 2 or not n % 3:
        return False

    i = 5
    while i*i <= n:
        if not n % i or not n % (i+2):
            return False
        i += 6

    return True


def powers(a: 'RingElement', d: int, visual: bool=False) -> list:
    """
    Computes the list of powers `[1, a, a^2, ..., a^d]` by repeated multiplication.

    Parameters:
        a (RingElement): Element to power.
        d         (int): Highest power.
        visual   (bool): Whether or not to show a progress bar.

    Returns:
        list: The `d+1` powers of `a`.

    Examples:
        >>> from ramify.math.all import ZZ, powers
        >>> [int(p) for p in powers(ZZ(3), 4)]
        [1, 3, 9, 27, 81]

    """
    if d <= 0:
        raise DomainException(f'Number of powers must be positive, got {d}', parameters=d)

    result = [a.ring.one.copy(), a]
    c      = a

    for _ in RUNTIME.report_progress(range(2, d+1), visual=visual, unit='power', desc='Powers'):
        c *= a
        result.append(c)

    return result


def exp(a: 'RingElement') -> 'RingElement':
    """
    Exponential function for generic rings. Only defined at zero.

    Parameters:
        a (RingElement): Argument.

    Returns:
        RingElement: One of the ring of `a`.
    """
    if not a.is_zero():
        raise UnsupportedOperationException('Exponential of nonzero element', parameters=a)

    return a.ring.one.copy()


def O(a: 'RingElement') -> 'RingElement':
    """
    Builds the truncation marker `0 + O(x^v)` where `v` is the valuation of `a`. Usually called
    with a power of a series ring generator to set the precision of a series being constructed.

    Parameters:
        a (RingElement): Series, usually a power of the generator.

    Returns:
        RingElement: Zero series of precision `v`.

    Examples:
        >>> from fractions import Fraction
        >>> from ramify.math.all import ZZ, puiseux_series_ring, O
        >>> _, x = puiseux_series_ring(ZZ, 10, 'x')
        >>> str(1 + O(x**Fraction(1, 2)))
        '1+O(x^(1/2))'

    """
    return a.ring.big_oh(a.valuation())
