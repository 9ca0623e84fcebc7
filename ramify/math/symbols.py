from ramify.core.base_object import BaseObject


class Symbol(BaseObject):
    """
    Named generator of a series ring. Once built by a ring, arithmetic on the symbol is
    arithmetic on the ring's generator.

    Examples:
        >>> from ramify.math.all import ZZ, Symbol, puiseux_series_ring
        >>> x = Symbol('x')
        >>> _ = puiseux_series_ring(ZZ, 10, x)
        >>> str(x**2 + 1)
        '1+x^2+O(x^10)'

    """

    def __init__(self, str_representation: str):
        self.repr = str_representation
        self.ring = None
        self.var  = None


    def __reprdir__(self):
        return ['repr', 'ring']


    def shorthand(self) -> str:
        return self.repr


    def __str__(self) -> str:
        return self.repr


    def __hash__(self) -> int:
        return hash(self.repr)


    def __eq__(self, other: 'Symbol') -> bool:
        return type(self) == type(other) and self.repr == other.repr and self.ring == other.ring


    def __bool__(self) -> bool:
        return True


    def build(self, ring: 'Ring'):
        self.ring = ring
        self.var  = ring.gen()


    def __add__(self, other):
        return self.var + other

    def __radd__(self, other):
        return other + self.var


    def __sub__(self, other):
        return self.var - other

    def __rsub__(self, other):
        return other - self.var


    def __mul__(self, other):
        return self.var * other

    def __rmul__(self, other):
        return other * self.var


    def __truediv__(self, other):
        return self.var / other

    def __rtruediv__(self, other):
        return other / self.var


    def __neg__(self):
        return -self.var


    def __invert__(self):
        return ~self.var


    def __pow__(self, exponent):
        return self.var**exponent
