from ramify.math.algebra.rings.ring import Ring, RingElement
from ramify.math.general import is_prime
from ramify.utilities.exceptions import CoercionException, DomainException, NotInvertibleException
from fractions import Fraction
from math import gcd


class QuotientElement(RingElement):
    """
    Element of a `QuotientRing` of the integers.
    """

    def __init__(self, val: int, ring: Ring):
        """
        Parameters:
            val   (int): Representative of the residue class.
            ring (Ring): Parent ring.
        """
        super().__init__(ring)
        self.val = val % ring.modulus


    def shorthand(self) -> str:
        return str(self.val)


    def __int__(self) -> int:
        return self.val


    def __hash__(self) -> int:
        return hash((self.val, self.ring.modulus))


    def is_zero(self) -> bool:
        return not self.val


    def is_one(self) -> bool:
        return self.val == 1


    def is_unit(self) -> bool:
        return gcd(self.val, self.ring.modulus) == 1


    def __elemeq__(self, other: 'QuotientElement') -> bool:
        return self.val == other.val


    def __elemadd__(self, other: 'QuotientElement') -> 'QuotientElement':
        return QuotientElement(self.val + other.val, self.ring)


    def __elemsub__(self, other: 'QuotientElement') -> 'QuotientElement':
        return QuotientElement(self.val - other.val, self.ring)


    def __elemmul__(self, other: 'QuotientElement') -> 'QuotientElement':
        return QuotientElement(self.val * other.val, self.ring)


    def __neg__(self) -> 'QuotientElement':
        return QuotientElement(-self.val, self.ring)


    def __invert__(self) -> 'QuotientElement':
        if not self.is_unit():
            raise NotInvertibleException(f'{self} is not a unit in {self.ring}', parameters=self)

        return QuotientElement(pow(self.val, -1, self.ring.modulus), self.ring)


    def __pow__(self, exponent: int) -> 'QuotientElement':
        if exponent < 0:
            return (~self)**(-exponent)

        return QuotientElement(pow(self.val, exponent, self.ring.modulus), self.ring)



class QuotientRing(Ring):
    """
    Residue ring of the integers, Z/nZ. Built with `ZZ/ZZ(n)`.

    Examples:
        >>> from ramify.math.all import ZZ
        >>> R = ZZ/ZZ(5)
        >>> ~R(2)
        <QuotientElement: 3, ring=ZZ/(ZZ(5))>

    """

    def __init__(self, ring: Ring, quotient: RingElement):
        """
        Parameters:
            ring         (Ring): Underlying ring.
            quotient (RingElement): Element generating the ideal.
        """
        modulus = abs(int(quotient))
        if modulus < 2:
            raise DomainException(f'Modulus must be at least 2, got {modulus}', parameters=quotient)

        self.ring     = ring
        self.quotient = quotient
        self.modulus  = modulus

        self.zero = QuotientElement(0, self)
        self.one  = QuotientElement(1, self)


    def __reprdir__(self):
        return ['ring', 'quotient']


    def characteristic(self) -> int:
        return self.modulus


    def is_field(self) -> bool:
        return is_prime(self.modulus)


    def shorthand(self) -> str:
        return f'{self.ring.shorthand()}/({self.ring.shorthand()}({self.modulus}))'


    def __eq__(self, other: 'QuotientRing') -> bool:
        return type(self) == type(other) and self.ring == other.ring and self.modulus == other.modulus


    def __hash__(self) -> int:
        return hash((self.ring, self.modulus, self.__class__))


    def is_superstructure_of(self, R: Ring) -> bool:
        return R == self or R == self.ring


    def coerce(self, other: object) -> QuotientElement:
        """
        Attempts to coerce other into an element of the algebra.

        Parameters:
            other (object): Object to coerce.

        Returns:
            QuotientElement: Coerced element.
        """
        type_o = type(other)

        if type_o is QuotientElement and other.ring == self:
            return other

        elif isinstance(other, int):
            return QuotientElement(int(other), self)

        elif isinstance(other, RingElement) and other.ring == self.ring:
            return QuotientElement(int(other), self)

        elif type_o is Fraction:
            den = QuotientElement(other.denominator, self)
            if den.is_unit():
                return QuotientElement(other.numerator, self) * ~den

        raise CoercionException(f'Unable to coerce {other!r} into {self}', (self, other))
