from ramify.math.algebra.rings.ring import Ring, RingElement
from ramify.utilities.exceptions import CoercionException, NotInvertibleException
from fractions import Fraction


class IntegerElement(RingElement):
    """
    Element of an `IntegerRing`.
    """

    def __init__(self, val: int, ring: Ring):
        """
        Parameters:
            val     (int): Value of the element.
            ring   (Ring): Parent ring.
        """
        super().__init__(ring)
        self.val = val


    def shorthand(self) -> str:
        return str(self.val)


    def __int__(self) -> int:
        return self.val


    def __hash__(self) -> int:
        return hash(self.val)


    def is_zero(self) -> bool:
        return not self.val


    def is_one(self) -> bool:
        return self.val == 1


    def is_unit(self) -> bool:
        return self.val in (1, -1)


    def is_negative(self) -> bool:
        return self.val < 0


    def __elemeq__(self, other: 'IntegerElement') -> bool:
        return self.val == other.val


    def __lt__(self, other: object) -> bool:
        return self.val < self.ring(other).val


    def __gt__(self, other: object) -> bool:
        return self.val > self.ring(other).val


    def __elemadd__(self, other: 'IntegerElement') -> 'IntegerElement':
        return IntegerElement(self.val + other.val, self.ring)


    def __elemsub__(self, other: 'IntegerElement') -> 'IntegerElement':
        return IntegerElement(self.val - other.val, self.ring)


    def __elemmul__(self, other: 'IntegerElement') -> 'IntegerElement':
        return IntegerElement(self.val * other.val, self.ring)


    def __elemtruediv__(self, other: 'IntegerElement') -> 'IntegerElement':
        if not other.val or self.val % other.val:
            raise NotInvertibleException(f'{other} does not divide {self}', parameters=(self, other))

        return IntegerElement(self.val // other.val, self.ring)


    def __neg__(self) -> 'IntegerElement':
        return IntegerElement(-self.val, self.ring)


    def __invert__(self) -> 'IntegerElement':
        if not self.is_unit():
            raise NotInvertibleException(f'{self} is not a unit in ZZ', parameters=self)

        return IntegerElement(self.val, self.ring)


    def __pow__(self, exponent: int) -> 'IntegerElement':
        if exponent < 0:
            return (~self)**(-exponent)

        return IntegerElement(self.val**exponent, self.ring)



class IntegerRing(Ring):
    """
    The ring of integers, Z.

    Examples:
        >>> from ramify.math.all import ZZ
        >>> ZZ(4) + ZZ(-4)
        <IntegerElement: 0, ring=ZZ>

        >>> ZZ/ZZ(7)
        <QuotientRing: ring=ZZ, quotient=7>

    """

    show_minus_one = False

    def __init__(self):
        self.zero = IntegerElement(0, self)
        self.one  = IntegerElement(1, self)


    def characteristic(self) -> int:
        return 0


    def shorthand(self) -> str:
        return 'ZZ'


    def __eq__(self, other: 'IntegerRing') -> bool:
        return type(self) == type(other)


    def __hash__(self) -> int:
        return hash(self.__class__)


    def coerce(self, other: object) -> IntegerElement:
        """
        Attempts to coerce other into an element of the algebra.

        Parameters:
            other (object): Object to coerce.

        Returns:
            IntegerElement: Coerced element.
        """
        type_o = type(other)

        if type_o is IntegerElement and other.ring == self:
            return other

        elif isinstance(other, int):
            return IntegerElement(int(other), self)

        elif type_o is Fraction and other.denominator == 1:
            return IntegerElement(other.numerator, self)

        raise CoercionException(f'Unable to coerce {other!r} into {self}', (self, other))


    def __truediv__(self, element: IntegerElement) -> 'QuotientRing':
        from ramify.math.algebra.rings.quotient_ring import QuotientRing
        return QuotientRing(self, self(element))



ZZ = IntegerRing()
