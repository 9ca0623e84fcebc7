from ramify.core.base_object import BaseObject
from ramify.utilities.exceptions import CoercionException, IncompatibleParentException, NoCommonTypeException, NotInvertibleException
from ramify.utilities.runtime import RUNTIME
from fractions import Fraction

from ramify.auxiliary.lazy_loader import LazyLoader
_integer_ring   = LazyLoader('_integer_ring', globals(), 'ramify.math.algebra.rings.integer_ring')
_rational_field = LazyLoader('_rational_field', globals(), 'ramify.math.algebra.fields.rational_field')
_symbols        = LazyLoader('_symbols', globals(), 'ramify.math.symbols')


def ground_ring(obj: object) -> 'Ring':
    """
    Returns the ring a plain Python number belongs to.

    Parameters:
        obj (object): Python number.

    Returns:
        Ring: `ZZ` for integers, `QQ` for fractions, otherwise None.
    """
    if isinstance(obj, int):
        return _integer_ring.ZZ

    elif isinstance(obj, Fraction):
        return _rational_field.QQ

    return None



def promote(a: 'RingElement', b: object) -> ('RingElement', 'RingElement'):
    """
    Brings `a` and `b` into a common ring.

    Parameters:
        a (RingElement): Element driving the operation.
        b      (object): Other operand.

    Returns:
        (RingElement, RingElement): `a` and `b` in the same ring and in the same order.
    """
    R = a.ring

    if isinstance(b, _symbols.Symbol) and b.var is not None:
        b = b.var

    if isinstance(b, RingElement):
        S = b.ring
        if S == R:
            return a, b

        # Same kind of parent, different configuration
        if isinstance(S, type(R)) or isinstance(R, type(S)):
            raise IncompatibleParentException(R, S)

        if R.is_superstructure_of(S):
            return a, R(b)

        elif S.is_superstructure_of(R):
            return S(a), b

        raise NoCommonTypeException(R, S)


    S = ground_ring(b)
    if S is not None:
        if R.is_superstructure_of(S):
            return a, R(b)

        elif S.is_superstructure_of(R):
            return S(a), S(b)

    raise NoCommonTypeException(R, type(b).__name__)



class Ring(BaseObject):
    """
    Base class for rings. Concrete rings set `zero` and `one` and implement `coerce`.
    """

    # Whether a coefficient of -1 is printed as such instead of a bare minus sign
    show_minus_one = True

    def __reprdir__(self):
        return []


    def shorthand(self) -> str:
        raise NotImplementedError


    def __str__(self) -> str:
        return self.shorthand()


    def __hash__(self) -> int:
        return hash(self.__class__)


    def __deepcopy__(self, memo: dict) -> 'Ring':
        # Rings are immutable and shared by all of their elements
        return self


    def __copy__(self) -> 'Ring':
        return self


    def characteristic(self) -> int:
        raise NotImplementedError


    def is_field(self) -> bool:
        return False


    def coerce(self, other: object) -> 'RingElement':
        """
        Attempts to coerce other into an element of the algebra.

        Parameters:
            other (object): Object to coerce.

        Returns:
            RingElement: Coerced element.
        """
        raise NotImplementedError


    def __call__(self, *args, **kwargs) -> 'RingElement':
        return self.coerce(*args, **kwargs)


    def __contains__(self, element: object) -> bool:
        try:
            self.coerce(element)
            return True
        except CoercionException:
            return False


    def is_superstructure_of(self, R: 'Ring') -> bool:
        """
        Determines whether `self` is a superstructure of `R`, i.e. whether elements of `R` promote into `self`.

        Parameters:
            R (Ring): Possible substructure.

        Returns:
            bool: Whether `self` is a superstructure of `R`.
        """
        return self == R



class RingElement(BaseObject):
    """
    Element of a `Ring`. Subclasses implement the `__elem*__` hooks, which are only ever
    called with an operand of the same ring; operand promotion is handled here.
    """

    def __init__(self, ring: Ring):
        """
        Parameters:
            ring (Ring): Parent ring.
        """
        self.ring = ring


    def __reprdir__(self):
        return ['__raw__', 'ring']


    @property
    def __raw__(self):
        return RUNTIME.default_short_printer(self)


    def shorthand(self) -> str:
        raise NotImplementedError


    def __str__(self) -> str:
        return RUNTIME.default_short_printer(self)


    def __hash__(self) -> int:
        return hash((self.__class__, self.ring, self.shorthand()))


    def needs_parentheses(self) -> bool:
        """
        Whether the element must be bracketed when printed as a coefficient.
        """
        return False


    def is_negative(self) -> bool:
        return False


    def is_zero(self) -> bool:
        return self == self.ring.zero


    def is_one(self) -> bool:
        return self == self.ring.one


    def is_unit(self) -> bool:
        try:
            ~self
            return True
        except NotInvertibleException:
            return False


    def __bool__(self) -> bool:
        return not self.is_zero()


    def __add__(self, other: object) -> 'RingElement':
        a, b = promote(self, other)
        return a.__elemadd__(b)


    def __radd__(self, other: object) -> 'RingElement':
        a, b = promote(self, other)
        return b.__elemadd__(a)


    def __sub__(self, other: object) -> 'RingElement':
        a, b = promote(self, other)
        return a.__elemsub__(b)


    def __rsub__(self, other: object) -> 'RingElement':
        a, b = promote(self, other)
        return b.__elemsub__(a)


    def __mul__(self, other: object) -> 'RingElement':
        a, b = promote(self, other)
        return a.__elemmul__(b)


    def __rmul__(self, other: object) -> 'RingElement':
        a, b = promote(self, other)
        return b.__elemmul__(a)


    def __truediv__(self, other: object) -> 'RingElement':
        a, b = promote(self, other)
        return a.__elemtruediv__(b)


    def __rtruediv__(self, other: object) -> 'RingElement':
        a, b = promote(self, other)
        return b.__elemtruediv__(a)


    def divexact(self, other: object) -> 'RingElement':
        """
        Exact division. Raises `NotInvertibleException` if `other` does not divide `self`.

        Parameters:
            other (object): Divisor.

        Returns:
            RingElement: Quotient.
        """
        return self / other


    def __elemsub__(self, other: 'RingElement') -> 'RingElement':
        return self.__elemadd__(-other)


    def __elemtruediv__(self, other: 'RingElement') -> 'RingElement':
        return self.__elemmul__(~other)


    def __invert__(self) -> 'RingElement':
        raise NotInvertibleException(f'{self} is not invertible', parameters=self)


    def __pow__(self, exponent: int) -> 'RingElement':
        if exponent == 0:
            return self.ring.one.copy()

        elif exponent < 0:
            return (~self)**(-exponent)

        result = None
        base   = self

        while exponent:
            if exponent & 1:
                result = base if result is None else result*base

            exponent >>= 1
            if exponent:
                base = base*base

        return result


    def __eq__(self, other: object) -> bool:
        try:
            a, b = promote(self, other)
        except CoercionException:
            return False

        return a.__elemeq__(b)


    def __ne__(self, other: object) -> bool:
        return not self == other
