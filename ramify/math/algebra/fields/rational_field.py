from ramify.math.algebra.fields.field import Field, FieldElement
from ramify.math.algebra.rings.integer_ring import ZZ, IntegerElement
from ramify.utilities.exceptions import CoercionException, NotInvertibleException
from fractions import Fraction


class RationalElement(FieldElement):
    """
    Element of the `RationalField`.
    """

    def __init__(self, val: Fraction, field: Field):
        """
        Parameters:
            val  (Fraction): Value of the element.
            field   (Field): Parent field.
        """
        self.val = Fraction(val)
        super().__init__(field)


    def shorthand(self) -> str:
        return str(self.val)


    @property
    def numerator(self) -> IntegerElement:
        return ZZ(self.val.numerator)


    @property
    def denominator(self) -> IntegerElement:
        return ZZ(self.val.denominator)


    def __hash__(self) -> int:
        return hash(self.val)


    def is_zero(self) -> bool:
        return not self.val


    def is_one(self) -> bool:
        return self.val == 1


    def is_negative(self) -> bool:
        return self.val < 0


    def __elemeq__(self, other: 'RationalElement') -> bool:
        return self.val == other.val


    def __elemadd__(self, other: 'RationalElement') -> 'RationalElement':
        return RationalElement(self.val + other.val, self.field)


    def __elemsub__(self, other: 'RationalElement') -> 'RationalElement':
        return RationalElement(self.val - other.val, self.field)


    def __elemmul__(self, other: 'RationalElement') -> 'RationalElement':
        return RationalElement(self.val * other.val, self.field)


    def __neg__(self) -> 'RationalElement':
        return RationalElement(-self.val, self.field)


    def __invert__(self) -> 'RationalElement':
        if not self.val:
            raise NotInvertibleException('Zero is not invertible', parameters=self)

        return RationalElement(1 / self.val, self.field)


    def __pow__(self, exponent: int) -> 'RationalElement':
        if exponent < 0:
            return (~self)**(-exponent)

        return RationalElement(self.val**exponent, self.field)



class RationalField(Field):
    """
    The field of rational numbers, Q.

    Examples:
        >>> from ramify.math.all import QQ
        >>> QQ(1) / QQ(3)
        <RationalElement: 1/3, ring=QQ>

    """

    show_minus_one = False

    def __init__(self):
        self.zero = RationalElement(0, self)
        self.one  = RationalElement(1, self)


    def characteristic(self) -> int:
        return 0


    def shorthand(self) -> str:
        return 'QQ'


    def __eq__(self, other: 'RationalField') -> bool:
        return type(self) == type(other)


    def __hash__(self) -> int:
        return hash(self.__class__)


    def is_superstructure_of(self, R: 'Ring') -> bool:
        return R == self or R == ZZ


    def coerce(self, other: object) -> RationalElement:
        """
        Attempts to coerce other into an element of the algebra.

        Parameters:
            other (object): Object to coerce.

        Returns:
            RationalElement: Coerced element.
        """
        type_o = type(other)

        if type_o is RationalElement and other.field == self:
            return other

        elif isinstance(other, int) or type_o is Fraction:
            return RationalElement(Fraction(other), self)

        elif type_o is IntegerElement:
            return RationalElement(Fraction(other.val), self)

        raise CoercionException(f'Unable to coerce {other!r} into {self}', (self, other))



QQ = RationalField()
