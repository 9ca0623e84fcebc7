from ramify.math.algebra.rings.ring import Ring, RingElement
from ramify.utilities.exceptions import NotInvertibleException


class Field(Ring):
    """
    Base class for fields.
    """

    def is_field(self) -> bool:
        return True



class FieldElement(RingElement):
    """
    Element of a `Field`.
    """

    def __init__(self, field: Field):
        """
        Parameters:
            field (Field): Field this element belongs to.
        """
        self.field = field
        super().__init__(field)


    def is_unit(self) -> bool:
        return not self.is_zero()


    def __elemtruediv__(self, other: 'FieldElement') -> 'FieldElement':
        if other.is_zero():
            raise NotInvertibleException('Division by zero', parameters=(self, other))

        return self * ~other
