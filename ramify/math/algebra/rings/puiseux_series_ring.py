from ramify.math.algebra.rings.ring import Ring, RingElement
from ramify.math.algebra.rings.laurent_series_ring import LaurentSeries, LaurentSeriesRing, laurent_series_ring, series_shorthand
from ramify.math.algebra.fields.field import Field
from ramify.math.general import gcd, lcm
from ramify.math.symbols import Symbol
from ramify.utilities.exceptions import CoercionException, DomainException, UnsupportedOperationException
from ramify.utilities.runtime import RUNTIME
from fractions import Fraction
import logging

log = logging.getLogger(__name__)

_PARENT_CACHE = {}


class PuiseuxSeries(RingElement):
    """
    Puiseux series `data(x^(1/scale))`, where `data` is a truncated Laurent series in `t = x^(1/scale)`.

    Every value returned to the caller is canonical: `scale` and the valuation, precision and stride
    of `data` share no common factor.
    """

    def __init__(self, data: LaurentSeries, scale: int, ring: Ring):
        """
        Parameters:
            data (LaurentSeries): Underlying series. Owned by this value.
            scale          (int): Exponent denominator.
            ring (PuiseuxSeriesRing): Parent ring.
        """
        super().__init__(ring)
        self.data  = data
        self.scale = scale


    def shorthand(self) -> str:
        return series_shorthand(self.data, self.scale, self.ring.symbol.repr)


    def __hash__(self) -> int:
        return hash((self.data, self.scale))


    def __deepcopy__(self, memo: dict) -> 'PuiseuxSeries':
        return PuiseuxSeries(self.data.copy(), self.scale, self.ring)


    def needs_parentheses(self) -> bool:
        return len(self.data) > 1


    def is_negative(self) -> bool:
        return self.data.is_negative()


    def __len__(self) -> int:
        return len(self.data)


    def valuation(self) -> Fraction:
        """
        Exponent of the first term that may be nonzero. For a zero series this is its precision.
        """
        return Fraction(self.data.valuation(), self.scale)


    def precision(self) -> Fraction:
        """
        Absolute precision; terms at or beyond this exponent are unknown.
        """
        return Fraction(self.data.precision(), self.scale)


    def coefficient(self, exponent: Fraction) -> RingElement:
        """
        Returns the coefficient of `x^exponent`.

        Parameters:
            exponent (Fraction): Rational exponent.

        Returns:
            RingElement: Coefficient.
        """
        e = Fraction(exponent)*self.scale
        if e.denominator != 1:
            return self.ring.ring.zero

        return self.data[e.numerator]


    def base_ring(self) -> Ring:
        return self.ring.ring


    def modulus(self) -> int:
        """
        Modulus of the coefficient ring, for series over a residue ring.
        """
        return self.ring.ring.characteristic()


    def rescale(self) -> 'PuiseuxSeries':
        """
        Divides out the common factor of `scale` and the valuation, precision and stride of `data`,
        modifying `data` in place. Only ever applied to freshly built values.

        Returns:
            PuiseuxSeries: `self`.
        """
        data = self.data
        d    = gcd(self.scale, data.scale, data.valuation(), data.precision())

        if d != 1:
            log.debug(f'Rescaling {self.ring.symbol.repr}-series of scale {self.scale} by {d}')
            data.downscale(d)
            self.scale //= d

        return self


    def is_zero(self) -> bool:
        return self.data.is_zero()


    def is_one(self) -> bool:
        return self.data.is_one()


    def is_gen(self) -> bool:
        return self.valuation() == 1 and len(self.data) == 1 and self.data.coeffs[0].is_one()


    def is_unit(self) -> bool:
        return self.data.is_unit()


    def is_equal_to_precision(self, other: object) -> bool:
        """
        Whether `self` and `other` agree up to the smaller of their precisions.

        Parameters:
            other (object): Other series.

        Returns:
            bool: Arithmetic equality.
        """
        return (self - other).is_zero()


    def __elemeq__(self, other: 'PuiseuxSeries') -> bool:
        return self.scale == other.scale and self.data == other.data


    def _lift(self, other: 'PuiseuxSeries') -> (LaurentSeries, LaurentSeries, int):
        s = gcd(self.scale, other.scale)
        return self.data.inflate(other.scale // s), other.data.inflate(self.scale // s), lcm(self.scale, other.scale)


    def __elemadd__(self, other: 'PuiseuxSeries') -> 'PuiseuxSeries':
        a, b, scale = self._lift(other)
        return PuiseuxSeries(a + b, scale, self.ring).rescale()


    def __elemsub__(self, other: 'PuiseuxSeries') -> 'PuiseuxSeries':
        a, b, scale = self._lift(other)
        return PuiseuxSeries(a - b, scale, self.ring).rescale()


    def __elemmul__(self, other: 'PuiseuxSeries') -> 'PuiseuxSeries':
        a, b, scale = self._lift(other)
        return PuiseuxSeries(a * b, scale, self.ring).rescale()


    def __elemtruediv__(self, other: 'PuiseuxSeries') -> 'PuiseuxSeries':
        a, b, scale = self._lift(other)
        return PuiseuxSeries(a / b, scale, self.ring).rescale()


    def __neg__(self) -> 'PuiseuxSeries':
        return PuiseuxSeries(-self.data, self.scale, self.ring)


    def __invert__(self) -> 'PuiseuxSeries':
        return PuiseuxSeries(~self.data, self.scale, self.ring).rescale()


    def __pow__(self, exponent: object) -> 'PuiseuxSeries':
        if type(exponent) is Fraction:
            if exponent.denominator != 1:
                return self._rational_pow(exponent)

            exponent = exponent.numerator

        elif not isinstance(exponent, int):
            raise TypeError(f'Unsupported exponent type {type(exponent).__name__}')

        data = self.data

        # Any power of a zero series follows the backing zero^0 convention
        if data.is_zero():
            if exponent < 0:
                raise UnsupportedOperationException('Zero raised to a negative power', parameters=(self, exponent))

            return PuiseuxSeries(data**0, self.scale, self.ring).rescale()

        # Exact by convention, whatever the precision of `self`
        elif exponent == 0:
            return self.ring.one.copy()

        # Monomials stay monomials
        elif len(data) == 1:
            return PuiseuxSeries(data**exponent, self.scale, self.ring).rescale()

        elif exponent == 1:
            return self.copy()

        elif exponent == -1:
            return ~self

        base = self
        if exponent < 0:
            base     = ~self
            exponent = -exponent

        return PuiseuxSeries(base.data**exponent, base.scale, self.ring).rescale()


    def _rational_pow(self, exponent: Fraction) -> 'PuiseuxSeries':
        data = self.data

        if len(data) != 1 or not data.coeffs[0].is_one():
            raise UnsupportedOperationException('Rational power not implemented', parameters=(self, exponent))

        return PuiseuxSeries(data**exponent.numerator, self.scale*exponent.denominator, self.ring).rescale()


    def eta_qexp(self) -> 'PuiseuxSeries':
        """
        Returns the q-series of the Dedekind eta function, `x^(1/24) * prod(1 - x^n)`, evaluated at
        `self`, which must be a positive rational power of the generator. The factor `x^(1/24)` is
        applied as an exact shift, so the result keeps the relative precision of `self`.

        Returns:
            PuiseuxSeries: Eta q-expansion.

        Examples:
            >>> from ramify.math.all import ZZ, puiseux_series_ring
            >>> _, x = puiseux_series_ring(ZZ, 10, 'x')
            >>> str(x.eta_qexp())
            'x^(1/24)-x^(25/24)-x^(49/24)+x^(121/24)+x^(169/24)+O(x^(241/24))'

        """
        # x^(1/24) is an exact shift once the lattice is refined 24-fold
        data = self.data.eta_qexp().inflate(24).shift(self.data.valuation())
        return PuiseuxSeries(data, self.scale*24, self.ring).rescale()



class PuiseuxSeriesRing(Ring):
    """
    Ring of truncated Puiseux series over a ring, backed by a `LaurentSeriesRing`.

    Examples:
        >>> from fractions import Fraction
        >>> from ramify.math.all import ZZ, PuiseuxSeriesRing
        >>> P = PuiseuxSeriesRing(ZZ, 10, 'x')
        >>> x = P.gen()
        >>> str(x**Fraction(1, 2) + x**Fraction(1, 3))
        'x^(1/3)+x^(1/2)+O(x^(11/3))'

    """

    def __init__(self, ring: Ring, prec: int=20, symbol: object='x'):
        """
        Parameters:
            ring      (Ring): Coefficient ring or `LaurentSeriesRing` to wrap.
            prec       (int): Maximum relative precision. Ignored if `ring` is a `LaurentSeriesRing`.
            symbol  (object): Generator label as a `str` or `Symbol`. Ignored if `ring` is a `LaurentSeriesRing`.
        """
        if isinstance(ring, LaurentSeriesRing):
            laurent_ring = ring
        else:
            laurent_ring = LaurentSeriesRing(ring, prec, str(symbol))

        self.laurent_ring = laurent_ring
        self.ring         = laurent_ring.ring
        self.prec         = laurent_ring.prec
        self.symbol       = symbol if isinstance(symbol, Symbol) and symbol.repr == laurent_ring.symbol.repr else Symbol(laurent_ring.symbol.repr)

        self.zero = PuiseuxSeries(laurent_ring.zero.copy(), 1, self).rescale()
        self.one  = PuiseuxSeries(laurent_ring.one.copy(), 1, self).rescale()
        self.symbol.build(self)


    def __reprdir__(self):
        return ['ring', 'prec', 'symbol']


    def shorthand(self) -> str:
        kind = 'field' if self.is_field() else 'ring'
        return f'Puiseux series {kind} in {self.symbol.repr} over {self.ring.shorthand()}'


    def characteristic(self) -> int:
        return self.ring.characteristic()


    def base_ring(self) -> Ring:
        return self.ring


    def max_precision(self) -> int:
        return self.prec


    def gen(self) -> PuiseuxSeries:
        """
        Returns `x + O(x^(prec+1))`.
        """
        return PuiseuxSeries(self.laurent_ring.gen(), 1, self).rescale()


    def big_oh(self, q: Fraction) -> PuiseuxSeries:
        """
        Returns `0 + O(x^q)`.

        Parameters:
            q (Fraction): Rational precision.

        Returns:
            PuiseuxSeries: Zero series of precision `q`.
        """
        q = Fraction(q)
        return PuiseuxSeries(self.laurent_ring.big_oh(q.numerator), q.denominator, self).rescale()


    def __eq__(self, other: 'PuiseuxSeriesRing') -> bool:
        return type(self) == type(other) and self.laurent_ring == other.laurent_ring


    def __hash__(self) -> int:
        return hash((self.laurent_ring, self.__class__))


    def is_superstructure_of(self, R: Ring) -> bool:
        return R == self or self.ring.is_superstructure_of(R)


    def coerce(self, other: object=None, scale: int=None) -> PuiseuxSeries:
        """
        Attempts to coerce other into an element of the algebra.

        Parameters:
            other (object): Object to coerce. None gives zero.
            scale    (int): Exponent denominator to apply to a `LaurentSeries`.

        Returns:
            PuiseuxSeries: Coerced element.
        """
        if other is None:
            return self.zero.copy()

        if scale is not None:
            if type(other) is not LaurentSeries or other.ring != self.laurent_ring:
                raise CoercionException(f'Expected a series of {self.laurent_ring}, got {other!r}', (self, other))

            if scale < 1:
                raise DomainException(f'Scale must be positive, got {scale}', parameters=scale)

            return PuiseuxSeries(other.copy(), scale, self).rescale()


        if type(other) is PuiseuxSeries:
            if other.ring == self:
                return other

            raise CoercionException('Unable to coerce Puiseux series', (self, other))

        elif type(other) is Symbol and other.ring == self:
            return other.var

        elif type(other) is LaurentSeries:
            if other.ring == self.laurent_ring:
                return PuiseuxSeries(other.copy(), 1, self).rescale()

            raise CoercionException(f'Unable to coerce {other!r} into {self}', (self, other))

        return PuiseuxSeries(self.laurent_ring(other), 1, self).rescale()



class PuiseuxSeriesField(PuiseuxSeriesRing, Field):
    """
    Field of truncated Puiseux series over a field.
    """
    pass



def puiseux_series_ring(ring: Ring, prec: int=20, symbol: object='x', cached: bool=True) -> (PuiseuxSeriesRing, PuiseuxSeries):
    """
    Builds a Puiseux series ring (a `PuiseuxSeriesField` if the coefficient ring is a field) and its generator.
    `prec` is the maximum relative precision of the underlying Laurent series.

    Parameters:
        ring     (Ring): Coefficient ring or `LaurentSeriesRing` to wrap.
        prec      (int): Maximum relative precision.
        symbol (object): Generator label as a `str` or `Symbol`.
        cached   (bool): Whether to reuse a previously built ring of the same configuration.

    Returns:
        (PuiseuxSeriesRing, PuiseuxSeries): The ring and its generator.

    Examples:
        >>> from fractions import Fraction
        >>> from ramify.math.all import QQ, puiseux_series_ring
        >>> P, x = puiseux_series_ring(QQ, 10, 'x')
        >>> P
        <PuiseuxSeriesField: ring=QQ, prec=10, symbol=x>
        >>> str(x**Fraction(1, 2) / 2)
        '1/2*x^(1/2)+O(x^(11/2))'

    """
    if isinstance(ring, LaurentSeriesRing):
        laurent_ring = ring
    else:
        laurent_ring, _ = laurent_series_ring(ring, prec, str(symbol), cached=cached)

    cls = PuiseuxSeriesField if laurent_ring.is_field() else PuiseuxSeriesRing

    if cached and RUNTIME.enable_parent_cache:
        key = (cls, laurent_ring)

        if key in _PARENT_CACHE:
            log.debug(f'Puiseux series ring cache hit for {laurent_ring}')
            P = _PARENT_CACHE[key]
        else:
            log.debug(f'Puiseux series ring cache miss for {laurent_ring}')
            P = cls(laurent_ring)
            _PARENT_CACHE[key] = P
    else:
        P = cls(laurent_ring)

    if isinstance(symbol, Symbol):
        symbol.build(P)

    return P, P.gen()
