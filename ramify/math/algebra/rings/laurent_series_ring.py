from ramify.math.algebra.rings.ring import Ring, RingElement
from ramify.math.general import gcd
from ramify.math.symbols import Symbol
from ramify.utilities.exceptions import CoercionException, NotInvertibleException, UnsupportedOperationException
from ramify.utilities.runtime import RUNTIME
from fractions import Fraction
from itertools import count
import logging

log = logging.getLogger(__name__)

_PARENT_CACHE = {}


def _format_exponent(q: Fraction) -> str:
    return str(q.numerator) if q.denominator == 1 else f'({q})'


def series_shorthand(data: 'LaurentSeries', den: int, var: str) -> str:
    """
    Renders `data(var^(1/den))` term by term in increasing exponent order, followed by its truncation marker.

    Parameters:
        data (LaurentSeries): Series to print.
        den            (int): Exponent denominator.
        var            (str): Variable name.

    Returns:
        str: Printed series.
    """
    R         = data.ring.ring
    sep       = RUNTIME.poly_exp_separator
    minus_one = R(-1)
    out       = ''

    if not data.coeffs:
        out += R.zero.shorthand()
    else:
        coeff_printed = False

        for i, c in enumerate(data.coeffs):
            if c.is_zero():
                continue

            if coeff_printed and not c.is_negative():
                out += '+'

            exp = data.val + i*data.scale

            if exp:
                if not c.is_one() and (c != minus_one or R.show_minus_one):
                    c_str = c.shorthand()
                    if c.needs_parentheses():
                        c_str = f'({c_str})'

                    out += c_str + '*'

                if c == minus_one and not R.show_minus_one:
                    out += '-'

                out += var

                q = Fraction(exp, den)
                if q != 1:
                    out += sep + _format_exponent(q)
            else:
                out += c.shorthand()

            coeff_printed = True

    return out + f'+O({var}{sep}{_format_exponent(Fraction(data.prec, den))})'



class LaurentSeries(RingElement):
    """
    Truncated Laurent series `sum(coeffs[i]*t^(val + i*scale)) + O(t^prec)`.

    The representation is normalized on construction: terms at or beyond `prec` are dropped, leading
    and trailing zeros are stripped, a zero series has `val == prec`, and `scale` is the gcd of the
    exponent differences of the stored terms. A series with at most one term fits any stride; it
    gets `scale == gcd(val, prec)` (or 1).
    """

    def __init__(self, coeffs: list, val: int, prec: int, scale: int, ring: Ring):
        """
        Parameters:
            coeffs         (list): Coefficients spaced `scale` apart, starting at `t^val`.
            val             (int): Exponent of the first coefficient.
            prec            (int): Absolute precision.
            scale           (int): Stride between stored coefficients.
            ring (LaurentSeriesRing): Parent ring.
        """
        super().__init__(ring)
        self.coeffs = [ring.ring(c) for c in coeffs]
        self.val    = val
        self.prec   = prec
        self.scale  = scale
        self._normalize()


    def _normalize(self):
        coeffs = self.coeffs

        while coeffs and (self.val + (len(coeffs)-1)*self.scale >= self.prec or coeffs[-1].is_zero()):
            coeffs.pop()

        lead = 0
        while lead < len(coeffs) and coeffs[lead].is_zero():
            lead += 1

        if lead:
            coeffs    = coeffs[lead:]
            self.val += lead*self.scale

        if not coeffs:
            self.val = self.prec

        if len(coeffs) > 1:
            g = gcd(*[i for i, c in enumerate(coeffs) if not c.is_zero()])
            if g > 1:
                coeffs      = coeffs[::g]
                self.scale *= g
        else:
            self.scale = gcd(self.val, self.prec) or 1

        self.coeffs = coeffs


    def shorthand(self) -> str:
        return series_shorthand(self, 1, self.ring.symbol.repr)


    def __hash__(self) -> int:
        return hash((tuple(self.coeffs), self.val, self.prec, self.scale))


    def __deepcopy__(self, memo: dict) -> 'LaurentSeries':
        return LaurentSeries(list(self.coeffs), self.val, self.prec, self.scale, self.ring)


    def needs_parentheses(self) -> bool:
        return len(self.coeffs) > 1


    def is_negative(self) -> bool:
        return len(self.coeffs) == 1 and self.coeffs[0].is_negative()


    def __len__(self) -> int:
        return len(self.coeffs)


    def __iter__(self):
        return iter(self.coeffs)


    def __getitem__(self, exponent: int) -> RingElement:
        """
        Returns the coefficient of `t^exponent`.
        """
        idx, off = divmod(exponent - self.val, self.scale)
        if off or not 0 <= idx < len(self.coeffs):
            return self.ring.ring.zero

        return self.coeffs[idx]


    def valuation(self) -> int:
        return self.val


    def precision(self) -> int:
        return self.prec


    def relative_precision(self) -> int:
        return self.prec - self.val


    def terms(self) -> dict:
        """
        Returns the nonzero terms as a dictionary of exponent to coefficient.
        """
        return {self.val + i*self.scale: c for i, c in enumerate(self.coeffs) if not c.is_zero()}


    def is_zero(self) -> bool:
        return not self.coeffs


    def is_one(self) -> bool:
        return len(self.coeffs) == 1 and not self.val and self.coeffs[0].is_one()


    def is_gen(self) -> bool:
        return len(self.coeffs) == 1 and self.val == 1 and self.coeffs[0].is_one()


    def is_unit(self) -> bool:
        return bool(self.coeffs) and not self.val and self.coeffs[0].is_unit()


    def inflate(self, k: int) -> 'LaurentSeries':
        """
        Substitutes `t -> t^k`.

        Parameters:
            k (int): Inflation factor.

        Returns:
            LaurentSeries: Inflated series.
        """
        return LaurentSeries(list(self.coeffs), self.val*k, self.prec*k, self.scale*k, self.ring)


    def shift(self, n: int) -> 'LaurentSeries':
        """
        Multiplies by the exact monomial `t^n`.

        Parameters:
            n (int): Exponent shift.

        Returns:
            LaurentSeries: Shifted series.
        """
        return LaurentSeries(list(self.coeffs), self.val + n, self.prec + n, self.scale, self.ring)


    def downscale(self, d: int) -> 'LaurentSeries':
        """
        Substitutes `t -> t^(1/d)` in place. `d` must divide the valuation, precision and stride.

        Parameters:
            d (int): Common divisor.

        Returns:
            LaurentSeries: `self`.
        """
        assert not (self.val % d or self.prec % d or self.scale % d)

        self.val   //= d
        self.prec  //= d
        self.scale //= d
        return self


    def __elemeq__(self, other: 'LaurentSeries') -> bool:
        return self.val == other.val and self.prec == other.prec and self.scale == other.scale and self.coeffs == other.coeffs


    def __elemadd__(self, other: 'LaurentSeries') -> 'LaurentSeries':
        terms = self.terms()

        for e, c in other.terms().items():
            terms[e] = terms[e] + c if e in terms else c

        return self.ring._from_terms(terms, min(self.prec, other.prec))


    def __neg__(self) -> 'LaurentSeries':
        return LaurentSeries([-c for c in self.coeffs], self.val, self.prec, self.scale, self.ring)


    def __elemmul__(self, other: 'LaurentSeries') -> 'LaurentSeries':
        val   = self.val + other.val
        prec  = val + min(self.relative_precision(), other.relative_precision())
        terms = {}

        b_terms = other.terms()
        for ea, ca in self.terms().items():
            for eb, cb in b_terms.items():
                e = ea + eb
                if e < prec:
                    terms[e] = terms[e] + ca*cb if e in terms else ca*cb

        return self.ring._from_terms(terms, prec)


    def __invert__(self) -> 'LaurentSeries':
        if not self.coeffs:
            raise NotInvertibleException('Series is zero to its current precision', parameters=self)

        lead = self.coeffs[0]
        if not lead.is_unit():
            raise NotInvertibleException(f'Leading coefficient {lead} is not a unit', parameters=self)

        R    = self.ring.ring
        rel  = self.relative_precision()
        n    = -(-rel // self.scale)
        c    = self.coeffs[:n] + [R.zero]*(n - len(self.coeffs))
        linv = ~lead
        w    = [linv]

        for k in range(1, n):
            acc = R.zero
            for j in range(1, k+1):
                acc += c[j]*w[k-j]

            w.append(-linv*acc)

        return LaurentSeries(w, -self.val, rel - self.val, self.scale, self.ring)


    def __pow__(self, exponent: int) -> 'LaurentSeries':
        if not self.coeffs:
            if exponent < 0:
                raise NotInvertibleException('Series is zero to its current precision', parameters=self)

            # (0 + O(t^p))^n == 0 + O(t^(n*p))
            return LaurentSeries([], exponent*self.prec, exponent*self.prec, 1, self.ring)

        elif exponent == 0:
            return self.ring.one.copy()

        elif len(self.coeffs) == 1:
            val = exponent*self.val
            return LaurentSeries([self.coeffs[0]**exponent], val, val + self.relative_precision(), self.scale, self.ring)

        return super().__pow__(exponent)


    def eta_qexp(self) -> 'LaurentSeries':
        """
        Evaluates the q-series `prod(1 - q^n)` of the Dedekind eta function at `self`, which must be
        a positive power `t^v` of the generator. Truncated at the relative precision of `self`.

        Returns:
            LaurentSeries: `sum((-1)^k * t^(v*k*(3k-1)/2))`.

        References:
            https://en.wikipedia.org/wiki/Pentagonal_number_theorem
        """
        if not (len(self.coeffs) == 1 and self.coeffs[0].is_one() and self.val > 0):
            raise UnsupportedOperationException('Eta q-expansion requires a positive power of the generator', parameters=self)

        R     = self.ring.ring
        v     = self.val
        limit = self.relative_precision()
        terms = {}

        for k in count():
            lower = k*(3*k - 1) // 2
            if lower >= limit:
                break

            sign = R.one if k % 2 == 0 else -R.one
            terms[v*lower] = sign

            upper = k*(3*k + 1) // 2
            if k and upper < limit:
                terms[v*upper] = sign

        return self.ring._from_terms(terms, v*limit)



class LaurentSeriesRing(Ring):
    """
    Ring of truncated Laurent series over a ring. `prec` is the relative precision given to
    constants and to the generator.

    Examples:
        >>> from ramify.math.all import ZZ, LaurentSeriesRing
        >>> L = LaurentSeriesRing(ZZ, 10, 't')
        >>> t = L.gen()
        >>> str(~(1 - t))
        '1+t+t^2+t^3+t^4+t^5+t^6+t^7+t^8+t^9+O(t^10)'

    """

    def __init__(self, ring: Ring, prec: int=20, symbol: object='x'):
        """
        Parameters:
            ring      (Ring): Coefficient ring.
            prec       (int): Maximum relative precision.
            symbol  (object): Generator label as a `str` or `Symbol`.
        """
        self.ring   = ring
        self.prec   = prec
        self.symbol = symbol if isinstance(symbol, Symbol) else Symbol(symbol)

        self.zero = LaurentSeries([], prec, prec, 1, self)
        self.one  = LaurentSeries([ring.one], 0, prec, 1, self)
        self.symbol.build(self)


    def __reprdir__(self):
        return ['ring', 'prec', 'symbol']


    def shorthand(self) -> str:
        return f'{self.ring.shorthand()}(({self.symbol.repr}))'


    def characteristic(self) -> int:
        return self.ring.characteristic()


    def is_field(self) -> bool:
        return self.ring.is_field()


    def base_ring(self) -> Ring:
        return self.ring


    def max_precision(self) -> int:
        return self.prec


    def gen(self) -> LaurentSeries:
        """
        Returns `t + O(t^(prec+1))`.
        """
        return LaurentSeries([self.ring.one], 1, self.prec + 1, 1, self)


    def big_oh(self, n: int) -> LaurentSeries:
        """
        Returns `0 + O(t^n)`.
        """
        return LaurentSeries([], n, n, 1, self)


    def series(self, coeffs: list, val: int=0, prec: int=None, scale: int=1) -> LaurentSeries:
        """
        Builds a series from its coefficients.

        Parameters:
            coeffs (list): Coefficients spaced `scale` apart, starting at `t^val`.
            val     (int): Exponent of the first coefficient.
            prec    (int): Absolute precision. Defaults to `val` plus the ring's precision.
            scale   (int): Stride between coefficients.

        Returns:
            LaurentSeries: Series.
        """
        if prec is None:
            prec = val + self.prec

        return LaurentSeries(coeffs, val, prec, scale, self)


    def _from_terms(self, terms: dict, prec: int) -> LaurentSeries:
        exps = sorted(e for e, c in terms.items() if e < prec and not c.is_zero())

        if not exps:
            return self.big_oh(prec)

        val    = exps[0]
        scale  = gcd(*[e - val for e in exps]) or 1
        coeffs = [self.ring.zero]*((exps[-1] - val) // scale + 1)

        for e in exps:
            coeffs[(e - val) // scale] = terms[e]

        return LaurentSeries(coeffs, val, prec, scale, self)


    def __eq__(self, other: 'LaurentSeriesRing') -> bool:
        return type(self) == type(other) and self.ring == other.ring and self.prec == other.prec and self.symbol.repr == other.symbol.repr


    def __hash__(self) -> int:
        return hash((self.ring, self.prec, self.symbol.repr, self.__class__))


    def is_superstructure_of(self, R: Ring) -> bool:
        return R == self or self.ring.is_superstructure_of(R)


    def coerce(self, other: object) -> LaurentSeries:
        """
        Attempts to coerce other into an element of the algebra.

        Parameters:
            other (object): Object to coerce.

        Returns:
            LaurentSeries: Coerced element.
        """
        if type(other) is LaurentSeries:
            if other.ring == self:
                return other

            raise CoercionException(f'Unable to coerce {other!r} into {self}', (self, other))

        elif type(other) is Symbol and other.ring == self:
            return other.var

        return LaurentSeries([self.ring(other)], 0, self.prec, 1, self)



def laurent_series_ring(ring: Ring, prec: int=20, symbol: object='x', cached: bool=True) -> (LaurentSeriesRing, LaurentSeries):
    """
    Builds a `LaurentSeriesRing` and its generator.

    Parameters:
        ring     (Ring): Coefficient ring.
        prec      (int): Maximum relative precision.
        symbol (object): Generator label as a `str` or `Symbol`.
        cached   (bool): Whether to reuse a previously built ring of the same configuration.

    Returns:
        (LaurentSeriesRing, LaurentSeries): The ring and its generator.
    """
    label = str(symbol)

    if cached and RUNTIME.enable_parent_cache:
        key = (ring, prec, label)

        if key in _PARENT_CACHE:
            log.debug(f'Laurent series ring cache hit for {key}')
            L = _PARENT_CACHE[key]
        else:
            log.debug(f'Laurent series ring cache miss for {key}')
            L = LaurentSeriesRing(ring, prec, label)
            _PARENT_CACHE[key] = L
    else:
        L = LaurentSeriesRing(ring, prec, label)

    if isinstance(symbol, Symbol):
        symbol.build(L)

    return L, L.gen()
