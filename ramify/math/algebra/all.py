from .rings.ring import Ring, RingElement
from .rings.integer_ring import ZZ, IntegerRing, IntegerElement
from .rings.quotient_ring import QuotientRing, QuotientElement
from .rings.laurent_series_ring import LaurentSeriesRing, LaurentSeries, laurent_series_ring
from .rings.puiseux_series_ring import PuiseuxSeriesRing, PuiseuxSeriesField, PuiseuxSeries, puiseux_series_ring
from .fields.field import Field, FieldElement
from .fields.rational_field import QQ, RationalField, RationalElement
