from ramify.math.all import ZZ, QQ, laurent_series_ring, LaurentSeriesRing
from ramify.utilities.exceptions import CoercionException, IncompatibleParentException, NotInvertibleException, UnsupportedOperationException
from fractions import Fraction
import unittest

L, t = laurent_series_ring(ZZ, 10, 't')


class LaurentSeriesTestCase(unittest.TestCase):
    def test_normal_form(self):
        s = L.series([0, 1, 0, 2], val=-1, prec=10)

        self.assertEqual(s.valuation(), 0)
        self.assertEqual(s.scale, 2)
        self.assertEqual(len(s), 2)
        self.assertEqual(s.terms(), {0: ZZ(1), 2: ZZ(2)})


    def test_truncation(self):
        s = L.series([1, 1, 1], val=8, prec=10)
        self.assertEqual(len(s), 2)
        self.assertEqual(s.precision(), 10)


    def test_zero_normal_form(self):
        z = L.series([0, 0], val=3, prec=7)

        self.assertTrue(z.is_zero())
        self.assertEqual(z.valuation(), 7)
        self.assertEqual(z, L.big_oh(7))


    def test_getitem(self):
        s = L.series([1, 2, 3])

        self.assertEqual(s[1], 2)
        self.assertEqual(s[5], 0)
        self.assertEqual(s[-1], 0)
        self.assertEqual(list(s), [ZZ(1), ZZ(2), ZZ(3)])


    def test_display(self):
        self.assertEqual(str(L), 'ZZ((t))')
        self.assertEqual(repr(L), '<LaurentSeriesRing: ring=ZZ, prec=10, symbol=t>')
        self.assertEqual(str(t), 't+O(t^11)')
        self.assertEqual(str(t**3), 't^3+O(t^13)')
        self.assertEqual(str(~t), 't^-1+O(t^9)')
        self.assertEqual(str(L(3)), '3+O(t^10)')
        self.assertEqual(str(L.zero), '0+O(t^10)')


    def test_inflate_shift_downscale(self):
        u = (1 + t).inflate(3)
        self.assertEqual(u.terms(), {0: ZZ(1), 3: ZZ(1)})
        self.assertEqual(u.precision(), 30)

        v = t.shift(2)
        self.assertEqual(v.valuation(), 3)
        self.assertEqual(v.precision(), 13)

        w = L.series([1], 2, 12)
        self.assertIs(w.downscale(2), w)
        self.assertEqual(w.valuation(), 1)
        self.assertEqual(w.precision(), 6)


    def test_precision(self):
        self.assertEqual(t.relative_precision(), 10)
        self.assertEqual((t + L.big_oh(5)).precision(), 5)
        self.assertEqual((t * (1 + t)).precision(), 11)
        self.assertEqual((L.zero**2).precision(), 20)
        self.assertNotEqual(t, t + L.big_oh(5))


    def test_geometric_inverse(self):
        self.assertEqual(str(~(1 - t)), '1+t+t^2+t^3+t^4+t^5+t^6+t^7+t^8+t^9+O(t^10)')
        self.assertEqual((1 - t) * ~(1 - t), L.one)


    def test_inverse_over_field(self):
        LQ, u = laurent_series_ring(QQ, 5, 'u')
        v = 2 + u

        self.assertEqual(str(~v), '1/2-1/4*u+1/8*u^2-1/16*u^3+1/32*u^4+O(u^5)')
        self.assertEqual(v * ~v, LQ.one)
        self.assertEqual(v / v, LQ.one)


    def test_not_invertible(self):
        self.assertRaises(NotInvertibleException, lambda: ~(2 + t))
        self.assertRaises(NotInvertibleException, lambda: ~L.zero)
        self.assertRaises(NotInvertibleException, lambda: L.zero**-1)
        self.assertRaises(NotInvertibleException, lambda: t / (2 + t))


    def test_power(self):
        s = 1 + t
        self.assertEqual(s**2, s*s)
        self.assertEqual(s**3, s*s*s)
        self.assertEqual(s**0, L.one)
        self.assertEqual(s**-2, ~s * ~s)
        self.assertEqual(t**-2, ~(t*t))


    def test_eta_qexp(self):
        eta = t.eta_qexp()
        self.assertEqual(str(eta), '1-t-t^2+t^5+t^7+O(t^10)')

        product = L.one
        for n in range(1, 10):
            product *= 1 - t**n

        self.assertEqual(eta, product)

        self.assertEqual(str((t**2).eta_qexp()), '1-t^2-t^4+t^10+t^14+O(t^20)')
        self.assertRaises(UnsupportedOperationException, lambda: (1 + t).eta_qexp())
        self.assertRaises(UnsupportedOperationException, lambda: L.one.eta_qexp())


    def test_queries(self):
        self.assertTrue(t.is_gen())
        self.assertTrue(L.one.is_one())
        self.assertTrue((1 + t).is_unit())
        self.assertFalse(t.is_unit())
        self.assertFalse((2 + t).is_unit())
        self.assertFalse(L.zero)
        self.assertTrue(t)


    def test_coercion(self):
        LQ, u = laurent_series_ring(QQ, 5, 'u')

        self.assertIs(L(t), t)
        self.assertEqual(L(ZZ(3)), L(3))
        self.assertRaises(CoercionException, lambda: L(Fraction(1, 2)))
        self.assertRaises(CoercionException, lambda: L(u))
        self.assertEqual(str(u + Fraction(1, 3)), '1/3+u+O(u^5)')


    def test_incompatible_parents(self):
        _, t20 = laurent_series_ring(ZZ, 20, 't')
        self.assertRaises(IncompatibleParentException, lambda: t + t20)


    def test_parent_cache(self):
        self.assertIs(laurent_series_ring(ZZ, 10, 't')[0], L)
        self.assertIsNot(laurent_series_ring(ZZ, 10, 't', cached=False)[0], L)
        self.assertEqual(LaurentSeriesRing(ZZ, 10, 't'), L)
        self.assertEqual(hash(LaurentSeriesRing(ZZ, 10, 't')), hash(L))


    def test_copy(self):
        s = L.series([1], 2, 12)
        c = s.copy()
        s.downscale(2)

        self.assertEqual(c.valuation(), 2)
        self.assertEqual(c.precision(), 12)
        self.assertIs(c.ring, L)
