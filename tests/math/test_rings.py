from ramify.math.all import ZZ, QQ, Symbol
from ramify.utilities.exceptions import CoercionException, DomainException, IncompatibleParentException, NoCommonTypeException, NotInvertibleException
from fractions import Fraction
import unittest


class IntegerRingTestCase(unittest.TestCase):
    def test_arithmetic(self):
        self.assertEqual(ZZ(4) + ZZ(-4), ZZ.zero)
        self.assertEqual(repr(ZZ(4) + ZZ(-4)), '<IntegerElement: 0, ring=ZZ>')
        self.assertEqual(ZZ(3) + 2, 5)
        self.assertEqual(2 - ZZ(3), -1)
        self.assertEqual(ZZ(3) * ZZ(-2), -6)
        self.assertEqual(ZZ(3)**4, 81)
        self.assertTrue(ZZ(2) < 3)
        self.assertTrue(ZZ(4) > ZZ(3))
        self.assertFalse(ZZ(-1) > 0)
        self.assertFalse(ZZ(0))


    def test_exact_division(self):
        self.assertEqual(ZZ(6) / ZZ(3), 2)
        self.assertEqual(ZZ(6).divexact(-2), -3)
        self.assertRaises(NotInvertibleException, lambda: ZZ(5) / ZZ(3))
        self.assertRaises(NotInvertibleException, lambda: ZZ(5) / 0)


    def test_units(self):
        self.assertEqual(~ZZ(-1), -1)
        self.assertEqual(ZZ(-1)**-3, -1)
        self.assertTrue(ZZ(-1).is_unit())
        self.assertFalse(ZZ(2).is_unit())
        self.assertRaises(NotInvertibleException, lambda: ~ZZ(2))
        self.assertRaises(NotInvertibleException, lambda: ZZ(2)**-1)


    def test_coercion(self):
        self.assertEqual(ZZ(Fraction(4, 1)), 4)
        self.assertIn(3, ZZ)
        self.assertNotIn(Fraction(1, 2), ZZ)
        self.assertRaises(CoercionException, lambda: ZZ(Fraction(1, 2)))
        self.assertRaises(CoercionException, lambda: ZZ('a'))
        self.assertRaises(CoercionException, lambda: ZZ(QQ(1)))


    def test_properties(self):
        self.assertFalse(ZZ.is_field())
        self.assertEqual(ZZ.characteristic(), 0)
        self.assertEqual(str(ZZ), 'ZZ')



class RationalFieldTestCase(unittest.TestCase):
    def test_arithmetic(self):
        third = QQ(1) / QQ(3)

        self.assertEqual(repr(third), '<RationalElement: 1/3, ring=QQ>')
        self.assertEqual(third * 3, 1)
        self.assertEqual(third.numerator, 1)
        self.assertEqual(third.denominator, 3)
        self.assertEqual(~third, 3)
        self.assertEqual(third**-2, 9)
        self.assertRaises(NotInvertibleException, lambda: QQ(1) / 0)
        self.assertRaises(NotInvertibleException, lambda: ~QQ.zero)


    def test_promotion(self):
        self.assertEqual(QQ(Fraction(1, 2)) + ZZ(1), Fraction(3, 2))
        self.assertEqual(ZZ(1) + QQ(Fraction(1, 2)), Fraction(3, 2))
        self.assertEqual(ZZ(3) + Fraction(1, 2), QQ(Fraction(7, 2)))
        self.assertEqual(QQ(ZZ(2)), 2)
        self.assertEqual(ZZ(1), QQ(1))
        self.assertRaises(NoCommonTypeException, lambda: QQ(1) + 'a')


    def test_properties(self):
        self.assertTrue(QQ.is_field())
        self.assertTrue(QQ.is_superstructure_of(ZZ))
        self.assertFalse(ZZ.is_superstructure_of(QQ))
        self.assertTrue(QQ(2).is_unit())
        self.assertFalse(QQ.zero.is_unit())



class QuotientRingTestCase(unittest.TestCase):
    def test_arithmetic(self):
        R = ZZ/ZZ(5)

        self.assertEqual(R(7), 2)
        self.assertEqual(~R(2), 3)
        self.assertEqual(R(2)**-1, 3)
        self.assertEqual(R(2)**4, 1)
        self.assertEqual(R(3) / R(2), 4)
        self.assertEqual(-R(1), 4)
        self.assertEqual(R(3) + ZZ(4), 2)
        self.assertEqual(ZZ(4) + R(3), 2)


    def test_coercion(self):
        R = ZZ/ZZ(5)

        self.assertEqual(R(Fraction(1, 2)), 3)
        self.assertEqual(R(ZZ(8)), 3)
        self.assertRaises(CoercionException, lambda: R(Fraction(1, 5)))
        self.assertRaises(CoercionException, lambda: R(QQ(1)))


    def test_properties(self):
        R = ZZ/ZZ(5)

        self.assertEqual(str(R), 'ZZ/(ZZ(5))')
        self.assertEqual(repr(R), '<QuotientRing: ring=ZZ, quotient=5>')
        self.assertEqual(R.characteristic(), 5)
        self.assertTrue(R.is_field())
        self.assertFalse((ZZ/ZZ(6)).is_field())
        self.assertEqual(ZZ/ZZ(5), R)


    def test_non_units(self):
        R6 = ZZ/ZZ(6)
        self.assertFalse(R6(2).is_unit())
        self.assertRaises(NotInvertibleException, lambda: ~R6(2))
        self.assertRaises(NotInvertibleException, lambda: R6(1) / R6(3))


    def test_bad_modulus(self):
        self.assertRaises(DomainException, lambda: ZZ/ZZ(1))
        self.assertRaises(DomainException, lambda: ZZ/ZZ(0))


    def test_incompatible_moduli(self):
        self.assertRaises(IncompatibleParentException, lambda: (ZZ/ZZ(5))(1) + (ZZ/ZZ(7))(1))
        self.assertFalse((ZZ/ZZ(5))(1) == (ZZ/ZZ(7))(1))



class SymbolTestCase(unittest.TestCase):
    def test_unbound(self):
        s = Symbol('s')
        self.assertIsNone(s.var)
        self.assertEqual(str(s), 's')
        self.assertRaises(NoCommonTypeException, lambda: ZZ(1) + s)
