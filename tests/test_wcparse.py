# -*- coding: utf-8 -*-
"""Tests for `wcparse`."""
import unittest
import copy
import wildglob._wcparse as _wcparse
import wildglob._wcmatch as _wcmatch
from wildglob import util


class TestWcparse(unittest.TestCase):
    """Test `wcparse`."""

    def test_hash(self):
        """Test hashing of matchers."""

        p1 = _wcparse.FixedPattern('test')
        p2 = _wcparse.FixedPattern('test')
        p3 = _wcparse.FixedPattern(b'test')

        w1 = _wcparse.WcGlob(p1)
        w2 = _wcparse.WcGlob(p2)
        w3 = _wcparse.WcGlob(p1, False)
        w4 = _wcparse.WcGlob(p3)

        self.assertTrue(w1 == w2)
        self.assertTrue(w1 != w3)
        self.assertTrue(w1 != w4)

        w5 = copy.copy(w1)
        self.assertTrue(w1 == w5)
        self.assertTrue(w5 in {w1})

    def test_length(self):
        """Test matcher length is the logical pattern length."""

        self.assertEqual(len(_wcparse.compile('a*c', 0)), 3)
        self.assertEqual(len(_wcparse.compile(_wcparse.FixedPattern('a*c\0', True), 0)), 3)

    def test_compile_cache(self):
        """Test that equal patterns share a compiled matcher."""

        self.assertIs(_wcparse.compile('cache*', 0), _wcparse.compile('cache*', 0))
        self.assertIsNot(_wcparse.compile('cache*', 0), _wcparse.compile('cache*', _wcparse.IGNORECASE))

    def test_get_case(self):
        """Test case flag resolution."""

        self.assertTrue(_wcparse.get_case(0))
        self.assertTrue(_wcparse.get_case(_wcparse.CASE))
        self.assertFalse(_wcparse.get_case(_wcparse.IGNORECASE))
        self.assertTrue(_wcparse.get_case(_wcparse.CASE | _wcparse.IGNORECASE))

    def test_count_stars(self):
        """Test counting of star runs."""

        self.assertEqual(_wcparse.count_stars(_wcparse.FixedPattern('abc')), 0)
        self.assertEqual(_wcparse.count_stars(_wcparse.FixedPattern('***abc***')), 2)
        self.assertEqual(_wcparse.count_stars(_wcparse.FixedPattern(b'*a*b*')), 3)
        self.assertEqual(_wcparse.count_stars(_wcparse.FixedPattern([])), 0)


class TestCompare(unittest.TestCase):
    """Test unit comparison."""

    def test_question_mark(self):
        """Test that `?` matches anything but `.`."""

        for case_sensitive in (True, False):
            compare = _wcmatch.WcCompare(case_sensitive, util.UNICODE)
            self.assertTrue(compare('?', 'x'))
            self.assertTrue(compare('?', '?'))
            self.assertFalse(compare('?', '.'))

        compare = _wcmatch.WcCompare(True, util.BYTES)
        self.assertTrue(compare(ord('?'), ord('x')))
        self.assertFalse(compare(ord('?'), ord('.')))

    def test_case_sensitive(self):
        """Test case sensitive comparison."""

        compare = _wcmatch.WcCompare(True, util.UNICODE)
        self.assertTrue(compare('a', 'a'))
        self.assertFalse(compare('a', 'A'))
        self.assertFalse(compare('.', '?'))

    def test_case_insensitive(self):
        """Test case insensitive comparison."""

        compare = _wcmatch.WcCompare(False, util.UNICODE)
        self.assertTrue(compare('a', 'A'))
        self.assertTrue(compare('Z', 'z'))
        self.assertTrue(compare('1', '1'))
        self.assertFalse(compare('1', '2'))
        self.assertFalse(compare('[', '{'))
        self.assertFalse(compare('@', '`'))
        self.assertFalse(compare('ä', 'Ä'))

        compare = _wcmatch.WcCompare(False, util.BYTES)
        self.assertTrue(compare(ord('A'), ord('a')))
        self.assertFalse(compare(0xc9, 0xe9))


class TestGlob(unittest.TestCase):
    """Test the matching core on positions."""

    def glob(self, pattern, pit, pend, subject, sit, send, case_sensitive=True):
        """Run the matcher over `str` positions."""

        compare = _wcmatch.WcCompare(case_sensitive, util.UNICODE)
        return _wcmatch.glob(pattern, pit, pend, subject, sit, send, compare, '*')

    def test_positions(self):
        """Test matching on positions within larger sequences."""

        self.assertTrue(self.glob('a*c', 0, 3, 'xxabcx', 2, 5))
        self.assertFalse(self.glob('a*c', 0, 3, 'xxabcx', 2, 6))
        self.assertTrue(self.glob('--a?c', 2, 5, 'ABC', 0, 3, False))

    def test_empty(self):
        """Test empty pattern and subject."""

        self.assertTrue(self.glob('', 0, 0, '', 0, 0))
        self.assertFalse(self.glob('', 0, 0, 'a', 0, 1))
        self.assertTrue(self.glob('*', 0, 1, '', 0, 0))

    def test_long_subject(self):
        """Test that subject length does not drive recursion."""

        self.assertFalse(self.glob('*y', 0, 2, 'x' * 5000, 0, 5000))
        self.assertTrue(self.glob('*x*y', 0, 4, 'x' * 5000 + 'y', 0, 5001))

    def test_repeatable(self):
        """Test repeated calls give the same answer."""

        results = {self.glob('a*b*c', 0, 5, 'axxxbxxc', 0, 8) for _ in range(3)}
        self.assertEqual(results, {True})


class TestUtil(unittest.TestCase):
    """Test utilities."""

    def test_ascii(self):
        """Test ASCII helpers."""

        self.assertEqual(util.to_lower(ord('a')), ord('a'))
        self.assertEqual(util.to_lower(ord('A')), ord('a'))
        self.assertTrue(util.is_alpha(ord('a')))
        self.assertTrue(util.is_alpha(ord('A')))
        self.assertFalse(util.is_alpha(ord('0')))
        self.assertFalse(util.is_alpha(ord('@')))
        self.assertFalse(util.is_alpha(ord('[')))
        self.assertFalse(util.is_alpha(ord('é')))

    def test_unit_type(self):
        """Test unit type detection."""

        self.assertEqual(util.unit_type('abc'), util.UNICODE)
        self.assertEqual(util.unit_type(''), util.UNICODE)
        self.assertEqual(util.unit_type(b''), util.BYTES)
        self.assertEqual(util.unit_type(bytearray(b'a')), util.BYTES)
        self.assertEqual(util.unit_type(['a']), util.UNICODE)
        self.assertEqual(util.unit_type([1]), util.BYTES)
        self.assertIsNone(util.unit_type([]))
        self.assertIsNone(util.unit_type(['a'], 1, 1))

        with self.assertRaises(TypeError):
            util.unit_type([None])

    def test_view(self):
        """Test views."""

        view = util.SequenceView('0123456', 1, 6)
        self.assertEqual(len(view), 5)
        self.assertEqual(''.join(view), '12345')

        nested = util.SequenceView(view, 1, 3)
        self.assertEqual(nested.obj, '0123456')
        self.assertEqual((nested.start, nested.end), (2, 4))
        self.assertEqual(''.join(nested), '23')
        self.assertIs(util.to_view(nested), nested)

    def test_view_bounds(self):
        """Test invalid view bounds."""

        with self.assertRaises(ValueError):
            util.SequenceView('abc', 2, 1)

        with self.assertRaises(ValueError):
            util.SequenceView('abc', 0, 4)

        with self.assertRaises(ValueError):
            util.SequenceView('abc', -1)

        with self.assertRaises(ValueError):
            util.SequenceView(util.SequenceView('abcdef', 1, 3), 0, 3)

    def test_view_immutable(self):
        """Test that views cannot be changed."""

        view = util.SequenceView('abc')
        with self.assertRaises(AttributeError):
            view.start = 1
