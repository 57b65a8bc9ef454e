#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest

from utils.validators import MAX_YEAR, parse_year, validate_text, validate_year, validate_value
from utils.helpers import allowed_file, file_extension, parse_bool_flag, utc_now_iso


class TestValidators(unittest.TestCase):
    def test_text(self):
        ok, _ = validate_text('Brazil')
        self.assertTrue(ok)
        ok2, msg = validate_text('  ', '国家名称')
        self.assertFalse(ok2)
        self.assertIn('国家名称', msg)
        ok3, _ = validate_text(None)
        self.assertFalse(ok3)

    def test_year(self):
        self.assertEqual(parse_year(' 2021 '), 2021)
        self.assertEqual(parse_year(2021.0), 2021)
        for good in (0, '1999', 2024):
            ok, _ = validate_year(good)
            self.assertTrue(ok)
        ok, msg = validate_year(-1)
        self.assertFalse(ok)
        self.assertIn('负数', msg)
        for bad in ('abc', 2021.5, True, None, '2021.0', float('nan')):
            ok, msg = validate_year(bad)
            self.assertFalse(ok, bad)
            self.assertIn('年份', msg)

    def test_year_rejects_non_ascii_and_underscored_literals(self):
        for bad in ('2_021', '２０２１', '٢٠٢١', '20 21', '', '+'):
            ok, msg = validate_year(bad)
            self.assertFalse(ok, bad)
            self.assertIn('年份', msg)
        self.assertEqual(parse_year('+2021'), 2021)

    def test_year_upper_bound(self):
        ok, _ = validate_year(MAX_YEAR)
        self.assertTrue(ok)
        ok, _ = validate_year(str(MAX_YEAR))
        self.assertTrue(ok)
        ok, msg = validate_year(MAX_YEAR + 1)
        self.assertFalse(ok)
        self.assertIn('范围', msg)

    def test_value_too_large_for_float(self):
        ok, msg = validate_value(10 ** 400)
        self.assertFalse(ok)
        self.assertIn('指标值', msg)

    def test_value(self):
        for good in (0, -3.9, '4.6', 1e10):
            ok, _ = validate_value(good)
            self.assertTrue(ok)
        for bad in (None, True, 'x', float('inf'), float('nan'), [1]):
            ok, msg = validate_value(bad)
            self.assertFalse(ok, bad)
            self.assertIn('指标值', msg)


class TestHelpers(unittest.TestCase):
    def test_file_extension_and_allowed(self):
        self.assertEqual(file_extension('a.b.CSV'), 'csv')
        self.assertEqual(file_extension('noext'), '')
        self.assertEqual(file_extension(None), '')
        self.assertTrue(allowed_file('data.json', {'csv', 'json'}))
        self.assertFalse(allowed_file('data.xlsx', {'csv', 'json'}))

    def test_parse_bool_flag(self):
        for v in ('1', 'true', 'YES', 'on', True):
            self.assertTrue(parse_bool_flag(v))
        for v in ('0', 'false', '', None, False):
            self.assertFalse(parse_bool_flag(v))

    def test_utc_now_iso(self):
        ts = utc_now_iso()
        self.assertTrue(ts.endswith('+00:00'))
        self.assertNotIn('.', ts)


if __name__ == '__main__':
    unittest.main(verbosity=2)
