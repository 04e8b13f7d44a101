import unittest
from pathlib import Path

import yaml

from stringy import transforms
from stringy.charsets import resolve

CASES_PATH = Path(__file__).parent / 'data' / 'cases.yaml'

def load_cases():
    with CASES_PATH.open('r', encoding='utf-8') as f:
        return yaml.safe_load(f)

UTF8 = resolve('utf-8')
ASCII = resolve('ascii')
LATIN1 = resolve('latin-1')

class TestExpectedResults(unittest.TestCase):
    def test_expected_results(self):
        for name, cases in load_cases().items():
            function = getattr(transforms, name)
            for text, expected, *extra in cases:
                with self.subTest(method=name, text=text):
                    self.assertEqual(function(text, UTF8, *extra), expected)

class TestEmptyText(unittest.TestCase):
    def test_empty_text(self):
        for name in transforms.__all__:
            with self.subTest(method=name):
                self.assertEqual(getattr(transforms, name)('', UTF8), '')

class TestUpperCaseFirst(unittest.TestCase):
    def test_idempotent(self):
        for text in ['test', 'Test', 'ñandú', 'σ', '1a', '']:
            once = transforms.upper_case_first(text, UTF8)
            self.assertEqual(transforms.upper_case_first(once, UTF8), once)

    def test_only_first_character(self):
        result = transforms.upper_case_first('ñANDÚ', UTF8)
        self.assertEqual(result, 'ÑANDÚ')

class TestSwapCase(unittest.TestCase):
    def test_round_trip(self):
        for text in ['TeStInG', 'ÑandÚ', 'σΣ']:
            swapped = transforms.swap_case(text, UTF8)
            self.assertEqual(transforms.swap_case(swapped, UTF8), text)

    def test_caseless_characters_unchanged(self):
        result = transforms.swap_case('123 !? 世界', UTF8)
        self.assertEqual(result, '123 !? 世界')

    def test_whitespace_untouched(self):
        result = transforms.swap_case(' a\tB ', UTF8)
        self.assertEqual(result, ' A\tb ')

class TestTitleize(unittest.TestCase):
    def test_keeps_acronyms(self):
        result = transforms.titleize('the NASA api', UTF8)
        self.assertEqual(result, 'The NASA Api')

    def test_ignore_accepts_any_iterable(self):
        result = transforms.titleize('war and peace', UTF8, (w for w in ['and']))
        self.assertEqual(result, 'War and Peace')

    def test_ignore_is_literal(self):
        result = transforms.titleize('Of mice and of men', UTF8, ['of'])
        self.assertEqual(result, 'Of Mice And of Men')

    def test_single_string_ignore(self):
        result = transforms.titleize('o f of', UTF8, 'of')
        self.assertEqual(result, 'O F of')

class TestCamelize(unittest.TestCase):
    def test_separator_before_digit(self):
        result = transforms.camelize('item-0name', UTF8)
        self.assertEqual(result, 'item0Name')

    def test_ascii_whitespace_only(self):
        self.assertEqual(transforms.camelize('foo\u00a0bar', ASCII), 'foo\u00a0bar')
        self.assertEqual(transforms.camelize('foo\u00a0bar', UTF8), 'fooBar')

    def test_ascii_case_mapping(self):
        self.assertEqual(transforms.camelize('ñandú ñandú', ASCII), 'ñandúñandú')
        self.assertEqual(transforms.camelize('ñandú ñandú', UTF8), 'ñandúÑandú')

class TestDasherize(unittest.TestCase):
    def test_consecutive_capitals(self):
        result = transforms.dasherize('HTMLParser', UTF8)
        self.assertEqual(result, 'h-t-m-l-parser')

    def test_ascii_ignores_non_ascii_letters(self):
        result = transforms.dasherize('fooBarÉté', ASCII)
        self.assertEqual(result, 'foo-barÉté')

    def test_latin1_skips_letters_outside_charset(self):
        self.assertEqual(transforms.dasherize('fooΣbar', LATIN1), 'fooΣbar')
        self.assertEqual(transforms.dasherize('fooΣbar', UTF8), 'foo-σbar')
        self.assertEqual(transforms.dasherize('fooÉtéBar', LATIN1), 'foo-été-bar')

class TestUnderscored(unittest.TestCase):
    def test_digits(self):
        result = transforms.underscored('Test2Case', UTF8)
        self.assertEqual(result, 'test2_case')

    def test_latin1_skips_letters_outside_charset(self):
        result = transforms.underscored('fooΣbarÉtat', LATIN1)
        self.assertEqual(result, 'fooΣbar_état')
