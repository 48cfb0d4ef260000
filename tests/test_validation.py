import unittest

from localizer.errors import ValidationError
from localizer.formats import TranslationFormat
from localizer.validation import ValidationStatus, check_syntax, validate_input


class TestJsonValidation(unittest.TestCase):
    def test_well_formed_json_is_valid(self):
        for text in ['{"a":1}', "[]", '{"greeting": {"en": "Hello"}}', "42", '"x"']:
            with self.subTest(text=text):
                result = validate_input(text, TranslationFormat.JSON)
                self.assertEqual(result.status, ValidationStatus.VALID)
                self.assertEqual(result.message, "")

    def test_malformed_json_is_invalid_with_message(self):
        for text in ["not json", '{"a":1', "{'a': 1}", '{"a":}', ""]:
            with self.subTest(text=text):
                result = validate_input(text, TranslationFormat.JSON)
                self.assertEqual(result.status, ValidationStatus.INVALID)
                self.assertTrue(result.message.startswith("Invalid JSON format: "))
                self.assertGreater(len(result.message), len("Invalid JSON format: "))

    def test_check_syntax_raises(self):
        with self.assertRaises(ValidationError):
            check_syntax("{", TranslationFormat.JSON)


class TestXmlValidation(unittest.TestCase):
    def test_text_without_tag_is_invalid(self):
        result = validate_input("hello world", TranslationFormat.XML)
        self.assertEqual(result.status, ValidationStatus.INVALID)
        self.assertEqual(result.message, "Invalid XML format: Invalid XML")

    def test_any_tag_like_substring_is_valid(self):
        for text in ["<resources/>", "prefix <b> suffix", "<not really xml>"]:
            with self.subTest(text=text):
                self.assertTrue(validate_input(text, TranslationFormat.XML).is_valid)


class TestUncheckedFormats(unittest.TestCase):
    def test_other_formats_are_always_valid(self):
        for fmt in (
            TranslationFormat.YAML,
            TranslationFormat.PROPERTIES,
            TranslationFormat.IOS_STRINGS,
        ):
            with self.subTest(format=fmt):
                self.assertTrue(validate_input("{{{ :::", fmt).is_valid)

    def test_repeated_validation_gives_same_result(self):
        first = validate_input("not json", TranslationFormat.JSON)
        second = validate_input("not json", TranslationFormat.JSON)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
