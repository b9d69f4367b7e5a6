import unittest

from opentelemetry.propagators.textmap import default_getter

from ottrace import util


class _RawGetter(object):

    def get(self, carrier, key):
        return carrier.get(key)

    def keys(self, carrier):
        return list(carrier)


class UtilTest(unittest.TestCase):

    def test_is_valid_header_name(self):
        self.assertTrue(util.is_valid_header_name('foo'))
        self.assertTrue(util.is_valid_header_name('Foo-Bar_9'))
        self.assertTrue(util.is_valid_header_name("^_`!#$%&'*+.|~-"))

        self.assertFalse(util.is_valid_header_name(''))
        self.assertFalse(util.is_valid_header_name('bαr'))
        self.assertFalse(util.is_valid_header_name('foo bar'))
        self.assertFalse(util.is_valid_header_name('foo:bar'))
        self.assertFalse(util.is_valid_header_name('foo\n'))
        self.assertFalse(util.is_valid_header_name('foo\r\nx-injected'))
        self.assertFalse(util.is_valid_header_name('(foo)'))
        self.assertFalse(util.is_valid_header_name('٣'))

    def test_is_valid_header_value(self):
        self.assertTrue(util.is_valid_header_value(''))
        self.assertTrue(util.is_valid_header_value('bar baz'))
        self.assertTrue(util.is_valid_header_value('tab\there'))
        self.assertTrue(util.is_valid_header_value('~!@#$%^&*()'))
        self.assertTrue(util.is_valid_header_value('caf\xe9 \x80\xff'))

        self.assertFalse(util.is_valid_header_value('bαr'))
        self.assertFalse(util.is_valid_header_value('new\nline'))
        self.assertFalse(util.is_valid_header_value('carriage\r'))
        self.assertFalse(util.is_valid_header_value('del\x7f'))
        self.assertFalse(util.is_valid_header_value('\x00'))
        self.assertFalse(util.is_valid_header_value('\U0001f600'))

    def test_read_header(self):
        carrier = {
            'single': 'value',
            'many': ['first', 'second'],
            'tuple': ('first',),
            'none': [],
            'empty': '',
        }
        self.assertEqual('value', util.read_header(carrier, default_getter, 'single'))
        self.assertEqual('first', util.read_header(carrier, default_getter, 'many'))
        self.assertEqual('', util.read_header(carrier, default_getter, 'none'))
        self.assertEqual('', util.read_header(carrier, default_getter, 'missing'))

        getter = _RawGetter()
        self.assertEqual('value', util.read_header(carrier, getter, 'single'))
        self.assertEqual('first', util.read_header(carrier, getter, 'many'))
        self.assertEqual('first', util.read_header(carrier, getter, 'tuple'))
        self.assertEqual('', util.read_header(carrier, getter, 'none'))
        self.assertEqual('', util.read_header(carrier, getter, 'empty'))
        self.assertEqual('', util.read_header(carrier, getter, 'missing'))

    def test_pad_trace_id(self):
        self.assertEqual(
            '00000000000000004aaba1a52cf8ee09',
            util.pad_trace_id('4aaba1a52cf8ee09'))
        self.assertEqual(
            '80f198ee56343ba864fe8b2a57d3eff7',
            util.pad_trace_id('80f198ee56343ba864fe8b2a57d3eff7'))
        self.assertEqual('abc', util.pad_trace_id('abc'))
        self.assertEqual('', util.pad_trace_id(''))

    def test_is_valid_trace_id(self):
        self.assertTrue(util.is_valid_trace_id('80f198ee56343ba864fe8b2a57d3eff7'))
        self.assertTrue(util.is_valid_trace_id('80F198EE56343BA864FE8B2A57D3EFF7'))
        self.assertTrue(util.is_valid_trace_id('00000000000000004aaba1a52cf8ee09'))

        self.assertFalse(util.is_valid_trace_id('0' * 32))
        self.assertFalse(util.is_valid_trace_id('4aaba1a52cf8ee09'))
        self.assertFalse(util.is_valid_trace_id('80f198ee56343ba864fe8b2a57d3eff7\n'))
        self.assertFalse(util.is_valid_trace_id('g' * 32))
        self.assertFalse(util.is_valid_trace_id(''))

    def test_is_valid_span_id(self):
        self.assertTrue(util.is_valid_span_id('e457b5a2e4d86bd1'))
        self.assertTrue(util.is_valid_span_id('0000000000000001'))

        self.assertFalse(util.is_valid_span_id('0' * 16))
        self.assertFalse(util.is_valid_span_id('e457b5a2e4d86bd'))
        self.assertFalse(util.is_valid_span_id('e457b5a2e4d86bd1e4'))
        self.assertFalse(util.is_valid_span_id('e457b5a2e4d86bdx'))


if __name__ == '__main__':
    unittest.main()
