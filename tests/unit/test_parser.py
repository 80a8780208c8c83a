"""
Unit tests for the INI line parser.

Tests comment stripping, implicit values, section (re)opening and
duplicate key detection of `parse()` and `readstream()`.
"""

import io

import pytest

from dotini.errors import DuplicateKeyError
from dotini.ini import DEFAULT_SECTION, parse, readstream


class TestParse:
    """Test cases for parse()."""

    def test_empty_input(self):
        """Test that empty input yields only an empty DEFAULT section."""
        store = parse([])
        assert list(store) == [DEFAULT_SECTION]
        assert len(store.default) == 0

    def test_comment_only_input(self):
        """Test that comments and blank lines change nothing."""
        store = parse(['; a comment', '   ', '# another', '\t'])
        assert list(store) == [DEFAULT_SECTION]
        assert len(store.default) == 0

    def test_keys_before_header_go_to_default(self):
        """Test that assignments before any header belong to DEFAULT."""
        store = parse(['x=0', '[a]', 'x=1'])
        assert store[DEFAULT_SECTION]['x'] == '0'
        assert store['a']['x'] == '1'

    def test_bare_key_is_one(self):
        """Test that a key without '=' gets the value '1'."""
        store = parse(['[s]', 'verbose'])
        assert store['s']['verbose'] == '1'

    def test_comment_stripped_from_value(self):
        """Test that ';' and '#' truncate the line."""
        store = parse(['[s]', 'a=value ; comment', 'b=x#y', 'c=1;2#3'])
        assert store['s']['a'] == 'value'
        assert store['s']['b'] == 'x'
        assert store['s']['c'] == '1'

    def test_comment_in_header(self):
        """Test that a commented header still opens the section."""
        store = parse(['[s] ; the s section', 'k=v'])
        assert store['s']['k'] == 'v'

    def test_split_on_first_equals_only(self):
        """Test that later '=' characters stay in the value."""
        store = parse(['url=a=b=c'])
        assert store.default['url'] == 'a=b=c'

    def test_key_trimmed_value_keeps_leading_space(self):
        """Test that only the key is trimmed around '='."""
        store = parse(['  name  =  Alice  '])
        assert store.default['name'] == '  Alice'

    def test_empty_value(self):
        """Test that 'key=' yields an empty string, not '1'."""
        store = parse(['key='])
        assert store.default['key'] == ''

    def test_trailing_newlines_ignored(self):
        """Test that raw lines with newline characters are accepted."""
        store = parse(['[s]\n', 'k=v\r\n'])
        assert store['s']['k'] == 'v'

    def test_empty_section(self):
        """Test that a header with no body creates an empty section."""
        store = parse(['[empty]'])
        assert 'empty' in store
        assert len(store['empty']) == 0

    def test_section_name_not_trimmed(self):
        """Test that the text between brackets is kept verbatim."""
        store = parse(['[ spaced ]', 'k=v'])
        assert ' spaced ' in store
        assert 'spaced' not in store

    def test_reopened_section_merges(self):
        """Test that a repeated header extends the existing section."""
        store = parse(['[s]', 'a=1', '[t]', 'b=2', '[s]', 'c=3'])
        assert list(store) == [DEFAULT_SECTION, 's', 't']
        assert dict(store['s']) == {'a': '1', 'c': '3'}

    def test_reopened_section_case_insensitive(self):
        """Test that section headers compare case-insensitively."""
        store = parse(['[Server]', 'a=1', '[SERVER]', 'b=2'])
        assert list(store) == [DEFAULT_SECTION, 'Server']
        assert dict(store['server']) == {'a': '1', 'b': '2'}

    def test_default_header_reopens_default(self):
        """Test that [default] refers to the DEFAULT section."""
        store = parse(['x=0', '[default]', 'y=1'])
        assert len(store) == 1
        assert dict(store.default) == {'x': '0', 'y': '1'}

    def test_keys_case_sensitive(self):
        """Test that keys differing in case are distinct."""
        store = parse(['Key=1', 'key=2'])
        assert store.default['Key'] == '1'
        assert store.default['key'] == '2'

    def test_duplicate_key_raises(self):
        """Test that a key repeated under one header is an error."""
        with pytest.raises(DuplicateKeyError, match='duplicate key "x"') as e:
            parse(['[s]', 'x=1', 'x=2'])
        assert e.value.section == 's'
        assert e.value.key == 'x'
        assert e.value.lineno == 3

    def test_duplicate_key_across_reopened_section(self):
        """Test that reopening a section does not allow overriding."""
        with pytest.raises(DuplicateKeyError):
            parse(['[s]', 'x=1', '[t]', '[s]', 'x=2'])

    def test_duplicate_bare_key(self):
        """Test that bare keys count as assignments too."""
        with pytest.raises(DuplicateKeyError):
            parse(['flag', 'flag=0'])

    def test_duplicate_key_is_key_error(self):
        """Test that DuplicateKeyError can be caught as KeyError."""
        with pytest.raises(KeyError):
            parse(['x=1', 'x=1'])

    def test_same_key_in_different_sections(self):
        """Test that the same key may appear once per section."""
        store = parse(['x=0', '[a]', 'x=1', '[a.b]', 'x=2'])
        assert [store[s]['x'] for s in store] == ['0', '1', '2']

    def test_empty_section_name_warns(self):
        """Test that '[]' is accepted with a warning."""
        with pytest.warns(UserWarning, match='empty name'):
            store = parse(['[]', 'k=v'])
        assert store['']['k'] == 'v'

    def test_leading_bom_dropped(self):
        """Test that a byte order mark before the first header is ignored."""
        store = parse(['\ufeff[s]', 'k=v'])
        assert store['s']['k'] == 'v'
        assert len(store.default) == 0

    def test_lone_bracket_is_a_key(self):
        """Test that an unterminated header is an implicit-value key."""
        store = parse(['[oops'])
        assert store.default['[oops'] == '1'

    def test_consumes_generator_once(self):
        """Test that a one-shot generator is enough."""
        lines = (line for line in ['[s]', 'k=v'])
        store = parse(lines)
        assert store['s']['k'] == 'v'
        assert next(lines, None) is None

    def test_deterministic(self):
        """Test that equal inputs give equal stores."""
        text = ['x=0', '[a]', 'x=1', '[a.b]', 'y']
        first, second = parse(text), parse(text)
        assert list(first) == list(second)
        for name in first:
            assert dict(first[name]) == dict(second[name])


class TestReadStream:
    """Test cases for readstream()."""

    def test_reads_text_stream(self):
        """Test reading from a decoded character stream."""
        buf = io.StringIO('[s]\nk = v ; note\nflag\n')
        store = readstream(buf)
        assert store['s']['k'] == ' v'
        assert store['s']['flag'] == '1'

    def test_last_line_without_newline(self):
        """Test that the final line needs no terminator."""
        store = readstream(io.StringIO('a=1\nb=2'))
        assert store.default['b'] == '2'
