"""Tests for option declarations and the option registry."""

import pytest

from cmdargs.exc import ConfigurationError
from cmdargs.options import Option, OptionRegistry, compile_option


class TestCompileOption:
    """Test compiling declaration text."""

    def test_short_boolean(self):
        option = compile_option('-f')
        assert option.short == 'f'
        assert option.long is None
        assert option.name == 'f'
        assert option.arity == Option.NONE
        assert not option.takes_value

    def test_long_boolean(self):
        option = compile_option('--foo')
        assert option.short is None
        assert option.long == 'foo'
        assert option.name == 'foo'

    def test_both_spellings(self):
        option = compile_option('-c, --color <color>', 'Paint color', 'red')
        assert option.spellings == ('-c', '--color')
        assert option.name == 'color'
        assert option.arity == Option.REQUIRED
        assert option.placeholder == 'color'
        assert option.description == 'Paint color'
        assert option.default == 'red'

    def test_separators(self):
        """Test that commas, whitespace or both separate spellings."""
        for spec in ('-c,--color', '-c --color', '-c ,  --color'):
            assert compile_option(spec).spellings == ('-c', '--color')

    def test_optional_value(self):
        option = compile_option('-s, --size [size]')
        assert option.arity == Option.OPTIONAL
        assert option.placeholder == 'size'
        assert compile_option('-s [<size>]').placeholder == 'size'

    @pytest.mark.parametrize('long,name', [
        ('foo-bar', 'fooBar'),
        ('foo-bar-baz', 'fooBarBaz'),
        ('dry-run', 'dryRun'),
        ('x', 'x'),
    ])
    def test_camel_case(self, long, name):
        """Test that hyphenated long names are exposed in camel case."""
        assert compile_option('--' + long).name == name

    @pytest.mark.parametrize('spec,name', [
        ('--no-foo', 'foo'),
        ('-F, --not-free', 'free'),
        ('--no-foo-bar', 'fooBar'),
    ])
    def test_negated(self, spec, name):
        option = compile_option(spec)
        assert option.negated
        assert option.name == name

    def test_not_negated(self):
        """Test that words merely starting with 'no' aren't negations."""
        option = compile_option('--note')
        assert not option.negated
        assert option.name == 'note'
        assert compile_option('--nothing-here').name == 'nothingHere'

    def test_flag_value(self):
        assert compile_option('-f').flag_value('-f') is True
        negated = compile_option('-F, --no-foo')
        assert negated.flag_value('-F') is False
        assert negated.flag_value('--no-foo') is False
        assert negated.flag_value('--foo') is True
        assert negated.positive_spelling == '--foo'

    def test_usage(self):
        assert compile_option('-c, --color <color>').usage == '-c, --color <color>'
        assert compile_option('--size [n]').usage == '--size [n]'
        assert compile_option('-f').usage == '-f'

    def test_immutable(self):
        option = compile_option('-f')
        with pytest.raises(AttributeError):
            option.name = 'g'
        with pytest.raises(AttributeError):
            del option.short

    @pytest.mark.parametrize('spec', [
        '',
        '<value>',
        '[value]',
        'foo',
        '-f -g',
        '--foo --bar',
        '-c <x> -d',
        '-c <x> <y>',
        '-fg',
        '--no',
        '-',
    ])
    def test_invalid(self, spec):
        with pytest.raises(ConfigurationError):
            compile_option(spec)

    def test_invalid_position(self):
        with pytest.raises(ConfigurationError) as info:
            compile_option('-c, color')
        assert info.value.pos == 4
        assert info.value.text == '-c, color'

    def test_not_a_string(self):
        with pytest.raises(ConfigurationError):
            compile_option(None)


class TestOptionRegistry:
    """Test indexing and lookup."""

    def test_lookup_all_spellings(self):
        registry = OptionRegistry()
        option = registry.declare('-c, --color <color>')
        assert registry.lookup('-c') is option
        assert registry.lookup('--color') is option
        assert registry.lookup('c') is option
        assert registry.lookup('color') is option
        assert registry.lookup('-x') is None
        assert '--color' in registry
        assert '--colour' not in registry

    def test_negated_positive_spelling(self):
        """Test that negated options also answer to the stripped spelling."""
        registry = OptionRegistry()
        option = registry.declare('-F, --no-foo')
        assert registry.lookup('--no-foo') is option
        assert registry.lookup('--foo') is option

    def test_positive_spelling_does_not_replace(self):
        registry = OptionRegistry()
        foo = registry.declare('-f, --foo')
        no_foo = registry.declare('--no-foo')
        assert registry.lookup('--foo') is foo
        assert registry.lookup('--no-foo') is no_foo

    def test_declared_spellings(self):
        """Test that only written spellings count as declared."""
        registry = OptionRegistry()
        registry.declare('-F, --no-foo')
        assert registry.declared('--no-foo')
        assert registry.declared('F')
        assert '--foo' in registry
        assert not registry.declared('--foo')
        assert not registry.declared('--bar')

        foo = registry.declare('--foo <value>')
        assert registry.declared('--foo')
        assert registry.lookup('--foo') is foo

    def test_redeclare_replaces_only_that_spelling(self):
        registry = OptionRegistry()
        first = registry.declare('-f, --foo')
        second = registry.declare('-f, --fast')
        assert registry.lookup('-f') is second
        assert registry.lookup('--foo') is first
        assert registry.lookup('--fast') is second
        assert list(registry) == [first, second]

    def test_iteration_skips_unreachable(self):
        registry = OptionRegistry()
        registry.declare('-f')
        second = registry.declare('-f <value>')
        assert list(registry) == [second]
        assert len(registry) == 1

    def test_custom_negation_prefixes(self):
        registry = OptionRegistry(('without',))
        assert registry.declare('--without-sugar').name == 'sugar'
        assert registry.declare('--no-foo').name == 'noFoo'

    @pytest.mark.parametrize('token,expected', [
        ('--', True),
        ('--color', True),
        ('--color=red', True),
        ('--colour', False),
        ('-c', True),
        ('-cF', True),
        ('-x', False),
        ('-', False),
        ('red', False),
        ('-5', False),
    ])
    def test_looks_like_flag(self, token, expected):
        registry = OptionRegistry()
        registry.declare('-c, --color <color>')
        registry.declare('-F, --not-free')
        assert registry.looks_like_flag(token) is expected
