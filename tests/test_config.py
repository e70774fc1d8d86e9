"""Tests for parser settings."""

import pytest

from cmdargs.command import Command
from cmdargs.config import Config, ConfigSection, ParserConfigSection
from cmdargs.exc import ConfigurationError


class TestParserConfigSection:
    """Test reading the [parser] section."""

    def test_defaults(self):
        section = Config().parser
        assert section.help_flags == ('-h', '--help')
        assert section.version_flags == ('-v', '--version')
        assert section.negation_prefixes == ('no', 'not')
        assert section.coerce_numbers is True

    def test_from_string(self):
        config = Config(data="[parser]\nhelp = -?, --help\nversion = --version\nnegate = without\ncoerce_numbers = off\n")
        assert config.parser.help_flags == ('-?', '--help')
        assert config.parser.version_flags == ('--version',)
        assert config.parser.negation_prefixes == ('without',)
        assert config.parser.coerce_numbers is False

    def test_from_dict(self):
        config = Config(data={'parser': {'version': ''}})
        assert config.parser.version_flags == ()
        assert config['parser'].help_flags == ('-h', '--help')

    def test_from_file(self, tmp_path):
        path = tmp_path / 'cmdargs.ini'
        path.write_text("[parser]\nnegate = no\n", encoding='utf-8')
        assert Config(filename=str(path)).parser.negation_prefixes == ('no',)

    @pytest.mark.parametrize('value', ['help', '-', '--'])
    def test_invalid_flag(self, value):
        with pytest.raises(ConfigurationError):
            Config(data={'parser': {'help': value}})

    def test_without_section(self):
        section = ParserConfigSection()
        assert section.coerce_numbers is True


class TestConfig:
    """Test the section registry."""

    def test_custom_section(self):
        config = Config(data={'app': {'name': 'paint'}})

        @config.section('app')
        class AppSection(ConfigSection):
            def read(self, section):
                self.name = section.get('name', 'unnamed')

        assert config.app.name == 'paint'
        assert isinstance(config['app'], AppSection)

    def test_section_registered_once(self):
        config = Config()
        first = config.parser
        config.section('parser', ParserConfigSection)
        assert config.parser is first

    def test_missing_section(self):
        config = Config()
        with pytest.raises(AttributeError):
            config.nope
        with pytest.raises(KeyError):
            config['nope']

    def test_sections_not_shared(self):
        assert Config(data={'parser': {'negate': 'no'}}).parser is not Config().parser
        assert Config().parser.negation_prefixes == ('no', 'not')

    def test_attribute_access(self):
        section = ConfigSection()
        section.foo = 1
        assert section['foo'] == 1
        del section.foo
        assert not hasattr(section, 'foo')

    def test_read_rebuilds_sections(self, tmp_path):
        config = Config()
        config.read(data="[parser]\nhelp = -?\n")
        assert config.parser.help_flags == ('-?',)
        assert Command(config=config).help_flags == ('-?',)

        path = tmp_path / 'cmdargs.ini'
        path.write_text("[parser]\nversion = --ver\n", encoding='utf-8')
        config.read(filename=str(path))
        assert config.parser.help_flags == ('-?',)
        assert config.parser.version_flags == ('--ver',)

    def test_read_rebuilds_custom_sections(self):
        config = Config()

        @config.section('app')
        class AppSection(ConfigSection):
            def read(self, section):
                self.name = section.get('name', 'unnamed')

        assert config.app.name == 'unnamed'
        config.read(data={'app': {'name': 'paint'}})
        assert config.app.name == 'paint'
