"""
Parser settings.

Settings are read from INI-style text through :mod:`configparser`.  Everything is optional; a :class:`Command` created
without a config uses the defaults shown here::

    [parser]
    help = -h, --help
    version = -v, --version
    negate = no not
    coerce_numbers = yes

An empty ``help`` or ``version`` value disables that flag.
"""
import configparser
import functools

from .core import ValueMap
from .exc import ConfigurationError
from .util import split_words

__all__ = ['ConfigSection', 'ParserConfigSection', 'Config']


class ConfigSection(ValueMap):
    """
    Settings read from one INI section, with attribute access.

    Subclasses override :meth:`read` to convert and validate their values.
    """
    def __init__(self, section=None):
        """
        :param section: :class:`configparser.SectionProxy` to read, or None to take every default.
        """
        super().__init__()
        self.read(section if section is not None else {})

    def read(self, section):
        """
        Converts and stores values from `section`.

        :param section: :class:`configparser.SectionProxy` or an empty mapping.
        """


class ParserConfigSection(ConfigSection):
    """
    Handles the ``[parser]`` section.
    """
    DEFAULT_HELP = '-h, --help'
    DEFAULT_VERSION = '-v, --version'
    DEFAULT_NEGATE = 'no not'

    # noinspection PyAttributeOutsideInit
    def read(self, section):
        self.help_flags = self._flags(section, 'help', self.DEFAULT_HELP)
        self.version_flags = self._flags(section, 'version', self.DEFAULT_VERSION)
        self.negation_prefixes = tuple(split_words(section.get('negate', self.DEFAULT_NEGATE)))
        if hasattr(section, 'getboolean'):
            self.coerce_numbers = section.getboolean('coerce_numbers', True)
        else:
            self.coerce_numbers = section.get('coerce_numbers', True)

    @staticmethod
    def _flags(section, key, default):
        flags = tuple(split_words(section.get(key, default)))
        for flag in flags:
            if not flag.startswith('-') or flag in ('-', '--'):
                raise ConfigurationError("Invalid {} flag {!r}".format(key, flag), text=flag)
        return flags


class Config:
    """
    Parser settings backed by a :class:`configparser.ConfigParser`.

    Each section name is handled by a :class:`ConfigSection` subclass registered through :meth:`section`.  The handler
    objects are rebuilt whenever more configuration is read, so they always reflect everything read so far.
    """
    def __init__(self, filename=None, data=None):
        """
        :param filename: INI file to read, if any.
        :param data: Dict or INI-syntax string to read, if any.  Read before `filename`.
        """
        self._parser = configparser.ConfigParser()
        self._handlers = {}
        self.sections = {}
        self.section('parser', ParserConfigSection)
        self.read(filename=filename, data=data)

    def section(self, name, class_=None):
        """
        Registers the specified class as a handler for the specified config section.  Ignored if the section is already
        handled.

        :param name: Config section name.
        :param class_: Class.  If None, returns a decorator.
        """
        if class_ is None:
            return functools.partial(self.section, name)
        if name not in self._handlers:
            self._handlers[name] = class_
            self._build(name)
        return class_

    def read(self, filename=None, data=None):
        """
        Reads more configuration and rebuilds every handled section.

        :param filename: INI file to read.  Missing files are skipped, as :meth:`configparser.ConfigParser.read` does.
        :param data: Dict or INI-syntax string.
        """
        if isinstance(data, str):
            self._parser.read_string(data)
        elif isinstance(data, dict):
            self._parser.read_dict(data)
        if filename:
            self._parser.read(filename)
        for name in self._handlers:
            self._build(name)

    def _build(self, name):
        proxy = self._parser[name] if self._parser.has_section(name) else None
        self.sections[name] = self._handlers[name](proxy)

    def __getattr__(self, item):
        try:
            return self.__dict__['sections'][item]
        except KeyError:
            raise AttributeError(item)

    def __getitem__(self, item):
        return self.sections[item]
