"""
Option declarations.

An option is declared with a short string resembling what you would write in a help listing::

    -c, --color <color>     requires a value
    -s, --size [size]       takes a value if one follows
    -F, --not-free          boolean; recognizing it sets 'free' to False
    --dry-run               boolean, exposed as 'dryRun'

Spellings may be separated by commas, whitespace or both.  At most one short and one long spelling are allowed, and
the value placeholder (if any) must come last.
"""
import re

from .exc import ConfigurationError
from .util import camelize

__all__ = ['Option', 'OptionRegistry', 'compile_option', 'DEFAULT_NEGATION_PREFIXES']

DEFAULT_NEGATION_PREFIXES = ('no', 'not')

_word_re = re.compile(r'[^\s,]+')
_declaration_re = re.compile(
    r'''
    (?:--(?P<long>[^\W_](?:[\w.-]*\w)?))          # --long-name
    | (?:-(?P<short>[^\W_]))                      # -x
    | (?:<(?P<required>[^<>\[\]]+)>)              # <value>
    | (?:\[<?(?P<optional>[^<>\[\]]+?)>?\])       # [value] or [<value>]
    ''', re.VERBOSE
)


class Option:
    """
    Compiled representation of one declared option.  Immutable once created.

    :ivar short: Short spelling without the dash, or None.
    :ivar long: Long spelling as declared (hyphenated, without dashes), or None.
    :ivar name: Effective name used as the key in parsed options.
    :ivar negated: True if the long spelling starts with a negation prefix.
    :ivar arity: One of :attr:`NONE`, :attr:`OPTIONAL` or :attr:`REQUIRED`.
    :ivar placeholder: Name of the value placeholder, or None.
    :ivar description: Free-form help text, or None.
    :ivar default: Value used when the option is absent (or present without its optional value).
    """
    NONE = 'none'
    OPTIONAL = 'optional'
    REQUIRED = 'required'

    __slots__ = ('short', 'long', 'name', 'negated', 'positive', 'arity', 'placeholder', 'description', 'default')

    def __init__(
            self, short=None, long=None, arity=NONE, placeholder=None, description=None, default=None,
            negation_prefixes=DEFAULT_NEGATION_PREFIXES
    ):
        if not short and not long:
            raise ConfigurationError("Option must have a short or long spelling.")
        negated = False
        positive = None
        if long:
            first, _, rest = long.partition('-')
            if first in negation_prefixes:
                if not rest:
                    raise ConfigurationError("Negated option {!r} has nothing to negate.".format('--' + long))
                negated = True
                positive = rest
        name = camelize(positive or long) if long else short

        assign = object.__setattr__
        assign(self, 'short', short or None)
        assign(self, 'long', long or None)
        assign(self, 'name', name)
        assign(self, 'negated', negated)
        assign(self, 'positive', positive)
        assign(self, 'arity', arity)
        assign(self, 'placeholder', placeholder)
        assign(self, 'description', description)
        assign(self, 'default', default)

    def __setattr__(self, key, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def __delattr__(self, key):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    @property
    def takes_value(self):
        return self.arity != self.NONE

    @property
    def spellings(self):
        """Tuple of the declared spellings, with dashes."""
        rv = []
        if self.short:
            rv.append('-' + self.short)
        if self.long:
            rv.append('--' + self.long)
        return tuple(rv)

    @property
    def positive_spelling(self):
        """For negated options, the long spelling with the negation prefix stripped.  Otherwise None."""
        if not self.negated:
            return None
        return '--' + self.positive

    def flag_value(self, spelling=None):
        """
        Returns the value a boolean occurence of this option produces.

        :param spelling: Spelling that was recognized.  Only matters for negated options, where the positive spelling
            produces True.
        """
        if not self.negated:
            return True
        return spelling is not None and spelling == self.positive_spelling

    @property
    def usage(self):
        """Usage text, e.g. ``-c, --color <color>``"""
        text = ", ".join(self.spellings)
        if self.arity == self.REQUIRED:
            text += " <{}>".format(self.placeholder)
        elif self.arity == self.OPTIONAL:
            text += " [{}]".format(self.placeholder)
        return text

    def __repr__(self):
        return "<{}({!r})>".format(type(self).__name__, self.usage)


def compile_option(spec, description=None, default=None, negation_prefixes=DEFAULT_NEGATION_PREFIXES):
    """
    Compiles an option declaration into an :class:`Option`

    :param spec: Declaration text, e.g. ``-c, --color <color>``
    :param description: Optional help text.
    :param default: Default value.
    :param negation_prefixes: Long-name prefixes that mark an option as negated.
    :return: A new :class:`Option`
    :raises: :class:`ConfigurationError` if the declaration is malformed.
    """
    if not isinstance(spec, str):
        raise ConfigurationError("Option declaration must be a string, not {!r}".format(spec))

    short = long = placeholder = None
    arity = Option.NONE

    for word in _word_re.finditer(spec):
        def error_here(message):
            return ConfigurationError(message, spec, word.start())

        match = _declaration_re.fullmatch(word.group())
        if match is None:
            raise error_here("Unexpected characters {!r}".format(word.group()))
        if placeholder is not None:
            raise error_here("Value placeholder must come last")
        if match.group('short'):
            if short is not None:
                raise error_here("Duplicate short spelling")
            short = match.group('short')
        elif match.group('long'):
            if long is not None:
                raise error_here("Duplicate long spelling")
            long = match.group('long')
        else:
            if short is None and long is None:
                raise error_here("Value placeholder must follow a spelling")
            arity = Option.REQUIRED if match.group('required') else Option.OPTIONAL
            placeholder = match.group('required') or match.group('optional')

    if short is None and long is None:
        raise ConfigurationError("Option declaration {!r} has no short or long spelling".format(spec), spec)
    try:
        return Option(short, long, arity, placeholder, description, default, negation_prefixes)
    except ConfigurationError as ex:
        raise ConfigurationError(ex.message, spec, spec.find('--')) from None


class OptionRegistry:
    """
    Indexes options by every spelling.

    Spellings are stored with their dashes (``-c``, ``--color``).  Re-declaring a spelling replaces the mapping for
    that spelling only.
    """
    def __init__(self, negation_prefixes=DEFAULT_NEGATION_PREFIXES):
        self.negation_prefixes = tuple(negation_prefixes)
        self._spellings = {}
        self._derived = set()
        self._options = []

    def declare(self, spec, description=None, default=None):
        """
        Compiles and registers an option.

        :param spec: Declaration text.
        :param description: Optional help text.
        :param default: Default value.
        :return: The new :class:`Option`
        """
        option = compile_option(spec, description, default, self.negation_prefixes)
        for spelling in option.spellings:
            self._spellings[spelling] = option
            self._derived.discard(spelling)
        if option.negated and option.positive_spelling not in self._spellings:
            self._spellings[option.positive_spelling] = option
            self._derived.add(option.positive_spelling)
        self._options.append(option)
        return option

    def declared(self, spelling):
        """
        Returns True if `spelling` was written in a declaration.

        The positive spelling implied by a negated option (``--foo`` for ``--no-foo``) answers :meth:`lookup` but is
        not declared, so it never hides a help or version flag.
        """
        spelling = self.normalize(spelling)
        return spelling in self._spellings and spelling not in self._derived

    @staticmethod
    def normalize(spelling):
        """Adds dashes to a bare spelling: 'f' -> '-f', 'foo' -> '--foo'"""
        if spelling.startswith('-'):
            return spelling
        return ('-' if len(spelling) == 1 else '--') + spelling

    def lookup(self, spelling):
        """
        Returns the :class:`Option` registered for `spelling`, or None.

        :param spelling: ``-x``, ``--xxx``, or a bare ``x`` / ``xxx``.
        """
        return self._spellings.get(self.normalize(spelling))

    def looks_like_flag(self, token):
        """
        Returns True if `token` would be recognized as an option rather than as a value.

        This is ``--`` itself, a ``--name`` or ``--name=value`` whose name is registered, or a ``-xyz`` cluster whose
        first letter is registered.
        """
        if token == '--':
            return True
        if token.startswith('--'):
            return token.partition('=')[0] in self._spellings
        if token.startswith('-') and len(token) > 1:
            return token[:2] in self._spellings
        return False

    def __contains__(self, spelling):
        return self.lookup(spelling) is not None

    def __iter__(self):
        """Yields each distinct option still reachable by at least one spelling, in declaration order."""
        live = set(id(option) for option in self._spellings.values())
        for option in self._options:
            if id(option) in live:
                yield option
                live.discard(id(option))

    def __len__(self):
        return sum(1 for _ in self)

    def __repr__(self):
        return "<{}({!r})>".format(type(self).__name__, sorted(self._spellings))
