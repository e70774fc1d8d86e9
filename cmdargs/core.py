import re

__all__ = ['Argument', 'ArgumentList', 'ValueMap', 'ParseResult']


class Argument(str):
    """
    A word split from a line of text that remembers where it was found.

    :ivar eol: The original line from the start of this word to the end, spacing intact.
    """
    def __new__(cls, word, eol):
        rv = super().__new__(cls, word)
        rv.eol = eol
        return rv


class ArgumentList(list):
    """
    Splits a line of text into words, for callers that have a command line rather than an argument vector.

    Each word is an :class:`Argument`, so the remainder of the line is still available as one solid chunk.  No shell
    quoting is performed.
    """
    pattern = re.compile(r'\S+')

    def __init__(self, text):
        """
        :param text: Line of text.
        """
        self.text = text
        super().__init__(Argument(match.group(), text[match.start():]) for match in self.pattern.finditer(text))


class ValueMap(dict):
    """
    A dict of parsed values that also allows attribute-based access.

    ``result.options.fooBar`` is equivalent to ``result.options['fooBar']``; missing names raise AttributeError, so
    ``hasattr()`` can be used to test for presence.
    """
    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            raise AttributeError(item)

    def __delattr__(self, item):
        try:
            del self[item]
        except KeyError:
            raise AttributeError(item)

    __setattr__ = dict.__setitem__


class ParseResult:
    """
    Stores the outcome of one :meth:`Command.parse` call.

    :ivar options: :class:`ValueMap` of effective option name -> bool, str, int or float.
    :ivar args: :class:`ValueMap` of slot name -> str (or list of str for repeating slots).  Optional slots that
        received nothing are absent.
    :ivar etc: Positional tokens that no slot consumed.
    :ivar requested: None, :attr:`HELP` or :attr:`VERSION` if the parse was cut short by one of those flags.
    """
    HELP = 'help'
    VERSION = 'version'

    def __init__(self, options=None, args=None, etc=None, requested=None):
        self.options = ValueMap(options or {})
        self.args = ValueMap(args or {})
        self.etc = list(etc or [])
        self.requested = requested

    @property
    def help_requested(self):
        """True if this invocation asked for help."""
        return self.requested == self.HELP

    @property
    def version_requested(self):
        """True if this invocation asked for version information."""
        return self.requested == self.VERSION

    def __eq__(self, other):
        if not isinstance(other, ParseResult):
            return NotImplemented
        return (self.options, self.args, self.etc, self.requested) == (
            other.options, other.args, other.etc, other.requested
        )

    def __repr__(self):
        return "<{}(options={!r}, args={!r}, etc={!r}{})>".format(
            type(self).__name__, dict(self.options), dict(self.args), self.etc,
            ", requested={!r}".format(self.requested) if self.requested else ""
        )
