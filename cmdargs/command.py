"""
Commands.

A :class:`Command` ties together an option registry, a usage pattern and the most recent parse result::

    cmd = Command('paint')
    cmd.usage('[foo] <bar>')
    cmd.option('-c, --color <color>', 'Paint color')
    cmd.option('-F, --not-free')

    cmd.parse(['-Fc', 'blue', 'a', 'b', 'c'])
    cmd.options     # {'free': False, 'color': 'blue'}
    cmd.args        # {'foo': 'a', 'bar': 'b'}
    cmd.etc         # ['c']

Rendering help or version text, sub-command dispatch and exiting the process are left to the caller.  :meth:`help`
and :meth:`version` are the hooks for that; override them (or replace them on the instance) to do something useful.
"""
import logging

from .config import Config
from .core import ArgumentList
from .options import OptionRegistry
from .parser import Parser
from .usage import compile_usage, format_usage

__all__ = ['Command']

logger = logging.getLogger(__name__)


class Command:
    """
    One node of a command tree.

    :ivar name: Command name, used in help.  May be None for the root command.
    :ivar config: :class:`~cmdargs.config.Config` supplying parser settings.
    :ivar parent: Parent :class:`Command`, or None.
    :ivar commands: Dictionary of sub-command name -> :class:`Command`.
    """
    def __init__(self, name=None, config=None, parent=None):
        """
        Creates a new command.

        :param name: Command name.
        :param config: :class:`~cmdargs.config.Config` instance.  Defaults are used if None.
        :param parent: Parent command, if this is a sub-command.
        """
        if config is None:
            config = Config()
        self.name = name
        self.config = config
        self.parent = parent
        self.commands = {}
        self._registry = OptionRegistry(config.parser.negation_prefixes)
        self._slots = ()
        self._version = None
        self._result = None

    @property
    def registry(self):
        """The :class:`~cmdargs.options.OptionRegistry` holding declared options."""
        return self._registry

    @property
    def slots(self):
        """Tuple of compiled usage :class:`~cmdargs.usage.Slot`"""
        return self._slots

    def option(self, spec, description=None, default=None):
        """
        Declares an option.

        :param spec: Declaration text, e.g. ``-c, --color <color>``
        :param description: Optional help text.
        :param default: Value used when the option is absent.
        :return: The new :class:`~cmdargs.options.Option`
        """
        return self._registry.declare(spec, description, default)

    def usage(self, pattern=None):
        """
        Sets the positional argument pattern, replacing any previous one.

        :param pattern: Usage pattern, e.g. ``<source>... <dest>``.  If None, returns the current pattern text instead.
        :return: `self`, or the pattern text.
        """
        if pattern is None:
            return format_usage(self._slots)
        self._slots = compile_usage(pattern)
        return self

    def command(self, name):
        """
        Returns the sub-command named `name`, creating it if needed.

        Sub-commands share our config.  Routing to them is up to the caller.
        """
        try:
            return self.commands[name]
        except KeyError:
            pass
        child = type(self)(name, config=self.config, parent=self)
        self.commands[name] = child
        return child

    def version(self, text=None):
        """
        With `text`, sets the version string and enables the version flags.  Returns `self`.

        Without `text`, this is the hook called when a parse sees a version flag.  The default implementation returns
        the version string.
        """
        if text is not None:
            self._version = str(text)
            return self
        return self._version

    def help(self):
        """
        Hook called when a parse sees a help flag.  The default implementation returns a one-line usage summary.
        """
        parts = [self.full_name or '']
        if len(self._registry):
            parts.append('[options]')
        if self._slots:
            parts.append(format_usage(self._slots))
        return "Usage: " + " ".join(part for part in parts if part)

    @property
    def full_name(self):
        """Space-separated names from the root command down to us."""
        names = []
        command = self
        while command is not None:
            if command.name:
                names.append(command.name)
            command = command.parent
        return " ".join(reversed(names))

    @property
    def help_flags(self):
        """Configured help spellings that have not been declared as ordinary options."""
        return tuple(flag for flag in self.config.parser.help_flags if not self._registry.declared(flag))

    @property
    def version_flags(self):
        """Configured version spellings, if a version is set, that have not been declared as ordinary options."""
        if self._version is None:
            return ()
        return tuple(flag for flag in self.config.parser.version_flags if not self._registry.declared(flag))

    def parser(self):
        """Returns a :class:`~cmdargs.parser.Parser` reflecting our current declarations."""
        return Parser(
            self._registry, self._slots,
            help_flags=self.help_flags, version_flags=self.version_flags,
            coerce_numbers=self.config.parser.coerce_numbers, command=self
        )

    def parse(self, argv=None):
        """
        Parses a sequence of tokens, replacing any previous result.

        If a help or version flag is seen, parsing stops there and the :meth:`help` or :meth:`version` hook is called.

        :param argv: Sequence of tokens, with the interpreter and script entries already removed (e.g.
            ``sys.argv[1:]``).  None is treated as no tokens.
        :return: The new :class:`~cmdargs.core.ParseResult`
        :raises: :class:`~cmdargs.exc.ArgumentError` if the tokens don't fit.  Our previous result is kept.
        """
        tokens = [] if argv is None else [token if isinstance(token, str) else str(token) for token in argv]
        logger.debug("Parsing {!r} for {!r}".format(tokens, self))
        result = self.parser().parse(tokens)
        self._result = result
        if result.help_requested:
            self.help()
        elif result.version_requested:
            self.version()
        return result

    def parse_line(self, text):
        """
        Splits a line of text on whitespace and parses the words.  No shell quoting is performed.

        :param text: Line of text.
        :return: The new :class:`~cmdargs.core.ParseResult`
        """
        return self.parse(ArgumentList(text))

    def unparse(self):
        """Discards the last parse result.  Declarations are kept.  Returns `self`."""
        self._result = None
        return self

    @property
    def result(self):
        """The last :class:`~cmdargs.core.ParseResult`, or None."""
        return self._result

    def _parsed(self, attr):
        if self._result is None:
            raise AttributeError("{} has not been parsed".format(attr))
        return getattr(self._result, attr)

    @property
    def options(self):
        """Parsed options.  Raises AttributeError if we haven't been parsed."""
        return self._parsed('options')

    @property
    def args(self):
        """Parsed positional arguments.  Raises AttributeError if we haven't been parsed."""
        return self._parsed('args')

    @property
    def etc(self):
        """Leftover positional tokens.  Raises AttributeError if we haven't been parsed."""
        return self._parsed('etc')

    def __repr__(self):
        return "<{}({!r})>".format(type(self).__name__, self.full_name or None)
