"""
Token parsing and positional binding.

Parsing happens in three steps:

1. Options are recognized left to right and removed from the token stream.  Everything else is collected, in order,
   as positional tokens.  ``--`` ends option recognition.  Empty tokens are skipped, except as an option value.
2. Options that were not seen receive their default values.
3. Positional tokens are bound to the usage slots by :func:`bind`.  Whatever is left over ends up in ``etc``.

Short-flag clusters
===================
``-abc`` is read letter by letter.  Boolean letters are simply set.  When a letter takes a value:

- if it is the last letter, its value comes from the next token(s);
- if every remaining letter is itself a registered short flag, the remaining letters are treated as flags.  A letter
  that requires a value then takes it from the tokens after the cluster, in letter order, so ``-cq blue 10`` sets
  ``c='blue'`` and ``q=10``.  A letter with an optional value gets no value (and thus its default);
- otherwise the rest of the cluster is the letter's value: ``-cblue`` sets ``c='blue'``.
"""
import collections
import logging

from .core import ParseResult, ValueMap
from .exc import UnknownOptionError, MissingValueError, UnexpectedValueError, NotEnoughArgumentsError
from .options import Option
from .util import coerce_number, is_number

__all__ = ['Parser', 'bind', 'slot_minimums']

logger = logging.getLogger(__name__)


def slot_minimums(slots):
    """
    Returns a list where item `i` is the fewest tokens that `slots[i:]` can accept.

    The list has one more item than `slots`; the final item is always 0.
    """
    rv = [0] * (len(slots) + 1)
    for index in range(len(slots) - 1, -1, -1):
        rv[index] = rv[index + 1] + slots[index].minimum
    return rv


def bind(slots, tokens, command=None):
    """
    Distributes positional tokens across slots.

    Each slot, in order, takes as many tokens as it can while leaving enough for the minimum of every slot after it.
    Singular slots take at most one token; repeating slots are unbounded.  Optional slots that end up with nothing
    are left out of the result.

    :param slots: Sequence of :class:`~cmdargs.usage.Slot`
    :param tokens: Sequence of positional tokens.
    :param command: `Command` to attach to any error raised.
    :return: Tuple of (:class:`ValueMap` of args, list of leftover tokens)
    :raises: :class:`NotEnoughArgumentsError` if there are fewer tokens than the slots require.
    """
    tokens = list(tokens)
    minimums = slot_minimums(slots)
    if len(tokens) < minimums[0]:
        unmet = [slot for slot in slots if slot.required][len(tokens)]
        raise NotEnoughArgumentsError(command=command, slot=unmet, minimum=minimums[0], got=len(tokens))

    args = ValueMap()
    pos = 0
    for index, slot in enumerate(slots):
        available = len(tokens) - pos - minimums[index + 1]
        take = available if slot.maximum is None else min(slot.maximum, available)
        if take <= 0:
            continue
        values = tokens[pos:pos + take]
        pos += take
        args[slot.name] = values if slot.repeating else values[0]
        logger.debug("Bound {} to {!r}".format(slot.usage, args[slot.name]))
    return args, tokens[pos:]


class Parser:
    """
    Parses one token sequence against an option registry and a compiled usage pattern.

    A parser holds no state between calls to :meth:`parse`, so one instance can be reused.

    :ivar registry: :class:`~cmdargs.options.OptionRegistry` used to recognize flags.
    :ivar slots: Compiled usage slots.
    :ivar help_flags: Spellings that cut parsing short and request help.
    :ivar version_flags: Spellings that cut parsing short and request version information.
    :ivar coerce_numbers: If True, option values that look like numbers are converted to int or float.
    :ivar command: `Command` attached to any errors raised.
    """
    def __init__(self, registry, slots=(), help_flags=(), version_flags=(), coerce_numbers=True, command=None):
        self.registry = registry
        self.slots = tuple(slots)
        self.help_flags = frozenset(help_flags)
        self.version_flags = frozenset(version_flags)
        self.coerce_numbers = coerce_numbers
        self.command = command

    def parse(self, tokens):
        """
        Parses `tokens` and returns a new :class:`ParseResult`.

        :param tokens: Sequence of str.
        :raises: :class:`~cmdargs.exc.ArgumentError` (or a subclass) if the tokens do not fit.
        """
        rargs = collections.deque(tokens)
        positional = []
        options = ValueMap()

        while rargs:
            token = rargs.popleft()
            if not token:
                continue
            if token == '--':
                positional.extend(rest for rest in rargs if rest)
                rargs.clear()
                break
            if token in self.help_flags:
                return self._requested(ParseResult.HELP, token, options)
            if token in self.version_flags:
                return self._requested(ParseResult.VERSION, token, options)
            if token.startswith('--'):
                self._process_long(token, rargs, options)
            elif token.startswith('-') and len(token) > 1 and not self._is_negative_number(token):
                self._process_short(token, rargs, options)
            else:
                positional.append(token)

        self._install_defaults(options)
        args, etc = bind(self.slots, positional, self.command)
        return ParseResult(options, args, etc)

    def _requested(self, what, token, options):
        logger.debug("{!r} requested {}; skipping the rest of the parse".format(token, what))
        self._install_defaults(options)
        return ParseResult(options, requested=what)

    def _is_negative_number(self, token):
        return is_number(token) and token[:2] not in self.registry

    def looks_like_flag(self, token):
        """Returns True if `token` should not be taken as an optional value."""
        return self.registry.looks_like_flag(token) or token in self.help_flags or token in self.version_flags

    def _process_long(self, token, rargs, options):
        spelling, eq, attached = token.partition('=')
        option = self.registry.lookup(spelling)
        if option is None:
            raise UnknownOptionError(command=self.command, token=spelling)
        if not option.takes_value:
            if eq:
                raise UnexpectedValueError(command=self.command, option=option, token=spelling)
            self._store(options, option, option.flag_value(spelling), spelling)
            return
        if eq:
            self._store(options, option, attached, spelling)
            return
        self._take_value(options, option, spelling, rargs)

    def _process_short(self, token, rargs, options):
        letters = token[1:]
        pending = []
        for index, letter in enumerate(letters):
            spelling = '-' + letter
            option = self.registry.lookup(spelling)
            if option is None:
                message = None
                if len(letters) > 1:
                    message = "Unknown option {!r} in {!r}".format(spelling, token)
                raise UnknownOptionError(message, command=self.command, token=spelling)
            if not option.takes_value:
                self._store(options, option, option.flag_value(spelling), spelling)
                continue

            rest = letters[index + 1:]
            if not rest:
                pending.append((option, spelling))
                break
            if all(('-' + ch) in self.registry for ch in rest):
                if option.arity == Option.REQUIRED:
                    pending.append((option, spelling))
                else:
                    self._store_missing(options, option, spelling)
                continue
            self._store(options, option, rest, spelling)
            break

        for option, spelling in pending:
            self._take_value(options, option, spelling, rargs)

    def _take_value(self, options, option, spelling, rargs):
        """Consumes the value for `option` from the head of `rargs`, following its arity."""
        if option.arity == Option.REQUIRED:
            if not rargs:
                raise MissingValueError(command=self.command, option=option, token=spelling)
            self._store(options, option, rargs.popleft(), spelling)
        elif rargs and not self.looks_like_flag(rargs[0]):
            self._store(options, option, rargs.popleft(), spelling)
        else:
            self._store_missing(options, option, spelling)

    def _store(self, options, option, value, spelling):
        if self.coerce_numbers and option.takes_value:
            value = coerce_number(value)
        logger.debug("Recognized {} as {}={!r}".format(spelling, option.name, value))
        options[option.name] = value

    def _store_missing(self, options, option, spelling):
        """An optional-value option was given without a value."""
        if option.default is None:
            logger.debug("Recognized {} without a value; {} has no default".format(spelling, option.name))
            options.pop(option.name, None)
            return
        logger.debug(
            "Recognized {} without a value; using default {}={!r}".format(spelling, option.name, option.default)
        )
        options[option.name] = option.default

    def _install_defaults(self, options):
        for option in self.registry:
            if option.name not in options and option.default is not None:
                options[option.name] = option.default
