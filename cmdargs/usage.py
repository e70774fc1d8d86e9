"""
Usage patterns.

A usage pattern describes a command's positional arguments with the same syntax you would write in a one-line
"Usage: " instruction, e.g.::

    <source>... <dest>
    [foo] <bar> [<baz>...]

Each whitespace-separated token becomes one :class:`Slot`:

=================================== ========== ===========
Token                               Required   Repeating
=================================== ========== ===========
``<name>``                          yes        no
``<name>...``                       yes        yes (1+)
``[name]`` or ``[<name>]``          no         no
``[name...]`` or ``[<name>...]``    no         yes (0+)
=================================== ========== ===========

Angle brackets must be paired, and a name may not start or end with ``.``.  Slots are bound in the order they are
written.
"""
import collections
import re

from .exc import ConfigurationError

__all__ = ['Slot', 'compile_usage', 'format_usage']

_token_re = re.compile(r'\S+')
_slot_re = re.compile(
    r'''
    (?:<(?P<required>%N)>(?P<required_repeat>\.\.\.)?)  # <name> or <name>...
    | (?:\[                                         # begin optional
        (?P<angle><)?(?P<optional>%N)(?(angle)>)    # name or <name>, brackets paired
        (?P<optional_repeat>\.\.\.)?                # optional ellipsis inside the brackets
    \](?P<optional_repeat_outer>\.\.\.)?)           # end, with an optional ellipsis outside
    '''.replace('%N', r'[^\s<>\[\].](?:[^\s<>\[\]]*[^\s<>\[\].])?'), re.VERBOSE
)


class Slot(collections.namedtuple('Slot', 'name required repeating')):
    """
    One declared positional argument.

    :ivar name: Key used in parsed args.
    :ivar required: True if at least one token must be bound.
    :ivar repeating: True if any number of tokens may be bound (a list), rather than at most one (a str).
    """
    __slots__ = ()

    @property
    def minimum(self):
        """Fewest tokens this slot accepts."""
        return 1 if self.required else 0

    @property
    def maximum(self):
        """Most tokens this slot accepts.  None means unbounded."""
        return None if self.repeating else 1

    @property
    def usage(self):
        """Canonical pattern text for this slot."""
        if self.required:
            return "<{}>{}".format(self.name, "..." if self.repeating else "")
        return "[{}{}]".format(self.name, "..." if self.repeating else "")


def compile_usage(pattern):
    """
    Compiles a usage pattern into a tuple of :class:`Slot`

    :param pattern: Pattern text.  None or an empty string yields an empty tuple.
    :return: Tuple of slots, in declaration order.
    :raises: :class:`ConfigurationError` if a token is malformed or a name is used twice.
    """
    if not pattern:
        return ()
    if not isinstance(pattern, str):
        raise ConfigurationError("Usage pattern must be a string, not {!r}".format(pattern))

    slots = []
    names = set()
    for token in _token_re.finditer(pattern):
        match = _slot_re.fullmatch(token.group())
        if match is None:
            raise ConfigurationError("Unexpected characters {!r}".format(token.group()), pattern, token.start())
        if match.group('required') is not None:
            slot = Slot(match.group('required'), True, match.group('required_repeat') is not None)
        else:
            repeating = match.group('optional_repeat') is not None or match.group('optional_repeat_outer') is not None
            slot = Slot(match.group('optional'), False, repeating)
        if slot.name in names:
            raise ConfigurationError("Duplicate argument name {!r}".format(slot.name), pattern, token.start())
        names.add(slot.name)
        slots.append(slot)
    return tuple(slots)


def format_usage(slots):
    """Renders compiled slots back into pattern text."""
    return " ".join(slot.usage for slot in slots)
