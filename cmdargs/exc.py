"""
Defines exceptions raised while declaring and parsing commands.
"""
__all__ = [
    'ConfigurationError', 'ArgumentError',
    'UnknownOptionError', 'MissingValueError', 'UnexpectedValueError',
    'ArgumentCountError', 'NotEnoughArgumentsError',
]


class ConfigurationError(ValueError):
    """
    Represents an error in an option declaration, usage pattern or settings file.

    When the offending `text` and a `pos` within it are known, :meth:`show` points at the failure.
    """
    def __init__(self, message=None, text=None, pos=None):
        """
        :param message: Error message
        :param text: Declaration text where the error occurred.
        :param pos: Character position in the declaration.
        """
        self.message = message or 'Configuration error'
        self.text = text
        self.pos = pos
        super().__init__(self.message)

    def __str__(self):
        if self.pos is None:
            return self.message
        return "{} at position {}".format(self.message, self.pos)

    def __repr__(self):
        fields = (self.message, self.text, self.pos)
        while len(fields) > 1 and fields[-1] is None:
            fields = fields[:-1]
        return type(self).__name__ + repr(fields)

    def show(self, maxwidth=None, after=10):
        """
        Formats the error as three lines: the declaration, a ``---^`` marker under the failing position, and the
        message.

        :param maxwidth: Trim the declaration to this many characters, marking a cut-off start with ``...``.  None or
            0 means no limit.
        :param after: Characters after the failing position that stay visible when trimming.
        :return: Multiline string, or just ``str(self)`` if there is no text or position.
        """
        for name, value in (('maxwidth', maxwidth), ('after', after)):
            if value is not None and value < 0:
                raise ValueError("{} cannot be negative".format(name))
        if self.text is None or self.pos is None:
            return str(self)

        line = self.text.replace("\n", " ")
        column = self.pos
        if maxwidth:
            stop = min(len(line), column + after + 1)
            first = max(0, stop - maxwidth)
            line = line[first:stop]
            if first:
                line = "..." + line[3:]
            column -= first
        return "\n".join((line, "-" * column + "^", str(self)))


class ArgumentError(Exception):
    """
    Thrown when a command is invoked with tokens that do not fit its declaration.
    """
    def __init__(self, message=None, command=None, option=None, slot=None, token=None):
        """
        Creates a new ArgumentError.

        ArgumentErrors are raised synchronously from :meth:`Command.parse`.  The command's previous parse result is
        left as it was.

        :param message: Error message.
        :param command: The `Command` being parsed.  May be None
        :param option: The `Option` that triggered the error.  May be None
        :param slot: The `Slot` that triggered the error.  May be None
        :param token: The offending token.  May be None
        """
        super().__init__(message)
        self.command = command
        self.option = option
        self.slot = slot
        self.token = token
        self.message = message or self.default_message()

    def default_message(self):
        """Supplies a default message when our message is None on construction."""
        return None

    def __str__(self):
        if self.message:
            return self.message
        return super().__str__()


class UnknownOptionError(ArgumentError):
    """Thrown for a flag spelling (or a letter inside a cluster) that is not registered."""

    def default_message(self):
        if self.token is None:
            return "Unknown option."
        return "Unknown option {!r}".format(self.token)


class MissingValueError(ArgumentError):
    """Thrown when an option requiring a value is the last token."""

    def default_message(self):
        if self.token is None:
            return "Option requires a value."
        return "Option {!r} requires a value".format(self.token)


class UnexpectedValueError(ArgumentError):
    """Thrown when a value is attached (``--flag=value``) to a flag that does not take one."""

    def default_message(self):
        if self.token is None:
            return "Option does not take a value."
        return "Option {!r} does not take a value".format(self.token)


class ArgumentCountError(ArgumentError):
    """Thrown when we had a different number of positional arguments than we expected."""
    def __init__(self, message=None, command=None, slot=None, minimum=None, got=None, **kwargs):
        self.minimum = minimum
        self.got = got
        super().__init__(message, command=command, slot=slot, **kwargs)

    def default_message(self):
        message = "Incorrect number of arguments."
        if self.minimum is None or self.got is None:
            return message
        if self.got < self.minimum:
            message = "Not enough arguments."
        if self.slot is not None:
            message = "{}  {} is required.".format(message, self.slot.usage)
        return "{}  (Expected at least {}, got {})".format(message, self.minimum, self.got)


class NotEnoughArgumentsError(ArgumentCountError):
    """Thrown when we didn't have enough arguments.  `slot` points to the first slot that was unfilled."""
    pass
