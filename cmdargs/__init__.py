"""
Command-line option and argument parsing.

This package turns a sequence of argument tokens into structured values, based on a short declaration of the flags
and positional arguments a command accepts.

Options
=======
Options are declared with the same text you might put in a help listing, e.g. ``-c, --color <color>``.  See
:mod:`cmdargs.options` for the syntax.  Long names are exposed in camel case (``--dry-run`` -> ``dryRun``) and long
names starting with ``no-`` or ``not-`` are negated flags.

Usage patterns
==============
Positional arguments are declared as a one-line usage pattern such as ``[foo] <bar> [<baz>...]``.  See
:mod:`cmdargs.usage`.

Parsing
=======
:meth:`Command.parse` recognizes options, binds the remaining tokens to the usage slots and stores the outcome as the
command's :attr:`~Command.options`, :attr:`~Command.args` and :attr:`~Command.etc` until the next parse (or
:meth:`~Command.unparse`).  See :mod:`cmdargs.parser` for the details.
"""
from .exc import *
from .core import *
from .config import *
from .options import *
from .usage import *
from .parser import *
from .command import *
