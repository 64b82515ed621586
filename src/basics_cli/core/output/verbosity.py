"""How much the basics CLI prints beyond the program's own lines."""

from enum import IntEnum


class Verbosity(IntEnum):
    """Ordered output levels; program lines are printed at every level.

    ``-v`` unlocks ``info``/``detail`` messages and ``-vvv`` also unlocks ``debug``
    messages on stderr.
    """

    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2

    @classmethod
    def from_flags(
        cls,
        verbose: bool = False,
        verbose_debug: bool = False,
    ) -> "Verbosity":
        """Map the group's ``-v``/``-vvv`` flags to a level; ``-vvv`` wins."""
        if verbose_debug:
            return cls.DEBUG
        return cls.VERBOSE if verbose else cls.NORMAL
