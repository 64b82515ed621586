"""Output strategy module for CLI output with verbosity contracts.

========  =========  =========================================
Level     Flag       User Sees
========  =========  =========================================
NORMAL    (default)  Program lines, results, errors, warnings
VERBOSE   -v         + Operation details
DEBUG     -vvv       + Debug traces (stderr)
========  =========  =========================================

Usage
-----
>>> from basics_cli.core.output import OutputStrategy, Verbosity
>>>
>>> output = OutputStrategy(verbosity=Verbosity.VERBOSE)
>>> output.plain("Hello, world!")
>>> output.info("Additional details...")  # Only shown with -v
"""

from basics_cli.core.output.protocol import OutputStrategyProtocol
from basics_cli.core.output.strategy import OutputStrategy
from basics_cli.core.output.verbosity import Verbosity

__all__ = [
    "OutputStrategy",
    "OutputStrategyProtocol",
    "Verbosity",
]
