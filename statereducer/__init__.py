"""
statereducer
------------

A minimal state machine helper which tracks a current state and runs entry and exit hooks
whenever a reducer or an event handler replaces it.
"""

from .version import __version__
from .core import (State, StateMachine, MachineError, create_state_machine)

__copyright__ = "Copyright (c) 2026 statereducer contributors"
__license__ = "MIT"
__summary__ = "A minimal finite state machine helper with entry/exit hooks and event dispatch"
__uri__ = "https://github.com/statereducer/statereducer"
