"""Interactive terminal front end"""

from .tui import TerminalTUI

__all__ = ['TerminalTUI']
