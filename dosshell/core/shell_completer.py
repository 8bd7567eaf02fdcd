"""
Tab completion for command names and entries of the current directory.

Completion reads the registry and the tree but never executes anything.
The first token completes against command names; any later token completes
against the names of the children of the current directory.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from dosshell.core.command_registry import CommandRegistry
from dosshell.core.models import DirectoryNode
from dosshell.core.shell_parser import ShellParser
from dosshell.core.vfs import VFSPathParser


@dataclass
class CompletionResult:
    """
    Outcome of pressing Tab.

    ``text`` is the replacement input when exactly one candidate matched,
    otherwise None. ``candidates`` holds every match (listed to the user
    when there is more than one).
    """
    text: Optional[str] = None
    candidates: List[str] = field(default_factory=list)

    @property
    def is_ambiguous(self) -> bool:
        return len(self.candidates) > 1


def quote_token(token: str) -> str:
    """Wrap a token in double quotes if it would otherwise split"""
    if any(char.isspace() for char in token):
        return f'"{token}"'
    return token


class ShellCompleter:
    """Tab completer for shell commands and current-directory names"""

    def __init__(self, registry: CommandRegistry, get_session: Callable):
        """
        Args:
            registry: Registry supplying command names
            get_session: Function returning the live Session (for cwd and tree)
        """
        self.registry = registry
        self.get_session = get_session

    def complete(self, text: str) -> CompletionResult:
        """Complete the input line as typed so far"""
        tokens = ShellParser.tokenize(text.strip()) or ['']

        if len(tokens) == 1:
            candidates = self._complete_commands(tokens[0])
        else:
            candidates = self._complete_names(tokens[-1])

        if len(candidates) != 1:
            return CompletionResult(candidates=candidates)

        completed = [quote_token(t) for t in tokens[:-1]] + [quote_token(candidates[0])]
        return CompletionResult(text=' '.join(completed) + ' ', candidates=candidates)

    def _complete_commands(self, prefix: str) -> List[str]:
        return [name for name in self.registry.names() if name.startswith(prefix)]

    def _complete_names(self, prefix: str) -> List[str]:
        session = self.get_session()
        with session.tree.lock:
            node = VFSPathParser.resolve(session.tree.root, session.cwd)
            if not isinstance(node, DirectoryNode):
                return []
            return [child.name for child in node.children if child.name.startswith(prefix)]
