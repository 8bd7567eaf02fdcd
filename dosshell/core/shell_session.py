"""
Interactive shell session.

Ties one Session (cwd + tree) to a registry, dispatcher, history, completer
and output buffer, and triggers persistence after commands that change the
tree. Front ends drive it through submit(), history_up()/history_down() and
complete(); none of them ever raise for a bad command.
"""

import logging
from typing import Callable, List, Optional

from dosshell.core.command_dispatcher import CommandDispatcher, CommandResult, Session
from dosshell.core.command_registry import CommandRegistry
from dosshell.core.commands import register_builtin_commands
from dosshell.core.config import Config
from dosshell.core.filesystem import FilesystemTree
from dosshell.core.history import CommandHistory
from dosshell.core.shell_completer import CompletionResult, ShellCompleter
from dosshell.core.storage import SnapshotWriter, TreeStore

logger = logging.getLogger(__name__)


class OutputBuffer:
    """Ordered display lines; only a clear ever removes any"""

    def __init__(self):
        self.lines: List[str] = []

    def append(self, line: str):
        self.lines.append(line)

    def extend(self, lines: List[str]):
        self.lines.extend(lines)

    def apply(self, result: CommandResult):
        """Add a command's output, clearing first if it asked to"""
        if result.clear_screen:
            self.clear()
        self.extend(result.output_lines)

    def clear(self):
        self.lines = []

    def __len__(self) -> int:
        return len(self.lines)


class ShellSession:
    """One interactive session over a filesystem tree"""

    def __init__(self, tree: Optional[FilesystemTree] = None, username: str = 'USER',
                 store: Optional[TreeStore] = None, async_writes: bool = True,
                 strict_rm: bool = False, history_size: int = 1000,
                 registry: Optional[CommandRegistry] = None):
        """
        Args:
            tree: Tree to operate on (seed content if omitted)
            username: Name shown in the echoed prompt
            store: Where to persist the tree after changes (None disables it)
            async_writes: Write snapshots on a background thread
            strict_rm: Require rm -r for non-empty directories
            history_size: Maximum history entries kept (0 = unbounded)
            registry: Registry to use (built-ins are registered into it)
        """
        self.session = Session(
            tree=tree if tree is not None else FilesystemTree(),
            username=username,
            strict_rm=strict_rm,
        )
        self.registry = register_builtin_commands(registry if registry is not None else CommandRegistry())
        self.history = CommandHistory(max_size=history_size)
        self.dispatcher = CommandDispatcher(self.registry, history=self.history)
        self.completer = ShellCompleter(self.registry, lambda: self.session)
        self.output = OutputBuffer()

        self.store = store
        self.writer = SnapshotWriter(store, async_writes=async_writes) if store else None
        self._closed = False

    @classmethod
    def from_config(cls, config: Config, persist: Optional[bool] = None,
                    username: Optional[str] = None) -> 'ShellSession':
        """
        Build a session from configuration, restoring the saved tree.

        Args:
            config: Loaded configuration
            persist: Override storage.persist
            username: Override the configured user name
        """
        if persist is None:
            persist = bool(config.get('storage.persist', True))

        store = TreeStore(config.storage_path)
        tree = store.load()

        return cls(
            tree=tree,
            username=username or config.username,
            store=store if persist else None,
            async_writes=bool(config.get('storage.async_writes', True)),
            strict_rm=bool(config.get('filesystem.strict_rm', False)),
            history_size=config.get_int('shell.history_size', 1000, minimum=0),
        )

    # ==================== State ====================

    @property
    def cwd(self) -> str:
        return self.session.cwd

    @property
    def tree(self) -> FilesystemTree:
        return self.session.tree

    @property
    def prompt(self) -> str:
        return self.dispatcher.prompt(self.session)

    def register(self, name: str, handler: Callable, description: str = ''):
        """Add or replace a command"""
        self.registry.register(name, handler, description)

    # ==================== Commands ====================

    def submit(self, raw: str) -> CommandResult:
        """
        Execute one input line and append its output to the buffer.

        Persists the tree afterwards if the command changed it.
        """
        revision = self.session.tree.revision
        result = self.dispatcher.execute(raw, self.session)
        self.output.apply(result)

        if self.session.tree.revision != revision:
            self.persist()

        return result

    def persist(self):
        """Queue a snapshot of the current tree (no-op without a store)"""
        if self.writer is None:
            return
        try:
            snapshot = self.session.tree.snapshot()
        except Exception as e:
            logger.error(f"Could not snapshot filesystem: {e}")
            return
        self.writer.submit(snapshot)

    # ==================== Interaction ====================

    def history_up(self) -> Optional[str]:
        """Recall an older line; None means leave the input alone"""
        return self.history.previous()

    def history_down(self) -> Optional[str]:
        """Recall a newer line; '' means blank the input"""
        return self.history.next()

    def complete(self, text: str) -> CompletionResult:
        """
        Tab-complete text.

        Several candidates are listed in the output buffer; the caller
        replaces its input with ``result.text`` when that is set.
        """
        result = self.completer.complete(text)
        if result.is_ambiguous:
            self.output.extend(result.candidates)
        return result

    # ==================== Lifecycle ====================

    def close(self):
        """Wait for pending snapshot writes and release the writer"""
        if self._closed:
            return
        self._closed = True
        if self.writer is not None:
            self.writer.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
