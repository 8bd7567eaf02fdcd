"""
Terminal UI for dosshell.

A thin display layer: prompt_toolkit reads one line at a time and routes
Up/Down/Tab to the session's history and completer, rich prints whatever
lines the session appends to its output buffer.
"""

import logging
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.application import run_in_terminal
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from dosshell.core.shell_session import ShellSession

logger = logging.getLogger(__name__)


class TerminalTUI:
    """Interactive MS-DOS style prompt over a ShellSession"""

    EXIT_COMMANDS = {'exit', 'quit'}

    def __init__(self, shell: ShellSession, console: Optional[Console] = None,
                 input=None, output=None):
        """
        Args:
            shell: Session to drive
            console: Rich console to print to (stdout if omitted)
            input: prompt_toolkit input (the terminal if omitted)
            output: prompt_toolkit output (the terminal if omitted)
        """
        self.shell = shell
        self.console = console or Console(highlight=False)
        self._printed = 0

        self.style = Style.from_dict({
            'prompt': '#00aa00 bold',
        })
        self.prompt_session = PromptSession(
            key_bindings=self._build_key_bindings(),
            input=input,
            output=output,
        )

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add('up')
        def _history_up(event):
            text = self.shell.history_up()
            if text is not None:
                self._set_input(event.current_buffer, text)

        @kb.add('down')
        def _history_down(event):
            text = self.shell.history_down()
            if text is not None:
                self._set_input(event.current_buffer, text)

        @kb.add('tab')
        def _complete(event):
            result = self.shell.complete(event.current_buffer.text)
            if result.text is not None:
                self._set_input(event.current_buffer, result.text)
            elif result.is_ambiguous:
                run_in_terminal(self.flush_output)

        return kb

    @staticmethod
    def _set_input(buffer, text: str):
        buffer.text = text
        buffer.cursor_position = len(text)

    def print_header(self):
        """Print welcome header"""
        header_text = Text()
        header_text.append("dosshell", style="bold green")
        header_text.append(" - MS-DOS style virtual filesystem\n", style="dim")
        header_text.append("User: ", style="dim")
        header_text.append(self.shell.session.username, style="bold")

        self.console.print(Panel(header_text, border_style="green"))
        self.console.print("[dim]Type 'help' for commands, 'exit' to quit[/dim]\n")

    def flush_output(self):
        """Print buffer lines not shown yet"""
        lines = self.shell.output.lines
        for line in lines[self._printed:]:
            self.console.print(Text(line))
        self._printed = len(lines)

    def handle_line(self, raw: str) -> bool:
        """
        Submit one line and print its output.

        Returns:
            False when the user asked to leave
        """
        if raw.strip().lower() in self.EXIT_COMMANDS:
            return False

        result = self.shell.submit(raw)

        if result.clear_screen:
            self.console.clear()
            self._printed = 0
        elif raw.strip():
            # prompt_toolkit already left the echoed line on screen
            self._printed += 1

        self.flush_output()
        return True

    def run(self) -> int:
        """Run the prompt loop until exit or EOF"""
        self.print_header()

        try:
            while True:
                try:
                    raw = self.prompt_session.prompt(
                        [('class:prompt', self.shell.prompt)],
                        style=self.style
                    )
                except KeyboardInterrupt:
                    continue
                except EOFError:
                    break

                if not self.handle_line(raw):
                    break
        finally:
            logger.debug(f"Leaving shell after {len(self.shell.history)} commands")
            self.shell.close()

        self.console.print("Goodbye!")
        return 0
