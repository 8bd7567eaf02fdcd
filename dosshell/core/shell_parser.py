"""
Shell command parser

Splits a raw input line into tokens. Double quotes group words into one
token and are stripped from the result; an unterminated quote simply runs
to the end of the line. There is no escaping, variable expansion or piping.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class ParsedCommand:
    """Represents a parsed shell command"""
    command: str
    args: List[str]
    raw_line: str

    @property
    def is_empty(self) -> bool:
        return not self.command


class ShellParser:
    """Parse shell command lines"""

    QUOTE = '"'

    @staticmethod
    def tokenize(line: str) -> List[str]:
        """
        Quote-aware split on whitespace

        Examples:
            >>> ShellParser.tokenize('echo "a b" c')
            ['echo', 'a b', 'c']
            >>> ShellParser.tokenize('type "MY FILE')
            ['type', 'MY FILE']
        """
        tokens = []
        current = []
        in_quote = False

        for char in line:
            if char == ShellParser.QUOTE:
                in_quote = not in_quote
                continue
            if not in_quote and char.isspace():
                if current:
                    tokens.append(''.join(current))
                    current = []
                continue
            current.append(char)

        if current:
            tokens.append(''.join(current))

        return tokens

    def parse_command(self, line: str) -> ParsedCommand:
        """
        Parse a command line into a lowercased command name and arguments

        Examples:
            >>> cmd = ShellParser().parse_command('DIR /GAMES')
            >>> cmd.command, cmd.args
            ('dir', ['/GAMES'])
        """
        tokens = self.tokenize(line.strip())

        if not tokens:
            return ParsedCommand(command='', args=[], raw_line=line)

        return ParsedCommand(command=tokens[0].lower(), args=tokens[1:], raw_line=line)
