#!/usr/bin/env python3
"""
dosshell command line interface
"""

import argparse
import json
import logging
import sys
from typing import Optional

from dosshell.core.config import Config, get_config
from dosshell.core.filesystem import FilesystemTree
from dosshell.core.shell_session import ShellSession
from dosshell.core.storage import TreeStore


def setup_logging(verbose: bool = False):
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def load_config(args) -> Config:
    """Load configuration and apply command line overrides (not saved)"""
    config = get_config(args.config)
    config.overrides.clear()
    if args.storage:
        config.overrides['storage.path'] = args.storage
    return config


def build_session(args, config: Config) -> ShellSession:
    persist = False if args.no_persist else None
    return ShellSession.from_config(config, persist=persist, username=args.user)


def cmd_shell(args, config: Config) -> int:
    """Start the interactive terminal"""
    from dosshell.integrations.terminal import TerminalTUI

    shell = build_session(args, config)
    return TerminalTUI(shell).run()


def cmd_run(args, config: Config) -> int:
    """Execute command lines non-interactively and print their output"""
    failed = False

    with build_session(args, config) as shell:
        for line in args.lines:
            result = shell.submit(line)
            output_lines = result.output_lines
            if args.no_echo and line.strip() and not result.clear_screen:
                output_lines = output_lines[1:]
            for output_line in output_lines:
                print(output_line)
            if not result.success:
                failed = True

    return 1 if failed else 0


def cmd_export(args, config: Config) -> int:
    """Print the saved filesystem snapshot as JSON"""
    tree = TreeStore(config.storage_path).load()
    print(json.dumps(tree.snapshot(), indent=2))
    return 0


def cmd_reset(args, config: Config) -> int:
    """Overwrite the saved snapshot with the seed content"""
    store = TreeStore(config.storage_path)
    try:
        store.save(FilesystemTree())
    except OSError as e:
        print(f"Error: could not write {store.path}: {e}")
        return 1
    print(f"Filesystem reset: {store.path}")
    return 0


def cmd_config(args, config: Config) -> int:
    """Show or change a configuration value"""
    if args.config_command == 'path':
        print(config.config_path)
        return 0

    if args.config_command == 'get':
        value = config.get(args.key)
        if value is None:
            print(f"Error: Key '{args.key}' not found")
            return 1
        print(json.dumps(value, indent=2) if isinstance(value, dict) else value)
        return 0

    if args.config_command == 'set':
        # JSON first so numbers and booleans keep their type
        try:
            value = json.loads(args.value)
        except json.JSONDecodeError:
            value = args.value
        try:
            config.set(args.key, value)
        except (OSError, TypeError) as e:
            print(f"Error: could not set {args.key}: {e}")
            return 1
        print(f"Set: {args.key} = {value}")
        return 0

    print(json.dumps(config.config, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dosshell',
        description='dosshell - MS-DOS style shell over a virtual filesystem'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    parser.add_argument('--config', help='Path to config file (default: ~/.dosshell/config.json)')
    parser.add_argument('--storage', help='Path to the filesystem snapshot')
    parser.add_argument('--no-persist', action='store_true', help='Do not save filesystem changes')
    parser.add_argument('--user', help='User name shown in the prompt')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    subparsers.add_parser('shell', help='Start the interactive shell (default)')

    run_parser = subparsers.add_parser('run', help='Run command lines and print their output')
    run_parser.add_argument('lines', nargs='+', help='Command lines, e.g. "dir /GAMES"')
    run_parser.add_argument('--no-echo', action='store_true', help='Do not print the prompt line of each command')

    subparsers.add_parser('export', help='Print the saved filesystem as JSON')
    subparsers.add_parser('reset', help='Reset the saved filesystem to its starting content')

    config_parser = subparsers.add_parser('config', help='Show or change configuration')
    config_subparsers = config_parser.add_subparsers(dest='config_command', help='Config commands')
    config_subparsers.add_parser('show', help='Print the whole configuration (default)')
    config_subparsers.add_parser('path', help='Print the config file path')
    get_parser = config_subparsers.add_parser('get', help='Print one value')
    get_parser.add_argument('key', help='Dot-notation key, e.g. shell.username')
    set_parser = config_subparsers.add_parser('set', help='Set and save one value')
    set_parser.add_argument('key', help='Dot-notation key, e.g. filesystem.strict_rm')
    set_parser.add_argument('value', help='Value (JSON for numbers and booleans)')

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    commands = {
        'shell': cmd_shell,
        'run': cmd_run,
        'export': cmd_export,
        'reset': cmd_reset,
        'config': cmd_config,
    }

    try:
        config = load_config(args)
        return commands[args.command or 'shell'](args, config)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == '__main__':
    sys.exit(main())
