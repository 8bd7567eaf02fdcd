"""
Unit tests for navigation commands

Tests the NavigationCommands class for:
- cd: Change directory with path resolution
- dir/ls: List directory contents
- pwd: Print working directory
"""

import pytest

from dosshell.core.commands.navigation import (NavigationCommands,
                                               create_navigation_commands)


class TestNavigationCommands:
    """Test NavigationCommands through the dispatcher"""

    # cd

    @pytest.mark.unit
    def test_cd_into_directory(self, run, session):
        assert run('cd GAMES') == []
        assert session.cwd == '/GAMES'

    @pytest.mark.unit
    def test_cd_keeps_typed_case(self, run, session):
        run('cd games')
        assert session.cwd == '/games'

    @pytest.mark.unit
    def test_cd_no_args_goes_to_root(self, run, session):
        session.cwd = '/GAMES'
        run('cd')
        assert session.cwd == '/'

    @pytest.mark.unit
    def test_cd_dotdot(self, run, session):
        session.cwd = '/GAMES'
        run('cd ..')
        assert session.cwd == '/'
        run('cd ..')
        assert session.cwd == '/'

    @pytest.mark.unit
    def test_cd_missing(self, run, session):
        assert run('cd NOPE') == ['The system cannot find the path specified: NOPE']
        assert session.cwd == '/'

    @pytest.mark.unit
    def test_cd_into_file(self, run, session):
        assert run('cd README.TXT') == ['Not a directory: README.TXT']
        assert session.cwd == '/'

    # dir

    @pytest.mark.unit
    def test_dir_root(self, run):
        assert run('dir') == ['AUTOEXEC.BAT', 'README.TXT', 'GAMES\\']

    @pytest.mark.unit
    def test_ls_alias(self, run):
        assert run('ls') == run('dir')

    @pytest.mark.unit
    def test_dir_path(self, run):
        assert run('dir /games') == ['README.TXT']

    @pytest.mark.unit
    def test_dir_relative_to_cwd(self, run, session):
        session.cwd = '/GAMES'
        assert run('dir .') == ['README.TXT']
        assert run('dir ..') == ['AUTOEXEC.BAT', 'README.TXT', 'GAMES\\']

    @pytest.mark.unit
    def test_dir_file_prints_name(self, run):
        assert run('dir readme.txt') == ['README.TXT']

    @pytest.mark.unit
    def test_dir_empty(self, run):
        run('mkdir EMPTY')
        assert run('dir EMPTY') == ['Directory is empty']

    @pytest.mark.unit
    def test_dir_missing(self, run):
        assert run('dir NOPE') == ['File not found: NOPE']

    # pwd

    @pytest.mark.unit
    def test_pwd(self, run, session):
        assert run('pwd') == ['/']
        session.cwd = '/GAMES'
        assert run('pwd') == ['/GAMES']

    # Factory

    @pytest.mark.unit
    def test_create_navigation_commands(self):
        commands = create_navigation_commands()
        names = [name for name, _, _ in commands]
        assert names == ['cd', 'dir', 'ls', 'pwd']
        assert all(callable(handler) for _, handler, _ in commands)
        assert all(description for _, _, description in commands)

    @pytest.mark.unit
    def test_handlers_callable_directly(self, session):
        nav = NavigationCommands()
        result = nav.cmd_cd(['GAMES'], session)
        assert result.success
        assert session.cwd == '/GAMES'
