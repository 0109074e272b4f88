"""
Tests for palindrome_filter.cli module.
"""
import pytest

from palindrome_filter.cli import main


class TestListBackends:
    def test_lists_all(self, capsys):
        assert main(['--list-backends']) == 0
        out = capsys.readouterr().out
        for name in ('threads', 'processes', 'numba'):
            assert name in out


class TestRun:
    def test_quiet_prints_count(self, capsys):
        assert main(['--start', '0', '--stop', '200', '--backend', 'threads',
                     '--workers', '2', '--quiet']) == 0
        assert capsys.readouterr().out.strip() == "29"

    def test_negative_range_has_no_palindromes(self, capsys):
        assert main(['--start', '-100', '--stop', '0', '--quiet']) == 0
        assert capsys.readouterr().out.strip() == "0"

    def test_show_smallest(self, capsys):
        main(['--start', '10', '--stop', '40', '--quiet', '--show', '2'])
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == ["3", "11 22"]

    def test_verbose_summary(self, capsys):
        assert main(['--stop', '1000', '--backend', 'numba']) == 0
        assert "Palindrome Filter Result" in capsys.readouterr().out

    def test_no_numba(self, capsys):
        assert main(['--stop', '1000', '--no-numba', '--quiet']) == 0
        assert capsys.readouterr().out.strip() == "109"


class TestArgumentErrors:
    def test_range_outside_int32(self):
        with pytest.raises(SystemExit):
            main(['--stop', str(2**31 + 1)])

    def test_stop_below_start(self):
        with pytest.raises(SystemExit):
            main(['--start', '10', '--stop', '5'])

    def test_numba_backend_without_jit(self):
        with pytest.raises(SystemExit):
            main(['--backend', 'numba', '--no-numba'])
