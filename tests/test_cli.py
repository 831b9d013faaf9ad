"""Tests for the page browser command."""
import pytest
from click.testing import CliRunner

from itempages.__main__ import main


@pytest.fixture
def source(tmp_path):
    path = tmp_path / 'items.txt'
    path.write_text('apple\nbanana\n\ncherry\napple\ndate\nelderberry\n')
    return str(path)


def browse(source, commands, *options):
    runner = CliRunner()
    return runner.invoke(main, [source, *options], input='\n'.join(commands) + '\n')


def test_lists_first_page_on_start(source):
    result = browse(source, [], '--page-size', '2')
    assert result.exit_code == 0
    assert 'apple' in result.output
    assert 'banana' in result.output
    assert 'cherry' not in result.output
    assert '(Page 1/3)' in result.output


def test_navigation_commands(source):
    result = browse(source, ['next', 'last', 'next', 'first'], '-n', '2')
    assert result.exit_code == 0
    assert '(Page 2/3)' in result.output
    assert '(Page 3/3)' in result.output
    assert 'elderberry' in result.output
    assert 'ERROR: No next page' in result.output


def test_prev_at_first_page(source):
    result = browse(source, ['prev'])
    assert 'ERROR: No previous page' in result.output


def test_add_and_remove(source):
    result = browse(source, ['add "fig tree"', 'add apple', 'remove 0', 'pagesize 10'])
    assert result.exit_code == 0
    assert "ERROR: 'apple' is already listed" in result.output

    final = result.output.rsplit('already listed', 1)[-1]
    assert 'fig tree' in final
    assert 'banana' in final
    assert 'apple' not in final
    assert '(Page 1/1)' in final


def test_bad_input_is_reported(source):
    result = browse(source, ['remove x', 'remove 99', 'pagesize 0', 'add', 'jump', 'add "oops'])
    assert result.exit_code == 0
    assert "ERROR: 'x' is not an integer value" in result.output
    assert 'ERROR: Index 99 is out of bounds' in result.output
    assert 'ERROR: Page size must be at least 1' in result.output
    assert 'ERROR: Nothing to add' in result.output
    assert 'ERROR: Not a valid command jump' in result.output
    assert 'ERROR: Unterminated quote at column 4' in result.output


def test_stats(source):
    result = browse(source, ['stats'])
    assert 'shortest' in result.output
    assert '10' in result.output


def test_empty_source(tmp_path):
    path = tmp_path / 'empty.txt'
    path.write_text('\n\n')
    result = browse(str(path), ['list', 'stats'])
    assert result.exit_code == 0
    assert '(No items)' in result.output


def test_huge_page_size_in_repl(source):
    result = browse(source, ['pagesize ' + '9' * 400])
    assert result.exception is None
    assert result.exit_code == 0
    assert result.output.count('(Page 1/1)') == 2


@pytest.mark.parametrize("size", ['0', '-3'])
def test_page_size_option_must_be_positive(source, size):
    result = browse(source, [], '--page-size', size)
    assert result.exit_code == 2
    assert 'cherry' not in result.output
