"""Tests for the helper functions."""
import pytest

from itempages.utils.misc import (average, chunk, clone, decamelise, hyphenate,
                                  is_array_like, is_numeric, to_pos_int)


@pytest.mark.parametrize("value, expected", [
    (10, True), ('10', True), (10.5, True), ('a', False), (None, False),
    (float('nan'), False), (float('inf'), False), (True, False),
])
def test_is_numeric(value, expected):
    assert is_numeric(value) is expected


@pytest.mark.parametrize("value, expected", [
    (10, 10), (-10, 10), ('10', 10), (10.7, 10), ('-2.5', 2), ('x', None),
])
def test_to_pos_int(value, expected):
    assert to_pos_int(value) == expected


@pytest.mark.parametrize("value, expected", [
    ([], True), ('', True), ((1,), True), (range(3), True),
    (0, False), ({}, False), (None, False), ({1, 2}, False),
])
def test_is_array_like(value, expected):
    assert is_array_like(value) is expected


def test_chunk():
    assert chunk([1, 2, 3, 4, 5], 3) == [[1, 2, 3], [4, 5]]
    assert chunk('12345', 2) == [['1', '2'], ['3', '4'], ['5']]
    assert chunk([1, 2], 0) == [[1], [2]]
    assert chunk([], 3) == []


def test_clone_copies_containers_only():
    marker = object()
    source = {'a': [1, {'b': 2}], 't': (1, [2]), 'o': marker}
    copy = clone(source)

    assert copy == source
    assert copy['a'] is not source['a']
    assert copy['a'][1] is not source['a'][1]
    assert copy['t'][1] is not source['t'][1]
    assert copy['o'] is marker


def test_average():
    assert average(1, 2, 3) == 2
    assert average(15, 5, 10) == 10
    assert average() == 0


def test_name_conversion():
    assert hyphenate('fontFamily') == 'font-family'
    assert decamelise('FontFamily') == 'font_family'
    assert decamelise('line_width') == 'line_width'


def test_huge_numbers():
    assert is_numeric(10**400)
    assert to_pos_int(-10**400) == 10**400
    assert to_pos_int(2**53 + 1) == 2**53 + 1
    assert chunk([1, 2], 10**400) == [[1, 2]]
    assert average(10**400, 10**400) == 10**400
