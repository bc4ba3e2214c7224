import pytest
from parametrization import Parametrization

from pymultimap.errors import MalformedPairError
from pymultimap.grouping import GroupingConfigurations, group_lines, parse_pair, render
from pymultimap.multi_value_map import LinkedMultiValueMap, SortedMultiValueMap

LINES = ["b=1", "a = 2", "", "b=3", "c=x=y"]


@Parametrization.autodetect_parameters()
@Parametrization.case(name="simple", line="a=1", separator="=", strip=True, expected=("a", "1"))
@Parametrization.case(name="strip", line=" a = 1 ", separator="=", strip=True, expected=("a", "1"))
@Parametrization.case(name="no_strip", line=" a = 1 ", separator="=", strip=False, expected=(" a ", " 1 "))
@Parametrization.case(name="first_separator_only", line="a=b=c", separator="=", strip=True, expected=("a", "b=c"))
@Parametrization.case(name="empty_value", line="a:", separator=":", strip=True, expected=("a", ""))
def test_parse_pair(line, separator, strip, expected):
    assert parse_pair(line, separator, strip) == expected


def test_parse_pair__missing_separator():
    with pytest.raises(MalformedPairError) as error:
        parse_pair("no separator here")

    assert isinstance(error.value, ValueError)
    assert error.value.line == "no separator here"
    assert error.value.separator == "="


class TestGroupLines:
    def test_linked(self):
        values_map = group_lines(LINES)

        assert isinstance(values_map, LinkedMultiValueMap)
        assert list(values_map.items()) == [("b", ["1", "3"]), ("a", ["2"]), ("c", ["x=y"])]

    def test_sorted(self):
        values_map = group_lines(LINES, GroupingConfigurations(sorted_keys=True))

        assert isinstance(values_map, SortedMultiValueMap)
        assert list(values_map) == ["a", "b", "c"]

    def test_line_endings(self):
        values_map = group_lines(["a=1\n", "a=2\r\n"])
        assert values_map.get("a") == ["1", "2"]

    def test_malformed_line(self):
        with pytest.raises(MalformedPairError):
            group_lines(["a=1", "oops"])


class TestRender:
    def test_all_values(self):
        assert render(group_lines(LINES)) == ["b=1,3", "a=2", "c=x=y"]

    def test_first_only(self):
        configurations = GroupingConfigurations(first_only=True)
        assert render(group_lines(LINES), configurations) == ["b=1", "a=2", "c=x=y"]

    def test_separators(self):
        configurations = GroupingConfigurations(separator=":", values_separator="|")
        values_map = group_lines(["k:1", "k:2"], configurations)

        assert render(values_map, configurations) == ["k:1|2"]
