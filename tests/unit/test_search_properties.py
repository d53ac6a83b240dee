"""Property-based tests for minigrep.search.

Lines are generated without line-boundary characters and joined with a
random choice of ``\\n`` or ``\\r\\n``, so the expected line list is known.
"""

import pytest

hypothesis = pytest.importorskip("hypothesis")

from hypothesis import given  # noqa: E402
from hypothesis import strategies as st  # noqa: E402

from minigrep.search import iter_lines, search, search_case_insensitive  # noqa: E402

line_text = st.text(alphabet=st.characters(exclude_characters="\r\n"), max_size=30)
line_lists = st.lists(line_text, max_size=20)
separators = st.sampled_from(["\n", "\r\n"])
queries = st.text(alphabet=st.characters(exclude_characters="\r\n"), max_size=4)


def _join(lines, separator, trailing):
    contents = separator.join(lines)
    if trailing and lines:
        contents += separator
    return contents


def _expected_lines(lines, trailing):
    # A final empty line with no trailing separator contributes nothing
    if lines and lines[-1] == "" and not trailing:
        return lines[:-1]
    return lines


@pytest.mark.unit
class TestSearchProperties:
    """Laws that hold for every query and contents."""

    @given(line_lists, separators, st.booleans())
    def test_lines_round_trip(self, lines, separator, trailing):
        contents = _join(lines, separator, trailing)
        assert list(iter_lines(contents)) == _expected_lines(lines, trailing)

    @given(line_lists, separators, st.booleans())
    def test_empty_query_returns_every_line(self, lines, separator, trailing):
        contents = _join(lines, separator, trailing)
        assert search("", contents) == list(iter_lines(contents))

    @given(queries, line_lists, separators)
    def test_result_is_exactly_the_containing_lines(self, query, lines, separator):
        contents = separator.join(lines)
        all_lines = list(iter_lines(contents))
        result = search(query, contents)
        assert result == [line for line in all_lines if query in line]
        assert all(query in line for line in result)

    @given(queries, line_lists, separators)
    def test_case_insensitive_law(self, query, lines, separator):
        contents = separator.join(lines)
        expected = [line for line in iter_lines(contents) if query.lower() in line.lower()]
        assert search_case_insensitive(query, contents) == expected

    @given(queries, line_lists)
    def test_case_insensitive_results_are_original_lines(self, query, lines):
        contents = "\n".join(lines)
        original = list(iter_lines(contents))
        for line in search_case_insensitive(query, contents):
            assert line in original

    @given(queries, line_lists)
    def test_search_is_idempotent(self, query, lines):
        contents = "\n".join(lines)
        assert search(query, contents) == search(query, contents)
        assert search_case_insensitive(query, contents) == search_case_insensitive(query, contents)
