"""Tests for line tokenization and pipe splitting."""

from eafitsh.parser import split_pipe, tokenize


class TestTokenize:
    """Verify space-separated argument vectors."""

    def test_collapses_repeated_spaces(self) -> None:
        assert tokenize("a  b   c") == ["a", "b", "c"]

    def test_blank_line_is_empty(self) -> None:
        assert tokenize("   ") == []
        assert tokenize("") == []

    def test_leading_and_trailing_spaces(self) -> None:
        assert tokenize("  echo hola  ") == ["echo", "hola"]

    def test_only_spaces_separate(self) -> None:
        """Tabs are part of a token."""
        assert tokenize("a\tb c") == ["a\tb", "c"]

    def test_argument_limit(self) -> None:
        """Extra tokens past the argv capacity are dropped."""
        line = " ".join(str(i) for i in range(20))
        assert tokenize(line) == [str(i) for i in range(9)]
        assert tokenize("1 + 2 extra", max_args=4) == ["1", "+", "2"]


class TestSplitPipe:
    """Verify splitting at the first pipe."""

    def test_no_pipe(self) -> None:
        assert split_pipe("ls -l") is None

    def test_splits_and_trims_right(self) -> None:
        assert split_pipe("ls |   wc") == ("ls ", "wc")

    def test_first_pipe_only(self) -> None:
        assert split_pipe("a | b | c") == ("a ", "b | c")

    def test_bare_pipe(self) -> None:
        assert split_pipe("|") == ("", "")
