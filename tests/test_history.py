"""Tests for the circular command history.

The buffer keeps only the last ten lines, but every entry keeps the
number it had among all commands ever typed.
"""

from eafitsh.history import HistoryBuffer


class TestRecord:
    """Verify what gets stored."""

    def test_empty_line_is_ignored(self) -> None:
        """Recording an empty string must not bump the counter."""
        history = HistoryBuffer()
        history.record("")
        assert history.total_count == 0
        assert history.entries() == []

    def test_lines_are_numbered_from_one(self) -> None:
        """The first command is number 1."""
        history = HistoryBuffer()
        history.record("ls")
        history.record("echo hola")
        assert history.entries() == [(1, "ls"), (2, "echo hola")]

    def test_wraps_after_capacity(self) -> None:
        """After 12 commands only 3..12 remain, oldest first."""
        history = HistoryBuffer()
        for i in range(1, 13):
            history.record(f"cmd{i}")
        entries = history.entries()
        assert [n for n, _ in entries] == list(range(3, 13))
        assert all(line == f"cmd{n}" for n, line in entries)
        assert history.total_count == 12
        assert len(history) == 10

    def test_custom_size(self) -> None:
        """Smaller buffers wrap sooner."""
        history = HistoryBuffer(size=2)
        for line in ("a", "b", "c"):
            history.record(line)
        assert history.entries() == [(2, "b"), (3, "c")]


class TestRender:
    """Verify the printed listing."""

    def test_render_lists_entries(self, capsys) -> None:
        """Each line shows its number and the command."""
        history = HistoryBuffer()
        history.record("ls")
        history.record("calc 1 + 2")
        history.render()
        out = capsys.readouterr().out
        assert "Ultimos comandos:" in out
        assert "1  ls\n" in out
        assert "2  calc 1 + 2\n" in out

    def test_render_after_wrap(self, capsys) -> None:
        """Evicted entries are not shown."""
        history = HistoryBuffer()
        for i in range(1, 13):
            history.record(f"cmd{i}")
        history.render()
        out = capsys.readouterr().out
        assert "1  cmd1\n" not in out
        assert "2  cmd2\n" not in out
        assert out.index("3  cmd3") < out.index("12  cmd12")
