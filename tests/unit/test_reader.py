import io

from toyrobot.server.reader import CommandReader


def test_skips_blank_lines():
    reader = CommandReader(["", "  ,  ", "move\n", "\n", "REPORT"])
    assert reader.read_command() == ["MOVE"]
    assert reader.read_command() == ["REPORT"]
    assert reader.read_command() == []
    assert reader.line_count == 5


def test_stays_exhausted():
    reader = CommandReader(io.StringIO("LEFT\n"))
    assert reader.read_command() == ["LEFT"]
    assert reader.read_command() == []
    assert reader.exhausted is True
    assert reader.read_command() == []


def test_iteration_yields_commands_in_order():
    source = io.StringIO("PLACE 0,0,NORTH\n\nmove\nreport\n")
    assert list(CommandReader(source)) == [["PLACE", "0", "0", "NORTH"], ["MOVE"], ["REPORT"]]


def test_empty_source():
    assert list(CommandReader([])) == []
