import io

from solong.linereader import LineReader, read_lines


def test_lines_keep_newlines():
    assert read_lines(io.StringIO("ab\ncd")) == ["ab\n", "cd"]


def test_long_lines_span_chunks():
    text = "a very long first line\nand a second one\n"
    assert read_lines(io.StringIO(text)) == ["a very long first line\n", "and a second one\n"]


def test_empty_lines_are_kept():
    assert read_lines(io.StringIO("\n\nx")) == ["\n", "\n", "x"]


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.next_line() is None


def test_none_after_last_line():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.next_line() == "only\n"
    assert reader.next_line() is None


def test_binary_stream():
    assert read_lines(io.BytesIO(b"111\n1P1\n")) == [b"111\n", b"1P1\n"]


def test_round_trip_joins_to_original():
    text = "1111111\n1P0C0E1\n1111111"
    assert "".join(LineReader(io.StringIO(text))) == text


def test_iteration_matches_repeated_next_line():
    text = "x\nyy\nzzz\n"
    reader = LineReader(io.StringIO(text))
    collected = []
    while (line := reader.next_line()) is not None:
        collected.append(line)
    assert collected == list(LineReader(io.StringIO(text)))