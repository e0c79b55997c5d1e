import pytest

from lcbasetools.text_buff import TextBuff


def test_string_round_trip_empties_buffer():
    buff = TextBuff(16)
    assert buff.add_str("abc")
    assert buff.read_str() == "abc"
    assert buff.empty()
    assert buff.num_chars() == 0


def test_strings_come_back_one_at_a_time():
    buff = TextBuff(16)
    buff.add_str("hi")
    buff.add_str("there")
    assert buff.strlen() == len("hi")
    assert buff.read_str() == "hi"
    assert buff.strlen() == len("there")
    assert buff.read_str() == "there"
    assert buff.read_str() == ""


def test_full_without_overwrite_rejects():
    buff = TextBuff(3)
    assert buff.add_str("abc", and_null=False)
    assert buff.full()
    assert buff.add_char("d") is False
    assert buff.read_str() == "abc"


def test_nul_that_does_not_fit_reports_failure():
    buff = TextBuff(3)
    assert buff.add_str("abc") is False
    assert buff.num_chars() == buff.buff_size()


def test_overwrite_drops_oldest():
    buff = TextBuff(3, overwrite=True)
    for char in "abcd":
        assert buff.add_char(char)
    assert buff.full()
    assert buff.read_str() == "bcd"


def test_empty_reads_give_nul():
    buff = TextBuff(4)
    assert buff.peek_head() == "\0"
    assert buff.read_char() == "\0"
    assert buff.peek_index(0) == "\0"


def test_peek_does_not_consume():
    buff = TextBuff(8)
    buff.add_str("xyz", and_null=False)
    assert buff.peek_head() == "x"
    assert buff.peek_index(2) == "z"
    assert buff.peek_index(3) == "\0"
    assert buff.num_chars() == 3


def test_counts_survive_wraparound():
    buff = TextBuff(4)
    buff.add_str("ab", and_null=False)
    assert buff.read_char() == "a"
    buff.add_str("cde", and_null=False)
    assert buff.full()
    assert buff.num_chars() == 4
    assert buff.read_str() == "bcde"


def test_clear_resets():
    buff = TextBuff(2)
    buff.add_str("ab", and_null=False)
    buff.clear()
    assert buff.empty()
    assert not buff.full()
    assert buff.add_char("q")


def test_text_with_embedded_nul_stops_there():
    buff = TextBuff(8)
    buff.add_str("ab\0cd", and_null=False)
    assert buff.num_chars() == 2


@pytest.mark.parametrize("size", [0, -1])
def test_bad_size_raises(size):
    with pytest.raises(ValueError):
        TextBuff(size)


def test_add_char_needs_one_character():
    with pytest.raises(ValueError):
        TextBuff(4).add_char("ab")