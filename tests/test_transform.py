import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.transform import split, strdup, striteri, strjoin, strmapi, strtrim, substr

text = st.text(alphabet=st.characters(blacklist_characters="\0"), max_size=40)


# strdup

@given(text)
def test_strdup_copies_text(s):
    assert strdup(s) == s


def test_strdup_stops_at_nul():
    assert strdup("hello\0world") == "hello"


# substr

def test_substr_from_source_example():
    assert substr("0123456789", 9, 10) == "9"


def test_substr_start_past_end_is_empty():
    assert substr("hello world", 42, 5) == ""
    assert substr("", 0, 42) == ""


@given(text, st.integers(min_value=0, max_value=50), st.integers(min_value=0, max_value=50))
def test_substr_bounded_and_contained(s, start, length):
    result = substr(s, start, length)
    assert len(result) <= length
    if result:
        assert s[start:start + len(result)] == result


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 0, -2)


# strjoin

@given(text, text)
def test_strjoin_concatenates(a, b):
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strjoin_with_empty():
    assert strjoin("", "tripouille") == "tripouille"
    assert strjoin("tripouille", "") == "tripouille"


# strtrim

def test_strtrim_removes_set_from_ends():
    assert strtrim("  hello world  ", " ") == "hello world"


def test_strtrim_empty_inputs():
    assert strtrim("", "") == ""
    assert strtrim("hello", "") == "hello"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


@given(text, st.text(alphabet="abc ", max_size=4))
def test_strtrim_ends_not_in_set(s, charset):
    result = strtrim(s, charset)
    assert result in s
    if result and charset:
        assert result[0] not in charset
        assert result[-1] not in charset


# split

def test_split_source_example():
    assert split("..aaa      aa  a", " ") == ["..aaa", "aa", "a"]


def test_split_words():
    assert split("hello world", " ") == ["hello", "world"]


def test_split_only_separators():
    assert split("     ", " ") == []
    assert split("", " ") == []


def test_split_nul_separator_gives_whole_string():
    assert split("hello world", 0) == ["hello world"]


def test_split_accepts_int_separator():
    assert split("a,b,,c", ord(",")) == split("a,b,,c", ",")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


@given(text, st.sampled_from([" ", ",", "a"]))
def test_split_pieces_nonempty_and_rejoin(s, sep):
    pieces = split(s, sep)
    assert all(piece and sep not in piece for piece in pieces)
    assert "".join(pieces) == s.replace(sep, "")


# strmapi

def test_strmapi_passes_indices():
    seen = []

    def record(i, c):
        seen.append(i)
        return c

    assert strmapi("hello", record) == "hello"
    assert seen == [0, 1, 2, 3, 4]


@given(text)
def test_strmapi_upper_matches_str_upper_for_ascii(s):
    ascii_text = s.encode("ascii", "ignore").decode()
    assert strmapi(ascii_text, lambda _i, c: c.upper()) == ascii_text.upper()


def test_strmapi_empty():
    assert strmapi("", lambda _i, c: c * 2) == ""


# striteri

def test_striteri_modifies_in_place():
    buf = bytearray(b"hello\0xyz")

    def upper(_i, tail):
        tail[0] = ord(chr(tail[0]).upper())

    striteri(buf, upper)
    assert buf == bytearray(b"HELLO\0xyz")


def test_striteri_visits_each_index_until_nul():
    buf = bytearray(b"abc\0def")
    seen = []
    striteri(buf, lambda i, _tail: seen.append(i))
    assert seen == [0, 1, 2]


def test_striteri_stops_when_callback_writes_nul():
    buf = bytearray(b"hello")
    seen = []

    def cut(i, tail):
        seen.append(i)
        if i == 1:
            tail[1] = 0

    striteri(buf, cut)
    assert seen == [0, 1]
    assert buf[2] == 0


def test_striteri_tail_starts_at_index():
    buf = bytearray(b"hello world")
    tails = []
    striteri(buf, lambda _i, tail: tails.append(bytes(tail)))
    assert tails[0] == b"hello world"
    assert tails[-1] == b"d"
    assert len(tails) == len(b"hello world")