from raycub.wordtab import find, find_unquoted, split_words


def test_find_locates_first_match():
    text = "ab\"cd\"cd"
    pos = find(text, "cd", len(text))
    assert pos == text.index("cd")
    assert text[pos:pos + 2] == "cd"


def test_find_missing_pattern():
    assert find("abcdef", "xy", 6) == -1


def test_find_pattern_longer_than_limit():
    assert find("abcdef", "abc", 2) == -1


def test_find_stops_at_nul():
    assert find("abc\0def", "def", 7) == -1


def test_find_unquoted_skips_quoted_match():
    text = '"//" x // y'
    pos = find_unquoted(text, "//", len(text))
    assert text[pos:pos + 2] == "//"
    assert pos > text.index('"', 1)
    assert find(text, "//", len(text)) == text.index("//")


def test_find_unquoted_without_quotes_matches_find():
    text = "one /* two */ three"
    assert find_unquoted(text, "/*", len(text)) == find(text, "/*", len(text))


def test_find_unquoted_inside_open_quote_fails():
    text = '"abc /* def'
    assert find_unquoted(text, "/*", len(text)) == -1


def test_find_unquoted_limit():
    assert find_unquoted("abc", "abc", 1) == -1


def test_split_words_on_spaces_and_tabs():
    assert split_words("  16\t16  2 \t1 ") == ["16", "16", "2", "1"]


def test_split_words_keeps_other_characters():
    assert split_words("c #FF0000\nx") == ["c", "#FF0000\nx"]


def test_split_words_blank_text():
    assert split_words(" \t  ") == []
    assert split_words("") == []