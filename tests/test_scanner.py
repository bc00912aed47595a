from jsoncompact.scanner import scan_quoted, tokenize


def test_structural_characters_are_single_tokens():
    assert tokenize("{a[1 2]}") == ["{", "a", "[", "1", "2", "]", "}"]


def test_separators_produce_no_tokens():
    assert tokenize("{a\t1\nb  2}") == ["{", "a", "1", "b", "2", "}"]
    assert tokenize("   ") == []


def test_quoted_token_keeps_quotes():
    assert tokenize('{"deciduous trees"[beech oak]}') == ["{", '"deciduous trees"', "[", "beech", "oak", "]", "}"]


def test_escaped_quote_does_not_end_token():
    assert tokenize('[a "He said \\"hi\\"" b]') == ["[", "a", '"He said \\"hi\\""', "b", "]"]


def test_unterminated_quote_runs_to_end():
    assert tokenize('[1 "abc') == ["[", "1", '"abc']
    assert scan_quoted('"abc\\', 0) == 5


def test_bare_atom_stops_at_structure():
    assert tokenize("key{x}") == ["key", "{", "x", "}"]
    assert tokenize("a]b") == ["a", "]", "b"]


def test_unicode_atoms():
    assert tokenize("[Grüße 日本語]") == ["[", "Grüße", "日本語", "]"]


def test_verbatim_json_value_splits_at_inner_quote():
    assert tokenize('{json "{"key": "value"}"}') == ["{", "json", '"{"', 'key":', '"value"', "}", '"}']
