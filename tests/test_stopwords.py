from language_resources.stopwords import assemble_stopwords


def test_tokens_are_flattened_in_line_order():
    matcher = assemble_stopwords(["the please", "  can   you  ", "you"])
    assert matcher.tokens == ("the", "please", "can", "you", "you")
    assert len(matcher) == 5


def test_is_stopword_is_exact():
    matcher = assemble_stopwords(["the"])
    assert matcher.is_stopword("the")
    assert not matcher.is_stopword("other")
    assert not matcher.is_stopword("The")


def test_contains_matches_substrings():
    matcher = assemble_stopwords(["the"])
    assert matcher.contains("other")
    assert not matcher.is_stopword("other")
    assert not matcher.contains("something")
    assert not matcher.contains("quick fox")


def test_strip_collapses_and_trims_whitespace():
    matcher = assemble_stopwords(["the"])
    assert matcher.strip("the quick the fox") == "quick fox"
    assert matcher.strip("  the\tquick \n fox the ") == "quick fox"


def test_tokens_are_matched_literally():
    matcher = assemble_stopwords(["a.b", "c+"])
    assert not matcher.contains("axb")
    assert matcher.contains("xa.by")
    assert matcher.strip("x c+ y") == "x y"


def test_find_all_reports_matches_in_order():
    matcher = assemble_stopwords(["please", "the"])
    assert matcher.find_all("open the tab please") == ["the", "please"]


def test_empty_matcher_matches_nothing():
    matcher = assemble_stopwords([])
    assert matcher.tokens == ()
    assert not matcher.contains("anything")
    assert matcher.find_all("anything") == []
    assert matcher.strip("  some   text ") == "some text"
