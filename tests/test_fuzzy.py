from wwedit.fuzzy import fuzzy_find, fuzzy_score


def test_exact_match_score():
    assert fuzzy_score("abc", "abc") == 80


def test_empty_query_scores_zero():
    assert fuzzy_score("anything", "") == 0


def test_not_subsequence():
    assert fuzzy_score("abc", "abd") == -1
    assert fuzzy_score("abc", "cab") == -1
    assert fuzzy_score("", "a") == -1


def test_case_insensitive():
    assert fuzzy_score("ABC", "abc") == fuzzy_score("abc", "abc")
    assert fuzzy_score("abc", "ABC") == fuzzy_score("abc", "abc")


def test_word_boundary_bonus():
    assert fuzzy_score("save-buffer", "b") > fuzzy_score("sabe", "b")


def test_find_filters_and_orders():
    words = ["kill-buffer", "switch-buffer", "exit", "save-buffer"]
    result = fuzzy_find(words, "buf")
    assert set(result) == {"kill-buffer", "switch-buffer", "save-buffer"}
    scores = [fuzzy_score(w, "buf") for w in result]
    assert scores == sorted(scores, reverse=True)


def test_find_empty_words():
    assert fuzzy_find([], "x") == []


def test_find_empty_query_keeps_all_in_order():
    words = ["b", "a", "c"]
    assert fuzzy_find(words, "") == words


def test_find_no_match():
    assert fuzzy_find(["compile", "help"], "zzz") == []