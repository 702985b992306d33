from voxphone.languages import normalize_text


def test_quotes_and_whitespace() -> None:
    assert normalize_text("  “Hello”   ‘world’  ") == "\"Hello\" 'world'"
    assert normalize_text("«Bonjour»") == '"Bonjour"'


def test_titles_expanded() -> None:
    assert normalize_text("Dr. Smith met Mr. Brown") == "Doctor Smith met Mister Brown"
    assert normalize_text("Ms. Green and Mrs. White") == "Miss Green and Mrs White"
    assert normalize_text("apples, pears etc.") == "apples, pears etc"


def test_numbers() -> None:
    assert normalize_text("1,000 people") == "1000 people"
    assert normalize_text("pi is 3.14") == "pi is 3 point 14"
    assert normalize_text("one, two") == "one, two"


def test_cjk_punctuation() -> None:
    assert normalize_text("はい、そうです。") == "はい, そうです."


def test_normalize_is_stable() -> None:
    once = normalize_text("Dr. Who paid 1,250.50 “credits”")
    assert normalize_text(once) == once
