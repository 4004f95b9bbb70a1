from news_reels.text import clean_model_json, prepare_text, title_width


def test_fenced_json_matches_unfenced_payload():
    raw = '{"India": [], "World": []}'
    fenced = f"```json\n{raw}\n```"

    assert clean_model_json(fenced) == clean_model_json(raw) == raw


def test_fence_tag_is_case_insensitive_and_plain_fence_works():
    raw = '{"a": 1}'
    assert clean_model_json(f"```JSON\n{raw}\n```") == raw
    assert clean_model_json(f"```\n{raw}\n```") == raw


def test_prose_around_object_is_dropped():
    text = 'Here is the bulletin:\n{"a": {"b": 2}}\nHope this helps!'
    assert clean_model_json(text) == '{"a": {"b": 2}}'


def test_empty_input_becomes_empty_object():
    assert clean_model_json("") == "{}"
    assert clean_model_json(None) == "{}"


def test_prepare_text_wraps_on_spaces():
    wrapped = prepare_text("one two three four", 9)
    assert wrapped == "one two\nthree\nfour"
    assert all(len(line) <= 9 for line in wrapped.split("\n"))


def test_prepare_text_keeps_long_words_whole():
    assert prepare_text("supercalifragilistic go", 5) == "supercalifragilistic\ngo"


def test_title_width_per_language():
    assert title_width("english") == 40
    assert title_width("gujarati") == 36
    assert title_width("hindi") == 38
