from conftest import LANGUAGES, make_payload

from news_reels.domain.models import NewsDigest, Reel, RunReport


def test_from_payload_assigns_ids_india_first():
    digest = NewsDigest.from_payload(make_payload(india=2, world=1))

    assert [item.item_id for item in digest.items] == [0, 1, 2]
    assert [item.is_india for item in digest.items] == [True, True, False]
    assert digest.items[0].languages == LANGUAGES


def test_region_flag_key_is_not_a_language():
    digest = NewsDigest.from_payload(make_payload())
    assert "india" not in digest.languages()
    assert digest.india[0].translation("hindi").title == "India 1 title in hindi"


def test_malformed_regions_and_entries_are_skipped():
    digest = NewsDigest.from_payload({"India": "not a list", "World": [42, make_payload()["World"][0]]})

    assert digest.india == ()
    assert len(digest.world) == 1
    assert digest.world[0].item_id == 0
    assert not digest.is_empty


def test_entry_without_languages_is_dropped_and_ids_stay_dense():
    world = make_payload()["World"][0]
    digest = NewsDigest.from_payload({"India": [{}, {"india": True}], "World": [world]})

    assert digest.india == ()
    assert [item.item_id for item in digest.items] == [0]
    assert NewsDigest.from_payload({"India": [{}], "World": []}).is_empty


def test_segments_follow_item_then_language_order():
    segments = NewsDigest.from_payload(make_payload()).segments()

    assert len(segments) == 6
    assert [(s.number, s.language) for s in segments] == [
        (1, "gujarati"), (1, "hindi"), (1, "english"),
        (2, "gujarati"), (2, "hindi"), (2, "english"),
    ]
    assert segments[0].is_india and not segments[3].is_india
    assert segments[4].description == "World 1 description in hindi"


def test_payload_dump_shape():
    dumped = NewsDigest.from_payload(make_payload()).to_payload()

    assert set(dumped) == {"India", "World", "title", "tags", "hashtags"}
    assert dumped["India"][0]["india"] is True
    assert "india" not in dumped["World"][0]
    assert NewsDigest.from_payload(dumped) == NewsDigest.from_payload(make_payload())


def test_seo_tags_split_into_list():
    digest = NewsDigest.from_payload(make_payload())
    assert digest.seo.tag_list == ["india news", "world news", "breaking news"]


def test_empty_digest():
    empty = NewsDigest.empty()
    assert empty.is_empty
    assert empty.segments() == []
    assert empty.to_payload()["India"] == []


def test_run_report_success_requires_every_reel():
    report = RunReport(date="2025-09-22", output_dir="out")
    assert not report.succeeded

    report.reels = [Reel("english", path="a.mp4"), Reel("hindi", error="boom")]
    assert not report.succeeded
    assert report.failed_languages == ["hindi"]

    report.reels = [Reel("english", path="a.mp4")]
    assert report.succeeded
