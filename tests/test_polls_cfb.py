import pytest

from src.common.polls_cfb import AP_POLL, COACHES_POLL, extract_polls


def _ranks(*teams):
    return [{"rank": idx + 1, "school": team, "conference": "SEC", "points": 100 - idx} for idx, team in enumerate(teams)]


RANKINGS = [
    {"season": 2024, "week": 3, "polls": [{"poll": AP_POLL, "ranks": _ranks("Texas")}]},
    {"season": 2024, "week": 1, "polls": [
        {"poll": AP_POLL, "ranks": list(reversed(_ranks("Georgia", "Ohio State")))},
        {"poll": COACHES_POLL, "ranks": _ranks("Georgia")},
    ]},
    {"season": 2024, "week": 2, "polls": [{"poll": "FCS Coaches Poll", "ranks": _ranks("Montana State")}]},
]


def test_extract_polls_all_stops_at_first_gap():
    buckets = extract_polls(RANKINGS, "all")
    assert [b["week"] for b in buckets] == [1]


def test_extract_polls_latest_returns_single_bucket():
    buckets = extract_polls(RANKINGS, "latest")
    assert len(buckets) == 1
    assert buckets[0]["week"] == 1
    assert buckets[0] == extract_polls(RANKINGS, "all")[-1]


def test_extract_polls_orders_entries_by_rank():
    bucket = extract_polls(RANKINGS, "all")[0]
    assert [e["rank"] for e in bucket["ap"]] == [1, 2]
    assert bucket["ap"][0]["team"] == "Georgia"
    assert bucket["ap"][0]["points"] == 100
    assert bucket["coaches"] == [{"rank": 1, "team": "Georgia", "conference": "SEC", "points": 100}]


def test_extract_polls_one_poll_is_enough_to_continue():
    rankings = [
        {"week": 1, "polls": [{"poll": AP_POLL, "ranks": _ranks("A")}]},
        {"week": 2, "polls": [{"poll": COACHES_POLL, "ranks": _ranks("B")}]},
    ]
    buckets = extract_polls(rankings, "all")
    assert [b["week"] for b in buckets] == [1, 2]
    assert buckets[0]["coaches"] == []
    assert buckets[1]["ap"] == []
    assert extract_polls(rankings, "latest")[0]["week"] == 2


def test_extract_polls_missing_week_sorts_first():
    rankings = [
        {"week": 1, "polls": [{"poll": AP_POLL, "ranks": _ranks("A")}]},
        {"polls": [{"poll": COACHES_POLL, "ranks": _ranks("Pre")}]},
    ]
    assert [b["week"] for b in extract_polls(rankings, "all")] == [0, 1]


def test_extract_polls_empty_or_no_tracked_polls():
    assert extract_polls([], "all") == []
    assert extract_polls(None, "latest") == []
    assert extract_polls([{"week": 1, "polls": []}], "latest") == []


def test_extract_polls_unknown_mode():
    with pytest.raises(ValueError):
        extract_polls(RANKINGS, "first")
