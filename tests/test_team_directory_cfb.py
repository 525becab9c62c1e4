from src.common.team_directory_cfb import (
    build_logo_map,
    build_team_directory,
    resolve_logo,
    resolve_team,
    schedule_team_names,
)

TEAMS = [
    {
        "school": "Ohio State",
        "mascot": "Buckeyes",
        "abbreviation": "OSU",
        "alternateNames": ["Ohio St", "tOSU"],
        "conference": "Big Ten",
        "logos": ["https://a.espncdn.com/osu.png", "https://a.espncdn.com/osu-dark.png"],
    },
    {
        "school": "Miami",
        "mascot": "Hurricanes",
        "abbreviation": "MIA",
        "alternateNames": ["Miami (FL)", "The U"],
        "conference": "ACC",
        "logos": ["https://a.espncdn.com/miami.png"],
    },
    {
        "school": "Texas A&M",
        "mascot": "Aggies",
        "abbreviation": "TA&M",
        "alternateNames": [],
        "conference": "SEC",
        "logos": ["https://a.espncdn.com/tamu.png"],
    },
    {
        "school": "Kennesaw State",
        "mascot": "Owls",
        "abbreviation": "KENN",
        "alternateNames": None,
        "conference": "Conference USA",
        "logos": [],
    },
]


def test_directory_indexes_every_key_family():
    directory = build_team_directory(TEAMS)
    assert directory.by_school["ohiostate"]["primary_logo"] == "https://a.espncdn.com/osu.png"
    assert directory.by_abbreviation["osu"]["school"] == "Ohio State"
    assert directory.by_alternate["ohiost"]["school"] == "Ohio State"
    assert directory.by_alternate["ohiostatebuckeyes"]["school"] == "Ohio State"
    assert directory.by_abbreviation["taandm"]["school"] == "Texas A&M"


def test_directory_entry_without_logos_has_none_logo():
    directory = build_team_directory(TEAMS)
    assert directory.by_school["kennesawstate"]["primary_logo"] is None
    assert directory.by_school["kennesawstate"]["alternate_names"] == []


def test_directory_legacy_alt_name_fields():
    directory = build_team_directory(
        [{"school": "UTSA", "alt_name1": "UT San Antonio", "alt_name2": "", "logos": ["u.png"]}]
    )
    assert directory.by_alternate["utsanantonio"]["school"] == "UTSA"


def test_directory_collisions_are_last_write_wins():
    directory = build_team_directory(
        [
            {"school": "Miami", "logos": ["first.png"]},
            {"school": "MIAMI", "logos": ["second.png"]},
        ]
    )
    assert directory.by_school["miami"]["primary_logo"] == "second.png"


def test_directory_skips_rows_without_school():
    directory = build_team_directory([{"mascot": "Ghosts"}, "junk", None])
    assert directory.by_school == {}


def test_resolve_logo_is_case_and_punctuation_insensitive():
    directory = build_team_directory(TEAMS)
    assert resolve_logo("Ohio State", directory) == resolve_logo("OHIO STATE", directory)
    assert resolve_logo("ohio-state", directory) == "https://a.espncdn.com/osu.png"


def test_resolve_team_fallback_chain():
    directory = build_team_directory(TEAMS)
    assert resolve_team("tOSU", directory)["school"] == "Ohio State"
    assert resolve_team("Miami Hurricanes", directory)["school"] == "Miami"
    assert resolve_team("OSU", directory)["school"] == "Ohio State"


def test_resolve_team_strips_parenthetical_suffix():
    directory = build_team_directory([{"school": "Miami", "logos": ["m.png"]}])
    assert resolve_logo("Miami (FL)", directory) == "m.png"


def test_resolve_team_prefers_alternate_over_paren_strip():
    directory = build_team_directory(
        [
            {"school": "Miami", "logos": ["fl.png"]},
            {"school": "M-OH", "alternateNames": ["Miami (OH)"], "logos": ["oh.png"]},
        ]
    )
    assert resolve_logo("Miami (OH)", directory) == "oh.png"


def test_resolve_logo_explicit_none():
    directory = build_team_directory(TEAMS)
    assert resolve_logo("Kennesaw State", directory) is None
    assert resolve_logo("Nowhere Tech", directory) is None
    assert resolve_logo(None, directory) is None


def test_schedule_team_names_unique_in_order():
    games = [
        {"homeTeam": "Ohio State", "awayTeam": "Akron"},
        {"home_team": "Akron", "away_team": "Miami (FL)"},
        {"homeTeam": "Ohio State", "awayTeam": None},
    ]
    assert schedule_team_names(games) == ["Ohio State", "Akron", "Miami (FL)"]


def test_build_logo_map_includes_misses_and_canonical_schools():
    directory = build_team_directory(TEAMS)
    logos = build_logo_map(["OHIO STATE", "Miami (FL)", "Akron"], directory)
    assert logos["OHIO STATE"] == "https://a.espncdn.com/osu.png"
    assert logos["Miami (FL)"] == "https://a.espncdn.com/miami.png"
    assert "Akron" in logos and logos["Akron"] is None
    assert logos["Ohio State"] == "https://a.espncdn.com/osu.png"
    assert logos["Texas A&M"] == "https://a.espncdn.com/tamu.png"
    assert "Kennesaw State" in logos and logos["Kennesaw State"] is None


def test_build_logo_map_keeps_schedule_value_for_canonical_name():
    directory = build_team_directory([{"school": "Army", "logos": ["army.png"]}])
    logos = build_logo_map(["Army"], directory)
    assert logos == {"Army": "army.png"}


def test_resolve_team_prefers_school_over_alternate():
    directory = build_team_directory(
        [
            {"school": "Georgia", "logos": ["uga.png"]},
            {"school": "Georgia Southern", "alternateNames": ["Georgia"], "logos": ["gaso.png"]},
        ]
    )
    assert resolve_logo("Georgia", directory) == "uga.png"
    assert resolve_logo("GEORGIA", directory) == "uga.png"


def test_resolve_team_prefers_paren_strip_over_abbreviation():
    directory = build_team_directory(
        [
            {"school": "Miami", "abbreviation": "MIA", "logos": ["fl.png"]},
            {"school": "Miami RedHawks", "abbreviation": "Miami-OH", "logos": ["oh.png"]},
        ]
    )
    assert resolve_logo("Miami (OH)", directory) == "fl.png"
    assert resolve_logo("MIAMI OH", directory) == "oh.png"


def test_build_logo_map_keeps_colliding_school_names():
    directory = build_team_directory(
        [
            {"school": "Miami", "logos": ["a.png"]},
            {"school": "MIAMI", "logos": ["b.png"]},
        ]
    )
    assert [entry["school"] for entry in directory.entries] == ["Miami", "MIAMI"]
    assert build_logo_map([], directory) == {"Miami": "a.png", "MIAMI": "b.png"}
