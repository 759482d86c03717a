from owohaptics.game_auth import GameAuth
from owohaptics.sensations import BakedSensation, create_sensation

FIRST = BakedSensation(1, "a", create_sensation(), "0", "f").stringify()
SECOND = BakedSensation(2, "b", create_sensation(intensity=50)).stringify()


def test_create_keeps_only_baked_definitions():
    auth = GameAuth.create([FIRST, "12", SECOND], "5")
    assert auth.sensations == (FIRST, SECOND)
    assert auth.id == "5"


def test_default_and_empty_id():
    assert GameAuth.create([FIRST]).id == "0"
    assert GameAuth.create([FIRST], "").id == "0"


def test_empty_auth_is_empty_string():
    assert str(GameAuth.create([])) == ""


def test_string_joins_with_hash():
    auth = GameAuth.create([FIRST, SECOND])
    assert str(auth).split("#") == [FIRST, SECOND]


def test_parse_round_trip():
    auth = GameAuth.create([FIRST, SECOND], "7")
    parsed = GameAuth.parse(str(auth), "7")
    assert parsed == auth


def test_parse_filters_plain_entries():
    parsed = GameAuth.parse(f"{FIRST}#12#{SECOND}")
    assert parsed.sensations == (FIRST, SECOND)