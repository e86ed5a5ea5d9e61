import itertools

import pytest

from services.ltti_engine.definitions import AXIS_LETTERS, PROFILE_LABELS
from services.ltti_engine.models import ProfileEntry
from services.ltti_engine.scorer import (
    axis_breakdown,
    clamp_answer,
    derive_code,
    empty_score_table,
    percent,
    resolve_profile,
    score,
)


def answers_for(catalog, value):
    return {q.id: value for q in catalog}

def answers_favouring(catalog, winners):
    """Answers 5 on every item targeting a winning letter and 1 elsewhere."""
    return {q.id: 5 if q.target in winners else 1 for q in catalog}


# --- score ---

def test_score_empty_answers_gives_all_zero_table(catalog):
    table = score(catalog, {})
    assert table == empty_score_table()
    assert all(total == 0 for totals in table.values() for total in totals.values())
    assert set(table) == set(AXIS_LETTERS)

@pytest.mark.parametrize("value", [1, 2, 3, 4, 5])
def test_single_answer_moves_both_letters_of_its_axis(catalog, value):
    item = next(q for q in catalog if q.axis == "cognition" and q.target == "X")
    table = score(catalog, {item.id: value})
    assert table["cognition"]["X"] == value
    assert table["cognition"]["R"] == 6 - value
    for axis in ("energy", "action", "control"):
        assert all(total == 0 for total in table[axis].values())

def test_end_to_end_two_energy_answers(catalog):
    table = score(catalog, {1: 5, 2: 1})
    assert table["energy"] == {"I": 10, "E": 2}
    assert derive_code(table)[1] == "I"
    assert derive_code(table) == "SIRD"

@pytest.mark.parametrize("raw, expected", [(9, 5), (6, 5), (0, 1), (-3, 1), (3, 3)])
def test_out_of_range_values_are_clamped(catalog, raw, expected):
    table = score(catalog, {1: raw})
    assert table["energy"] == {"I": expected, "E": 6 - expected}

def test_clamp_answer_bounds():
    assert clamp_answer(1) == 1
    assert clamp_answer(5) == 5
    assert clamp_answer(100) == 5
    assert clamp_answer(-100) == 1

def test_unknown_question_ids_are_inert(catalog):
    assert score(catalog, {999: 5, -1: 2, 0: 4}) == empty_score_table()

def test_none_values_count_as_unanswered(catalog):
    assert score(catalog, {1: None, 2: None}) == empty_score_table()

def test_score_only_visits_given_items(catalog):
    energy_only = [q for q in catalog if q.axis == "energy"]
    table = score(energy_only, answers_for(catalog, 4))
    assert table["energy"] == {"I": 30 * 3, "E": 30 * 3}
    assert table["action"] == {"S": 0, "T": 0}

def test_score_does_not_depend_on_item_order(catalog):
    answers = {q.id: (q.id % 5) + 1 for q in catalog}
    assert score(catalog, answers) == score(list(reversed(catalog)), answers)

def test_score_is_recomputed_from_scratch(catalog):
    answers = {1: 5}
    first = score(catalog, answers)
    second = score(catalog, answers)
    assert first == second
    assert first is not second


# --- derive_code ---

def test_all_neutral_answers_tie_to_sird(catalog):
    table = score(catalog, answers_for(catalog, 3))
    assert table["energy"] == {"I": 90, "E": 90}
    assert derive_code(table) == "SIRD"

def test_all_zero_table_gives_valid_code():
    code = derive_code(empty_score_table())
    assert code == "SIRD"
    assert len(code) == 4

def test_action_axis_uses_o_for_t_side(catalog):
    table = score(catalog, answers_favouring(catalog, {"T", "E", "X", "C"}))
    assert table["action"]["T"] > table["action"]["S"]
    assert derive_code(table) == "OEXC"

def test_derive_code_tolerates_missing_axes():
    assert derive_code({"energy": {"E": 4}}) == "SERD"
    assert derive_code({}) == "SIRD"

def test_single_point_swings_each_letter():
    table = {
        "action": {"S": 10, "T": 11},
        "energy": {"I": 11, "E": 10},
        "cognition": {"R": 10, "X": 11},
        "control": {"D": 11, "C": 10},
    }
    assert derive_code(table) == "OIXD"


# --- resolve_profile ---

def test_every_derivable_code_has_a_profile(catalog):
    for action, energy, cognition, control in itertools.product("ST", "IE", "RX", "DC"):
        table = score(catalog, answers_favouring(catalog, {action, energy, cognition, control}))
        code = derive_code(table)
        profile = resolve_profile(code)
        assert code in PROFILE_LABELS
        assert profile.family != ""
        assert code in profile.title

def test_profile_table_has_16_entries_with_four_families():
    assert len(PROFILE_LABELS) == 16
    families = {entry["family"] for entry in PROFILE_LABELS.values()}
    assert families == {"Freezer", "Écureuil", "Sniper", "Kamikaze"}

def test_resolve_profile_known_code():
    profile = resolve_profile("SIRD")
    assert isinstance(profile, ProfileEntry)
    assert profile.family == "Freezer"
    assert profile.tagline == "Rigueur froide, exécution posée."

@pytest.mark.parametrize("code", ["ZZZZ", "", "sird", "SIRDX"])
def test_resolve_profile_unknown_code_falls_back(code):
    profile = resolve_profile(code)
    assert profile == ProfileEntry(title=code, family="", tagline="")


# --- breakdown ---

@pytest.mark.parametrize("part, whole, expected", [(0, 0, 0), (1, 2, 50), (1, 3, 33), (2, 3, 67), (5, 8, 63), (10, 12, 83)])
def test_percent_rounds_half_up(part, whole, expected):
    assert percent(part, whole) == expected

def test_axis_breakdown_percentages(catalog):
    breakdown = axis_breakdown(score(catalog, {1: 5, 2: 1}))
    energy = breakdown["energy"]
    assert energy.letters == ["I", "E"]
    assert energy.totals == {"I": 10, "E": 2}
    assert energy.percentages == {"I": 83, "E": 17}

def test_axis_breakdown_without_answers_is_zero():
    breakdown = axis_breakdown(empty_score_table())
    for axis, (first, second) in AXIS_LETTERS.items():
        assert breakdown[axis].percentages == {first: 0, second: 0}
