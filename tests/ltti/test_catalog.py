import pytest
from collections import Counter

from services.ltti_engine.catalog import get_catalog, get_question, validate_catalog
from services.ltti_engine.definitions import AXIS_LETTERS, OPPOSITE_LETTER, QUESTIONS_PER_AXIS, TOTAL_QUESTIONS
from services.ltti_engine.models import CatalogIntegrityError, QuestionItem


def test_catalog_has_120_unique_ids(catalog):
    ids = [q.id for q in catalog]
    assert len(ids) == TOTAL_QUESTIONS
    assert sorted(ids) == list(range(1, TOTAL_QUESTIONS + 1))

def test_catalog_is_in_authored_order(catalog):
    assert [q.id for q in catalog] == list(range(1, TOTAL_QUESTIONS + 1))
    assert catalog[0].axis == "energy"
    assert catalog[-1].axis == "control"

def test_each_axis_has_30_items_split_15_15(catalog):
    per_axis = Counter(q.axis for q in catalog)
    assert all(per_axis[axis] == QUESTIONS_PER_AXIS for axis in AXIS_LETTERS)
    for axis, letters in AXIS_LETTERS.items():
        targets = Counter(q.target for q in catalog if q.axis == axis)
        assert set(targets) == set(letters)
        assert targets[letters[0]] == 15
        assert targets[letters[1]] == 15

def test_opposite_letters_are_symmetric_pairs():
    for first, second in AXIS_LETTERS.values():
        assert OPPOSITE_LETTER[first] == second
        assert OPPOSITE_LETTER[second] == first

def test_catalog_is_immutable(catalog):
    assert isinstance(catalog, tuple)
    assert get_catalog() is catalog
    with pytest.raises(Exception):
        catalog[0].target = "E"

def test_get_question_by_id():
    question = get_question(2)
    assert question.axis == "energy"
    assert question.target == "E"
    assert get_question(121) is None

def test_validate_catalog_accepts_real_catalog(catalog):
    validate_catalog(catalog)

def test_validate_catalog_rejects_wrong_count(catalog):
    with pytest.raises(CatalogIntegrityError, match="Expected 120 questions"):
        validate_catalog(catalog[:-1])

def test_validate_catalog_rejects_duplicate_id(catalog):
    items = list(catalog)
    items[5] = items[5].model_copy(update={"id": 1})
    with pytest.raises(CatalogIntegrityError, match="Duplicate question ID found: 1"):
        validate_catalog(items)

def test_validate_catalog_rejects_out_of_range_id(catalog):
    items = list(catalog)
    items[-1] = items[-1].model_copy(update={"id": 500})
    with pytest.raises(CatalogIntegrityError, match="outside 1..120"):
        validate_catalog(items)

def test_validate_catalog_rejects_foreign_target_letter(catalog):
    items = list(catalog)
    items[0] = items[0].model_copy(update={"target": "D"})
    with pytest.raises(CatalogIntegrityError, match="not a letter of axis 'energy'"):
        validate_catalog(items)

def test_validate_catalog_rejects_unbalanced_axes(catalog):
    items = list(catalog)
    # Move one energy item onto the action axis
    items[0] = QuestionItem(id=1, text=items[0].text, axis="action", target="S")
    with pytest.raises(CatalogIntegrityError, match="Axis 'energy' has 29 questions"):
        validate_catalog(items)
