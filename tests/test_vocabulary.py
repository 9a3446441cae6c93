"""Tests for free-text label resolution against the enumeration tables."""

from __future__ import annotations

import logging

import pytest

from vocabulary import EnumerationIndex, UnknownVocabularyError, vocabulary_key

pytestmark = pytest.mark.unit


def test_vocabulary_key_normalizes_separators() -> None:
    """Case, spaces, underscores and hyphens collapse to one form."""

    assert vocabulary_key(" Double_Black ") == "double-black"
    assert vocabulary_key("British Columbia") == "british-columbia"


@pytest.mark.parametrize(
    ("table", "label", "expected"),
    [
        ("countries", "USA", "usa"),
        ("countries", "Canada", "canada"),
        ("countries", "CA", "canada"),
        ("state_provinces", "British Columbia", "british-columbia"),
        ("difficulty_ratings", "double_black", "double-black"),
        ("riding_styles", "Cross Country", "xc"),
        ("months", "July", "july"),
        ("fitness_levels", "very_fit", "very-fit"),
    ],
)
def test_exact_labels_resolve(index, table, label, expected) -> None:
    """Ids, names, display names and ISO codes all resolve exactly."""

    assert index.resolve(table, label) == expected


@pytest.mark.parametrize(
    ("table", "label", "expected"),
    [
        ("trail_directions", "downhill_only", "down-only"),
        ("route_types", "lift_assisted", "lift-laps"),
        ("route_types", "out_and_back", "out-back"),
        ("regional_calibrations", "standard", "typical"),
        ("regional_calibrations", "very_hard", "harder"),
        ("system_sizes", "massive", "world-class"),
        ("skill_levels", "intermediate", "comfortable"),
        ("months", "Sept", "september"),
    ],
)
def test_aliases_cover_model_drift(index, table, label, expected) -> None:
    """Labels from the older models map onto the normalized ids."""

    assert index.resolve(table, label) == expected


def test_fuzzy_match_is_accepted_and_logged(index, caplog) -> None:
    """A near miss resolves but leaves a warning behind."""

    caplog.set_level(logging.WARNING, logger="vocabulary")
    assert index.resolve("character_tags", "switchback") == "switchbacks"
    assert any("Fuzzy character_tags match" in r.getMessage() for r in caplog.records)


def test_lookup_never_guesses(index) -> None:
    """lookup() only returns exact or alias matches."""

    assert index.lookup("character_tags", "switchback") is None
    assert index.lookup("character_tags", "Switchbacks") == "switchbacks"


def test_unknown_label_raises(index) -> None:
    """Labels with no counterpart raise a LookupError subclass."""

    with pytest.raises(UnknownVocabularyError) as excinfo:
        index.resolve("character_tags", "qqqq")
    assert isinstance(excinfo.value, LookupError)
    assert excinfo.value.table == "character_tags"
    assert index.try_resolve("character_tags", "qqqq") is None


def test_unknown_table_raises_key_error(index) -> None:
    """Asking for a table that does not exist is a programming error."""

    with pytest.raises(KeyError):
        index.resolve("colours", "red")


def test_resolve_many_keeps_first_seen_order(index) -> None:
    """Duplicates collapse while order is preserved."""

    assert index.resolve_many("months", ["Aug", "July", "august"]) == ["august", "july"]


def test_resolve_known_skips_unmatched(index) -> None:
    """resolve_known drops labels that match nothing."""

    assert index.resolve_known("conditions", ["wet", "qqqq", "Tacky"]) == ["wet", "tacky"]


def test_strict_cutoff_disables_fuzzy_matches(seed) -> None:
    """With a cutoff above 100 only exact matches survive."""

    strict = EnumerationIndex(seed, fuzzy_cutoff=101)
    with pytest.raises(UnknownVocabularyError):
        strict.resolve("character_tags", "switchback")


def test_resolve_known_never_fuzzes_negated_labels(index) -> None:
    """A label that negates a tag is dropped, not matched to the tag."""

    assert index.resolve_known("character_tags", ["no jumps"]) == []
    assert index.resolve_known("character_tags", ["no jumps", "Jumps"]) == ["jumps"]
