from totokit.hits import calculate_hit_details, hit_rate
from tests.conftest import make_draw

ACTUAL = make_draw(4000, [5, 12, 23, 31, 40, 49], 18)


def test_hit_details_main_numbers_only():
    details = calculate_hit_details([5, 12, 23, 99], ACTUAL)
    assert details.matched_main_numbers == (5, 12, 23)
    assert details.main_hit_count == 3
    assert details.matched_additional_number.number == 18
    assert details.matched_additional_number.matched is False


def test_hit_details_additional_match():
    details = calculate_hit_details([18, 40], ACTUAL)
    assert details.matched_main_numbers == (40,)
    assert details.matched_additional_number.matched is True
    assert details.has_any_hit


def test_matched_numbers_are_sorted():
    details = calculate_hit_details([49, 23, 5], ACTUAL)
    assert details.matched_main_numbers == (5, 23, 49)


def test_no_hits():
    details = calculate_hit_details([1, 2, 3], ACTUAL)
    assert details.main_hit_count == 0
    assert not details.has_any_hit


def test_inputs_not_mutated():
    combination = [40, 5, 18]
    calculate_hit_details(combination, ACTUAL)
    assert combination == [40, 5, 18]
    assert ACTUAL.numbers == (5, 12, 23, 31, 40, 49)


def test_hit_rate_denominator_capped_at_six():
    predicted = [5, 12, 23, 1, 2, 3, 4, 6, 7, 8]
    details = calculate_hit_details(predicted, ACTUAL)
    assert hit_rate(details, predicted, ACTUAL) == 50.0


def test_hit_rate_short_pick_uses_its_own_length():
    predicted = [5, 12, 1, 2]
    details = calculate_hit_details(predicted, ACTUAL)
    assert hit_rate(details, predicted, ACTUAL) == 50.0


def test_hit_rate_empty_pick_is_zero():
    details = calculate_hit_details([], ACTUAL)
    assert hit_rate(details, [], ACTUAL) == 0.0
