import pytest
from solojack.common.util import calculate_chi_square, seeded_index_source


def test_calculate_chi_square():
    observed_values = [10, 20, 30, 40]
    expected_values = [15, 25, 35, 45]
    chi_square_stat = calculate_chi_square(observed_values, expected_values)
    expected_chi_square_stat = sum(
        (o - e) ** 2 / e for o, e in zip(observed_values, expected_values)
    )
    assert chi_square_stat == expected_chi_square_stat

    # Test with empty lists
    assert calculate_chi_square([], []) == 0

    # Test with different lengths of observed and expected values
    with pytest.raises(ValueError) as exc_info:
        calculate_chi_square([10, 20, 30, 40], [15, 25])
    assert (
        str(exc_info.value)
        == "Observed and expected value lists must have the same length."
    )


def test_seeded_index_source_stays_in_range():
    index_source = seeded_index_source(1)
    for n in range(1, 53):
        assert 0 <= index_source(n) < n
