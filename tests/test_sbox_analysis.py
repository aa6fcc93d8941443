import pytest

from edes.sbox_gen import evaluate_sbox, evaluate_sboxes, generate_sboxes, is_bijective
from edes.sbox_gen.analysis import (
    calculate_differential_uniformity,
    calculate_fixed_points,
    calculate_linear_bias,
)


ZERO_KEY = bytes(32)
IDENTITY = list(range(256))


def test_identity_sbox_is_fully_linear():
    assert is_bijective(IDENTITY)
    assert calculate_fixed_points(IDENTITY) == 256
    assert calculate_differential_uniformity(IDENTITY) == 256
    assert calculate_linear_bias(IDENTITY) == pytest.approx(1.0)


def test_constant_table_is_not_bijective():
    assert not is_bijective([0] * 256)


def test_swap_breaks_two_fixed_points():
    sbox = list(IDENTITY)
    sbox[10], sbox[20] = sbox[20], sbox[10]
    assert calculate_fixed_points(sbox) == 254


@pytest.mark.parametrize("table", [list(range(255)), list(range(257)), [256] + list(range(1, 256))])
def test_malformed_tables_rejected(table):
    with pytest.raises(ValueError):
        evaluate_sbox(table)


def test_generated_sboxes_report():
    reports = evaluate_sboxes(generate_sboxes(ZERO_KEY))
    assert len(reports) == 16
    for report in reports:
        assert report['bijective']
        # Differential uniformity of a permutation is even and at least 2
        assert report['differential'] >= 2
        assert report['differential'] % 2 == 0
        assert 0.0 < report['linear'] <= 1.0
        assert 0 <= report['fixed_points'] <= 256
