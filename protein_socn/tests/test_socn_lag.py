import numpy as np
import pytest

from protein_socn.socn_core import InvalidSequenceError, SequenceTooShortError
from protein_socn.socn_lag import DEFAULT_NLAG, compute_socn, socn_matrix, socn_names
from protein_socn.socn_tables import get_distance_tables

UBIQUITIN = "MQIFVKTLTGKTITLEVEPSDTIENVKAKIQDKEGIPPDQQRLIFAGKQLEDGRTLSDYNIQKESTLHLVLRLRGG"


def _reference_tau(seq, table, d):
    return sum(table.distance(seq[i], seq[i + d]) ** 2 for i in range(len(seq) - d))


def test_default_output_shape_and_order():
    socn = compute_socn(UBIQUITIN)
    names = list(socn)
    assert len(names) == 2 * DEFAULT_NLAG
    assert names[0] == "Schneider.lag1"
    assert names[DEFAULT_NLAG - 1] == "Schneider.lag30"
    assert names[DEFAULT_NLAG] == "Grantham.lag1"
    assert names[-1] == "Grantham.lag30"
    assert names == socn_names()
    values = np.array(list(socn.values()))
    assert np.all(np.isfinite(values))
    assert np.all(values >= 0)


def test_hand_computed_scenario():
    socn = compute_socn("ACDEFGHIKL", nlag=2)
    assert list(socn) == ["Schneider.lag1", "Schneider.lag2", "Grantham.lag1", "Grantham.lag2"]
    # Grantham: 195² + 154² + 45² + 140² + 153² + 98² + 94² + 102² + 107²
    assert socn["Grantham.lag1"] == 147068
    # Grantham: 126² + 170² + 177² + 98² + 100² + 135² + 32² + 5²
    assert socn["Grantham.lag2"] == 114983
    assert socn["Schneider.lag1"] == pytest.approx(4.9614255)
    assert socn["Schneider.lag2"] == pytest.approx(4.01120625)


def test_matches_direct_summation():
    sw, gr = get_distance_tables()
    socn = compute_socn(UBIQUITIN, nlag=12)
    for d in range(1, 13):
        assert socn[f"Schneider.lag{d}"] == pytest.approx(_reference_tau(UBIQUITIN, sw, d))
        assert socn[f"Grantham.lag{d}"] == pytest.approx(_reference_tau(UBIQUITIN, gr, d))


def test_deterministic():
    a = compute_socn(UBIQUITIN, nlag=20)
    b = compute_socn(UBIQUITIN, nlag=20)
    assert list(a.items()) == list(b.items())


def test_squares_each_distance_before_summing(toy_tables):
    # indices 0, 1, 2, 3
    socn = compute_socn("ARND", nlag=3, tables=toy_tables)
    assert socn == {
        "toy1.lag1": 3.0,   # 1 + 1 + 1
        "toy1.lag2": 8.0,   # 4 + 4, not (2 + 2)²
        "toy1.lag3": 9.0,
        "toy2.lag1": 3.0,
        "toy2.lag2": 2.0,
        "toy2.lag3": 1.0,
    }


def test_length_equal_to_nlag_gives_zero_last_lag():
    socn = compute_socn("ACDEF", nlag=5)
    assert socn["Schneider.lag5"] == 0.0
    assert socn["Grantham.lag5"] == 0.0
    # one pair (A, F) at lag 4
    assert socn["Grantham.lag4"] == 113 ** 2


def test_single_residue_single_lag():
    assert compute_socn("W", nlag=1) == {"Schneider.lag1": 0.0, "Grantham.lag1": 0.0}


def test_invalid_sequence():
    with pytest.raises(InvalidSequenceError):
        compute_socn("ACDEFGHIKX", nlag=2)
    with pytest.raises(InvalidSequenceError):
        compute_socn("", nlag=1)


def test_sequence_too_short():
    with pytest.raises(SequenceTooShortError) as exc:
        compute_socn("ACDEF", nlag=6)
    assert exc.value.length == 5
    assert exc.value.nlag == 6
    with pytest.raises(SequenceTooShortError):
        compute_socn("ACDEF")


@pytest.mark.parametrize("nlag", [0, -3, 2.0, True, "5"])
def test_bad_nlag(nlag):
    with pytest.raises(ValueError):
        compute_socn("ACDEFGHIKL", nlag=nlag)


def test_socn_matrix_rows():
    seqs = ["ACDEFGHIKL", UBIQUITIN]
    names, X = socn_matrix(seqs, nlag=3)
    assert names == socn_names(3)
    assert X.shape == (2, 6)
    assert X[0, 3] == 147068
    assert list(X[1]) == list(compute_socn(UBIQUITIN, nlag=3).values())


def test_socn_matrix_aborts_on_bad_sequence():
    with pytest.raises(SequenceTooShortError):
        socn_matrix(["ACDEFGHIKL", "AC"], nlag=3)


@pytest.mark.parametrize("count", [1, 3])
def test_table_override_must_be_a_pair(toy_tables, count):
    tables = (toy_tables * 2)[:count]
    with pytest.raises(ValueError, match="pair of distance tables"):
        compute_socn("ACDE", nlag=2, tables=tables)
