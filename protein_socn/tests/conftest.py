from pathlib import Path

import numpy as np
import pytest

from protein_socn.socn_core import AMINO_ACIDS
from protein_socn.socn_tables import DistanceTable


# Toy scales over the table index:
#   toy1(a, b) = |i - j|
#   toy2(a, b) = 0 if a == b else 1
@pytest.fixture(scope="session")
def toy_tables():
    i = np.arange(len(AMINO_ACIDS))
    toy1 = DistanceTable("toy1", np.abs(i[:, None] - i[None, :]))
    toy2 = DistanceTable("toy2", 1 - np.eye(len(AMINO_ACIDS)))
    return toy1, toy2


# Write a text file into tmp_path, e.g.
#
#   def test_something(write_file):
#       fa = write_file("x.fa", ">p1\nACDE\n")
#
@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
