#!/usr/bin/env python3
"""
================================================================================
Protein-SOCN Tables — Physicochemical Distance Matrices
================================================================================

Two packaged 20x20 residue distance scales:

  Schneider-Wrede — physicochemical distance (Schneider & Wrede, 1994),
                    normalised to [0, 1]. The published matrix is
                    slightly asymmetric (A→R 1.000, R→A 0.919); the
                    packaged table holds the mean of both directions,
                    so values differ a little from BioMedR/protr.
  Grantham        — Grantham (1974) composition/polarity/volume distance

CSV layout (data/<name>.csv):
  AminoAcid,A,R,N,...,V
  A,0,112,111,...,64
  ...

Rows and columns may come in any order; they are reindexed to AMINO_ACIDS.
Tables are loaded once per process by get_distance_tables() and are
read-only afterwards.

License: MIT
================================================================================
"""

from __future__ import annotations
import csv
import logging
import threading
from pathlib import Path

import numpy as np

from .socn_core import AMINO_ACIDS, AA_INDEX, TableLoadError, MissingDistanceEntryError

_logger = logging.getLogger(__name__)


DATA_DIR = Path(__file__).parent / 'data'

SCHNEIDER_WREDE = 'Schneider-Wrede'
GRANTHAM = 'Grantham'

# Scale 1, scale 2
DISTANCE_TABLE_NAMES = (SCHNEIDER_WREDE, GRANTHAM)


# ==============================================================================
# Distance Table
# ==============================================================================

class DistanceTable:
    """
    Named, symmetric residue distance matrix.

    The matrix is indexed in AMINO_ACIDS order and is frozen
    (numpy writeable flag cleared) so it can be shared across threads.
    """

    def __init__(self, name: str, matrix) -> None:
        m = np.array(matrix, dtype=float)
        n = len(AMINO_ACIDS)
        if m.shape != (n, n):
            raise TableLoadError(name, f"expected a {n}x{n} matrix, got shape {m.shape}")
        if not np.all(np.isfinite(m)):
            raise TableLoadError(name, "matrix holds missing or non-finite values")
        if np.any(m < 0):
            raise TableLoadError(name, "matrix holds negative distances")
        if not np.array_equal(m, m.T):
            i, j = np.argwhere(m != m.T)[0]
            raise TableLoadError(
                name, f"matrix is not symmetric at ({AMINO_ACIDS[i]}, {AMINO_ACIDS[j]})")
        m.setflags(write=False)
        self.name = name
        self.matrix = m

    def distance(self, a: str, b: str) -> float:
        try:
            return float(self.matrix[AA_INDEX[a], AA_INDEX[b]])
        except KeyError:
            raise MissingDistanceEntryError(self.name, a, b) from None

    def __repr__(self) -> str:
        return f"DistanceTable({self.name!r})"


# ==============================================================================
# Loading
# ==============================================================================

def read_distance_csv(path: str | Path, name: str | None = None) -> DistanceTable:
    """Parse a labelled square CSV into a DistanceTable."""
    path = Path(path)
    name = name or path.stem
    try:
        with open(path, newline='') as fh:
            rows = [r for r in csv.reader(fh) if r]
    except OSError as e:
        raise TableLoadError(name, str(e)) from e
    if not rows:
        raise TableLoadError(name, "file is empty")

    header = [c.strip() for c in rows[0][1:]]
    if sorted(header) != sorted(AMINO_ACIDS):
        raise TableLoadError(name, f"column labels {''.join(header)!r} are not the 20 canonical residues")

    values = {}
    for r in rows[1:]:
        label = r[0].strip()
        if label not in AA_INDEX:
            raise TableLoadError(name, f"unknown row label {label!r}")
        if len(r) - 1 != len(header):
            raise TableLoadError(name, f"row {label!r} has {len(r) - 1} values, expected {len(header)}")
        try:
            values[label] = [float(v) for v in r[1:]]
        except ValueError as e:
            raise TableLoadError(name, f"row {label!r}: {e}") from e
    missing = [aa for aa in AMINO_ACIDS if aa not in values]
    if missing:
        raise TableLoadError(name, f"missing rows for {''.join(missing)!r}")

    col = [header.index(aa) for aa in AMINO_ACIDS]
    matrix = [[values[a][j] for j in col] for a in AMINO_ACIDS]
    return DistanceTable(name, matrix)


def load_distance_table(name: str) -> DistanceTable:
    """Load one packaged table by identifier (uncached)."""
    if name not in DISTANCE_TABLE_NAMES:
        raise TableLoadError(name, f"unknown table; choose from {', '.join(DISTANCE_TABLE_NAMES)}")
    table = read_distance_csv(DATA_DIR / f'{name}.csv', name=name)
    _logger.info("Loaded distance table %s", name)
    return table


_tables = None
_tables_lock = threading.Lock()


def get_distance_tables() -> tuple:
    """
    (Schneider-Wrede, Grantham), loaded on first use and cached for the
    process lifetime. A failed load is not cached.
    """
    global _tables
    if _tables is None:
        with _tables_lock:
            if _tables is None:
                _tables = tuple(load_distance_table(n) for n in DISTANCE_TABLE_NAMES)
    return _tables
