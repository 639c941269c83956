#!/usr/bin/env python3
"""
================================================================================
Protein-SOCN Lag — Sequence-Order-Coupling Numbers
================================================================================

For a sequence s of length N and each lag d = 1..nlag:

  tau_d = Σ_{i=1}^{N-d} dist(s_i, s_{i+d})²

computed once per distance scale (Schneider-Wrede, then Grantham), giving
2 × nlag values. Each pairwise distance is squared before summing.

When N == nlag the last lag has no residue pair and tau_nlag = 0.

References:
  Chou, K.C. (2000) Biochem Biophys Res Commun 278, 477-483.
  Chou, K.C. & Cai, Y.D. (2004) Biochem Biophys Res Commun 320, 1236-1239.
  Schneider, G. & Wrede, P. (1994) Biophys J 66, 335-344.

License: MIT
================================================================================
"""

from __future__ import annotations
import logging

import numpy as np

from .socn_core import AA_INDEX, SequenceTooShortError, require_sequence
from .socn_tables import SCHNEIDER_WREDE, GRANTHAM, get_distance_tables

_logger = logging.getLogger(__name__)


DEFAULT_NLAG = 30

# Output label prefix per table
LAG_PREFIX = {SCHNEIDER_WREDE: 'Schneider', GRANTHAM: 'Grantham'}


def _check_nlag(nlag) -> int:
    if isinstance(nlag, bool) or not isinstance(nlag, (int, np.integer)):
        raise ValueError(f"nlag must be a positive integer, got {nlag!r}")
    if nlag < 1:
        raise ValueError(f"nlag must be >= 1, got {nlag}")
    return int(nlag)


def socn_names(nlag: int = DEFAULT_NLAG, tables=None) -> list:
    """Column labels in output order: scale 1 lags, then scale 2 lags."""
    nlag = _check_nlag(nlag)
    if tables is None:
        prefixes = [LAG_PREFIX[n] for n in (SCHNEIDER_WREDE, GRANTHAM)]
    else:
        prefixes = [LAG_PREFIX.get(t.name, t.name) for t in tables]
    return [f'{p}.lag{d}' for p in prefixes for d in range(1, nlag + 1)]


def lag_sums(idx: np.ndarray, matrix: np.ndarray, nlag: int) -> np.ndarray:
    """tau_1..tau_nlag for an index-encoded sequence and one distance matrix."""
    tau = np.zeros(nlag)
    for d in range(1, nlag + 1):
        # empty when d == len(idx)
        dist = matrix[idx[:-d], idx[d:]]
        tau[d - 1] = np.sum(dist ** 2)
    return tau


def compute_socn(seq: str, nlag: int = DEFAULT_NLAG, tables=None) -> dict:
    """
    Sequence-Order-Coupling Numbers of a protein sequence.

    Parameters
    ----------
    seq : str
        One-letter protein sequence (20 canonical residues only).
    nlag : int
        Maximum lag, default 30. Must not exceed len(seq).
    tables : sequence of DistanceTable, optional
        Override the packaged (Schneider-Wrede, Grantham) pair.

    Returns
    -------
    dict of 2 × nlag floats, ordered
        Schneider.lag1 .. Schneider.lag<nlag>, Grantham.lag1 .. Grantham.lag<nlag>

    Raises
    ------
    InvalidSequenceError, SequenceTooShortError, ValueError (bad nlag),
    TableLoadError (packaged data unusable)
    """
    require_sequence(seq)
    nlag = _check_nlag(nlag)
    N = len(seq)
    if N < nlag:
        raise SequenceTooShortError(N, nlag)
    if tables is None:
        tables = get_distance_tables()
    elif len(tables) != 2:
        raise ValueError(f"Expected a pair of distance tables, got {len(tables)}")

    idx = np.fromiter((AA_INDEX[c] for c in seq), dtype=np.intp, count=N)
    values = np.concatenate([lag_sums(idx, t.matrix, nlag) for t in tables])
    names = socn_names(nlag, tables)
    return {k: float(v) for k, v in zip(names, values)}


def socn_matrix(sequences, nlag: int = DEFAULT_NLAG, tables=None):
    """
    Batch form: one row per sequence.

    Returns (names, X) with X of shape (len(sequences), 2 × nlag).
    Any invalid sequence aborts the whole batch.
    """
    sequences = list(sequences)
    names = socn_names(nlag, tables)
    X = np.empty((len(sequences), len(names)))
    for i, seq in enumerate(sequences):
        X[i, :] = list(compute_socn(seq, nlag=nlag, tables=tables).values())
    _logger.debug("Computed SOCN for %d sequences (nlag=%d)", len(sequences), nlag)
    return names, X
