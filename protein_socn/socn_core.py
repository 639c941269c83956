#!/usr/bin/env python3
"""
================================================================================
Protein-SOCN Core — Amino Acid Alphabet, Validation & Errors
================================================================================

Shared foundation for the distance tables and the lag correlation engine.

Alphabet:
  AminoAcid    — closed enumeration of the 20 canonical residues
  AMINO_ACIDS  — the same residues as a string, in table order
  AA_INDEX     — residue → row/column index in every distance table

Validation:
  check_sequence   — True iff every character is a canonical residue
  require_sequence — returns the sequence or raises InvalidSequenceError

License: MIT
================================================================================
"""

from __future__ import annotations
from enum import Enum


# ==============================================================================
# Canonical Alphabet
# ==============================================================================

class AminoAcid(str, Enum):
    ALA = 'A'
    ARG = 'R'
    ASN = 'N'
    ASP = 'D'
    CYS = 'C'
    GLN = 'Q'
    GLU = 'E'
    GLY = 'G'
    HIS = 'H'
    ILE = 'I'
    LEU = 'L'
    LYS = 'K'
    MET = 'M'
    PHE = 'F'
    PRO = 'P'
    SER = 'S'
    THR = 'T'
    TRP = 'W'
    TYR = 'Y'
    VAL = 'V'


# Row/column order of the packaged distance tables
AMINO_ACIDS = ''.join(aa.value for aa in AminoAcid)

AA_INDEX = {aa: i for i, aa in enumerate(AMINO_ACIDS)}


# ==============================================================================
# Errors
# ==============================================================================

class SOCNError(Exception):
    """Base class for sequence-order-coupling failures."""


class InvalidSequenceError(SOCNError, ValueError):
    """Sequence holds symbols outside the canonical alphabet."""

    def __init__(self, symbols, length: int):
        self.symbols = tuple(symbols)
        self.length = length
        super().__init__(
            f"Protein sequence has unrecognized amino acid type: {', '.join(map(repr, self.symbols))} "
            f"(sequence length {length})")


class SequenceTooShortError(SOCNError, ValueError):
    def __init__(self, length: int, nlag: int):
        self.length = length
        self.nlag = nlag
        super().__init__(
            f"Length of the protein sequence must be no less than 'nlag' "
            f"(length={length}, nlag={nlag})")


class TableLoadError(SOCNError, RuntimeError):
    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot load distance table {name!r}: {reason}")


class MissingDistanceEntryError(SOCNError, LookupError):
    """A validated residue pair has no entry; the reference data is broken."""

    def __init__(self, name: str, a: str, b: str):
        self.name = name
        self.pair = (a, b)
        super().__init__(f"Distance table {name!r} has no entry for ({a!r}, {b!r})")


# ==============================================================================
# Sequence Validation
# ==============================================================================

def unrecognized_symbols(seq: str) -> list:
    """Distinct non-canonical symbols of seq, in order of first appearance."""
    seen = []
    for c in seq:
        if c not in AA_INDEX and c not in seen:
            seen.append(c)
    return seen


def check_sequence(seq: str) -> bool:
    """True iff seq is non-empty and made only of canonical residues."""
    return bool(seq) and all(c in AA_INDEX for c in seq)


def require_sequence(seq: str) -> str:
    """Gate used before any computation; returns seq unchanged."""
    if not isinstance(seq, str):
        raise TypeError(f"Protein sequence must be str, got {type(seq).__name__}")
    if not check_sequence(seq):
        raise InvalidSequenceError(unrecognized_symbols(seq), len(seq))
    return seq
