"""
Protein-SOCN: Sequence-Order-Coupling Numbers
=============================================

Lag-correlation descriptors of protein sequences over two physicochemical
residue distance scales (Schneider-Wrede, Grantham).

Modules:
  socn_core        — Amino acid alphabet, validation & errors
  socn_tables      — Packaged distance tables (loaded once per process)
  socn_lag         — Sequence-Order-Coupling Numbers
  chi_descriptors  — Kier & Hall Chi descriptors via an external engine
  extract          — FASTA batch extraction (protein-socn CLI)

Quick start:
  >>> from protein_socn import compute_socn
  >>> socn = compute_socn("MQIFVKTLTGKTITLEVEPSDTIENVKAKIQDKEGIPPDQQRLIFAGKQLEDGRTLSDYNIQKESTLHLVLRLRGG")
  >>> print(f"{len(socn)} values, Grantham.lag1={socn['Grantham.lag1']:.0f}")
"""

from .socn_core import AminoAcid, AMINO_ACIDS, check_sequence, require_sequence
from .socn_core import (SOCNError, InvalidSequenceError, SequenceTooShortError,
                        TableLoadError, MissingDistanceEntryError)
from .socn_tables import DistanceTable, load_distance_table, get_distance_tables
from .socn_tables import SCHNEIDER_WREDE, GRANTHAM
from .socn_lag import compute_socn, socn_matrix, socn_names, DEFAULT_NLAG
from .chi_descriptors import evaluate_molecular_descriptor, MolecularDescriptor
from .chi_descriptors import CHI_CHAIN, CHI_CLUSTER, CHI_PATH_CLUSTER, CHI_PATH

__version__ = "1.0.0"
