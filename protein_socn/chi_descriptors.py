#!/usr/bin/env python3
"""
================================================================================
Protein-SOCN Chi — Kier & Hall Chi Descriptors via an External Engine
================================================================================

Chi chain / cluster / path-cluster / path indices are found by subgraph
isomorphism inside a molecule-descriptor engine (CDK or equivalent). This
module does not compute them; it names them and shapes the engine output.

Each descriptor is a configuration value:

  CHI_CHAIN         SCH.3..7,  VCH.3..7   (simple / valence chain)
  CHI_CLUSTER       SC.3..6,   VC.3..6    (simple / valence cluster)
  CHI_PATH_CLUSTER  SPC.4..6,  VPC.4..6   (simple / valence path cluster)
  CHI_PATH          SP.0..7,   VP.0..7    (simple / valence path)

Any object with evaluate(molecule, descriptor_id) -> sequence of float
works as an engine.

Note: these use the older, more complex fragment definitions, and graph
isomorphism makes them slow on large molecules.

License: MIT
================================================================================
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple

import numpy as np

_logger = logging.getLogger(__name__)


class DescriptorEngineError(RuntimeError):
    pass


class DescriptorEngine(Protocol):
    def evaluate(self, molecule, descriptor_id: str) -> Sequence[float]:
        ...


@dataclass(frozen=True)
class MolecularDescriptor:
    descriptor_id: str
    names: Tuple[str, ...]


def _orders(prefixes, orders):
    return tuple(f'{p}.{o}' for p in prefixes for o in orders)


_CDK = 'org.openscience.cdk.qsar.descriptors.molecular.'

CHI_CHAIN = MolecularDescriptor(_CDK + 'ChiChainDescriptor', _orders(('SCH', 'VCH'), range(3, 8)))
CHI_CLUSTER = MolecularDescriptor(_CDK + 'ChiClusterDescriptor', _orders(('SC', 'VC'), range(3, 7)))
CHI_PATH_CLUSTER = MolecularDescriptor(_CDK + 'ChiPathClusterDescriptor', _orders(('SPC', 'VPC'), range(4, 7)))
CHI_PATH = MolecularDescriptor(_CDK + 'ChiPathDescriptor', _orders(('SP', 'VP'), range(0, 8)))

CHI_DESCRIPTORS = {
    'chain': CHI_CHAIN,
    'cluster': CHI_CLUSTER,
    'path_cluster': CHI_PATH_CLUSTER,
    'path': CHI_PATH,
}


def evaluate_molecular_descriptor(molecules, descriptor: MolecularDescriptor,
                                  engine: DescriptorEngine, silent: bool = True):
    """
    Evaluate one descriptor for each molecule.

    Returns (names, X): X has one row per molecule and one column per name,
    in the descriptor's column order. A row of the wrong width raises
    DescriptorEngineError.
    """
    if isinstance(descriptor, str):
        try:
            descriptor = CHI_DESCRIPTORS[descriptor]
        except KeyError:
            raise ValueError(f"Unknown descriptor: {descriptor}. "
                             f"Use one of {', '.join(CHI_DESCRIPTORS)}") from None
    molecules = list(molecules)
    n = len(descriptor.names)
    X = np.empty((len(molecules), n))
    for i, mol in enumerate(molecules):
        row = np.asarray(engine.evaluate(mol, descriptor.descriptor_id), dtype=float)
        if row.shape != (n,):
            raise DescriptorEngineError(
                f"{descriptor.descriptor_id} returned {row.size} values for molecule {i}, expected {n}")
        X[i, :] = row
        if not silent:
            _logger.info("Molecule %d: %s done", i, descriptor.descriptor_id.rsplit('.', 1)[-1])
    return list(descriptor.names), X
