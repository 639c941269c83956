#!/usr/bin/env python3
"""
================================================================================
Protein-SOCN Batch Extraction
================================================================================

Computes Sequence-Order-Coupling Numbers for every record of a FASTA file
and writes one tab-separated row per sequence.

Usage:
  protein-socn proteins.fasta                      # nlag=30, TSV to stdout
  protein-socn proteins.fasta --nlag 10 -o socn.tsv
  protein-socn proteins.fasta --skip-invalid -q    # drop bad records quietly

Output:
  id  Schneider.lag1 ... Schneider.lagN  Grantham.lag1 ... Grantham.lagN

License: MIT
================================================================================
"""

from __future__ import annotations
import argparse
import csv
import logging
import sys
from pathlib import Path

from .socn_core import SOCNError
from .socn_lag import DEFAULT_NLAG, compute_socn, socn_names

_logger = logging.getLogger(__name__)


def read_fasta(path: str | Path) -> list:
    """
    Read (id, sequence) records from a FASTA file.

    The id is the first header token; sequence lines are joined with
    whitespace removed and upper-cased.
    """
    records = []
    name, chunks = None, []
    with open(path) as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith(';'):
                continue
            if line.startswith('>'):
                if name is not None:
                    records.append((name, ''.join(chunks).upper()))
                header = line[1:].split()
                name = header[0] if header else ''
                chunks = []
            elif name is None:
                raise ValueError(f"{path}: sequence data before the first '>' header")
            else:
                chunks.append(''.join(line.split()))
    if name is not None:
        records.append((name, ''.join(chunks).upper()))
    return records


def extract(records, nlag: int = DEFAULT_NLAG, skip_invalid: bool = False):
    """Yield (id, values) per record; failures raise unless skip_invalid."""
    for i, (name, seq) in enumerate(records):
        try:
            socn = compute_socn(seq, nlag=nlag)
        except SOCNError as e:
            if not skip_invalid:
                raise
            _logger.warning("Skipping %s: %s", name, e)
            continue
        yield name, list(socn.values())
        if i and not i % 500:
            _logger.info("Sequence %d", i)


def write_table(rows, names, fh) -> int:
    writer = csv.writer(fh, delimiter='\t', lineterminator='\n')
    writer.writerow(['id'] + names)
    n = 0
    for name, values in rows:
        writer.writerow([name] + [repr(v) for v in values])
        n += 1
    return n


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Protein-SOCN: Sequence-Order-Coupling Numbers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  protein-socn P00750.fasta
  protein-socn proteins.fasta --nlag 10 --output socn.tsv
        """)
    parser.add_argument('fasta', type=str,
                        help='Input FASTA file of protein sequences')
    parser.add_argument('--nlag', '-n', type=int, default=DEFAULT_NLAG,
                        help=f'Maximum lag (default {DEFAULT_NLAG})')
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Output TSV path (default stdout)')
    parser.add_argument('--skip-invalid', action='store_true',
                        help='Log and skip bad records instead of failing')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Only log warnings and errors')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        names = socn_names(args.nlag)
        records = read_fasta(args.fasta)
        _logger.info("Loaded %d sequences from %s", len(records), args.fasta)
        # all rows are computed before any output is opened
        rows = list(extract(records, nlag=args.nlag, skip_invalid=args.skip_invalid))
        if args.output is None:
            n = write_table(rows, names, sys.stdout)
        else:
            with open(args.output, 'w', newline='') as fh:
                n = write_table(rows, names, fh)
    except (OSError, ValueError, SOCNError) as e:
        _logger.error("%s", e)
        return 1

    _logger.info("Wrote %d rows", n)
    return 0


if __name__ == '__main__':
    sys.exit(main())
