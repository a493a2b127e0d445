"""Command line entry: generate a scenario, align the patterns, print the result."""

from __future__ import annotations

import argparse
import re
import sys
import time
from typing import Sequence

from .generate import (
    MixMode,
    Probabilities,
    Scenario,
    build,
    generate_patterns,
    generate_sequence,
)
from .rng import Rng
from .search import AlignmentResult, align

PROGRAM = "exactalign"
USAGE = (
    "<seq_length> <prob_G> <prob_C> <prob_A> <pat_rng_num> <pat_rng_length_mean> "
    "<pat_rng_length_dev> <pat_samples_num> <pat_samp_length_mean> <pat_samp_length_dev> "
    "<pat_samp_loc_mean> <pat_samp_loc_dev> <pat_samp_mix:B[efore]|A[fter]|M[ixed]> "
    "<long_seed>"
)
ARGUMENT_COUNT = 14

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _integer(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _real(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def parse_arguments(argv: Sequence[str]) -> Scenario:
    """Build a scenario from the fourteen positional values; extra values are ignored."""
    if len(argv) < ARGUMENT_COUNT:
        raise ValueError(
            "Not enough arguments when reading configuration from the command line"
        )
    seq_length = _integer(argv[0])
    probabilities = Probabilities.from_individual(
        _real(argv[1]), _real(argv[2]), _real(argv[3])
    )
    rng_num = _integer(argv[4])
    rng_length_mean = _integer(argv[5])
    rng_length_dev = _integer(argv[6])
    samp_num = _integer(argv[7])
    samp_length_mean = _integer(argv[8])
    samp_length_dev = _integer(argv[9])
    samp_loc_mean = _integer(argv[10])
    samp_loc_dev = _integer(argv[11])
    mix = MixMode.from_text(argv[12])
    seed = _integer(argv[13])
    return Scenario(
        seq_length=seq_length,
        probabilities=probabilities,
        rng_num=rng_num,
        rng_length_mean=rng_length_mean,
        rng_length_dev=rng_length_dev,
        samp_num=samp_num,
        samp_length_mean=samp_length_mean,
        samp_length_dev=samp_length_dev,
        samp_loc_mean=samp_loc_mean,
        samp_loc_dev=samp_loc_dev,
        mix=mix,
        seed=seed,
    )


def run(
    scenario: Scenario, regenerate: bool = False, workers: int | None = None
) -> tuple[AlignmentResult, float]:
    """Align the scenario's patterns and return the result with the elapsed seconds.

    With ``regenerate`` the patterns are made without the sequence, and the
    sequence itself is generated inside the timed part.
    """
    if regenerate:
        patterns = generate_patterns(scenario, True)
        started = time.perf_counter()
        sequence = generate_sequence(
            Rng.from_seed(scenario.seed), scenario.probabilities, scenario.seq_length
        )
    else:
        sequence, patterns = build(scenario, False)
        started = time.perf_counter()
    result = align(sequence, patterns, workers)
    return result, time.perf_counter() - started


def main(argv: Sequence[str] | None = None) -> int:
    """Run the alignment from the command line; returns the exit status."""
    parser = argparse.ArgumentParser(prog=PROGRAM, usage=f"{PROGRAM} {USAGE}")
    parser.add_argument("values", nargs="*")
    parser.add_argument("--regenerate", action="store_true",
                        help="recreate sample patterns from the seed")
    parser.add_argument("--workers", type=int, default=None,
                        help="number of threads searching patterns")
    options = parser.parse_intermixed_args(argv)
    try:
        scenario = parse_arguments(options.values)
        result, elapsed = run(scenario, options.regenerate, options.workers)
    except ValueError as error:
        sys.stderr.write(f"\n-- Error: {error}\n\n")
        sys.stderr.write(f"Usage: {PROGRAM} {USAGE}\n\n")
        return 1
    sys.stdout.write(f"\nTime: {elapsed:f}\n")
    sys.stdout.write(f"{result.summary()}\n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())