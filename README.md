# exactalign

`exactalign` builds a reproducible scenario of genetic data. The scenario has a
random nucleotide sequence and a set of patterns. Some patterns are random, and
others are samples taken from the sequence itself. The package then finds the
first exact occurrence of each pattern in the sequence and reports a few
statistics. Every value comes from a seeded 64-bit linear congruential
generator, so the same arguments always give the same result.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
exactalign [--regenerate] [--workers N] \
           <seq_length> <prob_G> <prob_C> <prob_A> \
           <pat_rng_num> <pat_rng_length_mean> <pat_rng_length_dev> \
           <pat_samples_num> <pat_samp_length_mean> <pat_samp_length_dev> \
           <pat_samp_loc_mean> <pat_samp_loc_dev> \
           <pat_samp_mix:B[efore]|A[fter]|M[ixed]> <long_seed>
```

| Argument | Meaning |
|---|---|
| `seq_length` | Length of the main sequence |
| `prob_G`, `prob_C`, `prob_A` | Probability of each nucleotide. `T` takes the remainder. The three must not add up to more than 1 |
| `pat_rng_num` | Number of random patterns |
| `pat_rng_length_mean`, `pat_rng_length_dev` | Normal distribution of random pattern lengths |
| `pat_samples_num` | Number of patterns sampled from the sequence |
| `pat_samp_length_mean`, `pat_samp_length_dev` | Normal distribution of sampled pattern lengths |
| `pat_samp_loc_mean`, `pat_samp_loc_dev` | Normal distribution of where samples are taken |
| `pat_samp_mix` | Order of the two kinds. Only its first character counts. `B`: samples before random patterns. `A`: samples after random patterns. `M`: the two kinds interleaved |
| `long_seed` | Seed for the random generator |

Numeric values are read from their leading digits. Text that does not start
with a number counts as 0. Values after the fourteenth are ignored.

The command has two options:

* `--regenerate` builds the sample patterns from the seed, with no stored copy
  of the sequence. The sequence is then generated inside the timed part. The
  patterns are the same either way.
* `--workers N` searches the patterns with `N` threads. By default the search
  runs in a single thread.

Pattern lengths are limited to the range 1 to `seq_length`. Sample locations
are clamped so that the whole sample fits inside the sequence.

Example:

```
exactalign 300 0.1 0.3 0.35 20 8 3 20 8 3 150 50 M 4353435
```

The output gives the elapsed time of the search and one result line:

```
Time: 0.001234
Result: <patterns found>, <checksum of found positions>, <checksum of match counts>
```

The first checksum is the sum of the start positions of the found patterns. For
the second, each sequence position covered by `n` found patterns adds `n - 1`.
Both are taken modulo 65535.

The command exits with status 1 and prints an error and the usage line on
stderr when:

* fewer than fourteen values are given,
* the probabilities add up to more than 1,
* the mix mode does not start with `B`, `A` or `M`,
* a count, length or location value is negative,
* patterns are requested for an empty sequence,
* `--workers` is less than 1.

## Library use

```python
from exactalign.rng import Rng
from exactalign.generate import Probabilities, generate_sequence
from exactalign.search import align

rng = Rng.from_seed(4353435)
probabilities = Probabilities.from_individual(0.1, 0.3, 0.35)
sequence = generate_sequence(rng, probabilities, 200)

result = align(sequence, [sequence[10:18], sequence[50:60]], 1)
print(result.summary())
print(result.checksums())
```

* `exactalign.rng.Rng` is the seeded generator. `next` gives a uniform draw,
  `next_normal` a normal draw, and `skip` jumps ahead any number of steps in
  logarithmic time. `copy` returns an independent copy.
* `exactalign.generate` makes sequences and patterns. `Scenario` holds every
  parameter. `build` returns the sequence and the patterns, and
  `generate_patterns` returns only the patterns. `pattern_kinds` gives the order
  of random (`PatternKind.RANDOM`) and sampled (`PatternKind.SAMPLE`) patterns
  for each `MixMode`. `pattern_length`, `sample_location`, `copy_sample` and
  `regenerate_sample` are the single steps.
* `exactalign.search` does the matching. `find_first` returns the first start
  of one pattern, or `None`. `align` handles a whole set and returns an
  `AlignmentResult`. That result has `found`, `pattern_lengths`, `coverage`,
  `matches`, `checksums()` and `summary()`.
* `exactalign.cli.parse_arguments` turns the fourteen values into a `Scenario`.
  `exactalign.cli.run` times the alignment of a scenario, and
  `exactalign.cli.main` is the command-line entry point.

## What it does not do

The sequence and the patterns are always generated from the arguments. The
package does not read sequences or patterns from files such as FASTA, and it
does not write its results to files. It reports only the first exact occurrence
of each pattern. It does no approximate or gapped alignment. The search runs
in threads of one process only and cannot be spread over several processes or
machines.