"""Generation of the random sequence and the patterns searched in it."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum

from .rng import MASK64, Rng


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _to_unsigned(value: float) -> int:
    """Convert a draw to an unsigned 64-bit count, saturating at the limits."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= 2.0**64:
        return MASK64
    return int(value)


@dataclass(frozen=True)
class Probabilities:
    """Cumulative thresholds for choosing G, C and A; the rest is T."""

    g: float
    c: float
    a: float

    @classmethod
    def from_individual(cls, prob_g: float, prob_c: float, prob_a: float) -> Probabilities:
        """Build thresholds from the individual G, C and A probabilities."""
        g = _float32(prob_g)
        c = _float32(prob_c)
        a = _float32(prob_a)
        if _float32(_float32(g + c) + a) > 1:
            raise ValueError(
                "The sum of G,C,A,T nucleotid probabilities cannot be higher than 1"
            )
        c = _float32(c + g)
        a = _float32(a + c)
        return cls(g, c, a)

    def nucleotide(self, value: float) -> str:
        """Map a uniform draw to a nucleotide letter."""
        if value < self.g:
            return "G"
        if value < self.c:
            return "C"
        if value < self.a:
            return "A"
        return "T"


class MixMode(Enum):
    """How random and sampled patterns are ordered."""

    BEFORE = "B"
    AFTER = "A"
    MIXED = "M"

    @classmethod
    def from_text(cls, text: str) -> MixMode:
        """Select a mode from the first character of ``text``."""
        first = text[:1]
        try:
            return cls(first)
        except ValueError:
            raise ValueError(
                f"Incorrect first character of pat_samp_mix: {first}"
            ) from None


class PatternKind(Enum):
    """Origin of a pattern."""

    RANDOM = "random"
    SAMPLE = "sample"


@dataclass(frozen=True)
class Scenario:
    """All parameters that determine a sequence and its patterns."""

    seq_length: int
    probabilities: Probabilities
    rng_num: int
    rng_length_mean: int
    rng_length_dev: int
    samp_num: int
    samp_length_mean: int
    samp_length_dev: int
    samp_loc_mean: int
    samp_loc_dev: int
    mix: MixMode
    seed: int

    def __post_init__(self) -> None:
        for name in (
            "seq_length",
            "rng_num",
            "rng_length_mean",
            "rng_length_dev",
            "samp_num",
            "samp_length_mean",
            "samp_length_dev",
            "samp_loc_mean",
            "samp_loc_dev",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.seq_length == 0 and self.rng_num + self.samp_num > 0:
            raise ValueError("patterns need a non-empty sequence")

    @property
    def pattern_count(self) -> int:
        return self.rng_num + self.samp_num


def generate_sequence(rng: Rng, probabilities: Probabilities, length: int) -> str:
    """Draw ``length`` nucleotides from ``rng``."""
    return "".join(probabilities.nucleotide(rng.next()) for _ in range(length))


def pattern_length(rng: Rng, mean: int, dev: int, seq_length: int) -> int:
    """Draw a pattern length, limited to the range 1..seq_length."""
    length = _to_unsigned(rng.next_normal(float(mean), float(dev)))
    length = min(length, seq_length)
    return max(length, 1)


def sample_location(rng: Rng, mean: int, dev: int, seq_length: int, length: int) -> int:
    """Draw the start of a sample so that it fits in the sequence."""
    if length > seq_length:
        raise ValueError(f"sample of length {length} does not fit in {seq_length}")
    location = _to_unsigned(rng.next_normal(float(mean), float(dev)))
    return min(location, seq_length - length)


def copy_sample(rng: Rng, sequence: str, loc_mean: int, loc_dev: int, length: int) -> str:
    """Take a sample of ``length`` nucleotides from ``sequence``."""
    location = sample_location(rng, loc_mean, loc_dev, len(sequence), length)
    return sequence[location:location + length]


def regenerate_sample(
    rng: Rng,
    seed: int,
    probabilities: Probabilities,
    seq_length: int,
    loc_mean: int,
    loc_dev: int,
    length: int,
) -> str:
    """Recreate a sample of the sequence from its seed, without the sequence."""
    location = sample_location(rng, loc_mean, loc_dev, seq_length, length)
    local = Rng.from_seed(seed)
    local.skip(location)
    return generate_sequence(local, probabilities, length)


def pattern_kinds(rng_num: int, samp_num: int, mix: MixMode) -> list[PatternKind]:
    """Order random and sampled patterns according to ``mix``."""
    total = rng_num + samp_num
    if mix is MixMode.AFTER:
        return [PatternKind.RANDOM] * rng_num + [PatternKind.SAMPLE] * samp_num
    if mix is MixMode.BEFORE:
        return [PatternKind.SAMPLE] * samp_num + [PatternKind.RANDOM] * rng_num
    if rng_num == 0:
        return [PatternKind.SAMPLE] * total
    if samp_num == 0:
        return [PatternKind.RANDOM] * total
    if rng_num < samp_num:
        interval = total // rng_num
        rare, common = PatternKind.RANDOM, PatternKind.SAMPLE
    else:
        interval = total // samp_num
        rare, common = PatternKind.SAMPLE, PatternKind.RANDOM
    return [rare if (index + 1) % interval == 0 else common for index in range(total)]


def _make_patterns(
    scenario: Scenario, regenerate: bool, rng: Rng, sequence: str | None
) -> list[str]:
    patterns = []
    for kind in pattern_kinds(scenario.rng_num, scenario.samp_num, scenario.mix):
        if kind is PatternKind.RANDOM:
            length = pattern_length(
                rng, scenario.rng_length_mean, scenario.rng_length_dev, scenario.seq_length
            )
            patterns.append(generate_sequence(rng, scenario.probabilities, length))
            continue
        length = pattern_length(
            rng, scenario.samp_length_mean, scenario.samp_length_dev, scenario.seq_length
        )
        if regenerate or sequence is None:
            patterns.append(
                regenerate_sample(
                    rng,
                    scenario.seed,
                    scenario.probabilities,
                    scenario.seq_length,
                    scenario.samp_loc_mean,
                    scenario.samp_loc_dev,
                    length,
                )
            )
        else:
            patterns.append(
                copy_sample(
                    rng, sequence, scenario.samp_loc_mean, scenario.samp_loc_dev, length
                )
            )
    return patterns


def generate_patterns(scenario: Scenario, regenerate: bool = True) -> list[str]:
    """Generate the patterns of ``scenario``.

    With ``regenerate`` the sequence is never materialised: samples are
    recreated from the seed.
    """
    rng = Rng.from_seed(scenario.seed)
    if regenerate:
        rng.skip(scenario.seq_length)
        return _make_patterns(scenario, True, rng, None)
    sequence = generate_sequence(rng, scenario.probabilities, scenario.seq_length)
    return _make_patterns(scenario, False, rng, sequence)


def build(scenario: Scenario, regenerate: bool = False) -> tuple[str, list[str]]:
    """Generate the sequence and the patterns of ``scenario``."""
    rng = Rng.from_seed(scenario.seed)
    sequence = generate_sequence(rng, scenario.probabilities, scenario.seq_length)
    return sequence, _make_patterns(scenario, regenerate, rng, sequence)