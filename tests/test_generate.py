import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from exactalign.generate import (
    MixMode,
    PatternKind,
    Probabilities,
    Scenario,
    build,
    copy_sample,
    generate_patterns,
    generate_sequence,
    pattern_kinds,
    pattern_length,
    regenerate_sample,
    sample_location,
)
from exactalign.rng import Rng

R = PatternKind.RANDOM
S = PatternKind.SAMPLE


def make_scenario(**overrides):
    values = dict(
        seq_length=300,
        probabilities=Probabilities.from_individual(0.35, 0.2, 0.25),
        rng_num=4,
        rng_length_mean=8,
        rng_length_dev=3,
        samp_num=6,
        samp_length_mean=10,
        samp_length_dev=4,
        samp_loc_mean=150,
        samp_loc_dev=60,
        mix=MixMode.MIXED,
        seed=17,
    )
    values.update(overrides)
    return Scenario(**values)


def test_probabilities_are_cumulative():
    probs = Probabilities.from_individual(0.25, 0.25, 0.25)
    assert probs.g < probs.c < probs.a
    assert probs.a == pytest.approx(0.75)


def test_probabilities_sum_above_one_is_rejected():
    with pytest.raises(ValueError):
        Probabilities.from_individual(0.5, 0.6, 0.0)


def test_nucleotide_thresholds():
    probs = Probabilities.from_individual(0.25, 0.25, 0.25)
    assert probs.nucleotide(0.0) == "G"
    assert probs.nucleotide(0.3) == "C"
    assert probs.nucleotide(0.6) == "A"
    assert probs.nucleotide(0.9) == "T"


def test_mix_mode_from_text_uses_first_character():
    assert MixMode.from_text("Mixed") is MixMode.MIXED
    assert MixMode.from_text("B") is MixMode.BEFORE
    assert MixMode.from_text("After") is MixMode.AFTER


@pytest.mark.parametrize("text", ["x", "", "mixed"])
def test_mix_mode_rejects_other_text(text):
    with pytest.raises(ValueError):
        MixMode.from_text(text)


def test_generate_sequence_only_g():
    rng = Rng.from_seed(3)
    probs = Probabilities.from_individual(1.0, 0.0, 0.0)
    assert generate_sequence(rng, probs, 12) == "G" * 12


def test_generate_sequence_only_t():
    rng = Rng.from_seed(3)
    probs = Probabilities.from_individual(0.0, 0.0, 0.0)
    assert generate_sequence(rng, probs, 7) == "T" * 7


def test_generate_sequence_advances_one_step_per_nucleotide():
    rng = Rng.from_seed(8)
    reference = rng.copy()
    generate_sequence(rng, Probabilities.from_individual(0.25, 0.25, 0.25), 40)
    reference.skip(40)
    assert rng == reference


def test_pattern_length_with_zero_dev_is_mean():
    assert pattern_length(Rng.from_seed(1), 5, 0, 100) == 5


def test_pattern_length_clamped_to_sequence():
    assert pattern_length(Rng.from_seed(1), 500, 0, 100) == 100


def test_pattern_length_at_least_one():
    assert pattern_length(Rng.from_seed(1), 0, 0, 100) == 1


def test_sample_location_clamped_to_fit():
    location = sample_location(Rng.from_seed(2), 1000, 0, 100, 10)
    assert location == 100 - 10


def test_sample_location_rejects_oversized_sample():
    with pytest.raises(ValueError):
        sample_location(Rng.from_seed(2), 0, 0, 5, 6)


@given(st.integers(min_value=0, max_value=2**32), st.integers(min_value=1, max_value=30))
@settings(max_examples=50)
def test_regenerated_sample_matches_copied_sample(seed, length):
    probs = Probabilities.from_individual(0.3, 0.2, 0.3)
    seq_length = 80
    sequence = generate_sequence(Rng.from_seed(seed), probs, seq_length)
    draw = Rng.from_seed(seed + 1)
    copied = copy_sample(draw.copy(), sequence, 40, 25, length)
    regenerated = regenerate_sample(draw, seed, probs, seq_length, 40, 25, length)
    assert copied == regenerated
    assert copied in sequence


def test_pattern_kinds_after():
    assert pattern_kinds(2, 3, MixMode.AFTER) == [R, R, S, S, S]


def test_pattern_kinds_before():
    assert pattern_kinds(2, 3, MixMode.BEFORE) == [S, S, S, R, R]


def test_pattern_kinds_mixed_few_random():
    assert pattern_kinds(1, 3, MixMode.MIXED) == [S, S, S, R]


def test_pattern_kinds_mixed_few_samples():
    assert pattern_kinds(3, 1, MixMode.MIXED) == [R, R, R, S]


def test_pattern_kinds_mixed_single_type():
    assert pattern_kinds(0, 4, MixMode.MIXED) == [S] * 4
    assert pattern_kinds(4, 0, MixMode.MIXED) == [R] * 4


@given(
    st.integers(min_value=0, max_value=20),
    st.integers(min_value=0, max_value=20),
    st.sampled_from(list(MixMode)),
)
def test_pattern_kinds_total(rng_num, samp_num, mix):
    assert len(pattern_kinds(rng_num, samp_num, mix)) == rng_num + samp_num


def test_scenario_rejects_negative_values():
    with pytest.raises(ValueError):
        make_scenario(rng_num=-1)


def test_scenario_rejects_patterns_without_sequence():
    with pytest.raises(ValueError):
        make_scenario(seq_length=0)


def test_build_sequence_shape():
    scenario = make_scenario()
    sequence, patterns = build(scenario)
    assert len(sequence) == scenario.seq_length
    assert set(sequence) <= set("GCAT")
    assert len(patterns) == scenario.pattern_count
    assert all(1 <= len(p) <= scenario.seq_length for p in patterns)


def test_build_samples_occur_in_sequence():
    scenario = make_scenario(mix=MixMode.AFTER)
    sequence, patterns = build(scenario)
    kinds = pattern_kinds(scenario.rng_num, scenario.samp_num, scenario.mix)
    samples = [p for p, kind in zip(patterns, kinds) if kind is S]
    assert len(samples) == scenario.samp_num
    assert all(sample in sequence for sample in samples)


@pytest.mark.parametrize("mix", list(MixMode))
def test_regenerate_and_copy_give_same_patterns(mix):
    scenario = make_scenario(mix=mix)
    assert generate_patterns(scenario, True) == generate_patterns(scenario, False)
    assert build(scenario, True) == build(scenario, False)


def test_build_patterns_match_generate_patterns():
    scenario = make_scenario(seed=99)
    _, patterns = build(scenario)
    assert patterns == generate_patterns(scenario)


def test_build_is_deterministic_per_seed():
    assert build(make_scenario(seed=5)) == build(make_scenario(seed=5))
    assert build(make_scenario(seed=5))[0] != build(make_scenario(seed=6))[0]