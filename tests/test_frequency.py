from frequency import count_frequencies


def test_count_representative_text():
    freqs = count_frequencies("aaabbc")
    assert freqs == {"a": 3, "b": 2, "c": 1}


def test_count_keeps_first_occurrence_order():
    assert list(count_frequencies("cabbac")) == ["c", "a", "b"]


def test_count_empty_input():
    freqs = count_frequencies("")
    assert freqs == {}
    assert sum(freqs.values()) == 0


def test_counts_sum_to_input_length(sample_text):
    freqs = count_frequencies(sample_text)
    assert sum(freqs.values()) == len(sample_text)
    assert set(freqs) == set(sample_text)
    assert all(n >= 1 for n in freqs.values())


def test_count_non_character_symbols():
    assert count_frequencies([3, 1, 3, 3]) == {3: 3, 1: 1}
