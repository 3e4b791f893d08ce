"""Test suite for batch parsing."""

from arcparse.batching import BatchResult, parse_batch
from arcparse.parsing import ARC_STANDARD, CHU_LIU_EDMONDS, EISNER, eisner_parse


SAMPLES = [
    'The/Determiner cat/Noun sleeps/Verb',
    '',
    [{'text': 'Dogs', 'pos': 'Noun'}, {'text': 'bark', 'pos': 'Verb'}],
    'She/Pronoun reads/Verb books/Noun ./Punctuation',
]


def test_parse_batch():
    progress = []
    batch = parse_batch(SAMPLES, 'eisner', on_progress=progress.append, chunk_size=2)
    assert progress == [50, 100]
    assert batch.algorithm == EISNER
    assert batch.total_processed == 3
    assert len(batch) == 3
    assert batch.sentences == ['The cat sleeps', 'Dogs bark', 'She reads books .']
    assert batch.results[1].result == eisner_parse(SAMPLES[2])
    assert batch.nodes == batch.results[0].result.nodes
    assert batch.edges == batch.results[0].result.edges
    assert len(batch.edges) == 3


def test_progress_is_monotonic():
    progress = []
    samples = ['a/Noun b/Verb'] * 7
    parse_batch(samples, CHU_LIU_EDMONDS, on_progress=progress.append, chunk_size=3)
    assert progress == [43, 86, 100]
    assert progress == sorted(progress)


def test_max_samples():
    progress = []
    batch = parse_batch(SAMPLES, ARC_STANDARD, max_samples=1, on_progress=progress.append)
    assert batch.sentences == ['The cat sleeps']
    assert progress == [100]
    assert len(parse_batch(['a/Noun'] * 1200)) == 1000


def test_empty_batches():
    progress = []
    for samples in ([], None, 'The/Determiner cat/Noun'):
        batch = parse_batch(samples, on_progress=progress.append)
        assert isinstance(batch, BatchResult)
        assert not batch
        assert batch.total_processed == 0
        assert batch.nodes == ()
        assert batch.edges == ()
    assert progress == []


def test_unknown_algorithm():
    batch = parse_batch(SAMPLES[:1], 'bogus')
    assert batch.algorithm == EISNER
    assert len(batch.edges) == 3
