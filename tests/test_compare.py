"""Tests for run-level comparison of two sequences."""

import importlib
import logging

import pytest

from maze import DEFAULT_K
from maze.compare import ComparisonResult, SequenceComparison, compare
from maze.errors import (
    EmptySequenceError,
    HitLimitExceededError,
    InvalidAlphabetError,
    InvalidKError,
)
from maze.example import EXAMPLE_K, load_example
from maze.matches import FORWARD, REVERSE
from maze.sequence import Sequence, normalize


def test_compare_plain_text():
    result = compare('ACGT', 'ACGT', 2)
    assert isinstance(result, ComparisonResult)
    assert result.k == 2
    assert result.hits.pairs(FORWARD) == [(0, 0), (1, 1), (2, 2)]
    assert result.hits.pairs(REVERSE) == [(2, 0), (1, 1), (0, 2)]
    assert result.forward == result.hits.forward
    assert result.reverse == result.hits.reverse


def test_compare_fallback_ids():
    result = compare('ACGT', 'ACGT', 2)
    assert result.reference.id == 'Reference'
    assert result.query.id == 'Query'


def test_compare_fasta_text():
    result = compare('>ref1 desc\nAAAA\n', '>qry1\nTT\nTT\n', 2)
    assert result.reference.id == 'ref1'
    assert result.query.id == 'qry1'
    assert len(result.reverse) == 9
    assert result.forward == ()


def test_compare_k_longer_than_reference_is_empty():
    result = compare('ACG', 'ACGTACGT', 5)
    assert len(result.hits) == 0


def test_invalid_query_alphabet_raises():
    with pytest.raises(InvalidAlphabetError):
        compare('ACGTACGT', 'ACGNACGT', 3)


def test_empty_reference_raises():
    with pytest.raises(EmptySequenceError) as excinfo:
        compare('  \n', 'ACGT', 2)
    assert excinfo.value.label == 'Reference'


def test_empty_query_raises():
    with pytest.raises(EmptySequenceError) as excinfo:
        compare('ACGT', '>only_a_header\n', 2)
    assert excinfo.value.label == 'Query'


@pytest.mark.parametrize('bad_k', [0, -3, 2.0])
def test_invalid_k_raises(bad_k):
    with pytest.raises(InvalidKError):
        compare('ACGT', 'ACGT', bad_k)


def test_integer_like_k_accepted():
    class IntLike:
        def __index__(self):
            return 2

    result = compare('ACGT', 'ACGT', IntLike())
    assert result.k == 2
    assert type(result.k) is int
    assert len(result.forward) == 3


def test_k_checked_before_alphabet():
    with pytest.raises(InvalidKError):
        compare('ACGN', 'ACGT', 0)


def test_emptiness_checked_before_alphabet():
    with pytest.raises(EmptySequenceError):
        compare('', 'NNNN', 2)


def test_alphabet_checked_before_indexing(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError('hits computed for an invalid sequence')

    monkeypatch.setattr(importlib.import_module('maze.compare'), 'build_index', fail)
    monkeypatch.setattr(importlib.import_module('maze.compare'), 'find_hits', fail)
    with pytest.raises(InvalidAlphabetError):
        compare('ACGT', 'ACGN', 2)
    with pytest.raises(InvalidAlphabetError):
        compare('ACGX', 'ACGT', 2)


def test_compare_max_hits():
    with pytest.raises(HitLimitExceededError):
        compare('AAAA', 'TTTT', 2, max_hits=5)


# ---------------------------------------------------------------------------
# SequenceComparison
# ---------------------------------------------------------------------------


@pytest.fixture
def comparison():
    return SequenceComparison(normalize('ACGTACGTTTGCA', 'ref'), k=3)


def test_comparison_properties(comparison):
    assert comparison.k == 3
    assert comparison.reference.id == 'ref'
    assert comparison.index.reference_length == 13
    assert repr(comparison) == "SequenceComparison(reference='ref', length=13, k=3)"


def test_index_shared_across_queries(comparison):
    index = comparison.index
    comparison.compare(normalize('ACGT'))
    comparison.compare(normalize('TTGCA'))
    assert comparison.index is index


def test_results_cached_per_query(comparison, caplog):
    query = normalize('CGTTTG', 'q')
    first = comparison.find_hits(query)
    with caplog.at_level(logging.DEBUG, logger='maze.compare'):
        second = comparison.find_hits(Sequence('CGTTTG', 'other'))
    assert second is first
    assert any('cached' in msg for msg in caplog.messages)


def test_cache_can_be_cleared(comparison):
    query = normalize('CGTTTG')
    first = comparison.find_hits(query)
    comparison.clear_cache()
    second = comparison.find_hits(query)
    assert second is not first
    assert second == first


def test_cache_keeps_only_recent_queries():
    comparison = SequenceComparison(normalize('ACGTACGTTTGCA'), k=3, cache_size=1)
    first = comparison.find_hits(Sequence('CGTTTG'))
    comparison.find_hits(Sequence('ACGT'))
    again = comparison.find_hits(Sequence('CGTTTG'))
    assert again is not first
    assert again == first


def test_cache_disabled():
    comparison = SequenceComparison(normalize('ACGTACGTTTGCA'), k=3, cache_size=0)
    query = Sequence('CGTTTG')
    assert comparison.find_hits(query) is not comparison.find_hits(query)


def test_cached_result_respects_max_hits():
    comparison = SequenceComparison(Sequence('AAAA'), k=2)
    query = Sequence('TTTT')
    assert len(comparison.find_hits(query)) == 9
    with pytest.raises(HitLimitExceededError):
        comparison.find_hits(query, max_hits=4)


def test_empty_query_rejected(comparison):
    with pytest.raises(EmptySequenceError):
        comparison.compare(Sequence(''))


def test_empty_reference_rejected():
    with pytest.raises(EmptySequenceError):
        SequenceComparison(Sequence(''), k=2)


def test_invalid_k_rejected():
    with pytest.raises(InvalidKError):
        SequenceComparison(Sequence('ACGT'), k=0)


def test_from_text():
    comparison = SequenceComparison.from_text('>chrA\nacgtac\n', 2)
    assert comparison.reference.id == 'chrA'
    assert comparison.reference.residues == 'ACGTAC'
    with pytest.raises(InvalidAlphabetError):
        SequenceComparison.from_text('ACGX', 2)
    with pytest.raises(EmptySequenceError):
        SequenceComparison.from_text('>empty\n', 2)


# ---------------------------------------------------------------------------
# Bundled example
# ---------------------------------------------------------------------------


def test_load_example():
    reference, query, k = load_example()
    assert k == EXAMPLE_K == DEFAULT_K == 8
    assert len(reference) == 3605
    assert len(query) == 4680
    assert reference.residues.startswith('CAGCACTTTGGG')


def test_example_comparison_finds_shared_prefix():
    reference, query, k = load_example()
    result = SequenceComparison(reference, k).compare(query)
    # Both sequences start with AGCACTTT (offset by one in the reference).
    assert (1, 0) in result.hits.pairs(FORWARD)
    assert len(result.reverse) > 0
