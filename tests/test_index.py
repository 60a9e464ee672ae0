"""
TF-IDF index construction tests.
"""

import math

import numpy as np
import pytest

from faq_assistant.faq.index import FaqIndex, build_index, l2_normalize
from faq_assistant.faq.models import FaqEntry


@pytest.fixture
def two_entries():
    return [
        FaqEntry(question="What are your fees?", answer="Flat fee consultations start at $150."),
        FaqEntry(question="Where is your office?", answer="67 Hugill Street, Sault Ste. Marie."),
    ]


class TestVocabulary:

    def test_first_seen_order(self, two_entries):
        index = build_index(two_entries)
        assert index.vocabulary == ("what", "are", "your", "fees", "where", "is", "office")

    def test_no_duplicates(self, two_entries):
        index = build_index(two_entries)
        assert len(index.vocabulary) == len(set(index.vocabulary))

    def test_matrix_shape_matches_corpus_and_vocabulary(self, two_entries):
        index = build_index(two_entries)
        assert index.matrix.shape == (2, 7)
        assert len(index) == 2


class TestIdf:

    def test_smoothed_idf_values(self, two_entries):
        index = build_index(two_entries)
        # "your" is in both documents, the rest in one
        assert index.idf["your"] == pytest.approx(1.0)
        assert index.idf["fees"] == pytest.approx(math.log(3 / 2) + 1)
        assert index.idf["office"] == pytest.approx(math.log(3 / 2) + 1)

    def test_every_term_has_positive_idf(self):
        entries = [
            FaqEntry(question="law firm fees", answer="a"),
            FaqEntry(question="law firm hours", answer="b"),
            FaqEntry(question="law firm office", answer="c"),
        ]
        index = build_index(entries)
        assert set(index.idf) == set(index.vocabulary)
        assert all(w > 0 for w in index.idf.values())
        assert index.idf["law"] == pytest.approx(1.0)

    def test_single_entry_corpus(self):
        index = build_index([FaqEntry(question="Do you offer virtual meetings?", answer="Yes.")])
        assert all(w == pytest.approx(1.0) for w in index.idf.values())
        assert np.linalg.norm(index.matrix[0]) == pytest.approx(1.0, abs=1e-9)


class TestMatrix:

    def test_rows_are_unit_length(self, two_entries):
        index = build_index(two_entries)
        for row in index.matrix:
            assert np.linalg.norm(row) == pytest.approx(1.0, abs=1e-9)

    def test_term_frequency_weighting(self):
        index = build_index([FaqEntry(question="fees fees rates", answer="a")])
        fees, rates = index.matrix[0]
        assert fees == pytest.approx(2 * rates)

    def test_question_without_tokens_gives_zero_row(self):
        entries = [
            FaqEntry(question="?!", answer="a"),
            FaqEntry(question="", answer="c"),
            FaqEntry(question="office hours", answer="b"),
        ]
        index = build_index(entries)
        assert not index.matrix[0].any()
        assert not index.matrix[1].any()
        assert np.linalg.norm(index.matrix[2]) == pytest.approx(1.0, abs=1e-9)

    def test_identical_questions_produce_identical_rows(self):
        entries = [
            FaqEntry(question="What are your fees?", answer="first"),
            FaqEntry(question="What are your fees?", answer="second"),
        ]
        index = build_index(entries)
        assert np.array_equal(index.matrix[0], index.matrix[1])


class TestSnapshot:

    def test_empty_corpus(self):
        index = build_index([])
        assert index.is_empty
        assert index.vocabulary == ()
        assert len(index.idf) == 0
        assert index.matrix.shape == (0, 0)

    def test_empty_factory(self):
        assert FaqIndex.empty().is_empty

    def test_deterministic(self, two_entries):
        a = build_index(two_entries)
        b = build_index(two_entries)
        assert a.vocabulary == b.vocabulary
        assert dict(a.idf) == dict(b.idf)
        assert np.array_equal(a.matrix, b.matrix)

    def test_matrix_is_read_only(self, two_entries):
        index = build_index(two_entries)
        with pytest.raises(ValueError):
            index.matrix[0, 0] = 5.0

    def test_idf_is_read_only(self, two_entries):
        index = build_index(two_entries)
        with pytest.raises(TypeError):
            index.idf["fees"] = 0.0

    def test_idf_vector_follows_vocabulary_order(self, two_entries):
        index = build_index(two_entries)
        assert list(index.idf_vector()) == [index.idf[t] for t in index.vocabulary]


def test_l2_normalize_zero_vector():
    out = l2_normalize(np.zeros(3))
    assert not out.any()
    assert not np.isnan(out).any()
