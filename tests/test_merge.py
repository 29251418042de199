from polykit.common.term import Term
from polykit.polynomial.merge import (
    canonicalize,
    fold,
    iter_merged,
    merge_term,
    merged_length,
)


def tuples(terms):
    return [t.as_tuple() for t in terms]


class TestMergeTerm:

    def test_into_empty(self):
        terms = []
        assert merge_term(terms, Term(1, 1)) == 0
        assert tuples(terms) == [(1, 1)]

    def test_appends_past_the_end(self):
        terms = [Term(1, 1)]
        assert merge_term(terms, Term(2, 5)) == 1
        assert tuples(terms) == [(1, 1), (2, 5)]

    def test_inserts_in_order(self):
        terms = [Term(1, 0), Term(1, 4)]
        merge_term(terms, Term(2, 2))
        merge_term(terms, Term(3, -1))
        assert tuples(terms) == [(3, -1), (1, 0), (2, 2), (1, 4)]

    def test_sums_like_term(self):
        terms = [Term(1, 0), Term(1, 4)]
        assert merge_term(terms, Term(2.5, 4)) == 1
        assert tuples(terms) == [(1, 0), (3.5, 4)]

    def test_drops_cancelled_term(self):
        terms = [Term(1, 0), Term(1, 4)]
        assert merge_term(terms, Term(-1, 0)) is None
        assert tuples(terms) == [(1, 4)]

    def test_skips_new_zero_term(self):
        terms = [Term(1, 0)]
        assert merge_term(terms, Term(0, 3)) is None
        assert tuples(terms) == [(1, 0)]

    def test_stores_a_copy(self):
        terms = []
        term = Term(1, 1)
        merge_term(terms, term)
        term.coefficient = 99
        assert tuples(terms) == [(1, 1)]


class TestIterMerged:

    def test_cancelling_middle_term(self):
        left = [Term(2, 0), Term(3, 1)]
        right = [Term(-3, 1), Term(5, 2)]
        assert tuples(iter_merged(left, right)) == [(2, 0), (5, 2)]

    def test_disjoint_interleave(self):
        left = [Term(1, 0), Term(1, 2), Term(1, 4)]
        right = [Term(2, 1), Term(2, 3)]
        assert [t.exponent for t in iter_merged(left, right)] == [0, 1, 2, 3, 4]

    def test_one_side_empty(self):
        left = [Term(1, 0), Term(2, 3)]
        assert tuples(iter_merged(left, [])) == [(1, 0), (2, 3)]
        assert tuples(iter_merged([], left)) == [(1, 0), (2, 3)]

    def test_duplicates_within_one_operand_fold(self):
        left = [Term(1, 1), Term(2, 1)]
        assert tuples(iter_merged(left, [Term(4, 2)])) == [(3, 1), (4, 2)]

    def test_zero_terms_dropped(self):
        left = [Term(0, 0), Term(1, 1)]
        right = [Term(0, 5)]
        assert tuples(iter_merged(left, right)) == [(1, 1)]

    def test_does_not_alias_inputs(self):
        left = [Term(1, 0)]
        result = list(iter_merged(left, []))
        result[0].coefficient = 7
        assert left[0].coefficient == 1


def test_fold_restarts_after_cancellation():
    stream = [Term(3, 1), Term(-3, 1), Term(2, 1)]
    assert tuples(fold(stream)) == [(2, 1)]


def test_merged_length():
    left = [Term(2, 0), Term(3, 1)]
    right = [Term(-3, 1), Term(5, 2)]
    assert merged_length(left, right) == 2
    assert merged_length(left, [Term(1, 7)]) == 3
    assert merged_length([], []) == 0


def test_canonicalize():
    terms = [Term(1, 2), Term(0, 1), Term(3, 0), Term(-1, 2)]
    assert tuples(canonicalize(terms)) == [(3, 0)]
    assert tuples(canonicalize([Term(1, 3), Term(1, 1), Term(1, 3)])) == [(1, 1), (2, 3)]
