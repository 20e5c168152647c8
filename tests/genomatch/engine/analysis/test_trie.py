from pytest import fixture
from genomatch.engine.analysis.trie import ApproximateTrie

@fixture
def dummy_trie():
    trie: ApproximateTrie[int] = ApproximateTrie()
    trie.insert("ACGT", 1)
    trie.insert("ACGA", 2)
    trie.insert("TCGT", 3)
    trie.insert("AGGA", 4)
    trie.insert("AC", 5)
    return trie

class TestApproximateTrie:
    def test_exact_find_returns_only_exact_key(self, dummy_trie: ApproximateTrie[int]):
        assert dummy_trie.find("ACGT", True) == [1]

    def test_exact_find_of_missing_key_is_empty(self, dummy_trie: ApproximateTrie[int]):
        assert dummy_trie.find("ACTT", True) == []

    def test_approximate_find_tolerates_one_substitution(self, dummy_trie: ApproximateTrie[int]):
        assert sorted(dummy_trie.find("ACGA", False)) == [1, 2, 4]

    def test_approximate_find_never_substitutes_first_symbol(self, dummy_trie: ApproximateTrie[int]):
        assert 3 not in dummy_trie.find("ACGT", False)
        assert dummy_trie.find("GCGT", False) == []

    def test_approximate_find_rejects_two_substitutions(self, dummy_trie: ApproximateTrie[int]):
        # AGGA differs from ACGT at the second and last symbols
        assert 4 not in dummy_trie.find("ACGT", False)

    def test_approximate_find_does_not_repeat_exact_matches(self, dummy_trie: ApproximateTrie[int]):
        assert dummy_trie.find("ACGT", False).count(1) == 1

    def test_prefix_values_are_not_returned_for_longer_keys(self, dummy_trie: ApproximateTrie[int]):
        assert 5 not in dummy_trie.find("ACGT", False)
        assert dummy_trie.find("AC", True) == [5]

    def test_insert_appends_instead_of_overwriting(self, dummy_trie: ApproximateTrie[int]):
        dummy_trie.insert("ACGT", 10)
        assert dummy_trie.find("ACGT", True) == [1, 10]

    def test_empty_key_is_stored_at_root(self):
        trie: ApproximateTrie[str] = ApproximateTrie()
        trie.insert("", "root")
        assert trie.find("", True) == ["root"]
        assert trie.find("", False) == ["root"]

    def test_reset_discards_all_keys(self, dummy_trie: ApproximateTrie[int]):
        dummy_trie.reset()
        assert dummy_trie.find("ACGT", False) == []
        dummy_trie.insert("ACGT", 7)
        assert dummy_trie.find("ACGT", True) == [7]

    def test_substitution_in_middle_of_long_key(self):
        trie: ApproximateTrie[str] = ApproximateTrie()
        trie.insert("GATTACAGATTACA", "long")
        assert trie.find("GATTACACATTACA", False) == ["long"]
        assert trie.find("GATTACACATTACA", True) == []
