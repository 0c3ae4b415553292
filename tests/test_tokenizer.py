"""Test delimiter scanning and atom building."""

import pytest

from lyricsplit.segmenters.tokenizer import (
    CLAUSE, SENTENCE, build_atoms, match_clause, match_sentence, split_atoms, tokenize,
)


class TestSentenceTokenizer:
    """Sentence terminators: . ! ? and full-width ！ ？."""
    
    def test_pairs_cover_text(self):
        pairs = tokenize("a. b", SENTENCE)
        
        assert pairs == [("a", "."), (" b", "")]
        assert "".join(c + d for c, d in pairs) == "a. b"
    
    def test_terminator_run_is_one_delimiter(self):
        assert tokenize("What?! Yes", SENTENCE) == [("What", "?!"), (" Yes", "")]
    
    def test_terminator_needs_following_whitespace(self):
        assert split_atoms("3.14 is pi", SENTENCE) == ["3.14 is pi"]
        assert split_atoms("www.example.com rocks", SENTENCE) == ["www.example.com rocks"]
    
    def test_terminator_at_end_of_text(self):
        assert tokenize("Hello.", SENTENCE) == [("Hello", "."), ("", "")]
        assert split_atoms("Hello.", SENTENCE) == ["Hello."]
    
    def test_full_width_terminators(self):
        assert split_atoms("你好！ 再见？", SENTENCE) == ["你好！", "再见？"]
    
    def test_full_width_without_space_does_not_split(self):
        assert split_atoms("你好！再见", SENTENCE) == ["你好！再见"]
    
    def test_ellipsis_is_a_sentence_run(self):
        assert split_atoms("Wait... what", SENTENCE) == ["Wait...", "what"]
    
    def test_match_sentence_direct(self):
        assert match_sentence("a. b", 1) == 2
        assert match_sentence("a.b", 1) is None
        assert match_sentence("ab", 0) is None


class TestClauseTokenizer:
    """Clause punctuation, spaced dashes and ellipses."""
    
    @pytest.mark.parametrize("text", [
        "one, two", "one; two", "one: two", "one， two", "one； two", "one： two",
    ])
    def test_clause_marks(self, text):
        assert len(split_atoms(text, CLAUSE)) == 2
    
    def test_clause_mark_needs_following_whitespace(self):
        assert split_atoms("1,000 miles", CLAUSE) == ["1,000 miles"]
        assert split_atoms("你好，世界", CLAUSE) == ["你好，世界"]
    
    def test_hyphen_inside_word_is_not_a_delimiter(self):
        assert split_atoms("semi-detached house", CLAUSE) == ["semi-detached house"]
    
    @pytest.mark.parametrize("dash", ["-", "--", "–", "—"])
    def test_spaced_dash_run(self, dash):
        pairs = tokenize(f"house {dash} built", CLAUSE)
        
        assert pairs == [("house", f" {dash} "), ("built", "")]
        assert build_atoms(pairs) == [f"house {dash}", "built"]
    
    def test_dash_needs_whitespace_on_both_sides(self):
        assert split_atoms("house -built", CLAUSE) == ["house -built"]
        assert split_atoms("house- built", CLAUSE) == ["house- built"]
        assert split_atoms("house -", CLAUSE) == ["house -"]
    
    def test_ellipsis(self):
        assert tokenize("wait... then", CLAUSE) == [("wait", "..."), (" then", "")]
    
    def test_match_clause_direct(self):
        assert match_clause("a, b", 1) == 2
        assert match_clause("a - b", 1) == 4
        assert match_clause("a-b", 1) is None


class TestBuildAtoms:
    """Atoms are trimmed and never empty."""
    
    def test_drops_blank_atoms(self):
        assert build_atoms([("  ", ""), (" a", "."), ("", "")]) == ["a."]
    
    def test_leading_delimiter_forms_its_own_atom(self):
        assert split_atoms(", and then", CLAUSE) == [",", "and then"]
