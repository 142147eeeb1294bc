"""Test delimiter-based splitting."""

import pytest
from textscan.core.types import Span
from textscan.engine.scanner import find_all
from textscan.engine.splitter import separate, sep, segment_spans


class TestSeparate:
    """Test separate() segmentation."""
    
    def test_separate_3_comma_delimited_words(self):
        """Default delimiter is a comma."""
        assert separate("Charmander,Squirtle,Bulbasaur") == ["Charmander", "Squirtle", "Bulbasaur"]
    
    def test_no_separator_found(self):
        """A missing delimiter returns the whole input as one segment."""
        text = "It was on a dreary night of November"
        assert separate(text, "@") == [text]
    
    def test_separate_by_empty_string(self):
        """An empty delimiter splits between every character."""
        assert separate("Hello, world!", "") == list("Hello, world!")
    
    def test_separate_empty_text_by_empty_string(self):
        assert separate("", "") == []
    
    def test_separator_of_length_5(self):
        """Multi-character delimiters split on the whole delimiter."""
        text = "bacon strips and bacon strips and bacon strips and bacon strips"
        assert separate(text, " and ") == ["bacon strips"] * 4
    
    def test_by_newline(self):
        text = "first\nsecond\n\nthird\n"
        assert separate(text, "\n") == ["first", "second", "third"]
    
    def test_keep_empty_segments(self):
        """omit_empty=False keeps leading, consecutive and trailing empties."""
        assert separate(",a,,b,", ",", omit_empty=False) == ["", "a", "", "b", ""]
    
    def test_keep_empty_multichar(self):
        assert separate("::a::::b::", "::", omit_empty=False) == ["", "a", "", "b", ""]
    
    def test_omit_empty_removes_all_empties(self):
        assert separate(",a,,b,", ",") == ["a", "b"]
        assert separate("::a::::b::", "::") == ["a", "b"]
    
    def test_empty_text(self):
        """Empty text gives [''] when keeping empties and [] otherwise."""
        assert separate("", ",", omit_empty=False) == [""]
        assert separate("", ",") == []
        assert separate("", "<>", omit_empty=False) == [""]
        assert separate("", "<>") == []
    
    @pytest.mark.parametrize("text,delimiter", [
        ("a,b,,c", ","),
        ("x<>y<><>z<>", "<>"),
        ("no delimiter here", "|"),
        ("", ";"),
        ("; ; ;", "; "),
    ])
    def test_segment_count_and_reconstruction(self, text, delimiter):
        """Keeping empties gives occurrences + 1 segments that rejoin to the text."""
        segments = separate(text, delimiter, omit_empty=False)
        assert len(segments) == len(find_all(text, delimiter)) + 1
        assert delimiter.join(segments) == text
    
    @pytest.mark.parametrize("text,delimiter", [
        (",,,", ","),
        ("a--b----c--", "--"),
        ("abc", ""),
    ])
    def test_omit_empty_never_yields_empty(self, text, delimiter):
        assert "" not in separate(text, delimiter)
    
    def test_sep_alias(self):
        assert sep("1,2,3") == separate("1,2,3")


class TestSegmentSpans:
    """Test offset recording."""
    
    def test_spans_cover_segments(self):
        text = "ab--cd----ef"
        spans = segment_spans(text, "--")
        assert spans == [Span(0, 2), Span(4, 6), Span(8, 8), Span(10, 12)]
        assert [s.slice(text) for s in spans] == ["ab", "cd", "", "ef"]
        assert [s.length for s in spans] == [2, 2, 0, 2]
        assert all(spans)
    
    def test_empty_delimiter_spans(self):
        assert segment_spans("abc", "") == [Span(0, 1), Span(1, 2), Span(2, 3)]
    
    def test_large_input_single_pass(self):
        """Many segments are produced without rebuilding the text."""
        text = "word|" * 20000
        spans = segment_spans(text, "|")
        assert len(spans) == 20001
        assert spans[-1] == Span(len(text), len(text))
