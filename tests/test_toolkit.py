"""Test the locale-bound toolkit facade."""

import logging

import pytest
from textscan import TextToolkit
from textscan.adapters import StdlibLogger
from textscan.core.errors import InvalidArgumentError
from textscan.core.types import LiteralCheck


class TestTextToolkit:
    """Test toolkit delegation and logging."""
    
    def test_initialization(self, sample_locale, test_logger):
        toolkit = TextToolkit(locale=sample_locale, logger=test_logger)
        
        assert toolkit.locale == sample_locale
        assert toolkit.log == test_logger
    
    def test_default_locale(self):
        toolkit = TextToolkit()
        assert toolkit.locale.name == "C"
        assert toolkit.get_whitespace_string() == "\t\n\v\f\r "
    
    def test_preset_name(self):
        toolkit = TextToolkit(locale="de_DE.UTF-8")
        assert toolkit.is_float_literal("3,14")
        assert not toolkit.is_float_literal("3.14")
    
    def test_scanner_methods(self):
        toolkit = TextToolkit()
        assert toolkit.contains("abc", "")
        assert toolkit.find_all("abcabc", "bc") == [1, 4]
        assert toolkit.count_occurrences("abcabc", "bc") == 2
    
    def test_separate_logs(self, test_logger):
        toolkit = TextToolkit(logger=test_logger)
        
        result = toolkit.separate("a,,b", ",", omit_empty=False)
        
        assert result == ["a", "", "b"]
        level, msg, kv = test_logger.messages[-1]
        assert (level, msg) == ("info", "separate")
        assert kv["segments"] == 3
        assert kv["omit_empty"] is False
    
    def test_segment_spans(self):
        toolkit = TextToolkit()
        spans = toolkit.segment_spans("a--b", "--")
        assert [s.slice("a--b") for s in spans] == ["a", "b"]
    
    def test_trim_edges_error_logged_and_raised(self, test_logger):
        toolkit = TextToolkit(logger=test_logger)
        
        with pytest.raises(InvalidArgumentError):
            toolkit.trim_edges("Hello", -1)
        
        assert test_logger.messages[-1][0] == "error"
        assert test_logger.messages[-1][1] == "invalid_argument"
    
    def test_whitespace_uses_bound_locale(self, sample_locale):
        """The sample locale treats '_' as whitespace."""
        toolkit = TextToolkit(locale=sample_locale)
        
        assert toolkit.trim_whitespace_edges("__a b__") == "a b"
        assert toolkit.strip_whitespace_anywhere("_a_ b_") == "ab"
    
    def test_wrap_nonpositive_width_warns(self, test_logger):
        toolkit = TextToolkit(logger=test_logger)
        
        assert toolkit.wrap_to_width("111222333", 0) == ""
        
        level, msg, kv = test_logger.messages[-1]
        assert (level, msg) == ("warn", "wrap_width_nonpositive")
        assert kv["width"] == 0
    
    def test_wrap_and_count_lines(self):
        toolkit = TextToolkit()
        wrapped = toolkit.wrap_to_width("111222333", 3)
        assert wrapped == "111\n222\n333"
        assert toolkit.count_lines(wrapped) == 2
    
    def test_numeric_overflow_warns(self, test_logger):
        toolkit = TextToolkit(logger=test_logger)
        
        check = toolkit.check_integer_literal("999999999999999999999")
        
        assert isinstance(check, LiteralCheck)
        assert check.reason == "out_of_range"
        level, msg, kv = test_logger.messages[-1]
        assert (level, msg) == ("warn", "numeric_rejected")
        assert kv["kind"] == "integer"
    
    def test_numeric_malformed_info(self, test_logger):
        toolkit = TextToolkit(logger=test_logger)
        
        assert not toolkit.is_float_literal("7.0.0")
        
        level, msg, kv = test_logger.messages[-1]
        assert (level, msg) == ("info", "numeric_rejected")
        assert kv["reason"] == "malformed"
    
    def test_valid_literal_not_logged(self, test_logger):
        toolkit = TextToolkit(logger=test_logger)
        test_logger.clear()
        
        assert toolkit.is_number("42")
        assert test_logger.messages == []
    
    def test_is_number(self):
        toolkit = TextToolkit()
        assert toolkit.is_number("-1.5")
        assert not toolkit.is_number("1e5")
    
    def test_without_logger(self):
        toolkit = TextToolkit()
        assert toolkit.wrap_to_width("abc", -1) == ""
        assert not toolkit.is_integer_literal("x")


class TestStdlibLogger:
    """Test the logging adapter."""
    
    def test_renders_key_values(self, caplog):
        toolkit = TextToolkit(logger=StdlibLogger())
        
        with caplog.at_level(logging.INFO, logger="textscan"):
            toolkit.separate("a,b")
        
        assert "separate" in caplog.text
        assert "segments=2" in caplog.text
    
    def test_warn_maps_to_warning(self, caplog):
        log = StdlibLogger(logging.getLogger("textscan.test"))
        
        with caplog.at_level(logging.WARNING, logger="textscan.test"):
            log.warn("wrap_width_nonpositive", width=0)
        
        assert caplog.records[-1].levelno == logging.WARNING
        assert caplog.records[-1].getMessage() == "wrap_width_nonpositive width=0"
