"""
tests/test_engine.py
====================
End-to-end evaluation through QualityEngine and check_password_quality.
"""
import json
import logging
import math
import threading

import pytest

from pwquality import check_password_quality
from pwquality.core.engine import QualityEngine
from pwquality.core.models import Strength
from pwquality.shared.logger import QualityLogger

INVALID = {
    "valid": False,
    "score": 0,
    "strength": "Very Weak",
    "feedback": ["Password must be a string."],
}


class TestScenarios:

    def test_common_password(self, engine):
        result = engine.evaluate("password")
        assert result.feedback == [
            "Add uppercase letters.",
            "Add numbers.",
            "Add special characters.",
            "Avoid simple sequences like 1234 or qwerty.",
            "Password is too common.",
        ]
        assert result.valid is False
        assert result.score == 1
        assert result.strength in (Strength.VERY_WEAK, Strength.WEAK)
        assert result.entropy == round(8 * math.log2(26), 2)

    def test_strong_password(self, engine):
        result = engine.evaluate("Tr0ub4dor&3xyz")
        assert result.feedback == []
        assert result.score == 90
        assert result.valid is True
        assert result.strength is Strength.STRONG
        assert result.entropy == round(14 * math.log2(94), 2)

    def test_empty_password(self, engine):
        result = engine.evaluate("")
        assert result.feedback == [
            "Password must be at least 8 characters long.",
            "Add uppercase letters.",
            "Add lowercase letters.",
            "Add numbers.",
            "Add special characters.",
            "Password entropy is too low (too predictable).",
        ]
        assert result.score == 0
        assert result.entropy == 0
        assert result.valid is False
        assert result.strength is Strength.VERY_WEAK

    @pytest.mark.parametrize("value", [12345, None, {}, [], 3.5, b"bytes", True, object()])
    def test_non_string_input(self, engine, value):
        result = engine.evaluate(value)
        assert result.to_dict() == INVALID
        assert result.entropy is None

    def test_repeated_character(self, engine):
        result = engine.evaluate("aaaaaaaa")
        assert result.feedback == [
            "Add uppercase letters.",
            "Add numbers.",
            "Add special characters.",
            "Avoid repeating the same character.",
        ]
        assert result.valid is False

    def test_single_character_with_relaxed_options(self, engine, relaxed_options):
        result = engine.evaluate("x", relaxed_options)
        assert result.feedback == ["Avoid repeating the same character."]
        assert result.score == 7
        assert result.valid is False


class TestProperties:

    @pytest.mark.parametrize("password", ["", "a", "password", "Tr0ub4dor&3xyz", "ü" * 300])
    def test_deterministic(self, engine, password):
        assert engine.evaluate(password) == engine.evaluate(password)

    @pytest.mark.parametrize("password", [
        "", "x", "aaaaaaaa", "P@ssw0rd", "correct horse battery staple",
        "Aa1!" * 40, "ÄÖÜ߀", "\t\n ",
    ])
    def test_score_bounds_and_validity_coherence(self, engine, password):
        result = engine.evaluate(password)
        assert 0 <= result.score <= 100
        assert result.valid == (not result.feedback and result.score >= 60)

    def test_common_password_case_insensitive(self, engine):
        for password in ("password", "PASSWORD", "PaSsWoRd"):
            assert "Password is too common." in engine.evaluate(password).feedback

    def test_high_score_with_feedback_is_invalid(self, engine):
        result = engine.evaluate(
            "Tr0ub4dor&3xyz", {"commonPasswords": ["tr0ub4dor&3xyz"]}
        )
        assert result.feedback == ["Password is too common."]
        assert result.score == 85
        assert result.strength is Strength.STRONG
        assert result.valid is False

    def test_no_feedback_below_sixty_is_invalid(self, engine, relaxed_options):
        result = engine.evaluate("ab", relaxed_options)
        assert result.feedback == []
        assert result.score == 14
        assert result.valid is False

    def test_unknown_options_are_ignored(self, engine):
        assert engine.evaluate("password", {"locale": "fr"}) == engine.evaluate("password")

    @pytest.mark.parametrize("key", ["min_length", "minlength", "MinLength"])
    def test_misspelled_option_keys_are_ignored(self, engine, key):
        assert engine.evaluate("Tr0ub4dor&3xyz", {key: 100}).feedback == []


class TestEngineOptions:

    def test_base_options_apply_to_every_call(self, quiet_logger):
        engine = QualityEngine({"minLength": 20}, logger=quiet_logger)
        result = engine.evaluate("Tr0ub4dor&3xyz")
        assert result.feedback == ["Password must be at least 20 characters long."]

    def test_call_options_override_base_options(self, quiet_logger):
        engine = QualityEngine({"minLength": 20}, logger=quiet_logger)
        assert engine.evaluate("Tr0ub4dor&3xyz", {"minLength": 8}).valid is True

    def test_functional_entry_point(self):
        result = check_password_quality("Tr0ub4dor&3xyz")
        assert result.valid is True
        assert check_password_quality(12345).to_dict() == INVALID


class TestLogging:

    def test_password_never_logged(self, tmp_path):
        log_file = tmp_path / "pwquality.log"
        logger = QualityLogger(
            "tests.audit",
            log_level="DEBUG",
            log_file=log_file,
            json_logs=True,
            console_output=False,
        )
        try:
            QualityEngine(logger=logger).evaluate("S3cret!Value#42")
        finally:
            for handler in logger.underlying.handlers:
                handler.close()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        records = [json.loads(line) for line in lines]
        assert records
        assert all(r["component"] == "tests.audit" for r in records)
        assert all(r["operation"] == "evaluate" for r in records)
        assert "S3cret!Value#42" not in log_file.read_text(encoding="utf-8")
        assert records[0]["extra"] == {"length": 15, "feedback": 0}

    def test_library_calls_write_nothing(self, capfd):
        check_password_quality(12345)
        check_password_quality("password")
        QualityEngine().evaluate(None)
        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_records_reach_host_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pwquality"):
            QualityEngine().evaluate(12345)
        messages = [r.getMessage() for r in caplog.records]
        assert "Rejected non-string password input" in messages

    def test_default_engine_keeps_configured_handlers(self, tmp_path):
        configured = QualityLogger(
            "engine", log_file=tmp_path / "engine.log", console_output=False
        )
        handlers = list(configured.underlying.handlers)
        QualityEngine()
        check_password_quality("password")
        assert configured.underlying.handlers == handlers
        assert configured.underlying.propagate is False

    def test_operation_scope_is_per_thread(self, tmp_path):
        log_file = tmp_path / "threads.log"
        logger = QualityLogger(
            "tests.threads",
            log_level="DEBUG",
            log_file=log_file,
            json_logs=True,
            console_output=False,
        )
        both_inside = threading.Barrier(2)

        def worker(name):
            with logger.operation(name):
                both_inside.wait(timeout=5)
                logger.debug("scoped", worker=name)

        threads = [
            threading.Thread(target=worker, args=(name,))
            for name in ("first", "second")
        ]
        try:
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()
            logger.debug("unscoped")
        finally:
            for handler in logger.underlying.handlers:
                handler.close()

        records = [
            json.loads(line)
            for line in log_file.read_text(encoding="utf-8").splitlines()
        ]
        scoped = [r for r in records if r["message"] == "scoped"]
        assert sorted(r["operation"] for r in scoped) == ["first", "second"]
        assert all(r["operation"] == r["extra"]["worker"] for r in scoped)
        assert "operation" not in records[-1]
