"""
Password Quality Engine
========================

Central orchestrator for password quality evaluation. Runs the pipeline
stages in a fixed order for each call:

1. Resolve settings (caller options overlaid on defaults)
2. Reject non-string input
3. Rule checks (length, character classes, patterns, denylist)
4. Entropy estimation
5. Scoring and classification

Every call allocates its own settings, feedback list and summary, so a
single engine may be shared between threads.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pwquality.analyzers.entropy import EntropyEstimator
from pwquality.analyzers.rules import RuleChecker
from pwquality.analyzers.scoring import Scorer
from pwquality.core.models import QualityResult, invalid_result
from pwquality.core.settings import resolve_settings
from pwquality.shared.logger import QualityLogger


class QualityEngine:
    """Evaluates passwords against a base set of options.

    Usage::

        engine = QualityEngine({"minLength": 12})
        result = engine.evaluate("correct horse battery staple")
        if not result.valid:
            print(result.feedback)

    Attributes:
        options: Base options applied to every evaluation.
        logger: Logger for the engine. The default attaches no handlers and
            propagates to the host application's logging setup.
    """

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        logger: Optional[QualityLogger] = None,
    ) -> None:
        self.options: dict[str, Any] = dict(options or {})
        self.logger = logger or QualityLogger("engine", console_output=False)

        self._rule_checker = RuleChecker()
        self._entropy_estimator = EntropyEstimator()
        self._scorer = Scorer()

    def evaluate(
        self,
        password: Any,
        options: Optional[Mapping[str, Any]] = None,
    ) -> QualityResult:
        """Evaluate *password* and return the full result.

        Never raises for any *password* value; non-string input yields
        the fixed invalid-input result.

        Args:
            password: Candidate password of any type.
            options: Per-call options, overlaid on the engine's base options.

        Returns:
            QualityResult with score, strength, entropy and feedback.
        """
        merged = {**self.options, **options} if options else self.options
        settings = resolve_settings(merged)

        with self.logger.operation("evaluate"):
            if not isinstance(password, str):
                self.logger.debug(
                    "Rejected non-string password input",
                    input_type=type(password).__name__,
                )
                return invalid_result()

            feedback: list[str] = []
            summary = self._rule_checker.check(password, settings, feedback)
            self.logger.debug(
                "Rule checks complete",
                length=len(password),
                feedback=len(feedback),
            )

            entropy = self._entropy_estimator.check(
                password, summary, settings, feedback
            )

            score = self._scorer.score(len(password), summary, len(feedback), entropy)
            result = QualityResult(
                valid=self._scorer.is_valid(score, len(feedback)),
                score=score,
                entropy=round(entropy, 2),
                strength=self._scorer.classify(score),
                feedback=feedback,
            )
            self.logger.info(
                "Password evaluated: score=%d strength=%s valid=%s",
                result.score,
                result.strength.value,
                result.valid,
            )
            return result


_default_engine: Optional[QualityEngine] = None


def check_password_quality(
    password: Any,
    options: Optional[Mapping[str, Any]] = None,
) -> QualityResult:
    """Evaluate *password* with *options* overlaid on the defaults.

    Stateless functional entry point; see :meth:`QualityEngine.evaluate`.
    """
    global _default_engine
    if _default_engine is None:
        _default_engine = QualityEngine()
    return _default_engine.evaluate(password, options)
