"""Include/exclude rule sets built on partial glob matching.

A PatternSet holds ordered rules. The first rule with a pattern occurring
in the candidate decides whether the candidate is included; if no rule
matches, the default effect decides.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Literal, Union

from pydantic import BaseModel, ValidationError as PydanticValidationError

from partglob.config import Config
from partglob.errors import GlobParseError, PatternSetError
from partglob.pattern import ParsedPattern, parse

__all__ = ["PatternRule", "PatternSet"]

logger = logging.getLogger(__name__)

Effect = Literal["include", "exclude"]
_EFFECTS = ("include", "exclude")

PatternLike = Union[str, ParsedPattern]


def _to_parsed(patterns: Iterable[PatternLike]) -> tuple[ParsedPattern, ...]:
    if isinstance(patterns, str):
        raise TypeError(
            f"patterns must be an iterable of patterns, not a single string: {patterns!r}"
        )
    return tuple(p if isinstance(p, ParsedPattern) else parse(p) for p in patterns)


@dataclass(frozen=True)
class PatternRule:
    """A single include/exclude rule.

    ``patterns`` accepts pattern strings or ParsedPatterns and is stored as
    a tuple of ParsedPatterns. The rule matches a candidate if any of its
    patterns occurs in it.

    Raises:
        TypeError: If ``patterns`` is a single string.
        ValueError: If ``effect`` is neither 'include' nor 'exclude'.
        GlobParseError: If a pattern string is malformed.
    """

    patterns: tuple[ParsedPattern, ...]
    effect: str
    description: str = ""

    def __post_init__(self) -> None:
        if self.effect not in _EFFECTS:
            raise ValueError(f"Invalid effect '{self.effect}', must be 'include' or 'exclude'")
        object.__setattr__(self, "patterns", _to_parsed(self.patterns))

    @property
    def included(self) -> bool:
        return self.effect == "include"

    def matches(self, candidate: str) -> bool:
        return any(p.matches_partially(candidate) for p in self.patterns)


class _RuleModel(BaseModel):
    patterns: list[str]
    effect: Effect
    description: str = ""


class _PatternSetModel(BaseModel):
    default_effect: Effect = "exclude"
    rules: list[_RuleModel]


class PatternSet:
    """Ordered include/exclude rules with first-match-wins evaluation.

    Instances are immutable: ``with_rule`` and ``without_rule`` return new
    sets. A PatternSet can be shared between threads.
    """

    __slots__ = ("_rules", "_default_effect")

    def __init__(self, rules: Iterable[PatternRule] = (), default_effect: str = "exclude") -> None:
        if default_effect not in _EFFECTS:
            raise ValueError(
                f"Invalid default effect '{default_effect}', must be 'include' or 'exclude'"
            )
        self._rules: tuple[PatternRule, ...] = tuple(rules)
        self._default_effect = default_effect

    @property
    def rules(self) -> tuple[PatternRule, ...]:
        return self._rules

    @property
    def default_effect(self) -> str:
        return self._default_effect

    @classmethod
    def from_config(cls, config: Config, section: str = "patterns") -> PatternSet:
        """Build a PatternSet from the ``section`` mapping of ``config``.

        The section must provide ``rules`` (a list of mappings with
        ``patterns``, ``effect`` and an optional ``description``) and may
        provide ``default_effect``.

        Raises:
            PatternSetError: If the section is missing or malformed, or a
                pattern cannot be parsed.
        """
        data: Any = config.get(section)
        if data is None:
            raise PatternSetError(f"Config missing required '{section}' section")

        try:
            model = _PatternSetModel.model_validate(data)
        except PydanticValidationError as e:
            errors = [
                {"path": "/".join(str(s) for s in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ]
            raise PatternSetError(
                f"Invalid '{section}' section: {e.error_count()} error(s)", errors=errors, cause=e
            ) from e

        rules: list[PatternRule] = []
        for i, raw in enumerate(model.rules):
            try:
                rules.append(PatternRule(tuple(raw.patterns), raw.effect, raw.description))
            except GlobParseError as e:
                raise PatternSetError(f"Rule {i} has an invalid pattern: {e.message}", cause=e) from e

        logger.debug("Built pattern set with %d rule(s) from '%s'", len(rules), section)
        return cls(rules, default_effect=model.default_effect)

    @classmethod
    def load(cls, yaml_path: str, section: str = "patterns") -> PatternSet:
        """Load a PatternSet from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not a valid YAML mapping.
            PatternSetError: If the rule definitions are invalid.
        """
        return cls.from_config(Config.load(yaml_path), section=section)

    def match(self, candidate: str) -> PatternRule | None:
        """Return the first rule matching ``candidate``, or None."""
        for rule in self._rules:
            if rule.matches(candidate):
                return rule
        return None

    def check(self, candidate: str) -> bool:
        """Return True if ``candidate`` is included by this set."""
        rule = self.match(candidate)
        if rule is None:
            logger.debug("%r: %s by default", candidate, self._default_effect)
            return self._default_effect == "include"
        logger.debug(
            "%r: %s by rule %s",
            candidate,
            rule.effect,
            rule.description or [p.pattern for p in rule.patterns],
        )
        return rule.included

    def filter(self, candidates: Iterable[str]) -> list[str]:
        """Return the included candidates, preserving their order."""
        return [c for c in candidates if self.check(c)]

    def with_rule(self, rule: PatternRule) -> PatternSet:
        """Return a copy with ``rule`` placed first (highest priority)."""
        return PatternSet((rule, *self._rules), self._default_effect)

    def without_rule(self, patterns: Iterable[PatternLike]) -> PatternSet:
        """Return a copy without the first rule whose patterns equal ``patterns``.

        Patterns are compared after parsing, so ``"a**"`` removes a rule
        written with ``"a*"``. Returns this set unchanged if no rule
        matches.

        Raises:
            TypeError: If ``patterns`` is a single string.
        """
        wanted = _to_parsed(patterns)
        for i, rule in enumerate(self._rules):
            if rule.patterns == wanted:
                return PatternSet(self._rules[:i] + self._rules[i + 1 :], self._default_effect)
        return self

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"PatternSet(rules={len(self._rules)}, default_effect={self._default_effect!r})"
