import re

import pytest

from cmdrecall.history.filters import (
    DEFAULT_RULES,
    PatternRule,
    PredicateRule,
    first_match,
    reject_blank,
    reject_multiline,
    rules_from_patterns,
    should_reject,
)


@pytest.mark.parametrize("text", ["", " ", "\t\n  ", "\n"])
def test_default_rules_reject_blank(text: str) -> None:
    assert should_reject(text, DEFAULT_RULES)
    assert should_reject(text)


def test_default_rules_admit_text() -> None:
    assert not should_reject("ls -la")
    assert len(DEFAULT_RULES) == 1


def test_empty_rule_list_admits_everything() -> None:
    assert not should_reject("ls", [])
    assert not should_reject("", [])


def test_pattern_rule_is_partial_match() -> None:
    rules = rules_from_patterns(["^secret"])
    assert should_reject("secret-cmd", rules)
    assert not should_reject("public-cmd", rules)

    anywhere = [PatternRule("token=")]
    assert should_reject("curl -H token=abc", anywhere)


def test_predicate_rule_uses_truthiness() -> None:
    rule = PredicateRule(lambda text: text.startswith("rm ") and "yes")
    assert rule.matches("rm -rf build")
    assert not rule.matches("ls")

    none_rule = PredicateRule(lambda text: None)
    assert not none_rule.matches("anything")


def test_evaluation_stops_at_first_match() -> None:
    calls = []

    def record(label: str, result: bool):
        def predicate(text: str) -> bool:
            calls.append(label)
            return result

        return predicate

    rules = [
        PredicateRule(record("first", False)),
        PredicateRule(record("second", True), label="second"),
        PredicateRule(record("third", True)),
    ]
    matched = first_match("cmd", rules)
    assert matched is rules[1]
    assert matched.name == "second"
    assert calls == ["first", "second"]


def test_result_independent_of_order() -> None:
    rules = [PatternRule("^git push"), reject_blank]
    assert should_reject("git push --force", rules) == should_reject("git push --force", list(reversed(rules)))


def test_malformed_pattern_raises_on_evaluation() -> None:
    rule = PatternRule("([unclosed")
    with pytest.raises(re.error):
        should_reject("anything", [rule])
    with pytest.raises(re.error):
        rule.validate()


def test_multiline_rule() -> None:
    assert reject_multiline.matches("echo a\necho b")
    assert reject_multiline.matches("echo a\r")
    assert not reject_multiline.matches("echo a")
    assert reject_multiline.name == "multiline"
