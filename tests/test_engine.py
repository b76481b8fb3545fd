"""End-to-end tests for the lint engine."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from repolint.axioms import AxiomRegistry, UnknownAxiomError
from repolint.engine import Linter, lint
from repolint.models import Result
from repolint.rules import RuleRegistry
from repolint.ruleset import RulesetError


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def always_fails(fs, rule):
    return [Result(rule, "missing file", None, False)]


def always_passes(fs, rule):
    return [Result(rule, "all good", None, True)]


def mixed(fs, rule):
    return [
        Result(rule, "first pass", None, True),
        Result(rule, "a failure", None, False),
        Result(rule, "second pass", None, True),
    ]


def boom(fs, rule):
    raise RuntimeError("boom")


@pytest.fixture
def rules() -> RuleRegistry:
    registry = RuleRegistry()
    registry.register("always-fails", always_fails)
    registry.register("always-passes", always_passes)
    registry.register("mixed", mixed)
    registry.register("boom", boom)
    return registry


@pytest.fixture
def linter(rules, reporter, formatter) -> Linter:
    return Linter(rules=rules, axioms=AxiomRegistry(), formatter=formatter, reporter=reporter)


def test_single_failing_rule(tmp_path: Path, linter: Linter, reporter) -> None:
    ruleset = {"rules": {"all": {"always-fails": [True, {}]}}}

    evaluation = linter.lint(tmp_path, ruleset=ruleset)

    assert len(evaluation) == 1
    assert len(evaluation[0]) == 1
    result = evaluation[0][0]
    assert result.passed is False
    assert result.message == "missing file"
    assert result.rule.level == "error"
    assert linter.exit_code == 1
    assert reporter.results == ["FAIL always-fails: missing file"]


def test_passing_run_leaves_exit_code_clear(tmp_path: Path, linter: Linter) -> None:
    evaluation = linter.lint(tmp_path, ruleset={"rules": {"all": {"always-passes": True}}})

    assert [[r.passed for r in results] for results in evaluation] == [[True]]
    assert linter.exit_code == 0
    assert not linter.failed


def test_warning_failures_do_not_fail_the_run(tmp_path: Path, linter: Linter) -> None:
    evaluation = linter.lint(tmp_path, ruleset={"rules": {"all": {"always-fails": "warning"}}})

    assert evaluation[0][0].passed is False
    assert linter.exit_code == 0


def test_raising_rule_is_isolated(tmp_path: Path, linter: Linter) -> None:
    ruleset = {
        "rules": {
            "all": {
                "first:always-fails": "off",
                "exploding:boom": ["error", {}],
                "last:always-passes": ["error", {}],
            }
        }
    }
    evaluation = linter.lint(tmp_path, ruleset=ruleset)

    assert len(evaluation) == 2
    (failure,) = evaluation[0]
    assert failure.passed is False
    assert failure.message == "boom"
    assert failure.metadata is None
    assert failure.rule.id == "exploding"
    assert failure.rule.module == "boom"
    assert evaluation[1][0].rule.id == "last"
    assert evaluation[1][0].passed is True


def test_malformed_rule_output_is_isolated(tmp_path: Path, rules, linter: Linter, reporter) -> None:
    rules.register("returns-none", lambda fs, rule: [None])
    ruleset = {"rules": {"all": {"bad:returns-none": True, "good:always-passes": True}}}

    evaluation = linter.lint(tmp_path, ruleset=ruleset)

    assert len(evaluation) == 2
    (failure,) = evaluation[0]
    assert failure.rule.id == "bad"
    assert failure.passed is False
    assert "NoneType" in failure.message
    assert evaluation[1][0].rule.id == "good"
    assert reporter.results[-1] == "PASS good: all good"
    assert linter.exit_code == 1


def test_tree_is_walked_again_on_each_run(tmp_path: Path, rules, linter: Linter) -> None:
    def has_readme(fs, rule):
        found = fs.find_first_file("README*")
        return [Result(rule, f"readme: {found}", found, found is not None)]

    rules.register("has-readme", has_readme)
    ruleset = {"rules": {"all": {"has-readme": True}}}

    assert linter.lint(tmp_path, ruleset=ruleset)[0][0].passed is False
    _write(tmp_path / "README.md", "# hi\n")
    assert linter.lint(tmp_path, ruleset=ruleset)[0][0].passed is True


def test_raising_error_level_rule_fails_the_run(tmp_path: Path, linter: Linter) -> None:
    linter.lint(tmp_path, ruleset={"rules": {"all": {"boom": True}}})
    assert linter.exit_code == 1


def test_disabled_rules_are_configured_but_not_run(tmp_path: Path, linter: Linter) -> None:
    evaluation = linter.lint(tmp_path, ruleset={"rules": {"all": {"always-fails": "off"}}})

    assert evaluation == []
    assert linter.exit_code == 0
    assert [r.id for r in linter.configured] == ["always-fails"]
    assert linter.configured[0].enabled is False


def test_unknown_module_is_skipped(tmp_path: Path, linter: Linter, caplog) -> None:
    evaluation = linter.lint(tmp_path, ruleset={"rules": {"all": {"no-such-rule": True, "always-passes": True}}})

    assert len(evaluation) == 1
    assert evaluation[0][0].rule.id == "always-passes"
    assert "no-such-rule" in caplog.text


def test_failures_render_before_passes(tmp_path: Path, linter: Linter, reporter) -> None:
    evaluation = linter.lint(tmp_path, ruleset={"rules": {"all": {"mixed": True}}})

    assert [r.message for r in evaluation[0]] == ["first pass", "a failure", "second pass"]
    assert reporter.results == [
        "FAIL mixed: a failure",
        "PASS mixed: first pass",
        "PASS mixed: second pass",
    ]


def test_only_active_targets_run(tmp_path: Path, rules, reporter, formatter) -> None:
    axioms = AxiomRegistry()
    axioms.register("languages", lambda fs: ["python"])
    linter = Linter(rules=rules, axioms=axioms, formatter=formatter, reporter=reporter)
    ruleset = {
        "axioms": {"languages": "language"},
        "rules": {
            "all": {"everywhere:always-passes": True},
            "language=python": {"python-only:always-passes": True},
            "language=ruby": {"ruby-only:always-fails": True},
            "language=*": {"any-language:always-passes": True},
        },
    }

    evaluation = linter.lint(tmp_path, ruleset=ruleset)

    ran = [results[0].rule.id for results in evaluation]
    assert ran == ["everywhere", "any-language", "python-only"]
    assert linter.exit_code == 0


def test_nested_ruleset_runs_but_is_not_merged(tmp_path: Path, rules, linter: Linter, reporter) -> None:
    rules.register_ruleset("bundle", {"rules": {"all": {"inner:always-fails": True}}})
    ruleset = {"rules": {"all": {"outer:always-passes": True, "bundle": True}}}

    evaluation = linter.lint(tmp_path, ruleset=ruleset)

    assert [results[0].rule.id for results in evaluation] == ["outer"]
    assert "FAIL inner: missing file" in reporter.results
    assert "PASS outer: all good" in reporter.results
    # The nested failure still fails the run
    assert linter.exit_code == 1


def test_nested_ruleset_loaded_from_file(tmp_path: Path, rules, linter: Linter, reporter) -> None:
    bundle = tmp_path / "bundle.json"
    _write(bundle, json.dumps({"rules": {"all": {"inner:always-passes": True}}}))
    rules.register_ruleset("bundle", bundle)

    evaluation = linter.lint(tmp_path / "repo", ruleset={"rules": {"all": {"bundle": True}}})

    assert evaluation == []
    assert reporter.results == ["PASS inner: all good"]


def test_broken_nested_ruleset_becomes_a_failing_result(tmp_path: Path, rules, linter: Linter) -> None:
    rules.register_ruleset("bundle", {"axioms": {"missing-axiom": "x"}, "rules": {}})

    evaluation = linter.lint(tmp_path, ruleset={"rules": {"all": {"bundle": True}}})

    assert len(evaluation) == 1
    assert evaluation[0][0].passed is False
    assert "missing-axiom" in evaluation[0][0].message


def test_unknown_axiom_aborts_the_run(tmp_path: Path, linter: Linter) -> None:
    with pytest.raises(UnknownAxiomError):
        linter.lint(tmp_path, ruleset={"axioms": {"nope": "x"}, "rules": {"all": {"always-passes": True}}})


def test_malformed_ruleset_aborts_the_run(tmp_path: Path, linter: Linter) -> None:
    with pytest.raises(RulesetError):
        linter.lint(tmp_path, ruleset={"rules": ["not", "a", "mapping"]})
    with pytest.raises(RulesetError):
        linter.lint(tmp_path, ruleset={"rules": {"all": {"always-passes": 42}}})


def test_rules_receive_shared_file_system(tmp_path: Path, rules, linter: Linter) -> None:
    seen = []

    def capture(fs, rule):
        seen.append((fs, rule.options["fs"], rule.fs))
        return [Result(rule, "ok", None, True)]

    rules.register("capture", capture)
    linter.lint(tmp_path, ["src"], {"rules": {"all": {"a:capture": True, "b:capture": True}}})

    fs_ids = {id(obj) for triple in seen for obj in triple}
    assert fs_ids == {id(linter.fs)}
    assert linter.fs.target_dir == tmp_path
    assert linter.fs.filter_paths == ["src"]


def test_info_reports_target_and_filters(tmp_path: Path, linter: Linter, reporter) -> None:
    linter.lint(tmp_path, ["src", "docs"], {"rules": {}})

    assert reporter.infos[0] == f"Target directory: {tmp_path}"
    assert reporter.infos[1] == "Paths to include in checks:\n\tsrc\n\tdocs"


def test_discovers_repolint_json_upward(tmp_path: Path, linter: Linter, reporter) -> None:
    _write(tmp_path / "repolint.json", json.dumps({"rules": {"all": {"primary:always-passes": True}}}))
    _write(tmp_path / "repolinter.json", json.dumps({"rules": {"all": {"legacy:always-passes": True}}}))
    target = tmp_path / "project"
    target.mkdir()

    evaluation = linter.lint(target)

    assert [results[0].rule.id for results in evaluation] == ["primary"]
    assert any(info.startswith("Ruleset: ") and "repolint.json" in info for info in reporter.infos)


def test_falls_back_to_legacy_config_name(tmp_path: Path, linter: Linter) -> None:
    _write(tmp_path / "repolinter.json", json.dumps({"rules": {"all": {"legacy:always-passes": True}}}))

    evaluation = linter.lint(tmp_path)

    assert [results[0].rule.id for results in evaluation] == ["legacy"]


def test_module_level_lint_uses_fresh_linter(tmp_path: Path, rules, reporter, formatter) -> None:
    evaluation = lint(
        tmp_path,
        ruleset={"rules": {"all": {"always-fails": True}}},
        rules=rules,
        axioms=AxiomRegistry(),
        reporter=reporter,
        formatter=formatter,
    )
    assert evaluation[0][0].message == "missing file"
