"""Tests for the command line interface."""

import json

from click.testing import CliRunner

from review_severity import cli as cli_module
from review_severity.cli import cli
from review_severity.examples.inputs import ExampleInput
from review_severity.models.request import ChatMessage, CompiledTask, ReviewInput
from tests.fakes import make_classifier, make_logprobs


class TestCompileCommand:
    def test_prompt_and_labels(self):
        result = CliRunner().invoke(cli, ["compile", "-m", "LGTM"])
        assert result.exit_code == 0
        assert 'Comment: "LGTM"' in result.output
        assert "5. Trivial - Whitespace, formatting, or negligible issue" in result.output

    def test_json(self):
        result = CliRunner().invoke(cli, ["compile", "-m", "a", "-d", "b", "-x", "c", "--json"])
        assert result.exit_code == 0
        task = json.loads(result.output)
        assert task["type"] == "vector.completion"
        assert task["messages"][0]["content"].endswith(
            "Code being reviewed:\nb\n\nAdditional context:\nc"
            "\n\nWhich severity category best describes this issue?"
        )

    def test_comment_required(self):
        result = CliRunner().invoke(cli, ["compile"])
        assert result.exit_code == 2


class TestAggregateCommand:
    def test_score(self):
        result = CliRunner().invoke(cli, ["aggregate", "0.2", "0.2", "0.2", "0.2", "0.2"])
        assert result.exit_code == 0
        assert result.output.strip() == "0.5000"

    def test_wrong_count(self):
        result = CliRunner().invoke(cli, ["aggregate", "1", "0"])
        assert result.exit_code == 2

    def test_negative_values_are_accepted(self):
        result = CliRunner().invoke(cli, ["aggregate", "-1", "0", "0", "0", "0"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "-1.0000"

    def test_values_above_one_are_accepted(self):
        result = CliRunner().invoke(cli, ["aggregate", "2", "0", "0", "0", "-0.5"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "2.0000"


class TestDescribeCommand:
    def test_outputs_descriptor(self):
        result = CliRunner().invoke(cli, ["describe"])
        assert result.exit_code == 0
        assert json.loads(result.output)["type"] == "scalar.function"


class TestVerifyExamplesCommand:
    def test_passes(self):
        result = CliRunner().invoke(cli, ["verify-examples"])
        assert result.exit_code == 0
        assert "21" in result.output

    def test_fails_on_mismatch(self, monkeypatch):
        broken = ExampleInput(
            value=ReviewInput(comment="a"),
            compiled_tasks=(CompiledTask(messages=(ChatMessage(content="wrong"),)),),
        )
        monkeypatch.setattr(cli_module, "EXAMPLE_INPUTS", (broken,))
        result = CliRunner().invoke(cli, ["verify-examples"])
        assert result.exit_code == 1
        assert "样例 0" in result.output


class TestScoreCommand:
    def test_scores_with_configured_chain(self, config_file, monkeypatch):
        classifier = make_classifier("B", make_logprobs(B=1.0))
        build_chain = cli_module.create_severity_chain
        monkeypatch.setattr(
            cli_module,
            "create_severity_chain",
            lambda cfg: build_chain(cfg, classifier=classifier),
        )

        result = CliRunner().invoke(cli, ["score", "-m", "Infinite loop on empty input."])

        assert result.exit_code == 0, result.output
        assert "0.7500" in result.output
        saved = json.loads((config_file.parent / "score.json").read_text(encoding="utf-8"))
        assert saved["score"] == 0.75
        assert saved["label"].startswith("Major")

    def test_missing_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, ["score", "-m", "a"])
        assert result.exit_code == 1


class TestInitAndCheck:
    def test_init_then_check(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("REVIEW_SEVERITY_API_KEY", raising=False)
        monkeypatch.delenv("REVIEW_SEVERITY_BASE_URL", raising=False)
        runner = CliRunner()

        assert runner.invoke(cli, ["init"]).exit_code == 0
        assert runner.invoke(cli, ["init"]).exit_code == 1

        result = runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "gpt-4o-mini" in result.output
