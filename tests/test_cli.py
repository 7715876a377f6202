"""Tests for agent_deploy/cli.py: the agent-ecosystem command."""
import json
import logging
from unittest.mock import patch

import pytest

import ecosystem_config
from agent_deploy import cli


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep main() from attaching handlers to the root logger."""
    with patch.object(cli, "setup_logging") as mock_setup:
        yield mock_setup


class TestDefaultPlan:
    def test_text_output(self, tmp_path, env_file, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "base-agent (default)" in out
        assert "node --experimental-modules index.js" in out
        assert "NODE_ENV=development" in out
        assert "OPENAI_API_KEY=sk-test" in out
        assert "./logs/base-agent-combined.log" in out
        assert "timestamps:  yes" in out

    def test_environment_sorted(self, tmp_path, env_file, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        cli.main([])
        lines = [l.strip() for l in capsys.readouterr().out.splitlines() if "=" in l]
        assert lines == sorted(lines)

    def test_without_env_file(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert cli.main(["--json"]) == 0
        plans = json.loads(capsys.readouterr().out)
        assert plans[0]["environment"] == {"NODE_ENV": "development"}

    def test_verbose_enables_debug(self, tmp_path, monkeypatch, no_logging_setup):
        monkeypatch.chdir(tmp_path)
        cli.main(["-v"])
        assert no_logging_setup.call_args.kwargs["level"] == logging.DEBUG


class TestProfiles:
    def test_production_json(self, tmp_path, env_file, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert cli.main(["--env", "production", "--json"]) == 0
        plan = json.loads(capsys.readouterr().out)[0]
        assert plan["profile"] == "production"
        assert plan["environment"]["NODE_ENV"] == "production"
        assert plan["environment"]["XMTP_ENV"] == "dev"
        assert plan["command"] == ["node", "--experimental-modules", "index.js"]
        assert plan["timestamped"] is True

    def test_unknown_profile_exit_code(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert cli.main(["--env", "staging"]) == 2
        captured = capsys.readouterr()
        assert "unknown profile 'staging'" in captured.err
        assert captured.out == ""


class TestConfigFile:
    def test_env_file_relative_to_config(self, tmp_path, app_dict, capsys):
        sub = tmp_path / "deploy"
        sub.mkdir()
        (sub / ".env").write_text("FROM_DEPLOY_DIR=1\n")
        config = sub / "ecosystem.config.json"
        config.write_text(json.dumps({"apps": [app_dict]}))

        assert cli.main(["--config", str(config), "--json"]) == 0
        plan = json.loads(capsys.readouterr().out)[0]
        assert plan["environment"]["FROM_DEPLOY_DIR"] == "1"

    def test_missing_config(self, tmp_path, capsys):
        assert cli.main(["--config", str(tmp_path / "nope.json")]) == 1
        assert "No apps declared." in capsys.readouterr().err


class TestCheck:
    def test_builtin_is_clean(self, capsys):
        assert cli.main(["--check"]) == 0
        assert "OK: 1 app(s), no warnings" in capsys.readouterr().out

    def test_warnings_fail(self, tmp_path, app_dict, capsys):
        app_dict["watch"] = True
        config = tmp_path / "ecosystem.config.json"
        config.write_text(json.dumps({"apps": [app_dict]}))

        assert cli.main(["--check", "--config", str(config)]) == 1
        assert "WARNING: base-agent: unrecognized option 'watch'" in capsys.readouterr().out

    def test_bad_config(self, bad_config, capsys):
        assert cli.main(["--check", "--config", bad_config]) == 1
        assert "No apps declared." in capsys.readouterr().err


class TestExport:
    def test_writes_ecosystem_json(self, tmp_path, capsys):
        target = tmp_path / "ecosystem.config.json"
        assert cli.main(["--export", str(target)]) == 0
        assert "Exported 1 app(s)" in capsys.readouterr().out
        assert json.loads(target.read_text()) == {"apps": ecosystem_config.APPS}


class TestFormatPlan:
    def test_missing_log_paths_shown_as_dash(self):
        plan = {
            "name": "a",
            "profile": "default",
            "command": ["a.js"],
            "environment": {},
            "logs": {"error": None, "out": None, "combined": None},
            "timestamped": False,
        }
        text = cli.format_plan(plan)
        assert "error log:   -" in text
        assert "timestamps:  no" in text


class TestLoggingSetup:
    def test_builtin_declaration_is_timestamped(self, tmp_path, monkeypatch, no_logging_setup):
        monkeypatch.chdir(tmp_path)
        cli.main([])
        kwargs = no_logging_setup.call_args.kwargs
        assert kwargs["timestamps"] is True
        assert kwargs["log_file"] is None
        assert kwargs["level"] == logging.WARNING

    def test_untimed_config(self, tmp_path, app_dict, no_logging_setup):
        app_dict["time"] = False
        config = tmp_path / "ecosystem.config.json"
        config.write_text(json.dumps({"apps": [app_dict]}))
        cli.main(["--config", str(config), "--json"])
        assert no_logging_setup.call_args.kwargs["timestamps"] is False

    def test_log_file_passed_through(self, tmp_path, monkeypatch, no_logging_setup):
        monkeypatch.chdir(tmp_path)
        log_file = str(tmp_path / "logs" / "agent-ecosystem.log")
        cli.main(["--check", "--log-file", log_file])
        assert no_logging_setup.call_args.kwargs["log_file"] == log_file

    def test_configured_before_load_warnings(self, tmp_path, app_dict, no_logging_setup):
        app_dict["watch"] = True
        config = tmp_path / "ecosystem.config.json"
        config.write_text(json.dumps({"apps": [app_dict]}))
        calls = []
        no_logging_setup.side_effect = lambda **kwargs: calls.append("setup")
        with patch.object(cli, "build_apps", side_effect=lambda raw: calls.append("build") or []):
            cli.main(["--config", str(config)])
        assert calls == ["setup", "build"]


class TestMalformedConfig:
    def test_list_env_block(self, tmp_path, capsys):
        config = tmp_path / "ecosystem.config.json"
        config.write_text(json.dumps({"apps": [
            {"name": "a", "script": "a.js", "env": ["X=1"]},
        ]}))
        assert cli.main(["--config", str(config), "--json"]) == 0
        plan = json.loads(capsys.readouterr().out)[0]
        assert plan["environment"] == {}
        assert plan["command"] == ["a.js"]

    def test_non_string_env_file(self, tmp_path, capsys):
        config = tmp_path / "ecosystem.config.json"
        config.write_text(json.dumps({"apps": [
            {"name": "a", "script": "a.js", "env_file": 42},
        ]}))
        assert cli.main(["--config", str(config)]) == 0
        assert "a (default)" in capsys.readouterr().out
