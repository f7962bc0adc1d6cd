"""Tests for the non-interactive command line."""

import json

import start


def _json_lines(out):
    return [json.loads(line) for line in out.splitlines() if line.strip()]


class TestMain:
    def test_json_output(self, capsys):
        assert start.main(["76561198061271782", "--json"]) == 0
        (row,) = _json_lines(capsys.readouterr().out)
        assert row["input"] == "76561198061271782"
        assert row["Steam2"] == "STEAM_1:0:50503027"
        assert row["Steam3"] == "[U:1:101006054]"

    def test_zero_universe_flag(self, capsys):
        assert start.main(["[U:1:101006054]", "--json", "--zero-universe"]) == 0
        (row,) = _json_lines(capsys.readouterr().out)
        assert row["Steam2"] == "STEAM_0:0:50503027"

    def test_universe_flag_applies_to_bare_account_ids(self, capsys):
        assert start.main(["5", "--json", "--universe", "2"]) == 0
        (row,) = _json_lines(capsys.readouterr().out)
        assert row["Steam3"] == "[U:2:5]"

    def test_table_output(self, capsys):
        assert start.main(["[g:1:4]"]) == 0
        out = capsys.readouterr().out
        assert "[g:1:4]" in out
        assert "103582791429521412" in out

    def test_failure_sets_exit_status(self, capsys):
        assert start.main(["[X:1:5]", "76561198061271782", "--json"]) == 1
        captured = capsys.readouterr()
        assert len(_json_lines(captured.out)) == 1
        assert "unknown account type letter" in captured.err

    def test_bad_universe_flag(self, capsys):
        assert start.main(["5", "--universe", "9"]) == 2
        assert "Bad configuration" in capsys.readouterr().err

    def test_reads_file(self, tmp_path, capsys):
        path = tmp_path / "ids.txt"
        path.write_text(
            "# friends\nSTEAM_0:0:50503027\n\n[U:1:3]  # lobby mate\n",
            encoding="utf-8",
        )
        assert start.main(["--file", str(path), "--json"]) == 0
        rows = _json_lines(capsys.readouterr().out)
        assert [r["SteamID64"] for r in rows] == ["76561198061271782", "76561197960265731"]

    def test_missing_file(self, tmp_path, capsys):
        assert start.main(["--file", str(tmp_path / "nope.txt")]) == 2
        assert "Cannot read" in capsys.readouterr().err


class TestConvert:
    def test_hides_validity(self):
        cfg = {"default_universe": 1, "zero_universe": False, "output": "table", "show_validity": False}
        rows = start.convert("76561198061271782", cfg)
        assert "Valid" not in rows

    def test_returns_none_on_failure(self):
        cfg = {"default_universe": 1, "zero_universe": False, "output": "table", "show_validity": True}
        assert start.convert("STEAM_9:0:1", cfg) is None

    def test_universe_zero_account_has_steam2(self, capsys):
        assert start.main(["5", "--json", "--universe", "0"]) == 0
        (row,) = _json_lines(capsys.readouterr().out)
        assert row["Steam2"] == "STEAM_0:1:2"
        assert row["Steam3"] == "[U:0:5]"


class _Answer:
    def __init__(self, value):
        self.value = value

    def ask(self):
        return self.value


class TestGuidedConfig:
    CFG = {"default_universe": 2, "zero_universe": True, "output": "json", "show_validity": True}

    def test_cancelled_prompts_keep_settings(self, monkeypatch):
        monkeypatch.setattr(start.q, "select", lambda *a, **k: _Answer(None))
        monkeypatch.setattr(start.q, "confirm", lambda *a, **k: _Answer(None))
        assert start._guided_config(dict(self.CFG)) == self.CFG

    def test_answers_are_applied(self, monkeypatch):
        answers = iter(["BETA", "table"])
        monkeypatch.setattr(start.q, "select", lambda *a, **k: _Answer(next(answers)))
        monkeypatch.setattr(start.q, "confirm", lambda *a, **k: _Answer(False))
        cfg = start._guided_config(dict(self.CFG))
        assert cfg["default_universe"] == 2
        assert cfg["zero_universe"] is False
        assert cfg["output"] == "table"
