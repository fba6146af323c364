"""Tests for the non-interactive CLI entry points."""

from __future__ import annotations

import json

import pytest

from soundboard_tui import __version__
from soundboard_tui.__main__ import main
from soundboard_tui.persistence.favorites import FAVORITES_KEY
from soundboard_tui.persistence.recently_played import RECENTLY_PLAYED_KEY


@pytest.fixture
def cli_args(tmp_path):
    """Keep preferences and storage out of the real home directory."""
    return [
        "--prefs",
        str(tmp_path / "prefs.yaml"),
        "--storage",
        str(tmp_path / "storage.json"),
    ]


class TestMain:
    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_search(self, cli_args, capsys):
        main([*cli_args, "--search", "iconic"])
        out = capsys.readouterr().out
        assert "tanya_laugh.wav" in out
        assert "Showing" in out

    def test_search_no_match(self, cli_args, capsys):
        main([*cli_args, "--search", "zzzzzzzz"])
        assert 'No sounds found for "zzzzzzzz"' in capsys.readouterr().out

    def test_list_categories(self, cli_args, capsys):
        main([*cli_args, "--list-categories"])
        lines = capsys.readouterr().out.splitlines()
        assert "ALLIED FORCES" in lines[0]
        assert "(allies)" in lines[0]

    def test_favorites_empty(self, cli_args, capsys):
        main([*cli_args, "--favorites"])
        assert "No favorites yet." in capsys.readouterr().out

    def test_favorites_in_order(self, cli_args, tmp_path, capsys):
        (tmp_path / "storage.json").write_text(
            json.dumps(
                {FAVORITES_KEY: json.dumps(["tesla_shot.wav", "tanya_laugh.wav"])}
            )
        )
        main([*cli_args, "--favorites"])
        out = capsys.readouterr().out
        assert out.index("tesla_shot.wav") < out.index("tanya_laugh.wav")

    def test_custom_catalog(self, cli_args, tmp_path, capsys):
        catalog = tmp_path / "catalog.yaml"
        catalog.write_text(
            "categories:\n"
            "  misc: {label: MISC, order: 1}\n"
            "clips:\n"
            "  - {file: alpha.wav, name: Alpha, category: misc}\n"
        )
        main([*cli_args, "--catalog", str(catalog), "--search", "alpha"])
        assert "alpha.wav" in capsys.readouterr().out

    def test_bad_catalog_exits(self, cli_args, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([*cli_args, "--catalog", str(tmp_path / "nope.yaml"), "--search", "x"])
        assert exc.value.code == 1
        assert "error:" in capsys.readouterr().err

    def test_max_recent_must_be_positive(self, cli_args):
        with pytest.raises(SystemExit) as exc:
            main([*cli_args, "--max-recent", "0"])
        assert exc.value.code == 2

    def test_doctor(self, cli_args, capsys):
        with pytest.raises(SystemExit) as exc:
            main([*cli_args, "--doctor"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "190 clips" in out
        assert "All checks passed." in out

    def test_prune_drops_stale_ids(self, cli_args, tmp_path, capsys):
        storage = tmp_path / "storage.json"
        storage.write_text(
            json.dumps({FAVORITES_KEY: json.dumps(["gone.wav", "tanya_laugh.wav"])})
        )
        main([*cli_args, "--prune"])
        assert "Removed 1 stale id(s)." in capsys.readouterr().out
        stored = json.loads(storage.read_text())
        assert json.loads(stored[FAVORITES_KEY]) == ["tanya_laugh.wav"]

    def test_clear_recent(self, cli_args, tmp_path, capsys):
        storage = tmp_path / "storage.json"
        storage.write_text(
            json.dumps({RECENTLY_PLAYED_KEY: json.dumps(["tesla_shot.wav"])})
        )
        main([*cli_args, "--clear-recent"])
        assert "Recently played cleared." in capsys.readouterr().out
        stored = json.loads(storage.read_text())
        assert json.loads(stored[RECENTLY_PLAYED_KEY]) == []
