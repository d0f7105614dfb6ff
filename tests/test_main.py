"""Tests for the `python -m steam_market_info INPUT OUTPUT` entry point."""

import pytest

from steam_market_info import main as cli


def _fake_refresh(items):
    for item in items:
        item.lowest_price = "$0.05"
        item.median_price = "$0.03"
        item.volume = 108


class TestMain:
    def test_read_refresh_print_save(self, tmp_path, monkeypatch, capsys):
        src = tmp_path / "input.txt"
        dst = tmp_path / "output.txt"
        src.write_text('"Example Item" 730\n\n"Another Item" 570 2\n', encoding="utf-8")
        monkeypatch.setattr(cli, "refresh_items", _fake_refresh)

        cli.main([str(src), str(dst)])

        assert dst.read_text(encoding="utf-8") == (
            '"Example Item" | $0.05 | $0.03 | 108\n"Another Item" | $0.05 | $0.03 | 108'
        )
        out = capsys.readouterr().out.splitlines()
        assert out[0].startswith("Item { name: Example Item, appId: 730, currencyId: 1,")
        assert out[1].startswith("Item { name: Another Item, appId: 570, currencyId: 2,")

    def test_bad_input_exits_2(self, tmp_path, monkeypatch, capsys):
        src = tmp_path / "input.txt"
        src.write_text("InvalidLine\n", encoding="utf-8")
        monkeypatch.setattr(cli, "refresh_items", _fake_refresh)

        with pytest.raises(SystemExit) as exc:
            cli.main([str(src), str(tmp_path / "output.txt")])

        assert exc.value.code == 2
        assert "Invalid file format: InvalidLine" in capsys.readouterr().out
        assert not (tmp_path / "output.txt").exists()

    def test_missing_input_exits_2(self, tmp_path, monkeypatch):
        monkeypatch.setattr(cli, "refresh_items", _fake_refresh)

        with pytest.raises(SystemExit) as exc:
            cli.main([str(tmp_path / "nope.txt"), str(tmp_path / "output.txt")])

        assert exc.value.code == 2

    def test_help_works_without_config(self, monkeypatch, capsys):
        from steam_market_info import config

        monkeypatch.setitem(config.CFG, "STEAM_PRICE_URL", "")

        with pytest.raises(SystemExit) as exc:
            cli.main(["-h"])

        assert exc.value.code == 0
        assert "usage: steam_market_info" in capsys.readouterr().out

    def test_blank_url_exits_2_after_parsing(self, tmp_path, monkeypatch, capsys):
        from steam_market_info import config

        monkeypatch.setitem(config.CFG, "STEAM_PRICE_URL", "")

        with pytest.raises(SystemExit) as exc:
            cli.main([str(tmp_path / "input.txt"), str(tmp_path / "output.txt")])

        assert exc.value.code == 2
        assert "STEAM_PRICE_URL" in capsys.readouterr().out
