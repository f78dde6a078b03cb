"""
Tests for the command-line entry point.
"""

import logging

import pytest

from fractals.main import build_parser, main


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("fractals")
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)


class TestMain:

    def test_list(self, capsys):
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        assert "KochSnowflake" in out
        assert "suggested depth 14" in out

    def test_reports_command_count(self, capsys):
        assert main(["vicsek", "--depth", "2"]) == 0
        assert "Vicsek depth 2: 25 commands" in capsys.readouterr().out

    def test_defaults_to_suggested_depth(self, capsys):
        assert main(["koch-snowflake"]) == 0
        assert "KochSnowflake depth 4: 768 commands" in capsys.readouterr().out

    def test_writes_image(self, tmp_path):
        out = tmp_path / "dragon.bmp"
        assert main(["dragon", "--depth", "3", "--size", "128", "--out", str(out)]) == 0
        assert out.exists()

    def test_unknown_kind(self):
        assert main(["mandelbrot"]) == 2

    def test_negative_depth(self):
        assert main(["tree", "--depth", "-1"]) == 2

    def test_missing_kind(self):
        assert main([]) == 2

    def test_config_file(self, tmp_path, capsys):
        cfg = tmp_path / "cfg.yaml"
        cfg.write_text("max_commands: 10\n", encoding="utf-8")
        assert main(["vicsek", "--depth", "2", "--config", str(cfg)]) == 2
        assert main(["vicsek", "--depth", "1", "--config", str(cfg)]) == 0

    def test_parser_options(self):
        args = build_parser().parse_args(["tree", "--seed", "3", "--size", "320"])
        assert args.kind == "tree"
        assert args.seed == 3
        assert args.size == 320.0

    def test_absurd_depth_is_rejected(self):
        assert main(["Tree", "--depth", "20000"]) == 2

    def test_bad_config_value(self, tmp_path):
        cfg = tmp_path / "bad_bg.yaml"
        cfg.write_text("background: 5\n", encoding="utf-8")
        assert main(["Tree", "--config", str(cfg)]) == 2

    def test_bad_colour_range(self, tmp_path):
        cfg = tmp_path / "bad_colours.yaml"
        cfg.write_text("color_min: 100\ncolor_max: 100\n", encoding="utf-8")
        assert main(["KochSnowflake", "--depth", "1", "--config", str(cfg)]) == 2
