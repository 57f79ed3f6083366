"""Tests for config loading, validation, logging and styles."""

import json
import logging

from prompt_toolkit.styles import Style

from slippy_geo.config import DEFAULT_CONFIG, Config, _default_config_path
from slippy_geo.logging_conf import setup_logging
from slippy_geo.styles import make_style


class TestConfigLoad:
    def test_env_override_is_the_default_path(self, config_path):
        assert _default_config_path() == str(config_path)

    def test_missing_file_gives_defaults_without_writing(self, config_path):
        cfg = Config.load()
        assert cfg.default_zoom == 14
        assert cfg.viewport_width_px == 400
        assert cfg.precision == 6
        assert not config_path.exists()

    def test_missing_file_created_on_request(self, config_path):
        Config.load(create_if_missing=True)
        assert json.loads(config_path.read_text())["map"]["default_zoom"] == 14

    def test_user_values_merge_over_defaults(self, config_path):
        config_path.write_text(json.dumps({"map": {"default_zoom": 9}}))
        cfg = Config.load()
        assert cfg.default_zoom == 9
        assert cfg.viewport_width_px == 400

    def test_out_of_range_values_are_clamped(self, config_path):
        config_path.write_text(json.dumps({
            "map": {"default_zoom": 25, "viewport_width_px": "wide"},
            "output": {"precision": -1, "theme": "neon", "color": "off"},
            "logging": {"level": "debug"},
        }))
        cfg = Config.load()
        assert cfg.default_zoom == 20
        assert cfg.viewport_width_px == 400
        assert cfg.precision == 0
        assert cfg["output"]["theme"] == "auto"
        assert cfg["output"]["color"] is False
        assert cfg["logging"]["level"] == "DEBUG"

    def test_corrupt_file_is_backed_up_and_ignored(self, config_path):
        config_path.write_text("{not json")
        cfg = Config.load()
        assert cfg.default_zoom == 14
        assert (config_path.parent / (config_path.name + ".corrupt.bak")).exists()

    def test_non_object_sections_fall_back(self, config_path):
        config_path.write_text(json.dumps({"map": 3}))
        assert Config.load().default_zoom == 14

    def test_non_finite_numbers_fall_back(self, config_path):
        config_path.write_text('{"map": {"default_zoom": Infinity, "viewport_width_px": NaN}}')
        cfg = Config.load()
        assert cfg.default_zoom == 14
        assert cfg.viewport_width_px == 400

    def test_defaults_are_not_mutated(self, config_path):
        config_path.write_text(json.dumps({"map": {"default_zoom": 3}}))
        Config.load()
        assert DEFAULT_CONFIG["map"]["default_zoom"] == 14


class TestConfigSave:
    def test_save_round_trips(self, config_path):
        cfg = Config.load()
        cfg["output"]["precision"] = 9
        cfg.save()
        assert Config.load().precision == 9

    def test_update_validates(self, config_path):
        cfg = Config.load()
        cfg.update({"map": {"default_zoom": 0}})
        assert cfg.default_zoom == 1
        assert cfg.viewport_width_px == 400


class TestLogging:
    def test_level_and_rotating_file(self, config_path, tmp_path):
        log_file = tmp_path / "slippy.log"
        cfg = Config.load()
        cfg.update({"logging": {"level": "DEBUG", "file": str(log_file)}})
        setup_logging(cfg)
        setup_logging(cfg)
        pkg = logging.getLogger("slippy_geo")
        try:
            assert pkg.level == logging.DEBUG
            handlers = [h for h in pkg.handlers if getattr(h, "baseFilename", None) == str(log_file)]
            assert len(handlers) == 1
            logging.getLogger("slippy_geo.tiles").debug("hello")
            handlers[0].flush()
            assert "hello" in log_file.read_text()
        finally:
            for h in list(pkg.handlers):
                pkg.removeHandler(h)
                h.close()
            pkg.setLevel(logging.NOTSET)


class TestStyles:
    def test_themes(self, config_path):
        cfg = Config.load()
        for theme in ("light", "dark", "auto"):
            cfg.update({"output": {"theme": theme}})
            assert isinstance(make_style(cfg), Style)

    def test_rules_cover_the_cli_classes(self, config_path):
        cfg = Config.load()
        for theme in ("light", "dark"):
            cfg.update({"output": {"theme": theme}})
            assert {cls for cls, _ in make_style(cfg).style_rules} == {"label", "value", "unit"}

    def test_no_color_has_no_rules(self, config_path):
        cfg = Config.load()
        cfg.update({"output": {"color": False}})
        assert make_style(cfg).style_rules == []
