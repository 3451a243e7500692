"""
Tests for the shared configuration, logging and math helpers.
"""

import json
import logging
import math

import pytest

from shared.config import GlobalConfig, PinpointConfig, PredictorConfig
from shared.logger import PinpointLogger, configure_logging
from shared.math_utils import normalize_scores, ranking_entropy


class TestConfig:
    """Test TOML configuration loading"""

    def test_defaults(self):
        cfg = PinpointConfig()
        assert cfg.predictor == PredictorConfig()
        assert cfg.predictor.neighbor_limit == 1000
        assert cfg.predictor.scan_timeout == 0.0
        assert cfg.global_settings.log_level == "WARNING"

    def test_load_sections(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            "[global]\n"
            'log_level = "DEBUG"\n'
            "log_json = true\n"
            "\n"
            "[pinpoint]\n"
            'database = "/data/pins.db"\n'
            "neighbor_limit = 250\n"
            "scan_timeout = 1.5\n"
            "unknown_key = 3\n",
            encoding="utf-8",
        )
        cfg = PinpointConfig.load(path)
        assert cfg.global_settings.log_level == "DEBUG"
        assert cfg.global_settings.log_json is True
        assert cfg.predictor.database == "/data/pins.db"
        assert cfg.predictor.neighbor_limit == 250
        assert cfg.predictor.scan_timeout == 1.5
        assert cfg.predictor.top == 0

    def test_missing_sections_use_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("", encoding="utf-8")
        cfg = PinpointConfig.load(path)
        assert cfg.global_settings == GlobalConfig()
        assert cfg.predictor == PredictorConfig()

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PinpointConfig.load(tmp_path / "absent.toml")

    def test_to_dict(self):
        data = PinpointConfig().to_dict()
        assert data["predictor"]["database"] == "pinpoint.db"
        assert data["global_settings"]["debug"] is False


class TestLogger:
    """Test the structured logger"""

    @pytest.fixture
    def log_file(self, tmp_path):
        path = tmp_path / "logs" / "pinpoint.log"
        yield path
        root = logging.getLogger("pinpoint")
        for handler in list(root.handlers):
            handler.close()
        root.handlers.clear()

    def test_json_lines(self, log_file):
        root = configure_logging(
            log_level="INFO", log_file=log_file, json_logs=True, console_output=False
        )
        log = PinpointLogger("tests.component")
        with log.operation("scan"):
            log.info("Scored %d row(s)", 3, rows=3)
        log.debug("hidden")
        for handler in root.handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        entry = json.loads(lines[0])
        assert entry["level"] == "INFO"
        assert entry["logger"] == "pinpoint.tests.component"
        assert entry["message"] == "Scored 3 row(s)"
        assert entry["component"] == "tests.component"
        assert entry["operation"] == "scan"
        assert entry["extra"] == {"rows": 3}

    def test_operation_scope_restored(self):
        log = PinpointLogger("tests.scope")
        with log.operation("outer"):
            with log.operation("inner"):
                assert log._operation == "inner"
            assert log._operation == "outer"
        assert log._operation is None

    def test_reconfigure_replaces_handlers(self, log_file):
        configure_logging(log_file=log_file, console_output=True)
        root = configure_logging(console_output=False)
        assert root.handlers == []
        assert root.level == logging.WARNING


class TestMath:
    """Test normalisation and entropy helpers"""

    def test_normalize(self):
        assert list(normalize_scores([1.0, 3.0], 8.0)) == [0.125, 0.375]

    def test_normalize_non_positive_total(self):
        assert list(normalize_scores([1.0, 2.0], 0.0)) == [0.0, 0.0]

    def test_entropy(self):
        assert ranking_entropy([]) == 0.0
        assert ranking_entropy([0.7]) == 0.0
        assert ranking_entropy([0.25, 0.25, 0.25, 0.25]) == pytest.approx(2.0)
        assert ranking_entropy([0.1, 0.1, 0.0]) == pytest.approx(math.log2(2))
