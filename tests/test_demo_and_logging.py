"""Smoke tests for the demo host and the logging setup."""

import sys
import os
import logging
import subprocess
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

import mission_demo
from mission_engine.log import setup_logger


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logger rewires the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_demo_runs(capsys):
    assert mission_demo.main([]) == 0
    out = capsys.readouterr().out

    assert "Clear the Pantry: in_progress -> completed" in out
    assert "Escort the Courier: in_progress -> failed" in out
    assert "Ignored: Mission 'clear_the_pantry' has no objective at index 99" in out
    assert "Totals: 200 XP, 85 coins" in out


def test_setup_logger_console_only(monkeypatch):
    monkeypatch.delenv("MC_LOG_TO_FILE", raising=False)
    logger = setup_logger(verbose=True)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logger_level_from_env(monkeypatch):
    monkeypatch.setenv("MC_LOG_LEVEL", "warning")
    logger = setup_logger(save_to_file=False)
    assert logger.level == logging.WARNING


def test_setup_logger_writes_file(monkeypatch, tmp_path):
    monkeypatch.setenv("MC_LOG_DIR", str(tmp_path / "logs"))
    logger = setup_logger(save_to_file=True)

    logging.getLogger("mission_engine.model").info("hello from the engine")
    for handler in logger.handlers:
        handler.flush()

    log_files = list((tmp_path / "logs").glob("missions_*.log"))
    assert len(log_files) == 1
    assert "hello from the engine" in log_files[0].read_text(encoding="utf-8")


def test_old_logs_pruned(monkeypatch, tmp_path):
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    for i in range(4):
        (log_dir / f"missions_2020010{i}_000000.log").write_text("old", encoding="utf-8")
    monkeypatch.setenv("MC_LOG_DIR", str(log_dir))
    monkeypatch.setenv("MC_LOG_BACKUPS", "2")

    setup_logger(save_to_file=True)

    remaining = sorted(p.name for p in log_dir.glob("missions_*.log"))
    assert len(remaining) == 2
    assert "missions_20200103_000000.log" in remaining


def test_host_config_module_not_shadowed(tmp_path):
    """A host with its own top-level config.py can still import the engine."""
    (tmp_path / "config.py").write_text("DEFAULT_TIME_SCALE = 0.25\n", encoding="utf-8")
    repo_root = os.path.join(os.path.dirname(__file__), '..')
    env = dict(os.environ)
    env["PYTHONPATH"] = os.path.abspath(repo_root)

    result = subprocess.run(
        [sys.executable, "-c",
         "import config; from mission_engine import Mission, Objective; "
         "Objective('x', 1); print(config.DEFAULT_TIME_SCALE)"],
        cwd=tmp_path, env=env, capture_output=True, text=True,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "0.25"


def test_engine_settings_live_in_package():
    from mission_engine import config, model
    assert model.get_target_policy is config.get_target_policy
    assert config.__name__ == "mission_engine.config"
