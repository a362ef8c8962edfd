from __future__ import annotations

from pathlib import Path

import pytest

from terminal174.config import (
    Config,
    ConfigError,
    ConfigManager,
    DEFAULT_SYSTEM_PROMPT,
    create_config_manager,
    dump_config,
    parse_config_text,
)
from terminal174.constants import DEFAULT_ENDPOINT, DEFAULT_MODEL


def test_first_run_writes_defaults_and_exits(tmp_path: Path):
    config_dir = tmp_path / "fresh" / "terminal174"

    with pytest.raises(SystemExit) as excinfo:
        create_config_manager(config_dir)

    assert excinfo.value.code == 1
    written = parse_config_text((config_dir / "config.yaml").read_text(encoding="utf-8"))
    assert written == Config().to_dict()
    assert written["system_prompt"] == DEFAULT_SYSTEM_PROMPT


@pytest.mark.parametrize("config", [
    Config(),
    Config(endpoint="http://localhost:11434/v1/chat/completions", api_key="", model="llama3",
           system_prompt="single line"),
    Config(api_key="sk-'quoted'\"key\"", model="yes", system_prompt="  indented\nwith: colon\n\ntrailing\n"),
])
def test_dump_then_parse_round_trips(config: Config):
    loaded, substituted = Config.from_mapping(parse_config_text(dump_config(config)))
    assert substituted == []
    assert loaded == config


def test_loading_a_valid_file_leaves_it_untouched(config_dir: Path):
    config_file = config_dir / "config.yaml"
    before = config_file.read_bytes()

    manager = create_config_manager(config_dir)
    create_config_manager(config_dir)

    assert config_file.read_bytes() == before
    assert manager.config.model == "test-model"
    assert manager.config.api_key == "sk-test-key"


def test_bad_fields_fall_back_and_are_written_back(tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("endpoint: 42\nmodel: custom-model\nextra: true\n", encoding="utf-8")

    manager = ConfigManager(tmp_path)
    assert manager.initialize()

    assert manager.config.endpoint == DEFAULT_ENDPOINT
    assert manager.config.model == "custom-model"
    assert parse_config_text(config_file.read_text(encoding="utf-8")) == manager.config.to_dict()


def test_unknown_keys_of_mixed_types_are_ignored(tmp_path: Path, capsys):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("1: one\nfoo: bar\n", encoding="utf-8")

    manager = ConfigManager(tmp_path)
    assert manager.initialize()

    assert manager.config == Config()
    assert parse_config_text(config_file.read_text(encoding="utf-8")) == Config().to_dict()
    assert "1, foo" in capsys.readouterr().err


def test_empty_file_gets_all_defaults(tmp_path: Path):
    (tmp_path / "config.yaml").write_text("", encoding="utf-8")
    manager = ConfigManager(tmp_path)
    manager.initialize()
    assert manager.config == Config()
    assert manager.config.model == DEFAULT_MODEL


@pytest.mark.parametrize("text", ["endpoint: [unclosed\n", "- just\n- a list\n"])
def test_unrecoverable_file_raises_and_is_not_overwritten(tmp_path: Path, text: str):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(text, encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigManager(tmp_path).initialize()

    assert config_file.read_text(encoding="utf-8") == text


def test_config_accessed_before_initialize(tmp_path: Path):
    with pytest.raises(RuntimeError):
        ConfigManager(tmp_path).config


def test_summary_masks_api_key(config_dir: Path):
    summary = create_config_manager(config_dir).get_summary()
    assert summary["api_key"] == "sk-t..."
    assert "sk-test-key" not in summary.values()
