import pytest

from pattern_demos import DEMO_NAMES, DEMOS, ConfigurationError, build_runner_config, run_demos
from pattern_demos.config import RunnerConfig, SettingsDefaults
from pattern_demos.singleton import get_settings


def test_runner_config_defaults_to_all_demos() -> None:
    config = RunnerConfig()

    assert config.patterns == list(DEMO_NAMES)
    assert config.log_level == "WARNING"


def test_runner_config_normalizes_log_level() -> None:
    assert build_runner_config(["builder"], log_level="debug").log_level == "DEBUG"


def test_runner_config_rejects_unknown_pattern() -> None:
    with pytest.raises(ConfigurationError):
        build_runner_config(["observer"])


def test_runner_config_rejects_bad_log_level() -> None:
    with pytest.raises(ConfigurationError, match="로그 레벨"):
        build_runner_config(["builder"], log_level="LOUD")


def test_runner_config_rejects_empty_patterns() -> None:
    with pytest.raises(ConfigurationError):
        build_runner_config([])


def test_settings_defaults() -> None:
    defaults = SettingsDefaults()

    assert (defaults.theme, defaults.language) == ("Light", "Korean")


def test_run_demos_runs_in_order(capsys) -> None:
    executed = run_demos(build_runner_config(["factory_method", "strategy"]))

    assert executed == ["factory_method", "strategy"]
    out = capsys.readouterr().out
    assert out.index("factory_method") < out.index("strategy")


def test_run_demos_resets_singleton_first(capsys) -> None:
    get_settings().theme = "Dark"

    run_demos(build_runner_config(["singleton"]))

    out = capsys.readouterr().out
    assert "--- 초기 설정값 ---\nCurrent theme: Light" in out


def test_every_configurable_demo_is_registered(capsys) -> None:
    assert list(DEMOS) == list(DEMO_NAMES)

    assert run_demos(RunnerConfig()) == list(DEMO_NAMES)
