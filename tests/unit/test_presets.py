"""Unit tests for analysis option presets."""

import pytest

from rescore.contexts.targeting.ats_scorer import ATSOptions
from rescore.contexts.targeting.presets import load_analysis_presets, resolve_options


@pytest.mark.unit
def test_load_analysis_presets_flattens_categories():
    presets = load_analysis_presets()

    assert presets["level_senior"] == {"experience_level": "senior"}
    assert presets["mode_strict"] == {"strict_mode": True}
    assert presets["mode_format"] == {"include_format_analysis": True}
    assert "industry_finance" in presets


@pytest.mark.unit
def test_resolve_options_no_presets():
    assert resolve_options([]) == ATSOptions()


@pytest.mark.unit
def test_resolve_options_combines_presets():
    options = resolve_options(["level_senior", "mode_strict", "mode_format", "industry_technology"])

    assert options == ATSOptions(
        experience_level="senior",
        include_format_analysis=True,
        strict_mode=True,
        industry_focus="technology",
    )


@pytest.mark.unit
def test_resolve_options_later_presets_win():
    options = resolve_options(["mode_strict", "level_entry", "mode_lenient", "level_executive"])

    assert options.strict_mode is False
    assert options.experience_level == "executive"


@pytest.mark.unit
def test_resolve_options_overrides_applied_last():
    options = resolve_options(
        ["level_mid", "mode_strict"],
        overrides={"experience_level": "senior", "strict_mode": None},
    )

    assert options.experience_level == "senior"
    assert options.strict_mode is True


@pytest.mark.unit
def test_resolve_options_unknown_preset():
    with pytest.raises(ValueError, match="Preset 'level_wizard' not found"):
        resolve_options(["level_wizard"])


@pytest.mark.unit
def test_resolve_options_custom_config(tmp_path):
    config = tmp_path / "presets.yaml"
    config.write_text("team:\n  platform:\n    experience_level: mid\n    bogus: 1\n")

    assert load_analysis_presets(config) == {
        "team_platform": {"experience_level": "mid", "bogus": 1}
    }
    with pytest.raises(ValueError, match="Unknown option"):
        resolve_options(["team_platform"], config_path=config)
