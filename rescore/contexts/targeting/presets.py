"""
Analysis Preset Resolution for ATS Scoring

Resolves named option presets into ATSOptions. Presets are composable and can
override each other, so a level, a weighting mode and an industry can be
combined freely.

Examples:
    # Senior candidate, strict weighting, formatting checks
    >>> resolve_options(["level_senior", "mode_strict", "mode_format"])

    # Presets plus an explicit override
    >>> resolve_options(["level_mid"], overrides={"industry_focus": "finance"})
"""

import os
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from rescore.contexts.targeting.ats_scorer import ATSOptions

load_dotenv()
ANALYSIS_PRESETS_PATH = Path(
    os.getenv("ANALYSIS_PRESETS_PATH", Path(__file__).parent / "analysis_presets.yaml")
)

OPTION_FIELDS = {f.name for f in fields(ATSOptions)}


def load_analysis_presets(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """
    Load analysis_presets.yaml and flatten to a single-level dict.

    Collapses nested structure: level.senior -> level_senior

    Args:
        config_path: Optional path to config file (defaults to ANALYSIS_PRESETS_PATH)

    Returns:
        Flattened dict mapping preset names to option overrides
        Example: {"level_senior": {"experience_level": "senior"}, ...}
    """
    if config_path is None:
        config_path = ANALYSIS_PRESETS_PATH

    nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    # Flatten: category.name -> category_name
    flattened = {}
    for category, presets in nested.items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config or {}

    return flattened


def resolve_options(
    preset_names: List[str],
    overrides: Dict[str, Any] = None,
    config_path: Path = None,
) -> ATSOptions:
    """
    Build ATSOptions from named presets plus explicit overrides.

    Presets are applied in order, with later presets overriding earlier ones;
    overrides are applied last. None-valued overrides are ignored so that
    unset CLI flags do not clobber presets.

    Args:
        preset_names: Preset names to apply (e.g., ["level_senior", "mode_strict"])
        overrides: Option values applied after the presets
        config_path: Optional path to analysis_presets.yaml

    Returns:
        ATSOptions

    Raises:
        ValueError: If a preset is not found or sets an unknown option
    """
    presets_dict = load_analysis_presets(config_path)

    values: Dict[str, Any] = {}
    for preset_name in preset_names:
        if preset_name not in presets_dict:
            available = list(presets_dict.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")
        values.update(presets_dict[preset_name])

    if overrides:
        values.update({key: value for key, value in overrides.items() if value is not None})

    unknown = sorted(set(values) - OPTION_FIELDS)
    if unknown:
        raise ValueError(f"Unknown option(s) {unknown}. Valid options: {sorted(OPTION_FIELDS)}")

    return replace(ATSOptions(), **values)
