"""Eligibility and scoring threshold configuration.

The defaults reproduce the grant rules in use since the first release. An
operator may supply a JSON or YAML rules file instead.
"""

import json
import yaml
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, field_validator


class ScoringThresholds(BaseModel):
    """Cut-offs and point tables for eligibility and award scoring.

    gpa_bands are (lower bound, points): a GPA at or above the bound earns
    the points, highest band wins. shortfall_bands are (upper bound,
    points): a shortfall at or below the bound earns the points, lowest
    band wins; anything above the last bound earns overflow_points.
    """

    min_gpa: float = 2.5
    min_shortfall: float = 10000.0
    gpa_bands: list[tuple[float, int]] = [
        (2.5, 20),
        (3.0, 60),
        (3.5, 80),
        (3.75, 100),
    ]
    shortfall_bands: list[tuple[float, int]] = [
        (10000.0, 100),
        (20000.0, 80),
        (30000.0, 60),
        (50000.0, 20),
    ]
    overflow_points: int = 0
    full_grant_above: int = 160
    partial_grant_above: int = 140
    version: str = "1.0"

    @field_validator('gpa_bands', 'shortfall_bands')
    @classmethod
    def bands_ascending(cls, v: list[tuple[float, int]]) -> list[tuple[float, int]]:
        """Ensure band bounds strictly ascend and points stay within 0-100."""
        if not v:
            raise ValueError("At least one band is required")
        bounds = [bound for bound, _ in v]
        if any(later <= earlier for earlier, later in zip(bounds, bounds[1:])):
            raise ValueError(f"Band bounds must be strictly ascending, got {bounds}")
        for _, points in v:
            if not 0 <= points <= 100:
                raise ValueError(f"Band points must be between 0 and 100, got {points}")
        return v

    @field_validator('overflow_points')
    @classmethod
    def overflow_range(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"Overflow points must be between 0 and 100, got {v}")
        return v

    def model_post_init(self, __context) -> None:
        """Validate that the point tables are monotone and tiers are ordered."""
        gpa_points = [points for _, points in self.gpa_bands]
        if gpa_points != sorted(gpa_points):
            raise ValueError(f"GPA band points must not decrease, got {gpa_points}")

        shortfall_points = [points for _, points in self.shortfall_bands] + [self.overflow_points]
        if shortfall_points != sorted(shortfall_points, reverse=True):
            raise ValueError(
                f"Shortfall band points must not increase, got {shortfall_points}"
            )

        if self.partial_grant_above >= self.full_grant_above:
            raise ValueError(
                f"partial_grant_above ({self.partial_grant_above}) must be below "
                f"full_grant_above ({self.full_grant_above})"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "min_gpa": self.min_gpa,
            "min_shortfall": self.min_shortfall,
            "gpa_bands": [list(band) for band in self.gpa_bands],
            "shortfall_bands": [list(band) for band in self.shortfall_bands],
            "overflow_points": self.overflow_points,
            "full_grant_above": self.full_grant_above,
            "partial_grant_above": self.partial_grant_above,
            "version": self.version,
        }


DEFAULT_THRESHOLDS = ScoringThresholds()


def load_thresholds(filepath: Optional[str] = None) -> ScoringThresholds:
    """Load scoring thresholds from file or return defaults.

    Supports JSON and YAML formats. Keys missing from the file keep their
    default values.

    Args:
        filepath: Optional path to a thresholds file

    Returns:
        ScoringThresholds instance

    Raises:
        FileNotFoundError: If filepath provided but doesn't exist
        ValueError: If the format is unsupported or thresholds are invalid
    """

    if not filepath:
        return DEFAULT_THRESHOLDS

    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Thresholds file not found: {filepath}")

    if path.suffix == '.json':
        with open(path, 'r') as f:
            data = json.load(f)
    elif path.suffix in ['.yaml', '.yml']:
        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in thresholds file {filepath}: {exc}") from exc
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}. Use .json, .yaml, or .yml")

    if not isinstance(data, dict):
        raise ValueError(f"Thresholds file must contain a mapping, got {type(data).__name__}")

    return ScoringThresholds(**data)
