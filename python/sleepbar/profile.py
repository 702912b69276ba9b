"""Profile loading and parsing."""

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from ticker.models import UsageError


@dataclass
class Profile:
    """Render defaults read from a YAML file. Unset keys stay None."""
    multiline: bool | None = None
    quiet: bool | None = None
    bar: bool | None = None
    color: bool | None = None
    bar_width: int | None = None
    show_clock: bool | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> "Profile":
        """Load a profile from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise UsageError(f"Profile not found: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise UsageError(f"Invalid YAML in {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise UsageError(f"Cannot read profile {path}: {e}") from e
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict) -> "Profile":
        """Parse a profile from a dictionary."""
        if not isinstance(data, dict):
            raise UsageError("Profile must be a mapping of option: value")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise UsageError(f"Unknown profile option(s): {', '.join(map(str, unknown))}")

        for key, value in data.items():
            if value is None:
                continue
            if key == "bar_width":
                # bool is an int subclass; reject `bar_width: true`
                if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                    raise UsageError(f"bar_width must be a positive integer, got {value!r}")
            elif not isinstance(value, bool):
                raise UsageError(f"{key} must be true or false, got {value!r}")

        return cls(**data)

    def merge(self, **overrides) -> dict:
        """Profile values overlaid with the non-None overrides."""
        merged = {f.name: getattr(self, f.name) for f in fields(self)}
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return {k: v for k, v in merged.items() if v is not None}


def load_profile(path: str | Path | None = None) -> Profile:
    """Load a profile from file, or an empty one when no path is given."""
    if not path:
        return Profile()
    return Profile.from_file(path)
