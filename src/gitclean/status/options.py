"""Check options — which categories of change count toward "dirty"."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class CheckOptions:
    dir: Optional[Union[str, Path]] = None  # defaults to the current directory
    include_submodules: bool = False
    ignore_untracked: bool = False
    ignore_staged: bool = False
    ignore_unstaged: bool = False
    only_untracked: bool = False
    only_staged: bool = False
    only_unstaged: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CheckOptions":
        """Build options from a mapping. camelCase keys are accepted."""
        return cls(**_normalise_keys(data))


def _normalise_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    valid_fields = {f.name for f in dataclasses.fields(CheckOptions)}
    normalised: Dict[str, Any] = {}
    for key, value in data.items():
        name = _CAMEL_RE.sub("_", key).lower()
        if name not in valid_fields:
            raise ValueError(f"Unknown option: {key}")
        if name != "dir" and not isinstance(value, bool):
            raise ValueError(f"Option {key} must be a boolean, got {value!r}")
        normalised[name] = value
    return normalised


def resolve_options(
    options: Union[CheckOptions, Mapping[str, Any], None] = None,
    **flags: Any,
) -> CheckOptions:
    """Normalise what the public API accepts into a CheckOptions.

    Keyword *flags* are applied on top of *options*.
    """
    if options is None:
        base = CheckOptions()
    elif isinstance(options, CheckOptions):
        base = options
    else:
        base = CheckOptions.from_mapping(options)
    if flags:
        base = dataclasses.replace(base, **_normalise_keys(flags))
    return base
