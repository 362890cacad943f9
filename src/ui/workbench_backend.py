"""Backend for the workbench window: runs one operation and captures the outcome."""
from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from common.config import check_input_limit, load_runtime_config
from common.errors import StringityError
from core.operations import OPERATIONS, run_operation


@dataclass(slots=True)
class WorkbenchResult:
    operation: str
    output: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        return self.output if self.ok else f"Error: {self.error}"


def operation_choices() -> List[str]:
    """Operation names grouped by kind, for the selector widget."""

    return sorted(OPERATIONS, key=lambda name: (OPERATIONS[name].kind, name))


def run_workbench(
    operation: str,
    text: str,
    *,
    profile: str = "default",
    config_path: Optional[Path] = None,
) -> WorkbenchResult:
    """Run ``operation`` on ``text`` using profile settings; errors are captured, not raised."""

    try:
        runtime = load_runtime_config(profile, config_path=config_path)
        check_input_limit(text, runtime.profile)
        seed = runtime.profile.shuffle_seed
        options = {
            "level": runtime.profile.compression_level,
            "rng": random.Random(seed) if seed is not None else None,
        }
        output = run_operation(operation, text, options=options)
    except StringityError as exc:
        return WorkbenchResult(operation=operation, error=str(exc))
    return WorkbenchResult(operation=operation, output=output)


def describe(operation: str) -> str:
    if operation not in OPERATIONS:
        return ""
    entry = OPERATIONS[operation]
    inverse = f" (inverse: {entry.inverse})" if entry.inverse else ""
    return f"[{entry.kind}] {entry.description}{inverse}"
