"""Options dataclass for the run command."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class RunOpts:
    """All options for the run command."""

    build_dir: str = "build"
    runtime_dir: str = "bin"
    exec_name: Optional[str] = None
    args: Tuple[str, ...] = field(default_factory=tuple)
