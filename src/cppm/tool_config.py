"""Names of the external tools cppm shells out to."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class ToolConfig:
    """External tool settings, overridable through ``CPPM_*`` environment variables."""

    cmake: str = "cmake"
    clang_format: str = "clang-format"
    shell: Optional[str] = None
    git_user_name: Optional[str] = None
    git_user_email: Optional[str] = None

    @classmethod
    def from_environ(cls, environ=None):
        environ = os.environ if environ is None else environ
        return cls(
            cmake=environ.get("CPPM_CMAKE") or cls.cmake,
            clang_format=environ.get("CPPM_CLANG_FORMAT") or cls.clang_format,
            shell=environ.get("CPPM_SHELL") or None,
            git_user_name=environ.get("CPPM_GIT_USER_NAME") or None,
            git_user_email=environ.get("CPPM_GIT_USER_EMAIL") or None,
        )
