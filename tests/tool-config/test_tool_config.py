import pytest

from cppm.tool_config import ToolConfig


@pytest.mark.unit
class TestToolConfigFromEnviron:

    def test_defaults_when_nothing_is_set(self):
        tools = ToolConfig.from_environ({})

        assert tools.cmake == "cmake"
        assert tools.clang_format == "clang-format"
        assert tools.shell is None
        assert tools.git_user_name is None
        assert tools.git_user_email is None

    def test_reads_overrides(self):
        tools = ToolConfig.from_environ({
            "CPPM_CMAKE": "/opt/cmake/bin/cmake",
            "CPPM_CLANG_FORMAT": "clang-format-17",
            "CPPM_SHELL": "/bin/zsh",
            "CPPM_GIT_USER_NAME": "Dev",
            "CPPM_GIT_USER_EMAIL": "dev@example.com",
        })

        assert tools.cmake == "/opt/cmake/bin/cmake"
        assert tools.clang_format == "clang-format-17"
        assert tools.shell == "/bin/zsh"
        assert tools.git_user_name == "Dev"
        assert tools.git_user_email == "dev@example.com"

    def test_empty_values_fall_back_to_defaults(self):
        tools = ToolConfig.from_environ({"CPPM_CMAKE": "", "CPPM_SHELL": ""})

        assert tools.cmake == "cmake"
        assert tools.shell is None

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("CPPM_CMAKE", "cmake3")

        assert ToolConfig.from_environ().cmake == "cmake3"
