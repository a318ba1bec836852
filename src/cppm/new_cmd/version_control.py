"""Initial git commit for a freshly generated project, via GitPython."""

import sys

from git import Actor, Repo
from git.exc import GitCommandError, GitCommandNotFound

from cppm.errors import ProcessExitedNonZero, ProcessSpawnFailed

INITIAL_COMMIT_MESSAGE = "Initial commit"


def _describe(command):
    if isinstance(command, (list, tuple)):
        return " ".join(str(part) for part in command)
    return str(command)


def initialize_repository(project_dir, author=None):
    """Equivalent of ``git init && git add . && git commit -m "Initial commit"``.

    Args:
        project_dir: Root of the generated project.
        author: Optional Actor used when git has no identity configured.

    Returns:
        The hexsha of the initial commit.
    """
    try:
        repo = Repo.init(project_dir)
        repo.git.add(".")
        commit = repo.index.commit(
            INITIAL_COMMIT_MESSAGE, author=author, committer=author,
        )
    except GitCommandNotFound as e:
        raise ProcessSpawnFailed(_describe(e.command), e) from e
    except GitCommandError as e:
        raise ProcessExitedNonZero(_describe(e.command), e.status, e.stderr) from e
    return commit.hexsha


class GitInitializer:
    """Creates the project's repository and initial commit."""

    def __init__(self, user_name=None, user_email=None):
        self._author = None
        if user_name and user_email:
            self._author = Actor(user_name, user_email)

    def initialize(self, project_dir):
        hexsha = initialize_repository(project_dir, author=self._author)
        print(f"Initialized git repository in {project_dir} ({hexsha[:7]})", file=sys.stderr)
        return hexsha
