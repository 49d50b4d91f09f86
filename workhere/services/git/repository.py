"""Repository guards run before every command."""

import git

from workhere.exceptions import NotAGitRepositoryError, NotRepositoryRootError
from workhere.logging_config import get_logger

logger = get_logger(__name__)


def check_git_repository(current_dir: str) -> None:
    """Ensure ``current_dir`` is inside a git working directory.

    Raises:
        NotAGitRepositoryError: If ``git rev-parse --git-dir`` fails.
    """
    try:
        git_dir = git.Git(current_dir).rev_parse("--git-dir")
    except (git.exc.GitCommandError, git.exc.GitCommandNotFound) as e:
        logger.debug(f"git rev-parse --git-dir failed in {current_dir}: {e}")
        raise NotAGitRepositoryError() from e
    logger.debug(f"Git directory: {git_dir}")


def check_repository_root(current_dir: str) -> str:
    """Ensure ``current_dir`` is the top-level directory of its repository.

    Returns:
        ``current_dir`` unchanged.

    Raises:
        NotRepositoryRootError: If git reports a different top-level path,
            or cannot report one at all.
    """
    try:
        repo_root = git.Git(current_dir).rev_parse("--show-toplevel").strip()
    except (git.exc.GitCommandError, git.exc.GitCommandNotFound) as e:
        logger.debug(f"git rev-parse --show-toplevel failed in {current_dir}: {e}")
        raise NotRepositoryRootError(current_dir, "") from e

    if repo_root != current_dir:
        logger.debug(f"Repository root is {repo_root}, current directory is {current_dir}")
        raise NotRepositoryRootError(current_dir, repo_root)

    return current_dir
