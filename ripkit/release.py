"""Build and publish a release of a Go module to a container registry and GitHub."""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from datetime import datetime, timezone
from typing import Protocol, Sequence

from ripkit.dockerrunner import DockerRunner
from ripkit.ghrunner import GithubRunner
from ripkit.gitrunner import GitRunner
from ripkit.gobuilder import GoBuilder, LdVars, TargetArch, TargetOs
from ripkit.runner import Behavior

logger = logging.getLogger(__name__)

PROVENANCE_IMPORT_PATH = "ripkit/internal/provenance"

_GIT_TIMEOUT = 30.0
_GH_TIMEOUT = 180.0

#: Platforms for which release archives are built; extend as desired.
TARGETS: tuple[tuple[TargetOs, TargetArch], ...] = (
    (TargetOs.LINUX, TargetArch.AMD64),
    (TargetOs.WINDOWS, TargetArch.AMD64),
    (TargetOs.DARWIN, TargetArch.AMD64),
    (TargetOs.DARWIN, TargetArch.ARM64),
)

_TAG_HELP = (
    "Define a tag, e.g.:",
    "    tag=v2.0.0-rc10  # i.e., some semver tag",
    "Delete it (if you want to redefine it):",
    "    git push origin :refs/tags/$tag; git tag -d $tag",
    "Create and push it:",
    '    git tag -m "$tag release" $tag; git push origin $tag',
)


class _TagSource(Protocol):
    def latest_tag(self) -> str: ...

    def head_commit(self) -> str: ...

    def tag_at_commit(self, commit_hash: str) -> str: ...


class TagMismatchError(RuntimeError):
    """The latest tag is not the tag placed at the HEAD commit."""

    def __init__(self, tag: str, commit: str, tag_at_head: str) -> None:
        self.tag = tag
        self.commit = commit
        self.tag_at_head = tag_at_head
        super().__init__("tag mismatch")


def find_tag(git: _TagSource) -> tuple[str, str]:
    """Return (tag, commit) where tag is the latest tag and sits on HEAD.

    Raises TagMismatchError if the latest tag is not at the HEAD commit.
    """
    tag = git.latest_tag()
    commit_head = git.head_commit()
    tag_at_head = git.tag_at_commit(commit_head)
    if tag != tag_at_head:
        logger.warning("         The most recent commit: %s", commit_head)
        logger.warning("  The most recent tag reachable ")
        logger.warning("         from the latest commit: %s", tag_at_head)
        logger.warning("               The 'latest' tag: %s", tag)
        logger.warning("These two tags don't match; apply a new one?")
        raise TagMismatchError(tag, commit_head, tag_at_head)
    return tag, commit_head


def build_release_assets(dir_src: str, dir_out: str, ld_vars: LdVars) -> list[str]:
    """Build an archive for every target platform; return their paths."""
    builder = GoBuilder(dir_src, dir_out, ld_vars)
    assets = []
    for target_os, target_arch in TARGETS:
        path = builder.build(target_os, target_arch)
        logger.info("Created %s", path)
        assets.append(path)
    return assets


def build_and_push_docker_image(dir_src: str, dir_out: str, ld_vars: LdVars) -> None:
    """Log in to the registry, build the image and push it."""
    docker = DockerRunner(dir_src, dir_out, ld_vars)
    docker.login()
    docker.build()
    docker.push()


def release(dir_src: str) -> None:
    """Release the module in dir_src at the tag on the current HEAD.

    The working directory must be the top of the repository, and the tag
    must already exist.
    """
    git = GitRunner(Behavior.DO_IT, _GIT_TIMEOUT)
    git.assure_clean_workspace()
    try:
        tag, commit = find_tag(git)
    except Exception as err:
        if isinstance(err, TagMismatchError):
            logger.warning("The latest tag %s doesn't match latest commit.", err.tag)
        for line in _TAG_HELP:
            logger.warning(line)
        raise
    base = os.path.basename(os.path.normpath(dir_src))
    dir_out = tempfile.mkdtemp(prefix=f"release-{base}-")
    build_date = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    ld_vars = LdVars(
        import_path=PROVENANCE_IMPORT_PATH,
        kvs={"version": tag, "gitCommit": commit, "buildDate": build_date},
    )
    build_and_push_docker_image(dir_src, dir_out, ld_vars)
    assets = build_release_assets(dir_src, dir_out, ld_vars)
    gh = GithubRunner(Behavior.DO_IT, dir_src, _GH_TIMEOUT)
    try:
        gh.release(tag, assets)
    except Exception:
        logger.error(gh.out)
        raise
    if gh.out:
        logger.info(gh.out)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; takes the absolute path of the module to release."""
    logging.basicConfig(level=logging.INFO)
    args = list(sys.argv[1:] if argv is None else argv)
    if not os.environ.get("GH_TOKEN"):
        logger.error("GH_TOKEN not defined, so the gh tool won't work.")
        return 1
    if not args:
        logger.error("Specify the absolute path to the module to build.")
        return 1
    if len(args) > 1:
        logger.error("Specify only the absolute path to the module to build.")
        return 1
    dir_src = args[0]
    if not os.path.isabs(dir_src):
        logger.error("%s is not an absolute path.", dir_src)
        return 1
    try:
        release(dir_src)
    except Exception as err:
        logger.error("%s", err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())