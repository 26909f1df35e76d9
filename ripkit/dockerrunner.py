"""Build and push a docker image of a program."""

from __future__ import annotations

import logging
import os

from ripkit.gobuilder import LdVars
from ripkit.runner import Behavior, CommandRunner, SafetyLevel

logger = logging.getLogger(__name__)

IMAGE_OWNER = "ripkit"
TOOLCHAIN = "go"
TOOLCHAIN_VERSION = "1.24.0"
BASE_DISTRO = "bullseye"
BASE_IMAGE = f"{TOOLCHAIN}lang:{TOOLCHAIN_VERSION}-{BASE_DISTRO}"
_DOCKER_TIMEOUT = 180.0
_LOGIN_TIMEOUT = 3.0
_LATEST = "latest"


def _dockerfile(pgm_name: str, ld_flags: str) -> str:
    binary = f"/go/bin/{pgm_name}"
    lines = [
        "# This file is generated; DO NOT EDIT.",
        f"FROM {BASE_IMAGE}",
        f"WORKDIR /go/src/{pgm_name}",
        "COPY go.mod .",
        "COPY go.sum .",
        "RUN go mod download",
        "COPY . .",
        "RUN CGO_ENABLED=0 GOWORK=off \\",
        f"  go build -v -o {binary} \\",
        f'  -ldflags "{ld_flags}" \\',
        "  .",
        f'ENTRYPOINT ["{binary}"]',
    ]
    return "\n".join(lines) + "\n"


class DockerRunner:
    """Runs some docker commands."""

    def __init__(self, dir_src: str, dir_tmp: str, ld_vars: LdVars) -> None:
        self.runner = CommandRunner("docker", dir_src, Behavior.DO_IT, _DOCKER_TIMEOUT)
        self.ld_vars = ld_vars
        self.dir_tmp = dir_tmp
        self.pgm_name = os.path.basename(os.path.normpath(dir_src))

    def content(self) -> str:
        """Return the Dockerfile text."""
        return _dockerfile(self.pgm_name, self.ld_vars.make_ld_flags())

    @property
    def image_name(self) -> str:
        return f"{IMAGE_OWNER}/{self.pgm_name}"

    def _tagged(self, tag: str) -> str:
        return f"{self.image_name}:{tag}"

    def build(self) -> None:
        """Write the Dockerfile and build the image tagged with the version."""
        docker_file = os.path.join(self.dir_tmp, "Dockerfile")
        with open(docker_file, "w", encoding="utf-8") as f:
            f.write(self.content())
        self.runner.comment("Wrote " + docker_file)
        self.runner.comment("building docker image at tag " + self.ld_vars.version)
        try:
            self.runner.run(
                SafetyLevel.NO_HARM_DONE,
                "build",
                "--file",
                docker_file,
                "-t",
                self._tagged(self.ld_vars.version),
                ".",
            )
        except Exception as err:
            self._report(err)
            raise

    def push(self) -> None:
        """Tag the versioned image as latest and push both tags.

        A failure pushing the versioned tag is reported but only a failure
        pushing the latest tag is raised.
        """
        versioned = self._tagged(self.ld_vars.version)
        try:
            self.runner.run(
                SafetyLevel.UNDO_IS_HARD, "tag", versioned, self._tagged(_LATEST)
            )
        except Exception as err:
            self._report(err)
            raise
        try:
            self.runner.run(SafetyLevel.UNDO_IS_HARD, "push", versioned)
        except Exception as err:
            self._report(err)
        try:
            self.runner.run(SafetyLevel.UNDO_IS_HARD, "push", self._tagged(_LATEST))
        except Exception as err:
            self._report(err)
            raise

    def login(self) -> None:
        """Run docker login with a short time limit."""
        saved = self.runner.duration
        self.runner.duration = _LOGIN_TIMEOUT
        try:
            self.runner.run(SafetyLevel.NO_HARM_DONE, "login")
        except Exception as err:
            self._report(err)
            raise
        finally:
            self.runner.duration = saved

    def _report(self, err: BaseException) -> None:
        logger.error(str(err))
        logger.error(self.runner.out)