"""Cross-compile a Go module and package the binaries for release."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field

from ripkit.runner import Behavior, CommandRunner, SafetyLevel

_TOOL_TIMEOUT = 30.0


class TargetOs(enum.Enum):
    UNKNOWN = "unknown"
    LINUX = "linux"
    DARWIN = "darwin"
    WINDOWS = "windows"

    def __str__(self) -> str:
        return self.value


class TargetArch(enum.Enum):
    UNKNOWN = "unknown"
    AMD64 = "amd64"
    ARM64 = "arm64"

    def __str__(self) -> str:
        return self.value


@dataclass
class LdVars:
    """Variables injected into a Go build through ``-ldflags``."""

    import_path: str
    kvs: dict[str, str] = field(default_factory=dict)

    def _definitions(self) -> list[str]:
        return [f"{self.import_path}.{k}={v}" for k, v in self.kvs.items()]

    def make_ld_flags(self) -> str:
        """Return the ``-ldflags`` value: stripped symbols plus ``-X`` definitions."""
        flags = ["-s", "-w"]
        for definition in self._definitions():
            flags += ["-X", definition]
        return " ".join(flags)

    @property
    def version(self) -> str:
        try:
            return self.kvs["version"]
        except KeyError:
            raise KeyError("version not in ldFlags!") from None


def _base_name(path: str) -> str:
    return os.path.basename(os.path.normpath(path))


class GoBuilder:
    """Runs ``go build`` and compresses or tars the result."""

    def __init__(self, dir_src: str, dir_out: str, ld_vars: LdVars) -> None:
        self.go_runner = CommandRunner("go", dir_src, Behavior.DO_IT, _TOOL_TIMEOUT)
        self.zip_runner = CommandRunner("zip", dir_out, Behavior.DO_IT, _TOOL_TIMEOUT)
        self.tar_runner = CommandRunner("tar", dir_out, Behavior.DO_IT, _TOOL_TIMEOUT)
        self.pgm_name = _base_name(dir_src)
        self.dir_out = dir_out
        self.ld_vars = ld_vars

    def binary_name(self, target_os: TargetOs) -> str:
        if target_os is TargetOs.WINDOWS:
            return self.pgm_name + ".exe"
        return self.pgm_name

    def archive_name(self, target_os: TargetOs, target_arch: TargetArch) -> str:
        base = "_".join(
            [self.pgm_name, self.ld_vars.version, str(target_os), str(target_arch)]
        )
        if target_os is TargetOs.WINDOWS:
            return base + ".zip"
        return base + ".tar.gz"

    def build(self, target_os: TargetOs, target_arch: TargetArch) -> str:
        """Build and package one binary; return the path of the archive."""
        name = self.binary_name(target_os)
        self.go_runner.comment(f"building {name} for {target_os}:{target_arch}")
        self.go_runner.set_env(
            {
                "HOME": os.environ.get("HOME", ""),  # lets go find ~/go/pkg
                "CGO_ENABLED": "0",  # static binaries
                "GOOS": str(target_os),
                "GOARCH": str(target_arch),
            }
        )
        binary = os.path.join(self.dir_out, name)
        self.go_runner.run(
            SafetyLevel.NO_HARM_DONE,
            "build",
            "-o",
            binary,
            "-ldflags",
            self.ld_vars.make_ld_flags(),
            ".",
        )
        try:
            archive = self._package(target_os, target_arch, name)
        finally:
            try:
                os.remove(binary)
            except OSError:
                pass
        return os.path.join(self.dir_out, archive)

    def _package(
        self, target_os: TargetOs, target_arch: TargetArch, file_name: str
    ) -> str:
        result = self.archive_name(target_os, target_arch)
        if target_os is TargetOs.WINDOWS:
            # -j: don't store the full path to the file.
            self.zip_runner.run(SafetyLevel.NO_HARM_DONE, "-j", result, file_name)
        else:
            self.tar_runner.run(SafetyLevel.NO_HARM_DONE, "cfz", result, file_name)
        return result