"""Choose between cargo and cross for a Rust target triple.

cross runs the build inside a Linux container image for the target, which
covers Linux, BSD, Android and windows-gnu targets. Apple and MSVC targets
cannot be containerized; they build natively with cargo when the host runs
the same OS family.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rci.core.result import Err, Ok, Result
from rci.platform.detection import Platform, PlatformInfo

__all__ = [
    "BuildTool",
    "TargetError",
    "TargetTriple",
    "host_triple",
    "select_build_tool",
]


class BuildTool(Enum):
    CARGO = "cargo"
    CROSS = "cross"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TargetError:
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class TargetTriple:
    """A rustc target triple: arch-vendor-os[-env]."""

    arch: str
    vendor: str
    os: str
    env: str | None = None

    @classmethod
    def parse(cls, text: str) -> Result[TargetTriple, TargetError]:
        parts = text.strip().split("-", 3)
        if len(parts) < 3 or not all(parts):
            return Err(
                TargetError(
                    message=f"invalid target triple: {text!r}",
                    hint="expected arch-vendor-os[-env], e.g. x86_64-unknown-linux-gnu",
                )
            )
        env = parts[3] if len(parts) == 4 else None
        return Ok(cls(arch=parts[0], vendor=parts[1], os=parts[2], env=env))

    @property
    def is_apple(self) -> bool:
        return self.vendor == "apple"

    @property
    def is_windows(self) -> bool:
        return self.os == "windows"

    @property
    def is_msvc(self) -> bool:
        return self.is_windows and self.env == "msvc"

    def __str__(self) -> str:
        base = f"{self.arch}-{self.vendor}-{self.os}"
        if self.env:
            return f"{base}-{self.env}"
        return base


def host_triple(info: PlatformInfo) -> str | None:
    """Default rustc host triple for the detected platform."""
    arch = info.arch.rust_name
    if arch is None:
        return None
    match info.platform:
        case Platform.LINUX:
            return f"{arch}-unknown-linux-gnu"
        case Platform.MACOS:
            return f"{arch}-apple-darwin"
        case Platform.WINDOWS:
            return f"{arch}-pc-windows-msvc"
        case _:
            return None


def select_build_tool(
    target: str | None,
    host: str,
    *,
    force_cross: bool = False,
) -> Result[BuildTool, TargetError]:
    host_result = TargetTriple.parse(host)
    if isinstance(host_result, Err):
        return host_result
    host_t = host_result.value

    if force_cross:
        return Ok(BuildTool.CROSS)

    if not target or not target.strip():
        return Ok(BuildTool.CARGO)

    target_result = TargetTriple.parse(target)
    if isinstance(target_result, Err):
        return target_result
    target_t = target_result.value

    if target_t == host_t:
        return Ok(BuildTool.CARGO)
    if target_t.is_apple and host_t.is_apple:
        return Ok(BuildTool.CARGO)
    if target_t.is_msvc and host_t.is_windows:
        return Ok(BuildTool.CARGO)
    return Ok(BuildTool.CROSS)
