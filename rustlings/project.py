"""Generation of a rust-project.json file for rust-analyzer."""

from __future__ import annotations

import dataclasses
import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file presented to rust-analyzer as a crate."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_json(self) -> str:
        """Serialize the project compactly."""
        return json.dumps(dataclasses.asdict(self), separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self, path: str | os.PathLike[str] = "./rust-project.json") -> None:
        """Write the project file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    def _add_path(self, path: Path) -> None:
        if path.suffix == ".rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self, root: str | os.PathLike[str] = "./exercises") -> None:
        """Add a crate for every .rs file found under ``root``."""
        for path in sorted(Path(root).glob("**/*")):
            self._add_path(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return
        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        text = (result.stdout or b"").decode("utf-8", errors="replace")
        tokens = text.split()
        toolchain = tokens[0] if tokens else text
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(Path(toolchain, "lib", "rustlib", "src", "rust", "library"))