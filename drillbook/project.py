"""Generation of rust-project.json for rust-analyzer."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside test blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def add_path(self, path: str) -> None:
        """Add a crate for the path if its extension is rs."""
        _, dot, ext = str(path).partition(".")
        if dot and ext == "rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self) -> None:
        """Add a crate for every .rs file under ./exercises."""
        for found in sorted(Path("exercises").glob("**/*")):
            self.add_path(str(found))

    def get_sysroot_src(self) -> None:
        """Find the standard library sources from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return
        output = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True
        ).stdout.decode("utf-8", errors="replace")
        parts = output.split()
        toolchain = parts[0] if parts else output
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )

    def to_json(self) -> str:
        """Serialise the project compactly."""
        data = {
            "sysroot_src": self.sysroot_src,
            "crates": [asdict(crate) for crate in self.crates],
        }
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self) -> None:
        """Write ./rust-project.json."""
        Path("rust-project.json").write_text(self.to_json(), encoding="utf-8")