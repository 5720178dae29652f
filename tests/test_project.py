import json
import subprocess
from pathlib import Path
from unittest import mock

from rustlings.project import Crate, RustAnalyzerProject


def test_crate_defaults():
    crate = Crate(root_module="a.rs")
    assert crate.edition == "2021"
    assert crate.cfg == ["test"]
    assert crate.deps == []


def test_to_json_shape():
    project = RustAnalyzerProject(sysroot_src="/lib", crates=[Crate(root_module="a.rs")])
    assert json.loads(project.to_json()) == {
        "sysroot_src": "/lib",
        "crates": [{"root_module": "a.rs", "edition": "2021", "deps": [], "cfg": ["test"]}],
    }


def test_to_json_is_compact():
    assert " " not in RustAnalyzerProject(crates=[Crate(root_module="x.rs")]).to_json()


def test_exercises_to_json_only_rust_files(tmp_path):
    root = tmp_path / "exercises"
    (root / "intro").mkdir(parents=True)
    (root / "clippy").mkdir()
    (root / "intro" / "intro1.rs").write_text("")
    (root / "clippy" / "clippy1.rs").write_text("")
    (root / "README.md").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(root)
    roots = [crate.root_module for crate in project.crates]
    assert roots == sorted([str(root / "clippy" / "clippy1.rs"), str(root / "intro" / "intro1.rs")])


def test_exercises_to_json_empty(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    assert project.crates == []


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/src", crates=[Crate(root_module="b.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text() == project.to_json()


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/library")
    project = RustAnalyzerProject()
    with mock.patch("subprocess.run") as fake:
        project.get_sysroot_src()
    assert project.sysroot_src == "/custom/library"
    fake.assert_not_called()


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    done = subprocess.CompletedProcess(args=[], returncode=0, stdout=b"/toolchain extra\n", stderr=b"")
    project = RustAnalyzerProject()
    with mock.patch("subprocess.run", return_value=done) as fake:
        project.get_sysroot_src()
    assert fake.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert Path(project.sysroot_src).parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert Path(project.sysroot_src).parent.parent.parent.parent.parent == Path("/toolchain")
    assert "Determined toolchain: /toolchain" in capsys.readouterr().out