from pathlib import Path

import pytest

from buddy_src.config import load_config
from buddy_src.errors import ScaffoldError
from buddy_src.scaffold import create_package


def _snapshot(root: Path) -> dict[str, bytes | None]:
    return {
        str(p.relative_to(root)): (p.read_bytes() if p.is_file() else None)
        for p in sorted(root.rglob("*"))
    }


def test_create_package_layout(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)

    root = create_package("demo")

    assert root == Path("demo")
    assert _snapshot(tmp_path).keys() == {
        "demo",
        "demo/WORKSPACE",
        "demo/Buddy.toml",
        "demo/src",
        "demo/src/BUILD",
        "demo/src/main.cc",
    }
    assert (tmp_path / "demo" / "WORKSPACE").read_text() == ""


def test_create_package_substitutes_name(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    create_package("demo")

    manifest = (tmp_path / "demo" / "Buddy.toml").read_text()
    build = (tmp_path / "demo" / "src" / "BUILD").read_text()
    source = (tmp_path / "demo" / "src" / "main.cc").read_text()

    assert 'name = "demo"' in manifest
    assert 'version = "0.1.0"' in manifest
    assert "[dependencies]" in manifest
    assert 'cc_binary(\n    name = "demo",\n    srcs = ["main.cc"],\n)' in build
    assert "std::string get_greet(const std::string& who)" in source
    assert 'std::string who = "world";' in source
    assert "void print_localtime()" in source


def test_created_manifest_loads_as_config(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    create_package("demo")

    config = load_config(tmp_path / "demo" / "Buddy.toml")

    assert config.package.name == "demo"
    assert config.package.edition == "2021"
    assert config.dependencies == {}


def test_create_package_prints_success(monkeypatch, tmp_path: Path, capsys):
    monkeypatch.chdir(tmp_path)
    create_package("demo")
    assert "binary (application) `demo` package" in capsys.readouterr().out


def test_create_package_at_absolute_path(tmp_path: Path):
    target = tmp_path / "nested"
    create_package(str(target))
    assert f'name = "{target}"' in (target / "Buddy.toml").read_text()


def test_existing_directory_is_left_untouched(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "demo").mkdir()
    (tmp_path / "demo" / "notes.txt").write_text("keep me")
    before = _snapshot(tmp_path)

    with pytest.raises(ScaffoldError, match="destination `demo` already exists"):
        create_package("demo")

    assert _snapshot(tmp_path) == before


def test_existing_file_is_left_untouched(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "demo").write_text("plain file")

    with pytest.raises(ScaffoldError):
        create_package("demo")

    assert (tmp_path / "demo").read_text() == "plain file"


def test_second_call_performs_no_writes(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    create_package("demo")
    (tmp_path / "demo" / "src" / "main.cc").write_text("// edited")
    after_first = _snapshot(tmp_path)

    with pytest.raises(ScaffoldError):
        create_package("demo")

    assert _snapshot(tmp_path) == after_first


def test_missing_parent_directory_raises_oserror(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        create_package("missing/demo")
