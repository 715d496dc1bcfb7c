"""Tests for manifest discovery and processing."""

import os
from pathlib import Path

from symlinklib.models import Identity, LinkStatus
from symlinklib.traversal import discover_manifests, process_manifest

from conftest import write


def test_discover_nested_manifests(tmp_path):
    """Test that only exact <user>@<host>.config names are found, at any depth."""
    identity = Identity(user="alice", host="box")
    top = write(tmp_path / "alice@box.config")
    nested = write(tmp_path / "machines" / "laptop" / "alice@box.config")
    write(tmp_path / "bob@box.config")
    write(tmp_path / "alice@box.config.bak")
    write(tmp_path / "Alice@box.config")
    write(tmp_path / "shared" / "home.config")

    found = list(discover_manifests(tmp_path, identity))

    assert sorted(found) == sorted([top, nested])


def test_discover_sorted_depth_first(tmp_path):
    identity = Identity(user="alice", host="box")
    paths = [
        write(tmp_path / "a" / "alice@box.config"),
        write(tmp_path / "b" / "c" / "alice@box.config"),
        write(tmp_path / "d" / "alice@box.config"),
    ]

    assert list(discover_manifests(tmp_path, identity)) == paths


def test_discover_ignores_broken_symlinks_and_loops(tmp_path):
    identity = Identity(user="alice", host="box")
    manifest = write(tmp_path / "alice@box.config")
    (tmp_path / "dangling").symlink_to(tmp_path / "nowhere")
    (tmp_path / "loop").symlink_to(tmp_path)

    assert list(discover_manifests(tmp_path, identity)) == [manifest]


def test_discover_missing_root(tmp_path):
    assert list(discover_manifests(tmp_path / "missing", Identity("alice", "box"))) == []


def test_links_applied_before_includes(config, home, make_context):
    """Test that a manifest's own links come before the links of its includes."""
    context, _ = make_context()
    write(config.dotfiles_dir / "a")
    write(config.dotfiles_dir / "b")
    write(config.config_dir / "shared" / "b.config", "~/.b b\n")
    manifest = write(config.config_dir / "alice@box.config", "include shared/b.config\n~/.a a\n")

    results = process_manifest(config, context, manifest)

    assert [r.destination.name for r in results] == [".a", ".b"]
    assert (home / ".a").is_symlink()
    assert (home / ".b").is_symlink()


def test_global_overwrite_propagates(config, home, make_context):
    """Test that one OverwriteAll answer resolves every later conflict."""
    context, prompt = make_context("O")
    lines = []
    for name in ("one", "two", "three"):
        write(config.dotfiles_dir / name, "managed")
        write(home / f".{name}", "local")
        lines.append(f"~/.{name} {name}")
    manifest = write(config.config_dir / "alice@box.config", "\n".join(lines))

    results = process_manifest(config, context, manifest)

    assert len(prompt.titles) == 1
    assert [r.status for r in results] == [LinkStatus.OVERWRITTEN] * 3
    for name in ("one", "two", "three"):
        assert (home / f".{name}").is_symlink()


def test_global_action_spans_includes(config, home, make_context):
    context, prompt = make_context("S")
    write(config.dotfiles_dir / "a")
    write(config.dotfiles_dir / "b")
    write(home / ".a", "local")
    write(home / ".b", "local")
    write(config.config_dir / "shared.config", "~/.b b\n")
    manifest = write(config.config_dir / "alice@box.config", "~/.a a\ninclude shared.config\n")

    results = process_manifest(config, context, manifest)

    assert len(prompt.titles) == 1
    assert [r.status for r in results] == [LinkStatus.SKIPPED, LinkStatus.SKIPPED]


def test_missing_source_does_not_stop_manifest(config, home, make_context):
    context, _ = make_context()
    write(config.dotfiles_dir / "present")
    manifest = write(config.config_dir / "alice@box.config", "~/.gone gone\n~/.present present\n")

    results = process_manifest(config, context, manifest)

    assert [r.status for r in results] == [LinkStatus.SKIPPED_SOURCE_NOT_FOUND, LinkStatus.CREATED]
    assert not os.path.lexists(home / ".gone")
    assert (home / ".present").is_symlink()


def test_recursive_include_skipped(config, home, make_context, capsys):
    context, _ = make_context()
    write(config.dotfiles_dir / "a")
    write(config.config_dir / "other.config", "include alice@box.config\n")
    manifest = write(config.config_dir / "alice@box.config", "~/.a a\ninclude other.config\n")

    results = process_manifest(config, context, manifest)

    assert len(results) == 1
    assert "recursive include" in capsys.readouterr().err


def test_same_include_twice_is_processed_twice(config, home, make_context):
    """Test that repeated (non-recursive) includes are followed each time."""
    context, _ = make_context()
    write(config.dotfiles_dir / "a")
    write(config.config_dir / "shared.config", "~/.a a\n")
    manifest = write(config.config_dir / "alice@box.config", "include shared.config\ninclude shared.config\n")

    results = process_manifest(config, context, manifest)

    assert [r.status for r in results] == [LinkStatus.CREATED, LinkStatus.ALREADY_LINKED]


def test_non_utf8_manifest_still_links(config, home, make_context):
    context, _ = make_context()
    write(config.dotfiles_dir / "a")
    manifest = config.config_dir / "alice@box.config"
    manifest.write_bytes(b"~/.a a  # caf\xe9\n")

    results = process_manifest(config, context, manifest)

    assert [r.status for r in results] == [LinkStatus.CREATED]
    assert (home / ".a").is_symlink()


def test_discover_skips_unreadable_directory(tmp_path, monkeypatch, capsys):
    """Test that a directory that cannot be listed is reported and skipped."""
    identity = Identity(user="alice", host="box")
    locked = tmp_path / "locked"
    write(locked / "alice@box.config")
    manifest = write(tmp_path / "open" / "alice@box.config")
    real_iterdir = Path.iterdir

    def iterdir(self):
        if self == locked:
            raise PermissionError(13, "Permission denied")
        return real_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)

    assert list(discover_manifests(tmp_path, identity)) == [manifest]
    assert "Could not read directory" in capsys.readouterr().err
