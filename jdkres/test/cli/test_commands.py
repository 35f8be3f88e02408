from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer

from jdkres.cli.context import CLIContext
from jdkres.core.config import Config, ManifestConfig
from jdkres.core.errors import ErrorCode
from jdkres.output.console import MockConsole
from jdkres.releases.resolver import Resolver
from jdkres.test._manifest import fixture_releases


def _ctx(tmp_path: Path) -> CLIContext:
    return CLIContext(config=Config(), console=MockConsole(), cache_dir=tmp_path)


def _console(ctx: CLIContext) -> MockConsole:
    assert isinstance(ctx.console, MockConsole)
    return ctx.console


def _patch_command(module: object, monkeypatch: pytest.MonkeyPatch, ctx: CLIContext) -> None:
    resolver = Resolver(fixture_releases())
    monkeypatch.setattr(module, "build_context", lambda *_a, **_k: ctx)
    monkeypatch.setattr(module, "build_resolver", lambda *_a, **_k: resolver)


# =============================================================================
# resolve
# =============================================================================


def _run_resolve(version: str, *, json_output: bool = False, platform: str = "linux") -> None:
    import jdkres.cli.commands.resolve as resolve_cmd

    resolve_cmd.resolve(
        version=version,
        arch="x64",
        platform=platform,
        package_type="jdk",
        check_latest=False,
        manifest_url=None,
        config=None,
        json=json_output,
        verbose=False,
    )


def test_resolve_prints_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import jdkres.cli.commands.resolve as resolve_cmd

    ctx = _ctx(tmp_path)
    _patch_command(resolve_cmd, monkeypatch, ctx)

    _run_resolve("17")

    url = _console(ctx).messages[-1]
    assert url.startswith("https://github.com/alibaba/dragonwell17/")
    assert url.endswith("Alibaba_Dragonwell_Standard_17.0.5.0.5.8_x64_linux.tar.gz")


def test_resolve_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import jdkres.cli.commands.resolve as resolve_cmd

    ctx = _ctx(tmp_path)
    _patch_command(resolve_cmd, monkeypatch, ctx)

    _run_resolve("11.0.16", json_output=True)

    data = json.loads(_console(ctx).messages[-1])
    assert data["version"] == "11.0.16.12.8"
    assert data["packageType"] == "jdk"
    assert data["platform"] == "linux"


def test_resolve_windows_picks_zip(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import jdkres.cli.commands.resolve as resolve_cmd

    ctx = _ctx(tmp_path)
    _patch_command(resolve_cmd, monkeypatch, ctx)

    _run_resolve("8", platform="windows")

    assert _console(ctx).messages[-1].endswith("_x64_windows.zip")


def test_resolve_unsupported_major_exits_user_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import jdkres.cli.commands.resolve as resolve_cmd

    ctx = _ctx(tmp_path)
    _patch_command(resolve_cmd, monkeypatch, ctx)

    with pytest.raises(typer.Exit) as exc:
        _run_resolve("16")

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert _console(ctx).find("Support dragonwell versions: 8, 11, 17")


@pytest.mark.parametrize("command", ["resolve", "versions"])
def test_unsupported_major_rejected_before_fetch(
    command: str, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    from typer.testing import CliRunner

    import jdkres.cli.commands._helpers as helpers
    from jdkres.cli.app import app

    requested: list[str] = []

    class RecordingClient:
        def __init__(self, timeout: float) -> None:
            pass

        def get_text(self, url: str) -> object:
            from jdkres.core.result import Err
            from jdkres.releases.http import HttpError

            requested.append(url)
            return Err(HttpError(url, 0, "connection refused"))

    monkeypatch.setattr(helpers, "RealHttpClient", RecordingClient)

    result = CliRunner().invoke(
        app,
        [
            command,
            "19",
            "-p",
            "linux",
            "-a",
            "x64",
            "--manifest-url",
            "http://127.0.0.1:9/none.json",
            "--config",
            str(tmp_path / "absent.toml"),
        ],
    )

    assert result.exit_code == int(ErrorCode.USER_ERROR)
    assert "Support dragonwell versions: 8, 11, 17" in result.output
    assert requested == []


def test_resolve_unsatisfied_exits_not_found(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import jdkres.cli.commands.resolve as resolve_cmd

    ctx = _ctx(tmp_path)
    _patch_command(resolve_cmd, monkeypatch, ctx)

    with pytest.raises(typer.Exit) as exc:
        _run_resolve("17.0.9")

    assert exc.value.exit_code == int(ErrorCode.NOT_FOUND)
    assert _console(ctx).find("Cannot find satisfied version for 17.0.9.")


# =============================================================================
# versions
# =============================================================================


def _run_versions(version: str, *, json_output: bool = False, arch: str = "x64") -> None:
    import jdkres.cli.commands.versions as versions_cmd

    versions_cmd.versions(
        version=version,
        arch=arch,
        platform="linux",
        package_type="jdk",
        check_latest=False,
        manifest_url=None,
        config=None,
        json=json_output,
        verbose=False,
    )


def test_versions_table_newest_first(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import jdkres.cli.commands.versions as versions_cmd

    ctx = _ctx(tmp_path)
    _patch_command(versions_cmd, monkeypatch, ctx)

    _run_versions("8")

    messages = _console(ctx).messages
    assert messages[0] == "5 release(s) for jdk 8 linux/x64"
    assert messages[1].startswith("8.13.14\t")
    assert messages[-1].startswith("8.6.6\t")
    assert not _console(ctx).find("nightly")


def test_versions_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import jdkres.cli.commands.versions as versions_cmd

    ctx = _ctx(tmp_path)
    _patch_command(versions_cmd, monkeypatch, ctx)

    _run_versions("17", json_output=True)

    data = json.loads(_console(ctx).messages[-1])
    assert [r["version"] for r in data] == ["17.0.5.0.5+8", "17.0.4.0.4+8", "17.0.3.0.3+7"]


def test_versions_empty_combination(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import jdkres.cli.commands.versions as versions_cmd

    ctx = _ctx(tmp_path)
    _patch_command(versions_cmd, monkeypatch, ctx)

    _run_versions("17", arch="riscv")

    assert _console(ctx).messages == ["no releases for jdk 17 linux/riscv"]


def test_versions_unsupported_major(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import jdkres.cli.commands.versions as versions_cmd

    ctx = _ctx(tmp_path)
    _patch_command(versions_cmd, monkeypatch, ctx)

    with pytest.raises(typer.Exit) as exc:
        _run_versions("21")

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)


# =============================================================================
# matrix
# =============================================================================


def test_print_matrix_for_one_major() -> None:
    from jdkres.cli.commands.matrix import print_matrix

    console = MockConsole()
    print_matrix(console, 8)

    assert console.messages[0] == "Offered combinations"
    rows = console.messages[1:]
    assert len(rows) == 5
    assert "8\twindows\tx64\tzip" in rows
    assert "8\tlinux\taarch64\ttar.gz" in rows


def test_matrix_rejects_unsupported_major() -> None:
    import jdkres.cli.commands.matrix as matrix_cmd

    with pytest.raises(typer.Exit) as exc:
        matrix_cmd.matrix(major=16)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)


# =============================================================================
# cache
# =============================================================================


def test_cache_clear_and_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import jdkres.cli.commands.cache as cache_cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(cache_cmd, "build_context", lambda *_a, **_k: ctx)
    (tmp_path / "manifest-0123456789abcdef.json").write_text("[]", encoding="utf-8")

    cache_cmd.path(config=None)
    cache_cmd.clear(config=None)

    assert _console(ctx).messages == [str(tmp_path), "removed 1 cached manifest(s)"]
    assert not any(tmp_path.iterdir())


def test_cache_clear_failure_exits_io_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import jdkres.cli.commands.cache as cache_cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(cache_cmd, "build_context", lambda *_a, **_k: ctx)

    def fail_clear(self: object) -> int:
        raise PermissionError("read-only file system")

    monkeypatch.setattr(cache_cmd.ManifestCache, "clear", fail_clear)

    with pytest.raises(typer.Exit) as exc:
        cache_cmd.clear(config=None)

    assert exc.value.exit_code == int(ErrorCode.IO_ERROR)
    assert _console(ctx).has_error()


# =============================================================================
# app
# =============================================================================


def test_app_version_flag() -> None:
    from typer.testing import CliRunner

    from jdkres import __version__
    from jdkres.cli.app import app

    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_app_registers_commands() -> None:
    from typer.testing import CliRunner

    from jdkres.cli.app import app

    result = CliRunner().invoke(app, ["--help"])

    assert result.exit_code == 0
    for name in ("resolve", "versions", "matrix", "cache"):
        assert name in result.output


def test_manifest_config_timeout_reaches_client(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import jdkres.cli.commands._helpers as helpers

    seen: dict[str, float] = {}

    class FakeClient:
        def __init__(self, timeout: float) -> None:
            seen["timeout"] = timeout

        def get_text(self, url: str) -> object:
            from jdkres.core.result import Ok

            return Ok("[]")

    monkeypatch.setattr(helpers, "RealHttpClient", FakeClient)
    ctx = CLIContext(
        config=Config(manifest=ManifestConfig(timeout=7.5)),
        console=MockConsole(),
        cache_dir=tmp_path,
    )

    resolver = helpers.build_resolver(ctx, manifest_url=None, check_latest=False)

    assert seen["timeout"] == 7.5
    assert resolver.manifest == ()
