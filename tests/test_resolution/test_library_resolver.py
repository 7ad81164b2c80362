"""
Tests for binlink.resolution.library
======================================

These tests verify library bundle resolution:
    - Platform, variant and architecture matching
    - First-match-wins over declaration order
    - Headers fallback to the slice directory
    - Empty result (not an error) when nothing applies
    - Error surfacing for malformed bundles and invalid paths
"""

from pathlib import Path

import pytest

from binlink.core.exceptions import MetadataParseError, PathError
from binlink.core.models import LibrarySlice, XCFrameworkMetadata
from binlink.core.triple import Triple
from binlink.infrastructure.filesystem import InMemoryFileSystem
from binlink.resolution.library import resolve_library

from tests.conftest import library_slice


def _resolve(root, triple: str, file_system, **kwargs):
    return resolve_library(root, Triple.parse(triple), file_system=file_system, **kwargs)


# =============================================================================
# Tests: Matching
# =============================================================================
class TestMatching:
    """Tests for slice selection."""

    def test_simulator_slice(self, file_system, standard_xcframework) -> None:
        """arm64 + ios-simulator picks exactly the simulator slice, headers
        falling back to the slice directory."""
        info = _resolve(standard_xcframework, "arm64-apple-ios14.0-simulator", file_system)
        slice_dir = standard_xcframework / "ios-arm64_x86_64-simulator"
        assert info is not None
        assert info.library_path == slice_dir / "libFoo.a"
        assert info.headers_paths == (slice_dir,)
        assert info.module_map_path is None

    def test_explicit_headers_path(self, file_system, standard_xcframework) -> None:
        info = _resolve(standard_xcframework, "x86_64-apple-macosx10.15", file_system)
        slice_dir = standard_xcframework / "macos-arm64_x86_64"
        assert info is not None
        assert info.library_path == slice_dir / "libFoo.a"
        assert info.headers_paths == (slice_dir / "Headers",)

    def test_device_request_skips_simulator_slice(self, file_system, standard_xcframework) -> None:
        """A slice with a variant never matches a triple without one."""
        info = _resolve(standard_xcframework, "arm64-apple-ios14.0", file_system)
        assert info is not None
        assert info.library_path == standard_xcframework / "ios-arm64" / "libFoo.a"

    def test_mac_catalyst(self, file_system, standard_xcframework) -> None:
        info = _resolve(standard_xcframework, "x86_64-apple-ios14.0-macabi", file_system)
        assert info is not None
        assert info.library_path.parent.name == "ios-arm64_x86_64-maccatalyst"

    def test_architecture_must_be_listed(self, file_system, standard_xcframework) -> None:
        assert _resolve(standard_xcframework, "x86_64-apple-ios14.0", file_system) is None

    def test_platform_without_slice(self, file_system, standard_xcframework) -> None:
        assert _resolve(standard_xcframework, "arm64-apple-tvos17.0", file_system) is None

    def test_unmapped_environment_matches_variantless_slice(self, file_system, standard_xcframework) -> None:
        """An unmapped environment maps to no variant, so it matches only
        variant-less slices."""
        info = _resolve(standard_xcframework, "arm64-apple-ios14.0-gnu", file_system)
        assert info is not None
        assert info.library_path.parent.name == "ios-arm64"

    @pytest.mark.parametrize(
        "triple",
        ["x86_64-unknown-linux-gnu", "wasm32-unknown-wasi", "x86_64-pc-windows-msvc", "arm64-apple-darwin23"],
    )
    def test_unmapped_platform_is_empty_not_error(self, file_system, standard_xcframework, triple: str) -> None:
        assert _resolve(standard_xcframework, triple, file_system) is None

    def test_first_match_wins(self, file_system, write_xcframework) -> None:
        root = write_xcframework(
            [
                library_slice("macos-first", "macos", ["arm64"]),
                library_slice("macos-second", "macos", ["arm64", "x86_64"]),
            ]
        )
        info = _resolve(root, "arm64-apple-macosx14.0", file_system)
        assert info is not None
        assert info.library_path == root / "macos-first" / "libFoo.a"

    def test_nested_library_path(self, file_system, write_xcframework) -> None:
        root = write_xcframework(
            [
                library_slice(
                    "macos-arm64",
                    "macos",
                    ["arm64"],
                    library_path="Foo.framework/Foo",
                    headers_path="Foo.framework/Headers",
                )
            ]
        )
        info = _resolve(root, "arm64-apple-macosx", file_system)
        assert info is not None
        assert info.library_path == root / "macos-arm64" / "Foo.framework" / "Foo"
        assert info.headers_paths == (root / "macos-arm64" / "Foo.framework" / "Headers",)

    def test_empty_bundle(self, file_system, write_xcframework) -> None:
        root = write_xcframework([])
        assert _resolve(root, "arm64-apple-macosx", file_system) is None


# =============================================================================
# Tests: Errors
# =============================================================================
class TestErrors:
    """Malformed bundles raise; they are never reported as empty."""

    def test_missing_metadata(self, file_system, xcframework_root) -> None:
        with pytest.raises(MetadataParseError):
            _resolve(xcframework_root, "arm64-apple-macosx", file_system)

    def test_missing_metadata_for_unmapped_platform(self, file_system, xcframework_root) -> None:
        with pytest.raises(MetadataParseError):
            _resolve(xcframework_root, "x86_64-unknown-linux-gnu", file_system)

    def test_escaping_library_path(self, file_system, write_xcframework) -> None:
        root = write_xcframework(
            [library_slice("macos-arm64", "macos", ["arm64"], library_path="../../libEvil.a")]
        )
        with pytest.raises(PathError):
            _resolve(root, "arm64-apple-macosx", file_system)

    def test_absolute_headers_path(self, file_system, write_xcframework) -> None:
        root = write_xcframework(
            [library_slice("macos-arm64", "macos", ["arm64"], headers_path="/usr/include")]
        )
        with pytest.raises(PathError):
            _resolve(root, "arm64-apple-macosx", file_system)

    def test_invalid_path_in_unselected_slice_is_ignored(self, file_system, write_xcframework) -> None:
        root = write_xcframework(
            [
                library_slice("ios-arm64", "ios", ["arm64"], library_path="/abs/libFoo.a"),
                library_slice("macos-arm64", "macos", ["arm64"]),
            ]
        )
        assert _resolve(root, "arm64-apple-macosx", file_system) is not None

    def test_relative_bundle_root(self, file_system) -> None:
        with pytest.raises(PathError):
            _resolve("Foo.xcframework", "arm64-apple-macosx", file_system)


# =============================================================================
# Tests: Injected Loader
# =============================================================================
class TestInjectedLoader:
    """Already-decoded metadata can be supplied by the caller."""

    def test_loader_called_once_with_root(self, config) -> None:
        calls = []
        metadata = XCFrameworkMetadata(
            libraries=[
                LibrarySlice(
                    library_identifier="macos-arm64",
                    library_path="libFoo.a",
                    architectures={"arm64"},
                    platform="macos",
                )
            ]
        )

        def loader(fs, root, cfg):
            calls.append((root, cfg))
            return metadata

        info = resolve_library(
            "/deps/Foo.xcframework",
            Triple.parse("arm64-apple-macosx13.0"),
            file_system=InMemoryFileSystem(),
            config=config,
            loader=loader,
        )
        assert calls == [(Path("/deps/Foo.xcframework"), config)]
        assert info is not None
        assert info.library_path == Path("/deps/Foo.xcframework/macos-arm64/libFoo.a")

    def test_repeated_calls_reload(self, file_system, write_xcframework) -> None:
        root = write_xcframework([library_slice("macos-arm64", "macos", ["arm64"])])
        assert _resolve(root, "arm64-apple-macosx", file_system) is not None
        write_xcframework([])
        assert _resolve(root, "arm64-apple-macosx", file_system) is None
