"""
Unit tests for facade assembly resolution.
"""

import pytest

from fstoml.build.facade_resolver import FacadeResolver, depends_on_compatibility_facades
from fstoml.build.system_references import SystemReferenceResolver
from fstoml.packages.assembly_metadata import AssemblyMetadataError


class TestFacadePredicate:
    """Test the facade-dependence predicate."""

    def test_system_runtime_reference(self):
        assert depends_on_compatibility_facades({"mscorlib", "System.Runtime"})

    def test_marker_substring(self):
        assert depends_on_compatibility_facades(["System.Runtime.Extensions"])

    def test_no_facade_reference(self):
        assert not depends_on_compatibility_facades({"mscorlib", "System", "FSharp.Core"})

    def test_no_references(self):
        assert not depends_on_compatibility_facades(set())


class TestFacadeResolver:
    """Test suite for FacadeResolver."""

    @pytest.fixture
    def runtime_dir(self, tmp_path):
        runtime = tmp_path / "mono" / "4.5"
        facades = runtime / "Facades"
        facades.mkdir(parents=True)
        for name in ("System.Runtime.dll", "System.Collections.dll", "netstandard.dll"):
            (facades / name).write_text("")
        (facades / "nested").mkdir()
        return runtime

    @pytest.fixture
    def system_resolver(self, runtime_dir):
        return SystemReferenceResolver(reference_assemblies=False, runtime_dir=runtime_dir)

    def test_is_facade_dependent(self, system_resolver):
        references = {"lib/A.dll": {"System.Runtime"}, "lib/B.dll": {"mscorlib"}}
        resolver = FacadeResolver(system_resolver, read_references=references.__getitem__)

        assert resolver.is_facade_dependent("lib/A.dll") is True
        assert resolver.is_facade_dependent("lib/B.dll") is False

    def test_custom_predicate(self, system_resolver):
        resolver = FacadeResolver(
            system_resolver,
            read_references=lambda path: {"netstandard"},
            predicate=lambda names: "netstandard" in names,
        )
        assert resolver.is_facade_dependent("lib/A.dll") is True

    def test_metadata_error_propagates(self, system_resolver):
        def unreadable(path):
            raise AssemblyMetadataError(f"Not a .NET assembly: {path}")

        resolver = FacadeResolver(system_resolver, read_references=unreadable)

        with pytest.raises(AssemblyMetadataError):
            resolver.is_facade_dependent("lib/native.dll")

    def test_facade_assemblies(self, system_resolver, runtime_dir):
        """Test every file of the facade directory is listed, sorted."""
        resolver = FacadeResolver(system_resolver, read_references=lambda path: set())
        facades = runtime_dir / "Facades"

        assert resolver.facade_assemblies("v4.5") == [
            str(facades / "System.Collections.dll"),
            str(facades / "System.Runtime.dll"),
            str(facades / "netstandard.dll"),
        ]

    def test_missing_facade_directory(self, tmp_path):
        system_resolver = SystemReferenceResolver(reference_assemblies=False, runtime_dir=tmp_path / "none")
        resolver = FacadeResolver(system_resolver, read_references=lambda path: set())

        with pytest.raises(FileNotFoundError):
            resolver.facade_assemblies("v4.5")
