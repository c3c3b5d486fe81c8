"""
Unit tests for compiler invocation assembly.
"""

import os
from unittest.mock import Mock

import pytest

from fstoml.build.facade_resolver import FacadeResolver
from fstoml.build.invocation import (
    PREFIX_FLAGS,
    CompilerSessionService,
    InvocationAssembler,
    project_options,
)
from fstoml.build.project_references import ProjectReferenceResolver
from fstoml.build.reference_resolver import ReferenceResolver
from fstoml.build.system_references import SystemReferenceResolver
from fstoml.config.descriptor_parser import parse_descriptor
from fstoml.config.project import (
    BuildAction,
    BuildTarget,
    Configuration,
    OutputType,
    ProjectModel,
    ProjectReference,
    Reference,
    SourceFile,
)
from fstoml.config.target import ConfigurationNotFoundError


class RecordingSession(CompilerSessionService):
    """Session service returning its inputs."""

    def options_from_arguments(self, name, args):
        return {"name": name, "args": list(args)}


class TestInvocationAssembler:
    """Test suite for InvocationAssembler."""

    @pytest.fixture
    def runtime_dir(self, tmp_path):
        runtime = tmp_path / "mono" / "4.5"
        (runtime / "Facades").mkdir(parents=True)
        (runtime / "Facades" / "System.Runtime.dll").write_text("")
        return runtime

    @pytest.fixture
    def metadata(self):
        return {}

    @pytest.fixture
    def assembler(self, runtime_dir, metadata):
        system_resolver = SystemReferenceResolver(reference_assemblies=False, runtime_dir=runtime_dir)
        facade_resolver = FacadeResolver(system_resolver, read_references=metadata.__getitem__)
        return InvocationAssembler(
            reference_resolver=ReferenceResolver(system_resolver, facade_resolver),
            project_reference_resolver=ProjectReferenceResolver(),
        )

    @pytest.fixture
    def app(self):
        return ProjectModel(
            name="App",
            assembly_name="App",
            output_type=OutputType.EXE,
            configurations={"v4.5/AnyCPU": Configuration(warning_level=2)},
            files=(SourceFile("Main.src"),),
        )

    def test_minimal_project(self, assembler, app, runtime_dir):
        """Test the complete argument list for a minimal executable."""
        args = assembler.assemble(BuildTarget("v4.5"), app)

        assert args == [
            "--noframework",
            "--fullpaths",
            "--flaterrors",
            "--subsystemversion:6.00",
            "--highentropyva+",
            "--target:Exe",
            "--tailcalls-",
            "--warnaserror-",
            "--debug-",
            "--optimize-",
            "--platform:AnyCPU",
            "--warn:2",
            "--out:" + os.path.join("bin", "App.exe"),
            "--doc:" + os.path.join("bin", "App.exe") + ".xml",
            "-r:" + str(runtime_dir / "mscorlib.dll"),
            "-r:" + str(runtime_dir / "FSharp.Core.dll"),
            "Main.src",
        ]

    def test_library_target(self, assembler):
        project = ProjectModel(name="Lib", assembly_name="Lib", configurations={"": Configuration()})
        args = assembler.assemble(BuildTarget("v4.5"), project)

        assert args[: len(PREFIX_FLAGS)] == list(PREFIX_FLAGS)
        assert args[len(PREFIX_FLAGS)] == "--target:Library"
        assert "--out:" + os.path.join("bin", "Lib.dll") in args

    def test_block_order(self, assembler, tmp_path, runtime_dir, metadata, monkeypatch):
        """Test configuration, references, project references then sources."""
        (tmp_path / "Lib").mkdir()
        (tmp_path / "Lib" / "Lib.fstoml").write_text('Name = "Lib"\n[Configuration]\n')
        (tmp_path / "App").mkdir()
        monkeypatch.chdir(tmp_path / "App")
        portable = str(tmp_path / "Portable.dll")
        metadata[portable] = {"System.Runtime"}

        project = ProjectModel(
            name="App",
            assembly_name="App",
            output_type=OutputType.EXE,
            configurations={"": Configuration(constants=("TRACE",))},
            references=(Reference("System.Xml"), Reference(portable)),
            project_references=(ProjectReference("../Lib/Lib.fstoml"),),
            files=(
                SourceFile("Types.fs"),
                SourceFile("App.config", on_build=BuildAction.CONTENT),
                SourceFile("Main.fs"),
            ),
        )

        args = assembler.assemble(BuildTarget("v4.5"), project)

        doc_index = args.index("--doc:" + os.path.join("bin", "App.exe") + ".xml")
        assert "-d:TRACE" in args[:doc_index]
        assert args[doc_index + 1:] == [
            "-r:" + str(runtime_dir / "mscorlib.dll"),
            "-r:" + str(runtime_dir / "FSharp.Core.dll"),
            "-r:" + str(runtime_dir / "System.Xml.dll"),
            "-r:" + portable,
            "-r:" + str(runtime_dir / "Facades" / "System.Runtime.dll"),
            "-r:" + os.path.join("bin", "Lib.dll"),
            "Types.fs",
            "Main.fs",
        ]

    def test_missing_configuration(self, assembler):
        project = ProjectModel(name="App", assembly_name="App", configurations={"v4.6": Configuration()})

        with pytest.raises(ConfigurationNotFoundError):
            assembler.assemble(BuildTarget("v4.5"), project)

    def test_parsed_descriptor(self, assembler, tmp_path, runtime_dir):
        """Test assembling from a descriptor file."""
        descriptor = tmp_path / "App.fstoml"
        descriptor.write_text(
            """
Name = "App"
OutputType = "Exe"
FSharpCore = "4.4.1.0"

[Configuration]
DebugSymbols = true
Optimize = true

[[Files]]
Include = "Main.fs"
"""
        )

        args = assembler.assemble(BuildTarget("v4.5"), parse_descriptor(descriptor))

        assert "--debug:full" in args
        assert "--optimize+" in args
        assert args[-1] == "Main.fs"


class TestProjectOptions:
    """Test handing arguments to an injected compiler session service."""

    def test_project_options(self):
        project = ProjectModel(name="App", assembly_name="App", configurations={"": Configuration()})
        assembler = Mock()
        assembler.assemble.return_value = ["--noframework", "Main.fs"]

        options = project_options(RecordingSession(), BuildTarget("v4.5"), project, assembler)

        assert options == {"name": "App", "args": ["--noframework", "Main.fs"]}
        assembler.assemble.assert_called_once_with(BuildTarget("v4.5"), project)

    def test_service_is_abstract(self):
        with pytest.raises(TypeError):
            CompilerSessionService()
