import logging
from pathlib import Path

import pytest

from deptree.host.model import HostConfiguration, HostProject
from deptree.processing.artifact_metadata import ArtifactMetadataResolver
from deptree.processing.configuration_walker import ConfigurationWalker, is_resolvable
from deptree.processing.dependency_graph import DependencyGraphResolver

from host_builders import MockPomResolver, artifact, module


def _walker(project, max_workers=1):
    graph_resolver = DependencyGraphResolver(project, ArtifactMetadataResolver(MockPomResolver()))
    return ConfigurationWalker(graph_resolver, max_workers=max_workers)


@pytest.mark.parametrize("flag, expected", [(None, True), (True, True), (False, False)])
def test_resolvability_flag(flag, expected):
    assert is_resolvable(HostConfiguration("compile", can_be_resolved=flag)) is expected


def test_non_resolvable_configurations_are_skipped(caplog):
    project = HostProject(
        name="app",
        project_dir=Path("/work/app"),
        configurations=[
            HostConfiguration("api", [module("g:a:1")], can_be_resolved=False),
            HostConfiguration("compileClasspath", [module("g:a:1")], can_be_resolved=True),
            HostConfiguration("legacy", [module("g:b:1")]),
        ],
    )

    with caplog.at_level(logging.INFO, logger="deptree"):
        configurations = _walker(project).walk(project)

    assert [c.name for c in configurations] == ["compileClasspath", "legacy"]
    assert "Configuration 'api' cannot be resolved." in caplog.text


def test_artifact_set_enriches_nodes():
    project = HostProject(
        name="app",
        configurations=[
            HostConfiguration(
                "runtimeClasspath",
                [module("g:a:1")],
                artifacts=[artifact("g:a:1", classifier="linux-x86_64", extension="so")],
            ),
        ],
    )

    (configuration,) = _walker(project).walk(project)

    node = configuration.dependencies[0]
    assert node.classifier == "linux-x86_64"
    assert node.extension == "so"


def test_artifact_set_failure_degrades_silently(caplog):
    project = HostProject(
        name="app",
        configurations=[
            HostConfiguration(
                "runtimeClasspath",
                [module("g:a:1", module("g:b:1"))],
                artifacts=[artifact("g:a:1", classifier="ignored")],
                artifact_failure=RuntimeError("Could not resolve g:c:1"),
            ),
        ],
    )

    with caplog.at_level(logging.INFO, logger="deptree"):
        (configuration,) = _walker(project).walk(project)

    node = configuration.dependencies[0]
    assert node.classifier == ""
    assert node.extension == ""
    assert node.error is None
    assert [c.artifact_id for c in node.dependencies] == ["b"]
    assert "could not be resolved" in caplog.text


def test_root_edge_order_is_preserved():
    project = HostProject(
        name="app",
        configurations=[HostConfiguration("compile", [module("g:z:1"), module("g:a:1"), module("g:m:1")])],
    )

    (configuration,) = _walker(project).walk(project)

    assert [d.artifact_id for d in configuration.dependencies] == ["z", "a", "m"]


def test_parallel_walk_matches_sequential_order():
    configurations = [
        HostConfiguration(f"conf{i}", [module(f"g:a{i}:1", module("g:shared:1"))])
        for i in range(6)
    ]
    project = HostProject(name="app", configurations=configurations)

    sequential = _walker(project).walk(project)
    parallel = _walker(project, max_workers=4).walk(project)

    assert [c.name for c in parallel] == [f"conf{i}" for i in range(6)]
    assert [c.to_dict() for c in parallel] == [c.to_dict() for c in sequential]
