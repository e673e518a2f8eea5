from pathlib import Path

from deptree.host.model import (
    ComponentSelector,
    HostProject,
    ResolvedComponent,
    ResolvedDependencyResult,
    UnknownComponentIdentifier,
    UnknownDependencyResult,
    UnresolvedDependencyResult,
)
from deptree.processing.artifact_metadata import ArtifactMetadataResolver
from deptree.processing.dependency_graph import DependencyGraphResolver

from host_builders import MockPomResolver, artifact, module, project_edge, unresolved


def _resolver(project=None, pom_resolver=None):
    project = project or HostProject(name="app", project_dir=Path("/work/app"))
    return DependencyGraphResolver(project, ArtifactMetadataResolver(pom_resolver or MockPomResolver()))


def test_external_module_node():
    edge = module("org.slf4j:slf4j-api:1.7.36")

    node = _resolver().resolve(edge, [artifact("org.slf4j:slf4j-api:1.7.36")])

    assert node.group_id == "org.slf4j"
    assert node.artifact_id == "slf4j-api"
    assert node.version == "1.7.36"
    assert node.extension == "jar"
    assert node.pom_file == "/repo/slf4j-api/slf4j-api-1.7.36.pom"
    assert node.local_path is None
    assert node.error is None


def test_children_keep_edge_order():
    edge = module("g:root:1", module("g:b:1"), module("g:a:1"), module("g:c:1"))

    node = _resolver().resolve(edge, [])

    assert [child.artifact_id for child in node.dependencies] == ["b", "a", "c"]


def test_cycle_is_cut_on_the_descent_path():
    # a -> b -> a, built as a real cyclic object graph
    a = module("g:a:1")
    b = module("g:b:1")
    a.selected.dependencies.append(b)
    b.selected.dependencies.append(a)

    node = _resolver().resolve(a, [])

    assert node.artifact_id == "a"
    assert [child.artifact_id for child in node.dependencies] == ["b"]
    assert node.dependencies[0].dependencies == ()


def test_self_dependency_is_dropped():
    a = module("g:a:1")
    a.selected.dependencies.append(a)

    node = _resolver().resolve(a, [])

    assert node.dependencies == ()


def test_edge_already_on_path_yields_no_node():
    edge = module("g:a:1")

    assert _resolver().resolve(edge, [], ancestors=("g:x:1", "g:a:1")) is None


def test_diamond_is_not_deduplicated():
    shared = module("g:shared:1")
    root = module("g:root:1", module("g:left:1", shared), module("g:right:1", shared))
    pom_resolver = MockPomResolver()

    node = _resolver(pom_resolver=pom_resolver).resolve(root, [])

    left, right = node.dependencies
    assert [c.artifact_id for c in left.dependencies] == ["shared"]
    assert [c.artifact_id for c in right.dependencies] == ["shared"]
    assert left.dependencies[0] is not right.dependencies[0]
    assert pom_resolver.calls.count("g:shared:1") == 2


def test_workspace_project_node():
    lib = HostProject(name="lib", group="com.example", version="2.0", path=":lib", project_dir=Path("/work/app/lib"))
    root = HostProject(name="app", path=":", project_dir=Path("/work/app"), subprojects=[lib])
    pom_resolver = MockPomResolver()

    node = _resolver(root, pom_resolver).resolve(project_edge(":lib", module("g:a:1")), [])

    assert (node.group_id, node.artifact_id, node.version) == ("com.example", "lib", "2.0")
    assert node.local_path == "/work/app/lib"
    assert node.pom_file is None
    assert node.classifier == ""
    assert node.extension == ""
    assert [c.artifact_id for c in node.dependencies] == ["a"]
    assert pom_resolver.calls == ["g:a:1"]


def test_workspace_project_found_from_a_subproject():
    lib = HostProject(name="lib", path=":lib", project_dir=Path("/work/app/lib"))
    api = HostProject(name="api", path=":api", project_dir=Path("/work/app/api"))
    HostProject(name="app", path=":", project_dir=Path("/work/app"), subprojects=[lib, api])

    node = _resolver(api).resolve(project_edge(":lib"), [])

    assert node.local_path == "/work/app/lib"


def test_missing_workspace_project_falls_back_to_display_name():
    node = _resolver().resolve(project_edge(":gone"), [])

    assert node.group_id == "<project>"
    assert node.artifact_id == "gone"
    assert node.local_path is None
    assert node.error == "Unknown project: :gone"


def test_project_cycle_is_cut():
    lib = HostProject(name="lib", path=":lib", project_dir=Path("/work/app/lib"))
    root = HostProject(name="app", path=":", project_dir=Path("/work/app"), subprojects=[lib])
    app_edge = project_edge(":")
    lib_edge = project_edge(":lib", app_edge)
    app_edge.selected.dependencies.append(lib_edge)

    node = _resolver(root).resolve(lib_edge, [])

    assert node.artifact_id == "lib"
    assert [c.artifact_id for c in node.dependencies] == ["app"]
    assert node.dependencies[0].dependencies == ()


def test_unknown_identifier_kind():
    edge = ResolvedDependencyResult(
        requested=ComponentSelector("com.example:thing:1.0"),
        selected=ResolvedComponent(
            id=UnknownComponentIdentifier("LibraryBinaryIdentifier", "com.example:thing:1.0"),
            dependencies=[module("g:child:1")],
        ),
    )

    node = _resolver().resolve(edge, [])

    assert (node.group_id, node.artifact_id, node.version) == ("com.example", "thing", "1.0")
    assert node.error == "Unknown id type: LibraryBinaryIdentifier"
    assert [c.artifact_id for c in node.dependencies] == ["child"]


def test_unresolved_edge_is_a_leaf_with_causes():
    failure = LookupError("Could not find com.example:missing:1.0.")
    failure.__cause__ = FileNotFoundError("missing-1.0.pom")

    node = _resolver().resolve(unresolved("com.example:missing:1.0", failure), [])

    assert (node.group_id, node.artifact_id, node.version) == ("com.example", "missing", "1.0")
    assert node.dependencies == ()
    assert node.error == (
        "Unresolved: LookupError: Could not find com.example:missing:1.0.\n"
        "Caused by: FileNotFoundError: missing-1.0.pom"
    )


def test_unresolved_edge_uses_attempted_name():
    edge = UnresolvedDependencyResult(
        requested=ComponentSelector("com.example:dyn:1.+"),
        attempted=ComponentSelector("com.example:dyn:1.9"),
        failure=RuntimeError("boom"),
    )

    node = _resolver().resolve(edge, [])

    assert node.version == "1.9"
    assert node.error == "Unresolved: RuntimeError: boom"


def test_unknown_result_shape_uses_requested_name():
    edge = UnknownDependencyResult("SkippedDependencyResult", ComponentSelector("weird:name"))

    node = _resolver().resolve(edge, [])

    assert node.group_id == "<unknown>"
    assert node.artifact_id == "weird_name"
    assert node.error == "Unknown result type: SkippedDependencyResult"


def test_failures_stay_on_their_node():
    root = module(
        "g:root:1",
        unresolved("g:broken:1", RuntimeError("boom")),
        module("g:fine:1"),
    )

    node = _resolver().resolve(root, [])

    broken, fine = node.dependencies
    assert node.error is None
    assert broken.error == "Unresolved: RuntimeError: boom"
    assert fine.error is None
    assert fine.pom_file is not None
