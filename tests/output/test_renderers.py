"""Tests for operation-specific Rich renderers."""

from edugraph.output.renderers import render_result
from edugraph.services.result import ServiceResult


class TestErrorRenderer:
    def test_lists_messages_and_code(self) -> None:
        result = ServiceResult.failure(
            "create_yields",
            "NOT_FOUND",
            ["start node a does not exist", "end node b does not exist"],
        )
        output = render_result(result)
        assert "ERROR" in output
        assert "[NOT_FOUND]" in output
        assert "  - start node a does not exist" in output
        assert "  - end node b does not exist" in output

    def test_detail_only_when_verbose(self) -> None:
        result = ServiceResult.failure("create_yields", "CYCLE", ["loop"], detail={"start": "s1"})
        assert "detail" not in render_result(result)
        assert "start: s1" in render_result(result, verbose=True)


class TestOverviewRenderer:
    def test_edges_show_node_names(self) -> None:
        result = ServiceResult(
            ok=True,
            op="overview",
            data={
                "node_count": 2,
                "edge_count": 1,
                "nodes": [
                    {"id": "u1", "type": "Unit", "name": "Fractions", "modified": "t"},
                    {"id": "r1", "type": "Result", "name": "Halves", "modified": "t"},
                ],
                "edges": [{"id": "e1", "start": "u1", "end": "r1", "kind": "Yields"}],
            },
        )
        output = render_result(result)
        assert "Nodes (2)" in output
        assert "Yields (1)" in output
        assert "Halves" in output

    def test_markup_in_names_is_literal(self) -> None:
        result = ServiceResult(
            ok=True,
            op="overview",
            data={
                "node_count": 2,
                "edge_count": 1,
                "nodes": [
                    {"id": "u1", "type": "Unit", "name": "Sets [/]", "modified": "t"},
                    {"id": "r1", "type": "Result", "name": "[red]Vectors", "modified": "t"},
                ],
                "edges": [{"id": "e1", "start": "u1", "end": "r1", "kind": "Yields"}],
            },
        )
        output = render_result(result)
        assert output.count("Sets [/]") == 2
        assert output.count("[red]Vectors") == 2


class TestWarnings:
    def test_warnings_follow_fields(self) -> None:
        result = ServiceResult(
            ok=True,
            op="delete_unit",
            data={"id": "u1", "edges_removed": 2},
            warnings=["removed 2 Yields relation(s) touching u1"],
        )
        output = render_result(result)
        assert "warning: removed 2 Yields relation(s) touching u1" in output


class TestCheckRenderer:
    def test_issue_lines(self) -> None:
        result = ServiceResult(
            ok=True,
            op="check",
            data={
                "count": 1,
                "issues": [
                    {"category": "cycle", "nodes": ["a", "b"], "message": "cycle among a, b"}
                ],
            },
        )
        output = render_result(result)
        assert "cycle: cycle among a, b" in output


class TestTelemetryTree:
    def test_verbose_renders_span_tree(self) -> None:
        result = ServiceResult(
            ok=True,
            op="create_yields",
            data={"id": "e1"},
            meta={
                "telemetry": {
                    "name": "YieldsService.create_yields",
                    "duration_ms": 1.5,
                    "children": [{"name": "persist", "duration_ms": 0.2}],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "YieldsService.create_yields" in output
        assert "persist" in output
