"""
Unit Tests for supporting components: indexed heap, graph construction,
adjacency queries, ranking, validation, output formatting and the
processing service.
"""

import os
import sys

# Ensure project root is on sys.path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pandas as pd
import pytest

from core.centrality.ranking import flag_high_closeness
from core.common.errors import InvalidArgumentError, InvalidModeError, InvalidVertexError
from core.common.warnings_latch import DISCONNECTED_GRAPH_WARNING
from core.graph.adjacency import (
    LazyIncidenceList,
    NeighborMode,
    build_adjlist,
    edge_weight_vector,
    normalize_mode,
)
from core.graph.graph_builder import build_graph, from_edges, vertex_labels
from core.graph.graph_metrics import compute_graph_summary
from core.graph.vertex_selector import resolve_vertices
from core.output.json_formatter import format_output
from core.structures.indexed_heap import IndexedMinHeap
from services.processing_pipeline import ClosenessService
from utils.metrics import MetricsTracker
from utils.validators import validate_edge_list


# ── Synthetic Datasets ────────────────────────────────────────────────


def _edge_data() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "source": ["A", "B", "C", "A"],
            "target": ["B", "C", "D", "C"],
            "weight": [1.0, 2.0, 1.5, 4.0],
        }
    )


def _split_edge_data() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "source": ["A", "B", "X"],
            "target": ["B", "C", "Y"],
        }
    )


# ── Indexed Heap Tests ────────────────────────────────────────────────


class TestIndexedMinHeap:
    def test_pops_in_key_order(self):
        heap = IndexedMinHeap(5)
        for idx, key in [(0, 3.0), (1, 1.0), (2, 4.0), (3, 0.5), (4, 2.0)]:
            heap.push(idx, key)
        order = [heap.pop_min()[0] for _ in range(5)]
        assert order == [3, 1, 4, 0, 2]
        assert not heap

    def test_decrease_key(self):
        heap = IndexedMinHeap(3)
        heap.push(0, 5.0)
        heap.push(1, 3.0)
        heap.push(2, 4.0)
        heap.decrease(0, 1.0)
        assert heap.min_index() == 0
        assert heap.min_key() == 1.0

    def test_decrease_rejects_larger_key(self):
        heap = IndexedMinHeap(2)
        heap.push(0, 1.0)
        with pytest.raises(ValueError):
            heap.decrease(0, 2.0)

    def test_contains_and_clear(self):
        heap = IndexedMinHeap(4)
        heap.push(2, 1.0)
        heap.push(3, 2.0)
        assert 2 in heap and 0 not in heap
        heap.pop_min()
        assert 2 not in heap
        heap.clear()
        assert len(heap) == 0
        assert 3 not in heap
        heap.push(3, 7.0)
        assert heap.pop_min() == (3, 7.0)

    def test_duplicate_push_rejected(self):
        heap = IndexedMinHeap(2)
        heap.push(1, 1.0)
        with pytest.raises(KeyError):
            heap.push(1, 0.5)

    def test_pop_empty(self):
        with pytest.raises(IndexError):
            IndexedMinHeap(1).pop_min()


# ── Graph Builder Tests ───────────────────────────────────────────────


class TestGraphBuilder:
    def test_dense_ids_and_labels(self):
        G = build_graph(_edge_data())
        assert G.number_of_nodes() == 4
        assert vertex_labels(G) == ["A", "B", "C", "D"]
        assert G.is_directed()

    def test_edge_ids_follow_row_order(self):
        G = build_graph(_edge_data(), weighted=True)
        assert edge_weight_vector(G, "weight").tolist() == [1.0, 2.0, 1.5, 4.0]

    def test_weight_column_ignored_when_unweighted(self):
        df = pd.DataFrame({"source": ["A", "B"], "target": ["B", "C"], "weight": ["heavy", "light"]})
        G = build_graph(df)
        assert all("weight" not in data for _, _, data in G.edges(data=True))
        with pytest.raises(InvalidArgumentError):
            build_graph(df, weighted=True)

    def test_undirected(self):
        assert not build_graph(_edge_data(), directed=False).is_directed()

    def test_from_edges_infers_vertex_count(self):
        assert from_edges([(0, 3)]).number_of_nodes() == 4

    def test_from_edges_rejects_out_of_range(self):
        with pytest.raises(InvalidArgumentError):
            from_edges([(0, 5)], vertex_count=2)

    def test_from_edges_weight_length(self):
        with pytest.raises(InvalidArgumentError):
            from_edges([(0, 1)], weights=[1.0, 2.0])


# ── Adjacency Tests ───────────────────────────────────────────────────


class TestAdjacency:
    def test_normalize_mode(self):
        assert normalize_mode("OUT") is NeighborMode.OUT
        assert normalize_mode(NeighborMode.IN) is NeighborMode.IN
        with pytest.raises(InvalidModeError):
            normalize_mode("both")

    def test_directed_adjlist_by_mode(self):
        G = from_edges([(0, 1), (1, 2)], directed=True)
        assert build_adjlist(G, NeighborMode.OUT) == [[1], [2], []]
        assert build_adjlist(G, NeighborMode.IN) == [[], [0], [1]]
        assert sorted(build_adjlist(G, NeighborMode.ALL)[1]) == [0, 2]

    def test_lazy_incidence_list_caches(self):
        G = from_edges([(0, 1), (0, 2)])
        inclist = LazyIncidenceList(G, NeighborMode.ALL)
        first = inclist.get(0)
        assert sorted(first) == [(0, 1), (1, 2)]

    def test_vertex_selector(self):
        G = from_edges([(0, 1), (1, 2)])
        assert resolve_vertices(G) == [0, 1, 2]
        assert resolve_vertices(G, 2) == [2]
        assert resolve_vertices(G, (2, 0)) == [2, 0]
        with pytest.raises(InvalidVertexError):
            resolve_vertices(G, [-1])

    def test_graph_summary(self):
        summary = compute_graph_summary(build_graph(_split_edge_data()))
        assert summary["total_vertices"] == 5
        assert summary["total_edges"] == 3
        assert summary["connected_components"] == 2
        assert summary["is_connected"] is False


# ── Ranking Tests ─────────────────────────────────────────────────────


class TestRanking:
    def test_flags_top_vertex(self):
        scores = {0: 0.2, 1: 0.9, 2: 0.3, 3: 0.25}
        flagged, rounded = flag_high_closeness(scores, percentile=75)
        assert flagged == {1}
        assert rounded[2] == 0.3

    def test_nan_never_flagged(self):
        flagged, _ = flag_high_closeness({0: float("nan")}, percentile=0)
        assert flagged == set()


# ── Validator Tests ───────────────────────────────────────────────────


class TestValidator:
    def test_valid(self):
        assert validate_edge_list(_edge_data(), weighted=True) is None

    def test_missing_column(self):
        err = validate_edge_list(_edge_data().drop(columns=["target"]))
        assert err is not None and "target" in err

    def test_weight_required_when_weighted(self):
        err = validate_edge_list(_split_edge_data(), weighted=True)
        assert err is not None and "weight" in err

    def test_non_positive_weight(self):
        df = _edge_data()
        df.loc[1, "weight"] = 0.0
        assert validate_edge_list(df, weighted=True) is not None

    def test_empty(self):
        assert validate_edge_list(pd.DataFrame(columns=["source", "target"])) is not None


# ── JSON Formatter Tests ──────────────────────────────────────────────


class TestJsonFormatter:
    def test_nan_becomes_null_and_sorts_last(self):
        out = format_output(
            vertices=[0, 1],
            scores=[float("nan"), 0.5],
            labels=["A", "B"],
            warnings=[],
            high_closeness={1},
            graph_summary={"total_vertices": 2},
            parameters={},
        )
        assert out["vertices"][0]["label"] == "B"
        assert out["vertices"][1]["closeness"] is None
        assert out["summary"]["high_closeness_flagged"] == 1


# ── Service Tests ─────────────────────────────────────────────────────


class TestClosenessService:
    def test_output_structure(self):
        result = ClosenessService().process(_edge_data(), mode="all")
        assert set(result) == {"vertices", "warnings", "summary"}
        assert result["summary"]["vertices_scored"] == 4
        assert result["warnings"] == []

    def test_weighted_scores(self):
        df = pd.DataFrame({"source": ["A", "B", "C"], "target": ["B", "C", "D"], "weight": [2.0] * 3})
        result = ClosenessService().process(df, weighted=True, directed=False)
        by_label = {v["label"]: v["closeness"] for v in result["vertices"]}
        assert by_label["B"] == pytest.approx(0.375)

    def test_disconnected_warning_reported(self):
        result = ClosenessService().process(_split_edge_data(), directed=False)
        assert result["warnings"] == [DISCONNECTED_GRAPH_WARNING]

    def test_self_loop_single_vertex(self):
        df = pd.DataFrame({"source": ["A"], "target": ["A"]})
        result = ClosenessService().process(df)
        assert result["vertices"][0]["closeness"] is None

    def test_invalid_input_raises(self):
        with pytest.raises(InvalidArgumentError):
            ClosenessService().process(_split_edge_data(), weighted=True)

    def test_invalid_mode_raises(self):
        with pytest.raises(InvalidModeError):
            ClosenessService().process(_edge_data(), mode="up")


class TestMetricsTracker:
    def test_record(self):
        tracker = MetricsTracker()
        assert tracker.get_metrics()["status"] == "no_processing_yet"
        tracker.record({"vertices_scored": 3})
        tracker.record_failure("bad mode")
        metrics = tracker.get_metrics()
        assert metrics["total_runs"] == 1
        assert metrics["failed_runs"] == 1
        assert metrics["last_error"] == "bad mode"
