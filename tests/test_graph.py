"""Tests for the in-memory temporal graph store."""

import networkx as nx
import pandas as pd
import pytest

from tempograph.graph import GraphError, TemporalGraph


@pytest.fixture
def graph():
    g = TemporalGraph()
    g.add_node(1, 0)
    g.add_node(2, 1, node_type="person")
    g.add_edge(3, 0, 1)
    g.add_edge(5, 1, 2)
    return g


class TestTemporalGraph:
    def test_empty(self):
        g = TemporalGraph()
        assert g.latest_time() is None
        assert g.earliest_time() is None
        assert g.all_node_ids() == []
        assert g.count_nodes() == 0
        assert g.count_edges() == 0

    def test_counts_and_times(self, graph):
        assert graph.count_nodes() == 3
        assert graph.count_edges() == 2
        assert graph.earliest_time() == 1
        assert graph.latest_time() == 5

    def test_insertion_order(self, graph):
        assert graph.all_node_ids() == [0, 1, 2]
        assert graph.edges() == [(0, 1), (1, 2)]

    def test_edge_creates_missing_endpoint(self, graph):
        assert graph.has_node(2)
        assert graph.node_history(2) == [5]

    def test_repeated_updates_extend_history(self, graph):
        graph.add_node(7, 0)
        graph.add_edge(8, 0, 1)
        assert graph.count_nodes() == 3
        assert graph.count_edges() == 2
        assert graph.node_history(0) == [1, 7]
        assert graph.edge_history(0, 1) == [3, 8]

    def test_directed(self, graph):
        assert graph.has_edge(0, 1)
        assert not graph.has_edge(1, 0)

    def test_out_of_order_time_keeps_latest(self, graph):
        graph.add_node(2, 9)
        assert graph.latest_time() == 5

    def test_node_type(self, graph):
        assert graph.node_type(1) == "person"
        assert graph.node_type(0) is None

    def test_missing_history(self, graph):
        with pytest.raises(KeyError):
            graph.node_history(42)
        with pytest.raises(KeyError):
            graph.edge_history(1, 0)


class TestValidation:
    def test_mixed_id_kinds_rejected(self, graph):
        with pytest.raises(GraphError, match="uses int ids"):
            graph.add_node(6, "zero")
        assert graph.count_nodes() == 3

    def test_mixed_edge_endpoints_rejected(self, graph):
        with pytest.raises(GraphError):
            graph.add_edge(6, 0, "x")
        assert graph.count_edges() == 2

    def test_mixed_endpoints_on_empty_graph(self):
        g = TemporalGraph()
        with pytest.raises(GraphError, match="mix int and str"):
            g.add_edge(1, 0, "a")
        assert g.all_node_ids() == []
        assert g.latest_time() is None

        # the graph stays usable with a single id kind
        g.add_edge(2, "a", "b")
        assert g.all_node_ids() == ["a", "b"]

    @pytest.mark.parametrize("bad_id", [1.5, None, True, (1, 2)])
    def test_bad_id_type(self, bad_id):
        with pytest.raises(GraphError, match="int or str"):
            TemporalGraph().add_node(1, bad_id)

    @pytest.mark.parametrize("bad_time", [1.0, "3", None, False])
    def test_bad_time_type(self, bad_time):
        with pytest.raises(GraphError, match="must be an int"):
            TemporalGraph().add_node(bad_time, 0)

    def test_negative_time(self):
        with pytest.raises(GraphError, match="non-negative"):
            TemporalGraph().add_edge(-1, 0, 1)


class TestExport:
    def test_to_networkx_is_copy(self, graph):
        nxg = graph.to_networkx()
        assert isinstance(nxg, nx.DiGraph)
        nxg.add_edge(2, 0)
        assert not graph.has_edge(2, 0)

    def test_edges_dataframe(self, graph):
        graph.add_edge(4, 0, 1)
        df = graph.edges_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["time", "source", "target"]
        assert df["time"].tolist() == [3, 4, 5]
        assert df["source"].tolist() == [0, 0, 1]

    def test_nodes_dataframe(self, graph):
        df = graph.nodes_dataframe()
        assert df["id"].tolist() == [0, 1, 2]
        assert df["first_seen"].tolist() == [1, 2, 5]
        assert df["updates"].tolist() == [1, 1, 1]

    def test_empty_dataframes(self):
        g = TemporalGraph()
        assert g.edges_dataframe().empty
        assert g.nodes_dataframe().empty
