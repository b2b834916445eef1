"""
Tests for the benchmark runner and the NetworkX comparison.
"""

import pytest
import networkx as nx

from colorclique import CliqueSearch, Graph, SearchConfig, write_dimacs_graph
from colorclique.benchmarks import (
    DEFAULT_INSTANCES,
    BenchmarkResult,
    compare_with_exact,
    exact_clique_number,
    run_benchmarks,
    run_instance,
    solve_graph
)
from colorclique.benchmarks.runner import CSV_HEADER, INVALID_CLIQUE_WARNING
from colorclique.exceptions import DimacsFormatError


@pytest.fixture
def instance_files(tmp_path):
    """Fixture writing two small DIMACS instances to a temporary directory."""
    paths = []
    for name, G in [("k5.clq", nx.complete_graph(5)), ("star.clq", nx.star_graph(4))]:
        path = tmp_path / name
        write_dimacs_graph(Graph.from_networkx(G), path, name)
        paths.append(path)
    return paths


class TestRunner:
    """Test running and reporting instances."""

    def test_run_instance(self, instance_files):
        result = run_instance(instance_files[0], SearchConfig(rounds=5, seed=0))
        assert result.instance == "k5.clq"
        assert result.num_vertices == 5
        assert result.num_edges == 10
        assert result.clique_size == 5
        assert result.valid
        assert result.runtime_seconds >= 0.0
        assert result.exact_clique_number is None

    def test_solve_graph_with_exact(self):
        graph = Graph.from_networkx(nx.wheel_graph(7))
        result = solve_graph(graph, "wheel", SearchConfig(rounds=5, seed=0), with_exact=True)
        assert result.exact_clique_number == 3
        assert result.clique_size == 3

    def test_run_benchmarks_writes_csv(self, instance_files, tmp_path):
        csv_path = tmp_path / "clique.csv"
        results = run_benchmarks(instance_files, csv_path=csv_path,
                                 config=SearchConfig(rounds=5, seed=0), verbose=False)

        assert [r.clique_size for r in results] == [5, 2]
        lines = csv_path.read_text().splitlines()
        assert lines[0] == CSV_HEADER
        assert lines[1].startswith("k5.clq; 5; ")
        assert lines[2].startswith("star.clq; 2; ")
        vertices = lines[1].split("; ")[3]
        assert sorted(int(v) for v in vertices.split(", ")) == [0, 1, 2, 3, 4]

    def test_run_benchmarks_keeps_rows_before_failure(self, instance_files, tmp_path):
        bad_path = tmp_path / "bad.clq"
        bad_path.write_text("e 1 2\n")
        csv_path = tmp_path / "clique.csv"

        with pytest.raises(DimacsFormatError):
            run_benchmarks([instance_files[0], bad_path, instance_files[1]], csv_path=csv_path,
                           config=SearchConfig(rounds=2, seed=0), verbose=False)

        lines = csv_path.read_text().splitlines()
        assert len(lines) == 2
        assert lines[0] == CSV_HEADER
        assert lines[1].startswith("k5.clq; 5; ")

    def test_solve_graph_runs_every_round(self):
        graph = Graph.from_networkx(nx.gnp_random_graph(30, 0.5, seed=8))
        config = SearchConfig(rounds=12, seed=3)
        result = solve_graph(graph, "gnp", config)
        assert result.clique == CliqueSearch(graph, config).run().vertices

    def test_run_benchmarks_console_table(self, instance_files, capsys):
        run_benchmarks(instance_files, config=SearchConfig(rounds=2, seed=0))
        output = capsys.readouterr().out.splitlines()
        assert "Instance" in output[0]
        assert "Time, sec" in output[0]
        assert output[1].split()[:2] == ["k5.clq", "5"]

    def test_invalid_result_rows(self):
        result = BenchmarkResult("bad.clq", 3, 1, clique=[0, 2], valid=False)
        assert result.to_csv_row() == INVALID_CLIQUE_WARNING
        assert result.to_console_row() == INVALID_CLIQUE_WARNING

    def test_default_instances(self):
        assert len(DEFAULT_INSTANCES) == 25
        assert "C125.9.clq" in DEFAULT_INSTANCES
        assert all(name.endswith(".clq") for name in DEFAULT_INSTANCES)


class TestNetworkXComparison:
    """Test the exact clique number and the comparison report."""

    def test_exact_clique_number(self):
        assert exact_clique_number(Graph.from_networkx(nx.petersen_graph())) == 2
        assert exact_clique_number(Graph.from_networkx(nx.complete_graph(6))) == 6
        assert exact_clique_number(Graph(3)) == 1
        assert exact_clique_number(Graph(0)) == 0

    def test_compare_with_exact(self):
        graph = Graph.from_networkx(nx.complete_graph(4))
        report = compare_with_exact(graph, SearchConfig(rounds=3, seed=0))
        assert report['heuristic_size'] == 4
        assert report['exact_size'] == 4
        assert report['approximation_ratio'] == 1.0
        assert sorted(report['clique']) == [0, 1, 2, 3]
