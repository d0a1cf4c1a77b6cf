"""Tests for the Dinic max-flow engine in disjointpaths.flow.dinic."""

import pytest

from disjointpaths.flow.dinic import max_flow, residual_reachable
from disjointpaths.flow.residual import ResidualNetwork


def _clrs_network() -> ResidualNetwork:
    """Six-node textbook network with maximum flow 23 from node 0 to node 5."""
    net = ResidualNetwork(6)
    for tail, head, cap in [
        (0, 1, 16),
        (0, 2, 13),
        (2, 1, 4),
        (1, 3, 12),
        (3, 2, 9),
        (2, 4, 14),
        (4, 3, 7),
        (3, 5, 20),
        (4, 5, 4),
    ]:
        net.add_edge(tail, head, cap)
    return net


class TestMaxFlowBasic:
    """Flow values on small hand-checked networks."""

    def test_textbook_network(self):
        """Dinic returns 23 on the textbook network."""
        assert max_flow(_clrs_network(), 0, 5) == 23

    def test_single_arc(self):
        """A single arc carries its full capacity."""
        net = ResidualNetwork(2)
        net.add_edge(0, 1, 7)
        assert max_flow(net, 0, 1) == 7

    def test_parallel_arcs_add_up(self):
        """Parallel arcs between the same nodes add their capacities."""
        net = ResidualNetwork(2)
        net.add_edge(0, 1, 2)
        net.add_edge(0, 1, 3)
        assert max_flow(net, 0, 1) == 5

    def test_unreachable_sink(self):
        """Sink with no incoming path yields zero flow."""
        net = ResidualNetwork(3)
        net.add_edge(0, 1, 5)
        assert max_flow(net, 0, 2) == 0

    def test_zero_capacity_arc(self):
        """Zero-capacity arcs are never used."""
        net = ResidualNetwork(2)
        net.add_edge(0, 1, 0)
        assert max_flow(net, 0, 1) == 0

    def test_needs_reverse_arc_to_reach_optimum(self):
        """Optimum requires cancelling flow through a reverse arc."""
        # A first augmentation along 0-1-2-3 has to be partially undone
        # through the residual arc 2->1 to reach the optimum of 2.
        net = ResidualNetwork(4)
        net.add_edge(0, 1, 1)
        net.add_edge(0, 2, 1)
        net.add_edge(1, 2, 1)
        net.add_edge(1, 3, 1)
        net.add_edge(2, 3, 1)
        assert max_flow(net, 0, 3) == 2

    def test_long_chain_does_not_recurse(self):
        """A 5000-node chain stays within the recursion limit."""
        n = 5000
        net = ResidualNetwork(n)
        for node in range(n - 1):
            net.add_edge(node, node + 1, 1)
        assert max_flow(net, 0, n - 1) == 1

    def test_second_run_finds_nothing_left(self):
        """Re-running on a saturated network adds no flow."""
        net = _clrs_network()
        assert max_flow(net, 0, 5) == 23
        assert max_flow(net, 0, 5) == 0


class TestMaxFlowResidualState:
    """Residual capacities left behind by a completed run."""

    def test_pair_sums_are_conserved(self):
        """Forward plus reverse capacity equals the original capacity."""
        net = _clrs_network()
        original = [net.edge(arc).capacity for arc in net.arcs]
        max_flow(net, 0, 5)

        for arc, capacity in zip(net.arcs, original):
            assert net.edge(arc).capacity + net.reverse(arc).capacity == capacity

    def test_flow_conservation_at_inner_nodes(self):
        """Inner nodes balance; source and sink differ by the flow value."""
        net = _clrs_network()
        value = max_flow(net, 0, 5)

        balance = [0] * len(net)
        for tail, head, flow in net.arc_flows():
            assert flow >= 0
            balance[tail] -= flow
            balance[head] += flow
        assert balance[0] == -value
        assert balance[5] == value
        assert all(b == 0 for b in balance[1:5])

    def test_residual_reachable_is_min_cut(self):
        """Reachable set after the run is the source side of a minimum cut."""
        net = _clrs_network()
        value = max_flow(net, 0, 5)
        side = residual_reachable(net, 0)

        assert 0 in side and 5 not in side
        cut = sum(
            net.edge(arc).capacity + net.flow(arc)
            for arc in net.arcs
            if arc[0] in side and net.edge(arc).to not in side
        )
        assert cut == value


class TestMaxFlowErrors:
    """Argument validation."""

    def test_source_equals_sink(self):
        """Identical source and sink raise ValueError."""
        net = ResidualNetwork(2)
        with pytest.raises(ValueError):
            max_flow(net, 1, 1)

    @pytest.mark.parametrize("source,sink", [(0, 2), (-1, 1), (5, 0)])
    def test_out_of_range(self, source, sink):
        """Node indices outside the network raise ValueError."""
        net = ResidualNetwork(2)
        with pytest.raises(ValueError):
            max_flow(net, source, sink)
