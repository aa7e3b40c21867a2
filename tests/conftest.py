import struct

import pytest


def _pack_graph(n, edges):
    data = struct.pack("<h", n)
    for u, v, w in edges:
        data += struct.pack("<hhh", u, v, w)
    return data


@pytest.fixture
def pack_graph():
    return _pack_graph


@pytest.fixture
def graph_file(tmp_path):
    def _make(n, edges, extra=b""):
        path = tmp_path / "graph.bin"
        path.write_bytes(_pack_graph(n, edges) + extra)
        return path

    return _make
