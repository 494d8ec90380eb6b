import pytest

from rtaviz.visualization.graphviz_export import (
    Attributes,
    Graph,
    GraphCluster,
    GraphEdge,
    GraphNode,
    NodeShape,
    debug_quote,
    escape_string,
)


def test_escape_string_special_characters():
    assert escape_string('a"b') == 'a\\"b'
    assert escape_string("a\\b") == "a\\\\b"
    assert escape_string("a\nb") == "a\\nb"


def test_escape_string_plain_text_unchanged():
    assert escape_string("plain text") == "plain text"


def test_debug_quote_wraps_and_escapes():
    assert debug_quote("x") == '"x"'
    assert debug_quote('q"\n') == '"q\\"\\n"'
    assert debug_quote("\t") == '"\\t"'


def test_debug_quote_control_character():
    assert debug_quote("\x01") == '"\\u{1}"'


def test_attributes_render_and_overwrite():
    attrs = Attributes()
    attrs.set("label", "a")
    attrs.set("color", "red")
    attrs.set("label", "b")
    assert str(attrs) == '[label="b", color="red"]'
    assert len(attrs) == 2


def test_empty_attributes():
    assert str(Attributes()) == "[]"


def test_node_defaults_to_box():
    node = GraphNode(3, "name")
    assert node.attributes["shape"] == "box"
    assert node.attributes["label"] == "name"
    assert str(node).startswith("3 [")


def test_node_shape_change():
    node = GraphNode(1, "n")
    node.set_shape(NodeShape.ELLIPSE)
    assert node.attributes["shape"] == str(NodeShape.ELLIPSE)
    assert str(NodeShape.BOX) == "box"


def test_edge_rendering():
    edge = GraphEdge(1, 2, "lbl")
    edge.set_attribute("color", "blue")
    assert str(edge) == '1 -> 2 [label="lbl", color="blue"]'


def test_cluster_rendering():
    cluster = GraphCluster(0, 'my "c"', [1, 2])
    text = str(cluster)
    assert text.startswith("\tsubgraph cluster_0 {\n")
    assert '\t\tlabel="my \\"c\\""\n' in text
    assert '\t\tgraph [style="dotted"]\n' in text
    assert "\t\t1; 2; \n" in text
    assert text.endswith("\t}\n")


def test_graph_add_returns_configurable_items():
    graph = Graph()
    node = graph.add_node("a", 7)
    node.set_attribute("color", "green")
    edge = graph.add_edge(7, 8, "e")
    edge.set_attribute("style", "bold")
    text = str(graph)
    assert '\t7 [label="a", shape="box", color="green"]\n' in text
    assert '\t7 -> 8 [label="e", style="bold"]\n' in text


def test_graph_structure_and_order():
    graph = Graph()
    graph.set_attribute("rankdir", "LR")
    graph.add_node("a", 0)
    graph.add_node("b", 1)
    graph.add_edge(0, 1, "x")
    graph.add_cluster("first", [0])
    graph.add_cluster("second", [1])
    text = str(graph)
    assert text.startswith('digraph {\n\tgraph [rankdir="LR"]\n')
    assert text.endswith("}\n")
    assert text.index("\t0 [") < text.index("\t1 [") < text.index("0 -> 1")
    assert text.index("cluster_0") < text.index("cluster_1")


def test_cluster_ids_increase():
    graph = Graph()
    ids = [graph.add_cluster(f"c{i}", []).id for i in range(3)]
    assert ids == [0, 1, 2]


@pytest.mark.parametrize("label", ["", "a", "line\nbreak", 'quote"'])
def test_node_label_is_quoted_in_output(label):
    graph = Graph()
    graph.add_node(label, 5)
    assert debug_quote(label) in str(graph)