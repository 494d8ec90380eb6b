# rtaviz

Small building blocks for analysing and visualising trace results.

- `rtaviz.utils`
  - `Known`: a value that is either known or unknown (`Known(x)`, `Known.unknown()`,
    `Known.from_optional(x)`), with `unwrap`, `unwrap_or`, `expect`, `map`, `map_or`,
    `eq_inner`, `is_unknown_or_eq`, `to_optional` and `hex`.
  - `WeakKnown`: a value that is known, unknown or dropped (`WeakKnown.dropped()`,
    `WeakKnown.from_known(k)`).
  - Asking an unknown or dropped value for its contents with `unwrap` or `expect`
    raises `UnknownValueError` (a `ValueError`).
  - `ArcWeak`: a reference that holds its object strongly or through a `weakref`,
    and can switch with `upgrade_in_place` and `downgrade_in_place`.
  - `CyclicDependency`: an abstract base with `break_cycle` and `create_cycle`.
  - Formatting helpers: `format_duration`, `format_duration_imprecise`,
    `debug_option_hex`, `display_shared`, `display_arc_weak` and
    `display_arc_weak_mapped`.
- `rtaviz.visualization.graphviz_export`: `Graph`, `GraphNode`, `GraphEdge`,
  `GraphCluster`, `NodeShape` and `Attributes`, which together produce Graphviz
  `digraph` text; plus `escape_string` and `debug_quote`.
- `rtaviz.visualization.color`: `ColorGradient`, a linear gradient from seagreen
  through gold to red, returning `Color` values shown as `#RRGGBBAA`.
  `COLOR_GRADIENT` is a ready-made instance.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Optional values:

```python
from rtaviz.utils import Known, WeakKnown

period = Known(10)
print(period.unwrap_or(0))                     # 10
print(Known.unknown())                         # Unknown
print(Known.from_optional(None).is_unknown())  # True
print(Known(255).hex())                        # ff
print(WeakKnown.dropped())                     # Dropped
```

Durations in nanoseconds:

```python
from rtaviz.utils import format_duration, format_duration_imprecise, debug_option_hex

print(format_duration(2_000_000))            # 2 ms
print(format_duration(1_500))                # 1500 ns
print(format_duration_imprecise(1_234_567))  # 1.23 ms
print(debug_option_hex(255))                 # Some(0xff)
```

`format_duration` moves to a larger unit only while the division is exact;
`format_duration_imprecise` rounds to three significant digits and counts a
year as 365 days.

Strong and weak references:

```python
from rtaviz.utils import ArcWeak, display_arc_weak

class Node:
    def __str__(self):
        return "node"

node = Node()
ref = ArcWeak(node)
ref.downgrade_in_place()
print(display_arc_weak(ref, skip=False))  # node
del node
print(display_arc_weak(ref, skip=False))  # DROPPED
```

A Graphviz graph:

```python
from rtaviz.visualization.graphviz_export import Graph, NodeShape

graph = Graph()
graph.set_attribute("rankdir", "LR")
graph.add_node("/talker", 0)
graph.add_node("/chatter", 1).set_shape(NodeShape.ELLIPSE)
graph.add_edge(0, 1, "publish").set_attribute("color", "#2E8B57FF")
graph.add_cluster("demo", [0, 1])
print(graph)
```

`str(graph)` is the DOT text; nodes are boxes unless another shape is set.

Colours:

```python
from rtaviz.visualization.color import ColorGradient

gradient = ColorGradient()
print(gradient.color(0.0))                    # #2E8B57FF (seagreen)
print(gradient.color(1.0))                    # #FF0000FF (red)
print(gradient.color_for_range(75, 0, 100))   # between gold and red
```

Values outside `[0, 1]` are clamped to the end colours. `ColorGradient` accepts
other stop lists, but only the names `seagreen`, `gold` and `red` are known.

## What this package does not do

It has no command-line program and does not read trace files; it only provides
the value types, formatting helpers, DOT text and colours. It does not render
DOT text to images: save the output of `str(graph)` and use a Graphviz tool
for that.