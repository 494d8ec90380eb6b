"""Graphviz DOT export and colour gradients for trace analysis results."""