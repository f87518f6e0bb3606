from confuse.layers import Layer, LayerStack


def test_default_layer_name():
    assert Layer().name == "layer"
    assert Layer("example").name == "example"


def test_layers_go_below_overlays():
    stack = LayerStack()
    overlay = Layer("overlay")
    first = Layer("first")
    second = Layer("second")
    stack.push_overlay(overlay)
    stack.push_layer(first)
    stack.push_layer(second)
    assert list(stack) == [first, second, overlay]
    assert len(stack) == 3


def test_reversed_runs_top_down():
    stack = LayerStack()
    a, b, o = Layer("a"), Layer("b"), Layer("o")
    stack.push_layer(a)
    stack.push_overlay(o)
    stack.push_layer(b)
    assert list(reversed(stack)) == [o, b, a]


def test_pop_layer_moves_insert_point():
    stack = LayerStack()
    a, b, o = Layer("a"), Layer("b"), Layer("o")
    stack.push_layer(a)
    stack.push_overlay(o)
    stack.pop_layer(a)
    stack.push_layer(b)
    assert list(stack) == [b, o]


def test_pop_overlay():
    stack = LayerStack()
    a, o = Layer("a"), Layer("o")
    stack.push_layer(a)
    stack.push_overlay(o)
    stack.pop_overlay(o)
    assert list(stack) == [a]


def test_pop_missing_is_ignored():
    stack = LayerStack()
    a = Layer("a")
    stack.push_layer(a)
    stack.pop_layer(Layer("missing"))
    stack.pop_overlay(Layer("missing"))
    b = Layer("b")
    stack.push_layer(b)
    assert list(stack) == [a, b]


def test_pop_uses_identity():
    stack = LayerStack()
    first = Layer("same")
    second = Layer("same")
    stack.push_layer(first)
    stack.push_layer(second)
    stack.pop_layer(second)
    assert list(stack) == [first]
    assert list(stack)[0] is first