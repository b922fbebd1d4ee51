from treeguide.node import BinaryNode, node_height, node_size


def _sample():
    #      4
    #     / \
    #    2   5
    #   / \
    #  1   3
    n1 = BinaryNode(1)
    n3 = BinaryNode(3)
    n2 = BinaryNode(2, n1, n3)
    n5 = BinaryNode(5)
    return BinaryNode(4, n2, n5)


def test_new_node_data():
    node = BinaryNode(5, None, None)
    assert node.data == 5


def test_size():
    assert _sample().size() == 5


def test_height_single_node():
    assert BinaryNode(1).height() == 0


def test_height():
    assert _sample().height() == 2


def test_children():
    left = BinaryNode(1)
    right = BinaryNode(3)
    root = BinaryNode(2, left, right)
    assert root.left is left
    assert root.right is right


def test_helpers_on_missing_node():
    assert node_size(None) == 0
    assert node_height(None) == -1


def test_helpers_on_node():
    root = _sample()
    assert node_size(root) == 5
    assert node_height(root) == 2