from mlcore.collection import Collection, CollectionRoot
from mlcore.path import Path


class Widget:
    def __init__(self, name, size=0):
        self.name = name
        self.size = size

    def __str__(self):
        return f"widget {self.name}"


class Panel:
    def __init__(self, collection, name):
        self.name = name
        collection.add("inner", Widget(name + "-inner"))


def test_add_and_find():
    root = CollectionRoot()
    w = Widget("w")
    root.add("view/w", w)
    assert root.find("view/w") is w
    assert root["view/w"] is w


def test_find_missing_and_valueless():
    root = CollectionRoot()
    root.add("view/w", Widget("w"))
    assert root.find("view") is None
    assert root.find("nope") is None
    assert root["nope"] is None


def test_iteration_and_len():
    root = CollectionRoot()
    root.add("a", Widget("a"))
    root.add("a/b", Widget("b"))
    root.add("c", Widget("c"))
    assert sorted(w.name for w in root) == ["a", "b", "c"]
    assert len(root) == 3


def test_items_give_paths():
    root = CollectionRoot()
    root.add("a/b", Widget("b"))
    assert [(p, w.name) for p, w in root.items()] == [(Path("a/b"), "b")]


def test_child_items_only_top_level():
    root = CollectionRoot()
    root.add("a", Widget("a"))
    root.add("a/b", Widget("b"))
    root.add("c", Widget("c"))
    names = sorted(w.name for _, w in root.child_items())
    assert names == ["a", "c"]


def test_for_each_and_for_each_child():
    root = CollectionRoot()
    root.add("a", Widget("a"))
    root.add("a/b", Widget("b"))
    every, children = [], []
    root.for_each(lambda w: every.append(w.name))
    root.for_each_child(lambda w: children.append(w.name))
    assert sorted(every) == ["a", "b"]
    assert children == ["a"]


def test_add_unique():
    root = CollectionRoot()
    root.add_unique("x", Widget, "made", 7)
    made = root.find("x")
    assert made.name == "made"
    assert made.size == 7


def test_add_unique_with_collection():
    root = CollectionRoot()
    root.add_unique_with_collection("panel", Panel, "p")
    panel = root.find("panel")
    assert panel.name == "p"
    assert root.find("panel/inner").name == "p-inner"


def test_sub_collection_shares_tree():
    root = CollectionRoot()
    root.add("view/a", Widget("a"))
    root.add("view/b", Widget("b"))
    root.add("other", Widget("o"))
    sub = root.get_sub_collection("view")
    assert sorted(w.name for w in sub) == ["a", "b"]
    sub.add("c", Widget("c"))
    assert root.find("view/c").name == "c"


def test_missing_sub_collection_is_null():
    root = CollectionRoot()
    sub = root.get_sub_collection("absent")
    sub.add("a", Widget("a"))
    assert list(sub) == []
    assert len(sub) == 0
    assert root.find("absent/a") is None


def test_null_collection():
    null = Collection()
    null.add("a", Widget("a"))
    null.add_unique("b", Widget, "b")
    assert list(null) == []
    assert null.find("a") is None
    assert null["a"] is None
    assert len(null) == 0
    assert list(null.child_items()) == []


def test_clear():
    root = CollectionRoot()
    root.add("a", Widget("a"))
    root.clear()
    assert len(root) == 0
    assert root.find("a") is None


def test_dump(capsys):
    root = CollectionRoot()
    root.add("a", Widget("a"))
    root.dump()
    assert "a [widget a]" in capsys.readouterr().out