import pytest
from yangtree.config import TreeConfig
from yangtree.enumerations import NodeKind, NodeStatus
from yangtree.exceptions import ModuleNotFound
from yangtree.schema import (ModuleData, SchemaModel, SchemaNode,
                             SchemaTreeNode, TypeRef)
from yangtree.tree import TreeWalker, render


def node(kind, name, ns="example", typ=None, config=True, **kw):
    return SchemaNode(kind, name, ns, config=config,
                      type=TypeRef(typ) if typ else None, **kw)


def leaf(name, typ="string", ns="example", **kw):
    return node(NodeKind.leaf, name, ns, typ, **kw)


def operation(kind, name, ns="example"):
    return SchemaTreeNode(node(kind, name, ns, config=None), ((name, ns),))


@pytest.fixture
def model():
    res = SchemaModel([ModuleData("example", "2025-01-10", "ex"),
                       ModuleData("example-aug", "2025-01-10", "exa")])
    srv = res.tree.add_child(node(NodeKind.list, "server",
                                  keys=[("id", "example")]))
    srv.add_child(leaf("id"))
    srv.add_child(leaf("name", status=NodeStatus.deprecated))
    trn = res.tree.add_child(node(NodeKind.container, "transport"))
    cho = trn.add_child(node(NodeKind.choice, "proto"))
    tcp = cho.add_child(node(NodeKind.case, "tcp"))
    tcp.add_child(leaf("port", "port-number"))
    cho.add_child(node(NodeKind.case, "udp"))
    trn.add_child(leaf("mtu", "uint32", if_features=["jumbo"]))
    for name, typ in (("timeout", "uint32"), ("retries", "uint8")):
        aug = trn.add_child(leaf(name, typ, "example-aug"), True)
        res.tree.register(aug)
    act = srv.add_child(node(NodeKind.action, "ping", "example-aug",
                             config=None), True)
    res.tree.register(act)
    out = act.add_child(node(NodeKind.output, "output", "example-aug",
                             config=None))
    out.add_child(leaf("rtt", "uint32", "example-aug"))
    mod = res.get_module("example")
    rpc = operation(NodeKind.rpc, "reboot")
    inp = rpc.add_child(node(NodeKind.input, "input", config=None))
    inp.add_child(leaf("delay", "uint32"))
    rpc.add_child(node(NodeKind.output, "output", config=None))
    mod.rpcs.append(rpc)
    ntf = operation(NodeKind.notification, "restarted")
    ntf.add_child(leaf("reason", config=False))
    mod.notifications.append(ntf)
    return res


example_tree = """module: example
+--rw server* [id]
|  +--rw id       string
|  x--rw name?    string
+--rw transport
   +--rw (proto)?
   |  +--:(tcp)
   |  +--rw port?    port-number
   |  +--:(udp)
   +--rw mtu?    uint32 {jumbo}?
RPCs:
+---x reboot
   +---w input
      +---w delay?    uint32
notifications:
+---n restarted
   +--ro reason?    string"""

aug_tree = """module: example-aug
augment /ex:transport:
+--rw timeout?    uint32
+--rw retries?    uint8
augment /ex:server:
+---x ping
   +--ro output
      +--ro rtt?    uint32"""


def test_end_to_end():
    model = SchemaModel([ModuleData("example")])
    srv = model.tree.add_child(node(NodeKind.list, "server",
                                    keys=[("id", "example")]))
    srv.add_child(leaf("id"))
    srv.add_child(leaf("name", status=NodeStatus.deprecated))
    assert list(render(model, "example")) == [
        "module: example",
        "+--rw server* [id]",
        "   +--rw id       string",
        "   x--rw name?    string"]


def test_module(model):
    assert "\n".join(render(model, "example")) == example_tree


def test_augmentations(model):
    assert "\n".join(render(model, "example-aug")) == aug_tree
    walker = TreeWalker(model, model.get_module("example-aug"), TreeConfig())
    augs = walker.augmentations()
    assert list(augs) == [(("transport", "example"),),
                          (("server", "example"),)]
    assert [st.node.name for st in
            augs[(("transport", "example"),)].values()] == [
                "timeout", "retries"]


def test_missing_module(model):
    with pytest.raises(ModuleNotFound) as exc:
        render(model, "example", "2000-01-01")
    assert str(exc.value) == "example@2000-01-01"
    with pytest.raises(ModuleNotFound):
        render(model, "nonexistent")


def test_depth(model):
    lines = list(render(model, "example", config=TreeConfig(depth=1)))
    assert lines == ["module: example", "+--rw server* [id]",
                     "+--rw transport", "RPCs:", "+---x reboot",
                     "notifications:", "+---n restarted"]
    lines = list(render(model, "example", config=TreeConfig(depth=2)))
    assert "   +--rw (proto)?" in lines
    assert "   |  +--:(tcp)" not in lines
    assert "   +---w input" in lines
    assert "      +---w delay?    uint32" not in lines
    lines = list(render(model, "example", config=TreeConfig(depth=3)))
    assert "   |  +--rw port?    port-number" in lines
    assert "      +---w delay?    uint32" in lines


def test_line_length(model):
    full = list(render(model, "example"))
    lines = list(render(model, "example", config=TreeConfig(line_length=12)))
    assert len(lines) == len(full)
    assert all(len(ln) <= 12 for ln in lines)
    assert lines[0] == "module: exam"
    assert [ln[:12] for ln in full] == lines


def test_prefixes(model):
    lines = list(render(model, "example",
                        config=TreeConfig(prefix_main_module=True)))
    assert lines[1] == "+--rw ex:server* [id]"
    assert lines[2] == "|  +--rw ex:id       string"
    assert lines[3] == "|  x--rw ex:name?    string"
    lines = list(render(model, "example-aug",
                        config=TreeConfig(prefix_module=True)))
    assert lines[1] == "augment /example:transport:"
    assert lines[4] == "augment /example:server:"
    lines = list(render(model, "example-aug",
                        config=TreeConfig(prefix_module=True,
                                          prefix_main_module=True)))
    assert lines[2] == "+--rw example-aug:timeout?    uint32"
    assert lines[5] == "+---x example-aug:ping"


def test_actions():
    model = SchemaModel([ModuleData("example")])
    dev = model.tree.add_child(node(NodeKind.container, "device"))
    dev.add_child(leaf("name"))
    act = dev.add_child(node(NodeKind.action, "reset", config=None))
    inp = act.add_child(node(NodeKind.input, "input", config=None))
    inp.add_child(leaf("force", "boolean"))
    out = act.add_child(node(NodeKind.output, "output", config=None))
    out.add_child(leaf("status", mandatory=True))
    dev.add_child(leaf("location"))
    assert list(render(model, "example")) == [
        "module: example",
        "+--rw device",
        "   +--rw name?        string",
        "   +--rw location?    string",
        "   +---x reset",
        "      +---w input",
        "      |  +---w force?    boolean",
        "      +--ro output",
        "         +--ro status    string"]


def test_empty_output_and_input():
    model = SchemaModel([ModuleData("example")])
    mod = model.get_module("example")
    rpc = operation(NodeKind.rpc, "get-status")
    rpc.add_child(node(NodeKind.input, "input", config=None))
    out = rpc.add_child(node(NodeKind.output, "output", config=None))
    out.add_child(leaf("state", status=NodeStatus.obsolete))
    mod.rpcs.append(rpc)
    mod.rpcs.append(operation(NodeKind.rpc, "noop"))
    assert list(render(model, "example")) == [
        "module: example",
        "RPCs:",
        "+---x get-status",
        "|  +--ro output",
        "|     o--ro state?    string",
        "+---x noop"]


def test_leafref():
    model = SchemaModel([ModuleData("example", prefix="ex"),
                         ModuleData("other", prefix="ot")])
    model.tree.add_child(
        SchemaNode(NodeKind.leaf, "current", "example", config=True,
                   type=TypeRef("leafref", "/example:server/example:id")))
    model.tree.add_child(
        SchemaNode(NodeKind.leaf_list, "peers", "other", config=False,
                   type=TypeRef("leafref", "/example:server/example:id")))
    assert list(render(model, "example")) == [
        "module: example",
        "+--rw current?    -> /server/id"]
    assert list(render(model, "other")) == [
        "module: other",
        "+--ro peers*    -> /ex:server/ex:id"]


def test_anydata():
    model = SchemaModel([ModuleData("example")])
    cont = model.tree.add_child(node(NodeKind.container, "state",
                                     config=False))
    cont.add_child(node(NodeKind.anydata, "stats", config=False))
    cont.add_child(node(NodeKind.anyxml, "dump", config=False,
                        mandatory=True))
    cont.add_child(node(NodeKind.list, "entry", config=False))
    assert list(render(model, "example")) == [
        "module: example",
        "+--ro state",
        "   +--ro stats?",
        "   +--ro dump",
        "   +--ro entry*"]


def test_nested_choices():
    model = SchemaModel([ModuleData("example")])
    outer = model.tree.add_child(node(NodeKind.choice, "outer",
                                      mandatory=True))
    first = outer.add_child(node(NodeKind.case, "first"))
    inner = first.add_child(node(NodeKind.choice, "inner"))
    inner.add_child(node(NodeKind.case, "a")).add_child(leaf("a"))
    inner.add_child(node(NodeKind.case, "b")).add_child(leaf("b"))
    first.add_child(leaf("x"))
    outer.add_child(node(NodeKind.case, "second")).add_child(leaf("y"))
    assert list(render(model, "example")) == [
        "module: example",
        "+--rw (outer)",
        "   +--:(first)",
        "   +--rw (inner)?",
        "   |  +--:(a)",
        "   |  +--rw a?    string",
        "   |  +--:(b)",
        "   |  +--rw b?    string",
        "   +--rw x?    string",
        "   +--:(second)",
        "   +--rw y?    string"]


def test_walker_state_restored(model):
    walker = TreeWalker(model, model.get_module("example"),
                        TreeConfig(depth=2))
    walker.render()
    assert walker._connectors == []
    assert walker._suppressed == set()
    assert walker._depth == 2


def test_augment_continuation():
    model = SchemaModel([ModuleData("example", prefix="ex"),
                         ModuleData("example-aug", prefix="exa")])
    system = model.tree.add_child(node(NodeKind.container, "system"))
    system.add_child(leaf("hostname"))
    stats = system.add_child(
        node(NodeKind.container, "stats", "example-aug"), True)
    stats.add_child(leaf("count", "uint32", "example-aug"))
    stats.add_child(leaf("errors", "uint32", "example-aug"))
    lbl = system.add_child(leaf("label", ns="example-aug"), True)
    limits = system.add_child(
        node(NodeKind.container, "limits", "example-aug"), True)
    limits.add_child(leaf("max", "uint16", "example-aug"))
    for st in (stats, lbl, limits):
        model.tree.register(st)
    assert list(render(model, "example-aug")) == [
        "module: example-aug",
        "augment /ex:system:",
        "+--rw stats",
        "|  +--rw count?     uint32",
        "|  +--rw errors?    uint32",
        "+--rw label?    string",
        "+--rw limits",
        "   +--rw max?    uint16"]
    assert list(render(model, "example")) == [
        "module: example",
        "+--rw system",
        "   +--rw hostname?    string"]


def test_keys_in_cases():
    model = SchemaModel([ModuleData("example")])
    entry = model.tree.add_child(node(NodeKind.list, "entry",
                                      keys=[("id", "example")]))
    src = entry.add_child(node(NodeKind.choice, "source"))
    src.add_child(node(NodeKind.case, "manual")).add_child(leaf("id"))
    src.add_child(node(NodeKind.case, "auto")).add_child(
        leaf("seed", "uint32"))
    entry.add_child(leaf("name"))
    assert list(render(model, "example")) == [
        "module: example",
        "+--rw entry* [id]",
        "   +--rw (source)?",
        "   |  +--:(manual)",
        "   |  +--rw id    string",
        "   |  +--:(auto)",
        "   |  +--rw seed?    uint32",
        "   +--rw name?    string"]
