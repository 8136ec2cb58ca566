import pytest
from yangtree.config import TreeConfig
from yangtree.enumerations import NodeKind, NodeStatus
from yangtree.loader import (load_model_from_files, load_model_from_library)
from yangtree.tree import render

example_tree = """module: example
+--rw server* [id]
|  +--rw id       string
|  x--rw name?    string
+--rw transport
|  +--rw (proto)?
|  |  +--:(tcp)
|  |  +--rw port?    port-number
|  |  +--:(udp)
|  |  +--rw udp-port?    uint16
|  +--rw tls-enabled?    boolean {tls}?
+--rw default-server?    -> /server/id
RPCs:
+---x reboot
   +---w input
      +---w delay?    uint32
notifications:
+---n restarted
   +--ro reason?    string"""

aug_tree = """module: example-aug
augment /ex:server:
+---x ping
   +--ro output
      +--ro rtt?    uint32
augment /ex:transport:
+--rw timeout?    uint32
+--rw retries?    uint8"""


@pytest.fixture
def model():
    return load_model_from_library("yang-modules/example/yang-library.json",
                                   ["yang-modules/example"])


def test_modules(model):
    mod = model.get_module("example")
    assert (mod.revision, mod.prefix, mod.namespace) == (
        "2025-01-10", "ex", "urn:example:example")
    assert [st.node.name for st in mod.rpcs] == ["reboot"]
    assert [st.node.name for st in mod.notifications] == ["restarted"]
    assert model.get_module("example-aug").prefix == "exa"


def test_schema_tree(model):
    srv = model.tree.children[(("server", "example"),)]
    assert srv.node.kind == NodeKind.list
    assert srv.node.keys == [("id", "example")]
    name = srv.children[srv.path + (("name", "example"),)]
    assert name.node.status == NodeStatus.deprecated
    ping = model.tree.children[srv.path + (("ping", "example-aug"),)]
    assert ping.augmenting and ping.node.kind == NodeKind.action
    assert srv.action_children() == [ping]
    dsrv = model.tree.children[(("default-server", "example"),)]
    assert dsrv.node.type.target == "/example:server/example:id"
    trn = model.tree.children[(("transport", "example"),)]
    proto = trn.children[trn.path + (("proto", "example"),)]
    assert [c.node.kind for c in proto.data_children()] == [
        NodeKind.case, NodeKind.case]


def test_render(model):
    assert "\n".join(render(model, "example")) == example_tree
    assert "\n".join(render(model, "example-aug")) == aug_tree
    lines = list(render(model, "example", config=TreeConfig(depth=1)))
    assert lines == ["module: example", "+--rw server* [id]",
                     "+--rw transport", "+--rw default-server?    -> /server/id",
                     "RPCs:", "+---x reboot", "notifications:",
                     "+---n restarted"]


def test_files():
    model, mids = load_model_from_files(
        ["yang-modules/example/example@2025-01-10.yang"])
    assert mids == [("example", "2025-01-10")]
    assert "\n".join(render(model, *mids[0])) == example_tree


features_module = """module features {
  yang-version 1.1;
  namespace "urn:example:features";
  prefix f;
  revision 2025-03-01;
  feature fast;
  feature tls;
  grouping endpoint {
    leaf address {
      type string;
    }
    leaf port {
      if-feature tls;
      type uint16;
    }
  }
  list iface {
    key name;
    leaf name {
      type string;
    }
    leaf mtu {
      type uint16;
    }
  }
  leaf sel {
    type string;
  }
  container peer {
    uses endpoint {
      if-feature fast;
    }
    leaf mtu {
      type leafref {
        path "/f:iface[f:name = current()/../../f:sel]/f:mtu";
      }
    }
    choice mode {
      leaf auto {
        if-feature fast;
        type empty;
      }
      case manual {
        if-feature tls;
        leaf speed {
          type uint32;
        }
      }
    }
  }
  augment "/f:peer" {
    if-feature tls;
    leaf cert {
      type string;
    }
  }
}
"""

features_tree = """module: features
+--rw iface* [name]
|  +--rw name    string
|  +--rw mtu?    uint16
+--rw sel?    string
+--rw peer
   +--rw address?    string {fast}?
   +--rw port?       uint16 {fast,tls}?
   +--rw mtu?        -> /iface[name = current()/../../sel]/mtu
   +--rw (mode)?
   |  +--:(auto)
   |  +--rw auto?    empty {fast}?
   |  +--:(manual) {tls}?
   |  +--rw speed?    uint32
   +--rw cert?       string {tls}?"""


def test_if_features(tmp_path):
    yfile = tmp_path / "features.yang"
    yfile.write_text(features_module)
    model, mids = load_model_from_files([str(yfile)])
    assert mids == [("features", "2025-03-01")]
    assert "\n".join(render(model, *mids[0])) == features_tree
    peer = model.tree.children[(("peer", "features"),)]
    mtu = peer.children[peer.path + (("mtu", "features"),)]
    assert mtu.node.type.target == (
        "/features:iface[features:name = current()/../../features:sel]"
        "/features:mtu")
