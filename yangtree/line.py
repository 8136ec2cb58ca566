# Copyright © 2025 CZ.NIC, z. s. p. o.
#
# This file is part of Yangtree.
#
# Yangtree is free software: you can redistribute it and/or modify it under the
# terms of the GNU Lesser General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option) any
# later version.
#
# Yangtree is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU Lesser General Public License for more
# details.
#
# You should have received a copy of the GNU Lesser General Public License along
# with Yangtree.  If not, see <http://www.gnu.org/licenses/>.

"""Lines of a tree diagram.

This module implements the following classes:

* Line: Abstract class for lines of a tree diagram.
* HeaderLine: Section header.
* NodeLine: Line representing a schema node.

Each node line has the format::

    <connectors><status>--<flags> <name><opts>    <type> <if-features>
"""

from collections.abc import Collection, Iterable, Sequence
from .enumerations import NodeKind, Role
from .prefixes import leafref_target, qualify
from .schema import SchemaNode, SchemaTreeNode
from .typealiases import PrefixMap, SchemaPath, YangIdentifier

LEGEND = """\
tree - tree is printed in following format <status>--<flags> <name><opts> <type> <if-features>

 <status> is one of:

    +  for current
    x  for deprecated
    o  for obsolete

 <flags> is one of:

    rw  for configuration data
    ro  for non-configuration data, output parameters to rpcs
       and actions, and notification parameters
    -w  for input parameters to rpcs and actions
    -x  for rpcs and actions
    -n  for notifications

 <name> is the name of the node:

    (<name>) means that the node is a choice node
    :(<name>) means that the node is a case node

 <opts> is one of:

    ?  for an optional leaf, choice
    *  for a leaf-list or list
    [<keys>] for a list's keys

 <type> is the name of the type for leafs and leaf-lists.
  If the type is a leafref, the type is printed as "-> TARGET",
  where TARGET is the leafref path, with prefixes removed if possible.

 <if-features> is the list of features this node depends on, printed
     within curly brackets and a question mark "{...}?"
"""
"""Explanation of the symbols used in tree diagrams."""

TYPE_GAP = "    "
"""Space between the widest name of siblings and their types."""


class Line:
    """Abstract class for lines of a tree diagram.

    The text of a line is fixed when the line is created. Truncation to
    the maximum line length is only applied by :meth:`emit`.
    """

    def __init__(self: "Line", text: str):
        self._text = text

    @property
    def text(self: "Line") -> str:
        """Full text of the receiver."""
        return self._text

    def emit(self: "Line", width: int) -> str:
        """Return the receiver's text truncated to `width` characters."""
        return self._text[:width]

    def __str__(self: "Line") -> str:
        return self._text

    def __repr__(self: "Line") -> str:
        return f"{self.__class__.__name__}({self._text!r})"


class HeaderLine(Line):
    """Section header: module name, augment target, RPCs or notifications."""
    pass


class NodeLine(Line):
    """Line representing a schema node."""

    def __init__(self: "NodeLine", tree: SchemaTreeNode,
                 connectors: Sequence[bool], role: Role,
                 prefixes: PrefixMap, module: YangIdentifier,
                 keys: Collection[SchemaPath] = (),
                 suppressed: Collection[int] = (), width: int = 0):
        """Initialize the class instance.

        Args:
            tree: Subtree whose top node is rendered.
            connectors: For every ancestor level (oldest first), does the
                ancestor have a later sibling?
            role: Part of the tree the node is rendered in.
            prefixes: Display prefixes of namespaces.
            module: Name of the module being printed.
            keys: Data paths of the keys of the enclosing list.
            suppressed: Path positions occupied by choice and case nodes.
            width: Width of the widest name among the node's siblings.
        """
        self.tree = tree
        self.role = role
        self.connectors = tuple(connectors)
        super().__init__(_render(tree.node, self.connectors, role, prefixes,
                                 module, in_keys(tree, keys, suppressed),
                                 width))


def data_path(path: SchemaPath,
              suppressed: Collection[int] = ()) -> SchemaPath:
    """Return `path` without the steps at `suppressed` positions."""
    return tuple(s for i, s in enumerate(path) if i not in suppressed)


def in_keys(tree: SchemaTreeNode, keys: Collection[SchemaPath],
            suppressed: Collection[int] = ()) -> bool:
    """Is `tree` a key of the enclosing list?

    The steps of choice and case nodes at `suppressed` positions are
    not part of data paths.
    """
    return data_path(tree.path, suppressed) in keys


def label(node: SchemaNode, prefixes: PrefixMap, is_key: bool = False) -> str:
    """Return the name of `node` decorated with its options."""
    name = qualify(node.name, node.ns, prefixes)
    kind = node.kind
    if kind == NodeKind.choice:
        return f"({name})" + ("" if node.mandatory else "?")
    if kind == NodeKind.case:
        return f":({name})"
    if kind == NodeKind.list:
        keys = " ".join(k[0] for k in node.keys)
        return name + "*" + (f" [{keys}]" if keys else "")
    if kind == NodeKind.leaf_list:
        return name + "*"
    if kind in (NodeKind.leaf, NodeKind.anydata, NodeKind.anyxml):
        return name + ("" if node.mandatory or is_key else "?")
    return name


def label_width(trees: Iterable[SchemaTreeNode], prefixes: PrefixMap,
                keys: Collection[SchemaPath] = (),
                suppressed: Collection[int] = ()) -> int:
    """Return the width of the widest typed sibling among `trees`."""
    return max([len(label(t.node, prefixes, in_keys(t, keys, suppressed)))
                for t in trees if t.node.kind.has_type], default=0)


def flags(node: SchemaNode, role: Role) -> str:
    """Return the access flags of `node`."""
    kind = node.kind
    if kind.is_operation:
        return "-x"
    if kind == NodeKind.notification:
        return "-n"
    if kind == NodeKind.case:
        return ""
    if role == Role.input:
        return "-w"
    if role == Role.output:
        return "ro"
    return "rw" if node.config else "ro"


def _render(node: SchemaNode, connectors: Sequence[bool], role: Role,
            prefixes: PrefixMap, module: YangIdentifier, is_key: bool,
            width: int) -> str:
    res = "".join("|  " if c else "   " for c in connectors)
    res += node.status.value + "--"
    fl = flags(node, role)
    res += fl + " " if fl else ""
    lab = label(node, prefixes, is_key)
    if node.kind.has_type and node.type is not None:
        typ = node.type
        tname = ("-> " + leafref_target(typ.target, module, prefixes)
                 if typ.is_leafref else typ.name)
        res += lab.ljust(width) + TYPE_GAP + tname
    else:
        res += lab
    if node.if_features:
        res += " {" + ",".join(node.if_features) + "}?"
    return res
