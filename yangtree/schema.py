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

"""Schema model read by the tree renderer.

This module implements the following classes:

* TypeRef: Type of a leaf or leaf-list as shown in a tree.
* SchemaNode: Definition of a schema node.
* SchemaTreeNode: Schema node placed in the schema tree.
* ModuleData: Data related to a YANG module.
* SchemaModel: Modules and the schema tree they define.
"""

from collections.abc import Iterable
from typing import Optional
from .enumerations import NodeKind, NodeStatus
from .exceptions import ModuleNotFound
from .typealiases import (QualName, RevisionDate, SchemaPath,
                          YangIdentifier)


class TypeRef:
    """Type of a leaf or leaf-list."""

    def __init__(self: "TypeRef", name: str, target: Optional[str] = None):
        """Initialize the class instance.

        Args:
            name: Name of the type (derived type name, or built-in type).
            target: Path of the leafref target, with each step qualified
                by a module name (``/mod:a/mod:b`` or ``../mod:b``).
        """
        self.name = name
        self.target = target

    @property
    def is_leafref(self: "TypeRef") -> bool:
        return self.target is not None

    def __repr__(self: "TypeRef") -> str:
        return f"TypeRef({self.name!r}, {self.target!r})"


class SchemaNode:
    """Definition of a schema node.

    The receiver is a tagged variant: `kind` says which of the remaining
    attributes are meaningful.
    """

    def __init__(self: "SchemaNode", kind: NodeKind, name: YangIdentifier,
                 ns: YangIdentifier,
                 status: NodeStatus = NodeStatus.current,
                 config: Optional[bool] = None, mandatory: bool = False,
                 type: Optional[TypeRef] = None,
                 if_features: Iterable[str] = (),
                 keys: Iterable[QualName] = ()):
        """Initialize the class instance."""
        self.kind = kind
        self.name = name
        """Name of the receiver."""
        self.ns = ns
        """Namespace of the receiver (name of the defining module)."""
        self.status = status
        self.config = config
        """Configuration flag, ``None`` for operations and notifications."""
        self.mandatory = mandatory
        self.type = type
        """Type of a leaf or leaf-list."""
        self.if_features = list(if_features)
        """If-feature expressions that the receiver depends on."""
        self.keys = list(keys)
        """Key leafs of a list, in declaration order."""

    @property
    def qual_name(self: "SchemaNode") -> QualName:
        """Qualified name of the receiver."""
        return (self.name, self.ns)

    def __repr__(self: "SchemaNode") -> str:
        return f"<{self.kind.value} {self.ns}:{self.name}>"


class SchemaTreeNode:
    """Schema node together with its position in the schema tree."""

    def __init__(self: "SchemaTreeNode", node: Optional[SchemaNode] = None,
                 path: SchemaPath = (), augmenting: bool = False):
        """Initialize the class instance.

        Args:
            node: Wrapped schema node, ``None`` for the schema root.
            path: Absolute schema path of the receiver.
            augmenting: Was the node added by another module's augment?
        """
        self.node = node
        self.path = path
        self.augmenting = augmenting
        self.children: dict[SchemaPath, "SchemaTreeNode"] = {}
        """Ordered map of children's schema paths to subtrees."""

    @property
    def position(self: "SchemaTreeNode") -> int:
        """Position of the receiver on its path (distance from the root)."""
        return len(self.path) - 1

    @property
    def target(self: "SchemaTreeNode") -> SchemaPath:
        """Schema path of the receiver's parent."""
        return self.path[:-1]

    def add_child(self: "SchemaTreeNode", node: SchemaNode,
                  augmenting: bool = False) -> "SchemaTreeNode":
        """Create a subtree for `node` and append it to the receiver.

        Returns:
            The new subtree.
        """
        child = SchemaTreeNode(node, self.path + (node.qual_name,),
                               augmenting)
        self.children[child.path] = child
        return child

    def register(self: "SchemaTreeNode", subtree: "SchemaTreeNode") -> None:
        """Register a subtree under its own path.

        The schema root uses this for the top nodes of augmentations.
        """
        self.children[subtree.path] = subtree

    def data_children(self: "SchemaTreeNode") -> list["SchemaTreeNode"]:
        """Return the receiver's children other than actions and notifications."""
        return [c for c in self.children.values() if c.node.kind not in
                (NodeKind.action, NodeKind.notification)]

    def action_children(self: "SchemaTreeNode") -> list["SchemaTreeNode"]:
        """Return the receiver's action children."""
        return [c for c in self.children.values()
                if c.node.kind == NodeKind.action]

    def input(self: "SchemaTreeNode") -> Optional["SchemaTreeNode"]:
        """Return the input subtree of an RPC or action."""
        return self._io_child(NodeKind.input)

    def output(self: "SchemaTreeNode") -> Optional["SchemaTreeNode"]:
        """Return the output subtree of an RPC or action."""
        return self._io_child(NodeKind.output)

    def _io_child(self: "SchemaTreeNode",
                  kind: NodeKind) -> Optional["SchemaTreeNode"]:
        for c in self.children.values():
            if c.node.kind == kind:
                return c
        return None

    def __repr__(self: "SchemaTreeNode") -> str:
        return "/" + "/".join(f"{ns}:{name}" for name, ns in self.path)


class ModuleData:
    """Data related to a YANG module."""

    def __init__(self: "ModuleData", name: YangIdentifier,
                 revision: RevisionDate = "", prefix: Optional[str] = None,
                 namespace: Optional[str] = None):
        """Initialize the class instance."""
        self.name = name
        self.revision = revision
        self.prefix = prefix if prefix else name
        """Prefix declared by the module."""
        self.namespace = namespace
        """XML namespace URI of the module."""
        self.rpcs: list[SchemaTreeNode] = []
        """RPCs defined by the module, in definition order."""
        self.notifications: list[SchemaTreeNode] = []
        """Top-level notifications defined by the module."""

    def __repr__(self: "ModuleData") -> str:
        return (f"{self.name}@{self.revision}" if self.revision
                else self.name)


class SchemaModel:
    """YANG modules and the schema tree they define."""

    def __init__(self: "SchemaModel",
                 modules: Iterable[ModuleData] = (),
                 tree: Optional[SchemaTreeNode] = None):
        """Initialize the class instance."""
        self.modules = list(modules)
        self.tree = tree if tree else SchemaTreeNode()
        """Schema root."""

    def add_module(self: "SchemaModel", module: ModuleData) -> ModuleData:
        """Add a module to the receiver and return it."""
        self.modules.append(module)
        return module

    def get_module(self: "SchemaModel", name: YangIdentifier,
                   revision: Optional[RevisionDate] = None) -> ModuleData:
        """Return data of a module.

        Args:
            name: Module name.
            revision: Revision date, the latest revision if absent.

        Raises:
            ModuleNotFound: If the receiver has no such module or revision.
        """
        cands = [m for m in self.modules if m.name == name and
                 (revision is None or m.revision == revision)]
        if not cands:
            raise ModuleNotFound(name, revision)
        return sorted(cands, key=lambda m: m.revision)[-1]
