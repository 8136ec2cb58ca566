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

"""Enumeration classes."""

from enum import Enum

class NodeKind(Enum):
    """Enumeration of schema node kinds."""

    container = "container"
    list = "list"
    leaf = "leaf"
    leaf_list = "leaf-list"
    choice = "choice"
    case = "case"
    anydata = "anydata"
    anyxml = "anyxml"
    rpc = "rpc"
    action = "action"
    input = "input"
    output = "output"
    notification = "notification"

    @property
    def has_type(self) -> bool:
        """Is a node of this kind rendered with a type?"""
        return self in (NodeKind.leaf, NodeKind.leaf_list)

    @property
    def is_operation(self) -> bool:
        """Is this kind an RPC or action?"""
        return self in (NodeKind.rpc, NodeKind.action)

class NodeStatus(Enum):
    """Enumeration of definition statuses, valued by their tree marker."""

    current = "+"
    """Current definition."""
    deprecated = "x"
    """Deprecated definition."""
    obsolete = "o"
    """Obsolete definition."""

class Role(Enum):
    """Enumeration of the parts of a tree a node may be rendered in."""

    plain = 1
    """Data tree, notification or top-level operation."""
    input = 2
    """Input parameters of an RPC or action."""
    output = 3
    """Output parameters of an RPC or action."""
