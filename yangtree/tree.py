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

"""Tree diagrams of YANG modules.

This module implements the following class:

* TreeWalker: Renderer of the tree diagram of one module.

and the function :func:`render` that returns the finished lines of a
module's tree.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
import logging
from typing import Optional
from .config import TreeConfig
from .enumerations import NodeKind, Role
from .line import HeaderLine, Line, NodeLine, data_path, label_width
from .prefixes import augment_path, prefix_map
from .schema import ModuleData, SchemaModel, SchemaTreeNode
from .typealiases import (AugmentationKey, RevisionDate, SchemaPath,
                          YangIdentifier)

logger = logging.getLogger(__name__)


class TreeWalker:
    """Renderer of the tree diagram of one module.

    An instance keeps the traversal state of a single pass over one
    module, so it must not be shared between passes:

    * connector stack – for every ancestor level of the current node,
      does the ancestor have a later sibling?
    * positions of the choice and case nodes on the current path,
    * remaining depth budget.
    """

    def __init__(self: "TreeWalker", model: SchemaModel, module: ModuleData,
                 config: TreeConfig):
        """Initialize the class instance."""
        self.model = model
        self.module = module
        self.config = config
        self.prefixes = prefix_map(model, module, config)
        """Display prefixes, fixed for the whole pass."""
        self.lines: list[Line] = []
        self._connectors: list[bool] = []
        self._suppressed: set[int] = set()
        self._depth = config.depth

    def render(self: "TreeWalker") -> list[Line]:
        """Return all lines of the module's tree."""
        logger.debug("rendering module %s", self.module)
        self._header(f"module: {self.module.name}")
        self._data_nodes()
        self._augments()
        self._rpcs()
        self._notifications()
        return self.lines

    def augmentations(self: "TreeWalker") -> dict[
            AugmentationKey, dict[SchemaPath, SchemaTreeNode]]:
        """Return the module's augmentations grouped by their targets.

        Targets and the nodes augmenting each of them keep the order in
        which they were encountered.
        """
        res: dict[AugmentationKey, dict[SchemaPath, SchemaTreeNode]] = {}
        for st in self.model.tree.children.values():
            if st.augmenting and st.node.ns == self.module.name:
                res.setdefault(st.target, {})[st.path] = st
        return res

    def _data_nodes(self: "TreeWalker") -> None:
        self._children(self.model.tree.children.values(), Role.plain)

    def _augments(self: "TreeWalker") -> None:
        for key, members in self.augmentations().items():
            self._header(f"augment {augment_path(key, self.prefixes)}:")
            trees = list(members.values())
            width = label_width(trees, self.prefixes)
            for i, st in enumerate(trees):
                self._node(st, Role.plain, i < len(trees) - 1, width=width)

    def _rpcs(self: "TreeWalker") -> None:
        rpcs = self.module.rpcs
        if rpcs:
            self._header("RPCs:")
        for i, st in enumerate(rpcs):
            self._node(st, Role.plain, i < len(rpcs) - 1)

    def _notifications(self: "TreeWalker") -> None:
        notifs = self.module.notifications
        if notifs:
            self._header("notifications:")
        for i, st in enumerate(notifs):
            self._node(st, Role.plain, i < len(notifs) - 1)

    def _own(self: "TreeWalker",
             trees: Iterable[SchemaTreeNode]) -> list[SchemaTreeNode]:
        """Return the members of `trees` that the module defines itself."""
        return [st for st in trees if not st.augmenting and
                st.node.ns == self.module.name]

    def _node(self: "TreeWalker", st: SchemaTreeNode, role: Role,
              has_next: bool, keys: Iterable[SchemaPath] = (),
              width: int = 0) -> None:
        """Render a node and everything below it."""
        self._emit(st, role, keys, width)
        if st.node.kind.is_operation:
            self._operation(st, has_next)
        else:
            self._subtree(st, role, has_next, keys)

    def _children(self: "TreeWalker", trees: Iterable[SchemaTreeNode],
                  role: Role, keys: Iterable[SchemaPath] = (),
                  trailing: bool = False) -> None:
        """Render sibling subtrees.

        Args:
            trees: Sibling subtrees.
            role: Part of the tree the siblings belong to.
            keys: Data paths of the keys of the enclosing list.
            trailing: Do other lines follow the siblings on the same level?
        """
        kids = self._own(trees)
        keys = list(keys)
        width = label_width(kids, self.prefixes, keys, self._suppressed)
        for i, st in enumerate(kids):
            self._node(st, role, i < len(kids) - 1 or trailing, keys, width)

    def _subtree(self: "TreeWalker", st: SchemaTreeNode, role: Role,
                 has_next: bool, keys: Iterable[SchemaPath] = ()) -> None:
        """Render the descendants of a node whose line has been emitted."""
        with self._level() as room:
            if not room:
                return
            actions = self._own(st.action_children())
            with self._branch(has_next):
                if st.node.kind == NodeKind.choice:
                    self._cases(st, role, keys, bool(actions))
                else:
                    self._children(st.data_children(), role, self._keys(st),
                                   bool(actions))
                for i, act in enumerate(actions):
                    self._emit(act, Role.plain)
                    self._operation(act, i < len(actions) - 1)

    def _cases(self: "TreeWalker", choice: SchemaTreeNode, role: Role,
               keys: Iterable[SchemaPath], trailing: bool) -> None:
        """Render the cases of a choice.

        Members of a case are placed on the level of the case line, so
        the case takes neither an indentation level nor depth budget.
        They are data children of the choice's parent and see its keys.
        """
        cases = self._own(choice.data_children())
        with self._synthetic(choice):
            for i, case in enumerate(cases):
                with self._synthetic(case):
                    self._emit(case, role, keys)
                    self._children(case.data_children(), role, keys,
                                   i < len(cases) - 1 or trailing)

    def _operation(self: "TreeWalker", op: SchemaTreeNode,
                   has_next: bool) -> None:
        """Render input and output of an RPC or action."""
        with self._level() as room:
            if not room:
                return
            inp = self._nonempty(op.input())
            out = self._nonempty(op.output())
            with self._branch(has_next):
                if inp:
                    self._emit(inp, Role.input)
                    self._subtree(inp, Role.input, out is not None)
                if out:
                    self._emit(out, Role.output)
                    self._subtree(out, Role.output, False)

    def _keys(self: "TreeWalker", st: SchemaTreeNode) -> list[SchemaPath]:
        """Return data paths of the keys of a list."""
        dp = data_path(st.path, self._suppressed)
        return [dp + (k,) for k in st.node.keys]

    def _nonempty(self: "TreeWalker",
                  st: Optional[SchemaTreeNode]) -> Optional[SchemaTreeNode]:
        return st if st and self._own(st.data_children()) else None

    def _emit(self: "TreeWalker", st: SchemaTreeNode, role: Role,
              keys: Iterable[SchemaPath] = (), width: int = 0) -> None:
        self.lines.append(NodeLine(
            st, self._connectors, role, self.prefixes, self.module.name,
            keys, self._suppressed, width))

    def _header(self: "TreeWalker", text: str) -> None:
        self.lines.append(HeaderLine(text))

    @contextmanager
    def _level(self: "TreeWalker") -> Iterator[bool]:
        """Descend one level; yield whether the depth budget allows it."""
        self._depth -= 1
        try:
            if self._depth <= 0:
                logger.debug("depth budget exhausted in %s", self.module)
            yield self._depth > 0
        finally:
            self._depth += 1

    @contextmanager
    def _branch(self: "TreeWalker", has_next: bool) -> Iterator[None]:
        self._connectors.append(has_next)
        try:
            yield
        finally:
            self._connectors.pop()

    @contextmanager
    def _synthetic(self: "TreeWalker", st: SchemaTreeNode) -> Iterator[None]:
        """Mark the position of a choice or case node for the nested lines."""
        self._suppressed.add(st.position)
        try:
            yield
        finally:
            self._suppressed.discard(st.position)


def render(model: SchemaModel, name: YangIdentifier,
           revision: Optional[RevisionDate] = None,
           config: Optional[TreeConfig] = None) -> Iterator[str]:
    """Return the tree diagram of a module.

    Args:
        model: Schema model.
        name: Module name.
        revision: Module revision, the latest one if absent.
        config: Tree options.

    Returns:
        Iterator over lines truncated to the maximum line length.

    Raises:
        ModuleNotFound: If the module or revision is not in `model`.
    """
    config = config if config else TreeConfig()
    module = model.get_module(name, revision)
    lines = TreeWalker(model, module, config).render()
    return (ln.emit(config.line_length) for ln in lines)
