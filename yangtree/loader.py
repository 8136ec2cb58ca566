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

"""Conversion of Yangson data models to the schema model.

Yangson parses the modules and resolves groupings, augments, deviations
and types. This module reads the resulting schema tree.

Yangson removes nodes whose if-features are not supported and does not
retain the if-feature expressions of the remaining nodes. They are
recovered from the module statements: the statements that define a
Yangson node are found by walking the statements of its parent in step
with the schema tree, expanding groupings and collecting the augments of
each target. A node inherits the if-features of the uses and augment
statements it comes from.
"""

from collections import defaultdict
from collections.abc import Iterable, Iterator
import json
import logging
import os
from typing import Optional
from yangson import DataModel
from yangson.datatype import DataType, LeafrefType
from yangson.enumerations import Axis
from yangson.schemadata import SchemaContext, SchemaData
from yangson.schemanode import (
    AnydataNode, AnyxmlNode, CaseNode, ChoiceNode, ContainerNode,
    InputNode, InternalNode, LeafListNode, LeafNode, ListNode,
    NotificationNode, OutputNode, RpcActionNode)
from yangson.schemanode import SchemaNode as YangsonNode
from yangson.statement import Statement
from yangson.xpathast import Expr, LocationPath, Root, Step
from .enumerations import NodeKind, NodeStatus
from .exceptions import UnsupportedSchemaNode
from .schema import ModuleData, SchemaModel, SchemaNode, SchemaTreeNode, TypeRef
from .typealiases import ModuleId, SchemaPath, YangIdentifier
from .ylib import module_id, yang_library

logger = logging.getLogger(__name__)

_kinds = (
    (ContainerNode, NodeKind.container),
    (ListNode, NodeKind.list),
    (LeafNode, NodeKind.leaf),
    (LeafListNode, NodeKind.leaf_list),
    (ChoiceNode, NodeKind.choice),
    (CaseNode, NodeKind.case),
    (AnydataNode, NodeKind.anydata),
    (AnyxmlNode, NodeKind.anyxml),
    (RpcActionNode, NodeKind.action),
    (InputNode, NodeKind.input),
    (OutputNode, NodeKind.output),
    (NotificationNode, NodeKind.notification),
)
"""Yangson node classes and the corresponding node kinds."""

_no_config = (NodeKind.rpc, NodeKind.action, NodeKind.input,
              NodeKind.output, NodeKind.notification)

_def_kws = frozenset([
    "container", "list", "leaf", "leaf-list", "choice", "case", "anydata",
    "anyxml", "rpc", "action", "input", "output", "notification"])
"""Keywords of statements that define schema nodes."""


def load_model(dm: DataModel) -> SchemaModel:
    """Return the schema model of a Yangson data model."""
    model = SchemaModel()
    for mid, mdata in dm.schema_data.modules.items():
        if mdata.main_module != mid:
            continue                # submodule
        mst = mdata.statement
        pst = mst.find1("prefix")
        nst = mst.find1("namespace")
        model.add_module(ModuleData(
            mid[0], mid[1], pst.argument if pst else None,
            nst.argument if nst else None))
    _Converter(model, dm.schema_data).convert(dm.schema)
    return model


def load_model_from_library(yl_file: str,
                            mod_path: Iterable[str] = (".",)) -> SchemaModel:
    """Return the schema model defined by a file with YANG library data.

    Args:
        yl_file: Name of a file with JSON-encoded YANG library [RFC 7895].
        mod_path: Directories to search for YANG modules.

    Raises:
        The exceptions of :meth:`yangson.DataModel.from_file`.
    """
    return load_model(DataModel.from_file(yl_file, tuple(mod_path)))


def load_model_from_files(
        files: Iterable[str],
        mod_path: Iterable[str] = ()) -> tuple[SchemaModel, list[ModuleId]]:
    """Return the schema model containing the modules in `files`.

    YANG library data are generated for all YANG files found in the
    directories of `files` and in `mod_path`.

    Args:
        files: Names of files containing YANG modules.
        mod_path: Additional directories with imported modules.

    Returns:
        The schema model and identifiers of the modules in `files`.

    Raises:
        YangLibraryError: If YANG library data cannot be generated.
    """
    files = list(files)
    dirs = []
    for d in [os.path.dirname(f) or "." for f in files] + list(mod_path):
        if d not in dirs:
            dirs.append(d)
    mids = [module_id(f) for f in files]
    yl = json.dumps(yang_library(dirs))
    return (load_model(DataModel(yl, tuple(dirs))), mids)


def leafref_path(expr: Expr) -> str:
    """Return the text of a leafref path with module-qualified steps.

    Predicates are kept, their node names are qualified in the same way.
    """
    if isinstance(expr, LocationPath):
        left = leafref_path(expr.left)
        right = leafref_path(expr.right)
        return left + right if isinstance(expr.left, Root) else f"{left}/{right}"
    if isinstance(expr, Root):
        return "/"
    if isinstance(expr, Step):
        if expr.axis == Axis.parent:
            return ".."
        if expr.axis == Axis.self:
            return "."
        name, ns = expr.qname
        return ((f"{ns}:{name}" if ns else name) +
                "".join(f"[{p}]" for p in expr.predicates))
    return str(expr)


def _flatten(nodes: Iterable[YangsonNode]) -> Iterator[YangsonNode]:
    """Iterate over `nodes`, replacing anonymous groups with their members."""
    for sn in nodes:
        if sn.name is None:
            yield from _flatten(sn.children)
        else:
            yield sn


class _Source:
    """Statement defining a schema node."""

    def __init__(self: "_Source", stmt: Statement, sctx: SchemaContext,
                 if_features: Iterable[str] = ()):
        """Initialize the class instance.

        Args:
            stmt: Defining statement.
            sctx: Schema context of `stmt`.
            if_features: If-features of enclosing uses and augments.
        """
        self.stmt = stmt
        self.sctx = sctx
        self.if_features = list(if_features) + _if_features(stmt)

    def defines(self: "_Source", sn: YangsonNode) -> bool:
        """Is `sn` defined by the receiver?"""
        name = self.stmt.argument
        return (self.sctx.default_ns == sn.ns and
                (self.stmt.keyword if name is None else name) == sn.name)


def _if_features(stmt: Statement) -> list[str]:
    return [i.argument for i in stmt.find_all("if-feature")]


class _Converter:
    """Converter of Yangson schema nodes."""

    def __init__(self: "_Converter", model: SchemaModel,
                 schema_data: SchemaData):
        self.model = model
        self.schema_data = schema_data
        self.modules = {m.name: m for m in model.modules}
        self.roots: list[_Source] = []
        """Top-level definitions of all implemented modules."""
        self.augments: dict[SchemaPath, list[_Source]] = defaultdict(list)
        """Definitions added by augments, keyed by target paths."""
        for mst, sctx in self._contexts():
            self.roots.extend(self._expand(mst.substatements, sctx))
            for aug in mst.find_all("augment"):
                target = tuple(schema_data.sni2route(aug.argument, sctx))
                self.augments[target].extend(self._expand(
                    aug.substatements, sctx, _if_features(aug)))

    def convert(self: "_Converter", schema: InternalNode) -> None:
        """Convert the children of a Yangson schema root."""
        for sn in _flatten(schema.children):
            src = self._source(sn, self.roots)
            if isinstance(sn, RpcActionNode):
                self._module(sn.ns).rpcs.append(
                    self._root(sn, src, NodeKind.rpc))
            elif isinstance(sn, NotificationNode):
                self._module(sn.ns).notifications.append(self._root(sn, src))
            elif self._kind(sn) is None:
                logger.warning("skipping top-level %s %s:%s",
                               sn.__class__.__name__, sn.ns, sn.name)
            else:
                self._add(self.model.tree, sn, None, src)

    def _contexts(self: "_Converter") -> Iterator[
            tuple[Statement, SchemaContext]]:
        """Iterate over implemented (sub)modules and their contexts."""
        sd = self.schema_data
        for mid, mdata in sd.modules.items():
            name, rev = mdata.main_module
            if sd.implement.get(name) == rev:
                yield (mdata.statement,
                       SchemaContext(sd, sd.namespace(mid), mid))

    def _expand(self: "_Converter", stmts: Iterable[Statement],
                sctx: SchemaContext,
                if_features: Iterable[str] = ()) -> Iterator[_Source]:
        """Iterate over the definitions among `stmts`.

        Uses statements are replaced with the contents of their groupings.
        """
        if_features = list(if_features)
        for st in stmts:
            if st.prefix:
                continue        # extension
            if st.keyword == "uses":
                grp, gctx = self.schema_data.get_definition(st, sctx)
                yield from self._expand(grp.substatements, gctx,
                                        if_features + _if_features(st))
            elif st.keyword in _def_kws:
                yield _Source(st, sctx, if_features)

    @staticmethod
    def _source(sn: YangsonNode,
                cands: Iterable[_Source]) -> Optional[_Source]:
        for src in cands:
            if src.defines(sn):
                return src
        return None

    def _module(self: "_Converter", ns: YangIdentifier) -> ModuleData:
        return self.modules[ns]

    def _root(self: "_Converter", sn: YangsonNode, src: Optional[_Source],
              kind: Optional[NodeKind] = None) -> SchemaTreeNode:
        res = SchemaTreeNode(self._node(sn, src, kind), (sn.qual_name,))
        self._add_children(res, sn, src)
        return res

    def _add(self: "_Converter", parent: SchemaTreeNode, sn: YangsonNode,
             parent_ns: Optional[YangIdentifier],
             src: Optional[_Source]) -> None:
        augmenting = parent_ns is not None and sn.ns != parent_ns
        if (isinstance(sn, CaseNode) and src is not None and
                src.stmt.keyword != "case"):
            # shorthand case
            st = parent.add_child(self._node(sn, None), augmenting)
            kids = [src]
        else:
            st = parent.add_child(self._node(sn, src), augmenting)
            kids = None
        if augmenting:
            self.model.tree.register(st)
        self._add_children(st, sn, src, kids)

    def _add_children(self: "_Converter", st: SchemaTreeNode,
                      sn: YangsonNode, src: Optional[_Source],
                      kids: Optional[list[_Source]] = None) -> None:
        """Convert the children of `sn` and add them to `st`.

        Args:
            st: Subtree of the converted `sn`.
            sn: Yangson node.
            src: Definition of `sn`.
            kids: Definitions of the children, those of `src` if absent.
        """
        if not isinstance(sn, InternalNode):
            return
        if kids is None:
            kids = (list(self._expand(src.stmt.substatements, src.sctx))
                    if src else [])
        cands = kids + self.augments.get(st.path, [])
        for c in _flatten(sn.children):
            self._add(st, c, sn.ns, self._source(c, cands))

    @staticmethod
    def _kind(sn: YangsonNode) -> Optional[NodeKind]:
        for cls, kind in _kinds:
            if isinstance(sn, cls):
                return kind
        return None

    def _node(self: "_Converter", sn: YangsonNode, src: Optional[_Source],
              kind: Optional[NodeKind] = None) -> SchemaNode:
        kind = kind if kind else self._kind(sn)
        if kind is None:
            raise UnsupportedSchemaNode(sn)
        return SchemaNode(
            kind, sn.name, sn.ns, NodeStatus[sn.status.name],
            config=None if kind in _no_config else sn.config,
            mandatory=sn.mandatory,
            type=self._type(sn.type) if kind.has_type else None,
            if_features=src.if_features if src else (),
            keys=sn.keys if kind == NodeKind.list else ())

    @staticmethod
    def _type(typ: DataType) -> TypeRef:
        if isinstance(typ, LeafrefType):
            return TypeRef(typ.name if typ.name else "leafref",
                           leafref_path(typ.path))
        return TypeRef(typ.name if typ.name else typ.yang_type())
