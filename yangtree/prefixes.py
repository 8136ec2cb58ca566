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

"""Display prefixes of namespaces."""

import re
from .config import TreeConfig
from .schema import ModuleData, SchemaModel
from .typealiases import AugmentationKey, PrefixMap, YangIdentifier

_ident = "[a-zA-Z_][a-zA-Z0-9_.-]*"
_qual_name = re.compile("({}):({})".format(_ident, _ident))
"""Module-qualified node name."""


def prefix_map(model: SchemaModel, module: ModuleData,
               config: TreeConfig) -> PrefixMap:
    """Return the prefixes to be displayed in the tree of `module`.

    The printed module itself is left out unless
    `config.prefix_main_module` is set, so its nodes remain unprefixed.

    Args:
        model: Schema model containing `module`.
        module: Module whose tree is being printed.
        config: Tree options.
    """
    res = {}
    for m in model.modules:
        if m.name == module.name and not config.prefix_main_module:
            continue
        res[m.name] = m.name if config.prefix_module else m.prefix
    return res


def qualify(name: YangIdentifier, ns: YangIdentifier,
            prefixes: PrefixMap) -> str:
    """Return `name` with the display prefix of `ns`, if it has one."""
    return f"{prefixes[ns]}:{name}" if ns in prefixes else name


def augment_path(key: AugmentationKey, prefixes: PrefixMap) -> str:
    """Return the displayed path of an augmentation target."""
    return "".join("/" + qualify(name, ns, prefixes) for name, ns in key)


def leafref_target(target: str, own: YangIdentifier,
                   prefixes: PrefixMap) -> str:
    """Return the displayed path of a leafref target.

    Names qualified by the module `own` lose the qualification, the
    others get the display prefix of their module. This applies to
    steps as well as to names inside predicates.
    """
    def repl(mo: re.Match) -> str:
        ns, name = mo.group(1, 2)
        return name if ns == own else f"{prefixes.get(ns, ns)}:{name}"
    return _qual_name.sub(repl, target)
