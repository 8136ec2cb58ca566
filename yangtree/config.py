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

"""Tree rendering options."""

import argparse

UNLIMITED = 10000
"""Depth budget or line length standing for "no limit"."""


class TreeConfig:
    """Options of the tree renderer.

    Args:
        depth: Number of tree levels to print (0 = all levels).
        line_length: Maximum line length (0 = whole lines).
        help: Print the legend of tree symbols.
        prefix_module: Use module names instead of prefixes.
        prefix_main_module: Prefix also the nodes of the printed module.
    """

    def __init__(self: "TreeConfig", depth: int = 0, line_length: int = 0,
                 help: bool = False, prefix_module: bool = False,
                 prefix_main_module: bool = False):
        """Initialize the class instance."""
        if depth < 0 or line_length < 0:
            raise ValueError("tree depth and line length must not be negative")
        self.depth = depth if depth else UNLIMITED
        self.line_length = line_length if line_length else UNLIMITED
        self.help = help
        self.prefix_module = prefix_module
        self.prefix_main_module = prefix_main_module

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "TreeConfig":
        """Create options from parsed command-line arguments."""
        return cls(args.tree_depth, args.tree_line_length, args.tree_help,
                   args.tree_prefix_module, args.tree_prefix_main_module)
