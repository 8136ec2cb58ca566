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

The tree renderer works on a :class:`SchemaModel`, which can be built
from a Yangson data model with the functions of :mod:`yangtree.loader`.
"""

from .config import TreeConfig
from .loader import load_model, load_model_from_files, load_model_from_library
from .schema import SchemaModel
from .tree import TreeWalker, render

__all__ = ["SchemaModel", "TreeConfig", "TreeWalker", "load_model",
           "load_model_from_files", "load_model_from_library", "render"]
