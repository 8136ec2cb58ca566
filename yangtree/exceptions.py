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

"""Exceptions used by the Yangtree library.

This module defines the following exceptions:

* :exc:`ModuleNotFound`: A module is not part of the schema model.
* :exc:`UnsupportedSchemaNode`: A schema node cannot be converted.
* :exc:`YangLibraryError`: YANG library data cannot be generated.
* :exc:`YangtreeException`: Base class for all Yangtree exceptions.
"""

from typing import Optional
from .typealiases import RevisionDate, YangIdentifier


class YangtreeException(Exception):
    """Base class for all Yangtree exceptions."""
    pass


class ModuleNotFound(YangtreeException):
    """A module (or a revision of it) is not part of the schema model."""

    def __init__(self, name: YangIdentifier,
                 rev: Optional[RevisionDate] = None):
        self.name = name
        self.rev = rev

    def __str__(self):
        return f"{self.name}@{self.rev}" if self.rev else self.name


class UnsupportedSchemaNode(YangtreeException):
    """Schema node of an unknown class was encountered."""

    def __init__(self, node: object):
        self.node = node

    def __str__(self):
        name = getattr(self.node, "name", None)
        return f"{self.node.__class__.__name__} '{name}'"


class YangLibraryError(YangtreeException):
    """YANG library data cannot be generated from the module files."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message
