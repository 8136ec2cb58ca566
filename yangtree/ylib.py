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

"""YANG library data for a set of module files.

All *.yang files in the given directories are read. Each file should
contain a YANG module or submodule. All features of all modules are
declared as supported, so that the schema contains every node the
modules define.

The revision of a module is the first revision statement in its text,
which is the revision Yangson expects when it reads the module back,
whether the file is named ``NAME@REVISION.yang`` or ``NAME.yang``.

If a submodule is included from a main module (with revision), then the
submodule must be present in one of the directories, otherwise
:exc:`YangLibraryError` is raised.
"""

from collections.abc import Iterable
import logging
import os
from typing import Any
from yangson.statement import ModuleParser, Statement
from .exceptions import YangLibraryError
from .typealiases import ModuleId, RevisionDate

logger = logging.getLogger(__name__)

data_kws = ["augment", "container", "leaf", "leaf-list", "list", "rpc",
            "notification", "identity", "choice", "anydata", "anyxml", "uses"]
"""Keywords of statements that contribute nodes to the schema tree."""


def parse_file(fname: str) -> Statement:
    """Parse a file containing a YANG module or submodule.

    The name and revision in the module text are not checked.
    """
    with open(fname, encoding="utf-8") as yf:
        mp = ModuleParser(yf.read())
    mp.opt_separator()
    return mp.statement()


def revision(mst: Statement) -> RevisionDate:
    """Return the first (most recent) revision of a parsed (sub)module."""
    rst = mst.find1("revision")
    return rst.argument if rst else ""


def module_id(fname: str) -> ModuleId:
    """Return the identifier of the (sub)module in a YANG file."""
    mst = parse_file(fname)
    return (mst.argument, revision(mst))


class LibraryBuilder:
    """Collector of YANG library entries."""

    def __init__(self: "LibraryBuilder"):
        self.modmap: dict[ModuleId, dict[str, Any]] = {}
        """Dictionary for collecting module data."""
        self.submodmap: dict[str, dict[str, Any]] = {}
        """Dictionary for collecting submodule data."""

    def module_entry(self: "LibraryBuilder", mst: Statement) -> None:
        """Add entry for one YANG module or submodule.

        Args:
            mst: Parsed module or submodule statement.
        """
        submod = mst.keyword == "submodule"
        import_only = True
        rev = ""
        features = []
        includes = []
        rec: dict[str, Any] = {}
        for sst in mst.substatements:
            if not rev and sst.keyword == "revision":
                rev = sst.argument
            elif import_only and sst.keyword in data_kws:
                import_only = False
            elif sst.keyword == "feature":
                features.append(sst.argument)
            elif submod:
                continue
            elif sst.keyword == "namespace":
                rec["namespace"] = sst.argument
            elif sst.keyword == "include":
                rd = sst.find1("revision-date")
                includes.append((sst.argument, rd.argument if rd else None))
        rec["import-only"] = import_only
        rec["features"] = features
        if submod:
            rec["revision"] = rev
            self.submodmap[mst.argument] = rec
        else:
            rec["includes"] = includes
            self.modmap[(mst.argument, rev)] = rec

    def add_directory(self: "LibraryBuilder", ydir: str) -> None:
        """Add entries for all YANG files in a directory."""
        for infile in sorted(os.listdir(ydir)):
            if not infile.endswith(".yang"):
                continue
            logger.debug("reading %s", infile)
            self.module_entry(parse_file(os.path.join(ydir, infile)))

    def yang_library(self: "LibraryBuilder") -> dict[str, Any]:
        """Return YANG library data [RFC 7895] for the collected modules.

        Raises:
            YangLibraryError: If an included submodule is missing or has
                a wrong revision.
        """
        marr = []
        for (yam, mrev) in self.modmap:
            men = {"name": yam, "revision": mrev}
            sarr = []
            mrec = self.modmap[(yam, mrev)]
            men["namespace"] = mrec["namespace"]
            fts = list(mrec["features"])
            imp_only = mrec["import-only"]
            for (subm, srev) in mrec["includes"]:
                sen = {"name": subm}
                try:
                    srec = self.submodmap[subm]
                except KeyError:
                    raise YangLibraryError(
                        f"Submodule {subm} not available.") from None
                if srev is None or srev == srec["revision"]:
                    sen["revision"] = srec["revision"]
                else:
                    raise YangLibraryError(
                        f"Submodule {subm} revision mismatch.")
                imp_only = imp_only and srec["import-only"]
                fts += srec["features"]
                sarr.append(sen)
            if fts:
                men["feature"] = fts
            if sarr:
                men["submodule"] = sarr
            men["conformance-type"] = "import" if imp_only else "implement"
            marr.append(men)
        return {
            "ietf-yang-library:modules-state": {
                "module-set-id": "",
                "module": marr
            }
        }


def yang_library(dirs: Iterable[str]) -> dict[str, Any]:
    """Return YANG library data for all modules found in `dirs`."""
    lb = LibraryBuilder()
    for d in dirs:
        lb.add_directory(d)
    return lb.yang_library()
