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

"""This module defines the entry point for the tree printing script."""

import argparse
import importlib.metadata
import logging
import os
import sys
from typing import Optional
from yangson.exceptions import (
    BadYangLibraryData, FeaturePrerequisiteError, ModuleNotRegistered,
    MultipleImplementedRevisions, YangsonException)
from yangson.exceptions import ModuleNotFound as MissingModuleFile
from yangtree.config import TreeConfig
from yangtree.exceptions import ModuleNotFound, YangLibraryError
from yangtree.line import LEGEND
from yangtree.loader import load_model_from_files, load_model_from_library
from yangtree.tree import render


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yangtree",
        description="Print tree diagrams of YANG modules.")
    parser.add_argument(
        "-V", "--version", action="version",
        version=f"%(prog)s {importlib.metadata.version('yangtree')}")
    parser.add_argument(
        "modules", metavar="MODULE", nargs="+",
        help=("file with a YANG module, or module name (NAME or"
              " NAME@REVISION) if YANG library is given"))
    parser.add_argument(
        "-p", "--path",
        help=("colon-separated list of directories to search"
              " for YANG modules"))
    parser.add_argument(
        "-l", "--library", metavar="YANGLIB",
        help="file name with JSON-encoded YANG library [RFC 7895]")
    parser.add_argument(
        "-d", "--debug", action="store_true",
        help="print debugging messages")
    tgrp = parser.add_argument_group(
        "tree", "Tree format based arguments")
    tgrp.add_argument(
        "--tree-depth", type=int, default=0, metavar="N",
        help="number of levels to print (default: 0 = all the child nodes)")
    tgrp.add_argument(
        "--tree-line-length", type=int, default=0, metavar="N",
        help=("number of characters to print for each line"
              " (default: 0 = print the whole line)"))
    tgrp.add_argument(
        "--tree-help", action="store_true",
        help="print help information for symbols used in tree format")
    tgrp.add_argument(
        "--tree-prefix-module", action="store_true",
        help="use the whole module name instead of prefix")
    tgrp.add_argument(
        "--tree-prefix-main-module", action="store_true",
        help="use prefix with the printed module")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Entry-point for the command-line utility.

    Args:
        argv: Command-line arguments, ``sys.argv[1:]`` if absent.

    Returns:
        Numeric return code (0=no error, 2=YANG error, 1=other)
    """
    parser = _parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")
    try:
        config = TreeConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))
    sp = args.path if args.path else os.environ.get("YANG_MODPATH", ".")
    mod_path = tuple(sp.split(":"))
    try:
        if args.library:
            model = load_model_from_library(args.library, mod_path)
            mids = [m.partition("@")[::2] for m in args.modules]
        else:
            model, mids = load_model_from_files(
                args.modules, mod_path if args.path else ())
    except (FileNotFoundError, PermissionError, UnicodeDecodeError) as e:
        print("Input file:", str(e), file=sys.stderr)
        return 1
    except BadYangLibraryData as e:
        print("Invalid YANG library:", str(e), file=sys.stderr)
        return 2
    except YangLibraryError as e:
        print("Cannot create YANG library:", str(e), file=sys.stderr)
        return 2
    except FeaturePrerequisiteError as e:
        print("Unsupported pre-requisite feature:", str(e), file=sys.stderr)
        return 2
    except MultipleImplementedRevisions as e:
        print("Multiple implemented revisions:", str(e), file=sys.stderr)
        return 2
    except MissingModuleFile as e:
        print("Module not found:", str(e), file=sys.stderr)
        return 2
    except ModuleNotRegistered as e:
        print("Module not registered:", str(e), file=sys.stderr)
        return 2
    except YangsonException as e:
        print("Invalid data model:", str(e), file=sys.stderr)
        return 2
    if config.help:
        print(LEGEND)
    res = 0
    for name, rev in mids:
        try:
            lines = render(model, name, rev if rev else None, config)
        except ModuleNotFound as e:
            print("Module not found:", str(e), file=sys.stderr)
            res = 2
            continue
        for line in lines:
            print(line)
    return res


if __name__ == "__main__":
    sys.exit(main())
