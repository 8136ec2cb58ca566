from setuptools import setup

setup(
    name = "yangtree",
    packages = ["yangtree"],
    version = "1.0.0",
    description = "Tree diagrams of YANG modules",
    author = "Ladislav Lhotka",
    author_email = "lhotka@nic.cz",
    url = "https://github.com/CZ-NIC/yangtree",
    entry_points = {
        "console_scripts": ["yangtree=yangtree.__main__:main"]
        },
    python_requires = ">=3.9",
    install_requires = ["yangson"],
    extras_require = {"test": ["pytest"]},
    tests_require = ["pytest"],
    keywords = ["yang", "data model", "tree diagram"],
    classifiers = [
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries",
        "Topic :: System :: Systems Administration"],
    long_description = """\
.. |date| date::

*******************
Welcome to Yangtree
*******************

:Author: Ladislav Lhotka <lhotka@nic.cz>
:Date: |date|

*Yangtree* prints tree diagrams of YANG_ modules in the format
described in `RFC 8340`_. Modules are parsed and resolved by
Yangson_.

Installation
============

::

    python -m pip install yangtree

Usage
=====

::

    yangtree -p yang-modules example.yang
    yangtree -l yang-library.json --tree-depth 3 example

.. _YANG: https://tools.ietf.org/html/rfc7950
.. _RFC 8340: https://tools.ietf.org/html/rfc8340
.. _Yangson: https://github.com/CZ-NIC/yangson
"""
    )
