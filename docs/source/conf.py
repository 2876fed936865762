import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "uriparts"
copyright = "2026, uriparts contributors"
author = "uriparts contributors"
import uriparts

release = uriparts.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# index.md documents each module once; skip the package-level re-exports
autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_member_order = "bysource"

html_theme = "furo"
html_static_path = ["_static"]
html_title = "uriparts"
