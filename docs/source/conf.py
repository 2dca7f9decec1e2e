import os
import sys

# Put project root on sys.path so autoapi and doctest can import seqjoins
sys.path.insert(0, os.path.abspath("../.."))

project = "seqjoins"
author = "seqjoins contributors"

extensions = [
    "autoapi.extension",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "myst_nb",
    "sphinx_copybutton",
]
templates_path = []
exclude_patterns = []

nb_execution_mode = "off"
master_doc = "index"

# Book theme when installed, bundled alabaster otherwise
try:
    import importlib.util

    if importlib.util.find_spec("sphinx_book_theme") is not None:
        html_theme = "sphinx_book_theme"
        html_theme_options = {"path_to_docs": "docs/source"}
    else:
        html_theme = "alabaster"
        html_theme_options = {}
except ImportError:
    html_theme = "alabaster"
    html_theme_options = {}

myst_enable_extensions = [
    "deflist",
    "colon_fence",
]

# ---------------------------------------------------------------------------
# sphinx-autoapi: API reference for the `seqjoins` package
# ---------------------------------------------------------------------------
autoapi_type = "python"
autoapi_dirs = ["../../seqjoins"]
autoapi_ignore = [
    "**/tests/**",
    "**/.venv/**",
    "**/__pycache__/**",
]

autodoc_typehints = "description"

autoapi_options = [
    "members",
    "undoc-members",
    "show-inheritance",
    "show-module-summary",
]

autoapi_python_class_content = "both"

doctest_global_setup = "import seqjoins"
