# Sphinx configuration for the empstats API reference.
#
# Build with:  sphinx-build -b html docs/source docs/_build/html
# Doctests:    sphinx-build -b doctest docs/source docs/_build/doctest

# -- Path setup ----------------------------------------------------------------
from __future__ import annotations

import dataclasses
import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath("../../src"))

import empstats  # noqa: E402


# -- Autodoc event: hide dataclass fields ---------------------------------------
# Histogram, KSTestResult, DistributionContext and the containers list their
# fields in the "Attributes" section already.
def _is_dataclass_field(obj, name: str) -> bool:
    owner = getattr(obj, "__objclass__", None)
    if owner is None and hasattr(obj, "fget"):
        owner = getattr(obj.fget, "__objclass__", None)
    return (
        owner is not None
        and dataclasses.is_dataclass(owner)
        and name in {f.name for f in dataclasses.fields(owner)}
    )


def autodoc_skip_member_handler(app, what, name, obj, skip, options):
    if skip or what != "attribute":
        return skip
    return True if _is_dataclass_field(obj, name) else skip


def setup(app):
    app.connect("autodoc-skip-member", autodoc_skip_member_handler)


# -- Project information -----------------------------------------------------
project = "empstats"
author = "empstats developers"
copyright = f"{datetime.now():%Y}, {author}"
release = empstats.__version__
version = ".".join(release.split(".")[:2])

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx.ext.viewcode",
    "sphinx.ext.doctest",
    "numpydoc",
    "myst_parser",
    "sphinx_copybutton",
    "sphinx_design",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

nitpicky = True
nitpick_ignore = [
    ("py:class", "Translator"),
    ("py:class", "ArrayLike"),
    ("py:class", "empstats.backends.base.ExecutionBackend"),
]
# slotted/frozen dataclass fields are not importable attributes
nitpick_ignore_regex = [
    (r"py:attr", r"(empstats\.context\.)?DistributionContext\.\w+"),
    (r"py:attr", r"empstats\.empirical\.Histogram\.\w+"),
    (r"py:attr", r"^(kde_pdf|kde_pdf_modes|n)$"),
]

# -- Options for HTML output -------------------------------------------------
html_theme = "pydata_sphinx_theme"
html_title = f"empstats {release}"
html_theme_options = {
    "show_prev_next": False,
    "navigation_depth": 3,
    "secondary_sidebar_items": ["page-toc"],
    "footer_start": ["copyright"],
}

# -- Autodoc / Autosummary ------------------------------------------------------
# The API pages document modules, not the re-exports in empstats/__init__.py.
autosummary_generate = True
autosummary_imported_members = False
autodoc_member_order = "groupwise"
autodoc_typehints = "signature"
autoclass_content = "class"
autodoc_class_signature = "separated"
autodoc_default_options = {
    "members": True,
    "undoc-members": False,
    "show-inheritance": False,
}

# -- Numpydoc ----------------------------------------------------------------
numpydoc_show_class_members = False
numpydoc_class_members_toctree = False
numpydoc_xref_param_type = True
numpydoc_xref_ignore = {
    "of", "or", "default", "optional", "keyword-only",
    "array_like", "array-like", "callable", "shape",
}
numpydoc_xref_aliases = {
    "EmpiricalDistribution": "empstats.empirical.EmpiricalDistribution",
    "Histogram": "empstats.empirical.Histogram",
    "DistributionContext": "empstats.context.DistributionContext",
    "NanPolicy": "empstats.context.NanPolicy",
    "DistributionComparator": "empstats.comparator.DistributionComparator",
    "KSTestResult": "empstats.comparator.KSTestResult",
    "FunctionTable": "empstats.containers.FunctionTable",
    "ArraySearchBounds": "empstats.containers.ArraySearchBounds",
    "Extrema": "empstats.containers.Extrema",
    "Extremum": "empstats.containers.Extremum",
    "KernelType": "empstats.mathtools.KernelType",
    "ndarray": "numpy.ndarray",
}

# -- Doctest -----------------------------------------------------------------
doctest_global_setup = """
import numpy as np
from empstats import *
from empstats.mathtools import *
"""

# -- MyST / MathJax ------------------------------------------------------------
myst_enable_extensions = ["dollarmath", "amsmath"]

# error metrics and the IQR are written upright in the formulas
mathjax3_config = {
    "tex": {
        "inlineMath": [["$", "$"], ["\\(", "\\)"]],
        "macros": {
            "IQR": r"\mathrm{IQR}",
            "MAE": r"\mathrm{MAE}",
            "RMSEP": r"\mathrm{RMSEP}",
            "EQC": r"\mathrm{EQC}",
        },
    }
}

# -- Intersphinx -------------------------------------------------------------
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
}

# -- Copybutton ----------------------------------------------------------------
copybutton_prompt_text = r">>> |\.\.\. |\$ "
copybutton_prompt_is_regexp = True
