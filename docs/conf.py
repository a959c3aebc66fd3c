"""Sphinx configuration for the runedfa API reference."""

import runedfa

project = "runedfa"
author = "runedfa contributors"
release = runedfa.__version__
version = ".".join(release.split(".")[:2])

extensions = ["sphinx.ext.autodoc", "sphinx.ext.autosummary", "sphinx_copybutton"]

# The API pages are generated from runedfa.__all__ (see index.rst).
autosummary_generate = True
autodoc_default_options = {"members": True, "show-inheritance": True}
autodoc_typehints = "description"

html_theme = "furo"
html_title = f"runedfa {release}"
