# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the Yangen documentation."""

project = "Yangen"
author = "Yangen Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.doctest"]

html_theme = "alabaster"
