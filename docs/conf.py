# Sphinx configuration for the PyVecMat API reference.

project = 'PyVecMat'
author = 'PyVecMat contributors'
release = '0.1.0'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
]

# core and linalg use Google-style sections, operations uses NumPy-style
napoleon_google_docstrings = True
napoleon_numpy_docstrings = True

autodoc_member_order = 'bysource'
autodoc_typehints = 'description'

exclude_patterns = ['_build']

html_theme = 'furo'
html_title = 'PyVecMat API Reference'
