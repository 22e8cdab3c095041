"""Prefix-tree grouping and completion of activity descriptions.

Subpackages:

- grouping: the trie, segmentation and expansion engines
- history: sources of previously recorded activities
- config: YAML configuration and command line front-end
"""

__version__ = '0.1.0'
