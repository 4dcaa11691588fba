# topmark:header:start
#
#   project      : BBContent
#   file         : __init__.py
#   file_relpath : src/bbcontent/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BBContent package.

BBContent computes the HTML presentation and in-place editing attributes attached
to a rendered content node. It exposes a small typed API (`AttributeResolver`)
for template helpers and a CLI to preview resolutions from TOML scenarios.
"""

from __future__ import annotations
