# topmark:header:start
#
#   project      : BBContent
#   file         : ruleset.py
#   file_relpath : src/bbcontent/rules/ruleset.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ordered rule set applied on the not-granted resolution path.

Order:

    class → drag-and-drop → identifier → max-entry → render-mode → accept → rte

Only ``class`` accumulates, so the order matters for readability of the class
list and for the attribute order in the output (keys appear in the order they
are first written, after the seeded ``class``/identifier/max-entry keys).
"""

from __future__ import annotations

from typing import Final

from bbcontent.rules.contracts import Rule

from . import accept, classes, dnd, identifier, maxentry, rendermode, rte

DEFAULT_RULES: Final[tuple[Rule, ...]] = (
    classes.ClassRule(),  # Merge option/param class tokens
    dnd.DragAndDropRule(),  # bb-droppable / bb-dnd
    identifier.IdentifierRule(),  # data-bb-identifier
    maxentry.MaxEntryRule(),  # data-bb-maxentry (containers)
    rendermode.RenderModeRule(),  # data-rendermode
    accept.AcceptRule(),  # data-accept (containers)
    rte.RteRule(),  # data-rteconfig (default slot elements)
)
