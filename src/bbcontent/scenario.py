# topmark:header:start
#
#   project      : BBContent
#   file         : scenario.py
#   file_relpath : src/bbcontent/scenario.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load resolution scenarios from TOML.

A scenario describes everything one resolution needs (a small content tree, the
render context, the actor session and per-call options) so that the resolver
can be exercised without a template engine or a CMS backend.

Example:
    ```toml
    [target]
    node = "title"

    [render]
    mode = "edit"
    container = "article"
    slot = "title"

    [render.params]
    class = "featured"

    [session]
    active = true
    granted = []

    [options]
    draggable = false

    [nodes.article]
    uid = "a1"
    type = 'BackBee\\ClassContent\\Article'

    [nodes.article.elements]
    title = "title"

    [nodes.article.default_options.title.parameters]
    rte = "lite"

    [nodes.title]
    uid = "t1"
    type = 'BackBee\\ClassContent\\Element\\Text'
    kind = "element"
    ```

Node references (``target.node``, ``render.container``, ``render.current`` and
``elements`` values) use the keys of the ``[nodes]`` table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, cast

from tomlkit.exceptions import ParseError as TomlkitParseError

from bbcontent.config.io import get_table_value, parse_toml_text
from bbcontent.config.logging import get_logger
from bbcontent.constants import UNBOUNDED_MAX_ENTRIES
from bbcontent.content.model import ContentKind, ContentNode
from bbcontent.errors import ScenarioError
from bbcontent.render.context import RenderContext
from bbcontent.security.authorization import StaticAuthorizationService

if TYPE_CHECKING:
    from pathlib import Path

    from bbcontent.config.io import TomlTable
    from bbcontent.config.logging import BBContentLogger

logger: BBContentLogger = get_logger(__name__)


@dataclass
class Scenario:
    """A fully-linked resolution scenario.

    Attributes:
        nodes (dict[str, ContentNode]): Nodes by scenario key.
        target (ContentNode | None): Node passed to the resolver; None to fall back on
            the render context's current object.
        context (RenderContext): Render state snapshot.
        authorization (StaticAuthorizationService): Session and grants.
        options (dict[str, Any]): Raw per-call options (validated by the resolver).
    """

    nodes: dict[str, ContentNode]
    target: ContentNode | None
    context: RenderContext
    authorization: StaticAuthorizationService
    options: dict[str, Any] = field(default_factory=lambda: {})


def _expect_str(table: TomlTable, key: str, where: str, *, required: bool = False) -> str | None:
    value: Any | None = table.get(key)
    if value is None:
        if required:
            raise ScenarioError(f"{where}: missing required key '{key}'")
        return None
    if not isinstance(value, str):
        raise ScenarioError(f"{where}: '{key}' must be a string, got {value!r}")
    return value


def _expect_bool(table: TomlTable, key: str, where: str, default: bool) -> bool:
    value: Any | None = table.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ScenarioError(f"{where}: '{key}' must be a boolean, got {value!r}")
    return value


def _expect_str_list(table: TomlTable, key: str, where: str) -> list[str]:
    value: Any | None = table.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in cast("list[Any]", value)):
        raise ScenarioError(f"{where}: '{key}' must be a list of strings, got {value!r}")
    return cast("list[str]", value)


def _parse_node(key: str, table: TomlTable) -> ContentNode:
    where: str = f"[nodes.{key}]"
    uid: str = cast("str", _expect_str(table, "uid", where, required=True))
    type_name: str = cast("str", _expect_str(table, "type", where, required=True))

    kind_raw: str | None = _expect_str(table, "kind", where)
    kind: ContentKind | None = ContentKind.parse(kind_raw) if kind_raw else ContentKind.PLAIN
    if kind is None:
        choices: str = ", ".join(k.value for k in ContentKind)
        raise ScenarioError(f"{where}: unknown kind {kind_raw!r} (expected one of: {choices})")

    max_entries: Any = table.get("max_entries", UNBOUNDED_MAX_ENTRIES)
    if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries < 0:
        raise ScenarioError(f"{where}: 'max_entries' must be a non-negative integer")

    default_options: TomlTable = get_table_value(table, "default_options")
    return ContentNode(
        uid=uid,
        type_name=type_name,
        kind=kind,
        accepted_child_types=tuple(_expect_str_list(table, "accept", where)),
        max_entries=max_entries,
        default_options={k: cast("dict[str, Any]", v) for k, v in default_options.items()},
    )


def _lookup(nodes: dict[str, ContentNode], ref: str | None, where: str) -> ContentNode | None:
    if ref is None:
        return None
    try:
        return nodes[ref]
    except KeyError as e:
        raise ScenarioError(f"{where}: unknown node reference {ref!r}") from e


def scenario_from_dict(data: TomlTable) -> Scenario:
    """Build a `Scenario` from a parsed TOML document.

    Args:
        data (TomlTable): The unwrapped TOML document.

    Returns:
        Scenario: The linked scenario.

    Raises:
        ScenarioError: On missing keys, ill-typed values or dangling references.
    """
    nodes_tbl: TomlTable = get_table_value(data, "nodes")
    nodes: dict[str, ContentNode] = {}
    for key, raw in nodes_tbl.items():
        if not isinstance(raw, dict):
            raise ScenarioError(f"[nodes.{key}] must be a table")
        nodes[key] = _parse_node(key, cast("TomlTable", raw))

    # Second pass: link slot references now that every node exists.
    for key, raw in nodes_tbl.items():
        elements: TomlTable = get_table_value(cast("TomlTable", raw), "elements")
        for slot, ref in elements.items():
            where: str = f"[nodes.{key}.elements]"
            if not isinstance(ref, str):
                raise ScenarioError(f"{where}: '{slot}' must reference a node key")
            nodes[key].elements[slot] = cast("ContentNode", _lookup(nodes, ref, where))

    render_tbl: TomlTable = get_table_value(data, "render")
    params: TomlTable = get_table_value(render_tbl, "params")
    context = RenderContext(
        mode=_expect_str(render_tbl, "mode", "[render]"),
        container_node=_lookup(nodes, _expect_str(render_tbl, "container", "[render]"), "[render]"),
        current_slot_name=_expect_str(render_tbl, "slot", "[render]"),
        current_object=_lookup(nodes, _expect_str(render_tbl, "current", "[render]"), "[render]"),
        params=dict(params),
    )

    session_tbl: TomlTable = get_table_value(data, "session")
    authorization = StaticAuthorizationService(
        session=_expect_bool(session_tbl, "active", "[session]", default=False),
        grant_all=_expect_bool(session_tbl, "grant_all", "[session]", default=False),
        granted_uids=frozenset(_expect_str_list(session_tbl, "granted", "[session]")),
        credentials_missing=_expect_bool(
            session_tbl, "credentials_missing", "[session]", default=False
        ),
    )

    target_tbl: TomlTable = get_table_value(data, "target")
    target: ContentNode | None = _lookup(nodes, _expect_str(target_tbl, "node", "[target]"), "[target]")

    logger.debug("Scenario loaded: %d node(s), target=%r", len(nodes), target)
    return Scenario(
        nodes=nodes,
        target=target,
        context=context,
        authorization=authorization,
        options=dict(get_table_value(data, "options")),
    )


def load_scenario_text(text: str) -> Scenario:
    """Parse and link a scenario from TOML text.

    Raises:
        ScenarioError: If the text is not valid TOML or not a valid scenario.
    """
    try:
        data: TomlTable = parse_toml_text(text)
    except TomlkitParseError as e:
        raise ScenarioError(f"Invalid TOML: {e}") from e
    return scenario_from_dict(data)


def load_scenario(path: Path) -> Scenario:
    """Load a scenario file.

    Args:
        path (Path): Path to the scenario TOML file.

    Returns:
        Scenario: The linked scenario.

    Raises:
        ScenarioError: If the file cannot be read or is not a valid scenario.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScenarioError(f"Cannot read scenario {path}: {e}") from e
    return load_scenario_text(text)
