# topmark:header:start
#
#   project      : BBContent
#   file         : test_scenario.py
#   file_relpath : tests/test_scenario.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TOML scenario loader."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from bbcontent.content.model import ContentKind
from bbcontent.errors import ScenarioError
from bbcontent.scenario import Scenario, load_scenario, load_scenario_text
from tests.conftest import make_resolver, mark_integration, parametrize

if TYPE_CHECKING:
    from pathlib import Path

ARTICLE_SCENARIO = r"""
[target]
node = "title"

[render]
mode = "edit"
container = "article"
slot = "title"

[session]
active = true

[nodes.article]
uid = "a1"
type = 'BackBee\ClassContent\Article'

[nodes.article.elements]
title = "title"

[nodes.article.default_options.title.parameters]
rte = "lite"

[nodes.title]
uid = "t1"
type = 'BackBee\ClassContent\Element\Text'
kind = "element"

[nodes.column]
uid = "c1"
type = 'BackBee\ClassContent\ContentSet'
kind = "container"
max_entries = 3
accept = ["A", "B"]
"""


def test_nodes_are_parsed_and_linked() -> None:
    """Nodes, slots and the target are resolved by key."""
    scenario: Scenario = load_scenario_text(ARTICLE_SCENARIO)
    article = scenario.nodes["article"]
    title = scenario.nodes["title"]
    column = scenario.nodes["column"]

    assert scenario.target is title
    assert article.get_element("title") is title
    assert article.kind is ContentKind.PLAIN
    assert title.kind is ContentKind.ELEMENT
    assert title.type_name == "BackBee\\ClassContent\\Element\\Text"
    assert column.is_container
    assert column.max_entries == 3
    assert column.accepted_child_types == ("A", "B")


def test_render_and_session() -> None:
    """The render context and the authorization service mirror the document."""
    scenario: Scenario = load_scenario_text(
        """
        [render]
        mode = "view"
        current = "n"

        [render.params]
        class = "a b"

        [session]
        active = true
        granted = ["n1"]

        [options]
        draggable = false

        [nodes.n]
        uid = "n1"
        type = "T"
        """
    )
    assert scenario.target is None
    assert scenario.context.mode == "view"
    assert scenario.context.current_object is scenario.nodes["n"]
    assert scenario.context.get_param("class") == "a b"
    assert scenario.authorization.has_active_session()
    assert scenario.authorization.is_granted("VIEW", scenario.nodes["n"])
    assert scenario.options == {"draggable": False}


def test_session_defaults_to_inactive() -> None:
    """Without a `[session]` table the actor has no session."""
    scenario: Scenario = load_scenario_text('[nodes.n]\nuid = "1"\ntype = "T"\n')
    assert not scenario.authorization.has_active_session()


@mark_integration
def test_scenario_resolves_end_to_end() -> None:
    """A loaded scenario feeds the resolver directly."""
    text = """
    [target]
    node = "title"

    [render]
    mode = "edit"
    container = "article"
    slot = "title"

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
    """
    scenario: Scenario = load_scenario_text(text)
    out: str = make_resolver().resolve(
        scenario.target, context=scenario.context, options=scenario.options
    )
    assert out == (
        ' class=""'
        ' data-bb-identifier="BackBee/ClassContent/Element/Text(t1)"'
        ' data-rendermode="edit"'
        ' data-rteconfig="lite"'
    )


@parametrize(
    "text, fragment",
    [
        ("[nodes.n]\ntype = 'T'\n", "missing required key 'uid'"),
        ("[nodes.n]\nuid = 1\ntype = 'T'\n", "'uid' must be a string"),
        ("[nodes.n]\nuid = '1'\ntype = 'T'\nkind = 'leaf'\n", "unknown kind 'leaf'"),
        ("[nodes.n]\nuid = '1'\ntype = 'T'\nmax_entries = -1\n", "non-negative integer"),
        ("[nodes.n]\nuid = '1'\ntype = 'T'\nmax_entries = true\n", "non-negative integer"),
        ("[nodes.n]\nuid = '1'\ntype = 'T'\naccept = 'A'\n", "list of strings"),
        ("[nodes.n]\nuid = '1'\ntype = 'T'\n[nodes.n.elements]\ns = 'zz'\n", "unknown node"),
        ("[nodes.n]\nuid = '1'\ntype = 'T'\n[nodes.n.elements]\ns = 1\n", "must reference"),
        ("[target]\nnode = 'ghost'\n", "unknown node reference 'ghost'"),
        ("[session]\nactive = 'yes'\n", "must be a boolean"),
        ("nodes = 1\n[target]\nnode = 'n'\n", "unknown node reference 'n'"),
        ("[nodes]\nn = 3\n", "must be a table"),
        ("[nodes\n", "Invalid TOML"),
    ],
)
def test_invalid_scenarios(text: str, fragment: str) -> None:
    """Malformed scenarios raise `ScenarioError` with a pointed message."""
    with pytest.raises(ScenarioError) as excinfo:
        load_scenario_text(text)
    assert fragment in str(excinfo.value)


def test_load_scenario_file(tmp_path: Path) -> None:
    """Files are read as UTF-8; unreadable files raise `ScenarioError`."""
    path: Path = tmp_path / "s.toml"
    path.write_text('[nodes.n]\nuid = "é1"\ntype = "T"\n', encoding="utf-8")
    assert load_scenario(path).nodes["n"].uid == "é1"

    with pytest.raises(ScenarioError, match="Cannot read scenario"):
        load_scenario(tmp_path / "missing.toml")
