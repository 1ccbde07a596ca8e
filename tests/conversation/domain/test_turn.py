"""Tests for the Turn value object and its JSON wire format."""

import json

import pytest
from pydantic import ValidationError

from mcp_host.conversation.domain.content import (
    TextBlock,
    ToolResultBlock,
    ToolResultItem,
    ToolUseBlock,
)
from mcp_host.conversation.domain.turn import Turn, dump_turns, load_turns


def _assistant_turn() -> Turn:
    return Turn(
        role="assistant",
        content=[
            TextBlock(text="Let me look."),
            ToolUseBlock(id="c1", name="fs__list_dir", input={"path": "/tmp"}),
        ],
    )


def _results_turn() -> Turn:
    return Turn(
        role="user",
        content=[
            ToolResultBlock.from_items(
                tool_use_id="c1", items=[ToolResultItem(type="text", text="a.txt")]
            )
        ],
    )


class TestTurnConstruction:
    """Turn validates its role and is immutable."""

    def test_user_text_builds_single_text_block(self) -> None:
        turn = Turn.user_text("hello")

        assert turn.role == "user"
        assert turn.content == [TextBlock(text="hello")]

    def test_unknown_role_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Turn(role="system", content=[])  # type: ignore[arg-type]

    def test_turn_is_frozen(self) -> None:
        turn = Turn.user_text("hello")

        with pytest.raises(ValidationError):
            turn.role = "assistant"  # type: ignore[misc]

    def test_empty_content_is_allowed(self) -> None:
        turn = Turn(role="assistant", content=[])

        assert turn.content == []


class TestTurnAccessors:
    """Convenience views over a turn's content."""

    def test_text_concatenates_text_blocks_only(self) -> None:
        assert _assistant_turn().text == "Let me look."

    def test_text_is_empty_without_text_blocks(self) -> None:
        assert _results_turn().text == ""

    def test_tool_uses_returns_tool_use_blocks_in_order(self) -> None:
        turn = Turn(
            role="assistant",
            content=[
                ToolUseBlock(id="c1", name="a__x"),
                TextBlock(text="and"),
                ToolUseBlock(id="c2", name="b__y"),
            ],
        )

        assert [use.id for use in turn.tool_uses] == ["c1", "c2"]

    def test_tool_results_returns_tool_result_blocks(self) -> None:
        results = _results_turn().tool_results

        assert len(results) == 1
        assert results[0].tool_use_id == "c1"


class TestTurnWireFormat:
    """Turns serialize to role/content JSON and load back unchanged."""

    def test_dump_produces_role_and_typed_content(self) -> None:
        payload = json.loads(dump_turns([_assistant_turn()]))

        assert payload == [
            {
                "role": "assistant",
                "content": [
                    {"type": "text", "text": "Let me look."},
                    {
                        "type": "tool_use",
                        "id": "c1",
                        "name": "fs__list_dir",
                        "input": {"path": "/tmp"},
                    },
                ],
            }
        ]

    def test_tool_result_block_serializes_text_and_raw_content(self) -> None:
        payload = json.loads(dump_turns([_results_turn()]))

        block = payload[0]["content"][0]
        assert block["type"] == "tool_result"
        assert block["tool_use_id"] == "c1"
        assert block["text"] == "a.txt"
        assert block["content"] == [{"type": "text", "text": "a.txt"}]
        assert block["is_error"] is False

    def test_load_restores_equal_turns(self) -> None:
        turns = [Turn.user_text("list /tmp"), _assistant_turn(), _results_turn()]

        assert load_turns(dump_turns(turns)) == turns

    def test_load_rejects_non_list_payload(self) -> None:
        with pytest.raises(ValidationError):
            load_turns('{"role": "user", "content": []}')
