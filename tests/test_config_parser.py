"""Tests for the agent config document parser."""

from __future__ import annotations

from tourney_prompts.core.config_parser import indent_of, parse_agent_config
from tourney_prompts.models.agent_record import AgentRecord, ModelInfo, PromptKind

EXAMPLE = """agent:
  model:
    provider: "openai"
    name: gpt-4
  prompts:
    system_prompt: |
      You are a helpful agent.
      Follow the rules.
    step_wise_prompt: |
      Step 1: think.
agent:
  model:
    provider: anthropic
"""


def test_example_document():
	agents = parse_agent_config(EXAMPLE)
	assert len(agents) == 2
	first, second = agents
	assert first.model == ModelInfo(provider="openai", name="gpt-4")
	assert first.prompts == {
	    PromptKind.SYSTEM: "You are a helpful agent.\nFollow the rules.",
	    PromptKind.STEP_WISE: "Step 1: think.",
	}
	assert second.model == ModelInfo(provider="anthropic")
	assert second.prompts == {}


def test_parse_is_deterministic():
	first = parse_agent_config(EXAMPLE)
	second = parse_agent_config(EXAMPLE)
	assert first == second
	assert first is not second
	assert first[0] is not second[0]


def test_agents_keep_document_order():
	text = "\n".join(
	    f"agent:\n  model:\n    provider: p{i}" for i in range(5))
	agents = parse_agent_config(text)
	assert [a.model.provider for a in agents] == [f"p{i}" for i in range(5)]


def test_empty_input():
	assert parse_agent_config("") == []


def test_comments_and_blank_lines_only():
	assert parse_agent_config("# header\n\n   \n  # indented comment\n") == []


def test_agent_without_sections():
	agents = parse_agent_config("agent:\n")
	assert agents == [AgentRecord()]
	assert agents[0].model.is_empty
	assert agents[0].prompts == {}


def test_lines_before_first_agent_are_ignored():
	text = "model:\n  provider: stray\nprompts:\n  system_prompt: |\n    x\nagent:\n"
	agents = parse_agent_config(text)
	assert agents == [AgentRecord()]


class TestBlockLiterals:
	"""Block-literal prompt collection."""

	def test_relative_indentation_is_preserved(self):
		text = ("agent:\n"
		        "prompts:\n"
		        "  system_prompt: |\n"
		        "    line one\n"
		        "      nested two\n"
		        "        nested four\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts[PromptKind.SYSTEM] == (
		    "line one\n  nested two\n    nested four")

	def test_blank_line_does_not_end_block(self):
		text = ("agent:\n"
		        "  prompts:\n"
		        "    system_prompt: |\n"
		        "      first\n"
		        "\n"
		        "      second\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts[PromptKind.SYSTEM] == "first\n\nsecond"

	def test_whitespace_only_line_becomes_empty_line(self):
		text = ("agent:\n"
		        "  prompts:\n"
		        "    system_prompt: |\n"
		        "      first\n"
		        "            \n"
		        "      second\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts[PromptKind.SYSTEM] == "first\n\nsecond"

	def test_trailing_blank_lines_are_trimmed(self):
		text = ("agent:\n"
		        "  prompts:\n"
		        "    system_prompt: |\n"
		        "      body   \n"
		        "\n"
		        "\n"
		        "agent:\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts[PromptKind.SYSTEM] == "body"
		assert len(agents) == 2

	def test_agent_marker_ends_block_and_starts_agent(self):
		text = ("agent:\n"
		        "  prompts:\n"
		        "    step_wise_prompt: |\n"
		        "      Step 1\n"
		        "agent:\n"
		        "  model:\n"
		        "    name: second\n")
		agents = parse_agent_config(text)
		assert len(agents) == 2
		assert agents[0].prompts == {PromptKind.STEP_WISE: "Step 1"}
		assert agents[1].model.name == "second"

	def test_section_marker_ends_block_and_switches_section(self):
		text = ("agent:\n"
		        "  prompts:\n"
		        "    system_prompt: |\n"
		        "      hello\n"
		        "  model:\n"
		        "    name: late-model\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts == {PromptKind.SYSTEM: "hello"}
		assert agents[0].model.name == "late-model"

	def test_sibling_opener_ends_previous_block(self):
		text = ("agent:\n"
		        "  prompts:\n"
		        "    step_wise_prompt: |\n"
		        "      steps\n"
		        "    system_prompt: |\n"
		        "      system\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts == {
		    PromptKind.STEP_WISE: "steps",
		    PromptKind.SYSTEM: "system",
		}

	def test_empty_block(self):
		text = ("agent:\n"
		        "  prompts:\n"
		        "    system_prompt: |\n"
		        "    step_wise_prompt: |\n"
		        "      go\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts[PromptKind.SYSTEM] == ""
		assert agents[0].prompts[PromptKind.STEP_WISE] == "go"

	def test_block_at_end_without_newline(self):
		text = "agent:\n  prompts:\n    system_prompt: |\n      last line"
		agents = parse_agent_config(text)
		assert agents[0].prompts[PromptKind.SYSTEM] == "last line"

	def test_content_is_verbatim(self):
		"""Indented lines that look like structure stay block content."""
		text = ("agent:\n"
		        "  prompts:\n"
		        "    system_prompt: |\n"
		        "      # not a comment\n"
		        "      agent: still prompt text\n"
		        "      model:\n")
		agents = parse_agent_config(text)
		assert len(agents) == 1
		assert agents[0].prompts[PromptKind.SYSTEM] == (
		    "# not a comment\nagent: still prompt text\nmodel:")

	def test_under_indented_comment_ends_block(self):
		text = ("agent:\n"
		        "  prompts:\n"
		        "    system_prompt: |\n"
		        "      kept\n"
		        "  # trailing comment\n"
		        "      dropped\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts[PromptKind.SYSTEM] == "kept"

	def test_tabs_count_as_single_characters(self):
		text = ("agent:\n"
		        "prompts:\n"
		        "\tsystem_prompt: |\n"
		        "\t\t\tdeep\n"
		        "\t\t\t\tdeeper\n"
		        "\t\tshallow\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts[PromptKind.SYSTEM] == "deep\n\tdeeper"

	def test_whitespace_between_colon_and_pipe(self):
		text = "agent:\n  prompts:\n    system_prompt:   |\n      ok\n"
		agents = parse_agent_config(text)
		assert agents[0].prompts[PromptKind.SYSTEM] == "ok"

	def test_unicode_line_separator_stays_in_prompt(self):
		text = ("agent:\n"
		        "  prompts:\n"
		        "    system_prompt: |\n"
		        "      Rule one.\u2028agent behaviour: stay calm\n")
		agents = parse_agent_config(text)
		assert len(agents) == 1
		assert agents[0].prompts[PromptKind.SYSTEM] == (
		    "Rule one.\u2028agent behaviour: stay calm")

	def test_form_feed_stays_in_prompt(self):
		text = ("agent:\n"
		        "  prompts:\n"
		        "    system_prompt: |\n"
		        "      page one\x0cpage two\n"
		        "      next\x0bline\x85end\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts[PromptKind.SYSTEM] == (
		    "page one\x0cpage two\nnext\x0bline\x85end")

	def test_crlf_line_endings(self):
		text = ("agent:\r\n  prompts:\r\n    system_prompt: |\r\n"
		        "      one\r\n      two\r\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts[PromptKind.SYSTEM] == "one\ntwo"


class TestLeniency:
	"""Unrecognized constructs are skipped."""

	def test_unknown_prompt_key_is_ignored(self):
		text = ("agent:\n"
		        "  prompts:\n"
		        "    other_prompt: |\n"
		        "      ignored text\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts == {}

	def test_inline_prompt_value_is_not_a_block(self):
		text = "agent:\n  prompts:\n    system_prompt: hello\n"
		agents = parse_agent_config(text)
		assert agents[0].prompts == {}

	def test_opener_outside_prompts_section_is_ignored(self):
		text = ("agent:\n"
		        "  model:\n"
		        "    system_prompt: |\n"
		        "      not collected\n")
		agents = parse_agent_config(text)
		assert agents[0].prompts == {}
		assert agents[0].model.is_empty

	def test_unknown_model_keys_are_ignored(self):
		text = ("agent:\n"
		        "  model:\n"
		        "    temperature: 0.2\n"
		        "    provider: 'openrouter'\n"
		        "    no colon here\n")
		agents = parse_agent_config(text)
		assert agents[0].model == ModelInfo(provider="openrouter")

	def test_value_keeps_later_colons(self):
		text = "agent:\n  model:\n    name: \"vendor/model:free\"\n"
		agents = parse_agent_config(text)
		assert agents[0].model.name == "vendor/model:free"

	def test_model_properties_need_model_section(self):
		text = "agent:\n  provider: openai\n  name: gpt-4\n"
		agents = parse_agent_config(text)
		assert agents[0].model.is_empty

	def test_section_marker_with_inline_value_is_not_a_section(self):
		text = "agent:\n  model: gpt-4\n  provider: openai\n"
		agents = parse_agent_config(text)
		assert agents[0].model.is_empty

	def test_repeated_section_reenters(self):
		text = ("agent:\n"
		        "  model:\n"
		        "    provider: a\n"
		        "  prompts:\n"
		        "    system_prompt: |\n"
		        "      s\n"
		        "  model:\n"
		        "    name: b\n")
		agents = parse_agent_config(text)
		assert agents[0].model == ModelInfo(provider="a", name="b")
		assert agents[0].prompts == {PromptKind.SYSTEM: "s"}

	def test_new_agent_resets_section(self):
		text = ("agent:\n"
		        "  model:\n"
		        "    provider: a\n"
		        "agent:\n"
		        "    provider: b\n")
		agents = parse_agent_config(text)
		assert agents[1].model.is_empty


def test_indent_of():
	assert indent_of("abc") == 0
	assert indent_of("    abc") == 4
	assert indent_of("\t abc") == 2
