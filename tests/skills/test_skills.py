import pytest
from LYNK.llms import GENERATION_FAILED
from LYNK.memory.memory_store import MemoryStore
from LYNK.skills import CategorySkill, DescriptionSkill, TagSkill, TitleSkill
from LYNK.types import AgentContext, MemoryType
from tests.mocks import MockLLM


def test_capabilities_and_order():
    llm = MockLLM()
    skills = [TitleSkill(llm), DescriptionSkill(llm), TagSkill(llm), CategorySkill(llm)]
    assert [s.capability_name() for s in skills] == ["title", "description", "tags", "category"]
    assert [s.order for s in skills] == [1, 2, 3, 4]


def test_prompt_carries_url_persona_and_rules(github_context):
    prompt = TagSkill(MockLLM()).build_prompt(github_context)
    assert "URL: https://github.com/psf/requests" in prompt
    assert "Persona: backend developer" in prompt
    assert "- Generate 3-5 relevant tags" in prompt
    assert "- Separate tags with commas" in prompt


def test_prompt_includes_existing_hints():
    context = AgentContext(url="https://x.com", existing_title="Saved thing")
    prompt = DescriptionSkill(MockLLM()).build_prompt(context)
    assert "Saved title: Saved thing" in prompt
    assert "Max 30 words" in prompt


@pytest.mark.asyncio
async def test_description_skill_stores_trimmed_text(github_context):
    llm = MockLLM(default="  A library for HTTP.\n")
    await DescriptionSkill(llm).apply(github_context)

    assert github_context.memory["description"] == "A library for HTTP."
    assert len(llm.prompts) == 1
    assert github_context.reasoning == [
        "DescriptionSkill started",
        "DescriptionSkill generated description",
    ]


@pytest.mark.asyncio
async def test_title_skill_strips_quotes(github_context):
    await TitleSkill(MockLLM(default='"Requests: HTTP for Humans"')).apply(github_context)
    assert github_context.memory["title"] == "Requests: HTTP for Humans"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("'Til Death", "'Til Death"),
        ("Rock 'n' Roll'", "Rock 'n' Roll'"),
        ("`requests` docs", "`requests` docs"),
        ("  'Quoted Title'  ", "Quoted Title"),
    ],
)
async def test_title_skill_keeps_unpaired_quotes(github_context, raw, expected):
    await TitleSkill(MockLLM(default=raw)).apply(github_context)
    assert github_context.memory["title"] == expected


@pytest.mark.asyncio
async def test_tag_skill_without_memory_keeps_raw_tokens(github_context):
    await TagSkill(MockLLM(default="python, , http ,python")).apply(github_context)
    assert github_context.memory["tags"] == ["python", "http"]
    assert github_context.reasoning[-1] == "TagSkill inferred tags"


@pytest.mark.asyncio
async def test_tag_skill_resolves_and_dedupes(github_context, memory_store):
    llm = MockLLM(default="Design, design, UX")
    await TagSkill(llm, memory_store).apply(github_context)

    tags = github_context.memory["tags"]
    assert tags == ["design", "ux"]
    assert len(tags) == len(set(tags))
    assert await memory_store.count(MemoryType.TAG) == 2
    assert github_context.reasoning[-1] == "TagSkill inferred and reused tags"


@pytest.mark.asyncio
async def test_tag_skill_reuses_earlier_canonical_values(memory_store):
    await memory_store.reuse_or_create("UI/UX")
    context = AgentContext(url="https://dribbble.com")

    await TagSkill(MockLLM(default="ui ux, !!!, Branding"), memory_store).apply(context)

    assert context.memory["tags"] == ["ui-ux", "branding"]
    entry = await memory_store.get(MemoryType.TAG, "ui-ux")
    assert entry.usage_count == 2


@pytest.mark.asyncio
async def test_tag_skill_does_not_store_failure_sentinel(github_context, memory_store):
    await TagSkill(MockLLM(default=GENERATION_FAILED), memory_store).apply(github_context)

    assert github_context.memory["tags"] == [GENERATION_FAILED]
    assert await memory_store.count(MemoryType.TAG) == 0


@pytest.mark.asyncio
async def test_category_skill_with_memory(github_context, memory_store):
    await CategorySkill(MockLLM(default=" Web Development \n"), memory_store).apply(github_context)

    assert github_context.memory["category"] == "web-development"
    assert github_context.reasoning[-1] == "CategorySkill reused category: web-development"
    assert await memory_store.count(MemoryType.CATEGORY) == 1


@pytest.mark.asyncio
async def test_category_skill_without_memory(github_context):
    await CategorySkill(MockLLM(default="Development")).apply(github_context)
    assert github_context.memory["category"] == "Development"


@pytest.mark.asyncio
async def test_category_skill_keeps_sentinel_raw(github_context, memory_store):
    await CategorySkill(MockLLM(default=GENERATION_FAILED), memory_store).apply(github_context)

    assert github_context.memory["category"] == GENERATION_FAILED
    assert await memory_store.count(MemoryType.CATEGORY) == 0
