from app.models.rewrite_models import RewriteRequest
from app.prompts.job_ad_rewriter import (
    SALARY_PLACEHOLDER,
    WORK_ELIGIBILITY_SENTENCE,
    build_messages,
    build_system_prompt,
    build_user_prompt,
)

from conftest import JOB_AD


def _req(**fields) -> RewriteRequest:
    return RewriteRequest.model_validate({"text": JOB_AD, **fields})


def test_messages_are_system_then_user():
    messages = build_messages(_req())

    assert [m["role"] for m in messages] == ["system", "user"]


def test_system_prompt_covers_rewrite_rules():
    prompt = build_system_prompt(60)

    assert "Role, Impact, Key tasks, Must-have, Nice-to-have, Hours and location, Pay, How to apply" in prompt
    assert "Flesch Reading Ease score of about 60" in prompt
    assert "New Zealand" in prompt
    assert WORK_ELIGIBILITY_SENTENCE in prompt
    assert "accommodations" in prompt
    for key in ("bias_score", "issues", "reading_level", "rewrite", "changelog", "suggested_additions"):
        assert f'"{key}"' in prompt


def test_system_prompt_rounds_reading_level():
    assert "about 73" in build_system_prompt(72.6)


def test_user_prompt_embeds_ad_and_preferences():
    prompt = build_user_prompt(_req(tone="warm", length="short", neuroinclusive=False))

    assert JOB_AD in prompt
    assert "tone=warm, length=short, neuroinclusive=false" in prompt
    assert SALARY_PLACEHOLDER in prompt
    assert "(example)" in prompt


def test_user_prompt_uses_defaults_for_invalid_preferences():
    prompt = build_user_prompt(_req(tone="sassy", length="epic"))

    assert "tone=professional, length=standard, neuroinclusive=true" in prompt


def test_user_prompt_keeps_braces_in_ad_text():
    ad = "Skills: {python} and {sql} are required for this analyst position."

    assert ad in build_user_prompt(_req(text=ad))
