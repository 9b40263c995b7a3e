"""
Job Ad Rewriter Prompt — rewrites a job ad into plain, inclusive language.

Used by rewrite_service.py → llm_service.complete()
Temperature: 0.2 | JSON mode
"""

from __future__ import annotations

from app.models.rewrite_models import RewriteRequest

SALARY_PLACEHOLDER = "[Add salary band]"

WORK_ELIGIBILITY_SENTENCE = (
    "You must be legally entitled to work in New Zealand to apply for this role."
)

SYSTEM_PROMPT_TEMPLATE = """\
You are an expert in inclusive recruitment writing. Your task is to rewrite a job advertisement so that more people, including neurodivergent people, can read it, understand it and see themselves in it.

Rules:
1. Remove biased and coded language (gendered, age-coded, ableist, culturally exclusive words and phrases).
2. Keep a requirement only if it is needed for safety or to actually do the job. Move everything else to nice-to-have or drop it.
3. Use plain English: short sentences, one idea per sentence, no jargon, no acronyms without explanation.
4. Be literal. Do not use idioms, metaphors or figures of speech (no "rockstar", "hit the ground running", "wear many hats").
5. Use this order of sections, with these headings:
   Role, Impact, Key tasks, Must-have, Nice-to-have, Hours and location, Pay, How to apply
6. Include a welcoming note that says we are happy to provide accommodations or adjustments during the application and interview process, and how to ask for them.
7. Aim for a Flesch Reading Ease score of about {reading_level_target}.
8. Follow New Zealand employment law and norms (Human Rights Act 1993 prohibited grounds, Employment Relations Act 2000). Do not ask for age, marital status, family status, religion, ethnicity or health information.
9. If work eligibility is relevant, use exactly this sentence: "{work_eligibility_sentence}"

You MUST respond with a single valid JSON object only — no markdown, no explanation, no text before or after it.

The JSON object must have exactly this shape:

{{
  "bias_score": number from 0 (no bias) to 100 (heavily biased), scoring the ORIGINAL ad,
  "issues": [
    {{"type": "one of: gendered, age, ableist, cultural, jargon, unnecessary_requirement, other", "note": "what the problem is and where"}}
  ],
  "reading_level": "short description of the reading level of the rewrite, e.g. 'Flesch ~62 (plain English)'",
  "rewrite": "the full rewritten job ad as plain text with the section headings above",
  "changelog": [
    {{"before": "original wording", "after": "new wording", "reason": "why it changed"}}
  ],
  "suggested_additions": ["information the employer should add, e.g. salary band, flexible hours"]
}}
"""

USER_PROMPT_TEMPLATE = """\
Rewrite this job ad:

--- JOB AD ---
{job_ad}
--- END JOB AD ---

Preferences: tone={tone}, length={length}, neuroinclusive={neuroinclusive}

Instructions:
- If the ad has no salary band, write "{salary_placeholder}" in the Pay section and list it in suggested_additions.
- Keep bullet lists parallel: every bullet starts the same way (for example, with a verb).
- Keep essential legal and safety requirements (licences, checks, certifications) exactly as required.
- If you infer a duty that the ad does not state, mark it as an example with "(example)".

Return the JSON object now.
"""


def build_system_prompt(reading_level_target: float) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(
        reading_level_target=round(reading_level_target),
        work_eligibility_sentence=WORK_ELIGIBILITY_SENTENCE,
    )


def build_user_prompt(req: RewriteRequest) -> str:
    return USER_PROMPT_TEMPLATE.format(
        job_ad=req.text,
        tone=req.tone.value,
        length=req.length.value,
        neuroinclusive="true" if req.neuroinclusive else "false",
        salary_placeholder=SALARY_PLACEHOLDER,
    )


def build_messages(req: RewriteRequest) -> list[dict[str, str]]:
    """System turn first, then the user turn."""
    return [
        {"role": "system", "content": build_system_prompt(req.reading_level_target)},
        {"role": "user", "content": build_user_prompt(req)},
    ]
