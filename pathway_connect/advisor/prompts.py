"""
Prompt assembly for the career advisor.

A request is either a normal chat turn, or one of two one-shot tasks
signalled by a prefix on the user input: ``GENERATE_CAREER_PLAN:`` followed
by the student's preferences, or ``GENERATE_SUMMARY:`` followed by a plan.
"""

from typing import Dict, Iterable, List, Mapping

PLAN_PREFIX = "GENERATE_CAREER_PLAN:"
SUMMARY_PREFIX = "GENERATE_SUMMARY:"

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"
ROLE_MODEL = "model"

SYSTEM_PROMPT = """
You are a warm, professional Christian career advisor affiliated with
The Church of Jesus Christ of Latter-day Saints. You help BYU-Pathway
students discover career paths through faith, skill-building, and prayer.
Give concise or longer answers as the question needs, spiritually grounded and practical.
"""

PLAN_PROMPT = """
Based on the user's preferences below, create a focused 2-3 page career plan.

User Preferences:
{preferences}

Include:
1. Career Match Analysis
2. Top 3 Career Paths
3. 90-Day Action Plan
4. Key Skills to Develop
5. 6-Month Milestones
6. 1-Year Vision
7. Faith Integration

Use bullet points, numbered steps, and concise language.
"""

SUMMARY_PROMPT = """
Summarize the following career plan into a clear 300-500 word executive summary.

Career Plan:
{plan}

Include:
- Top career paths
- 3-5 key actions
- Skills to develop
- Timeline overview
Use markdown-friendly bullets and headers.
"""


def _turn(role: str, text: str) -> Dict:
    return {"role": role, "parts": [{"text": text}]}


def _api_role(role: str) -> str:
    # the Gemini API calls the assistant side "model"
    return ROLE_MODEL if role in (ROLE_ASSISTANT, ROLE_MODEL) else ROLE_USER


def format_preferences(preferences: Mapping) -> str:
    """Render the career plan questionnaire as the text block the plan prompt expects."""

    def joined(value):
        if isinstance(value, (list, tuple)):
            return ", ".join(str(item) for item in value)
        return str(value or "")

    lines = [
        f"Interests: {joined(preferences.get('interests'))}",
        f"Skills: {joined(preferences.get('skills'))}",
        f"Industry: {joined(preferences.get('industry'))}",
        f"Work Style: {joined(preferences.get('work_style'))}",
        f"Timeline: {joined(preferences.get('timeframe'))}",
        f"Goals: {joined(preferences.get('goals'))}",
        f"Plan Type: {joined(preferences.get('plan_type'))}",
    ]
    return "\n".join(lines)


def build_contents(user_input: str, prior_turns: Iterable[Mapping] = ()) -> List[Dict]:
    """
    Build the ``contents`` array for a generateContent call. The system prompt
    always goes first. Plan and summary requests ignore prior turns.
    """
    user_input = user_input or ""
    contents = [_turn(ROLE_USER, SYSTEM_PROMPT)]

    if user_input.startswith(PLAN_PREFIX):
        preferences = user_input[len(PLAN_PREFIX):]
        contents.append(_turn(ROLE_USER, PLAN_PROMPT.format(preferences=preferences)))
        return contents

    if user_input.startswith(SUMMARY_PREFIX):
        plan = user_input[len(SUMMARY_PREFIX):]
        contents.append(_turn(ROLE_USER, SUMMARY_PROMPT.format(plan=plan)))
        return contents

    for message in prior_turns or ():
        content = message.get("content")
        if not content or not isinstance(content, str):
            continue
        contents.append(_turn(_api_role(message.get("role")), content))
    contents.append(_turn(ROLE_USER, user_input))
    return contents
