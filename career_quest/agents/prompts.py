# career_quest/agents/prompts.py
from typing import Any, Callable, Mapping

from career_quest.agents.schemas import ContentKind

SYSTEM_CONTENT_WRITER = """You are an expert career mentor and curriculum author.

You must return ONLY a single valid JSON object (no commentary).
The JSON must match the shape shown in the request.
"""

QUIZ_ANSWER_LABELS = [
    ("childhoodInterests", "Childhood Interest"),
    ("favoriteToy", "Favorite Toy/Game"),
    ("childhoodAspiration", "Childhood Aspiration"),
    ("spendingPreference", "Spending Preference"),
    ("inspirationalStatement", "Inspirational Statement"),
    ("idealDailyVibe", "Ideal Daily Vibe"),
    ("nonNegotiables", "Non-Negotiables"),
    ("publicSpeaking", "Public Speaking Rating (1-5)"),
    ("secretChoice", "Secret Choice"),
    ("goalOwnership", "Goal Ownership Rating (1-5)"),
]


def format_quiz_answers(quiz_answers: Mapping[str, Any]) -> str:
    lines = []
    for i, (key, label) in enumerate(QUIZ_ANSWER_LABELS, start=1):
        answer = quiz_answers.get(key) or "Not provided"
        lines.append(f'{i}. {label}: "{answer}"')
    return "\n".join(lines)


def format_assessment(assessment: Mapping[str, Any] | None) -> str:
    if not assessment:
        return "No assessment data available."

    answers = assessment.get("answers") or {}
    lines = []
    for i, question in enumerate(assessment.get("questions") or [], start=1):
        if not isinstance(question, Mapping):
            continue
        qid = question.get("id")
        answer = "Yes" if isinstance(qid, str) and answers.get(qid) else "No"
        lines.append(f"{i}. {question.get('text', '')}: {answer}")

    open_response = assessment.get("openResponse") or "No open response provided."
    return (
        "The user has completed a skill assessment with the following responses:\n"
        "Questions and Answers:\n"
        + "\n".join(lines)
        + f"\nOpen Response:\n{open_response}"
    )


def build_recommendations_prompt(params: Mapping[str, str]) -> str:
    return f"""
A student aged 18-24 in India has answered a 10-question psychology quiz.

User's quiz answers:
{params.get("quizAnswers", "Not provided")}

Part 1: create a career persona (an evocative name and a 2-3 sentence summary of their strengths).
Part 2: recommend 5 specific career paths in the current Indian market, each with a one-sentence reason.

Output must be STRICT JSON matching this shape:
{{
  "personaName": "string",
  "personaSummary": "string",
  "recommendedRoles": [
    {{"role": "string", "reason": "string"}}
  ]
}}
""".strip()


def build_role_deep_dive_prompt(params: Mapping[str, str]) -> str:
    role = params.get("role", "")
    return f"""
Career path to analyze: {role}
Persona context: {params.get("personaContext") or "Not provided"}

Describe this career path for the Indian job market.

Output must be STRICT JSON matching this shape:
{{
  "role": "{role}",
  "description": "string",
  "dailyResponsibilities": ["string"],
  "salaryRange": {{"entry": "string", "mid": "string", "senior": "string"}},
  "careerPath": ["Year 1: string"],
  "requiredSkills": ["string"],
  "education": "string",
  "jobMarket": "string"
}}
""".strip()


def build_roadmap_prompt(params: Mapping[str, str]) -> str:
    role_name = params.get("roleName", "")
    return f"""
Design a gamified, unit-by-unit learning roadmap for a beginner who wants to become a {role_name}.

User assessment data:
{params.get("assessment") or "No assessment data available."}

Rules:
- Break the path into units; complex careers get more units.
- Each unit holds course, project and reward nodes; projects close a unit.
- Finish with "Interview Prep" and "Upskilling" units.
- Only the first unit is "active", the rest are "locked".

Output must be STRICT JSON matching this shape:
{{
  "careerTitle": "{role_name}",
  "roadmap": [
    {{
      "unitNumber": 1,
      "unitTitle": "Unit 1: The Foundations",
      "status": "active",
      "nodes": [
        {{"id": "node_1", "type": "course", "title": "string"}}
      ]
    }}
  ]
}}
""".strip()


def build_course_syllabus_prompt(params: Mapping[str, str]) -> str:
    course_title = params.get("courseTitle", "")
    return f"""
Design a beginner-level syllabus for the course "{course_title}" in the field of {params.get("careerField", "")}.

Rules:
- Order lectures logically, each with a reputable YouTube video URL.
- Follow lectures with a cheat-sheet and a quiz.
- Insert practical tasks that test the preceding lectures.

Output must be STRICT JSON matching this shape:
{{
  "courseTitle": "{course_title}",
  "complexityLevel": "beginner",
  "syllabus": [
    {{"type": "lecture", "id": "lec_1", "title": "string", "videoUrl": "https://www.youtube.com/watch?v=..."}},
    {{"type": "cheat-sheet", "id": "cs_1", "title": "string", "description": "string"}},
    {{"type": "quiz", "id": "quiz_1", "title": "string", "description": "string"}},
    {{"type": "task", "id": "task_1", "title": "string", "problemStatement": "string", "requirements": ["string"]}}
  ]
}}
""".strip()


def _item_context(noun: str, title: str, params: Mapping[str, str]) -> str:
    return (
        f'Act as a senior {params.get("careerField", "")} educator. Generate the {noun} '
        f'"{title}" for the course "{params.get("courseTitle", "")}".'
    )


def build_lecture_prompt(params: Mapping[str, str]) -> str:
    title = params.get("lectureTitle", "")
    return f"""
{_item_context("lecture", title, params)}

Provide an embeddable YouTube video URL, a full transcript-style explanation,
a markdown cheat sheet and 2-4 multiple-choice questions.

Output must be STRICT JSON matching this shape:
{{
  "title": "{title}",
  "description": "string",
  "videoUrl": "https://www.youtube.com/embed/...",
  "transcript": "string",
  "cheatSheet": "markdown string",
  "quiz": [
    {{"question": "string", "options": ["string"], "correctAnswer": "string", "explanation": "string"}}
  ]
}}
""".strip()


def build_quiz_prompt(params: Mapping[str, str]) -> str:
    title = params.get("quizTitle", "")
    return f"""
{_item_context("quiz", title, params)}

Write 4-6 multiple-choice questions with 3-4 options each, the correct answer,
and an explanation of why it is right.

Output must be STRICT JSON matching this shape:
{{
  "title": "{title}",
  "description": "Test your knowledge of {title}",
  "questions": [
    {{"id": "q1", "question": "string", "options": ["string"], "correctAnswer": "string", "explanation": "string"}}
  ]
}}
""".strip()


def _exercise_prompt(noun: str, title: str, params: Mapping[str, str]) -> str:
    return f"""
{_item_context(noun, title, params)}

Write it as a professional brief with requirements, step-by-step instructions and resources.

Output must be STRICT JSON matching this shape:
{{
  "title": "{title}",
  "description": "string",
  "type": "{noun}",
  "difficulty": "beginner | intermediate | advanced",
  "estimatedTime": "string",
  "requirements": ["string"],
  "instructions": ["string"],
  "resources": [{{"title": "string", "url": "string"}}]
}}
""".strip()


def build_task_prompt(params: Mapping[str, str]) -> str:
    return _exercise_prompt("task", params.get("taskTitle", ""), params)


def build_assignment_prompt(params: Mapping[str, str]) -> str:
    return _exercise_prompt("assignment", params.get("assignmentTitle", ""), params)


def build_cheat_sheet_prompt(params: Mapping[str, str]) -> str:
    title = params.get("cheatSheetTitle", "")
    return f"""
{_item_context("cheat sheet", title, params)}

Write a markdown super-summary: key concepts, code examples, pro tips,
common pitfalls and best practices.

Output must be STRICT JSON matching this shape:
{{
  "title": "{title}",
  "content": "## {title} - Cheat Sheet\\n\\n### Key Concepts\\n- ..."
}}
""".strip()


PROMPT_BUILDERS: dict[ContentKind, Callable[[Mapping[str, str]], str]] = {
    ContentKind.RECOMMENDATIONS: build_recommendations_prompt,
    ContentKind.ROLE_DEEP_DIVE: build_role_deep_dive_prompt,
    ContentKind.ROADMAP: build_roadmap_prompt,
    ContentKind.COURSE_SYLLABUS: build_course_syllabus_prompt,
    ContentKind.LECTURE: build_lecture_prompt,
    ContentKind.QUIZ: build_quiz_prompt,
    ContentKind.TASK: build_task_prompt,
    ContentKind.ASSIGNMENT: build_assignment_prompt,
    ContentKind.CHEAT_SHEET: build_cheat_sheet_prompt,
}


def build_prompt(kind: ContentKind, params: Mapping[str, str]) -> str:
    return PROMPT_BUILDERS[ContentKind(kind)](params)
