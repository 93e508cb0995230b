## Pydantic Schemas for Structured Output
from enum import Enum
from typing import Annotated, Any, List

from pydantic import BaseModel, ConfigDict, Field, Strict, field_validator
from pydantic.alias_generators import to_camel


class ContentKind(str, Enum):
    ROADMAP = "roadmap"
    COURSE_SYLLABUS = "course-syllabus"
    LECTURE = "lecture"
    QUIZ = "quiz"
    TASK = "task"
    ASSIGNMENT = "assignment"
    CHEAT_SHEET = "cheat-sheet"
    RECOMMENDATIONS = "recommendations"
    ROLE_DEEP_DIVE = "role-deep-dive"


NonEmptyStr = Annotated[str, Strict(), Field(min_length=1)]
JsonArray = Annotated[List[Any], Strict()]


class ValidatedContent(BaseModel):
    """
    Shallow view over a model response.

    Only required fields are declared; everything else the model emitted is
    kept as extra data and survives a dump unchanged. Required fields use
    strict types, so a number is never turned into a string.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="allow",
    )


class RoadmapUnit(ValidatedContent):
    unit_number: Any
    unit_title: NonEmptyStr
    nodes: JsonArray

    @field_validator("unit_number")
    @classmethod
    def unit_number_present(cls, value: Any) -> Any:
        # Models emit both 1 and "1"; either is kept as-is
        if isinstance(value, bool) or not isinstance(value, (int, str)) or value == "":
            raise ValueError("unitNumber must be an integer or a non-empty string")
        return value

class RoadmapContent(ValidatedContent):
    roadmap: List[RoadmapUnit]

class CourseSyllabusContent(ValidatedContent):
    course_title: NonEmptyStr
    syllabus: JsonArray

class LectureContent(ValidatedContent):
    title: NonEmptyStr
    video_url: NonEmptyStr
    transcript: NonEmptyStr
    cheat_sheet: NonEmptyStr

class QuizContent(ValidatedContent):
    title: NonEmptyStr
    questions: JsonArray

class TaskContent(ValidatedContent):
    title: NonEmptyStr
    description: NonEmptyStr
    type: NonEmptyStr
    difficulty: NonEmptyStr

class AssignmentContent(TaskContent):
    pass

class CheatSheetContent(ValidatedContent):
    title: NonEmptyStr
    content: NonEmptyStr

class RecommendationsContent(ValidatedContent):
    persona_name: NonEmptyStr
    persona_summary: NonEmptyStr
    recommended_roles: JsonArray

class RoleDeepDiveContent(ValidatedContent):
    role: NonEmptyStr
    description: NonEmptyStr
    daily_responsibilities: JsonArray
    career_path: JsonArray
    required_skills: JsonArray


CONTENT_MODELS: dict[ContentKind, type[ValidatedContent]] = {
    ContentKind.ROADMAP: RoadmapContent,
    ContentKind.COURSE_SYLLABUS: CourseSyllabusContent,
    ContentKind.LECTURE: LectureContent,
    ContentKind.QUIZ: QuizContent,
    ContentKind.TASK: TaskContent,
    ContentKind.ASSIGNMENT: AssignmentContent,
    ContentKind.CHEAT_SHEET: CheatSheetContent,
    ContentKind.RECOMMENDATIONS: RecommendationsContent,
    ContentKind.ROLE_DEEP_DIVE: RoleDeepDiveContent,
}


def to_payload(content: ValidatedContent) -> dict[str, Any]:
    return content.model_dump(by_alias=True)
