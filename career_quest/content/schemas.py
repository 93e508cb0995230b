## Request bodies for the content routes
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RequestBody(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, extra="ignore")


RequiredStr = Annotated[str, Field(min_length=1)]


class RecommendationsRequest(RequestBody):
    quiz_answers: dict[str, Any]

class RoleDeepDiveRequest(RequestBody):
    role: RequiredStr
    persona_context: str | None = None

class AssessmentQuestion(RequestBody):
    id: str
    text: str = ""

class AssessmentData(RequestBody):
    questions: list[AssessmentQuestion] = Field(default_factory=list)
    answers: dict[str, Any] = Field(default_factory=dict)
    open_response: str | None = None

class RoadmapRequest(RequestBody):
    role_id: RequiredStr
    role_name: RequiredStr
    domain_id: str | None = None
    # 0: Beginner, 1: Novice, 2: Apprentice, 3: Advanced, 4: Expert
    starting_level: int | None = None
    assessment_data: AssessmentData | None = None

class CourseRoadmapRequest(RequestBody):
    course_id: RequiredStr
    course_title: RequiredStr
    career_field: RequiredStr


class LectureContentRequest(RequestBody):
    lecture_id: RequiredStr
    lecture_title: RequiredStr
    course_title: RequiredStr
    career_field: RequiredStr
    user_id: str | None = None

class QuizContentRequest(RequestBody):
    quiz_id: RequiredStr
    quiz_title: RequiredStr
    course_title: RequiredStr
    career_field: RequiredStr
    user_id: str | None = None

class TaskContentRequest(RequestBody):
    task_id: RequiredStr
    task_title: RequiredStr
    course_title: RequiredStr
    career_field: RequiredStr
    user_id: str | None = None

class AssignmentContentRequest(RequestBody):
    assignment_id: RequiredStr
    assignment_title: RequiredStr
    course_title: RequiredStr
    career_field: RequiredStr
    user_id: str | None = None

class CheatSheetContentRequest(RequestBody):
    cheat_sheet_id: RequiredStr
    cheat_sheet_title: RequiredStr
    course_title: RequiredStr
    career_field: RequiredStr
    user_id: str | None = None


class LearningModuleRequest(RequestBody):
    module_id: RequiredStr
    module_name: RequiredStr
    user_id: str | None = None


# Item views list their own id ahead of the module fields
class LectureRequest(RequestBody):
    lecture_id: RequiredStr
    module_id: RequiredStr
    module_name: RequiredStr
    lecture_title: str | None = None
    career_field: str | None = None
    user_id: str | None = None

class QuizRequest(RequestBody):
    quiz_id: RequiredStr
    module_id: RequiredStr
    module_name: RequiredStr
    user_id: str | None = None

class ProjectRequest(RequestBody):
    project_id: RequiredStr
    module_id: RequiredStr
    module_name: RequiredStr
    user_id: str | None = None

class CheatSheetRequest(RequestBody):
    cheat_sheet_id: RequiredStr
    module_id: RequiredStr
    module_name: RequiredStr
    user_id: str | None = None

class AssignmentRequest(RequestBody):
    assignment_id: RequiredStr
    module_id: RequiredStr
    module_name: RequiredStr
    user_id: str | None = None
