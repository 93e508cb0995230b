# career_quest/content/routes.py
from typing import Any

from fastapi import APIRouter, Depends

from career_quest.deps import get_model_invoke, get_pipeline
from career_quest.agents.pipeline import GenerationPipeline, GenerationRequest, ModelInvoke
from career_quest.agents.prompts import format_assessment, format_quiz_answers
from career_quest.agents.schemas import ContentKind, to_payload
from career_quest.content.schemas import (
    AssignmentContentRequest,
    AssignmentRequest,
    CheatSheetContentRequest,
    CheatSheetRequest,
    CourseRoadmapRequest,
    LearningModuleRequest,
    LectureContentRequest,
    LectureRequest,
    ProjectRequest,
    QuizContentRequest,
    QuizRequest,
    RecommendationsRequest,
    RoadmapRequest,
    RoleDeepDiveRequest,
    TaskContentRequest,
)

router = APIRouter(prefix="/api")

DEFAULT_CAREER_FIELD = "General"

UNIT_STATUS_TO_NODE_STATUS = {
    "completed": "completed",
    "active": "available",
}


async def _generate(pipeline: GenerationPipeline, model_invoke: ModelInvoke,
                    kind: ContentKind, **params: str) -> dict[str, Any]:
    request = GenerationRequest(kind=kind, params=params)
    content = await pipeline.generate(request, model_invoke)
    return to_payload(content)


def _pick(content: dict[str, Any], key: str, default: Any) -> Any:
    # Empty values from the model count as missing
    return content.get(key) or default


def roadmap_to_units(payload: dict[str, Any], keep_node_status: bool = False) -> list[dict[str, Any]]:
    """
    Map roadmap units onto the unit/node shape the client renders.

    Node status comes from the unit status. Fallback templates already carry
    per-node statuses, so callers pass ``keep_node_status`` for those.
    """
    units = []
    for unit in payload["roadmap"]:
        number = unit["unitNumber"]
        node_status = UNIT_STATUS_TO_NODE_STATUS.get(unit.get("status"), "locked")
        nodes = []
        for node in unit["nodes"]:
            if not isinstance(node, dict):
                continue
            title = node.get("title", "")
            nodes.append({
                "id": node.get("id"),
                "type": node.get("type"),
                "title": title,
                "description": node.get("description") or f"Learn {title}",
                "duration": node.get("duration") or "1 week",
                "difficulty": node.get("difficulty") or "beginner",
                "skills": node.get("skills") or [],
                "status": (node.get("status") if keep_node_status else None) or node_status,
            })
        units.append({
            "id": f"unit{number}",
            "title": unit["unitTitle"],
            "description": unit.get("description") or f"Unit {number}: {unit['unitTitle']}",
            "nodes": nodes,
        })
    return units


# -------------------------
# Career discovery
# -------------------------
@router.post("/ai-recommendations")
async def ai_recommendations(
    body: RecommendationsRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    return await _generate(
        pipeline, model_invoke, ContentKind.RECOMMENDATIONS,
        quizAnswers=format_quiz_answers(body.quiz_answers),
    )


@router.post("/role-deep-dive")
async def role_deep_dive(
    body: RoleDeepDiveRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    return await _generate(
        pipeline, model_invoke, ContentKind.ROLE_DEEP_DIVE,
        role=body.role, personaContext=body.persona_context or "",
    )


@router.post("/career-quest/generate-roadmap")
async def generate_roadmap(
    body: RoadmapRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    assessment = body.assessment_data.model_dump(by_alias=True) if body.assessment_data else None
    request = GenerationRequest(
        kind=ContentKind.ROADMAP,
        params={
            "roleId": body.role_id,
            "roleName": body.role_name,
            "assessment": format_assessment(assessment),
        },
    )
    result = await pipeline.generate_with_outcome(request, model_invoke)
    units = roadmap_to_units(to_payload(result.content), keep_node_status=result.used_fallback)
    return {"units": units}


@router.post("/course-roadmap")
async def course_roadmap(
    body: CourseRoadmapRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    payload = await _generate(
        pipeline, model_invoke, ContentKind.COURSE_SYLLABUS,
        courseTitle=body.course_title, careerField=body.career_field,
    )
    return {"roadmap": payload}


# -------------------------
# Learning module content
# -------------------------
@router.post("/learning-module/lecture/content")
async def lecture_content(
    body: LectureContentRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    content = await _generate(
        pipeline, model_invoke, ContentKind.LECTURE,
        lectureTitle=body.lecture_title, courseTitle=body.course_title, careerField=body.career_field,
    )
    return {"content": content}


@router.post("/learning-module/quiz/content")
async def quiz_content(
    body: QuizContentRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    content = await _generate(
        pipeline, model_invoke, ContentKind.QUIZ,
        quizTitle=body.quiz_title, courseTitle=body.course_title, careerField=body.career_field,
    )
    return {"content": content}


@router.post("/learning-module/task/content")
async def task_content(
    body: TaskContentRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    content = await _generate(
        pipeline, model_invoke, ContentKind.TASK,
        taskTitle=body.task_title, courseTitle=body.course_title, careerField=body.career_field,
    )
    return {"content": content}


@router.post("/learning-module/assignment/content")
async def assignment_content(
    body: AssignmentContentRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    content = await _generate(
        pipeline, model_invoke, ContentKind.ASSIGNMENT,
        assignmentTitle=body.assignment_title, courseTitle=body.course_title,
        careerField=body.career_field,
    )
    return {"content": content}


@router.post("/learning-module/cheat-sheet/content")
async def cheat_sheet_content(
    body: CheatSheetContentRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    content = await _generate(
        pipeline, model_invoke, ContentKind.CHEAT_SHEET,
        cheatSheetTitle=body.cheat_sheet_title, courseTitle=body.course_title,
        careerField=body.career_field,
    )
    return {"content": content}


# -------------------------
# Module-level views (defaults filled here, not by the validator)
# -------------------------
@router.post("/learning-module")
def learning_module(body: LearningModuleRequest):
    # Static outline until modules are backed by storage
    return {
        "id": body.module_id,
        "title": body.module_name,
        "description": f"A comprehensive guide to {body.module_name}.",
        "duration": "2 weeks",
        "difficulty": "beginner",
        "modules": [
            {"id": "lec1", "type": "lecture", "title": f"Introduction to {body.module_name}",
             "description": f"Learn the fundamentals of {body.module_name}",
             "duration": "15 minutes", "status": "available"},
            {"id": "cs1", "type": "cheat-sheet", "title": f"{body.module_name} Cheat Sheet",
             "description": f"Quick reference guide for {body.module_name}",
             "duration": "10 minutes", "status": "available"},
            {"id": "qz1", "type": "quiz", "title": f"{body.module_name} Quiz",
             "description": f"Test your knowledge of {body.module_name}",
             "duration": "10 minutes", "status": "available"},
            {"id": "prj1", "type": "project", "title": f"{body.module_name} Project",
             "description": f"Apply {body.module_name} in a hands-on project",
             "duration": "2 hours", "status": "available"},
        ],
    }


@router.post("/learning-module/lecture")
async def lecture(
    body: LectureRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    content = await _generate(
        pipeline, model_invoke, ContentKind.LECTURE,
        lectureTitle=body.lecture_title or body.module_name,
        courseTitle=body.module_name,
        careerField=body.career_field or DEFAULT_CAREER_FIELD,
    )
    return {
        "id": _pick(content, "id", body.lecture_id),
        "title": _pick(content, "title", body.lecture_title or "Lecture"),
        "description": _pick(content, "description", f"Learn about {body.module_name}"),
        "videoUrl": _pick(content, "videoUrl", ""),
        "transcript": _pick(content, "transcript", "Transcript not available"),
        "cheatSheet": _pick(content, "cheatSheet", "Cheat sheet not available"),
        "duration": _pick(content, "duration", "15 minutes"),
        "moduleId": body.module_id,
        "moduleName": body.module_name,
    }


@router.post("/learning-module/quiz")
async def quiz(
    body: QuizRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    content = await _generate(
        pipeline, model_invoke, ContentKind.QUIZ,
        quizTitle=body.module_name, courseTitle=body.module_name, careerField=DEFAULT_CAREER_FIELD,
    )
    return {
        "id": _pick(content, "id", body.quiz_id),
        "title": _pick(content, "title", "Quiz"),
        "description": _pick(content, "description", f"Test your knowledge of {body.module_name}"),
        "questions": _pick(content, "questions", []),
        "duration": _pick(content, "duration", "10 minutes"),
        "moduleId": body.module_id,
        "moduleName": body.module_name,
    }


def _exercise_view(content: dict[str, Any], item_id: str, label: str, item_type: str,
                   estimated_time: str, body: ProjectRequest | AssignmentRequest) -> dict[str, Any]:
    return {
        "id": _pick(content, "id", item_id),
        "title": _pick(content, "title", label.capitalize()),
        "description": _pick(
            content, "description",
            f"Complete this {label} to demonstrate your knowledge of {body.module_name}",
        ),
        "type": _pick(content, "type", item_type),
        "difficulty": _pick(content, "difficulty", "beginner"),
        "estimatedTime": _pick(content, "estimatedTime", estimated_time),
        "requirements": _pick(content, "requirements", []),
        "instructions": _pick(content, "instructions", []),
        "resources": _pick(content, "resources", []),
        "moduleId": body.module_id,
        "moduleName": body.module_name,
    }


@router.post("/learning-module/project")
async def project(
    body: ProjectRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    content = await _generate(
        pipeline, model_invoke, ContentKind.TASK,
        taskTitle=body.module_name, courseTitle=body.module_name, careerField=DEFAULT_CAREER_FIELD,
    )
    return _exercise_view(content, body.project_id, "project", "project", "2 hours", body)


@router.post("/learning-module/assignment")
async def assignment(
    body: AssignmentRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    content = await _generate(
        pipeline, model_invoke, ContentKind.ASSIGNMENT,
        assignmentTitle=body.module_name, courseTitle=body.module_name,
        careerField=DEFAULT_CAREER_FIELD,
    )
    return _exercise_view(content, body.assignment_id, "assignment", "assignment", "30 minutes", body)


@router.post("/learning-module/cheat-sheet")
async def cheat_sheet(
    body: CheatSheetRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    model_invoke: ModelInvoke = Depends(get_model_invoke),
):
    content = await _generate(
        pipeline, model_invoke, ContentKind.CHEAT_SHEET,
        cheatSheetTitle=body.module_name, courseTitle=body.module_name,
        careerField=DEFAULT_CAREER_FIELD,
    )
    return {
        "id": _pick(content, "id", body.cheat_sheet_id),
        "title": _pick(content, "title", "Cheat Sheet"),
        "content": _pick(content, "content", "Content not available"),
        "duration": _pick(content, "duration", "10 minutes"),
        "moduleId": body.module_id,
        "moduleName": body.module_name,
    }
