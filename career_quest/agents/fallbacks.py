# career_quest/agents/fallbacks.py
"""
Static payloads returned whenever generation fails.

Each builder returns a fresh dict in the same camelCase shape the model is
asked to produce, so every fallback passes ``validate_content`` for its kind.
"""
from typing import Any, Callable, Mapping

from career_quest.agents.schemas import CONTENT_MODELS, ContentKind, RoadmapUnit, ValidatedContent

Payload = dict[str, Any]
FallbackBuilder = Callable[[Mapping[str, str]], Payload]

FALLBACK_VIDEO_URL = "https://www.youtube.com/embed/O_9u1P5Yj4Q"


def _ctx(context: Mapping[str, str], key: str, default: str) -> str:
    value = context.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return default


def _node(node_id: str, node_type: str, title: str, description: str, *,
          duration: str | None = None, difficulty: str | None = None,
          skills: list[str] | None = None, status: str = "locked") -> Payload:
    node: Payload = {"id": node_id, "type": node_type, "title": title, "description": description}
    if duration:
        node["duration"] = duration
    if difficulty:
        node["difficulty"] = difficulty
    if skills:
        node["skills"] = skills
    node["status"] = status
    return node


def _unit(number: int, title: str, description: str, nodes: list[Payload]) -> Payload:
    return {
        "unitNumber": number,
        "unitTitle": title,
        "description": description,
        "status": "active" if number == 1 else "locked",
        "nodes": nodes,
    }


def _software_engineer_units() -> list[Payload]:
    return [
        _unit(1, "The Foundations", "Building your core programming and computer science knowledge", [
            _node("course1", "course", "Introduction to Programming",
                  "Learn the fundamentals of programming with Python", duration="1 week",
                  difficulty="beginner", skills=["Variables", "Loops", "Functions"], status="available"),
            _node("project1", "project", "First Program", "Build your first simple calculator program",
                  duration="3 days", difficulty="beginner", skills=["Problem-solving", "Logic"]),
            _node("reward1", "reward", "First Milestone", "Congratulations on completing your first program!"),
        ]),
        _unit(2, "Core Skills", "Developing essential software development skills", [
            _node("course2", "course", "Data Structures & Algorithms",
                  "Master arrays, lists, trees, and basic algorithms", duration="2 weeks",
                  difficulty="intermediate", skills=["Arrays", "Lists", "Sorting"]),
            _node("project2", "project", "Data Structure Library",
                  "Implement a library of common data structures", duration="1 week",
                  difficulty="intermediate", skills=["Implementation", "Testing"]),
            _node("reward2", "reward", "Algorithm Master", "You've mastered the basics of algorithms!"),
        ]),
        _unit(3, "Professional Development", "Preparing for real-world software engineering", [
            _node("course3", "course", "Web Development", "Build full-stack web applications",
                  duration="3 weeks", difficulty="intermediate",
                  skills=["HTML/CSS", "JavaScript", "Databases"]),
            _node("project3", "project", "Personal Portfolio Website",
                  "Create a professional portfolio showcasing your skills", duration="2 weeks",
                  difficulty="intermediate", skills=["Frontend", "Backend", "Deployment"]),
            _node("final1", "final", "Interview Prep",
                  "Prepare for technical interviews and job applications", duration="2 weeks",
                  difficulty="advanced", skills=["Problem-solving", "System design"]),
        ]),
    ]


def _data_scientist_units() -> list[Payload]:
    return [
        _unit(1, "The Foundations", "Building your core data science and statistics knowledge", [
            _node("course1", "course", "Introduction to Data Science",
                  "Learn the fundamentals of data science with Python", duration="1 week",
                  difficulty="beginner", skills=["Python", "Pandas", "NumPy"], status="available"),
            _node("project1", "project", "First Data Analysis",
                  "Analyze a simple dataset and create visualizations", duration="3 days",
                  difficulty="beginner", skills=["Data cleaning", "Visualization"]),
            _node("reward1", "reward", "First Milestone", "Congratulations on completing your first analysis!"),
        ]),
        _unit(2, "Core Skills", "Developing essential machine learning and analytics skills", [
            _node("course2", "course", "Machine Learning Basics",
                  "Master supervised and unsupervised learning", duration="2 weeks",
                  difficulty="intermediate", skills=["Regression", "Classification", "Clustering"]),
            _node("project2", "project", "Predictive Model", "Build a model to predict housing prices",
                  duration="1 week", difficulty="intermediate", skills=["Modeling", "Evaluation"]),
            _node("reward2", "reward", "ML Pioneer", "You've built your first machine learning model!"),
        ]),
        _unit(3, "Professional Development", "Preparing for real-world data science roles", [
            _node("course3", "course", "Deep Learning",
                  "Explore neural networks and deep learning frameworks", duration="3 weeks",
                  difficulty="advanced", skills=["Neural networks", "TensorFlow", "PyTorch"]),
            _node("project3", "project", "Image Classification System",
                  "Create a system to classify images using deep learning", duration="2 weeks",
                  difficulty="advanced", skills=["CNN", "Deployment", "Optimization"]),
            _node("final1", "final", "Interview Prep",
                  "Prepare for data science interviews and job applications", duration="2 weeks",
                  difficulty="advanced", skills=["Statistics", "Case studies"]),
        ]),
    ]


def _default_units() -> list[Payload]:
    return [
        _unit(1, "Getting Started", "Building your foundational knowledge", [
            _node("course1", "course", "Introduction to Your Field",
                  "Learn the basics of your chosen career path", duration="1 week",
                  difficulty="beginner", skills=["Fundamentals", "Terminology"], status="available"),
            _node("project1", "project", "First Exploration", "Complete your first hands-on activity",
                  duration="2 days", difficulty="beginner", skills=["Basics", "Application"]),
            _node("reward1", "reward", "First Step", "Congratulations on taking your first step!"),
        ]),
        _unit(2, "Building Skills", "Developing core competencies", [
            _node("course2", "course", "Core Concepts", "Master the essential concepts in your field",
                  duration="2 weeks", difficulty="beginner", skills=["Core skills", "Principles"]),
            _node("project2", "project", "Skill Application",
                  "Apply your knowledge in a practical project", duration="1 week",
                  difficulty="beginner", skills=["Application", "Problem-solving"]),
            _node("reward2", "reward", "Skill Builder", "You're building solid skills!"),
        ]),
        _unit(3, "Professional Growth", "Preparing for professional success", [
            _node("course3", "course", "Advanced Topics", "Explore advanced concepts in your field",
                  duration="3 weeks", difficulty="intermediate",
                  skills=["Advanced skills", "Specialization"]),
            _node("project3", "project", "Capstone Project",
                  "Demonstrate your expertise with a major project", duration="2 weeks",
                  difficulty="intermediate", skills=["Integration", "Presentation"]),
            _node("final1", "final", "Career Preparation", "Prepare for interviews and job applications",
                  duration="2 weeks", difficulty="advanced", skills=["Preparation", "Networking"]),
        ]),
    ]


ROADMAP_TEMPLATES: dict[str, Callable[[], list[Payload]]] = {
    "software-engineer": _software_engineer_units,
    "data-scientist": _data_scientist_units,
    "default": _default_units,
}


def roadmap_fallback(context: Mapping[str, str]) -> Payload:
    role_id = _ctx(context, "roleId", "default")
    units = ROADMAP_TEMPLATES.get(role_id, ROADMAP_TEMPLATES["default"])()
    return {"careerTitle": _ctx(context, "roleName", "General Role"), "roadmap": units}


def course_syllabus_fallback(context: Mapping[str, str]) -> Payload:
    course_title = _ctx(context, "courseTitle", "Introduction to Course")
    return {
        "courseTitle": course_title,
        "complexityLevel": "beginner",
        "syllabus": [
            {
                "type": "lecture",
                "id": "lec_1",
                "title": f"Introduction to {course_title}",
                "videoUrl": FALLBACK_VIDEO_URL,
            },
            {
                "type": "cheat-sheet",
                "id": "cs_1",
                "title": f"Cheat Sheet: Introduction to {course_title}",
                "description": "Quick reference guide for the key concepts from the introduction",
            },
            {
                "type": "quiz",
                "id": "quiz_1",
                "title": f"Quiz 1: Introduction to {course_title}",
                "description": "Test your understanding of the key concepts from the introduction",
            },
            {
                "type": "task",
                "id": "task_1",
                "title": "Hands-on Exercise",
                "problemStatement": "Complete a basic exercise to practice what you've learned.",
                "requirements": [
                    "Follow the instructions provided",
                    "Submit your completed work",
                ],
            },
        ],
    }


def lecture_fallback(context: Mapping[str, str]) -> Payload:
    title = _ctx(context, "lectureTitle", "Introduction to Lecture")
    course_title = _ctx(context, "courseTitle", "General Course")
    return {
        "id": "default",
        "title": title,
        "description": f"Learn the fundamentals of {title}",
        "videoUrl": FALLBACK_VIDEO_URL,
        "transcript": (
            f"This is a placeholder transcript for the lecture on {title}.\n\n"
            "The AI content generation is currently unavailable. This lecture would normally contain:\n\n"
            f"1. Introduction to {title}\n"
            "2. Core concepts and principles\n"
            "3. Practical examples and demonstrations\n"
            "4. Best practices and common patterns\n"
            "5. Real-world applications\n\n"
            "Please check back later or contact support if this issue persists."
        ),
        "cheatSheet": (
            f"## {title} - Cheat Sheet\n\n"
            "### Overview\n"
            f"This cheat sheet covers the fundamentals of {title} in the context of {course_title}.\n\n"
            "### Key Concepts\n"
            f"- Fundamental principles of {title}\n"
            "- Core techniques and best practices\n"
            "- Common patterns and approaches\n\n"
            "### Pro Tips\n"
            "- Start with simple examples to build understanding\n"
            "- Practice regularly to reinforce concepts\n"
            "- Build projects to apply what you learn\n\n"
            "### Common Pitfalls\n"
            "- Don't skip fundamentals in favor of advanced topics\n"
            "- Avoid copying code without understanding it"
        ),
        "quiz": [
            {
                "question": f"What is the most important aspect of learning {title}?",
                "options": [
                    "Memorizing syntax and commands",
                    "Understanding core concepts and principles",
                    "Watching videos without practice",
                    "Reading documentation only",
                ],
                "correctAnswer": "Understanding core concepts and principles",
                "explanation": "Understanding concepts lets you apply knowledge in new contexts.",
            },
        ],
        "courseTitle": course_title,
    }


def quiz_fallback(context: Mapping[str, str]) -> Payload:
    title = _ctx(context, "quizTitle", "Introduction to Quiz")
    return {
        "id": "default",
        "title": title,
        "description": f"Test your knowledge of {title}",
        "questions": [
            {
                "id": "q1",
                "question": f"What is the most important aspect of {title}?",
                "options": [
                    "Memorizing syntax",
                    "Understanding concepts",
                    "Watching videos",
                    "Reading documentation",
                ],
                "correctAnswer": "Understanding concepts",
                "explanation": (
                    "Understanding concepts is more important than memorizing syntax. When you "
                    "understand the underlying principles, you can apply them to new situations."
                ),
            },
            {
                "id": "q2",
                "question": f"Which approach is most effective for learning {title}?",
                "options": [
                    "Copying code without understanding",
                    "Practicing regularly with varied examples",
                    "Only reading documentation",
                    "Watching videos without practice",
                ],
                "correctAnswer": "Practicing regularly with varied examples",
                "explanation": (
                    "Regular practice with varied examples reinforces concepts and builds "
                    "problem-solving skills."
                ),
            },
        ],
        "courseTitle": _ctx(context, "courseTitle", "General Course"),
    }


def _exercise(title: str, item_type: str, estimated_time: str, context: Mapping[str, str]) -> Payload:
    course_title = _ctx(context, "courseTitle", "General Course")
    career_field = _ctx(context, "careerField", "General Field")
    noun = "task" if item_type == "task" else "assignment"
    activity = "exercise" if noun == "task" else "assignment"
    return {
        "id": "default",
        "title": title,
        "description": f"Complete a practical {activity} to apply what you've learned about {title}",
        "type": item_type,
        "difficulty": "beginner",
        "estimatedTime": estimated_time,
        "requirements": [
            f"Apply the concepts learned in {course_title}",
            "Follow best practices for your field",
            "Document your approach and any challenges faced",
        ],
        "instructions": [
            "Review the lecture materials on this topic",
            "Identify a practical application of these concepts",
            f"Implement a solution to the {noun}",
            "Test your implementation thoroughly",
            "Document your approach and any lessons learned",
        ],
        "resources": [
            {"title": f"{career_field} Best Practices Guide", "url": "https://example.com/best-practices"},
            {"title": f"{course_title} Documentation", "url": "https://example.com/documentation"},
        ],
        "courseTitle": course_title,
    }


def task_fallback(context: Mapping[str, str]) -> Payload:
    return _exercise(_ctx(context, "taskTitle", "Introduction to Task"), "task", "30 minutes", context)


def assignment_fallback(context: Mapping[str, str]) -> Payload:
    return _exercise(
        _ctx(context, "assignmentTitle", "Introduction to Assignment"), "assignment", "1 hour", context
    )


def cheat_sheet_fallback(context: Mapping[str, str]) -> Payload:
    title = _ctx(context, "cheatSheetTitle", "Introduction to Cheat Sheet")
    return {
        "id": "default",
        "title": title,
        "content": (
            f"## {title} - Cheat Sheet\n\n"
            "### Key Concepts\n"
            f"- Fundamental principles of {title}\n"
            "- Core techniques and best practices\n"
            "- Common patterns and approaches\n\n"
            "### Pro Tips\n"
            "- Start with simple examples to build understanding\n"
            "- Practice regularly to reinforce concepts\n"
            "- Seek feedback from peers and mentors\n\n"
            "### Common Pitfalls\n"
            "- Don't skip fundamentals in favor of advanced topics\n"
            "- Avoid trying to learn everything at once\n\n"
            "### Best Practices\n"
            "- Follow established conventions and standards\n"
            "- Test your work thoroughly\n"
            "- Stay updated with industry trends and best practices"
        ),
        "courseTitle": _ctx(context, "courseTitle", "General Course"),
    }


def recommendations_fallback(context: Mapping[str, str]) -> Payload:
    return {
        "personaName": "The Adaptive Explorer",
        "personaSummary": (
            "You're curious and flexible, with a natural ability to adapt to different environments. "
            "You thrive when you can explore various options before committing to a path."
        ),
        "recommendedRoles": [
            {
                "role": "Full Stack Developer",
                "reason": "Your adaptable nature suits a role that combines technical and creative problem-solving.",
            },
            {
                "role": "Digital Marketing Entrepreneur",
                "reason": "Your curiosity and adaptability fit a field with creative freedom and remote work.",
            },
            {
                "role": "Civil Services (IAS/IPS)",
                "reason": "Your balanced decision-making suits government service and systemic change.",
            },
            {
                "role": "Freelance UX Consultant",
                "reason": "Your exploratory mindset is valuable when working independently with varied clients.",
            },
            {
                "role": "EdTech Product Manager",
                "reason": "Your flexible nature helps in managing products that combine technology with learning.",
            },
        ],
    }


def role_deep_dive_fallback(context: Mapping[str, str]) -> Payload:
    role = _ctx(context, "role", "Professional")
    return {
        "role": role,
        "description": (
            f"A {role} is a professional who specializes in this field. This role typically involves a "
            "combination of technical skills and soft skills to deliver value in their domain."
        ),
        "dailyResponsibilities": [
            "Performing core duties related to the role",
            "Collaborating with team members on projects",
            "Attending meetings and providing updates",
            "Documenting processes and outcomes",
            "Continuously learning and adapting to new challenges",
        ],
        "salaryRange": {
            "entry": "₹3,00,000 - ₹6,00,000 per year",
            "mid": "₹6,00,000 - ₹12,00,000 per year",
            "senior": "₹12,00,000 - ₹25,00,000 per year",
        },
        "careerPath": [
            "Year 1: Entry-level position",
            "Year 2: Junior specialist",
            "Year 3: Mid-level professional",
            "Year 5: Senior specialist or team lead",
            "Year 7-10: Manager or domain expert",
        ],
        "requiredSkills": [
            "Core technical skills for the role",
            "Communication and collaboration",
            "Problem-solving abilities",
            "Time management and organization",
            "Continuous learning mindset",
        ],
        "education": (
            "A bachelor's degree in a relevant field is typically required, though alternative "
            "education paths and certifications may be available."
        ),
        "jobMarket": (
            "This role has steady demand in the Indian job market with opportunities across various "
            "industries and company sizes."
        ),
    }


FALLBACK_BUILDERS: dict[ContentKind, FallbackBuilder] = {
    ContentKind.ROADMAP: roadmap_fallback,
    ContentKind.COURSE_SYLLABUS: course_syllabus_fallback,
    ContentKind.LECTURE: lecture_fallback,
    ContentKind.QUIZ: quiz_fallback,
    ContentKind.TASK: task_fallback,
    ContentKind.ASSIGNMENT: assignment_fallback,
    ContentKind.CHEAT_SHEET: cheat_sheet_fallback,
    ContentKind.RECOMMENDATIONS: recommendations_fallback,
    ContentKind.ROLE_DEEP_DIVE: role_deep_dive_fallback,
}


def get_fallback(kind: ContentKind, context: Mapping[str, str] | None = None) -> ValidatedContent:
    """
    Build the static payload for ``kind``.

    Payloads are wrapped with ``model_construct``. No validation runs here.
    """
    kind = ContentKind(kind)
    payload = FALLBACK_BUILDERS[kind](context or {})
    if kind is ContentKind.ROADMAP:
        payload["roadmap"] = [RoadmapUnit.model_construct(**unit) for unit in payload["roadmap"]]
    return CONTENT_MODELS[kind].model_construct(**payload)
