"""Search keyword extraction for repository discovery."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple, Union


class ProjectType(str, Enum):
    """Project archetype selected during onboarding."""

    QUANTUM_OS = "quantum-os"
    BOOK_WRITER = "book-writer"
    AI_CHATBOT = "ai-chatbot"
    E_COMMERCE = "e-commerce"
    DASHBOARD = "dashboard"
    CUSTOM = "custom"


PROJECT_TYPE_KEYWORDS: Dict[ProjectType, Tuple[str, ...]] = {
    ProjectType.QUANTUM_OS: (
        "quantum computing",
        "quantum simulation",
        "quantum circuits",
        "Qiskit",
        "quantum algorithms",
        "quantum machine learning",
        "ibm quantum",
        "quantum development",
    ),
    ProjectType.BOOK_WRITER: (
        "writing assistant",
        "book generation",
        "AI writing",
        "text generation",
        "editor",
        "markdown",
        "document processing",
        "content creation",
    ),
    ProjectType.AI_CHATBOT: (
        "chatbot",
        "AI assistant",
        "conversational AI",
        "LLM",
        "language model",
        "chat interface",
        "RAG",
    ),
    ProjectType.E_COMMERCE: (
        "ecommerce",
        "shopify",
        "stripe",
        "payment",
        "inventory",
        "product catalog",
        "shopping cart",
    ),
    ProjectType.DASHBOARD: (
        "analytics",
        "dashboard",
        "charts",
        "visualization",
        "data visualization",
        "metrics",
        "reporting",
    ),
    ProjectType.CUSTOM: (),
}

GENERIC_KEYWORDS: Tuple[str, ...] = (
    "nextjs",
    "fullstack",
    "typescript",
    "react",
    "tailwind",
    "prisma",
)

QUERY_WORD_LIMIT = 5
QUERY_WORD_MIN_LENGTH = 4


def parse_project_type(value: Union[str, ProjectType, None]) -> Optional[ProjectType]:
    """Map a raw project type tag to ``ProjectType``; unknown tags give None."""
    if value is None or isinstance(value, ProjectType):
        return value
    try:
        return ProjectType(value.strip().lower())
    except ValueError:
        return None


def project_keywords(project_type: Union[str, ProjectType, None]) -> Tuple[str, ...]:
    parsed = parse_project_type(project_type)
    if parsed is None:
        return ()
    return PROJECT_TYPE_KEYWORDS[parsed]


def query_keywords(query: str) -> List[str]:
    """First five lower-cased words of ``query`` longer than three characters."""
    words = [w for w in query.lower().split() if len(w) >= QUERY_WORD_MIN_LENGTH]
    return words[:QUERY_WORD_LIMIT]


def build_keywords(
    query: str,
    project_type: Union[str, ProjectType, None],
    tech_stack: Iterable[str],
) -> List[str]:
    """Build the deduplicated search keyword list in first-seen order.

    Order: tech stack, project-type bundle, query words, generic bundle.
    """
    candidates: List[str] = []
    candidates.extend(tech_stack)
    candidates.extend(project_keywords(project_type))
    candidates.extend(query_keywords(query or ""))
    candidates.extend(GENERIC_KEYWORDS)

    seen = set()
    keywords: List[str] = []
    for keyword in candidates:
        if not keyword or keyword in seen:
            continue
        seen.add(keyword)
        keywords.append(keyword)
    return keywords
