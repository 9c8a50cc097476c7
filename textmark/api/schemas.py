"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization. Finding models
accept and emit the wire names used by the analysis services (`i`,
`isAI`, `charStart`, `charEnd`).
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from textmark.interfaces.analyzer import AnalysisReport
from textmark.interfaces.annotator import AISentenceFinding, GrammarFinding
from textmark.interfaces.highlighter import Issue


# =============================================================================
# Finding Schemas
# =============================================================================


class GrammarFindingSchema(BaseModel):
    """A grammar suggestion matched by a case-insensitive pattern."""

    error: str = Field(description="Search pattern; regex metacharacters are interpreted")
    suggestion: str = Field(default="", description="Tooltip text for every match")

    def to_finding(self) -> GrammarFinding:
        return GrammarFinding(error=self.error, suggestion=self.suggestion)


class AISentenceFindingSchema(BaseModel):
    """A per-sentence AI-origin flag."""

    model_config = ConfigDict(populate_by_name=True)

    index: int = Field(alias="i", description="Zero-based sentence index")
    is_ai: bool = Field(default=False, alias="isAI")
    score: float = Field(default=0, description="Likelihood shown in the tooltip")

    def to_finding(self) -> AISentenceFinding:
        return AISentenceFinding(index=self.index, is_ai=self.is_ai, score=self.score)


class IssueSchema(BaseModel):
    """A token-indexed or character-range issue."""

    model_config = ConfigDict(populate_by_name=True)

    type: str | None = None
    index: int | None = Field(default=None, description="Token index for token issues")
    suggestions: list[str] = Field(default_factory=list)
    message: str | None = None
    char_start: float | None = Field(default=None, alias="charStart")
    char_end: float | None = Field(default=None, alias="charEnd")
    words: int | None = None

    def to_issue(self) -> Issue:
        return Issue(
            type=self.type,
            index=self.index,
            suggestions=tuple(self.suggestions),
            message=self.message,
            char_start=self.char_start,
            char_end=self.char_end,
            words=self.words,
        )


# =============================================================================
# Annotation Schemas
# =============================================================================


class GrammarAnnotationRequest(BaseModel):
    """Request schema for grammar annotation."""

    text: str = Field(description="Raw document text")
    findings: list[GrammarFindingSchema] = Field(default_factory=list)
    mode: Literal["sequential", "safe"] | None = Field(
        default=None,
        description="Override the configured grammar mode for this request",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "text": "the foo is here",
                "findings": [{"error": "foo", "suggestion": "use bar"}],
            }
        }


class AISentenceAnnotationRequest(BaseModel):
    """Request schema for AI sentence annotation."""

    text: str = Field(description="Raw document text")
    findings: list[AISentenceFindingSchema] | None = Field(default=None)


class IssueHighlightRequest(BaseModel):
    """Request schema for issue highlighting."""

    text: str = Field(description="Raw document text")
    issues: list[IssueSchema] = Field(default_factory=list)


class AnalyzeRequest(BaseModel):
    """Request schema for heuristic analysis."""

    text: str = Field(description="Raw document text")


class AnnotationResponse(BaseModel):
    """Annotated text."""

    html: str


class AISentenceAnnotationResponse(AnnotationResponse):
    """Annotated text plus the number of sentences found."""

    sentence_count: int


# =============================================================================
# Analysis Schemas
# =============================================================================


class SentenceAnalysisResponse(BaseModel):
    """Per-sentence analysis result."""

    sentence: str
    label: str
    grammar: list[str]
    phrase_similarity: float
    duplicate: bool


class AnalysisResponse(BaseModel):
    """Document analysis report."""

    originality: int
    grammar_score: int
    clarity: int
    ai_score: int
    counts: dict[str, int]
    total: int
    sentences: list[SentenceAnalysisResponse]
    grammar_findings: list[GrammarFindingSchema]
    ai_findings: list[AISentenceFindingSchema]

    @classmethod
    def from_report(cls, report: AnalysisReport) -> "AnalysisResponse":
        return cls(
            originality=report.originality,
            grammar_score=report.grammar_score,
            clarity=report.clarity,
            ai_score=report.ai_score,
            counts=dict(report.counts),
            total=report.total,
            sentences=[
                SentenceAnalysisResponse(
                    sentence=s.sentence,
                    label=s.label.value,
                    grammar=list(s.grammar),
                    phrase_similarity=s.phrase_similarity,
                    duplicate=s.duplicate,
                )
                for s in report.sentences
            ],
            grammar_findings=[
                GrammarFindingSchema(error=f.error, suggestion=f.suggestion)
                for f in report.grammar_findings
            ],
            ai_findings=[
                AISentenceFindingSchema(index=f.index, is_ai=f.is_ai, score=f.score)
                for f in report.ai_findings
            ],
        )


# =============================================================================
# Error Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(description="Error message")
    error_code: str | None = Field(default=None, description="Application-specific error code")
    extra: dict[str, Any] | None = Field(default=None, description="Additional error context")
