"""Annotation API routes.

Exposes the annotators, the issue highlighter and the heuristic analyzer
as JSON endpoints. Invalid grammar patterns propagate as PatternError and
are turned into 422 responses by the application's exception handler.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from textmark.api.deps import ensure_text_length, get_app_settings, get_component_factory
from textmark.api.schemas import (
    AISentenceAnnotationRequest,
    AISentenceAnnotationResponse,
    AnalysisResponse,
    AnalyzeRequest,
    AnnotationResponse,
    GrammarAnnotationRequest,
    IssueHighlightRequest,
)
from textmark.core.config import Settings
from textmark.core.factory import ComponentFactory
from textmark.interfaces.annotator import AnnotationError
from textmark.strategies.annotators.ai_sentence import split_sentences

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/annotations", tags=["annotations"])


@router.post(
    "/grammar",
    response_model=AnnotationResponse,
    status_code=status.HTTP_200_OK,
)
async def annotate_grammar(
    body: GrammarAnnotationRequest,
    settings: Settings = Depends(get_app_settings),
    factory: ComponentFactory = Depends(get_component_factory),
) -> AnnotationResponse:
    """Overlay grammar suggestions onto a document.

    Findings are applied in list order. In the default sequential mode a
    later pattern may match inside markup produced by an earlier one.

    Args:
        body: Text, findings and optional mode override.
        settings: Application settings.
        factory: Component factory.

    Returns:
        AnnotationResponse with the annotated text.

    Raises:
        PatternError: If a finding's pattern is invalid (422).
        HTTPException: If the text is too long or annotation fails.
    """
    try:
        ensure_text_length(body.text, settings)

        annotator = factory.get_grammar_annotator(body.mode)
        html = annotator.annotate(body.text, [f.to_finding() for f in body.findings])

        logger.info(
            f"Grammar annotation: {len(body.findings)} findings, "
            f"mode={body.mode or settings.grammar_mode}"
        )
        return AnnotationResponse(html=html)

    except (HTTPException, AnnotationError):
        raise
    except Exception as e:
        logger.error(f"Grammar annotation failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Grammar annotation failed: {str(e)}",
        ) from e


@router.post(
    "/ai-sentences",
    response_model=AISentenceAnnotationResponse,
    status_code=status.HTTP_200_OK,
)
async def annotate_ai_sentences(
    body: AISentenceAnnotationRequest,
    settings: Settings = Depends(get_app_settings),
    factory: ComponentFactory = Depends(get_component_factory),
) -> AISentenceAnnotationResponse:
    """Highlight sentences flagged as AI-generated.

    Missing findings and out-of-range indices pass through unannotated.
    """
    try:
        ensure_text_length(body.text, settings)

        findings = [f.to_finding() for f in body.findings] if body.findings else None
        html = factory.get_ai_annotator().annotate(body.text, findings)

        return AISentenceAnnotationResponse(
            html=html,
            sentence_count=len(split_sentences(body.text)),
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"AI sentence annotation failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"AI sentence annotation failed: {str(e)}",
        ) from e


@router.post(
    "/issues",
    response_model=AnnotationResponse,
    status_code=status.HTTP_200_OK,
)
async def highlight_issues(
    body: IssueHighlightRequest,
    settings: Settings = Depends(get_app_settings),
    factory: ComponentFactory = Depends(get_component_factory),
) -> AnnotationResponse:
    """Render token and range issues as escaped HTML."""
    try:
        ensure_text_length(body.text, settings)

        html = factory.get_issue_highlighter().highlight(
            body.text, [issue.to_issue() for issue in body.issues]
        )
        return AnnotationResponse(html=html)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Issue highlighting failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Issue highlighting failed: {str(e)}",
        ) from e


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    status_code=status.HTTP_200_OK,
)
async def analyze_text(
    body: AnalyzeRequest,
    settings: Settings = Depends(get_app_settings),
    factory: ComponentFactory = Depends(get_component_factory),
) -> AnalysisResponse:
    """Run the offline heuristic analyzer.

    The returned findings can be passed unchanged to the grammar and AI
    sentence endpoints.
    """
    try:
        ensure_text_length(body.text, settings)

        report = factory.get_analyzer().analyze(body.text)
        return AnalysisResponse.from_report(report)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Analysis failed: {str(e)}",
        ) from e
