"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gh_analyzer.interface.dependencies import get_use_case
from gh_analyzer.interface.schemas import AnalyzeRequest, AnalyzeResponse
from gh_analyzer.services.analyze_repo import AnalyzeRepoUseCase

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={
        401: {"description": "GitHub credentials rejected"},
        404: {"description": "Repository not found"},
        422: {"description": "Invalid repository reference or filename"},
        429: {"description": "GitHub API rate limit exceeded"},
        502: {"description": "GitHub API unreachable or returned an error"},
    },
)
async def analyze(
    body: AnalyzeRequest,
    use_case: AnalyzeRepoUseCase = Depends(get_use_case),
) -> AnalyzeResponse:
    """Summarise a GitHub repository's metadata, languages and key files."""
    summary = await use_case.execute(body.repo, extra_files=body.extra_files)
    return AnalyzeResponse.from_summary(summary)
