"""
Prompt template API endpoints.

Routes:
- GET /prompts/templates - Registered template names
- POST /prompts/templates/{name}/render - Render with parameters
- PUT /prompts/templates/{name} - Insert or overwrite a template
- POST /prompts/test - Dry-run render with status

Dependencies: docchat.core.prompts, docchat.models.prompt
System role: Prompt template management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from docchat.api.deps import get_template_store
from docchat.core.prompts import PromptTemplateStore
from docchat.models.prompt import (
    RenderTemplateRequest,
    RenderTemplateResponse,
    TemplateListResponse,
    TemplateTestRequest,
    TemplateTestResponse,
    UpdateTemplateRequest,
    UpdateTemplateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prompts", tags=["prompts"])


@router.get("/templates", response_model=TemplateListResponse)
async def list_templates(
    store: PromptTemplateStore = Depends(get_template_store),
) -> TemplateListResponse:
    return TemplateListResponse(templates=store.list())


@router.post("/templates/{template_name}/render", response_model=RenderTemplateResponse)
async def render_template(
    template_name: str,
    request: RenderTemplateRequest | None = None,
    store: PromptTemplateStore = Depends(get_template_store),
) -> RenderTemplateResponse:
    """
    Render a template.

    Unknown template names render to the generic fallback prompt.
    """
    params = (request.params if request else None) or {}
    try:
        rendered, tokens = store.estimate_tokens(template_name, params)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Error rendering template: {str(e)}",
        )
    return RenderTemplateResponse(
        template_name=template_name,
        rendered=rendered,
        estimated_tokens=tokens,
        params=params,
    )


@router.put("/templates/{template_name}", response_model=UpdateTemplateResponse)
async def update_template(
    template_name: str,
    request: UpdateTemplateRequest,
    store: PromptTemplateStore = Depends(get_template_store),
) -> UpdateTemplateResponse:
    """Overwrite (or create) a template. No placeholder validation."""
    store.update(template_name, request.new_template)
    return UpdateTemplateResponse(template_name=template_name)


@router.post("/test", response_model=TemplateTestResponse)
async def test_template(
    request: TemplateTestRequest,
    store: PromptTemplateStore = Depends(get_template_store),
) -> TemplateTestResponse:
    """
    Render a template and report a rough token estimate.

    Raises:
        HTTPException(400): Rendering failed
    """
    try:
        rendered, tokens = store.estimate_tokens(request.template_name, request.parameters)
    except Exception as e:
        logger.warning(f"{__name__}:test_template - {type(e).__name__}: {e}")
        raise HTTPException(status_code=400, detail=f"Error testing template: {str(e)}")
    return TemplateTestResponse(
        template_name=request.template_name,
        rendered=rendered,
        estimated_tokens=tokens,
    )
