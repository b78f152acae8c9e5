"""
Prompt template schemas.

Dependencies: pydantic
System role: Prompt template API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class TemplateListResponse(BaseModel):
    """Registered template names."""

    templates: list[str]


class RenderTemplateRequest(BaseModel):
    """Parameters substituted into a template."""

    params: dict[str, str] | None = None


class RenderTemplateResponse(BaseModel):
    """Rendered template with its rough token estimate."""

    template_name: str
    rendered: str
    estimated_tokens: int
    params: dict[str, str] = Field(default_factory=dict)


class UpdateTemplateRequest(BaseModel):
    """Replacement template body."""

    model_config = ConfigDict(populate_by_name=True)

    new_template: str = Field(alias="newTemplate")


class UpdateTemplateResponse(BaseModel):
    template_name: str
    message: str = "Template updated successfully"


class TemplateTestRequest(BaseModel):
    """Template name and parameters for a dry run."""

    model_config = ConfigDict(populate_by_name=True)

    template_name: str = Field(alias="templateName")
    parameters: dict[str, str] | None = None


class TemplateTestResponse(BaseModel):
    template_name: str
    rendered: str
    estimated_tokens: int
    status: str = "Success"
