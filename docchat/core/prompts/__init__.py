"""
Prompt template store and composite prompt builders.

Exports:
  - PromptTemplateStore: Lock-guarded name -> template mapping
  - render_template, estimate_token_count: Pure rendering helpers
  - FALLBACK_PROMPT, DEFAULT_TEMPLATES: Built-in prompt text
  - build_* functions: Composite prompts fed with Document records

Dependencies: None (pure domain layer)
System role: Prompt assembly for chat and analysis flows
"""

from docchat.core.prompts.builders import (
    COMPARISON_CONTENT_LIMIT,
    DOCUMENT_CHAT_CONTENT_LIMIT,
    build_comparison_prompt,
    build_context_validation_prompt,
    build_document_chat_prompt,
    build_search_enhancement_prompt,
    format_comparison_block,
    format_document_context,
)
from docchat.core.prompts.template_store import (
    PromptTemplateStore,
    estimate_token_count,
    render_template,
)
from docchat.core.prompts.templates import DEFAULT_TEMPLATES, FALLBACK_PROMPT

__all__ = [
    "PromptTemplateStore",
    "render_template",
    "estimate_token_count",
    "DEFAULT_TEMPLATES",
    "FALLBACK_PROMPT",
    "DOCUMENT_CHAT_CONTENT_LIMIT",
    "COMPARISON_CONTENT_LIMIT",
    "build_document_chat_prompt",
    "build_comparison_prompt",
    "build_search_enhancement_prompt",
    "build_context_validation_prompt",
    "format_document_context",
    "format_comparison_block",
]
