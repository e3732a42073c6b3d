"""Supported language API routes."""

from fastapi import APIRouter, HTTPException

from healthcare_translator.api.dependencies import TranslationServiceDep
from healthcare_translator.core.languages import SupportedLanguage

router = APIRouter()


@router.get("/languages")
async def list_languages(service: TranslationServiceDep) -> list[SupportedLanguage]:
    """List supported languages in display order."""
    return list(service.list_languages())


@router.get("/languages/{code}")
async def get_language(code: str, service: TranslationServiceDep) -> SupportedLanguage:
    """Get a single supported language by code."""
    language = service.registry.get(code)
    if language is None:
        raise HTTPException(status_code=404, detail=f"Unsupported language: {code}")
    return language
