from fastapi import APIRouter, Query, Request

from api.dependencies.rate_limits import get_limiter
from infrastructure.i18n import Locale, resolve_locale, switch_locale
from infrastructure.services import TranslatorDep

router = APIRouter(prefix="/i18n", tags=["i18n"])
limiter = get_limiter()


# Language switcher target. Declared before /{locale} so "switch" is not read as a locale.
@router.get("/switch")
def get_switch_path(
    path: str = Query(..., description="Current path, with or without locale"),
    target: Locale = Query(..., description="Locale to switch to"),
):
    """Same page in another locale."""
    return {"path": switch_locale(path, target)}


# Translation table for client-side rendering. Unknown locales get the default table.
@router.get("/{locale}")
@limiter.limit("60/minute")
def get_messages(
    request: Request,  # pylint: disable=unused-argument
    locale: str,
    translator: TranslatorDep,
):
    """Translation table of a locale."""
    resolved = resolve_locale({"locale": locale})
    dictionary = translator.get_dictionary(resolved)
    return {"locale": dictionary.locale.value, "messages": dictionary.to_dict()}
