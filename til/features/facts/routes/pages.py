"""Browser page route handlers.

The page is rendered on the server from the visitor's session state. Every
interaction is a plain link or form post; posts mutate the session and
redirect back to the page (post/redirect/get).
"""

from fastapi import APIRouter, Depends, Form, HTTPException, Path, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from til.core.settings import get_settings
from til.features.facts.categories import parse_category_filter
from til.features.facts.dependencies import get_session_registry, get_session_use_cases
from til.features.facts.models import VoteKey
from til.features.facts.rendering import render_page
from til.features.facts.state import FactsSession, SessionRegistry, SessionUseCases


async def get_facts_session(
    request: Request,
    registry: SessionRegistry = Depends(get_session_registry),
    use_cases: SessionUseCases = Depends(get_session_use_cases),
) -> FactsSession:
    """Resolve the visitor's session from its cookie, starting one if needed."""
    session_id = request.cookies.get(get_settings().session_cookie_name)
    return registry.get_or_create(session_id, use_cases)


def _with_session_cookie(response: Response, session: FactsSession) -> Response:
    response.set_cookie(
        key=get_settings().session_cookie_name,
        value=session.session_id,
        httponly=True,
        samesite="lax",
    )
    return response


def _back_to_page(session: FactsSession) -> Response:
    return _with_session_cookie(
        RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER), session
    )


router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    category: str | None = None,
    session: FactsSession = Depends(get_facts_session),
) -> Response:
    """Render the fact list, applying a category selection when given."""
    if category is None:
        await session.collection.mount()
    else:
        try:
            selected = parse_category_filter(category)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        await session.collection.select_category(selected)

    html = render_page(session, title=get_settings().app_name)
    return _with_session_cookie(HTMLResponse(content=html), session)


@router.post("/form/toggle")
async def toggle_form(session: FactsSession = Depends(get_facts_session)) -> Response:
    """Open or close the submission form."""
    session.form.toggle()
    return _back_to_page(session)


@router.post("/facts")
async def submit_fact(
    text: str = Form(default=""),
    source: str = Form(default=""),
    category: str = Form(default=""),
    session: FactsSession = Depends(get_facts_session),
) -> Response:
    """Submit the drafted fact.

    Invalid drafts and failed inserts keep the form open with what was typed.
    """
    session.form.update_draft(text=text, source=source, category=category)
    await session.form.submit()
    return _back_to_page(session)


@router.post("/facts/{fact_id}/votes/{vote}")
async def cast_vote_on_fact(
    fact_id: int = Path(..., description="The fact's identifier"),
    vote: VoteKey = Path(..., description="Counter to increment"),
    session: FactsSession = Depends(get_facts_session),
) -> Response:
    """Cast a vote on a fact shown in the session's list."""
    await session.vote_on(fact_id, vote)
    return _back_to_page(session)
